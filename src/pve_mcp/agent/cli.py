"""
CLI utility that exposes the operation catalog to scripts and agents.

It loads the same configuration as the MCP server, establishes a session and
runs a single operation, printing the text result:

    pve-mcp-agent operations
    pve-mcp-agent call pve_list_vms -p node=pve
    pve-mcp-agent call pve_stop_vm -p node=pve -p vmid=101 -p force=true
"""
from __future__ import annotations

import argparse
import json
import math
import os
import sys
from typing import Any, Dict, List, Optional

from dotenv import load_dotenv

from ..config.loader import CONFIG_ENV_VAR
from ..config.models import LoggingConfig
from ..core.logging import setup_logging
from ..tools import Operation
from .adapter import ProxmoxAgentAdapter


DECODED_TYPES = {
    "number": (int, float),
    "boolean": (bool,),
    "object": (dict,),
}


def parse_param(raw: str) -> tuple:
    """Split ``key=value``; the value stays a string until typed by the schema."""
    key, sep, value = raw.partition("=")
    if not sep or not key:
        raise argparse.ArgumentTypeError(f"Expected key=value, got {raw!r}")
    return key, value


def _decode(value: str, prop_type: Optional[str]) -> Any:
    expected = DECODED_TYPES.get(prop_type or "")
    if expected is None:
        return value
    try:
        decoded = json.loads(value)
    except ValueError:
        return value
    if isinstance(decoded, bool) and bool not in expected:
        return value
    if not isinstance(decoded, expected):
        return value
    if isinstance(decoded, float) and not math.isfinite(decoded):
        return value
    return decoded


def coerce_params(operation: Optional[Operation], params: Dict[str, str]) -> Dict[str, Any]:
    """Decode values whose schema type is number, boolean or object."""
    properties = operation.properties if operation is not None else {}
    return {
        key: _decode(value, properties.get(key, {}).get("type"))
        for key, value in params.items()
    }


def find_operation(adapter: ProxmoxAgentAdapter, name: str) -> Optional[Operation]:
    return next((op for op in adapter.list_operations() if op.name == name), None)


def cmd_operations(adapter: ProxmoxAgentAdapter) -> int:
    for operation in adapter.list_operations():
        print(f"{operation.name}\t{operation.description.splitlines()[0]}")
    return 0


def cmd_call(adapter: ProxmoxAgentAdapter, name: str, params: Dict[str, Any]) -> int:
    result = adapter.call(name, **params)
    stream = sys.stderr if result.is_error else sys.stdout
    print(result.text, file=stream)
    return 1 if result.is_error else 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="pve-mcp agent helper. Runs catalog operations with the MCP config."
    )
    parser.add_argument(
        "--config",
        default=os.getenv(CONFIG_ENV_VAR),
        help="Path to JSON config (default: $%s, then environment only)" % CONFIG_ENV_VAR,
    )
    parser.add_argument("--log-level", default="WARNING", help="Log level (default: %(default)s)")

    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("operations", help="List available operations")
    call = sub.add_parser("call", help="Invoke one operation")
    call.add_argument("name", help="Operation name, e.g. pve_list_vms")
    call.add_argument(
        "-p",
        "--param",
        dest="params",
        action="append",
        type=parse_param,
        default=[],
        metavar="KEY=VALUE",
        help="Operation parameter (repeatable)",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    load_dotenv()
    setup_logging(LoggingConfig(level=args.log_level))

    try:
        adapter = ProxmoxAgentAdapter(config_path=args.config)
    except Exception as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if args.command == "operations":
        return cmd_operations(adapter)
    if args.command == "call":
        params = coerce_params(find_operation(adapter, args.name), dict(args.params))
        return cmd_call(adapter, args.name, params)

    parser.error(f"Unsupported command: {args.command}")
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
