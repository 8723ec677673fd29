"""
MCP server exposing the Proxmox operation catalog over stdio.

The server only adapts the protocol: tool listing comes straight from the
registry, and each tool call is handed to :meth:`Dispatcher.call`, which
never raises. Error-flagged results are surfaced to the client as
``isError`` tool results.
"""
from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from typing import Any, Dict, List, Optional

import mcp.types as types
from dotenv import load_dotenv
from mcp.server import Server
from mcp.server.stdio import stdio_server

from .config.loader import load_config
from .config.models import Config
from .core.client import PveClient
from .core.logging import setup_logging
from .core.session import establish_session
from .exceptions import PveError
from .tools import Dispatcher, build_registry

SERVER_NAME = "proxmox-mcp"


class ToolCallFailed(PveError):
    """Carries an error-flagged result back through the MCP SDK."""


class PveMCPServer:
    """Binds a :class:`Dispatcher` to an MCP ``Server``."""

    def __init__(self, dispatcher: Dispatcher, logger: Optional[logging.Logger] = None) -> None:
        self.dispatcher = dispatcher
        self.logger = logger or logging.getLogger("pve-mcp.server")
        self.server = Server(SERVER_NAME)
        self._register_handlers()

    def _register_handlers(self) -> None:
        self.server.list_tools()(self.list_tools)
        self.server.call_tool()(self.call_tool)

    async def list_tools(self) -> List[types.Tool]:
        return [
            types.Tool(name=op.name, description=op.description, inputSchema=op.input_schema)
            for op in self.dispatcher.list_operations()
        ]

    async def call_tool(self, name: str, arguments: Optional[Dict[str, Any]]) -> List[types.TextContent]:
        self.logger.debug("Tool call %s", name)
        result = await asyncio.to_thread(self.dispatcher.call, name, arguments or {})
        if result.is_error:
            # The SDK turns handler exceptions into isError results.
            raise ToolCallFailed(result.text)
        return [types.TextContent(type="text", text=result.text)]

    async def run(self) -> None:
        async with stdio_server() as (read_stream, write_stream):
            self.logger.info("Proxmox MCP server running")
            await self.server.run(
                read_stream,
                write_stream,
                self.server.create_initialization_options(),
            )


def create_server(config: Config, logger: Optional[logging.Logger] = None) -> PveMCPServer:
    """Authenticate and wire the dispatcher. Raises on any startup failure."""
    context = establish_session(config.proxmox, config.auth)
    client = PveClient(context)
    dispatcher = Dispatcher(client, build_registry())
    return PveMCPServer(dispatcher, logger=logger)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Proxmox VE MCP server (stdio).")
    parser.add_argument(
        "--config",
        default=None,
        help="Optional JSON config; PROXMOX_* environment variables take precedence",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    load_dotenv()
    logger = logging.getLogger("pve-mcp.server")

    try:
        config = load_config(args.config)
        setup_logging(config.logging)
        server = create_server(config, logger=logger)
        logger.info("Proxmox authentication successful")
    except Exception as exc:
        logger.error("Failed to start Proxmox MCP server: %s", exc)
        return 1

    try:
        asyncio.run(server.run())
    except KeyboardInterrupt:
        logger.info("Proxmox MCP server stopped")
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
