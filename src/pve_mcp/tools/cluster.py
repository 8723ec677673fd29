"""Cluster and node operations."""
from __future__ import annotations

from typing import Any, Dict, Optional

from ..formatting import format_bytes, format_uptime
from . import definitions as d
from .registry import Operation, OperationContext, schema, to_json


def get_cluster_status(ctx: OperationContext, args: Dict[str, Any]) -> str:
    return to_json(ctx.client.get("/cluster/status"))


def list_nodes(ctx: OperationContext, args: Dict[str, Any]) -> str:
    return to_json(ctx.client.get("/nodes"))


def get_node_status(ctx: OperationContext, args: Dict[str, Any]) -> str:
    return to_json(ctx.client.get(f"/nodes/{args['node']}/status"))


def _number(value: Any) -> Optional[float]:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return value


def _section(data: Any, key: str) -> Dict[str, Any]:
    section = data.get(key) if isinstance(data, dict) else None
    return section if isinstance(section, dict) else {}


def _percent(value: Optional[float]) -> Optional[str]:
    return None if value is None else f"{value * 100:.2f}%"


def _bytes(value: Any) -> Optional[str]:
    value = _number(value)
    return None if value is None else format_bytes(value)


def _compact(mapping: Dict[str, Any]) -> Dict[str, Any]:
    return {key: value for key, value in mapping.items() if value is not None}


def summarize_node_status(data: Any) -> Dict[str, Any]:
    """Derive a readable resource report from ``/nodes/{node}/status``.

    Every sub-field is optional in the API response; anything missing or
    non-numeric is left out of the report instead of failing.
    """
    status = data if isinstance(data, dict) else {}
    cpuinfo = _section(status, "cpuinfo")
    memory = _section(status, "memory")
    swap = _section(status, "swap")

    mem_used = _number(memory.get("used"))
    mem_total = _number(memory.get("total"))
    mem_ratio = mem_used / mem_total if mem_used is not None and mem_total else None
    uptime = _number(status.get("uptime"))

    return _compact(
        {
            "cpu": _compact(
                {
                    "usage": _percent(_number(status.get("cpu"))),
                    "cores": cpuinfo.get("cores"),
                    "model": cpuinfo.get("model"),
                }
            ),
            "memory": _compact(
                {
                    "used": _bytes(mem_used),
                    "total": _bytes(mem_total),
                    "free": _bytes(memory.get("free")),
                    "usagePercent": _percent(mem_ratio),
                }
            ),
            "swap": _compact({"used": _bytes(swap.get("used")), "total": _bytes(swap.get("total"))}),
            "uptime": None if uptime is None else format_uptime(uptime),
            "loadavg": status.get("loadavg"),
        }
    )


def get_node_resources(ctx: OperationContext, args: Dict[str, Any]) -> str:
    data = ctx.client.get(f"/nodes/{args['node']}/status")
    return to_json(summarize_node_status(data))


OPERATIONS = [
    Operation("pve_get_cluster_status", d.GET_CLUSTER_STATUS_DESC, get_cluster_status),
    Operation("pve_list_nodes", d.LIST_NODES_DESC, list_nodes),
    Operation(
        "pve_get_node_status",
        d.GET_NODE_STATUS_DESC,
        get_node_status,
        schema({"node": d.NODE}, required=["node"]),
    ),
    Operation(
        "pve_get_node_resources",
        d.GET_NODE_RESOURCES_DESC,
        get_node_resources,
        schema({"node": d.NODE}, required=["node"]),
    ),
]
