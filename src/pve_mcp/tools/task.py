"""Task and node network operations."""
from __future__ import annotations

from typing import Any, Dict

from . import definitions as d
from .registry import Operation, OperationContext, schema, to_json


def list_tasks(ctx: OperationContext, args: Dict[str, Any]) -> str:
    params: Dict[str, Any] = {}
    if args.get("limit"):
        params["limit"] = args["limit"]
    return to_json(ctx.client.get(f"/nodes/{args['node']}/tasks", params))


def get_task_status(ctx: OperationContext, args: Dict[str, Any]) -> str:
    return to_json(ctx.client.get(f"/nodes/{args['node']}/tasks/{args['upid']}/status"))


def list_networks(ctx: OperationContext, args: Dict[str, Any]) -> str:
    return to_json(ctx.client.get(f"/nodes/{args['node']}/network"))


OPERATIONS = [
    Operation(
        "pve_list_tasks",
        d.LIST_TASKS_DESC,
        list_tasks,
        schema(
            {"node": d.NODE, "limit": {"type": "number", "description": "Max tasks to return"}},
            ["node"],
        ),
    ),
    Operation(
        "pve_get_task_status",
        d.GET_TASK_STATUS_DESC,
        get_task_status,
        schema(
            {"node": d.NODE, "upid": {"type": "string", "description": "Task UPID"}},
            ["node", "upid"],
        ),
    ),
    Operation(
        "pve_list_networks",
        d.LIST_NETWORKS_DESC,
        list_networks,
        schema({"node": d.NODE}, ["node"]),
    ),
]
