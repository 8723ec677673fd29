"""LXC container operations."""
from __future__ import annotations

from typing import Any, Dict

from . import definitions as d
from .registry import Operation, OperationContext, schema, task_ack, to_json

CT_ARGS = {"node": d.NODE, "vmid": d.CTID}
CT_REQUIRED = ["node", "vmid"]


def _ct_path(args: Dict[str, Any]) -> str:
    return f"/nodes/{args['node']}/lxc/{args['vmid']}"


def list_containers(ctx: OperationContext, args: Dict[str, Any]) -> str:
    if args.get("node"):
        return to_json(ctx.client.get(f"/nodes/{args['node']}/lxc"))
    return to_json(ctx.client.get("/cluster/resources", {"type": "lxc"}))


def get_container_status(ctx: OperationContext, args: Dict[str, Any]) -> str:
    return to_json(ctx.client.get(f"{_ct_path(args)}/status/current"))


def start_container(ctx: OperationContext, args: Dict[str, Any]) -> str:
    upid = ctx.client.post(f"{_ct_path(args)}/status/start")
    return task_ack(f"Container {args['vmid']} start", upid)


def stop_container(ctx: OperationContext, args: Dict[str, Any]) -> str:
    upid = ctx.client.post(f"{_ct_path(args)}/status/stop")
    return task_ack(f"Container {args['vmid']} stop", upid)


OPERATIONS = [
    Operation(
        "pve_list_containers",
        d.LIST_CONTAINERS_DESC,
        list_containers,
        schema({"node": {"type": "string", "description": "Optional: filter by node"}}),
    ),
    Operation(
        "pve_get_container_status",
        d.GET_CONTAINER_STATUS_DESC,
        get_container_status,
        schema(CT_ARGS, CT_REQUIRED),
    ),
    Operation("pve_start_container", d.START_CONTAINER_DESC, start_container, schema(CT_ARGS, CT_REQUIRED)),
    Operation("pve_stop_container", d.STOP_CONTAINER_DESC, stop_container, schema(CT_ARGS, CT_REQUIRED)),
]
