"""VM snapshot operations."""
from __future__ import annotations

from typing import Any, Dict

from . import definitions as d
from .registry import Operation, OperationContext, schema, task_ack, to_json

SNAP_ARGS = {"node": d.NODE, "vmid": d.VMID, "snapname": d.SNAPNAME}
SNAP_REQUIRED = ["node", "vmid", "snapname"]


def _snapshots_path(args: Dict[str, Any]) -> str:
    return f"/nodes/{args['node']}/qemu/{args['vmid']}/snapshot"


def list_snapshots(ctx: OperationContext, args: Dict[str, Any]) -> str:
    return to_json(ctx.client.get(_snapshots_path(args)))


def create_snapshot(ctx: OperationContext, args: Dict[str, Any]) -> str:
    data: Dict[str, Any] = {"snapname": args["snapname"]}
    if args.get("description"):
        data["description"] = args["description"]
    if args.get("vmstate"):
        data["vmstate"] = 1
    upid = ctx.client.post(_snapshots_path(args), data)
    return task_ack(f"Snapshot '{args['snapname']}' creation", upid)


def rollback_snapshot(ctx: OperationContext, args: Dict[str, Any]) -> str:
    upid = ctx.client.post(f"{_snapshots_path(args)}/{args['snapname']}/rollback")
    return task_ack(f"Rollback to '{args['snapname']}'", upid)


def delete_snapshot(ctx: OperationContext, args: Dict[str, Any]) -> str:
    upid = ctx.client.delete(f"{_snapshots_path(args)}/{args['snapname']}")
    return task_ack(f"Snapshot '{args['snapname']}' deletion", upid)


OPERATIONS = [
    Operation(
        "pve_list_snapshots",
        d.LIST_SNAPSHOTS_DESC,
        list_snapshots,
        schema({"node": d.NODE, "vmid": d.VMID}, ["node", "vmid"]),
    ),
    Operation(
        "pve_create_snapshot",
        d.CREATE_SNAPSHOT_DESC,
        create_snapshot,
        schema(
            {
                **SNAP_ARGS,
                "description": {"type": "string", "description": "Description"},
                "vmstate": {"type": "boolean", "description": "Include VM state (RAM)"},
            },
            SNAP_REQUIRED,
        ),
    ),
    Operation(
        "pve_rollback_snapshot",
        d.ROLLBACK_SNAPSHOT_DESC,
        rollback_snapshot,
        schema(SNAP_ARGS, SNAP_REQUIRED),
    ),
    Operation(
        "pve_delete_snapshot",
        d.DELETE_SNAPSHOT_DESC,
        delete_snapshot,
        schema(SNAP_ARGS, SNAP_REQUIRED),
    ),
]
