"""Storage and backup operations."""
from __future__ import annotations

from typing import Any, Dict

from . import definitions as d
from .registry import Operation, OperationContext, schema, task_ack, to_json


def _content_path(args: Dict[str, Any]) -> str:
    return f"/nodes/{args['node']}/storage/{args['storage']}/content"


def list_storage(ctx: OperationContext, args: Dict[str, Any]) -> str:
    if args.get("node"):
        return to_json(ctx.client.get(f"/nodes/{args['node']}/storage"))
    return to_json(ctx.client.get("/storage"))


def get_storage_content(ctx: OperationContext, args: Dict[str, Any]) -> str:
    params: Dict[str, Any] = {}
    if args.get("content"):
        params["content"] = args["content"]
    return to_json(ctx.client.get(_content_path(args), params))


def list_backups(ctx: OperationContext, args: Dict[str, Any]) -> str:
    params: Dict[str, Any] = {"content": "backup"}
    if args.get("vmid"):
        params["vmid"] = args["vmid"]
    return to_json(ctx.client.get(_content_path(args), params))


def create_backup(ctx: OperationContext, args: Dict[str, Any]) -> str:
    data: Dict[str, Any] = {
        "vmid": args["vmid"],
        "storage": args["storage"],
        "mode": args.get("mode") or "snapshot",
    }
    if args.get("compress"):
        data["compress"] = args["compress"]
    upid = ctx.client.post(f"/nodes/{args['node']}/vzdump", data)
    return task_ack(f"Backup of {args['vmid']}", upid)


OPERATIONS = [
    Operation(
        "pve_list_storage",
        d.LIST_STORAGE_DESC,
        list_storage,
        schema({"node": {"type": "string", "description": "Optional: filter by node"}}),
    ),
    Operation(
        "pve_get_storage_content",
        d.GET_STORAGE_CONTENT_DESC,
        get_storage_content,
        schema(
            {
                "node": d.NODE,
                "storage": {"type": "string", "description": "Storage pool name"},
                "content": {
                    "type": "string",
                    "description": "Content type filter (images, iso, backup, etc.)",
                },
            },
            ["node", "storage"],
        ),
    ),
    Operation(
        "pve_list_backups",
        d.LIST_BACKUPS_DESC,
        list_backups,
        schema(
            {
                "node": d.NODE,
                "storage": {"type": "string", "description": "Backup storage"},
                "vmid": {"type": "number", "description": "Optional: filter by VM ID"},
            },
            ["node", "storage"],
        ),
    ),
    Operation(
        "pve_create_backup",
        d.CREATE_BACKUP_DESC,
        create_backup,
        schema(
            {
                "node": d.NODE,
                "vmid": {"type": "number", "description": "VM/Container ID"},
                "storage": {"type": "string", "description": "Backup storage"},
                "mode": {"type": "string", "enum": d.BACKUP_MODES, "description": "Backup mode"},
                "compress": {
                    "type": "string",
                    "enum": d.BACKUP_COMPRESSION,
                    "description": "Compression",
                },
            },
            ["node", "vmid", "storage"],
        ),
    ),
]
