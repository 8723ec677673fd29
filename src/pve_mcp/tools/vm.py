"""QEMU virtual machine operations."""
from __future__ import annotations

from typing import Any, Dict

from . import definitions as d
from .registry import Operation, OperationContext, schema, task_ack, to_json

VM_ARGS = {"node": d.NODE, "vmid": d.VMID}
VM_REQUIRED = ["node", "vmid"]


def _vm_path(args: Dict[str, Any]) -> str:
    return f"/nodes/{args['node']}/qemu/{args['vmid']}"


def list_vms(ctx: OperationContext, args: Dict[str, Any]) -> str:
    if args.get("node"):
        return to_json(ctx.client.get(f"/nodes/{args['node']}/qemu"))
    return to_json(ctx.client.get("/cluster/resources", {"type": "vm"}))


def get_vm_status(ctx: OperationContext, args: Dict[str, Any]) -> str:
    return to_json(ctx.client.get(f"{_vm_path(args)}/status/current"))


def get_vm_config(ctx: OperationContext, args: Dict[str, Any]) -> str:
    return to_json(ctx.client.get(f"{_vm_path(args)}/config"))


def _power_action(action: str):
    def handler(ctx: OperationContext, args: Dict[str, Any]) -> str:
        upid = ctx.client.post(f"{_vm_path(args)}/status/{action}")
        return task_ack(f"VM {args['vmid']} {action}", upid)

    handler.__name__ = f"{action}_vm"
    return handler


def stop_vm(ctx: OperationContext, args: Dict[str, Any]) -> str:
    action = "stop" if args.get("force") else "shutdown"
    upid = ctx.client.post(f"{_vm_path(args)}/status/{action}")
    return task_ack(f"VM {args['vmid']} {action}", upid)


def clone_vm(ctx: OperationContext, args: Dict[str, Any]) -> str:
    data: Dict[str, Any] = {"newid": args["newid"]}
    if args.get("name"):
        data["name"] = args["name"]
    if args.get("full"):
        data["full"] = 1
    if args.get("target"):
        data["target"] = args["target"]
    upid = ctx.client.post(f"{_vm_path(args)}/clone", data)
    return task_ack(f"VM {args['vmid']} clone to {args['newid']}", upid)


def delete_vm(ctx: OperationContext, args: Dict[str, Any]) -> str:
    params: Dict[str, Any] = {}
    if args.get("purge"):
        params["purge"] = 1
    upid = ctx.client.delete(_vm_path(args), params)
    return task_ack(f"VM {args['vmid']} deletion", upid)


def migrate_vm(ctx: OperationContext, args: Dict[str, Any]) -> str:
    data: Dict[str, Any] = {"target": args["target"]}
    if args.get("online"):
        data["online"] = 1
    upid = ctx.client.post(f"{_vm_path(args)}/migrate", data)
    return task_ack(f"VM {args['vmid']} migration to {args['target']}", upid)


OPERATIONS = [
    Operation(
        "pve_list_vms",
        d.LIST_VMS_DESC,
        list_vms,
        schema({"node": {"type": "string", "description": "Optional: filter by node name"}}),
    ),
    Operation("pve_get_vm_status", d.GET_VM_STATUS_DESC, get_vm_status, schema(VM_ARGS, VM_REQUIRED)),
    Operation("pve_get_vm_config", d.GET_VM_CONFIG_DESC, get_vm_config, schema(VM_ARGS, VM_REQUIRED)),
    Operation("pve_start_vm", d.START_VM_DESC, _power_action("start"), schema(VM_ARGS, VM_REQUIRED)),
    Operation(
        "pve_stop_vm",
        d.STOP_VM_DESC,
        stop_vm,
        schema(
            {**VM_ARGS, "force": {"type": "boolean", "description": "Force stop (hard shutdown)"}},
            VM_REQUIRED,
        ),
    ),
    Operation("pve_reboot_vm", d.REBOOT_VM_DESC, _power_action("reboot"), schema(VM_ARGS, VM_REQUIRED)),
    Operation("pve_suspend_vm", d.SUSPEND_VM_DESC, _power_action("suspend"), schema(VM_ARGS, VM_REQUIRED)),
    Operation("pve_resume_vm", d.RESUME_VM_DESC, _power_action("resume"), schema(VM_ARGS, VM_REQUIRED)),
    Operation(
        "pve_clone_vm",
        d.CLONE_VM_DESC,
        clone_vm,
        schema(
            {
                "node": {"type": "string", "description": "Source node name"},
                "vmid": {"type": "number", "description": "Source VM ID"},
                "newid": {"type": "number", "description": "New VM ID"},
                "name": {"type": "string", "description": "New VM name"},
                "full": {"type": "boolean", "description": "Full clone (not linked)"},
                "target": {"type": "string", "description": "Target node (optional)"},
            },
            ["node", "vmid", "newid"],
        ),
    ),
    Operation(
        "pve_delete_vm",
        d.DELETE_VM_DESC,
        delete_vm,
        schema(
            {**VM_ARGS, "purge": {"type": "boolean", "description": "Remove from backup jobs too"}},
            VM_REQUIRED,
        ),
    ),
    Operation(
        "pve_migrate_vm",
        d.MIGRATE_VM_DESC,
        migrate_vm,
        schema(
            {
                "node": {"type": "string", "description": "Source node name"},
                "vmid": d.VMID,
                "target": {"type": "string", "description": "Target node name"},
                "online": {"type": "boolean", "description": "Live migration"},
            },
            ["node", "vmid", "target"],
        ),
    ),
]
