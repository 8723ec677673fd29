"""Terraform export operations."""
from __future__ import annotations

from typing import Any, Dict

from ..translate.terraform import generate_provider, generate_vm_resource
from . import definitions as d
from .registry import Operation, OperationContext, schema


def generate_terraform(ctx: OperationContext, args: Dict[str, Any]) -> str:
    config = ctx.client.get(f"/nodes/{args['node']}/qemu/{args['vmid']}/config")
    if not isinstance(config, dict):
        config = {}
    return generate_vm_resource(args["node"], args["vmid"], config)


def generate_terraform_provider(ctx: OperationContext, args: Dict[str, Any]) -> str:
    session = ctx.session
    return generate_provider(session.url, session.user, session.token_id)


OPERATIONS = [
    Operation(
        "pve_generate_terraform",
        d.GENERATE_TERRAFORM_DESC,
        generate_terraform,
        schema(
            {"node": d.NODE, "vmid": {"type": "number", "description": "VM ID to export as Terraform"}},
            ["node", "vmid"],
        ),
    ),
    Operation(
        "pve_generate_terraform_provider",
        d.GENERATE_TERRAFORM_PROVIDER_DESC,
        generate_terraform_provider,
    ),
]
