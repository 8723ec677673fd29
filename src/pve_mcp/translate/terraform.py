"""
Terraform rendering for Proxmox VMs.

Output targets the ``Telmate/proxmox`` provider. Block types and field names
are consumed by Terraform and must not change shape; only values vary.
Both generators are pure functions of their inputs.
"""
from __future__ import annotations

from typing import Any, List, Mapping

from .options import is_enabled, parse_property_string, split_volume

MAX_NET_SLOT = 10
PRIMARY_DISK = "scsi0"
DEFAULT_BRIDGE = "vmbr0"
DEFAULT_DISK_SIZE = "32"
DEFAULT_CORES = 1
DEFAULT_SOCKETS = 1
DEFAULT_MEMORY = 2048
DEFAULT_BOOT = "order=scsi0"

NETWORK_BLOCK = """
  network {{
    model  = "virtio"
    bridge = "{bridge}"
  }}
"""

DISK_BLOCK = """
  disk {{
    type    = "scsi"
    storage = "{storage}"
    size    = "{size}G"
  }}
"""

VM_TEMPLATE = """# Terraform configuration for VM {vmid}
# Generated from Proxmox MCP Server

resource "proxmox_vm_qemu" "vm_{vmid}" {{
  name        = "{name}"
  target_node = "{node}"
  vmid        = {vmid}

  # Hardware
  cores   = {cores}
  sockets = {sockets}
  memory  = {memory}

  # OS
  os_type = "cloud-init"  # Adjust based on your setup

  # Boot
  boot    = "{boot}"
  agent   = {agent}
{disks}{networks}
  # Lifecycle
  lifecycle {{
    ignore_changes = [
      network,
    ]
  }}
}}

# Output
output "vm_{vmid}_ip" {{
  value = proxmox_vm_qemu.vm_{vmid}.default_ipv4_address
}}
"""

PROVIDER_TEMPLATE = """# Proxmox Terraform Provider Configuration
# Generated from MCP Server

terraform {{
  required_providers {{
    proxmox = {{
      source  = "Telmate/proxmox"
      version = ">=2.9.0"
    }}
  }}
}}

provider "proxmox" {{
  pm_api_url          = "{url}/api2/json"
  pm_api_token_id     = "{user}!{token_id}"
  pm_api_token_secret = var.proxmox_api_token_secret
  pm_tls_insecure     = true  # Set to false if using valid SSL cert
}}

variable "proxmox_api_token_secret" {{
  description = "Proxmox API token secret"
  type        = string
  sensitive   = true
}}

# Usage:
# export TF_VAR_proxmox_api_token_secret="your-token-secret"
# terraform init
# terraform plan
"""


def _scalar(value: Any) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def network_bridges(config: Mapping[str, Any]) -> List[str]:
    """Bridges of the present ``net0``..``net10`` slots, in slot order."""
    bridges = []
    for index in range(MAX_NET_SLOT + 1):
        raw = config.get(f"net{index}")
        if not raw:
            continue
        bridges.append(parse_property_string(raw).get("bridge") or DEFAULT_BRIDGE)
    return bridges


def primary_disk(config: Mapping[str, Any]):
    """Return ``(storage, size_in_gb)`` for the primary disk, or ``None``."""
    raw = config.get(PRIMARY_DISK)
    if not raw:
        return None
    options = parse_property_string(raw, default_key="file")
    volume = split_volume(options.get("file"))
    if volume is None:
        return None

    size = options.get("size", "")
    if size.endswith("G") and size[:-1].isdigit():
        return volume[0], size[:-1]
    return volume[0], DEFAULT_DISK_SIZE


def generate_vm_resource(node: str, vmid: Any, config: Mapping[str, Any]) -> str:
    """Render a ``proxmox_vm_qemu`` resource for one VM config record.

    String values are written into HCL quotes as-is, without escaping.
    """
    vmid = _scalar(vmid)
    disk = primary_disk(config)
    disks = DISK_BLOCK.format(storage=disk[0], size=disk[1]) if disk else ""
    networks = "".join(NETWORK_BLOCK.format(bridge=b) for b in network_bridges(config))

    return VM_TEMPLATE.format(
        vmid=vmid,
        name=config.get("name") or f"vm-{vmid}",
        node=node,
        cores=_scalar(config.get("cores") or DEFAULT_CORES),
        sockets=_scalar(config.get("sockets") or DEFAULT_SOCKETS),
        memory=_scalar(config.get("memory") or DEFAULT_MEMORY),
        boot=config.get("boot") or DEFAULT_BOOT,
        agent=1 if is_enabled(config.get("agent")) else 0,
        disks=disks,
        networks=networks,
    )


def generate_provider(url: str, user: str, token_id: str) -> str:
    """Render the standalone provider configuration for this cluster."""
    return PROVIDER_TEMPLATE.format(url=url, user=user, token_id=token_id)
