"""Translation of Proxmox config records into Terraform documents."""

from .options import parse_property_string
from .terraform import generate_provider, generate_vm_resource

__all__ = ["generate_provider", "generate_vm_resource", "parse_property_string"]
