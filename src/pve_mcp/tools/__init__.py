"""
The Proxmox operation catalog.

``build_registry()`` assembles every handler module into one registry, in
the order the tools are advertised to clients.
"""

from . import cluster, container, snapshot, storage, task, terraform, vm
from .registry import Dispatcher, Operation, OperationContext, OperationResult, Registry

CATALOG_MODULES = (cluster, vm, container, storage, snapshot, task, terraform)


def build_registry() -> Registry:
    registry = Registry()
    for module in CATALOG_MODULES:
        for operation in module.OPERATIONS:
            registry.register(operation)
    return registry


__all__ = [
    "Dispatcher",
    "Operation",
    "OperationContext",
    "OperationResult",
    "Registry",
    "build_registry",
]
