"""
pve-mcp - A Model Context Protocol server for the Proxmox VE API.
"""

__version__ = "0.2.0"
__all__ = ["PveMCPServer"]


def __getattr__(name):
    """Lazily expose heavy modules to avoid import side effects on startup."""
    if name == "PveMCPServer":
        from .server import PveMCPServer

        return PveMCPServer
    raise AttributeError(f"module 'pve_mcp' has no attribute {name!r}")
