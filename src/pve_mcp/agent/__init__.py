"""
Agent-facing helpers in the pve-mcp package.

These utilities let out-of-process agents (CLI helpers, workers, etc.) reuse
the same configuration loader, session setup and operation catalog that the
MCP server relies on without starting the protocol server.
"""

from .adapter import ProxmoxAgentAdapter

__all__ = ["ProxmoxAgentAdapter"]
