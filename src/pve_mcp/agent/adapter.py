"""
Agent adapter for in-process Proxmox operations.

This module exposes a thin wrapper that automation agents (CLI helpers,
workers, notebooks) can import to run catalog operations with the same
configuration loader, session setup and dispatcher that the MCP server uses,
without starting the stdio transport. It focuses on:

- Loading configuration from JSON and ``PROXMOX_*`` environment variables.
- Establishing the session lazily, once, through an injectable factory.
- Calling operations by name and getting the same text results (or
  error-flagged results) an MCP client would see.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, List, Mapping, Optional

from ..config.loader import load_config
from ..config.models import AuthConfig, Config, ProxmoxConfig
from ..core.client import PveClient
from ..core.session import SessionContext, establish_session
from ..tools import Dispatcher, Operation, OperationResult, build_registry

SessionFactory = Callable[[ProxmoxConfig, AuthConfig], SessionContext]
ClientFactory = Callable[[SessionContext], PveClient]


class ProxmoxAgentAdapter:
    """Shareable adapter that keeps agent workers aligned with MCP settings."""

    def __init__(
        self,
        config_path: Optional[str] = None,
        *,
        environ: Optional[Mapping[str, str]] = None,
        session_factory: Optional[SessionFactory] = None,
        client_factory: Optional[ClientFactory] = None,
        auto_connect: bool = True,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.logger = logger or logging.getLogger("pve-mcp.agent.adapter")
        self.logger.debug("Loading config (path=%s)", config_path)
        self.config: Config = load_config(config_path, environ=environ)
        self._session_factory = session_factory or establish_session
        self._client_factory = client_factory or PveClient
        self._dispatcher: Optional[Dispatcher] = None

        if auto_connect:
            self.connect()

    def connect(self, force: bool = False) -> Dispatcher:
        """Establish the session once and build the dispatcher."""
        if self._dispatcher is not None and not force:
            return self._dispatcher

        self.logger.info("Connecting adapter to Proxmox at %s", self.config.proxmox.url)
        context = self._session_factory(self.config.proxmox, self.config.auth)
        client = self._client_factory(context)
        self._dispatcher = Dispatcher(client, build_registry(), session=context)
        return self._dispatcher

    @property
    def dispatcher(self) -> Dispatcher:
        """Return the connected dispatcher."""
        if self._dispatcher is None:
            raise RuntimeError("Adapter is not connected. Call connect() first.")
        return self._dispatcher

    def list_operations(self) -> List[Operation]:
        return self.connect().list_operations()

    def call(self, name: str, **params: Any) -> OperationResult:
        """Run one catalog operation; failures come back as error results."""
        self.logger.debug("Calling %s", name)
        return self.connect().call(name, params)
