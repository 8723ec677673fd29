"""
Session establishment against the Proxmox API.

Two strategies are supported, picked from the credential material that is
present:

- API token: a static ``PVEAPIToken`` authorization header, no network call.
- Ticket: one ``POST /access/ticket`` with username and password; the
  returned ticket and CSRF token are replayed on every later request.

The resulting :class:`SessionContext` is built once per process and never
refreshed. An expired ticket makes later calls fail rather than recover.

TLS verification is disabled by default for all of this because Proxmox
nodes serve self-signed certificates. That is an accepted trade-off for a
management tool talking to a trusted network, not an oversight.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

import requests
import urllib3

from ..config.models import AuthConfig, ProxmoxConfig
from ..exceptions import AuthError, ConfigurationError

LOG = logging.getLogger("pve-mcp.session")

API_PREFIX = "/api2/json"


def silence_insecure_warnings() -> None:
    """Drop urllib3's per-request warning for unverified HTTPS."""
    urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)


@dataclass(frozen=True)
class SessionContext:
    """Immutable bundle of connection and credential state."""

    url: str
    base_url: str
    headers: Mapping[str, str]
    verify_ssl: bool
    timeout: float
    user: str
    token_id: str
    auth_mode: str


def _base_headers() -> Dict[str, str]:
    return {"Accept": "application/json", "Content-Type": "application/json"}


def _freeze(
    proxmox_cfg: ProxmoxConfig, auth_cfg: AuthConfig, headers: Dict[str, str], mode: str
) -> SessionContext:
    return SessionContext(
        url=proxmox_cfg.url,
        base_url=f"{proxmox_cfg.url}{API_PREFIX}",
        headers=MappingProxyType(dict(headers)),
        verify_ssl=proxmox_cfg.verify_ssl,
        timeout=proxmox_cfg.timeout,
        user=auth_cfg.user,
        token_id=auth_cfg.token_id,
        auth_mode=mode,
    )


def token_session(proxmox_cfg: ProxmoxConfig, auth_cfg: AuthConfig) -> SessionContext:
    headers = _base_headers()
    headers["Authorization"] = (
        f"PVEAPIToken={auth_cfg.user}!{auth_cfg.token_id}={auth_cfg.token_secret}"
    )
    LOG.debug("Using API token %s!%s", auth_cfg.user, auth_cfg.token_id)
    return _freeze(proxmox_cfg, auth_cfg, headers, "token")


def ticket_session(
    proxmox_cfg: ProxmoxConfig,
    auth_cfg: AuthConfig,
    http: Optional[Any] = None,
) -> SessionContext:
    if http is None:
        with requests.Session() as owned:
            return ticket_session(proxmox_cfg, auth_cfg, owned)
    if not proxmox_cfg.verify_ssl:
        silence_insecure_warnings()
    url = f"{proxmox_cfg.url}{API_PREFIX}/access/ticket"
    LOG.debug("Requesting ticket for %s from %s", auth_cfg.user, url)
    try:
        response = http.post(
            url,
            data={"username": auth_cfg.user, "password": auth_cfg.password},
            verify=proxmox_cfg.verify_ssl,
            timeout=proxmox_cfg.timeout,
        )
        response.raise_for_status()
    except requests.HTTPError as exc:
        raise AuthError(f"Ticket request failed: {exc}") from exc
    except requests.RequestException as exc:
        raise AuthError(f"Could not reach {url}: {exc}") from exc

    try:
        data = response.json().get("data") or {}
        ticket = data["ticket"]
        csrf = data["CSRFPreventionToken"]
    except (ValueError, AttributeError, KeyError, TypeError) as exc:
        raise AuthError("Failed to obtain access ticket") from exc

    headers = _base_headers()
    headers["Cookie"] = f"PVEAuthCookie={ticket}"
    headers["CSRFPreventionToken"] = csrf
    return _freeze(proxmox_cfg, auth_cfg, headers, "ticket")


def establish_session(
    proxmox_cfg: ProxmoxConfig,
    auth_cfg: AuthConfig,
    http: Optional[Any] = None,
) -> SessionContext:
    """Authenticate once and return the process-wide session context."""
    mode = auth_cfg.mode
    if mode == "token":
        context = token_session(proxmox_cfg, auth_cfg)
    elif mode == "ticket":
        context = ticket_session(proxmox_cfg, auth_cfg, http)
    else:
        raise ConfigurationError(
            "No Proxmox authentication configured. "
            "Set PROXMOX_TOKEN_ID/SECRET or PROXMOX_PASSWORD"
        )

    LOG.info("Authenticated to %s using %s auth", proxmox_cfg.url, context.auth_mode)
    return context
