"""
Thin HTTP client for the Proxmox REST API.

Every call is a single round trip: no retries, no polling. Non-success
responses are normalized into :class:`RemoteApiError`; connection errors and
timeouts from ``requests`` propagate unchanged.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import requests

from ..exceptions import RemoteApiError
from .session import SessionContext, silence_insecure_warnings

LOG = logging.getLogger("pve-mcp.client")


class PveClient:
    """Issues authenticated requests using a shared :class:`SessionContext`."""

    def __init__(self, context: SessionContext, session: Optional[Any] = None) -> None:
        self.context = context
        self.session = session or requests.Session()
        if not context.verify_ssl:
            silence_insecure_warnings()
        LOG.debug("API endpoint base url: %s", context.base_url)

    def _request(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        body: Optional[Dict[str, Any]] = None,
    ) -> Any:
        # Path segments are interpolated verbatim by the callers.
        url = f"{self.context.base_url}{path}"
        response = self.session.request(
            method=method,
            url=url,
            params=params or None,
            json=body if body else None,
            headers=dict(self.context.headers),
            verify=self.context.verify_ssl,
            timeout=self.context.timeout,
        )
        if not response.ok:
            raise RemoteApiError(response.status_code, _response_body(response))

        try:
            payload = response.json()
        except ValueError:
            return None
        if isinstance(payload, dict):
            return payload.get("data")
        return payload

    def get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        LOG.debug("GET %s (params=%s)", path, params)
        return self._request("GET", path, params=params)

    def post(self, path: str, data: Optional[Dict[str, Any]] = None) -> Any:
        LOG.debug("POST %s (data=%s)", path, data)
        return self._request("POST", path, body=data)

    def delete(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        LOG.debug("DELETE %s (params=%s)", path, params)
        return self._request("DELETE", path, params=params)


def _response_body(response: Any) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text
