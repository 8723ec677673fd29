"""
Shared fakes and fixtures. Nothing here touches the network.
"""
import logging
from typing import Any, Dict, List, Optional

import pytest
import requests

from pve_mcp.config.models import AuthConfig, ProxmoxConfig
from pve_mcp.core.client import PveClient
from pve_mcp.core.session import token_session
from pve_mcp.tools import Dispatcher, build_registry

BASE_URL = "https://pve.test:8006/api2/json"

_NO_JSON = object()


class FakeResponse:
    def __init__(self, status_code: int = 200, payload: Any = _NO_JSON, text: str = ""):
        self.status_code = status_code
        self._payload = payload
        self.text = text

    @property
    def ok(self) -> bool:
        return self.status_code < 400

    def json(self) -> Any:
        if self._payload is _NO_JSON:
            raise ValueError("No JSON object could be decoded")
        return self._payload

    def raise_for_status(self) -> None:
        if not self.ok:
            raise requests.HTTPError(f"{self.status_code} Error", response=self)


class FakeSession:
    """Records outbound calls and replays queued responses."""

    def __init__(self, *responses: FakeResponse, default: Optional[FakeResponse] = None):
        self.responses: List[FakeResponse] = list(responses)
        self.default = default or FakeResponse(payload={"data": {}})
        self.calls: List[Dict[str, Any]] = []

    def _next(self) -> FakeResponse:
        return self.responses.pop(0) if self.responses else self.default

    def request(self, method: str, url: str, **kwargs: Any) -> FakeResponse:
        self.calls.append({"method": method, "url": url, **kwargs})
        return self._next()

    def post(self, url: str, **kwargs: Any) -> FakeResponse:
        self.calls.append({"method": "POST", "url": url, **kwargs})
        return self._next()


class FailingSession(FakeSession):
    def __init__(self, exc: Exception):
        super().__init__()
        self.exc = exc

    def request(self, method: str, url: str, **kwargs: Any) -> FakeResponse:
        self.calls.append({"method": method, "url": url, **kwargs})
        raise self.exc

    def post(self, url: str, **kwargs: Any) -> FakeResponse:
        return self.request("POST", url, **kwargs)


@pytest.fixture(autouse=True)
def _reset_logging():
    yield
    logger = logging.getLogger("pve-mcp")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True


@pytest.fixture
def proxmox_cfg():
    return ProxmoxConfig(url="https://pve.test:8006")


@pytest.fixture
def token_auth():
    return AuthConfig(user="api@pve", token_id="mcp", token_secret="s3cret")


@pytest.fixture
def context(proxmox_cfg, token_auth):
    return token_session(proxmox_cfg, token_auth)


@pytest.fixture
def http():
    return FakeSession()


@pytest.fixture
def client(context, http):
    return PveClient(context, session=http)


@pytest.fixture
def dispatcher(client):
    return Dispatcher(client, build_registry())
