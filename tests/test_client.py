import pytest
import requests

from conftest import BASE_URL, FailingSession, FakeResponse, FakeSession
from pve_mcp.core.client import PveClient
from pve_mcp.exceptions import RemoteApiError


def test_get_unwraps_data_envelope(context):
    http = FakeSession(FakeResponse(payload={"data": [{"node": "pve"}]}))
    client = PveClient(context, session=http)

    assert client.get("/nodes") == [{"node": "pve"}]
    call = http.calls[0]
    assert call["method"] == "GET"
    assert call["url"] == f"{BASE_URL}/nodes"
    assert call["params"] is None
    assert call["json"] is None
    assert call["verify"] is False
    assert call["timeout"] == 30
    assert call["headers"]["Authorization"] == "PVEAPIToken=api@pve!mcp=s3cret"


def test_post_sends_json_body(context):
    http = FakeSession(FakeResponse(payload={"data": "UPID:pve:1"}))
    client = PveClient(context, session=http)

    assert client.post("/nodes/pve/vzdump", {"vmid": 100}) == "UPID:pve:1"
    assert http.calls[0]["json"] == {"vmid": 100}


def test_delete_sends_query_params(context):
    http = FakeSession(FakeResponse(payload={"data": "UPID:pve:2"}))
    client = PveClient(context, session=http)

    client.delete("/nodes/pve/qemu/100", {"purge": 1})
    assert http.calls[0]["method"] == "DELETE"
    assert http.calls[0]["params"] == {"purge": 1}


def test_error_status_becomes_remote_api_error(context):
    body = {"errors": {"vmid": "invalid format"}, "data": None}
    client = PveClient(context, session=FakeSession(FakeResponse(status_code=500, payload=body)))

    with pytest.raises(RemoteApiError) as excinfo:
        client.get("/nodes/pve/qemu/abc/config")

    assert excinfo.value.status == 500
    assert excinfo.value.body == body
    message = str(excinfo.value)
    assert "500" in message
    assert '"vmid": "invalid format"' in message


def test_error_without_json_keeps_raw_text(context):
    client = PveClient(context, session=FakeSession(FakeResponse(status_code=403, text="Permission check failed")))

    with pytest.raises(RemoteApiError, match="403 - Permission check failed"):
        client.get("/cluster/status")


def test_transport_errors_propagate_unchanged(context):
    client = PveClient(context, session=FailingSession(requests.Timeout("read timed out")))

    with pytest.raises(requests.Timeout):
        client.get("/nodes")
