import asyncio
import logging

import mcp.types as types
import pytest

from conftest import FakeResponse
from pve_mcp.config.models import AuthConfig, Config, LoggingConfig
from pve_mcp.core.logging import setup_logging
from pve_mcp.server import PveMCPServer, ToolCallFailed, create_server, main


def test_list_tools_mirrors_registry(dispatcher):
    server = PveMCPServer(dispatcher)
    tools = asyncio.run(server.list_tools())

    assert [tool.name for tool in tools] == [op.name for op in dispatcher.list_operations()]
    stop = next(tool for tool in tools if tool.name == "pve_stop_vm")
    assert stop.inputSchema["required"] == ["node", "vmid"]
    assert "force" in stop.inputSchema["properties"]


def test_call_tool_returns_text(dispatcher, http):
    http.default = FakeResponse(payload={"data": "UPID:pve:1"})
    server = PveMCPServer(dispatcher)

    content = asyncio.run(server.call_tool("pve_start_vm", {"node": "pve", "vmid": 100}))

    assert len(content) == 1
    assert content[0].type == "text"
    assert content[0].text == "VM 100 start initiated. Task: UPID:pve:1"


def _call_through_sdk(server, name, arguments):
    handler = server.server.request_handlers[types.CallToolRequest]
    request = types.CallToolRequest(
        method="tools/call",
        params=types.CallToolRequestParams(name=name, arguments=arguments),
    )
    return asyncio.run(handler(request)).root


def test_handlers_registered_on_sdk_server(dispatcher):
    server = PveMCPServer(dispatcher)

    assert types.ListToolsRequest in server.server.request_handlers
    assert types.CallToolRequest in server.server.request_handlers


def test_error_result_is_flagged_not_raised(dispatcher):
    server = PveMCPServer(dispatcher)

    result = _call_through_sdk(server, "pve_nope", {})

    assert result.isError is True
    assert [item.text for item in result.content] == ["Error: Unknown tool: pve_nope"]


def test_success_result_is_not_flagged(dispatcher, http):
    http.default = FakeResponse(payload={"data": "UPID:pve:2"})
    server = PveMCPServer(dispatcher)

    result = _call_through_sdk(server, "pve_reboot_vm", {"node": "pve", "vmid": 100})

    assert not result.isError
    assert [item.text for item in result.content] == ["VM 100 reboot initiated. Task: UPID:pve:2"]


def test_call_tool_raises_for_the_sdk_on_error(dispatcher):
    server = PveMCPServer(dispatcher)

    with pytest.raises(ToolCallFailed, match="Unknown tool: pve_nope"):
        asyncio.run(server.call_tool("pve_nope", {}))


def test_create_server_requires_credentials():
    with pytest.raises(Exception, match="No Proxmox authentication configured"):
        create_server(Config(auth=AuthConfig()))


def test_main_exits_nonzero_on_startup_failure(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    for var in ("PROXMOX_MCP_CONFIG", "PROXMOX_TOKEN_ID", "PROXMOX_TOKEN_SECRET", "PROXMOX_PASSWORD"):
        monkeypatch.delenv(var, raising=False)

    assert main([]) == 1


def test_setup_logging_writes_file_and_stays_off_stdout(tmp_path, capsys):
    log_file = tmp_path / "pve.log"
    logger = setup_logging(LoggingConfig(level="debug", format="%(levelname)s %(message)s", file=str(log_file)))

    logging.getLogger("pve-mcp.dispatch").debug("hello")

    assert logger.level == logging.DEBUG
    assert "DEBUG hello" in log_file.read_text()
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "DEBUG hello" in captured.err
