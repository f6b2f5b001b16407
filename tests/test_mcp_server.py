"""
Tests for the MCP stdio server handlers.
"""

from __future__ import annotations

import asyncio
import json

from liberty_content import mcp_server
from liberty_content.tools import TOOL_NAMES


def test_list_tools_exposes_every_tool():
    tools = asyncio.run(mcp_server.list_tools())
    assert {tool.name for tool in tools} == TOOL_NAMES
    assert all(tool.inputSchema["type"] == "object" for tool in tools)


def test_call_tool_wraps_router_text(monkeypatch):
    monkeypatch.setattr(mcp_server.router, "handle", lambda name, arguments: json.dumps({"tool": name}))
    contents = asyncio.run(mcp_server.call_tool("audit_content", {"content": "gold"}))
    assert len(contents) == 1
    assert contents[0].type == "text"
    assert json.loads(contents[0].text) == {"tool": "audit_content"}
