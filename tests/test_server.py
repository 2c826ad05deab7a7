from __future__ import annotations

import pytest
from mcp.server.lowlevel import Server

from rpgmaker_mcp import Toolkit
from rpgmaker_mcp.server import ToolCallError, call_tool, create_server, list_tool_definitions


def test_list_tool_definitions_exposes_argument_schemas(toolkit: Toolkit) -> None:
    tools = {tool.name: tool for tool in list_tool_definitions(toolkit)}

    assert len(tools) == len(tuple(toolkit.available_tools))
    assert tools["set_database_limit"].inputSchema["properties"]["limit"]["maximum"] == 9999
    assert tools["get_items"].description == "Get all items from the database"


def test_call_tool_returns_text_content(toolkit: Toolkit) -> None:
    content = call_tool(toolkit, "create_map", {"name": "Dungeon", "width": 5, "height": 5})

    assert content[0].type == "text"
    assert content[0].text == 'Created map "Dungeon" with ID 4 (5x5 tiles)'


def test_call_tool_raises_on_failure(toolkit: Toolkit) -> None:
    with pytest.raises(ToolCallError, match="Enemy ID 7 not found"):
        call_tool(toolkit, "update_enemy", {"id": 7, "name": "Ghost"})


def test_call_tool_raises_on_unknown_tool(toolkit: Toolkit) -> None:
    with pytest.raises(ToolCallError, match="Unknown tool"):
        call_tool(toolkit, "format_disk", None)


def test_create_server_returns_named_server(toolkit: Toolkit) -> None:
    server = create_server(toolkit)

    assert isinstance(server, Server)
    assert server.name == "rpgmaker-mz"
