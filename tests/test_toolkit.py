from __future__ import annotations

from pathlib import Path

import pytest

from rpgmaker_mcp import SafeWriter, ServerSettings, Toolkit, ToolResult, WriteFailure
from rpgmaker_mcp.schemas import NoArguments

EXPECTED_TOOLS = {
    "get_database_info",
    "get_items", "create_item", "update_item",
    "get_weapons", "create_weapon", "update_weapon",
    "get_armors", "create_armor", "update_armor",
    "get_actors", "create_actor", "update_actor",
    "get_classes", "create_class", "update_class",
    "get_skills", "create_skill", "update_skill",
    "get_states", "create_state", "update_state",
    "get_enemies", "create_enemy", "update_enemy",
    "get_maps", "create_map", "update_map",
    "get_installed_plugins", "install_plugin",
    "get_database_limits", "set_database_limit",
    "scan_resources", "scan_dlc_packages", "get_generator_parts",
    "get_sample_maps", "get_core_script_versions",
}


def test_default_registration_covers_every_tool(toolkit: Toolkit) -> None:
    assert {tool.name for tool in toolkit.available_tools} == EXPECTED_TOOLS


def test_input_schema_uses_camel_case(toolkit: Toolkit) -> None:
    schema = toolkit.get("create_item").input_schema()

    assert "hpRecoveryPercent" in schema["properties"]
    assert set(schema["required"]) == {"name", "description", "price"}
    assert "def" in toolkit.get("create_armor").input_schema()["properties"]


def test_unknown_tool_raises_key_error(toolkit: Toolkit) -> None:
    with pytest.raises(KeyError):
        toolkit.invoke("delete_everything", {})


def test_duplicate_registration_is_rejected(writer: SafeWriter) -> None:
    toolkit = Toolkit(writer, register_defaults=False)

    @toolkit.tool("ping", "Answer with pong")
    def ping(arguments: NoArguments) -> ToolResult:
        return ToolResult("pong")

    assert toolkit.invoke("ping").text == "pong"
    with pytest.raises(ValueError):
        toolkit.tool("ping", "Again")(ping)


def test_write_failures_become_error_results(
    toolkit: Toolkit, monkeypatch: pytest.MonkeyPatch
) -> None:
    def failing_write(self: SafeWriter, filename: str, data: object) -> None:
        raise WriteFailure("Failed to write 'Items.json'.")

    monkeypatch.setattr(SafeWriter, "write_to_database", failing_write)

    result = toolkit.invoke("create_item", {"name": "A", "description": "", "price": 1})

    assert result == ToolResult("Error: Failed to write 'Items.json'.", is_error=True)


def test_unexpected_errors_become_error_results(writer: SafeWriter) -> None:
    toolkit = Toolkit(writer, register_defaults=False)

    @toolkit.tool("explode", "Always fails")
    def explode(arguments: NoArguments) -> ToolResult:
        raise RuntimeError("boom")

    assert toolkit.invoke("explode") == ToolResult("Error: boom", is_error=True)


def test_extra_argument_keys_are_ignored(toolkit: Toolkit) -> None:
    result = toolkit.invoke("update_item", {"id": 1, "price": 10, "colour": "red"})

    assert result.is_error is False


def test_from_settings_requires_project_root() -> None:
    with pytest.raises(ValueError):
        Toolkit.from_settings(ServerSettings())


def test_from_settings_builds_working_stack(project: Path) -> None:
    toolkit = Toolkit.from_settings(ServerSettings(project_root=project, version_step=10))

    toolkit.invoke("create_item", {"name": "A", "description": "", "price": 1})

    assert toolkit.writer.version.current() == 110
