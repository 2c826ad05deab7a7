"""State tools: get_states, create_state, update_state."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..models import ExParameter, TraitCode, default_state, trait
from ..safe_writer import SafeWriter
from ..schemas import CreateStateArguments, UpdateStateArguments
from .base import ToolResult, apply_updates, json_result, named

if TYPE_CHECKING:  # pragma: no cover - imported only for type checking
    from ..toolkit import Toolkit

STATES_FILE = "States.json"


def build_state(arguments: CreateStateArguments) -> dict:
    state = default_state()
    state["name"] = arguments.name
    state["iconIndex"] = arguments.icon_index
    state["restriction"] = arguments.restriction
    state["priority"] = arguments.priority
    state["minTurns"] = arguments.min_turns
    state["maxTurns"] = arguments.max_turns
    state["autoRemovalTiming"] = arguments.auto_removal_timing
    state["chanceByDamage"] = arguments.chance_by_damage
    state["removeByDamage"] = arguments.chance_by_damage > 0
    state["removeAtBattleEnd"] = arguments.remove_at_battle_end
    if arguments.regenerate_mp_rate != 0:
        state["traits"].append(
            trait(
                TraitCode.EX_PARAMETER,
                data_id=ExParameter.MP_REGENERATION.value,
                value=arguments.regenerate_mp_rate / 100,
            )
        )
    return state


def register(toolkit: "Toolkit", writer: SafeWriter) -> None:
    @toolkit.tool("get_states", "Get all states (buffs and debuffs) from the database")
    def get_states(arguments: object) -> ToolResult:
        states = writer.read_collection(STATES_FILE)
        return json_result(
            [
                {
                    "id": state.get("id"),
                    "name": state.get("name", ""),
                    "iconIndex": state.get("iconIndex", 0),
                    "restriction": state.get("restriction", 0),
                    "priority": state.get("priority", 0),
                    "minTurns": state.get("minTurns"),
                    "maxTurns": state.get("maxTurns"),
                }
                for state in named(states.populated())
            ]
        )

    @toolkit.tool(
        "create_state",
        "Create a new state with duration, removal rules and optional MP regeneration",
        CreateStateArguments,
    )
    def create_state(arguments: CreateStateArguments) -> ToolResult:
        states = writer.read_collection(STATES_FILE)
        new_id = states.append(build_state(arguments))
        writer.write_collection(STATES_FILE, states)
        return ToolResult(f'Created state "{arguments.name}" with ID {new_id}')

    @toolkit.tool("update_state", "Update an existing state's properties", UpdateStateArguments)
    def update_state(arguments: UpdateStateArguments) -> ToolResult:
        states = writer.read_collection(STATES_FILE)
        state = states.require(arguments.id, kind="State")
        apply_updates(
            state,
            arguments,
            {
                "name": "name",
                "icon_index": "iconIndex",
                "min_turns": "minTurns",
                "max_turns": "maxTurns",
            },
        )
        writer.write_collection(STATES_FILE, states)
        return ToolResult(f'Updated state "{state.get("name", "")}" (ID {arguments.id})')
