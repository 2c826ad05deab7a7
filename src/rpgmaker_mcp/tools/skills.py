"""Skill tools: get_skills, create_skill, update_skill."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..models import default_skill
from ..safe_writer import SafeWriter
from ..schemas import CreateSkillArguments, UpdateSkillArguments
from .base import ToolResult, apply_updates, json_result, named

if TYPE_CHECKING:  # pragma: no cover - imported only for type checking
    from ..toolkit import Toolkit

SKILLS_FILE = "Skills.json"


def register(toolkit: "Toolkit", writer: SafeWriter) -> None:
    @toolkit.tool("get_skills", "Get all skills from the database")
    def get_skills(arguments: object) -> ToolResult:
        skills = writer.read_collection(SKILLS_FILE)
        return json_result(
            [
                {
                    "id": skill.get("id"),
                    "name": skill.get("name", ""),
                    "description": skill.get("description", ""),
                    "mpCost": skill.get("mpCost", 0),
                    "tpCost": skill.get("tpCost", 0),
                    "scope": skill.get("scope"),
                }
                for skill in named(skills.populated())
            ]
        )

    @toolkit.tool(
        "create_skill",
        "Create a new skill with costs, scope and a damage formula",
        CreateSkillArguments,
    )
    def create_skill(arguments: CreateSkillArguments) -> ToolResult:
        skills = writer.read_collection(SKILLS_FILE)

        skill = default_skill()
        skill["name"] = arguments.name
        skill["description"] = arguments.description
        skill["mpCost"] = arguments.mp_cost
        skill["tpCost"] = arguments.tp_cost
        skill["iconIndex"] = arguments.icon_index
        skill["scope"] = arguments.scope
        skill["damage"]["type"] = arguments.damage_type
        skill["damage"]["formula"] = arguments.damage_formula

        new_id = skills.append(skill)
        writer.write_collection(SKILLS_FILE, skills)
        return ToolResult(f'Created skill "{arguments.name}" with ID {new_id}')

    @toolkit.tool("update_skill", "Update an existing skill's properties", UpdateSkillArguments)
    def update_skill(arguments: UpdateSkillArguments) -> ToolResult:
        skills = writer.read_collection(SKILLS_FILE)
        skill = skills.require(arguments.id, kind="Skill")
        apply_updates(
            skill,
            arguments,
            {
                "name": "name",
                "description": "description",
                "mp_cost": "mpCost",
                "tp_cost": "tpCost",
                "icon_index": "iconIndex",
            },
        )
        if arguments.damage_formula is not None:
            skill.setdefault("damage", {})["formula"] = arguments.damage_formula
        writer.write_collection(SKILLS_FILE, skills)
        return ToolResult(f'Updated skill "{skill.get("name", "")}" (ID {arguments.id})')
