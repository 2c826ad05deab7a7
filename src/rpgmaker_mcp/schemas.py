"""Argument models for the remote-callable tools.

Field names are snake_case in Python and exposed in camelCase, matching the
keys RPG Maker uses in its own JSON files.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class ToolArguments(BaseModel):
    """Base class for tool arguments; unknown keys are ignored."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class NoArguments(ToolArguments):
    """Arguments of tools that take no input."""


class _EntityUpdate(ToolArguments):
    id: int = Field(..., ge=1, description="ID of the entry to update")


# Items ------------------------------------------------------------------------


class CreateItemArguments(ToolArguments):
    name: str = Field(..., description="Item name")
    description: str = Field(..., description="Item description")
    price: int = Field(..., ge=0, description="Item price")
    type: Literal["regular", "key"] = Field("regular", description="Item type")
    hp_recovery_percent: float = Field(0, ge=0, le=100, description="HP recovery percentage (0-100)")
    hp_recovery_fixed: int = Field(0, ge=0, description="HP recovery fixed amount")
    mp_recovery_percent: float = Field(0, ge=0, le=100, description="MP recovery percentage (0-100)")
    mp_recovery_fixed: int = Field(0, ge=0, description="MP recovery fixed amount")
    add_state_id: int = Field(0, ge=0, description="State ID to add (e.g. for buffs or regeneration)")
    icon_index: int = Field(0, ge=0, description="Icon index from IconSet")


class UpdateItemArguments(_EntityUpdate):
    name: str | None = None
    description: str | None = None
    price: int | None = Field(None, ge=0)
    icon_index: int | None = Field(None, ge=0)


# Weapons ----------------------------------------------------------------------


class CreateWeaponArguments(ToolArguments):
    name: str = Field(..., description="Weapon name")
    description: str = Field(..., description="Weapon description")
    price: int = Field(..., ge=0, description="Weapon price")
    wtype_id: int = Field(1, ge=1, description="Weapon type ID (1=Dagger, 2=Sword, 3=Flail, ...)")
    attack: int = Field(0, ge=0, description="Attack power (ATK bonus)")
    element_id: int = Field(0, ge=0, description="Attack element ID (0 for none)")
    icon_index: int = Field(0, ge=0, description="Icon index from IconSet")
    animation_id: int = Field(0, ge=0, description="Attack animation ID")


class UpdateWeaponArguments(_EntityUpdate):
    name: str | None = None
    description: str | None = None
    price: int | None = Field(None, ge=0)
    attack: int | None = Field(None, ge=0)
    icon_index: int | None = Field(None, ge=0)


# Armors -----------------------------------------------------------------------


class CreateArmorArguments(ToolArguments):
    name: str = Field(..., description="Armor name")
    description: str = Field(..., description="Armor description")
    price: int = Field(..., ge=0, description="Armor price")
    atype_id: int = Field(1, ge=1, description="Armor type ID (1=General, 2=Magic, 3=Heavy, ...)")
    etype_id: int = Field(2, ge=2, description="Equip type ID (2=Shield, 3=Head, 4=Body, 5=Accessory)")
    defense: int = Field(0, ge=0, alias="def", description="Defense (DEF)")
    mdf: int = Field(0, ge=0, description="Magic defense (MDF)")
    agi: int = Field(0, ge=0, description="Agility (AGI)")
    icon_index: int = Field(0, ge=0, description="Icon index")


class UpdateArmorArguments(_EntityUpdate):
    name: str | None = None
    description: str | None = None
    price: int | None = Field(None, ge=0)
    defense: int | None = Field(None, ge=0, alias="def")
    mdf: int | None = Field(None, ge=0)
    icon_index: int | None = Field(None, ge=0)


# Actors -----------------------------------------------------------------------


class CreateActorArguments(ToolArguments):
    name: str = Field(..., description="Actor name")
    nickname: str = ""
    class_id: int = Field(1, ge=1, description="Class ID")
    initial_level: int = Field(1, ge=1)
    max_level: int = Field(99, ge=1)
    profile: str = ""
    character_name: str = Field("", description="Character sprite sheet")
    character_index: int = Field(0, ge=0)
    face_name: str = Field("", description="Face image sheet")
    face_index: int = Field(0, ge=0)


class UpdateActorArguments(_EntityUpdate):
    name: str | None = None
    nickname: str | None = None
    class_id: int | None = Field(None, ge=1)
    initial_level: int | None = Field(None, ge=1)
    max_level: int | None = Field(None, ge=1)
    profile: str | None = None
    character_name: str | None = None
    face_name: str | None = None


# Classes ----------------------------------------------------------------------


class CreateClassArguments(ToolArguments):
    name: str = Field(..., description="Class name")
    exp_base: int = Field(30, ge=10, description="EXP curve base")
    exp_accel: int = Field(30, ge=10, description="EXP curve acceleration")
    max_hp: int = Field(450, ge=1, description="Base max HP")
    max_mp: int = Field(90, ge=0, description="Base max MP")
    atk: int = Field(16, ge=1, description="Base ATK")
    defense: int = Field(16, ge=1, alias="def", description="Base DEF")


class UpdateClassArguments(_EntityUpdate):
    name: str | None = None


# Skills -----------------------------------------------------------------------


class CreateSkillArguments(ToolArguments):
    name: str = Field(..., description="Skill name")
    description: str = Field(..., description="Skill description")
    mp_cost: int = Field(0, ge=0)
    tp_cost: int = Field(0, ge=0)
    icon_index: int = Field(0, ge=0)
    scope: int = Field(1, ge=0, le=11, description="Skill scope")
    damage_type: int = Field(1, ge=0, le=6, description="Damage type")
    damage_formula: str = Field("a.atk * 4 - b.def * 2", description="Damage formula")


class UpdateSkillArguments(_EntityUpdate):
    name: str | None = None
    description: str | None = None
    mp_cost: int | None = Field(None, ge=0)
    tp_cost: int | None = Field(None, ge=0)
    icon_index: int | None = Field(None, ge=0)
    damage_formula: str | None = None


# States -----------------------------------------------------------------------


class CreateStateArguments(ToolArguments):
    name: str = Field(..., description="State name")
    icon_index: int = Field(0, ge=0)
    restriction: int = Field(0, ge=0, le=4, description="0=None ... 4=Cannot move")
    priority: int = Field(50, ge=0, le=100)
    min_turns: int = Field(1, ge=0)
    max_turns: int = Field(1, ge=0)
    auto_removal_timing: int = Field(0, ge=0, le=2, description="0=None, 1=Action end, 2=Turn end")
    chance_by_damage: int = Field(0, ge=0, le=100, description="Chance to remove by damage %")
    remove_at_battle_end: bool = True
    regenerate_mp_rate: float = Field(0, ge=-100, le=100, description="MP regeneration rate %")


class UpdateStateArguments(_EntityUpdate):
    name: str | None = None
    icon_index: int | None = Field(None, ge=0)
    min_turns: int | None = Field(None, ge=0)
    max_turns: int | None = Field(None, ge=0)


# Enemies ----------------------------------------------------------------------


class CreateEnemyArguments(ToolArguments):
    name: str = Field(..., description="Enemy name")
    max_hp: int = Field(100, ge=1)
    max_mp: int = Field(0, ge=0)
    atk: int = Field(10, ge=0)
    defense: int = Field(10, ge=0, alias="def")
    mat: int = Field(10, ge=0)
    mdf: int = Field(10, ge=0)
    agi: int = Field(10, ge=0)
    luk: int = Field(10, ge=0)
    exp: int = Field(0, ge=0)
    gold: int = Field(0, ge=0)
    battler_name: str | None = None
    battler_hue: int = Field(0, ge=0, le=360)


class UpdateEnemyArguments(_EntityUpdate):
    name: str | None = None
    max_hp: int | None = Field(None, ge=1)
    atk: int | None = Field(None, ge=0)
    exp: int | None = Field(None, ge=0)
    gold: int | None = Field(None, ge=0)
    battler_name: str | None = None


# Maps -------------------------------------------------------------------------


class CreateMapArguments(ToolArguments):
    name: str = Field(..., description="Map name shown in the editor")
    display_name: str = Field("", description="Map name shown in game")
    width: int = Field(17, ge=1, le=256)
    height: int = Field(13, ge=1, le=256)
    tileset_id: int = Field(1, ge=1)
    scroll_type: int = Field(0, ge=0, le=3, description="0=No loop, 1=Vertical, 2=Horizontal, 3=Both")
    encounter_steps: int = Field(30, ge=1, le=999)
    parent_id: int = Field(0, ge=0, description="Parent map ID in the editor tree")


class UpdateMapArguments(_EntityUpdate):
    display_name: str | None = None
    tileset_id: int | None = Field(None, ge=1)
    encounter_steps: int | None = Field(None, ge=1, le=999)


# Plugins ----------------------------------------------------------------------


class InstallPluginArguments(ToolArguments):
    filename: str = Field(..., min_length=1, description="Plugin file name without .js")
    code: str = Field(..., description="Plugin JavaScript source")
    description: str = ""
    author: str = ""

    @field_validator("filename")
    @classmethod
    def _strip_filename(cls, value: str) -> str:
        stripped = value.strip()
        if not stripped:
            raise ValueError("filename must be a non-empty string")
        return stripped


# Limits -----------------------------------------------------------------------

DatabaseName = Literal[
    "items",
    "weapons",
    "armors",
    "skills",
    "actors",
    "classes",
    "enemies",
    "states",
    "animations",
    "tilesets",
    "troops",
    "commonEvents",
]


class SetDatabaseLimitArguments(ToolArguments):
    database: DatabaseName
    limit: int = Field(..., ge=1, le=9999)


# Resources --------------------------------------------------------------------

ResourceCategory = Literal[
    "plugins",
    "tilesets",
    "characters",
    "faces",
    "sv_actors",
    "sv_enemies",
    "battlebacks1",
    "battlebacks2",
    "parallaxes",
    "pictures",
    "animations",
    "enemies",
    "titles1",
    "titles2",
    "system",
    "bgm",
    "bgs",
    "me",
    "se",
]


class ScanResourcesArguments(ToolArguments):
    category: ResourceCategory
    source: Literal["project", "engine", "all"] = "all"
