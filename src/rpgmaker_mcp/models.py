"""RPG Maker MZ database constants and default record factories."""

from __future__ import annotations

from enum import IntEnum
from types import MappingProxyType
from typing import Any, Dict, List, Mapping


class ItemType(IntEnum):
    REGULAR = 1
    KEY_ITEM = 2
    HIDDEN_A = 3
    HIDDEN_B = 4


class Scope(IntEnum):
    NONE = 0
    ONE_ENEMY = 1
    ALL_ENEMIES = 2
    ONE_RANDOM_ENEMY = 3
    TWO_RANDOM_ENEMIES = 4
    THREE_RANDOM_ENEMIES = 5
    FOUR_RANDOM_ENEMIES = 6
    ONE_ALLY = 7
    ALL_ALLIES = 8
    ONE_ALLY_DEAD = 9
    ALL_ALLIES_DEAD = 10
    USER = 11


class Occasion(IntEnum):
    ALWAYS = 0
    BATTLE = 1
    MENU = 2
    NEVER = 3


class EffectCode(IntEnum):
    RECOVER_HP = 11
    RECOVER_MP = 12
    GAIN_TP = 13
    ADD_STATE = 21
    REMOVE_STATE = 22
    ADD_BUFF = 31
    ADD_DEBUFF = 32
    REMOVE_BUFF = 33
    REMOVE_DEBUFF = 34
    SPECIAL_EFFECT = 41
    GROW = 42
    LEARN_SKILL = 43
    COMMON_EVENT = 44


class DamageType(IntEnum):
    NONE = 0
    HP_DAMAGE = 1
    MP_DAMAGE = 2
    HP_RECOVER = 3
    MP_RECOVER = 4
    HP_DRAIN = 5
    MP_DRAIN = 6


class TraitCode(IntEnum):
    EX_PARAMETER = 22
    ATTACK_ELEMENT = 31


class ExParameter(IntEnum):
    HIT = 0
    EVASION = 1
    CRITICAL = 2
    CRITICAL_EVASION = 3
    MAGIC_EVASION = 4
    MAGIC_REFLECTION = 5
    COUNTER_ATTACK = 6
    HP_REGENERATION = 7
    MP_REGENERATION = 8
    TP_REGENERATION = 9


class ScrollType(IntEnum):
    NO_LOOP = 0
    LOOP_VERTICAL = 1
    LOOP_HORIZONTAL = 2
    LOOP_BOTH = 3


class Param(IntEnum):
    """Index of a basic parameter inside ``params`` arrays."""

    MHP = 0
    MMP = 1
    ATK = 2
    DEF = 3
    MAT = 4
    MDF = 5
    AGI = 6
    LUK = 7


MAP_LAYER_COUNT = 6
CLASS_LEVEL_SLOTS = 100

# Tables the limit tools may resize, keyed by the name callers use.
DATABASE_FILES: Mapping[str, str] = MappingProxyType(
    {
        "items": "Items.json",
        "weapons": "Weapons.json",
        "armors": "Armors.json",
        "skills": "Skills.json",
        "actors": "Actors.json",
        "classes": "Classes.json",
        "enemies": "Enemies.json",
        "states": "States.json",
        "animations": "Animations.json",
        "tilesets": "Tilesets.json",
        "troops": "Troops.json",
        "commonEvents": "CommonEvents.json",
    }
)


def default_damage(
    damage_type: DamageType = DamageType.NONE, formula: str = "0"
) -> Dict[str, Any]:
    return {
        "type": damage_type.value,
        "elementId": 0,
        "formula": formula,
        "variance": 20,
        "critical": False,
    }


def effect(code: EffectCode, *, data_id: int = 0, value1: float = 0, value2: float = 0) -> Dict[str, Any]:
    return {"code": code.value, "dataId": data_id, "value1": value1, "value2": value2}


def trait(code: TraitCode, *, data_id: int, value: float) -> Dict[str, Any]:
    return {"code": code.value, "dataId": data_id, "value": value}


def default_item() -> Dict[str, Any]:
    return {
        "id": 0,
        "name": "",
        "description": "",
        "iconIndex": 0,
        "price": 0,
        "itypeId": ItemType.REGULAR.value,
        "consumable": True,
        "scope": Scope.ONE_ALLY.value,
        "occasion": Occasion.ALWAYS.value,
        "animationId": 0,
        "damage": default_damage(),
        "effects": [],
        "hitType": 0,
        "repeats": 1,
        "speed": 0,
        "successRate": 100,
        "tpGain": 0,
        "note": "",
    }


def default_weapon() -> Dict[str, Any]:
    return {
        "id": 0,
        "name": "",
        "description": "",
        "iconIndex": 0,
        "price": 0,
        "wtypeId": 1,
        "etypeId": 1,
        "params": [0] * len(Param),
        "traits": [],
        "animationId": 0,
        "note": "",
    }


def default_armor() -> Dict[str, Any]:
    return {
        "id": 0,
        "name": "",
        "description": "",
        "iconIndex": 0,
        "price": 0,
        "atypeId": 1,
        "etypeId": 2,
        "params": [0] * len(Param),
        "traits": [],
        "note": "",
    }


def default_actor() -> Dict[str, Any]:
    return {
        "id": 0,
        "name": "",
        "nickname": "",
        "classId": 1,
        "initialLevel": 1,
        "maxLevel": 99,
        "characterName": "",
        "characterIndex": 0,
        "faceName": "",
        "faceIndex": 0,
        "battlerName": "",
        # weapon, shield, head, body, accessory
        "equips": [0, 0, 0, 0, 0],
        "profile": "",
        "note": "",
    }


def flat_curve(value: int) -> List[int]:
    return [value] * CLASS_LEVEL_SLOTS


def default_class() -> Dict[str, Any]:
    return {
        "id": 0,
        "name": "",
        "expParams": [30, 20, 30, 30],
        "params": [
            flat_curve(100),
            flat_curve(100),
            flat_curve(10),
            flat_curve(10),
            flat_curve(10),
            flat_curve(10),
            flat_curve(10),
            flat_curve(10),
        ],
        "learnings": [],
        "traits": [],
        "note": "",
    }


def default_skill() -> Dict[str, Any]:
    return {
        "id": 0,
        "name": "",
        "description": "",
        "iconIndex": 0,
        "stypeId": 1,
        "scope": Scope.ONE_ENEMY.value,
        "occasion": Occasion.BATTLE.value,
        "mpCost": 0,
        "tpCost": 0,
        "damage": default_damage(DamageType.HP_DAMAGE, "a.atk * 4 - b.def * 2"),
        "effects": [],
        "requiredWtypeId1": 0,
        "requiredWtypeId2": 0,
        "speed": 0,
        "successRate": 100,
        "repeats": 1,
        "tpGain": 0,
        "hitType": 1,
        "animationId": 0,
        "message1": "",
        "message2": "",
        "note": "",
    }


def default_state() -> Dict[str, Any]:
    return {
        "id": 0,
        "name": "",
        "iconIndex": 0,
        "restriction": 0,
        "priority": 50,
        "motion": 0,
        "overlay": 0,
        "removeAtBattleEnd": True,
        "removeByRestriction": False,
        "autoRemovalTiming": 0,
        "minTurns": 1,
        "maxTurns": 1,
        "removeByDamage": False,
        "chanceByDamage": 0,
        "removeByWalking": False,
        "stepsToRemove": 100,
        "message1": "",
        "message2": "",
        "message3": "",
        "message4": "",
        "traits": [],
        "note": "",
    }


def default_enemy() -> Dict[str, Any]:
    return {
        "id": 0,
        "name": "",
        "battlerName": "",
        "battlerHue": 0,
        "params": [100, 0, 10, 10, 10, 10, 10, 10],
        "exp": 0,
        "gold": 0,
        "dropItems": [{"kind": 0, "dataId": 1, "denominator": 1} for _ in range(3)],
        "actions": [],
        "traits": [],
        "note": "",
    }


def _audio() -> Dict[str, Any]:
    return {"name": "", "pan": 0, "pitch": 100, "volume": 90}


def default_map(width: int, height: int) -> Dict[str, Any]:
    """Return an empty map body with ``width * height`` tiles on every layer."""

    return {
        "displayName": "",
        "tilesetId": 1,
        "width": width,
        "height": height,
        "scrollType": ScrollType.NO_LOOP.value,
        "specifyBattleback": False,
        "battleback1Name": "",
        "battleback2Name": "",
        "autoplayBgm": False,
        "bgm": _audio(),
        "autoplayBgs": False,
        "bgs": _audio(),
        "disableDashing": False,
        "encounterList": [],
        "encounterStep": 30,
        "parallaxName": "",
        "parallaxLoopX": False,
        "parallaxLoopY": False,
        "parallaxSx": 0,
        "parallaxSy": 0,
        "parallaxShow": False,
        "data": [0] * (width * height * MAP_LAYER_COUNT),
        "events": [],
        "note": "",
    }


def default_map_info(name: str, *, parent_id: int, order: int) -> Dict[str, Any]:
    return {
        "id": 0,
        "name": name,
        "parentId": parent_id,
        "expanded": False,
        "scrollX": 0,
        "scrollY": 0,
        "order": order,
    }


__all__ = [
    "CLASS_LEVEL_SLOTS",
    "DATABASE_FILES",
    "MAP_LAYER_COUNT",
    "DamageType",
    "EffectCode",
    "ExParameter",
    "ItemType",
    "Occasion",
    "Param",
    "Scope",
    "ScrollType",
    "TraitCode",
    "default_actor",
    "default_armor",
    "default_class",
    "default_damage",
    "default_enemy",
    "default_item",
    "default_map",
    "default_map_info",
    "default_skill",
    "default_state",
    "default_weapon",
    "effect",
    "flat_curve",
    "trait",
]
