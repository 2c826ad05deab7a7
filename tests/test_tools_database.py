"""Tests for the per-table create/update tools."""

from __future__ import annotations

import json

import pytest

from rpgmaker_mcp import Toolkit


def test_create_item_with_recovery_and_state(toolkit: Toolkit, load_json, current_version) -> None:
    result = toolkit.invoke(
        "create_item",
        {"name": "Hi-Potion", "description": "Heals", "price": 120, "hpRecoveryPercent": 50, "addStateId": 7},
    )

    assert result.is_error is False
    assert result.text == 'Created item "Hi-Potion" with ID 3'
    items = load_json("data/Items.json")
    assert len(items) == 4
    item = items[3]
    assert item["id"] == 3
    assert [effect["code"] for effect in item["effects"]] == [11, 21]
    recover, add_state = item["effects"]
    assert recover["value1"] == 0.5
    assert add_state["dataId"] == 7
    assert add_state["value1"] == 1
    assert item["scope"] == 7
    assert current_version() == 101


def test_create_key_item_without_effects(toolkit: Toolkit, load_json) -> None:
    toolkit.invoke("create_item", {"name": "Lamp", "description": "", "price": 0, "type": "key"})

    item = load_json("data/Items.json")[3]
    assert item["itypeId"] == 2
    assert item["effects"] == []


def test_three_creates_bump_version_three_times(toolkit: Toolkit, current_version) -> None:
    toolkit.invoke("create_item", {"name": "A", "description": "", "price": 1})
    toolkit.invoke("create_weapon", {"name": "B", "description": "", "price": 1})
    toolkit.invoke("create_skill", {"name": "C", "description": ""})

    assert current_version() == 103


def test_get_items_lists_named_records(toolkit: Toolkit) -> None:
    payload = json.loads(toolkit.invoke("get_items").text)

    assert [item["name"] for item in payload] == ["Potion", "Key"]
    assert payload[1]["type"] == "key"


def test_update_item_changes_only_given_fields(toolkit: Toolkit, load_json) -> None:
    result = toolkit.invoke("update_item", {"id": 1, "price": 75})

    assert result.text == 'Updated item "Potion" (ID 1)'
    item = load_json("data/Items.json")[1]
    assert item["price"] == 75
    assert item["description"] == "Restores HP"


def test_update_missing_item_is_rejected(toolkit: Toolkit, project, current_version) -> None:
    before = (project / "data" / "Items.json").read_bytes()

    result = toolkit.invoke("update_item", {"id": 9, "name": "Ghost"})

    assert result.is_error is True
    assert result.text == "Error: Item ID 9 not found"
    assert (project / "data" / "Items.json").read_bytes() == before
    assert current_version() == 100


def test_update_record_without_name_reports_success(toolkit: Toolkit, project, load_json, current_version) -> None:
    (project / "data" / "Items.json").write_text(
        json.dumps([None, {"id": 1, "price": 5}]), encoding="utf-8"
    )

    result = toolkit.invoke("update_item", {"id": 1, "price": 99})

    assert result.is_error is False
    assert result.text == 'Updated item "" (ID 1)'
    assert load_json("data/Items.json")[1] == {"id": 1, "price": 99}
    assert current_version() == 101


@pytest.mark.parametrize(
    "filename, tool, arguments, index",
    [
        ("Weapons.json", "update_weapon", {"id": 1, "attack": 12}, 2),
        ("Armors.json", "update_armor", {"id": 1, "def": 6}, 3),
        ("Armors.json", "update_armor", {"id": 1, "mdf": 4}, 5),
        ("Enemies.json", "update_enemy", {"id": 1, "maxHp": 300}, 0),
        ("Enemies.json", "update_enemy", {"id": 1, "atk": 40}, 2),
    ],
)
@pytest.mark.parametrize("params", [None, [], [1]])
def test_update_pads_missing_or_short_params(
    toolkit: Toolkit, project, load_json, filename: str, tool: str, arguments: dict, index: int, params
) -> None:
    record = {"id": 1, "name": "Old"}
    if params is not None:
        record["params"] = params
    (project / "data" / filename).write_text(json.dumps([None, record]), encoding="utf-8")

    result = toolkit.invoke(tool, arguments)

    assert result.is_error is False
    stored = load_json(f"data/{filename}")[1]["params"]
    assert len(stored) == max(index + 1, len(params or []))
    assert stored[index] == next(value for key, value in arguments.items() if key != "id")
    if params and index > 0:
        assert stored[0] == params[0]


def test_create_weapon_sets_attack_and_element(toolkit: Toolkit, load_json) -> None:
    toolkit.invoke(
        "create_weapon",
        {"name": "Flame Sword", "description": "", "price": 500, "attack": 25, "elementId": 2},
    )

    weapon = load_json("data/Weapons.json")[2]
    assert weapon["params"][2] == 25
    assert weapon["traits"] == [{"code": 31, "dataId": 2, "value": 1}]


def test_update_weapon_attack(toolkit: Toolkit, load_json) -> None:
    toolkit.invoke("update_weapon", {"id": 1, "attack": 12})

    assert load_json("data/Weapons.json")[1]["params"][2] == 12


def test_create_armor_accepts_def_alias(toolkit: Toolkit, load_json) -> None:
    toolkit.invoke(
        "create_armor",
        {"name": "Helm", "description": "", "price": 100, "etypeId": 3, "def": 6, "mdf": 2, "agi": 1},
    )

    armor = load_json("data/Armors.json")[2]
    assert armor["params"][3] == 6
    assert armor["params"][5] == 2
    assert armor["params"][6] == 1
    assert armor["etypeId"] == 3


def test_create_and_update_actor(toolkit: Toolkit, load_json) -> None:
    toolkit.invoke("create_actor", {"name": "Priscilla", "classId": 2, "faceName": "Actor1", "faceIndex": 3})
    toolkit.invoke("update_actor", {"id": 2, "nickname": "Healer"})

    actor = load_json("data/Actors.json")[2]
    assert actor["classId"] == 2
    assert actor["faceIndex"] == 3
    assert actor["nickname"] == "Healer"


def test_create_class_uses_flat_curves(toolkit: Toolkit, load_json) -> None:
    toolkit.invoke("create_class", {"name": "Mage", "maxHp": 300, "maxMp": 120, "atk": 10, "def": 12})

    entry = load_json("data/Classes.json")[2]
    assert entry["expParams"][:2] == [30, 30]
    assert entry["params"][0] == [300] * 100
    assert entry["params"][1] == [120] * 100
    assert entry["params"][3] == [12] * 100


def test_create_and_update_skill(toolkit: Toolkit, load_json) -> None:
    toolkit.invoke(
        "create_skill",
        {"name": "Fire", "description": "", "mpCost": 5, "scope": 2, "damageType": 1, "damageFormula": "100 + a.mat"},
    )
    toolkit.invoke("update_skill", {"id": 2, "damageFormula": "200 + a.mat"})

    skill = load_json("data/Skills.json")[2]
    assert skill["mpCost"] == 5
    assert skill["scope"] == 2
    assert skill["damage"]["formula"] == "200 + a.mat"


def test_create_state_with_mp_regeneration(toolkit: Toolkit, load_json) -> None:
    result = toolkit.invoke(
        "create_state",
        {"name": "Focus", "chanceByDamage": 50, "regenerateMpRate": 10},
    )

    assert result.text == 'Created state "Focus" with ID 3'
    state = load_json("data/States.json")[3]
    assert state["removeByDamage"] is True
    assert state["traits"] == [{"code": 22, "dataId": 8, "value": 0.1}]


def test_create_enemy_fills_params(toolkit: Toolkit, load_json) -> None:
    toolkit.invoke("create_enemy", {"name": "Slime", "maxHp": 80, "atk": 12, "def": 5, "gold": 4})
    toolkit.invoke("update_enemy", {"id": 2, "maxHp": 90})

    enemy = load_json("data/Enemies.json")[2]
    assert enemy["params"] == [90, 0, 12, 5, 10, 10, 10, 10]
    assert enemy["battlerName"] == "Slime"
    assert enemy["gold"] == 4


def test_get_database_info_counts_named_records(toolkit: Toolkit) -> None:
    summary = json.loads(toolkit.invoke("get_database_info").text)

    assert summary["items"] == {"count": 2}
    assert summary["states"] == {"count": 1}
    assert set(summary) == {"actors", "classes", "skills", "items", "weapons", "armors", "enemies", "states"}


@pytest.mark.parametrize(
    "name, arguments",
    [
        ("create_item", {"name": "A", "description": "", "price": -1}),
        ("create_item", {"description": "", "price": 1}),
        ("create_state", {"name": "A", "priority": 101}),
        ("update_armor", {"id": 0}),
    ],
)
def test_invalid_arguments_are_reported(toolkit: Toolkit, name: str, arguments: dict, current_version) -> None:
    result = toolkit.invoke(name, arguments)

    assert result.is_error is True
    assert result.text.startswith("Error: Invalid arguments")
    assert current_version() == 100
