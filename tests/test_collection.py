from __future__ import annotations

import pytest

from rpgmaker_mcp import ABSENT, EntityCollection, ReadFailure, ValidationRejection


def _collection() -> EntityCollection:
    return EntityCollection.from_payload(
        [None, {"id": 1, "name": "Potion"}, None, {"id": 3, "name": "Ether"}, None, None],
        name="Items.json",
    )


def test_from_payload_keeps_slots_and_round_trips() -> None:
    collection = _collection()

    assert collection.limit == 5
    assert collection.get(1) == {"id": 1, "name": "Potion"}
    assert collection.get(2) is None
    assert collection.get(0) is None
    assert collection.get(99) is None
    assert [record["id"] for record in collection.populated()] == [1, 3]
    assert collection.to_payload()[2] is None


@pytest.mark.parametrize(
    "payload",
    [{"id": 1}, [{"id": 0}], [None, 5]],
)
def test_from_payload_rejects_malformed_arrays(payload: object) -> None:
    with pytest.raises(ReadFailure):
        EntityCollection.from_payload(payload, name="Items.json")


def test_new_collection_starts_with_absent_slot() -> None:
    collection = EntityCollection()

    assert collection.to_payload() == [None]
    assert collection.last_populated_id() == 0
    with pytest.raises(ValueError):
        EntityCollection([{"id": 0}])  # type: ignore[list-item]


def test_append_uses_previous_length_as_id() -> None:
    collection = _collection()
    record = {"name": "Elixir"}

    new_id = collection.append(record)

    assert new_id == 6
    assert record["id"] == 6
    assert len(collection) == 7


def test_require_reports_missing_entries() -> None:
    with pytest.raises(ValidationRejection, match="Item ID 2 not found"):
        _collection().require(2, kind="Item")


def test_place_grows_with_absent_slots() -> None:
    collection = EntityCollection()

    collection.place(3, {"name": "Cave"})

    assert collection.to_payload() == [None, None, None, {"name": "Cave", "id": 3}]
    with pytest.raises(ValidationRejection):
        collection.place(3, {"name": "Again"})
    with pytest.raises(ValidationRejection):
        collection.place(0, {"name": "Reserved"})


def test_resize_grows_and_drops_trailing_absent_slots() -> None:
    collection = _collection()

    collection.resize(10)
    assert collection.limit == 10
    assert collection.to_payload()[7:] == [None] * 4

    collection.resize(3)
    assert collection.limit == 3
    assert collection.get(3) == {"id": 3, "name": "Ether"}


def test_resize_refuses_to_drop_populated_entries() -> None:
    collection = _collection()
    before = collection.to_payload()

    with pytest.raises(ValidationRejection, match="Entry at ID 3 has data."):
        collection.resize(2)

    assert collection.to_payload() == before
    with pytest.raises(ValidationRejection):
        collection.resize(0)


def test_absent_marker_is_singleton() -> None:
    collection = EntityCollection([ABSENT, ABSENT])
    assert collection.to_payload() == [None, None]
