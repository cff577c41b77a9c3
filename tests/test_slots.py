"""Tests for slot array validation and JSON conversion."""

import pytest

from app.core.exceptions import ValidationError
from app.lineups.positions import default_bench, default_starting_slots
from app.lineups.slots import slots_from_json, slots_to_json, validate_bench, validate_starting_slots
from app.schemas.squads import LineupSlot


def test_valid_starting_slots_are_sorted():
    slots = list(reversed(default_starting_slots()))
    result = validate_starting_slots(slots)
    assert [s.position_no for s in result] == list(range(1, 16))


def test_starting_slots_wrong_length():
    with pytest.raises(ValidationError, match="exactly 15"):
        validate_starting_slots(default_starting_slots()[:14])


def test_starting_slots_duplicate_position():
    slots = default_starting_slots()
    slots[14] = slots[14].model_copy(update={"position_no": 1})
    with pytest.raises(ValidationError, match="duplicate"):
        validate_starting_slots(slots)


def test_starting_slots_out_of_range():
    slots = default_starting_slots()
    slots[14] = slots[14].model_copy(update={"position_no": 16})
    with pytest.raises(ValidationError, match="1..15"):
        validate_starting_slots(slots)


def test_bench_must_use_16_to_30():
    bench = [LineupSlot(position_no=n, position_name=f"Bench {n}") for n in range(1, 16)]
    with pytest.raises(ValidationError, match="16..30"):
        validate_bench(bench)
    assert len(validate_bench(default_bench())) == 15


def test_json_uses_camel_case_keys():
    raw = slots_to_json([LineupSlot(position_no=1, position_name="GK", player_id="p1", jersey_no=1)])
    assert raw == [{
        "positionNo": 1,
        "positionName": "GK",
        "playerId": "p1",
        "playerName": None,
        "jerseyNo": "1",
    }]
    assert slots_from_json(raw)[0].player_id == "p1"
    assert slots_from_json(None) == []
