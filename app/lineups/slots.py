"""
Normalizzazione e validazione degli array di slot in ingresso.

Invarianti garantite su ogni squadra salvata:
  - titolari: esattamente 15 slot, position_no = 1..15, uno per posizione
  - panchina: esattamente 15 slot, position_no = 16..30
  - ordinamento per position_no
"""

from typing import Any, Iterable

from app.core.exceptions import ValidationError
from app.lineups.positions import BENCH_NUMBERS, BENCH_SIZE, STARTING_NUMBERS, STARTING_SIZE
from app.schemas.squads import LineupSlot


def _check_slots(
    slots: list[LineupSlot],
    field: str,
    expected_size: int,
    expected_numbers: frozenset[int],
) -> list[LineupSlot]:
    if len(slots) != expected_size:
        raise ValidationError(f"{field} must contain exactly {expected_size} slots (got {len(slots)})")
    numbers = [s.position_no for s in slots]
    if len(set(numbers)) != len(numbers):
        raise ValidationError(f"{field} contains duplicate positionNo values")
    if set(numbers) != expected_numbers:
        lo, hi = min(expected_numbers), max(expected_numbers)
        raise ValidationError(f"{field} positionNo values must be {lo}..{hi}")
    return sorted(slots, key=lambda s: s.position_no)


def validate_starting_slots(slots: list[LineupSlot]) -> list[LineupSlot]:
    return _check_slots(slots, "startingSlots", STARTING_SIZE, STARTING_NUMBERS)


def validate_bench(slots: list[LineupSlot]) -> list[LineupSlot]:
    return _check_slots(slots, "bench", BENCH_SIZE, BENCH_NUMBERS)


def slots_to_json(slots: Iterable[LineupSlot]) -> list[dict[str, Any]]:
    """Forma salvata nelle colonne JSON: chiavi camelCase del contratto API."""
    return [s.model_dump(mode="json", by_alias=True) for s in slots]


def slots_from_json(raw: list[dict[str, Any]] | None) -> list[LineupSlot]:
    return [LineupSlot.model_validate(d) for d in raw or []]
