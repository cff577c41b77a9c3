"""
Catalogo posizioni gaelic football/hurling: 15 titolari in ordine fisso
(portiere, sei difensori, due centrocampisti, sei attaccanti) e 15 posti
in panchina numerati 16-30.

Unico punto di partenza per qualsiasi squadra appena creata.
"""

from app.schemas.squads import LineupSlot

# ---------------------------------------------------------------------------
# Costanti
# ---------------------------------------------------------------------------

STARTING_POSITIONS: tuple[tuple[int, str], ...] = (
    (1, "GK (Goalkeeper)"),
    (2, "RCB (R Corner Back)"),
    (3, "FB (Full Back)"),
    (4, "LCB (L Corner Back)"),
    (5, "RHB (R Half Back)"),
    (6, "CB (Centre Back)"),
    (7, "LHB (L Half Back)"),
    (8, "MF (Midfield)"),
    (9, "MF (Midfield)"),
    (10, "RHF (R Half Forward)"),
    (11, "CF (Centre Forward)"),
    (12, "LHF (L Half Forward)"),
    (13, "RCF (R Corner Forward)"),
    (14, "FF (Full Forward)"),
    (15, "LCF (L Corner Forward)"),
)

STARTING_SIZE = len(STARTING_POSITIONS)
BENCH_SIZE = 15
BENCH_FIRST_NO = STARTING_SIZE + 1

STARTING_NUMBERS = frozenset(no for no, _ in STARTING_POSITIONS)
BENCH_NUMBERS = frozenset(range(BENCH_FIRST_NO, BENCH_FIRST_NO + BENCH_SIZE))

AWAY_PLACEHOLDER_PREFIX = "Away #"


# ---------------------------------------------------------------------------
# Generazione slot
# ---------------------------------------------------------------------------


def bench_position_name(position_no: int) -> str:
    """16 -> 'Bench 1', 30 -> 'Bench 15'."""
    return f"Bench {position_no - STARTING_SIZE}"


def default_starting_slots() -> list[LineupSlot]:
    return [LineupSlot(position_no=no, position_name=name) for no, name in STARTING_POSITIONS]


def default_bench() -> list[LineupSlot]:
    return [
        LineupSlot(position_no=no, position_name=bench_position_name(no))
        for no in sorted(BENCH_NUMBERS)
    ]


def placeholder_name(position_no: int) -> str:
    return f"{AWAY_PLACEHOLDER_PREFIX}{position_no}"


def placeholder_starting_slots() -> list[LineupSlot]:
    """Titolari segnaposto per l'avversario: 'Away #1'..'Away #15', senza player_id."""
    return [
        slot.model_copy(update={"player_name": placeholder_name(slot.position_no)})
        for slot in default_starting_slots()
    ]


def placeholder_bench() -> list[LineupSlot]:
    """Panchina segnaposto: 'Away #16'..'Away #30', senza player_id."""
    return [
        slot.model_copy(update={"player_name": placeholder_name(slot.position_no)})
        for slot in default_bench()
    ]
