"""
Sostituzione in partita: scambio tra un titolare e un giocatore in panchina.

La posizione è una proprietà dello slot, non del giocatore: chi entra eredita
position_no/position_name del titolare uscito, e chi esce prende il posto
in panchina lasciato libero, con la numerazione di quel posto.

Funzioni pure: nessun accesso al DB. Se una precondizione fallisce non viene
restituito nulla e gli slot in ingresso non vengono toccati.
"""

import logging
from datetime import datetime, timezone

from app.core.exceptions import SubstitutionPreconditionError
from app.schemas.squads import LineupSlot, SubEvent

logger = logging.getLogger(__name__)

PLAYER_IDENTITY_FIELDS = ("player_id", "player_name", "jersey_no")


def _find_player(slots: list[LineupSlot], player_id: str) -> int | None:
    for index, slot in enumerate(slots):
        if slot.player_id == player_id:
            return index
    return None


def _with_identity_of(slot: LineupSlot, occupant: LineupSlot) -> LineupSlot:
    """Copia di slot con il giocatore di occupant, posizione invariata."""
    return slot.model_copy(update={f: getattr(occupant, f) for f in PLAYER_IDENTITY_FIELDS})


def apply_substitution(
    starting_slots: list[LineupSlot],
    bench: list[LineupSlot],
    player_off_id: str,
    player_off_name: str,
    player_on_id: str,
    player_on_name: str,
    match_time: int,
    now: datetime | None = None,
) -> tuple[list[LineupSlot], list[LineupSlot], SubEvent]:
    """
    Ritorna (nuovi titolari, nuova panchina, evento da aggiungere al log).

    Raises SubstitutionPreconditionError se player_off_id non è tra i titolari
    o player_on_id non è in panchina.
    """
    off_index = _find_player(starting_slots, player_off_id)
    if off_index is None:
        raise SubstitutionPreconditionError("Player not found in starting lineup")
    on_index = _find_player(bench, player_on_id)
    if on_index is None:
        raise SubstitutionPreconditionError("Player not found in bench")

    outgoing = starting_slots[off_index]
    incoming = bench[on_index]

    new_starting = list(starting_slots)
    new_bench = list(bench)
    new_starting[off_index] = _with_identity_of(outgoing, incoming)
    new_bench[on_index] = _with_identity_of(incoming, outgoing)

    event = SubEvent(
        time=now or datetime.now(timezone.utc),
        match_time=match_time,
        player_off_id=player_off_id,
        player_off_name=player_off_name,
        player_on_id=player_on_id,
        player_on_name=player_on_name,
    )
    logger.debug(
        "Sostituzione: slot %s %s -> %s (panchina %s)",
        outgoing.position_no, player_off_id, player_on_id, incoming.position_no,
    )
    return new_starting, new_bench, event
