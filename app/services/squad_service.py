"""
Squad Manager: lettura, creazione, modifica, sostituzioni e blocco delle due
squadre di gara (HOME/AWAY) di una fixture.

Due percorsi di scrittura distinti, da non unificare:
  - replace_squad: sovrascrittura completa, ignora locked (il client la usa
    per "forzare" la formazione)
  - edit_squad: modifica parziale, rifiutata con ConflictError se locked

locked è uno stato di business. Le scritture concorrenti sulla stessa riga
sono invece gestite dal version_id del modello (StaleDataError -> ConflictError).
"""

import logging
import uuid
from typing import Any

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from sqlalchemy.orm.exc import StaleDataError

from app.core.exceptions import (
    ConflictError,
    NotFoundError,
    SubstitutionPreconditionError,
    ValidationError,
)
from app.lineups.positions import (
    STARTING_SIZE,
    default_bench,
    default_starting_slots,
    placeholder_bench,
    placeholder_starting_slots,
)
from app.lineups.slots import slots_from_json, slots_to_json, validate_bench, validate_starting_slots
from app.lineups.substitution import apply_substitution
from app.models import Fixture, MatchSquad, TeamSide
from app.schemas.squads import LineupSlot
from app.services.fixture_service import get_fixture

logger = logging.getLogger(__name__)

SIDE_ORDER = {TeamSide.HOME: 0, TeamSide.AWAY: 1}


# ---------------------------------------------------------------------------
# Helper
# ---------------------------------------------------------------------------


def _require_fixture(fixture_id: uuid.UUID, db: Session) -> Fixture:
    fixture = get_fixture(fixture_id, db)
    if fixture is None:
        logger.warning("Fixture non trovata fixture_id=%s", fixture_id)
        raise NotFoundError("Fixture not found")
    return fixture


def _find_squad(fixture_id: uuid.UUID, side: TeamSide, db: Session) -> MatchSquad | None:
    return db.scalar(
        select(MatchSquad).where(MatchSquad.fixture_id == fixture_id, MatchSquad.side == side)
    )


def _require_squad(fixture_id: uuid.UUID, side: TeamSide, db: Session) -> MatchSquad:
    squad = _find_squad(fixture_id, side, db)
    if squad is None:
        logger.warning("Squadra non trovata fixture_id=%s side=%s", fixture_id, side.value)
        raise NotFoundError("Squad not found")
    return squad


def _load_squads(fixture_id: uuid.UUID, db: Session) -> list[MatchSquad]:
    squads = db.scalars(select(MatchSquad).where(MatchSquad.fixture_id == fixture_id)).all()
    return sorted(squads, key=lambda s: SIDE_ORDER[s.side])


def _commit(squad: MatchSquad, db: Session) -> MatchSquad:
    """Commit + refresh. Una scrittura concorrente sulla stessa riga diventa ConflictError."""
    # dopo un flush fallito gli attributi non sono leggibili fino al rollback
    squad_id, fixture_id, side = squad.id, squad.fixture_id, squad.side
    try:
        db.commit()
    except StaleDataError:
        db.rollback()
        logger.warning(
            "Scrittura concorrente su squadra id=%s fixture_id=%s side=%s",
            squad_id, fixture_id, side.value,
        )
        raise ConflictError("Squad was modified concurrently, reload and retry") from None
    db.refresh(squad)
    return squad


def _insert_squad(
    fixture_id: uuid.UUID,
    side: TeamSide,
    starting_slots: list[LineupSlot],
    bench: list[LineupSlot],
    db: Session,
) -> MatchSquad:
    """
    Inserisce una nuova squadra. IntegrityError (indice unico fixture/side,
    inserimento concorrente) viene propagato dopo il rollback: nessuna riga parziale.
    """
    squad = MatchSquad(
        fixture_id=fixture_id,
        side=side,
        starting_slots=slots_to_json(starting_slots),
        bench=slots_to_json(bench),
        subs_log=[],
        locked=False,
    )
    db.add(squad)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise
    db.refresh(squad)
    logger.info("Squadra creata id=%s fixture_id=%s side=%s", squad.id, fixture_id, side.value)
    return squad


def _ensure_away_squad(fixture_id: uuid.UUID, db: Session) -> MatchSquad:
    """
    Upsert-on-read della squadra AWAY segnaposto.
    Se un'altra richiesta la crea nello stesso istante vince l'indice unico:
    si rilegge la riga del vincitore invece di crearne una seconda.
    """
    try:
        return _insert_squad(
            fixture_id, TeamSide.AWAY, placeholder_starting_slots(), placeholder_bench(), db,
        )
    except IntegrityError:
        logger.info("Squadra AWAY creata in concorrenza fixture_id=%s, rilettura", fixture_id)
        squad = _find_squad(fixture_id, TeamSide.AWAY, db)
        if squad is None:
            raise
        return squad


def _creation_slots(side: TeamSide) -> tuple[list[LineupSlot], list[LineupSlot]]:
    if side is TeamSide.AWAY:
        return placeholder_starting_slots(), placeholder_bench()
    return default_starting_slots(), default_bench()


# ---------------------------------------------------------------------------
# Letture
# ---------------------------------------------------------------------------


def get_squads(fixture_id: uuid.UUID, db: Session) -> list[MatchSquad]:
    """
    Squadre della fixture, HOME prima di AWAY.
    Se la AWAY non esiste viene creata con i segnaposto 'Away #n' e salvata,
    così le letture successive restituiscono sempre la stessa riga.
    La HOME può mancare: il client la tratta come vuota.
    """
    _require_fixture(fixture_id, db)
    squads = _load_squads(fixture_id, db)
    if not any(s.side is TeamSide.AWAY for s in squads):
        squads.append(_ensure_away_squad(fixture_id, db))
    return squads


def get_lineup_status(fixture_id: uuid.UUID, db: Session) -> dict[str, bool]:
    """has_lineup: esiste almeno una squadra per la fixture."""
    _require_fixture(fixture_id, db)
    exists = db.scalar(select(MatchSquad.id).where(MatchSquad.fixture_id == fixture_id).limit(1))
    return {"has_lineup": exists is not None}


def get_squad_status(fixture_id: uuid.UUID, db: Session) -> dict[str, bool]:
    """
    home_ready/away_ready: la squadra esiste e ha titolari non vuoti.
    Controllo volutamente lasco: non verifica che i 15 slot abbiano un giocatore.
    """
    _require_fixture(fixture_id, db)
    by_side = {s.side: s for s in _load_squads(fixture_id, db)}

    def ready(side: TeamSide) -> bool:
        squad = by_side.get(side)
        return squad is not None and bool(squad.starting_slots)

    return {"home_ready": ready(TeamSide.HOME), "away_ready": ready(TeamSide.AWAY)}


# ---------------------------------------------------------------------------
# Scritture
# ---------------------------------------------------------------------------


def replace_squad(
    fixture_id: uuid.UUID,
    side: TeamSide,
    starting_slots: list[LineupSlot] | None,
    bench: list[LineupSlot] | None,
    db: Session,
) -> MatchSquad:
    """
    Upsert incondizionato: sostituisce titolari e panchina, anche se la squadra è bloccata.

    In creazione un array assente o vuoto diventa slot di default (segnaposto
    'Away #n' per la AWAY). Su una squadra esistente un array assente lascia la
    colonna invariata, un array vuoto la riporta agli slot vuoti del catalogo.
    """
    _require_fixture(fixture_id, db)
    new_starting = validate_starting_slots(starting_slots) if starting_slots else None
    new_bench = validate_bench(bench) if bench else None

    existing = _find_squad(fixture_id, side, db)
    if existing is None:
        creation_starting, creation_bench = _creation_slots(side)
        try:
            return _insert_squad(
                fixture_id, side, new_starting or creation_starting, new_bench or creation_bench, db,
            )
        except IntegrityError:
            existing = _find_squad(fixture_id, side, db)
            if existing is None:
                raise
            logger.info("Squadra %s creata in concorrenza fixture_id=%s, aggiorno", side.value, fixture_id)

    if starting_slots is not None:
        existing.starting_slots = slots_to_json(new_starting or default_starting_slots())
    if bench is not None:
        existing.bench = slots_to_json(new_bench or default_bench())
    squad = _commit(existing, db)
    logger.info("Squadra sovrascritta id=%s fixture_id=%s side=%s", squad.id, fixture_id, side.value)
    return squad


def edit_squad(
    fixture_id: uuid.UUID,
    side: TeamSide,
    starting_slots: list[LineupSlot] | None,
    bench: list[LineupSlot] | None,
    db: Session,
) -> MatchSquad:
    """
    Modifica parziale prima del fischio d'inizio: applica solo gli array forniti.
    NotFoundError se la squadra non esiste, ConflictError se è bloccata.
    """
    _require_fixture(fixture_id, db)
    squad = _require_squad(fixture_id, side, db)
    if squad.locked:
        logger.warning("Modifica rifiutata, squadra bloccata fixture_id=%s side=%s", fixture_id, side.value)
        raise ConflictError("Squad is locked and cannot be updated")

    if starting_slots is not None and not starting_slots:
        raise ValidationError("startingSlots cannot be empty")
    if bench is not None and not bench:
        raise ValidationError("bench cannot be empty")

    # validazione completa prima di toccare l'entità
    new_starting = validate_starting_slots(starting_slots) if starting_slots is not None else None
    new_bench = validate_bench(bench) if bench is not None else None

    if new_starting is None and new_bench is None:
        return squad
    if new_starting is not None:
        squad.starting_slots = slots_to_json(new_starting)
    if new_bench is not None:
        squad.bench = slots_to_json(new_bench)

    squad = _commit(squad, db)
    logger.info("Squadra aggiornata id=%s fixture_id=%s side=%s", squad.id, fixture_id, side.value)
    return squad


def record_substitution(
    fixture_id: uuid.UUID,
    side: TeamSide,
    player_off_id: str,
    player_off_name: str,
    player_on_id: str,
    player_on_name: str,
    match_time: int,
    db: Session,
) -> MatchSquad:
    """
    Scambia un titolare con un giocatore in panchina e aggiunge l'evento al subs_log.
    Non controlla locked: le sostituzioni avvengono a partita iniziata.
    """
    _require_fixture(fixture_id, db)
    squad = _require_squad(fixture_id, side, db)

    try:
        new_starting, new_bench, event = apply_substitution(
            slots_from_json(squad.starting_slots),
            slots_from_json(squad.bench),
            player_off_id, player_off_name,
            player_on_id, player_on_name,
            match_time,
        )
    except SubstitutionPreconditionError as e:
        logger.warning(
            "Sostituzione rifiutata fixture_id=%s side=%s off=%s on=%s: %s",
            fixture_id, side.value, player_off_id, player_on_id, e,
        )
        raise

    subs_log: list[dict[str, Any]] = list(squad.subs_log or [])
    subs_log.append(event.model_dump(mode="json", by_alias=True))

    squad.starting_slots = slots_to_json(new_starting)
    squad.bench = slots_to_json(new_bench)
    squad.subs_log = subs_log
    squad = _commit(squad, db)

    logger.info(
        "Sostituzione registrata fixture_id=%s side=%s off=%s on=%s match_time=%s",
        fixture_id, side.value, player_off_id, player_on_id, match_time,
    )
    return squad


def create_away_placeholders(fixture_id: uuid.UUID, db: Session) -> MatchSquad:
    """Crea esplicitamente la AWAY segnaposto. ConflictError se esiste già."""
    _require_fixture(fixture_id, db)
    if _find_squad(fixture_id, TeamSide.AWAY, db) is not None:
        logger.warning("Squadra AWAY già presente fixture_id=%s", fixture_id)
        raise ConflictError("AWAY squad already exists for this fixture")
    try:
        return _insert_squad(
            fixture_id, TeamSide.AWAY, placeholder_starting_slots(), placeholder_bench(), db,
        )
    except IntegrityError:
        raise ConflictError("AWAY squad already exists for this fixture") from None


def lock_squads(fixture_id: uuid.UUID, db: Session) -> list[MatchSquad]:
    """
    Blocca entrambe le squadre a inizio partita. Idempotente, senza sblocco.
    ConflictError se manca una delle due squadre.
    """
    _require_fixture(fixture_id, db)
    squads = _load_squads(fixture_id, db)
    present = {s.side for s in squads}
    missing = [side.value for side in TeamSide if side not in present]
    if missing:
        logger.warning("Blocco rifiutato fixture_id=%s, squadre mancanti: %s", fixture_id, missing)
        raise ConflictError(f"Both HOME and AWAY squads are required (missing: {', '.join(missing)})")

    changed = False
    for squad in squads:
        assigned = sum(1 for slot in slots_from_json(squad.starting_slots) if not slot.is_empty)
        if assigned < STARTING_SIZE:
            logger.warning(
                "Squadra %s incompleta (%s/%s titolari), blocco comunque fixture_id=%s",
                squad.side.value, assigned, STARTING_SIZE, fixture_id,
            )
        if not squad.locked:
            squad.locked = True
            changed = True

    if changed:
        try:
            db.commit()
        except StaleDataError:
            db.rollback()
            raise ConflictError("Squad was modified concurrently, reload and retry") from None
        for squad in squads:
            db.refresh(squad)
        logger.info("Squadre bloccate fixture_id=%s", fixture_id)
    return squads
