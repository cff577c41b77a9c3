"""
API squadre di gara per fixture: formazioni HOME/AWAY, panchina,
sostituzioni, blocco a inizio partita e stato formazioni.
La logica è nel service; qui solo validazione path param e mappatura errori.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.exceptions import SquadError
from app.core.validation import parse_side, parse_uuid
from app.schemas.squads import (
    LineupStatusResponse,
    SquadResponse,
    SquadStatusResponse,
    SquadUpdateRequest,
    SquadUpsertRequest,
    SubstitutionRequest,
)
from app.services import squad_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/fixtures", tags=["squads"])


def _http_error(e: SquadError) -> HTTPException:
    return HTTPException(status_code=e.status_code, detail=e.message)


def _db_error(e: SQLAlchemyError, fixture_id: str, action: str) -> HTTPException:
    logger.exception("Errore DB %s fixture_id=%s: %s", action, fixture_id, e)
    return HTTPException(status_code=500, detail="Database error")


@router.get("/{fixture_id}/squads", response_model=list[SquadResponse])
def list_squads(fixture_id: str, db: Session = Depends(get_db)):
    """
    Restituisce le squadre della fixture (HOME se presente, AWAY sempre).
    Se la AWAY non esiste viene creata con segnaposto 'Away #n'. 404 se fixture non trovata.
    """
    try:
        squads = squad_service.get_squads(parse_uuid(fixture_id, "fixtureId"), db)
    except SquadError as e:
        raise _http_error(e)
    except SQLAlchemyError as e:
        raise _db_error(e, fixture_id, "lettura squadre")
    return [SquadResponse.model_validate(s) for s in squads]


@router.post("/{fixture_id}/squads", response_model=SquadResponse)
def upsert_squad(fixture_id: str, body: SquadUpsertRequest, db: Session = Depends(get_db)):
    """
    Crea o sovrascrive la squadra per il lato indicato. Non controlla locked.
    AWAY creata senza slot -> segnaposto.
    """
    try:
        squad = squad_service.replace_squad(
            parse_uuid(fixture_id, "fixtureId"), body.side,
            body.starting_slots, body.bench, db,
        )
    except SquadError as e:
        raise _http_error(e)
    except SQLAlchemyError as e:
        raise _db_error(e, fixture_id, "upsert squadra")
    return SquadResponse.model_validate(squad)


@router.post("/{fixture_id}/squads/lock", response_model=list[SquadResponse])
def lock_squads(fixture_id: str, db: Session = Depends(get_db)):
    """Blocca HOME e AWAY a inizio partita. 409 se una delle due manca. Idempotente."""
    try:
        squads = squad_service.lock_squads(parse_uuid(fixture_id, "fixtureId"), db)
    except SquadError as e:
        raise _http_error(e)
    except SQLAlchemyError as e:
        raise _db_error(e, fixture_id, "blocco squadre")
    return [SquadResponse.model_validate(s) for s in squads]


@router.post("/{fixture_id}/squads/away/placeholders", response_model=SquadResponse)
def create_away_placeholders(fixture_id: str, db: Session = Depends(get_db)):
    """Crea la squadra AWAY segnaposto. 409 se esiste già."""
    try:
        squad = squad_service.create_away_placeholders(parse_uuid(fixture_id, "fixtureId"), db)
    except SquadError as e:
        raise _http_error(e)
    except SQLAlchemyError as e:
        raise _db_error(e, fixture_id, "creazione segnaposto")
    return SquadResponse.model_validate(squad)


@router.put("/{fixture_id}/squads/{side}", response_model=SquadResponse)
def update_squad(fixture_id: str, side: str, body: SquadUpdateRequest, db: Session = Depends(get_db)):
    """Modifica parziale. 404 se la squadra non esiste, 409 se bloccata."""
    try:
        squad = squad_service.edit_squad(
            parse_uuid(fixture_id, "fixtureId"), parse_side(side),
            body.starting_slots, body.bench, db,
        )
    except SquadError as e:
        raise _http_error(e)
    except SQLAlchemyError as e:
        raise _db_error(e, fixture_id, "modifica squadra")
    return SquadResponse.model_validate(squad)


@router.post("/{fixture_id}/squads/{side}/substitute", response_model=SquadResponse)
def substitute(fixture_id: str, side: str, body: SubstitutionRequest, db: Session = Depends(get_db)):
    """
    Registra una sostituzione: chi entra prende la posizione di chi esce.
    400 se il giocatore in uscita non è titolare o quello in entrata non è in panchina.
    """
    try:
        squad = squad_service.record_substitution(
            parse_uuid(fixture_id, "fixtureId"), parse_side(side),
            body.player_off_id, body.player_off_name,
            body.player_on_id, body.player_on_name,
            body.match_time, db,
        )
    except SquadError as e:
        raise _http_error(e)
    except SQLAlchemyError as e:
        raise _db_error(e, fixture_id, "sostituzione")
    return SquadResponse.model_validate(squad)


@router.get("/{fixture_id}/lineup-status", response_model=LineupStatusResponse)
def lineup_status(fixture_id: str, db: Session = Depends(get_db)):
    try:
        status = squad_service.get_lineup_status(parse_uuid(fixture_id, "fixtureId"), db)
    except SquadError as e:
        raise _http_error(e)
    except SQLAlchemyError as e:
        raise _db_error(e, fixture_id, "stato formazione")
    return LineupStatusResponse(**status)


@router.get("/{fixture_id}/squad-status", response_model=SquadStatusResponse)
def squad_status(fixture_id: str, db: Session = Depends(get_db)):
    """homeReady/awayReady: squadra presente con titolari non vuoti."""
    try:
        status = squad_service.get_squad_status(parse_uuid(fixture_id, "fixtureId"), db)
    except SquadError as e:
        raise _http_error(e)
    except SQLAlchemyError as e:
        raise _db_error(e, fixture_id, "stato squadre")
    return SquadStatusResponse(**status)
