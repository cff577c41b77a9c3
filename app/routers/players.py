"""API rosa giocatori per il selettore formazione: elenco e quick-add."""

import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.exceptions import SquadError
from app.core.validation import parse_uuid
from app.schemas.players import PlayerResponse, QuickAddPlayerRequest
from app.services.player_service import list_team_players, quick_add_player

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/teams", tags=["players"])


@router.get("/{team_id}/players", response_model=list[PlayerResponse])
def team_players(team_id: str, db: Session = Depends(get_db)):
    """Rosa del team ordinata per numero di maglia. 404 se team non trovato."""
    try:
        players = list_team_players(parse_uuid(team_id, "teamId"), db)
    except SquadError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    return [PlayerResponse.model_validate(p) for p in players]


@router.post("/{team_id}/players/quick-add", response_model=PlayerResponse)
def quick_add(team_id: str, body: QuickAddPlayerRequest, db: Session = Depends(get_db)):
    """
    Crea un giocatore con nome e maglia opzionale; l'id restituito è subito
    assegnabile a uno slot. 409 se la maglia è già usata nel team.
    """
    try:
        player = quick_add_player(parse_uuid(team_id, "teamId"), body.name, body.jersey_no, db)
    except SquadError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except SQLAlchemyError as e:
        logger.exception("Errore DB quick-add team_id=%s: %s", team_id, e)
        raise HTTPException(status_code=500, detail="Database error")
    return PlayerResponse.model_validate(player)
