"""
Servizio rosa giocatori usato dal selettore formazione.
Quick-add: inserimento minimo (nome + maglia opzionale) che restituisce subito
un id utilizzabile in uno slot, senza lasciare la schermata formazioni.
"""

import logging
import uuid

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.exceptions import ConflictError, NotFoundError, ValidationError
from app.models import Player
from app.services.team_service import get_team

logger = logging.getLogger(__name__)


def _require_team(team_id: uuid.UUID, db: Session) -> None:
    if get_team(team_id, db) is None:
        logger.warning("Team non trovato team_id=%s", team_id)
        raise NotFoundError("Team not found")


def list_team_players(team_id: uuid.UUID, db: Session) -> list[Player]:
    """Rosa ordinata per numero di maglia (senza numero in fondo), poi per nome."""
    _require_team(team_id, db)
    stmt = (
        select(Player)
        .where(Player.team_id == team_id)
        .order_by(Player.jersey_no.is_(None), Player.jersey_no, Player.name)
    )
    return list(db.scalars(stmt).all())


def quick_add_player(team_id: uuid.UUID, name: str, jersey_no: int | None, db: Session) -> Player:
    """
    Crea un giocatore con le sole informazioni minime.
    NotFoundError se il team non esiste, ConflictError se la maglia è già usata nel team.
    """
    name = (name or "").strip()
    if not name:
        raise ValidationError("name is required")
    _require_team(team_id, db)

    if jersey_no is not None:
        taken = db.scalar(
            select(Player.id).where(Player.team_id == team_id, Player.jersey_no == jersey_no)
        )
        if taken is not None:
            logger.warning("Maglia %s già assegnata team_id=%s", jersey_no, team_id)
            raise ConflictError(f"Jersey number {jersey_no} is already taken in this team")

    player = Player(team_id=team_id, name=name, jersey_no=jersey_no)
    db.add(player)
    try:
        db.commit()
    except IntegrityError:
        # inserimento concorrente con la stessa maglia
        db.rollback()
        logger.warning("Conflitto maglia %s in inserimento team_id=%s", jersey_no, team_id)
        raise ConflictError(f"Jersey number {jersey_no} is already taken in this team") from None
    db.refresh(player)

    logger.info("Giocatore aggiunto player_id=%s team_id=%s name=%s", player.id, team_id, name)
    return player
