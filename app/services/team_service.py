"""Lookup squadra (team) in sola lettura."""

import uuid

from sqlalchemy.orm import Session

from app.models import Team


def get_team(team_id: uuid.UUID, db: Session) -> Team | None:
    return db.get(Team, team_id)
