"""Pydantic schemas per la rosa giocatori (quick-add dal selettore formazione)."""

import uuid

from pydantic import Field

from app.schemas.squads import CamelModel


class QuickAddPlayerRequest(CamelModel):
    name: str = Field(min_length=1)
    jersey_no: int | None = Field(default=None, ge=0)


class PlayerResponse(CamelModel):
    id: uuid.UUID
    team_id: uuid.UUID
    name: str
    jersey_no: int | None = None
    positions: str | None = None
