"""Pydantic schemas per API squadre di gara (formazioni, panchina, sostituzioni)."""

import uuid
from datetime import datetime

from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel

from app.models.enums import TeamSide


class CamelModel(BaseModel):
    """Nomi camelCase sul filo (startingSlots, playerId, ...), snake_case in Python."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True


# --- Slot e sostituzioni ---


class LineupSlot(CamelModel):
    """Posizione in campo o posto in panchina, eventualmente occupato da un giocatore."""
    position_no: int = Field(ge=1)
    position_name: str = Field(min_length=1)
    player_id: str | None = None
    player_name: str | None = None
    jersey_no: str | None = None

    @field_validator("jersey_no", mode="before")
    @classmethod
    def jersey_as_text(cls, v):
        # il client a volte invia il numero di maglia come intero
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v

    @property
    def is_empty(self) -> bool:
        return self.player_id is None and self.player_name is None


class SubEvent(CamelModel):
    time: datetime
    match_time: int  # secondi
    player_off_id: str
    player_off_name: str
    player_on_id: str
    player_on_name: str


# --- Squad ---


class SquadResponse(CamelModel):
    id: uuid.UUID
    fixture_id: uuid.UUID
    side: TeamSide
    starting_slots: list[LineupSlot]
    bench: list[LineupSlot]
    subs_log: list[SubEvent] = []
    locked: bool
    created_at: datetime
    updated_at: datetime


class SquadUpsertRequest(CamelModel):
    """
    Body POST squads: sovrascrittura completa.
    Array assenti = invariati (default in creazione), array vuoti = slot di default.
    """
    side: TeamSide
    starting_slots: list[LineupSlot] | None = None
    bench: list[LineupSlot] | None = None

    @field_validator("side", mode="before")
    @classmethod
    def side_upper(cls, v):
        # stessa regola del parametro di path: "home" == "HOME"
        return v.upper() if isinstance(v, str) else v


class SquadUpdateRequest(CamelModel):
    """Body PUT squads/{side}: modifica parziale, i campi omessi restano invariati."""
    starting_slots: list[LineupSlot] | None = None
    bench: list[LineupSlot] | None = None


class SubstitutionRequest(CamelModel):
    player_off_id: str = Field(min_length=1)
    player_off_name: str
    player_on_id: str = Field(min_length=1)
    player_on_name: str
    match_time: int = Field(ge=0)


# --- Stato formazioni ---


class LineupStatusResponse(CamelModel):
    has_lineup: bool


class SquadStatusResponse(CamelModel):
    home_ready: bool
    away_ready: bool
