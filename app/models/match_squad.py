"""
Squadra di gara per una fixture: 15 titolari, 15 in panchina, log sostituzioni.
Una sola riga per (fixture_id, side). Gli slot sono salvati come JSON con le
chiavi del contratto API (positionNo, positionName, playerId, playerName, jerseyNo).

locked è uno stato di business (formazione congelata a inizio partita);
version_id è il contatore per il controllo di concorrenza ottimistico di
SQLAlchemy e non viene mai esposto nelle risposte.
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import JSON, Boolean, Column, DateTime, Enum, ForeignKey, Index, Integer, Uuid
from sqlalchemy.orm import relationship

from app.core.database import Base
from app.models.enums import TeamSide


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class MatchSquad(Base):
    __tablename__ = "match_squads"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    fixture_id = Column(
        Uuid, ForeignKey("fixtures.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    side = Column(Enum(TeamSide, name="team_side"), nullable=False)
    starting_slots = Column(JSON, nullable=False)
    bench = Column(JSON, nullable=False)
    subs_log = Column(JSON, nullable=False, default=list)
    locked = Column(Boolean, nullable=False, default=False)
    version_id = Column(Integer, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow, onupdate=_utcnow)

    # --- Relazioni ---
    fixture = relationship("Fixture", backref="squads")

    # --- Vincoli ---
    __table_args__ = (
        Index("uq_match_squads_fixture_side", "fixture_id", "side", unique=True),
    )

    __mapper_args__ = {"version_id_col": version_id}
