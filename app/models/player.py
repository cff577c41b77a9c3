"""Player ORM model. Rosa della squadra; il numero di maglia è unico per team."""

import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, ForeignKey, Index, Integer, Text, Uuid
from sqlalchemy.orm import relationship

from app.core.database import Base


class Player(Base):
    __tablename__ = "players"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    team_id = Column(
        Uuid, ForeignKey("teams.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    name = Column(Text, nullable=False)
    jersey_no = Column(Integer, nullable=True)
    positions = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc))

    team = relationship("Team", backref="players")

    # --- Vincoli ---
    __table_args__ = (
        Index("uq_players_team_jersey", "team_id", "jersey_no", unique=True),
    )
