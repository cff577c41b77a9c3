"""Fixture ORM model."""

import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, ForeignKey, String, Text, Uuid
from sqlalchemy.orm import relationship

from app.core.database import Base


class Fixture(Base):
    __tablename__ = "fixtures"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    team_id = Column(
        Uuid, ForeignKey("teams.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    opponent = Column(Text, nullable=False)
    venue = Column(Text, nullable=True)
    date = Column(DateTime(timezone=True), nullable=False, index=True)
    status = Column(String(32), nullable=False, default="scheduled")
    home_team_name = Column(Text, nullable=True)
    away_team_name = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc))

    team = relationship("Team")
