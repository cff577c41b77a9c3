"""Team ORM model. Solo i campi letti dal Squad Manager; il CRUD squadre è altrove."""

import uuid

from sqlalchemy import Column, String, Uuid

from app.core.database import Base


class Team(Base):
    __tablename__ = "teams"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(String(255), nullable=False)
