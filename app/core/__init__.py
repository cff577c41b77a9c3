from app.core.config import get_database_url
from app.core.database import Base, SessionLocal, engine, get_db, init_db
from app.core.exceptions import (
    ConflictError,
    NotFoundError,
    SquadError,
    SubstitutionPreconditionError,
    ValidationError,
)

__all__ = [
    "get_database_url",
    "Base",
    "SessionLocal",
    "engine",
    "get_db",
    "init_db",
    "SquadError",
    "ValidationError",
    "NotFoundError",
    "ConflictError",
    "SubstitutionPreconditionError",
]
