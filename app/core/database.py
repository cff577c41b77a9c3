"""SQLAlchemy engine, session, dependency e creazione schema."""

import logging

from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.config import get_database_url, get_sql_echo

logger = logging.getLogger(__name__)


def _engine_kwargs(url: str) -> dict:
    """
    Opzioni engine per dialetto.
    SQLite (test/sviluppo locale): connessione condivisa tra thread,
    e per il database in memoria un solo pool statico, altrimenti ogni
    connessione vedrebbe un database vuoto.
    """
    if not url.startswith("sqlite"):
        return {"pool_pre_ping": True}
    kwargs: dict = {"connect_args": {"check_same_thread": False}}
    if url in ("sqlite://", "sqlite:///:memory:"):
        kwargs["poolclass"] = StaticPool
    return kwargs


_url = get_database_url()
engine = create_engine(_url, echo=get_sql_echo(), **_engine_kwargs(_url))

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()


def get_db():
    """Dependency that yields a DB session. Caller must close."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db() -> None:
    """
    Crea tutte le tabelle mancanti (create_all non altera tabelle esistenti).
    I modelli devono essere importati prima per registrare i metadata.
    """
    from app.models import fixture, match_squad, player, team  # noqa: F401

    Base.metadata.create_all(bind=engine)
    logger.info("create_all completato")
