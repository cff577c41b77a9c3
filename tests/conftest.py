"""
Fixture condivise: database SQLite in memoria, ricreato per ogni test,
e client HTTP sull'app FastAPI.
"""

import os

os.environ["DATABASE_URL"] = "sqlite://"

from datetime import datetime, timezone  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from app.core.database import Base, SessionLocal, engine  # noqa: E402
from app.lineups.positions import default_bench, default_starting_slots  # noqa: E402
from app.main import app  # noqa: E402
from app.models import Fixture, Team  # noqa: E402


@pytest.fixture
def db():
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db):
    return TestClient(app)


@pytest.fixture
def team(db):
    team = Team(name="Na Fianna")
    db.add(team)
    db.commit()
    db.refresh(team)
    return team


@pytest.fixture
def fixture_row(db, team):
    fixture = Fixture(
        team_id=team.id,
        opponent="St Vincent's",
        date=datetime(2026, 5, 10, 15, 0, tzinfo=timezone.utc),
        home_team_name="Na Fianna",
        away_team_name="St Vincent's",
    )
    db.add(fixture)
    db.commit()
    db.refresh(fixture)
    return fixture


@pytest.fixture
def home_lineup():
    """
    Formazione completa: titolari p1..p15, panchina p16..p30.
    Jane Doe (P7) nello slot 4 e Sue Smith (P22) al posto 16 in panchina.
    """
    starting = [
        slot.model_copy(update={
            "player_id": f"p{slot.position_no}",
            "player_name": f"Player {slot.position_no}",
            "jersey_no": str(slot.position_no),
        })
        for slot in default_starting_slots()
    ]
    bench = [
        slot.model_copy(update={
            "player_id": f"p{slot.position_no}",
            "player_name": f"Player {slot.position_no}",
            "jersey_no": str(slot.position_no),
        })
        for slot in default_bench()
    ]
    starting[3] = starting[3].model_copy(update={"player_id": "P7", "player_name": "Jane Doe", "jersey_no": "7"})
    bench[0] = bench[0].model_copy(update={"player_id": "P22", "player_name": "Sue Smith", "jersey_no": "22"})
    return starting, bench
