"""Lookup fixture in sola lettura. Il CRUD fixture vive fuori dal Squad Manager."""

import uuid

from sqlalchemy.orm import Session

from app.models import Fixture


def get_fixture(fixture_id: uuid.UUID, db: Session) -> Fixture | None:
    """Fixture per id, None se non esiste."""
    return db.get(Fixture, fixture_id)
