"""Validazione identificativi dei path param prima di qualsiasi lookup."""

import uuid

from app.core.exceptions import ValidationError
from app.models.enums import TeamSide


def parse_uuid(value: str | None, param_name: str) -> uuid.UUID:
    """
    Converte un path param in UUID.
    Rifiuta valori mancanti, le stringhe 'undefined'/'null' inviate dal client
    e qualunque formato non UUID, con un messaggio che nomina il parametro.
    """
    if not value or not isinstance(value, str):
        raise ValidationError(f"{param_name} is required and must be a string")
    if value in ("undefined", "null"):
        raise ValidationError(f"{param_name} cannot be '{value}'")
    try:
        return uuid.UUID(value)
    except ValueError:
        raise ValidationError(f"{param_name} must be a valid UUID") from None


def parse_side(value: str) -> TeamSide:
    """'home'/'HOME' -> TeamSide.HOME. ValidationError per qualsiasi altro valore."""
    try:
        return TeamSide((value or "").upper())
    except ValueError:
        raise ValidationError("side must be HOME or AWAY") from None
