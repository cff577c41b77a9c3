"""Enum condivisi dai modelli."""

from enum import Enum as PyEnum


class TeamSide(str, PyEnum):
    """Lato della fixture a cui appartiene una squadra di gara."""

    HOME = "HOME"
    AWAY = "AWAY"
