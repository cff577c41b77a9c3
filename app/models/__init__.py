from app.models.enums import TeamSide
from app.models.fixture import Fixture
from app.models.match_squad import MatchSquad
from app.models.player import Player
from app.models.team import Team

__all__ = [
    "TeamSide",
    "Team",
    "Fixture",
    "MatchSquad",
    "Player",
]
