from app.routers.health import router as health_router
from app.routers.players import router as players_router
from app.routers.squads import router as squads_router

__all__ = ["health_router", "players_router", "squads_router"]
