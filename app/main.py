"""GAA Squad Manager — API formazioni di gara, panchina e sostituzioni per fixture."""

import logging

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.core.config import get_log_level
from app.core.database import init_db
from app.routers import health_router, players_router, squads_router

logger = logging.getLogger(__name__)

app = FastAPI(
    title="GAA Squad Manager",
    description="Match-day squads for Gaelic games fixtures: 15-a-side lineups, bench, substitutions, locking.",
    version="0.1.0",
)

app.include_router(health_router)
app.include_router(squads_router)
app.include_router(players_router)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Body malformato o campo mancante -> 400 (non il 422 di default), con dettaglio per campo."""
    logger.warning("Richiesta non valida %s %s: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(status_code=400, content={"detail": jsonable_encoder(exc.errors())})


@app.on_event("startup")
def on_startup():
    """Configura il logging e inizializza le tabelle all'avvio."""
    logging.basicConfig(level=get_log_level(), format="%(levelname)s [%(name)s] %(message)s")
    init_db()
