from __future__ import annotations
"""server/room_status/main.py
~~~~~~~~~~~~~~~~~~~~~~~~
Point d'entrée FastAPI.

`create_app()` construit une instance isolée : l'état de la salle est porté
par `app.state` (pas de variable globale), ce qui permet aux tests de monter
autant d'applications indépendantes que nécessaire.
"""
import logging
from pathlib import Path
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from room_status import __version__
from room_status.api.router import api_router
from room_status.application.services.status_service import StatusService, build_notifier
from room_status.core.config import Settings, get_settings
from room_status.core.errors import install_error_handlers
from room_status.core.logging import setup_logging
from room_status.core.middleware import install_global_middleware
from room_status.domain.room import RoomState

log = logging.getLogger(__name__)

BASE_DIR = Path(__file__).resolve().parent


def create_app(
    settings: Optional[Settings] = None,
    room: Optional[RoomState] = None,
    templates_dir: Optional[Path] = None,
) -> FastAPI:
    if settings is None:
        settings = get_settings()
    setup_logging(settings.LOG_LEVEL)

    app = FastAPI(title="Room Status Server", version=__version__)

    app.state.settings = settings
    app.state.status_service = StatusService(
        room=room if room is not None else RoomState(),
        settings=settings,
        notifier=build_notifier(settings),
    )
    app.state.templates = Jinja2Templates(directory=str(templates_dir or BASE_DIR / "templates"))

    if not settings.ACCESS_KEY:
        log.warning("ACCESS_KEY is not set: every status change will be rejected")

    install_global_middleware(app)
    install_error_handlers(app)
    app.mount("/static", StaticFiles(directory=BASE_DIR / "static"), name="static")
    app.include_router(api_router)
    return app


def run() -> None:
    settings = get_settings()
    setup_logging(settings.LOG_LEVEL)
    log.info("Server is running on http://localhost:%s", settings.PORT)
    uvicorn.run(create_app(settings), host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
