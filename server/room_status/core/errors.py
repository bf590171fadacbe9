from __future__ import annotations
"""server/room_status/core/errors.py
~~~~~~~~~~~~~~~~~~~~~~~~
Erreurs métier et leur traduction HTTP.

- AuthorizationError  -> 403 {"error": ...}
- InvalidStatusError  -> 400 {"error": ...}
- RenderError         -> 500 texte brut (page HTML indisponible)

Les erreurs de notification (webhook) ne remontent jamais jusqu'ici :
elles sont absorbées par le provider.
"""
import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse, PlainTextResponse

log = logging.getLogger(__name__)

RENDER_ERROR_BODY = "Error loading the page."


class RoomStatusError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class AuthorizationError(RoomStatusError):
    status_code = status.HTTP_403_FORBIDDEN


class InvalidStatusError(RoomStatusError):
    status_code = status.HTTP_400_BAD_REQUEST


class RenderError(RoomStatusError):
    pass


async def _room_status_error_handler(request: Request, exc: RoomStatusError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def _render_error_handler(request: Request, exc: RenderError) -> PlainTextResponse:
    log.error("Error reading HTML template: %s", exc.message)
    return PlainTextResponse(RENDER_ERROR_BODY, status_code=exc.status_code)


def install_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RenderError, _render_error_handler)
    app.add_exception_handler(RoomStatusError, _room_status_error_handler)
