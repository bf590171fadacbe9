from __future__ import annotations
"""server/room_status/core/middleware.py
~~~~~~~~~~~~~~~~~~~~~~~~
Middleware global : CORS permissif.

- Toutes les réponses portent Access-Control-Allow-Origin / -Headers.
- Toute requête OPTIONS (quel que soit le chemin) répond 200 `{}` avec
  Access-Control-Allow-Methods, sans atteindre les routes.
"""
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

ALLOW_ORIGIN = "*"
ALLOW_HEADERS = "Origin, X-Requested-With, Content-Type, Accept, Authorization"
ALLOW_METHODS = "PUT, POST, PATCH, DELETE, GET"


def install_global_middleware(app: FastAPI) -> None:
    @app.middleware("http")
    async def cors_headers(request: Request, call_next):
        if request.method == "OPTIONS":
            response = JSONResponse(status_code=200, content={})
            response.headers["Access-Control-Allow-Methods"] = ALLOW_METHODS
        else:
            response = await call_next(request)
        response.headers["Access-Control-Allow-Origin"] = ALLOW_ORIGIN
        response.headers["Access-Control-Allow-Headers"] = ALLOW_HEADERS
        return response
