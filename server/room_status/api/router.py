from __future__ import annotations
"""server/room_status/api/router.py
~~~~~~~~~~~~~~~~~~~~~~~~
Router principal.
"""
from fastapi import APIRouter
from room_status.api.v1.endpoints import health, status


api_router = APIRouter()
api_router.include_router(health.router, tags=["health"])
api_router.include_router(status.router, tags=["status"])
