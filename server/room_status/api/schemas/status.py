from __future__ import annotations
"""
server/room_status/api/schemas/status.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Pydantic schemas de l'API de statut.

- ChangeStatusIn accepte volontairement n'importe quelle valeur : la clé est
  vérifiée AVANT la forme du statut, on ne peut donc pas laisser Pydantic
  rejeter le body en 422.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict


class ChangeStatusIn(BaseModel):
    """Body de POST /api/changeStatus (`newStatus`, `apiKey`)."""
    model_config = ConfigDict(extra="allow")

    newStatus: Any = None
    apiKey: Any = None


class MessageOut(BaseModel):
    message: str


class ErrorOut(BaseModel):
    error: str


class StatusOut(BaseModel):
    open: bool
    title: str
    color: str
    message: str
