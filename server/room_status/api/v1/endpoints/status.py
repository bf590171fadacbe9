from __future__ import annotations
"""
server/room_status/api/v1/endpoints/status.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Endpoints du statut de la salle.

- GET  /                  : page HTML (template Jinja2) reflétant l'état courant
- GET  /api/status        : même information en JSON
- POST /api/changeStatus  : change l'état (secret partagé dans le body)

Notes :
- Un body non JSON ou non objet est traité comme `{}` → échoue sur la clé (403).
- Le webhook éventuel est planifié via BackgroundTasks : il s'exécute après
  l'envoi de la réponse, son résultat n'est jamais visible de l'appelant.
"""

import logging

from fastapi import APIRouter, BackgroundTasks, Depends, Request
from fastapi.responses import HTMLResponse
from jinja2 import TemplateError

from room_status.api.schemas.status import ChangeStatusIn, ErrorOut, MessageOut, StatusOut
from room_status.application.services.status_service import StatusService
from room_status.core.errors import RenderError

log = logging.getLogger(__name__)

router = APIRouter(tags=["status"])

TEMPLATE_NAME = "status.html"


def get_status_service(request: Request) -> StatusService:
    return request.app.state.status_service


@router.get("/", response_class=HTMLResponse)
def status_page(request: Request, service: StatusService = Depends(get_status_service)):
    view = service.get_status()
    templates = request.app.state.templates
    try:
        return templates.TemplateResponse(
            request,
            TEMPLATE_NAME,
            {
                "page_title": view.title,
                "background_color": view.color,
                "message": view.message,
            },
        )
    except TemplateError as exc:
        raise RenderError(f"{TEMPLATE_NAME}: {exc}") from exc


@router.get("/api/status", response_model=StatusOut)
def get_status(service: StatusService = Depends(get_status_service)) -> dict:
    return service.get_status().as_dict()


@router.post(
    "/api/changeStatus",
    response_model=MessageOut,
    responses={400: {"model": ErrorOut}, 403: {"model": ErrorOut}},
)
async def change_status(
    request: Request,
    background_tasks: BackgroundTasks,
    service: StatusService = Depends(get_status_service),
) -> dict:
    try:
        body = await request.json()
    except ValueError:
        body = {}
    if not isinstance(body, dict):
        body = {}

    payload = ChangeStatusIn.model_validate(body)
    result = service.set_status(payload.newStatus, payload.apiKey)

    if service.notifier is not None:
        background_tasks.add_task(service.notify, body)

    return {"message": result.message}
