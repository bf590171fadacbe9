from __future__ import annotations
"""server/room_status/application/services/status_service.py
~~~~~~~~~~~~~~~~~~~~~~~~
Service de statut : lecture de l'état rendu + changement protégé.

Ordre de validation de set_status :
  1) secret partagé (AuthorizationError, 403)
  2) forme du statut demandé (InvalidStatusError, 400)
  3) écriture de l'état, puis construction du message de confirmation

La notification webhook n'est PAS envoyée ici : le service renvoie le payload
à notifier et l'endpoint la planifie en tâche détachée (après la réponse).
"""
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from room_status.core.config import Settings
from room_status.core.errors import AuthorizationError, InvalidStatusError
from room_status.core.security import access_key_matches
from room_status.domain.policies import (
    StatusView,
    change_message,
    parse_requested_status,
    status_view,
    unauthorized_message,
)
from room_status.domain.room import RoomState
from room_status.infrastructure.notifications.providers.webhook_provider import WebhookProvider

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChangeResult:
    is_open: bool
    changed: bool
    message: str


class StatusService:
    def __init__(self, room: RoomState, settings: Settings, notifier: Optional[WebhookProvider] = None):
        self.room = room
        self.settings = settings
        self.notifier = notifier

    def get_status(self) -> StatusView:
        return status_view(self.room.is_open, self.settings.STATUS_LOCALE)

    def set_status(self, requested_status: Any, credential: Any) -> ChangeResult:
        locale = self.settings.STATUS_LOCALE
        if not access_key_matches(credential, self.settings.ACCESS_KEY):
            log.warning("Status change rejected: invalid API key")
            raise AuthorizationError(unauthorized_message(locale))

        try:
            new_open = parse_requested_status(requested_status, self.settings.STATUS_ENCODING, locale)
        except InvalidStatusError:
            log.warning("Status change rejected: invalid status %r", requested_status)
            raise

        previous = self.room.set_open(new_open)
        log.info("Room status set to %s (was %s)", _label(new_open), _label(previous))
        return ChangeResult(
            is_open=new_open,
            changed=previous != new_open,
            message=change_message(new_open, locale),
        )

    def notify(self, payload: Dict[str, Any]) -> bool:
        """Notification best-effort ; sans webhook configuré, ne fait rien."""
        if self.notifier is None:
            return False
        return self.notifier.send(payload)


def _label(is_open: bool) -> str:
    return "open" if is_open else "closed"


def build_notifier(settings: Settings) -> Optional[WebhookProvider]:
    if not settings.WEBHOOK_URL:
        return None
    return WebhookProvider(settings.WEBHOOK_URL, timeout=settings.WEBHOOK_TIMEOUT_SECONDS)
