# server/room_status/domain/policies.py

from __future__ import annotations
"""
Règles métier : décodage du statut demandé et textes affichés.

Fonctions principales :
    parse_requested_status(value, encoding) -> bool
    status_view(is_open, locale) -> StatusView
    change_message / unauthorized_message / invalid_status_message
"""

from dataclasses import dataclass
from typing import Any

from room_status.core.errors import InvalidStatusError

ENCODING_BOOLEAN = "boolean"
ENCODING_LITERAL = "literal"

LITERAL_OPEN = "open"
LITERAL_CLOSE = "close"


@dataclass(frozen=True)
class StatusView:
    is_open: bool
    title: str
    color: str
    message: str

    def as_dict(self) -> dict[str, Any]:
        return {
            "open": self.is_open,
            "title": self.title,
            "color": self.color,
            "message": self.message,
        }


TEXTS: dict[str, dict[str, str]] = {
    "en": {
        "title_open": "Status: Open",
        "title_closed": "Status: Closed",
        "label_open": "OPEN",
        "label_closed": "CLOSED",
        "state_open": "open",
        "state_closed": "closed",
        "changed": 'Room status successfully changed to "{state}".',
        "unauthorized": "Unauthorized access - invalid API key.",
        "invalid_boolean": "Invalid status. Allowed values are true (for open) or false (for close).",
        "invalid_literal": 'Invalid status. Allowed values are "open" or "close".',
    },
    "fr": {
        "title_open": "Statut : Ouvert",
        "title_closed": "Statut : Fermé",
        "label_open": "OUVERT",
        "label_closed": "FERMÉ",
        "state_open": "ouvert",
        "state_closed": "fermé",
        "changed": 'Statut de la salle changé en "{state}".',
        "unauthorized": "Accès non autorisé - clé API invalide.",
        "invalid_boolean": "Statut invalide. Valeurs autorisées : true (ouvert) ou false (fermé).",
        "invalid_literal": 'Statut invalide. Valeurs autorisées : "open" ou "close".',
    },
}

COLORS = {True: "green", False: "red"}


def _texts(locale: str) -> dict[str, str]:
    return TEXTS.get(locale, TEXTS["en"])


def status_view(is_open: bool, locale: str = "en") -> StatusView:
    """Présentation (titre, couleur, message) : fonction pure du booléen."""
    t = _texts(locale)
    if is_open:
        return StatusView(True, t["title_open"], COLORS[True], t["label_open"])
    return StatusView(False, t["title_closed"], COLORS[False], t["label_closed"])


def invalid_status_message(encoding: str, locale: str = "en") -> str:
    key = "invalid_literal" if encoding == ENCODING_LITERAL else "invalid_boolean"
    return _texts(locale)[key]


def unauthorized_message(locale: str = "en") -> str:
    return _texts(locale)["unauthorized"]


def change_message(is_open: bool, locale: str = "en") -> str:
    t = _texts(locale)
    return t["changed"].format(state=t["state_open"] if is_open else t["state_closed"])


def parse_requested_status(value: Any, encoding: str, locale: str = "en") -> bool:
    """
    Décode `newStatus` selon l'encodage configuré.
    - boolean : vrai booléen JSON uniquement (ni 0/1, ni chaîne, ni null)
    - literal : exactement "open" ou "close"
    Lève InvalidStatusError sinon.
    """
    if encoding == ENCODING_LITERAL:
        if isinstance(value, str) and value in (LITERAL_OPEN, LITERAL_CLOSE):
            return value == LITERAL_OPEN
    elif isinstance(value, bool):
        return value
    raise InvalidStatusError(invalid_status_message(encoding, locale))
