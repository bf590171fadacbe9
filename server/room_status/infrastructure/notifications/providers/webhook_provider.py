from __future__ import annotations
"""server/room_status/infrastructure/notifications/providers/webhook_provider.py
~~~~~~~~~~~~~~~~~~~~~~~~
WebhookProvider — notifie un webhook externe (POST JSON) après un changement
de statut.

Best-effort :
- timeout borné, pas de retry
- toute erreur (réseau, code non 2xx) est loggée puis absorbée
- le résultat n'est jamais visible de l'appelant HTTP d'origine
"""

import logging
from typing import Any, Dict, Optional

import httpx

log = logging.getLogger(__name__)


class WebhookProvider:
    def __init__(self, url: Optional[str], timeout: float = 5.0):
        if not url:
            raise ValueError("Webhook URL must be provided")
        self.url = url
        self.timeout = timeout

    def send(self, payload: Dict[str, Any]) -> bool:
        """Envoie `payload` tel quel ; True si le webhook répond 2xx."""
        try:
            r = httpx.post(
                self.url,
                json=payload,
                headers={"Content-Type": "application/json"},
                timeout=self.timeout,
            )
        except Exception as exc:
            log.warning("Webhook send failed: %s", exc)
            return False
        if not r.is_success:
            log.warning("Webhook responded %s", r.status_code)
            return False
        return True
