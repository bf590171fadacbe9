# server/tests/unit/conftest.py
# ─────────────────────────────────────────────────────────────────────────────
# Conftest pour les TESTS UNITAIRES.
#
# Fournit `failing_webhook` : httpx.post lève une erreur réseau, pour vérifier
# que la notification best-effort n'a aucun effet sur la réponse HTTP.
# ─────────────────────────────────────────────────────────────────────────────

from __future__ import annotations

import httpx
import pytest


@pytest.fixture
def failing_webhook(monkeypatch):
    """Chaque tentative est enregistrée puis échoue (ConnectError)."""
    attempts: list[dict] = []

    def _boom(url, json=None, headers=None, timeout=None):
        attempts.append({"url": url, "json": json})
        raise httpx.ConnectError("net down")

    monkeypatch.setattr("httpx.post", _boom, raising=True)
    return attempts
