# server/tests/conftest.py
"""
Conftest *global* pour toute la suite de tests.

Points clés :
- Isole l'environnement : les variables lues par Settings() sont retirées
  pour qu'un .env ou un shell local ne change pas le comportement des tests.
- Fournit une fabrique de Settings, une fabrique d'application (create_app)
  et un TestClient prêt à l'emploi (secret partagé connu).
- Fournit `webhook_calls` : capture les POST webhook sans appel réseau.
- Options --api pour les tests d'intégration contre un serveur lancé.
"""

import os
import time

import httpx
import pytest
from fastapi.testclient import TestClient

ACCESS_KEY = "test_api_key"
WEBHOOK_URL = "http://example.invalid/webhook"

_SETTINGS_ENV = (
    "HOST",
    "PORT",
    "ACCESS_KEY",
    "STATUS_ENCODING",
    "STATUS_LOCALE",
    "WEBHOOK_URL",
    "WEBHOOK_TIMEOUT_SECONDS",
    "LOG_LEVEL",
)


# ============================================================================
# Options CLI (intégration)
# ============================================================================
def pytest_addoption(parser):
    parser.addoption("--api", action="store", default=os.getenv("API", "http://localhost:3000"))


@pytest.fixture(scope="session")
def api_base(pytestconfig) -> str:
    return pytestconfig.getoption("--api")


@pytest.fixture
def wait():
    """
    Helper simple : poll une fonction jusqu'à ce qu'elle renvoie une valeur truthy.
    """
    def _wait(fn, timeout=30, every=1):
        deadline = time.time() + timeout
        while time.time() < deadline:
            try:
                val = fn()
            except Exception:
                val = None
            if val:
                return val
            time.sleep(every)
        return None
    return _wait


# ============================================================================
# ENV isolée + fabriques
# ============================================================================
@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch):
    for name in _SETTINGS_ENV:
        monkeypatch.delenv(name, raising=False)
    from room_status.core.config import get_settings
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def make_settings():
    """Settings sans lecture de .env ; les kwargs surchargent les défauts."""
    from room_status.core.config import Settings

    def _factory(**overrides):
        values = {"ACCESS_KEY": ACCESS_KEY}
        values.update(overrides)
        return Settings(_env_file=None, **values)
    return _factory


@pytest.fixture
def make_client(make_settings):
    """Construit un TestClient sur une application neuve (état fermé)."""
    from room_status.main import create_app

    def _factory(templates_dir=None, **overrides):
        app = create_app(make_settings(**overrides), templates_dir=templates_dir)
        return TestClient(app)
    return _factory


@pytest.fixture
def client(make_client):
    return make_client()


@pytest.fixture
def access_key() -> str:
    return ACCESS_KEY


# ============================================================================
# Webhook : capture des POST (aucun appel réseau)
# ============================================================================
@pytest.fixture
def webhook_calls(monkeypatch):
    """
    Remplace httpx.post (utilisé par WebhookProvider) :
    - enregistre (url, json, timeout) dans la liste retournée
    - répond 204 par défaut
    """
    calls: list[dict] = []

    def _fake_post(url, json=None, headers=None, timeout=None):
        calls.append({"url": url, "json": json, "timeout": timeout})
        return httpx.Response(204)

    monkeypatch.setattr("httpx.post", _fake_post, raising=True)
    return calls
