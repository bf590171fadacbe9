from __future__ import annotations
"""server/room_status/core/config.py
~~~~~~~~~~~~~~~~~~~~~~~~
Paramètres (pydantic-settings).

Variables utiles :
  - PORT / HOST              : écoute uvicorn (défaut 0.0.0.0:3000)
  - ACCESS_KEY               : secret partagé exigé par POST /api/changeStatus
  - STATUS_ENCODING          : "boolean" (true/false) ou "literal" ("open"/"close")
  - STATUS_LOCALE            : "en" ou "fr" (textes de la page et messages API)
  - WEBHOOK_URL              : webhook notifié après chaque changement (optionnel)
  - WEBHOOK_TIMEOUT_SECONDS  : timeout borné de l'appel webhook
"""

from functools import lru_cache
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    HOST: str = "0.0.0.0"
    PORT: int = Field(3000, ge=1, le=65535)
    ACCESS_KEY: Optional[str] = None
    STATUS_ENCODING: Literal["boolean", "literal"] = "boolean"
    STATUS_LOCALE: Literal["en", "fr"] = "en"
    WEBHOOK_URL: Optional[str] = None
    WEBHOOK_TIMEOUT_SECONDS: float = Field(5.0, gt=0, le=60)
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    return Settings()
