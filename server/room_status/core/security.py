from __future__ import annotations
"""server/room_status/core/security.py
~~~~~~~~~~~~~~~~~~~~~~~~
Sécurité : secret partagé (champ `apiKey` du body).
"""
import secrets
from typing import Any, Optional


def access_key_matches(candidate: Any, expected: Optional[str]) -> bool:
    """
    Comparaison exacte (temps constant) du secret fourni avec ACCESS_KEY.
    Sans ACCESS_KEY configurée, aucune clé n'est acceptée.
    """
    if not expected or not isinstance(candidate, str):
        return False
    return secrets.compare_digest(candidate.encode("utf-8"), expected.encode("utf-8"))
