from __future__ import annotations
"""server/room_status/domain/room.py
~~~~~~~~~~~~~~~~~~~~~~~~
État de la salle (ouvert/fermé) détenu par l'instance d'application.

Un seul booléen partagé entre les threads du serveur : lectures et écritures
passent par un verrou, la dernière écriture gagne.
"""
from threading import Lock


class RoomState:
    def __init__(self, is_open: bool = False):
        self._lock = Lock()
        self._open = bool(is_open)

    @property
    def is_open(self) -> bool:
        with self._lock:
            return self._open

    def set_open(self, is_open: bool) -> bool:
        """Écrase l'état et renvoie la valeur précédente."""
        with self._lock:
            previous = self._open
            self._open = bool(is_open)
            return previous
