"""Room Status Server : page publique ouvert/fermé + endpoint protégé."""

__version__ = "1.0.0"
