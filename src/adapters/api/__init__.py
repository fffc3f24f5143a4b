"""
Client HTTP de la liste de notes.

Ce module fournit:
- LetterboxdClient: Recuperation paginee des notes d'une liste publique
- RateLimitError: Exception pour les erreurs 429
- with_retry / request_with_retry: Backoff exponentiel sur le rate limiting

Le client implemente IRatingSource defini dans core/ports/api_clients.py.
"""

from src.adapters.api.letterboxd_client import LetterboxdClient
from src.adapters.api.retry import RateLimitError, request_with_retry, with_retry

__all__ = [
    "LetterboxdClient",
    "RateLimitError",
    "request_with_retry",
    "with_retry",
]
