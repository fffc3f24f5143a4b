"""
Interfaces ports pour les sources externes de notes.

Une source de notes fournit un instantane complet titre -> note, recupere
une seule fois avant toute classification et jamais rafraichi pendant le run.
"""

from abc import ABC, abstractmethod


class IRatingSource(ABC):
    """
    Interface pour les sources de notes de films.

    Les titres retournes sont les cles exactes de recherche : sensibles
    a la casse et a la ponctuation.
    """

    @property
    @abstractmethod
    def source(self) -> str:
        """Identifiant de la source (ex: "letterboxd")."""
        ...

    @abstractmethod
    async def fetch_ratings(self) -> dict[str, str]:
        """
        Recupere l'integralite du catalogue titre -> note.

        Raises:
            RatingSourceError: Si une page est mal formee
            httpx.HTTPError: Si la source est injoignable
        """
        ...

    async def close(self) -> None:
        """Libere les ressources reseau eventuelles."""
        return None
