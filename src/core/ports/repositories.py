"""
Interfaces ports pour la persistance du catalogue.

Interfaces abstraites (ports) définissant les contrats pour charger et remplacer
le catalogue. Les implémentations fournissent le stockage concret (CSV sur
disque, en mémoire pour les tests, etc.).
"""

from abc import ABC, abstractmethod

from src.core.entities.movie import MovieRecord


class ICatalogRepository(ABC):
    """
    Interface de stockage du catalogue de films.

    Le catalogue est toujours chargé en entier puis remplacé en entier :
    aucune écriture partielle ni fusion n'est autorisée.
    """

    @abstractmethod
    def load(self) -> list[MovieRecord]:
        """
        Charge le catalogue précédent.

        Retourne une liste vide si aucun catalogue n'existe encore.

        Raises :
            CatalogFormatError : Si le fichier existe mais est illisible
        """
        ...

    @abstractmethod
    def save(self, records: list[MovieRecord]) -> None:
        """
        Remplace atomiquement le catalogue persisté.

        Un arrêt pendant l'écriture doit laisser l'ancien catalogue intact.
        """
        ...
