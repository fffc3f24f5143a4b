"""
Implementations des repositories.

Ce module contient les implementations concretes des interfaces repository
definies dans src/core/ports/repositories.py.

Chaque repository :
- Herite de l'interface ABC correspondante du domaine
- Convertit entre entites de domaine (dataclass) et format persiste
"""

from src.infrastructure.persistence.repositories.catalog_repository import (
    CATALOG_COLUMNS,
    CsvCatalogRepository,
)

__all__ = [
    "CATALOG_COLUMNS",
    "CsvCatalogRepository",
]
