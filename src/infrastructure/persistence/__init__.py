"""
Module de persistance du catalogue movielog.

Ce module fournit l'infrastructure de stockage :

- hash_service.py : Empreinte CRC-32C (taille + date de modification)
  utilisee comme cle unique des enregistrements
- repositories/ : Repository CSV a remplacement atomique

Usage:
    from src.infrastructure.persistence import CsvCatalogRepository

    repo = CsvCatalogRepository(Path("movie_log.csv"))
    records = repo.load()  # [] au premier run
    repo.save(records)
"""

from src.infrastructure.persistence.hash_service import (
    compute_fingerprint,
    fingerprint_media,
    human_readable_size,
)
from src.infrastructure.persistence.repositories import (
    CATALOG_COLUMNS,
    CsvCatalogRepository,
)

__all__ = [
    "compute_fingerprint",
    "fingerprint_media",
    "human_readable_size",
    "CATALOG_COLUMNS",
    "CsvCatalogRepository",
]
