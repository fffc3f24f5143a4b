"""
Implementation CSV du repository de catalogue.

Implemente l'interface ICatalogRepository pour la persistance du catalogue
dans un fichier CSV a en-tete fixe :

    TITLE,YEAR,RATING,SIZE,DURATION,RES,BIT_DEPTH,V_CODEC,A_CODEC,SUBS,
    CHANNELS,ENCODER,REMUX,HASH

Les champs optionnels absents sont ecrits vides. L'ecriture passe par un
fichier temporaire du meme repertoire remplace atomiquement (os.replace) :
un arret pendant l'ecriture laisse l'ancien catalogue intact.
"""

import csv
import os
import tempfile
from pathlib import Path
from typing import Optional

from loguru import logger

from src.core.entities.movie import MovieRecord
from src.core.errors import CatalogFormatError
from src.core.ports.repositories import ICatalogRepository

# Ordre fixe des colonnes du catalogue
CATALOG_COLUMNS: tuple[str, ...] = (
    "TITLE",
    "YEAR",
    "RATING",
    "SIZE",
    "DURATION",
    "RES",
    "BIT_DEPTH",
    "V_CODEC",
    "A_CODEC",
    "SUBS",
    "CHANNELS",
    "ENCODER",
    "REMUX",
    "HASH",
)


def _optional(value: str) -> Optional[str]:
    return value if value != "" else None


def _parse_bool(value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in ("true", "1"):
        return True
    if lowered in ("false", "0"):
        return False
    raise ValueError(f"booleen invalide {value!r}")


class CsvCatalogRepository(ICatalogRepository):
    """
    Repository CSV pour le catalogue de films.

    Implemente ICatalogRepository avec conversion bidirectionnelle
    entre l'entite MovieRecord (domaine) et une ligne CSV (persistance).
    """

    def __init__(self, catalog_path: Path) -> None:
        """
        Initialise le repository.

        Args :
            catalog_path : Chemin du fichier CSV du catalogue
        """
        self._path = Path(catalog_path)

    @property
    def path(self) -> Path:
        """Chemin du fichier catalogue."""
        return self._path

    def _to_entity(self, row: dict[str, str], line: int) -> MovieRecord:
        """
        Convertit une ligne CSV en entite domaine.

        Raises :
            CatalogFormatError : Si une valeur ne peut pas etre convertie
        """
        try:
            return MovieRecord(
                title=row["TITLE"],
                year=int(row["YEAR"]),
                rating=_optional(row["RATING"]),
                size=float(row["SIZE"]),
                duration=row["DURATION"],
                res=int(row["RES"]) if row["RES"] else None,
                bit_depth=row["BIT_DEPTH"],
                v_codec=row["V_CODEC"],
                a_codec=row["A_CODEC"],
                subs=_optional(row["SUBS"]),
                channels=row["CHANNELS"],
                encoder=_optional(row["ENCODER"]),
                remux=_parse_bool(row["REMUX"]),
                hash=row["HASH"],
            )
        except (KeyError, TypeError, ValueError) as e:
            raise CatalogFormatError(f"{self._path}, ligne {line}: {e}") from e

    def _to_row(self, record: MovieRecord) -> list[str]:
        """Convertit une entite domaine en ligne CSV (ordre CATALOG_COLUMNS)."""
        return [
            record.title,
            str(record.year),
            record.rating or "",
            str(record.size),
            record.duration,
            "" if record.res is None else str(record.res),
            record.bit_depth,
            record.v_codec,
            record.a_codec,
            record.subs or "",
            record.channels,
            record.encoder or "",
            "true" if record.remux else "false",
            record.hash,
        ]

    def load(self) -> list[MovieRecord]:
        """
        Charge le catalogue precedent.

        Retourne une liste vide si le fichier n'existe pas encore.

        Raises :
            CatalogFormatError : Si l'en-tete ou une ligne est invalide
        """
        if not self._path.exists():
            logger.info(f"Aucun catalogue precedent: {self._path}")
            return []

        with open(self._path, newline="", encoding="utf-8") as f:
            reader = csv.DictReader(f)
            if reader.fieldnames is None:
                return []
            missing = [col for col in CATALOG_COLUMNS if col not in reader.fieldnames]
            if missing:
                raise CatalogFormatError(f"{self._path}: colonnes manquantes {missing}")

            # La ligne 1 est l'en-tete
            records = [self._to_entity(row, line) for line, row in enumerate(reader, start=2)]

        logger.debug(f"{len(records)} films charges depuis {self._path}")
        return records

    def save(self, records: list[MovieRecord]) -> None:
        """
        Remplace atomiquement le catalogue persiste.

        Le contenu complet est ecrit dans un fichier temporaire du meme
        repertoire, synchronise sur disque, puis renomme sur la cible.
        """
        self._path.parent.mkdir(parents=True, exist_ok=True)
        fd, temp_name = tempfile.mkstemp(
            prefix=f".tmp_{self._path.stem}_", suffix=self._path.suffix, dir=self._path.parent
        )
        temp = Path(temp_name)
        try:
            with os.fdopen(fd, "w", newline="", encoding="utf-8") as f:
                writer = csv.writer(f)
                writer.writerow(CATALOG_COLUMNS)
                writer.writerows(self._to_row(record) for record in records)
                f.flush()
                os.fsync(f.fileno())
            os.replace(temp, self._path)
        except BaseException:
            # Nettoyer le fichier temporaire en cas d'erreur
            if temp.exists():
                temp.unlink()
            raise

        logger.info(f"{len(records)} films ecrits dans {self._path}")
