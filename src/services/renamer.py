"""
Service de renommage des dossiers de films selon le catalogue.

Ce module genere le nom standardise d'un dossier de film depuis son
enregistrement du catalogue et planifie les renommages correspondants.

Format : Titre (Annee) [2160p x265 10bit TrueHD Atmos-7.1 Encodeur] (58.3 GB)

Les dossiers sont associes aux enregistrements par empreinte : renommer un
dossier ne change ni la taille ni la date de modification du fichier qu'il
contient, le catalogue reste donc valide apres renommage.
"""

import unicodedata
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Sequence

from loguru import logger
from pathvalidate import sanitize_filename

from src.core.entities.movie import MediaFile, MovieRecord
from src.core.ports.file_system import ILibraryScanner

# Longueur maximale d'un nom de dossier
MAX_FOLDER_NAME_LENGTH = 200

# Caracteres speciaux remplaces par un tiret
# Note: pathvalidate gere deja / \ : * " < > | mais on veut un tiret explicite
SPECIAL_CHARS_TO_DASH = frozenset({"/", "\\", "*", '"', "<", ">", "|"})

# Notation parlante des dispositions mono / stereo
CHANNEL_NAMES: dict[str, str] = {
    "2.0": "stereo",
    "1.0": "mono",
}


def sanitize_for_filesystem(text: str) -> str:
    """
    Nettoie une chaîne pour l'utiliser comme nom de dossier.

    Transformations appliquées :
    - Normalisation Unicode NFKC
    - ":" -> " -" (graphie des titres de release)
    - Caractères spéciaux (/ \\ * " < > |) -> tiret
    - Nettoyage pathvalidate multi-plateforme et troncature
    """
    if not text:
        return ""

    text = unicodedata.normalize("NFKC", text)
    text = text.replace(":", " -")
    for char in SPECIAL_CHARS_TO_DASH:
        text = text.replace(char, "-")

    text = sanitize_filename(text, platform="universal", replacement_text="")
    return text[:MAX_FOLDER_NAME_LENGTH]


def format_channels(channels: str) -> str:
    """Retourne "stereo" / "mono" pour 2.0 / 1.0, la notation brute sinon."""
    return CHANNEL_NAMES.get(channels, channels)


def build_folder_name(record: MovieRecord) -> str:
    """
    Génère le nom de dossier standardisé d'un film.

    Args:
        record: Enregistrement du catalogue.

    Returns:
        Nom de dossier formaté et nettoyé.
    """
    resolution = f"{record.res}p" if record.res is not None else "XXX"
    encoder = f" {record.encoder}" if record.encoder else ""
    name = (
        f"{record.title} ({record.year}) "
        f"[{resolution} {record.v_codec} {record.bit_depth} "
        f"{record.a_codec}-{format_channels(record.channels)}{encoder}] "
        f"({record.size:g} GB)"
    )
    return sanitize_for_filesystem(name)


@dataclass(frozen=True)
class RenameOperation:
    """Renommage planifié d'un dossier de film."""

    source: Path
    target: Path
    title: str


class RenamerService:
    """
    Service de renommage des dossiers de la vidéothèque.

    Ne renomme que les dossiers contenant un fichier connu du catalogue ;
    un fichier situé directement à la racine n'a pas de dossier à renommer.
    """

    def __init__(
        self,
        scanner: ILibraryScanner,
        fingerprint_fn: Callable[[MediaFile], tuple[float, str]],
    ) -> None:
        """
        Initialise le service.

        Args:
            scanner: Accès à la vidéothèque
            fingerprint_fn: Calcul (taille lisible, empreinte) d'un fichier
        """
        self._scanner = scanner
        self._fingerprint_fn = fingerprint_fn

    def plan(
        self,
        records: Sequence[MovieRecord],
        files: Sequence[MediaFile],
        library_dir: Path,
    ) -> list[RenameOperation]:
        """
        Planifie les renommages nécessaires.

        Args:
            records: Catalogue courant
            files: Fichiers scannés
            library_dir: Racine de la vidéothèque

        Returns:
            Opérations à appliquer, dans l'ordre des fichiers
        """
        by_hash = {record.hash: record for record in records}
        operations: list[RenameOperation] = []
        planned_sources: set[Path] = set()

        for media_file in files:
            _, fingerprint = self._fingerprint_fn(media_file)
            record = by_hash.get(fingerprint)
            if record is None:
                logger.debug(f"Hors catalogue, ignore: {media_file.path}")
                continue

            folder = media_file.path.parent
            if folder == library_dir:
                continue
            if folder in planned_sources:
                logger.warning(f"Dossier deja planifie, fichier ignore: {media_file.path}")
                continue

            target = folder.with_name(build_folder_name(record))
            if target == folder:
                continue

            planned_sources.add(folder)
            operations.append(RenameOperation(source=folder, target=target, title=record.title))

        return operations

    def apply(self, operations: Sequence[RenameOperation]) -> int:
        """
        Applique les renommages planifiés.

        Returns:
            Nombre de dossiers renommés

        Raises:
            FileExistsError: Si une destination existe déjà (arrêt immédiat)
        """
        renamed = 0
        for operation in operations:
            self._scanner.rename(operation.source, operation.target)
            logger.info(f"{operation.source.name} -> {operation.target.name}")
            renamed += 1
        return renamed
