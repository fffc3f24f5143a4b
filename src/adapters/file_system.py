"""
Adaptateur pour les operations sur le systeme de fichiers.

Implementation concrete de ILibraryScanner : enumeration des fichiers video
de la videotheque, lecture des attributs utilises par l'empreinte et
renommage des dossiers de films.
"""

import os
from pathlib import Path
from typing import Iterable, Optional

from loguru import logger

from src.core.entities.movie import MediaFile
from src.core.errors import MetadataUnavailable
from src.core.ports.file_system import ILibraryScanner

# Extensions video supportees
VIDEO_EXTENSIONS: frozenset[str] = frozenset({".mkv"})


class FileSystemAdapter(ILibraryScanner):
    """
    Implementation de ILibraryScanner pour le systeme de fichiers reel.

    Le scan est limite en profondeur : avec max_depth=2, les fichiers
    directement sous la racine et ceux des dossiers de premier niveau
    ("M:/Titre (Annee) [...]/Titre.mkv") sont retenus.
    """

    def __init__(self, extensions: Iterable[str] = VIDEO_EXTENSIONS) -> None:
        """
        Initialise l'adaptateur.

        Args:
            extensions: Extensions retenues (insensibles a la casse)
        """
        self._extensions = frozenset(ext.lower() for ext in extensions)

    def list_video_files(self, root: Path, max_depth: Optional[int] = None) -> list[Path]:
        """
        Liste les fichiers video sous root, tries par chemin.

        Filtre:
        - Par extension
        - Exclut les symlinks
        - Exclut ce qui depasse max_depth (None = pas de limite)

        Args:
            root: Racine de la videotheque
            max_depth: Profondeur maximale (1 = fichiers directement sous root)

        Returns:
            Chemins vers les fichiers video trouves
        """
        if not root.is_dir():
            logger.warning(f"Racine de la videotheque introuvable: {root}")
            return []

        found: list[Path] = []
        self._walk(root, 1, max_depth, found)
        found.sort()
        logger.debug(f"{len(found)} fichiers video sous {root}")
        return found

    def _walk(self, directory: Path, depth: int, max_depth: Optional[int], found: list[Path]) -> None:
        try:
            entries = list(os.scandir(directory))
        except OSError as e:
            logger.warning(f"Repertoire illisible {directory}: {e}")
            return

        for entry in entries:
            if entry.is_symlink():
                continue
            path = Path(entry.path)
            if entry.is_dir():
                if max_depth is None or depth < max_depth:
                    self._walk(path, depth + 1, max_depth, found)
                continue
            if path.suffix.lower() in self._extensions:
                found.append(path)

    def stat(self, path: Path) -> MediaFile:
        """
        Lit la taille et la date de modification d'un fichier.

        Raises:
            MetadataUnavailable: Si les attributs ne peuvent pas etre lus
        """
        try:
            stat_result = path.stat()
        except OSError as e:
            raise MetadataUnavailable(f"Attributs illisibles ({e.strerror})", path) from e

        return MediaFile(
            path=path,
            size_bytes=stat_result.st_size,
            mtime_ns=stat_result.st_mtime_ns,
        )

    def rename(self, source: Path, destination: Path) -> None:
        """
        Renomme un fichier ou un dossier sans jamais ecraser la destination.

        Raises:
            FileExistsError: Si la destination existe deja
        """
        if destination.exists():
            raise FileExistsError(f"Destination deja presente: {destination}")
        os.rename(source, destination)
