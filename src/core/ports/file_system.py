"""
Interfaces ports pour le système de fichiers.

Interfaces abstraites (ports) définissant les contrats pour l'énumération des
fichiers vidéo de la vidéothèque et la lecture de leurs attributs.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

from src.core.entities.movie import MediaFile


class ILibraryScanner(ABC):
    """
    Interface pour le parcours de la vidéothèque.

    Définit les opérations pour lister les fichiers vidéo et lire
    les attributs utilisés par l'empreinte (taille, date de modification).
    """

    @abstractmethod
    def list_video_files(self, root: Path, max_depth: Optional[int] = None) -> list[Path]:
        """
        Liste les fichiers vidéo sous root, triés par chemin.

        Args :
            root : Racine de la vidéothèque
            max_depth : Profondeur maximale (1 = fichiers directement sous root)

        Retourne :
            Liste ordonnée des chemins trouvés
        """
        ...

    @abstractmethod
    def stat(self, path: Path) -> MediaFile:
        """
        Lit la taille et la date de modification d'un fichier.

        Raises :
            MetadataUnavailable : Si les attributs ne peuvent pas être lus
        """
        ...

    @abstractmethod
    def rename(self, source: Path, destination: Path) -> None:
        """
        Renomme un fichier ou un dossier.

        Raises :
            FileExistsError : Si la destination existe déjà
        """
        ...
