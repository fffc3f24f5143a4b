"""
Interfaces ports pour la lecture des conteneurs et le parsing des noms.

Interfaces abstraites (ports) definissant les contrats pour decoder les pistes
d'un fichier video et pour extraire titre/annee d'un nom de release.
"""

from abc import ABC, abstractmethod
from pathlib import Path

from src.core.value_objects.parsed_info import ParsedName
from src.core.value_objects.tracks import ContainerInfo


class INameParser(ABC):
    """
    Interface pour le parsing des noms de release.

    Une seule convention est supportee par implementation ; aucune heuristique
    supplementaire ne doit etre devinee quand le nom ne la respecte pas.
    """

    @abstractmethod
    def parse(self, name: str) -> ParsedName:
        """
        Extrait titre, annee, groupe de release et indicateur remux.

        Args:
            name: Nom (ou chemin) a analyser

        Retourne:
            ParsedName avec les informations extraites.

        Raises:
            MalformedName: Si le nom ne respecte pas la convention
        """
        ...


class ITrackReader(ABC):
    """
    Interface pour la lecture des pistes d'un conteneur video.

    Le decodage binaire du conteneur est delegue a l'implementation
    (pymediainfo) ; le domaine ne manipule que des Track.
    """

    @abstractmethod
    def read(self, file_path: Path) -> ContainerInfo:
        """
        Lit les pistes et la duree d'un fichier video.

        Args:
            file_path: Chemin complet vers le fichier video

        Retourne:
            ContainerInfo avec les pistes dans l'ordre du conteneur

        Raises:
            MetadataUnavailable: Si le conteneur ne peut pas etre lu
        """
        ...

