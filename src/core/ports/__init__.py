"""
Ports (interfaces abstraites) définissant les contrats pour les adaptateurs.

Les ports sont les frontières de l'architecture hexagonale. Ils définissent
ce dont le domaine a besoin du monde extérieur sans spécifier
comment ces besoins sont satisfaits.

Port repository :
- ICatalogRepository : Chargement / remplacement atomique du catalogue

Port source de notes :
- IRatingSource : Instantané titre -> note depuis une source externe

Ports parsing / système de fichiers :
- INameParser : Extraction titre / année depuis un nom de release
- ITrackReader : Lecture des pistes d'un conteneur vidéo
- ILibraryScanner : Enumération des fichiers de la vidéothèque
"""

from src.core.ports.repositories import ICatalogRepository
from src.core.ports.api_clients import IRatingSource
from src.core.ports.parser import INameParser, ITrackReader
from src.core.ports.file_system import ILibraryScanner

__all__ = [
    "ICatalogRepository",
    "IRatingSource",
    "ILibraryScanner",
    "INameParser",
    "ITrackReader",
]
