"""
Couche adaptateurs (infrastructure).

Les adaptateurs implémentent les ports définis dans core/ports/ et fournissent
des implémentations concrètes pour les systèmes externes.

Sous-packages :
- cli/ : Interface ligne de commande (Typer + Rich)
- api/ : Client de la liste de notes (httpx + BeautifulSoup)
- parsing/ : Parsing des noms de release et lecture mediainfo
- file_system.py : Enumération et renommage dans la vidéothèque

Chaque adaptateur dépend de core/ mais core/ ne dépend jamais des adaptateurs.
"""

from src.adapters.file_system import FileSystemAdapter
from src.adapters.parsing.mediainfo_reader import MediaInfoTrackReader
from src.adapters.parsing.release_name_parser import ReleaseNameParser

__all__ = [
    "FileSystemAdapter",
    "MediaInfoTrackReader",
    "ReleaseNameParser",
]
