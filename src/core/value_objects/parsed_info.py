"""
Objets valeur pour les informations extraites d'un nom de release.

Objets valeur immutables representant le titre et l'annee extraits
d'un nom suivant la convention "<prefixe><Titre> (<Annee>) [...]".
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ParsedName:
    """
    Informations extraites du nom d'un fichier ou d'un dossier de film.

    Attributs:
        title: Titre affichable (entre le prefixe et la parenthese ouvrante)
        year: Annee de sortie (entre les parentheses)
        encoder: Groupe de release reconnu (optionnel)
        remux: True si le nom annonce un remux
    """

    title: str
    year: int
    encoder: Optional[str] = None
    remux: bool = False
