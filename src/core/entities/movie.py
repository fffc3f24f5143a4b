"""
Entités du catalogue de films.

MovieRecord est l'unité de stockage du catalogue : une ligne du CSV persisté.
Son identité est le hash (empreinte taille + date de modification), jamais
le chemin ni le titre.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

# Bornes d'un entier signe 16 bits (colonne YEAR du catalogue)
YEAR_MIN = -(2**15)
YEAR_MAX = 2**15 - 1


@dataclass
class MovieRecord:
    """
    Représente un film du catalogue.

    Attributs :
        title : Titre affichable extrait du nom du dossier
        year : Année de sortie
        rating : Note externe (None si aucune correspondance fiable)
        size : Taille lisible (ex: 23.45 pour 23.45 GB)
        duration : Durée formatée ("2h 05min")
        res : Palier de résolution (2160, 1080, ou None si non résolu)
        bit_depth : Profondeur de couleur ("8bit" / "10bit")
        v_codec : Codec vidéo normalisé ("x264" / "x265")
        a_codec : Codec audio normalisé ("XXX" si inconnu)
        subs : Format des sous-titres (None si absent)
        channels : Disposition des canaux ("2.0", "5.1"...)
        encoder : Groupe de release reconnu (optionnel)
        remux : True si la release est un remux
        hash : Empreinte du fichier, clé unique du catalogue
    """

    title: str
    year: int
    rating: Optional[str]
    size: float
    duration: str
    res: Optional[int]
    bit_depth: str
    v_codec: str
    a_codec: str
    subs: Optional[str]
    channels: str
    encoder: Optional[str]
    remux: bool
    hash: str


@dataclass(frozen=True)
class MediaFile:
    """
    Fichier vidéo tel que vu sur le disque au moment du scan.

    Attributs :
        path : Chemin complet du fichier
        size_bytes : Taille en octets
        mtime_ns : Date de dernière modification en nanosecondes depuis l'epoch
    """

    path: Path
    size_bytes: int
    mtime_ns: int
