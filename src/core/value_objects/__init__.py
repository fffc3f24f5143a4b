"""
Objets valeur immutables representant des concepts du domaine sans identite.

Les objets valeur sont definis par leurs attributs plutot que par une identite.
Ils sont immutables et peuvent etre librement partages et compares par valeur.

Exports :
- TrackType : Type de piste (VIDEO, AUDIO, SUBTITLE, OTHER)
- Track : Piste decodee (codec id, largeur, canaux)
- ContainerInfo : Pistes ordonnees et duree d'un conteneur
- Recognized / Unrecognized : Resultats etiquetes de classification
- VideoFormat : Codec video normalise et profondeur de couleur
- TrackClassification : Classification complete d'un conteneur
- ParsedName : Titre et annee extraits d'un nom de release
"""

from src.core.value_objects.tracks import (
    ContainerInfo,
    Recognized,
    Track,
    TrackClassification,
    TrackType,
    Unrecognized,
    VideoFormat,
)
from src.core.value_objects.parsed_info import ParsedName

__all__ = [
    "ContainerInfo",
    "Recognized",
    "Track",
    "TrackClassification",
    "TrackType",
    "Unrecognized",
    "VideoFormat",
    "ParsedName",
]
