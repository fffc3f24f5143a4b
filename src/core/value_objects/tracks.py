"""
Objets valeur pour les pistes de conteneur et leur classification.

Les pistes sont fournies déjà décodées par un lecteur de conteneur
(voir src.adapters.parsing.mediainfo_reader). Le classifieur les transforme
en résultats étiquetés Recognized / Unrecognized pour que l'appelant choisisse
entre interrompre le run ou continuer avec une sentinelle.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, Optional, TypeVar, Union

from src.core.errors import ClassificationError

T = TypeVar("T")


class TrackType(Enum):
    """Type de piste dans un conteneur Matroska."""

    VIDEO = "video"
    AUDIO = "audio"
    SUBTITLE = "subtitle"
    OTHER = "other"


@dataclass(frozen=True)
class Track:
    """
    Piste décodée d'un conteneur.

    Attributs :
        track_type : Type de la piste
        codec_id : Identifiant de codec Matroska (ex: "V_MPEGH/ISO/HEVC")
        pixel_width : Largeur en pixels (pistes video uniquement)
        channels : Nombre de canaux (pistes audio uniquement)
    """

    track_type: TrackType
    codec_id: str
    pixel_width: Optional[int] = None
    channels: Optional[int] = None


@dataclass(frozen=True)
class ContainerInfo:
    """
    Contenu décodé d'un conteneur : pistes ordonnées et durée.

    Attributs :
        tracks : Pistes dans l'ordre du conteneur (tuple pour l'immutabilité)
        duration_seconds : Durée totale en secondes, None si absente
    """

    tracks: tuple[Track, ...] = ()
    duration_seconds: Optional[float] = None


@dataclass(frozen=True)
class Recognized(Generic[T]):
    """Valeur reconnue par une table de classification."""

    value: T


@dataclass(frozen=True)
class Unrecognized:
    """
    Valeur hors table, conservée avec l'erreur qui l'aurait signalée.

    Attributs :
        raw_id : Valeur brute (codec id, nombre de canaux...)
        error : Exception à lever si l'appelant refuse de continuer
    """

    raw_id: Optional[str]
    error: ClassificationError


Classified = Union[Recognized[T], Unrecognized]


@dataclass(frozen=True)
class VideoFormat:
    """Codec video normalisé et profondeur de couleur associée."""

    codec: str
    bit_depth: str


@dataclass(frozen=True)
class TrackClassification:
    """
    Résultat complet de la classification d'un conteneur.

    Les champs resolution, video_format et channels peuvent être Unrecognized ;
    audio_codec vaut la sentinelle "XXX" quand le codec est inconnu et
    subtitles vaut None en l'absence de sous-titre reconnu.
    """

    resolution: Classified[int]
    video_format: Classified[VideoFormat]
    audio_codec: str
    channels: Classified[str]
    subtitles: Optional[str] = None
    unresolved: tuple[Unrecognized, ...] = field(init=False, default=())

    def __post_init__(self) -> None:
        # Une piste video absente rend resolution et codec non reconnus
        # avec la meme cause : elle n'est listee qu'une fois.
        pending: list[Unrecognized] = []
        for item in (self.resolution, self.video_format, self.channels):
            if isinstance(item, Unrecognized) and item not in pending:
                pending.append(item)
        object.__setattr__(self, "unresolved", tuple(pending))

    @property
    def is_complete(self) -> bool:
        """True si toutes les valeurs obligatoires ont été reconnues."""
        return not self.unresolved

    def require(self) -> "TrackClassification":
        """Lève l'erreur de la première valeur non reconnue, sinon retourne self."""
        if self.unresolved:
            raise self.unresolved[0].error
        return self
