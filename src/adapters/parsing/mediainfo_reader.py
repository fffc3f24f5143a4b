"""
Implementation du lecteur de pistes avec pymediainfo.

Ce module fournit MediaInfoTrackReader qui implemente ITrackReader
pour decoder les pistes (codec id Matroska, largeur, canaux) et la duree
des fichiers video.
"""

import re
from pathlib import Path
from typing import Any, Optional

from loguru import logger
from pymediainfo import MediaInfo as PyMediaInfo

from src.core.errors import MetadataUnavailable
from src.core.ports.parser import ITrackReader
from src.core.value_objects.tracks import ContainerInfo, Track, TrackType


class MediaInfoTrackReader(ITrackReader):
    """
    Lecteur de pistes utilisant pymediainfo.

    Conserve l'ordre des pistes du conteneur et ne garde que les pistes
    video, audio et sous-titres ; la piste generale fournit la duree.
    """

    # Mapping des types de piste mediainfo vers TrackType
    TRACK_TYPE_MAPPING: dict[str, TrackType] = {
        "Video": TrackType.VIDEO,
        "Audio": TrackType.AUDIO,
        "Text": TrackType.SUBTITLE,
    }

    # MediaInfo suffixe certains codec id Matroska par le profil (A_AAC-2)
    PROFILE_SUFFIX = re.compile(r"-\d+$")

    def read(self, file_path: Path) -> ContainerInfo:
        """
        Lit les pistes et la duree d'un fichier video.

        Args:
            file_path: Chemin complet vers le fichier video

        Returns:
            ContainerInfo avec les pistes dans l'ordre du conteneur

        Raises:
            MetadataUnavailable: Si le fichier est absent ou illisible
        """
        if not file_path.exists():
            raise MetadataUnavailable("Fichier introuvable", file_path)

        try:
            media_info = PyMediaInfo.parse(str(file_path))
        except (OSError, RuntimeError) as e:
            raise MetadataUnavailable(f"Conteneur illisible ({e})", file_path) from e

        tracks: list[Track] = []
        duration_seconds: Optional[float] = None

        for track in media_info.tracks:
            if track.track_type == "General":
                duration_seconds = self._extract_duration(track)
                continue

            track_type = self.TRACK_TYPE_MAPPING.get(track.track_type)
            if track_type is None:
                continue

            tracks.append(
                Track(
                    track_type=track_type,
                    codec_id=self._normalize_codec_id(track.codec_id),
                    pixel_width=self._to_int(track.width) if track_type == TrackType.VIDEO else None,
                    channels=self._to_int(track.channel_s) if track_type == TrackType.AUDIO else None,
                )
            )

        logger.debug(f"{len(tracks)} pistes lues dans {file_path.name}")
        return ContainerInfo(tracks=tuple(tracks), duration_seconds=duration_seconds)

    def _extract_duration(self, general_track: Any) -> Optional[float]:
        """
        Extrait la duree en SECONDES depuis la piste generale.

        CRITICAL: pymediainfo retourne la duree en millisecondes!
        """
        duration_ms = general_track.duration
        if duration_ms is None:
            return None
        try:
            return float(duration_ms) / 1000
        except (TypeError, ValueError):
            return None

    @staticmethod
    def _to_int(value: Any) -> Optional[int]:
        """Convertit une valeur mediainfo (int ou texte) en entier."""
        if value is None:
            return None
        try:
            return int(value)
        except (TypeError, ValueError):
            return None

    @classmethod
    def _normalize_codec_id(cls, codec_id: Optional[str]) -> str:
        """Ramene le codec id MediaInfo a l'identifiant Matroska (A_AAC-2 -> A_AAC)."""
        if not codec_id:
            return ""
        return cls.PROFILE_SUFFIX.sub("", codec_id.strip())
