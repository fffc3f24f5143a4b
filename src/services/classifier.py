"""
Service de classification des pistes d'un conteneur Matroska.

MetadataClassifier transforme la liste ordonnee des pistes en attributs
normalises du catalogue : palier de resolution, codec video et profondeur,
codec audio, disposition des canaux et format de sous-titres.

Les tables sont fermees : une valeur hors table n'est jamais devinee.
Les champs obligatoires non reconnus sont retournes comme Unrecognized
et c'est l'appelant qui decide d'interrompre ou de continuer.
"""

from typing import Optional, Sequence

from loguru import logger

from src.core.errors import (
    MissingTrack,
    UnknownChannelLayout,
    UnknownVideoCodec,
    UnresolvableResolution,
)
from src.core.value_objects.tracks import (
    Classified,
    Recognized,
    Track,
    TrackClassification,
    TrackType,
    Unrecognized,
    VideoFormat,
)

# Sentinelle conservee pour audit quand le codec audio est inconnu
UNKNOWN_AUDIO_CODEC = "XXX"

# Largeur maximale d'une source 1080p, au-dela le palier est 2160
FULL_HD_WIDTH = 1920


class MetadataClassifier:
    """
    Classifieur des pistes video, audio et sous-titres.

    Les pistes video et audio sont recherchees par type (premiere piste
    de chaque type) et non par position dans le conteneur.
    """

    # Mapping des codec id video vers (codec normalise, profondeur)
    VIDEO_CODEC_MAPPING: dict[str, VideoFormat] = {
        "V_MPEGH/ISO/HEVC": VideoFormat(codec="x265", bit_depth="10bit"),
        "V_MPEG4/ISO/AVC": VideoFormat(codec="x264", bit_depth="8bit"),
    }

    # Mapping des codec id audio vers noms normalises
    AUDIO_CODEC_MAPPING: dict[str, str] = {
        "A_AAC": "AAC",
        "A_AC3": "AC3",
        "A_EAC3": "EAC3",
        "A_DTS": "DTS",
        "A_TRUEHD": "TrueHD Atmos",
    }

    # Mapping nombre de canaux -> notation standard
    CHANNEL_MAPPING: dict[int, str] = {
        8: "7.1",
        7: "6.1",
        6: "5.1",
        4: "4.0",
        2: "2.0",
        0: "1.0",
    }

    # Mapping des codec id de sous-titres vers formats
    SUBTITLE_MAPPING: dict[str, str] = {
        "S_VOBSUB": "VOB",
        "S_TEXT/UTF8": "SRT",
        "S_HDMV/PGS": "PGS",
        "S_TEXT/ASS": "SSA",
    }

    def classify(self, tracks: Sequence[Track]) -> TrackClassification:
        """
        Classifie l'ensemble des pistes d'un conteneur.

        Args:
            tracks: Pistes dans l'ordre du conteneur

        Returns:
            TrackClassification, eventuellement incomplete (voir unresolved)
        """
        video_track = self._first_of_type(tracks, TrackType.VIDEO)
        audio_track = self._first_of_type(tracks, TrackType.AUDIO)

        if video_track is None:
            missing = Unrecognized(raw_id=None, error=MissingTrack("video"))
            resolution: Classified[int] = missing
            video_format: Classified[VideoFormat] = missing
        else:
            resolution = self.classify_resolution(video_track)
            video_format = self.classify_video_codec(video_track.codec_id)

        if audio_track is None:
            audio_codec = UNKNOWN_AUDIO_CODEC
            channels: Classified[str] = Unrecognized(raw_id=None, error=MissingTrack("audio"))
        else:
            audio_codec = self.classify_audio_codec(audio_track.codec_id)
            channels = self.classify_channels(audio_track.channels)

        classification = TrackClassification(
            resolution=resolution,
            video_format=video_format,
            audio_codec=audio_codec,
            channels=channels,
            subtitles=self.classify_subtitles(tracks),
        )
        for item in classification.unresolved:
            logger.debug(f"Valeur non reconnue: {item.error}")
        return classification

    def classify_resolution(self, track: Track) -> Classified[int]:
        """
        Determine le palier de resolution depuis la largeur en pixels.

        - Largeur > 1920 : 2160
        - Largeur <= 1920 : 1080
        - Largeur absente : Unrecognized(UnresolvableResolution)
        """
        width = track.pixel_width
        if width is None:
            return Unrecognized(raw_id=None, error=UnresolvableResolution(None))
        return Recognized(2160 if width > FULL_HD_WIDTH else 1080)

    def classify_video_codec(self, codec_id: str) -> Classified[VideoFormat]:
        """Normalise le codec video et en deduit la profondeur de couleur."""
        video_format = self.VIDEO_CODEC_MAPPING.get(codec_id)
        if video_format is None:
            return Unrecognized(raw_id=codec_id, error=UnknownVideoCodec(codec_id))
        return Recognized(video_format)

    def classify_audio_codec(self, codec_id: str) -> str:
        """Normalise le codec audio, "XXX" si le codec est hors table."""
        return self.AUDIO_CODEC_MAPPING.get(codec_id, UNKNOWN_AUDIO_CODEC)

    def classify_channels(self, channel_count: Optional[int]) -> Classified[str]:
        """Formate le nombre de canaux en notation standard (2.0, 5.1, 7.1...)."""
        layout = self.CHANNEL_MAPPING.get(channel_count) if channel_count is not None else None
        if layout is None:
            raw = None if channel_count is None else str(channel_count)
            return Unrecognized(raw_id=raw, error=UnknownChannelLayout(raw))
        return Recognized(layout)

    def classify_subtitles(self, tracks: Sequence[Track]) -> Optional[str]:
        """
        Retourne le format de la premiere piste de sous-titres.

        Les pistes suivantes sont ignorees. L'absence de sous-titre ou un
        codec inconnu donnent None : ce n'est pas une erreur.
        """
        subtitle_track = self._first_of_type(tracks, TrackType.SUBTITLE)
        if subtitle_track is None:
            return None
        return self.SUBTITLE_MAPPING.get(subtitle_track.codec_id)

    @staticmethod
    def _first_of_type(tracks: Sequence[Track], track_type: TrackType) -> Optional[Track]:
        return next((track for track in tracks if track.track_type == track_type), None)
