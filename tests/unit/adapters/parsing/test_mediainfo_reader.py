"""
Tests unitaires pour MediaInfoTrackReader.

Tests pour valider la lecture des pistes (codec id, largeur, canaux)
et de la duree depuis pymediainfo, sans fichier video reel.
"""

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from src.adapters.parsing.mediainfo_reader import MediaInfoTrackReader
from src.core.errors import MetadataUnavailable
from src.core.ports.parser import ITrackReader
from src.core.value_objects.tracks import Track, TrackType
from src.services.classifier import MetadataClassifier

PARSE_TARGET = "src.adapters.parsing.mediainfo_reader.PyMediaInfo.parse"


def mock_track(track_type: str, **attributes) -> MagicMock:
    """Piste pymediainfo simulee."""
    mock = MagicMock()
    mock.track_type = track_type
    mock.codec_id = attributes.get("codec_id")
    mock.width = attributes.get("width")
    mock.channel_s = attributes.get("channel_s")
    mock.duration = attributes.get("duration")
    return mock


@pytest.fixture
def reader() -> MediaInfoTrackReader:
    """Instance du lecteur pour les tests."""
    return MediaInfoTrackReader()


@pytest.fixture
def video_file(tmp_path: Path) -> Path:
    """Fichier .mkv factice (le contenu n'est jamais lu grace au patch)."""
    path = tmp_path / "Heat (1995)" / "Heat.mkv"
    path.parent.mkdir()
    path.write_bytes(b"\x1a\x45\xdf\xa3")
    return path


class TestMediaInfoTrackReader:
    """Tests pour read()."""

    def test_implements_interface(self, reader: MediaInfoTrackReader) -> None:
        """MediaInfoTrackReader implemente ITrackReader."""
        assert isinstance(reader, ITrackReader)

    def test_reads_tracks_in_container_order(
        self, reader: MediaInfoTrackReader, video_file: Path
    ) -> None:
        """Les pistes sont converties dans l'ordre du conteneur."""
        media_info = MagicMock()
        media_info.tracks = [
            mock_track("General", duration=7500000),
            mock_track("Video", codec_id="V_MPEGH/ISO/HEVC", width=3840),
            mock_track("Audio", codec_id="A_TRUEHD", channel_s=8),
            mock_track("Text", codec_id="S_HDMV/PGS"),
            mock_track("Menu"),
        ]

        with patch(PARSE_TARGET, return_value=media_info):
            container = reader.read(video_file)

        assert container.duration_seconds == 7500.0
        assert container.tracks == (
            Track(TrackType.VIDEO, "V_MPEGH/ISO/HEVC", pixel_width=3840),
            Track(TrackType.AUDIO, "A_TRUEHD", channels=8),
            Track(TrackType.SUBTITLE, "S_HDMV/PGS"),
        )

    def test_textual_values_converted(
        self, reader: MediaInfoTrackReader, video_file: Path
    ) -> None:
        """Les valeurs mediainfo textuelles sont converties en entiers."""
        media_info = MagicMock()
        media_info.tracks = [
            mock_track("General", duration="6000000.000"),
            mock_track("Video", codec_id="V_MPEG4/ISO/AVC", width="1920"),
            mock_track("Audio", codec_id="A_DTS", channel_s="6"),
        ]

        with patch(PARSE_TARGET, return_value=media_info):
            container = reader.read(video_file)

        assert container.duration_seconds == 6000.0
        assert container.tracks[0].pixel_width == 1920
        assert container.tracks[1].channels == 6

    def test_profile_suffix_stripped(
        self, reader: MediaInfoTrackReader, video_file: Path
    ) -> None:
        """MediaInfo rapporte A_AAC-2 pour l'AAC en MKV : le profil est retire."""
        media_info = MagicMock()
        media_info.tracks = [
            mock_track("Video", codec_id="V_MPEG4/ISO/AVC", width=1920),
            mock_track("Audio", codec_id="A_AAC-2", channel_s=2),
            mock_track("Audio", codec_id="A_AC3", channel_s=6),
        ]

        with patch(PARSE_TARGET, return_value=media_info):
            container = reader.read(video_file)

        assert [track.codec_id for track in container.tracks] == [
            "V_MPEG4/ISO/AVC",
            "A_AAC",
            "A_AC3",
        ]
        assert MetadataClassifier().classify(container.tracks).audio_codec == "AAC"

    def test_missing_duration(self, reader: MediaInfoTrackReader, video_file: Path) -> None:
        """Sans duree dans la piste generale, duration_seconds vaut None."""
        media_info = MagicMock()
        media_info.tracks = [mock_track("General"), mock_track("Video", codec_id="V_AV1")]

        with patch(PARSE_TARGET, return_value=media_info):
            container = reader.read(video_file)

        assert container.duration_seconds is None
        assert container.tracks[0].pixel_width is None

    def test_missing_file_raises(self, reader: MediaInfoTrackReader, tmp_path: Path) -> None:
        """Un fichier absent leve MetadataUnavailable."""
        with pytest.raises(MetadataUnavailable):
            reader.read(tmp_path / "absent.mkv")

    def test_unreadable_container_raises(
        self, reader: MediaInfoTrackReader, video_file: Path
    ) -> None:
        """Une erreur de pymediainfo devient MetadataUnavailable."""
        with patch(PARSE_TARGET, side_effect=OSError("libmediainfo introuvable")):
            with pytest.raises(MetadataUnavailable) as exc_info:
                reader.read(video_file)

        assert exc_info.value.path == video_file
