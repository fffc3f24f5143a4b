"""
Fixtures pytest partagees pour les tests movielog.

Ce module contient les fixtures communes utilisees dans les tests:
- Conteneur complet type (voir tests/fixtures/catalog.py pour les pistes)
- Mocks des interfaces (ITrackReader, ILibraryScanner, ICatalogRepository)
- Settings de test avec chemins temporaires
- Enregistrement de catalogue type
"""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from src.config import Settings
from src.core.entities.movie import MovieRecord
from src.core.ports.file_system import ILibraryScanner
from src.core.ports.parser import ITrackReader
from src.core.ports.repositories import ICatalogRepository
from src.core.value_objects.tracks import ContainerInfo
from tests.fixtures.catalog import audio_track, make_record, subtitle_track, video_track


@pytest.fixture
def complete_container() -> ContainerInfo:
    """Conteneur 4K HEVC / TrueHD 7.1 / PGS de 2h05."""
    return ContainerInfo(
        tracks=(video_track(), audio_track(), subtitle_track()),
        duration_seconds=7500.0,
    )


@pytest.fixture
def mock_track_reader(complete_container: ContainerInfo) -> MagicMock:
    """
    Mock de ITrackReader pour les tests.

    Retourne le conteneur complet par defaut.
    Configurer le mock dans chaque test pour des comportements specifiques.
    """
    mock = MagicMock(spec=ITrackReader)
    mock.read.return_value = complete_container
    return mock


@pytest.fixture
def mock_scanner() -> MagicMock:
    """
    Mock de ILibraryScanner pour les tests.

    Les valeurs de retour doivent etre configurees dans chaque test.
    """
    mock = MagicMock(spec=ILibraryScanner)
    mock.list_video_files.return_value = []
    return mock


@pytest.fixture
def mock_repository() -> MagicMock:
    """Mock de ICatalogRepository, catalogue precedent vide par defaut."""
    mock = MagicMock(spec=ICatalogRepository)
    mock.load.return_value = []
    return mock


@pytest.fixture
def stored_record() -> MovieRecord:
    """Enregistrement type du catalogue precedent."""
    return make_record()


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """
    Settings de test avec chemins temporaires.

    Utilise tmp_path de pytest pour creer une videotheque et un catalogue
    isoles pour chaque test.
    """
    library_dir = tmp_path / "library"
    library_dir.mkdir(parents=True)

    return Settings(
        library_dir=library_dir,
        catalog_path=tmp_path / "movie_log.csv",
        ratings_url=None,
        log_file=tmp_path / "test.log",
    )
