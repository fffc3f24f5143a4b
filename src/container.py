"""
Container d'injection de dependances via dependency-injector.

Fournit une gestion centralisee des dependances pour la CLI :
adaptateurs (systeme de fichiers, pymediainfo, Letterboxd, CSV) et services
(classification, matching, reconciliation, renommage).
"""

from dependency_injector import containers, providers

from .adapters.api.letterboxd_client import LetterboxdClient
from .adapters.file_system import FileSystemAdapter
from .adapters.parsing.mediainfo_reader import MediaInfoTrackReader
from .adapters.parsing.release_name_parser import ReleaseNameParser
from .config import Settings
from .infrastructure.persistence.hash_service import fingerprint_media
from .infrastructure.persistence.repositories import CsvCatalogRepository
from .services.catalog_updater import CatalogUpdaterService
from .services.classifier import MetadataClassifier
from .services.rating_matcher import RatingMatcher
from .services.reconciler import CatalogReconciler
from .services.renamer import RenamerService


def _build_rating_source(settings: Settings):
    """Cree le client Letterboxd, ou None si aucune URL n'est configuree."""
    if not settings.ratings_enabled:
        return None
    return LetterboxdClient(
        base_url=settings.ratings_url,
        max_attempts=settings.ratings_max_attempts,
    )


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        updater = container.catalog_updater_service()
        result = await updater.update(UpdateConfig(library_dir=...))
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Adapters - implementations concretes des ports
    file_system = providers.Singleton(
        FileSystemAdapter,
        extensions=config.provided.video_extensions,
    )
    track_reader = providers.Singleton(MediaInfoTrackReader)
    name_parser = providers.Singleton(
        ReleaseNameParser,
        encoder_tags=config.provided.encoder_tags,
        prefix_length=config.provided.effective_prefix_length,
    )
    catalog_repository = providers.Factory(
        CsvCatalogRepository,
        catalog_path=config.provided.catalog_path,
    )

    # Source de notes - Factory car le client est ferme a la fin de chaque run
    rating_source = providers.Factory(_build_rating_source, settings=config)

    # Services stateless - Singletons
    classifier = providers.Singleton(MetadataClassifier)
    rating_matcher = providers.Singleton(
        RatingMatcher,
        threshold=config.provided.rating_match_threshold,
    )

    reconciler = providers.Factory(
        CatalogReconciler,
        track_reader=track_reader,
        name_parser=name_parser,
        classifier=classifier,
        rating_matcher=rating_matcher,
        fingerprint_fn=providers.Object(fingerprint_media),
        strict=config.provided.strict_classification,
    )

    catalog_updater_service = providers.Factory(
        CatalogUpdaterService,
        repository=catalog_repository,
        scanner=file_system,
        reconciler=reconciler,
        rating_source=rating_source,
    )

    renamer_service = providers.Factory(
        RenamerService,
        scanner=file_system,
        fingerprint_fn=providers.Object(fingerprint_media),
    )
