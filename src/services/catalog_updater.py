"""
Service de mise a jour complete du catalogue.

Enchaine les etapes d'un run, dans cet ordre strict :
1. Chargement du catalogue precedent
2. Recuperation complete des notes (instantane fige pour tout le run)
3. Enumeration des fichiers de la videotheque
4. Reconciliation (Unchanged / Added / Removed)
5. Remplacement atomique du catalogue

Toute erreur avant l'etape 5 laisse le catalogue precedent intact.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from loguru import logger

from src.core.ports.api_clients import IRatingSource
from src.core.ports.file_system import ILibraryScanner
from src.core.ports.repositories import ICatalogRepository
from src.services.reconciler import CatalogReconciler, ReconciliationResult


@dataclass
class UpdateConfig:
    """
    Parametres d'un run de mise a jour.

    Attributs:
        library_dir: Racine de la videotheque
        scan_depth: Profondeur maximale du scan
        strict: Mode strict de classification (None = defaut du reconciliateur)
        dry_run: Si True, le catalogue n'est pas ecrit
    """

    library_dir: Path
    scan_depth: Optional[int] = 2
    strict: Optional[bool] = None
    dry_run: bool = False


class CatalogUpdaterService:
    """
    Service orchestrant un run complet de mise a jour du catalogue.

    Coordonne:
    - Le repository (ICatalogRepository) pour charger et remplacer le catalogue
    - La source de notes (IRatingSource), optionnelle
    - Le scanner (ILibraryScanner) pour les fichiers et leurs attributs
    - Le reconciliateur (CatalogReconciler)
    """

    def __init__(
        self,
        repository: ICatalogRepository,
        scanner: ILibraryScanner,
        reconciler: CatalogReconciler,
        rating_source: Optional[IRatingSource] = None,
    ) -> None:
        """
        Initialise le service.

        Args:
            repository: Stockage du catalogue
            scanner: Acces a la videotheque
            reconciler: Moteur de reconciliation
            rating_source: Source de notes (None = notes desactivees)
        """
        self._repository = repository
        self._scanner = scanner
        self._reconciler = reconciler
        self._rating_source = rating_source

    async def fetch_ratings(self) -> dict[str, str]:
        """Recupere l'instantane des notes, vide si aucune source n'est configuree."""
        if self._rating_source is None:
            logger.warning("Aucune source de notes configuree, notes ignorees")
            return {}
        try:
            return await self._rating_source.fetch_ratings()
        finally:
            await self._rating_source.close()

    async def update(self, config: UpdateConfig) -> ReconciliationResult:
        """
        Execute un run complet.

        Args:
            config: Parametres du run

        Returns:
            ReconciliationResult du run

        Raises:
            CatalogError: Erreur fatale, le catalogue precedent est intact
            httpx.HTTPError: Source de notes injoignable
        """
        previous = self._repository.load()
        logger.info(f"Catalogue precedent: {len(previous)} films")

        ratings = await self.fetch_ratings()

        paths = self._scanner.list_video_files(config.library_dir, config.scan_depth)
        files = [self._scanner.stat(path) for path in paths]
        logger.info(f"{len(files)} fichiers video trouves sous {config.library_dir}")

        result = self._reconciler.reconcile(previous, files, ratings, strict=config.strict)

        if config.dry_run:
            logger.info("Mode dry-run: catalogue non ecrit")
        else:
            self._repository.save(result.catalog)

        return result
