"""
Service de reconciliation du catalogue avec l'etat du disque.

CatalogReconciler compare le catalogue precedent au scan courant en utilisant
uniquement l'empreinte des fichiers :

- Unchanged : l'empreinte existe dans le catalogue precedent, l'enregistrement
  est recopie tel quel sans relire le conteneur
- Added : empreinte inconnue, l'enregistrement est construit (pistes, nom, note)
- Removed : empreintes du catalogue precedent jamais retrouvees pendant le scan

Les deux instantanes (catalogue precedent, fichiers courants) ne sont jamais
modifies : Removed est une difference d'ensembles calculee apres le scan.
"""

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Callable, Mapping, Optional, Sequence

from loguru import logger

from src.core.entities.movie import MediaFile, MovieRecord
from src.core.errors import MetadataUnavailable
from src.core.ports.parser import INameParser, ITrackReader
from src.core.value_objects.tracks import Recognized, TrackClassification
from src.services.classifier import MetadataClassifier
from src.services.rating_matcher import RatingMatcher

# Libelle des valeurs obligatoires non reconnues en mode tolerant
UNRECOGNIZED_LABEL = "XXX"


@dataclass(frozen=True)
class UnresolvedEntry:
    """
    Fichier catalogue avec des valeurs non reconnues (mode tolerant).

    Attributs:
        path: Fichier concerne
        title: Titre extrait
        reasons: Messages des erreurs de classification ignorees
    """

    path: Path
    title: str
    reasons: tuple[str, ...]


@dataclass
class ReconciliationResult:
    """
    Resultat d'une reconciliation.

    Attributs:
        catalog: Nouveau catalogue, dans l'ordre du scan
        added: Titres construits pendant ce run
        removed: Titres du catalogue precedent non retrouves
        unchanged: Nombre d'enregistrements reutilises
        unresolved: Fichiers catalogues avec des sentinelles (mode tolerant)
        duplicates: Fichiers ignores car leur empreinte etait deja vue
    """

    catalog: list[MovieRecord] = field(default_factory=list)
    added: list[str] = field(default_factory=list)
    removed: list[str] = field(default_factory=list)
    unchanged: int = 0
    unresolved: list[UnresolvedEntry] = field(default_factory=list)
    duplicates: list[Path] = field(default_factory=list)

    @property
    def has_changes(self) -> bool:
        """True si au moins un film a ete ajoute ou retire."""
        return bool(self.added or self.removed)


def format_duration(seconds: float) -> str:
    """Formate une duree en "2h 05min" (les secondes sont tronquees)."""
    total_minutes = int(seconds) // 60
    hours, minutes = divmod(total_minutes, 60)
    return f"{hours}h {minutes:02d}min"


def index_by_fingerprint(records: Sequence[MovieRecord]) -> dict[str, MovieRecord]:
    """
    Indexe un catalogue par empreinte.

    En cas d'empreinte dupliquee dans un catalogue existant, le premier
    enregistrement est conserve.
    """
    index: dict[str, MovieRecord] = {}
    for record in records:
        if record.hash in index:
            logger.warning(f"Empreinte dupliquee dans le catalogue: {record.hash} ({record.title})")
            continue
        index[record.hash] = record
    return index


class CatalogReconciler:
    """
    Orchestrateur Unchanged / Added / Removed.

    Coordonne:
    - Le lecteur de pistes (ITrackReader) pour les fichiers inconnus
    - Le parser de noms (INameParser) pour titre, annee, encodeur, remux
    - Le classifieur (MetadataClassifier) pour les attributs techniques
    - Le matcher (RatingMatcher) pour la note externe
    """

    def __init__(
        self,
        track_reader: ITrackReader,
        name_parser: INameParser,
        classifier: MetadataClassifier,
        rating_matcher: RatingMatcher,
        fingerprint_fn: Callable[[MediaFile], tuple[float, str]],
        strict: bool = True,
    ) -> None:
        """
        Initialise le reconciliateur.

        Args:
            track_reader: Lecture des pistes des conteneurs
            name_parser: Extraction du titre et de l'annee
            classifier: Classification des pistes
            rating_matcher: Association des notes
            fingerprint_fn: Calcul (taille lisible, empreinte) d'un fichier
                            (ex: fingerprint_media)
            strict: Si True, une valeur non reconnue interrompt le run ;
                    sinon le film est catalogue avec des sentinelles "XXX"
        """
        self._track_reader = track_reader
        self._name_parser = name_parser
        self._classifier = classifier
        self._rating_matcher = rating_matcher
        self._fingerprint_fn = fingerprint_fn
        self._strict = strict

    def reconcile(
        self,
        previous: Sequence[MovieRecord],
        files: Sequence[MediaFile],
        ratings: Mapping[str, str],
        strict: Optional[bool] = None,
    ) -> ReconciliationResult:
        """
        Reconcilie le catalogue precedent avec les fichiers scannes.

        Args:
            previous: Catalogue precedent (vide au premier run)
            files: Fichiers courants, dans l'ordre du scan
            ratings: Instantane titre -> note
            strict: Surcharge ponctuelle du mode strict

        Returns:
            ReconciliationResult avec le nouveau catalogue et le rapport

        Raises:
            CatalogError: Toute erreur fatale interrompt la reconciliation
        """
        strict_mode = self._strict if strict is None else strict
        previous_index = index_by_fingerprint(previous)
        seen: set[str] = set()
        reused: set[str] = set()
        result = ReconciliationResult()

        for media_file in files:
            size, fingerprint = self._fingerprint_fn(media_file)

            if fingerprint in seen:
                logger.warning(f"Empreinte {fingerprint} deja vue, fichier ignore: {media_file.path}")
                result.duplicates.append(media_file.path)
                continue
            seen.add(fingerprint)

            stored = previous_index.get(fingerprint)
            if stored is not None:
                logger.debug(f"Inchange: {stored.title} ({fingerprint})")
                result.catalog.append(replace(stored))
                reused.add(fingerprint)
                result.unchanged += 1
                continue

            record = self._build_record(media_file, size, fingerprint, ratings, strict_mode, result)
            logger.info(f"Ajoute: {record.title} ({record.year})")
            result.catalog.append(record)
            result.added.append(record.title)

        result.removed = [
            record.title for record in previous_index.values() if record.hash not in reused
        ]
        for title in result.removed:
            logger.info(f"Retire: {title}")

        return result

    def _build_record(
        self,
        media_file: MediaFile,
        size: float,
        fingerprint: str,
        ratings: Mapping[str, str],
        strict: bool,
        result: ReconciliationResult,
    ) -> MovieRecord:
        """Construit l'enregistrement d'un fichier inconnu du catalogue."""
        parsed = self._name_parser.parse(str(media_file.path))

        container = self._track_reader.read(media_file.path)
        if container.duration_seconds is None:
            raise MetadataUnavailable("Duree absente du conteneur", media_file.path)

        classification = self._classifier.classify(container.tracks)

        if strict:
            classification.require()
        elif not classification.is_complete:
            reasons = tuple(str(item.error) for item in classification.unresolved)
            logger.warning(f"Valeurs non reconnues pour {parsed.title}: {', '.join(reasons)}")
            result.unresolved.append(
                UnresolvedEntry(path=media_file.path, title=parsed.title, reasons=reasons)
            )

        res, v_codec, bit_depth, channels = self._labels(classification)

        return MovieRecord(
            title=parsed.title,
            year=parsed.year,
            rating=self._rating_matcher.match(parsed.title, ratings),
            size=size,
            duration=format_duration(container.duration_seconds),
            res=res,
            bit_depth=bit_depth,
            v_codec=v_codec,
            a_codec=classification.audio_codec,
            subs=classification.subtitles,
            channels=channels,
            encoder=parsed.encoder,
            remux=parsed.remux,
            hash=fingerprint,
        )

    @staticmethod
    def _labels(
        classification: TrackClassification,
    ) -> tuple[Optional[int], str, str, str]:
        """Extrait (res, v_codec, bit_depth, channels), sentinelles comprises."""
        res = (
            classification.resolution.value
            if isinstance(classification.resolution, Recognized)
            else None
        )
        if isinstance(classification.video_format, Recognized):
            v_codec = classification.video_format.value.codec
            bit_depth = classification.video_format.value.bit_depth
        else:
            v_codec = bit_depth = UNRECOGNIZED_LABEL
        channels = (
            classification.channels.value
            if isinstance(classification.channels, Recognized)
            else UNRECOGNIZED_LABEL
        )
        return res, v_codec, bit_depth, channels
