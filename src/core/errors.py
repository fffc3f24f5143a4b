"""
Exceptions du domaine movielog.

Toutes les erreurs levées par le moteur de catalogue héritent de CatalogError,
ce qui permet à la CLI de les intercepter en un seul point et de terminer
le run sans toucher au catalogue précédent.

Hiérarchie :
- CatalogError
    - MetadataUnavailable : attributs fichier ou durée illisibles
    - ClassificationError : pistes non reconnues
        - UnresolvableResolution
        - UnknownVideoCodec
        - UnknownChannelLayout
        - MissingTrack
    - MalformedName : nom ne respectant pas la convention "Titre (Annee)"
    - CatalogFormatError : fichier catalogue CSV invalide
    - RatingSourceError : page de notes injoignable ou mal formée
"""

from pathlib import Path
from typing import Optional


class CatalogError(Exception):
    """Erreur de base du moteur de catalogue."""


class MetadataUnavailable(CatalogError):
    """
    Levée quand les attributs d'un fichier ne peuvent pas être lus.

    Attributs :
        path : Fichier concerné (None si inconnu)
    """

    def __init__(self, message: str, path: Optional[Path] = None) -> None:
        self.path = path
        super().__init__(f"{message}: {path}" if path is not None else message)


class ClassificationError(CatalogError):
    """
    Levée quand une piste du conteneur n'appartient pas aux tables connues.

    Attributs :
        raw_id : Valeur brute non reconnue (codec id, nombre de canaux...)
    """

    label: str = "valeur non reconnue"

    def __init__(self, raw_id: Optional[str] = None) -> None:
        self.raw_id = raw_id
        super().__init__(f"{self.label}: {raw_id!r}")


class UnresolvableResolution(ClassificationError):
    """La piste video ne fournit pas de largeur exploitable."""

    label = "resolution introuvable"


class UnknownVideoCodec(ClassificationError):
    """Codec video hors de la table connue."""

    label = "codec video inconnu"


class UnknownChannelLayout(ClassificationError):
    """Nombre de canaux audio hors de la table connue."""

    label = "nombre de canaux inconnu"


class MissingTrack(ClassificationError):
    """Aucune piste du type demande (video, audio) dans le conteneur."""

    label = "piste manquante"


class MalformedName(CatalogError):
    """
    Levée quand un nom ne suit pas la convention "<prefixe><Titre> (<Annee>)".

    Attributs :
        name : Nom analysé
    """

    def __init__(self, name: str, reason: str) -> None:
        self.name = name
        self.reason = reason
        super().__init__(f"Nom mal forme ({reason}): {name}")


class CatalogFormatError(CatalogError):
    """Le catalogue persisté ne peut pas être relu."""


class RatingSourceError(CatalogError):
    """La source de notes externe a renvoyé un contenu inexploitable."""
