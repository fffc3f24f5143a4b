"""
Configuration de l'application via pydantic-settings.

La configuration est chargée depuis les variables d'environnement avec le préfixe MOVIELOG_,
et peut optionnellement être fournie via un fichier .env.

L'URL de la liste de notes est optionnelle - les notes sont ignorées si elle n'est pas fournie.
"""

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Trouver le fichier .env à la racine du projet (parent de src/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"

# Groupes de release reconnus, par ordre de priorité
DEFAULT_ENCODER_TAGS: list[str] = [
    "Tigole",
    "FraMeSToR",
    "Silence",
    "afm72",
    "DDR",
    "Bandi",
    "SAMPA",
    "3xO",
    "Joy",
    "RARBG",
    "SARTRE",
    "PHOCiS",
    "TERMiNAL",
    "PSA",
    "K1tKat",
    "FreetheFish",
    "Natty",
    "IchtyFinger",
    "BeiTai",
    "LEGi0N",
    "HDH",
    "HANDS",
    "GREENOTEA",
    "IWFM",
    "FRDS",
    "Ritaj",
    "Enthwar",
    "t3nzin",
    "EDG",
]


class Settings(BaseSettings):
    """Paramètres de l'application avec support des variables d'environnement.

    Tous les paramètres peuvent être surchargés via des variables d'environnement
    avec le préfixe MOVIELOG_.
    Exemple : MOVIELOG_LOG_LEVEL=DEBUG

    Les chemins sont automatiquement étendus (~ -> répertoire home).
    """

    model_config = SettingsConfigDict(
        env_prefix="MOVIELOG_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Vidéothèque
    library_dir: Path = Field(default=Path("M:/"))
    scan_depth: int = Field(default=2, ge=1)
    video_extensions: list[str] = Field(default_factory=lambda: [".mkv"])

    # Catalogue
    catalog_path: Path = Field(default=Path("movie_log.csv"))

    # Source de notes (OPTIONNELLE - notes ignorées si non définie)
    ratings_url: Optional[str] = Field(default=None)
    ratings_max_attempts: int = Field(default=5, ge=1)

    # Parsing des noms et classification
    encoder_tags: list[str] = Field(default_factory=lambda: list(DEFAULT_ENCODER_TAGS))
    # Longueur du prefixe ignore avant le titre ; None = deduite de library_dir
    name_prefix_length: Optional[int] = Field(default=None, ge=0)
    rating_match_threshold: float = Field(default=0.8, ge=0.0, le=1.0)
    strict_classification: bool = Field(default=True)

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de rétention)
    log_level: str = Field(default="INFO")
    log_file: Path = Field(default=Path("logs/movielog.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5)

    @field_validator("library_dir", "catalog_path", "log_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Étend ~ vers le répertoire home dans les chemins."""
        return Path(v).expanduser()

    @field_validator("ratings_url")
    @classmethod
    def ensure_trailing_slash(cls, v: Optional[str]) -> Optional[str]:
        """Les pages sont construites en ajoutant "page/N" à l'URL."""
        if not v:
            return None
        return v if v.endswith("/") else f"{v}/"

    @property
    def ratings_enabled(self) -> bool:
        """Vérifie si une source de notes est configurée."""
        return self.ratings_url is not None

    @property
    def effective_prefix_length(self) -> int:
        """
        Nombre de caractères à ignorer avant le titre dans un chemin complet.

        Sans valeur explicite, c'est la racine de la vidéothèque suivie de son
        séparateur : "M:/" -> 3, "/mnt/movies" -> 12.
        """
        if self.name_prefix_length is not None:
            return self.name_prefix_length
        root = str(self.library_dir)
        return len(root) if root.endswith(("/", "\\")) else len(root) + 1
