"""
Configuration du logging de l'application via loguru.

Deux sorties :
- Console (stderr) : lisible, colorée, filtrée par le niveau choisi en CLI
- Fichier : JSON avec rotation, tout le détail d'un run (niveau DEBUG)
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

# Niveaux console selon le nombre de -v
_VERBOSITY_LEVELS = ("WARNING", "INFO", "DEBUG")


def level_from_verbosity(verbose: int, quiet: bool, default: str = "INFO") -> str:
    """
    Traduit les options -v / -q de la CLI en niveau loguru.

    Args :
        verbose : Nombre d'options -v (0 = niveau par défaut)
        quiet : Mode silencieux, erreurs uniquement
        default : Niveau configuré quand aucune option n'est donnée
    """
    if quiet:
        return "ERROR"
    if verbose <= 0:
        return default
    return _VERBOSITY_LEVELS[min(verbose, len(_VERBOSITY_LEVELS) - 1)]


def configure_logging(
    log_level: str = "INFO",
    log_file: Optional[Path] = Path("logs/movielog.log"),
    rotation_size: str = "10 MB",
    retention_count: int = 5,
) -> None:
    """Configure le logging de l'application.

    Args :
        log_level : Niveau de log minimum pour la sortie console (DEBUG, INFO, WARNING, ERROR)
        log_file : Chemin vers le fichier de log (None = pas de fichier)
        rotation_size : Taille maximale du fichier avant rotation (ex: "10 MB", "1 GB")
        retention_count : Nombre de fichiers rotatifs à conserver
    """
    # Supprime le handler par défaut
    logger.remove()

    logger.add(
        sys.stderr,
        level=log_level,
        format=(
            "<green>{time:HH:mm:ss}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan> | "
            "<level>{message}</level>"
        ),
        colorize=True,
    )

    if log_file is None:
        return

    log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_file,
        level="DEBUG",
        format="{message}",
        serialize=True,
        rotation=rotation_size,
        retention=retention_count,
        compression="zip",
    )

    logger.debug(f"Logging configure: {log_file} (rotation {rotation_size}, niveau {log_level})")
