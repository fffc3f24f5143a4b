"""
Point d'entrée CLI de movielog.

Initialise le container DI, configure le logging et fournit les commandes CLI.
"""

from typing import Annotated

import typer
from loguru import logger

from .adapters.cli.commands import rename, update
from .config import Settings
from .container import Container
from .logging_config import configure_logging, level_from_verbosity

app = typer.Typer(
    name="movielog",
    help="Catalogue de vidéothèque : pistes, empreintes et notes",
)
container = Container()

# Etat global pour les options de verbosite
state = {"verbose": 0, "quiet": False}


@app.callback()
def main_callback(
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose", "-v", count=True, help="Augmenter la verbosite (-v, -vv)"
        ),
    ] = 0,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Mode silencieux (erreurs uniquement)"),
    ] = False,
) -> None:
    """movielog - Catalogue de vidéothèque personnelle."""
    if quiet:
        state["quiet"] = True
    else:
        state["verbose"] = verbose

    settings = get_config()
    configure_logging(
        log_level=level_from_verbosity(verbose, quiet, default=settings.log_level),
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
    )


app.command()(update)
app.command()(rename)


def get_config() -> Settings:
    """Récupère les paramètres de l'application depuis le container DI."""
    return container.config()


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = get_config()
    logger.info("Configuration movielog")
    typer.echo(f"Vidéothèque : {config.library_dir} (profondeur {config.scan_depth})")
    typer.echo(f"Préfixe ignoré avant le titre : {config.effective_prefix_length} caractères")
    typer.echo(f"Extensions : {', '.join(config.video_extensions)}")
    typer.echo(f"Catalogue : {config.catalog_path}")
    typer.echo(f"Notes : {config.ratings_url if config.ratings_enabled else 'désactivées'}")
    typer.echo(f"Seuil de similarité : {config.rating_match_threshold}")
    typer.echo(f"Classification : {'stricte' if config.strict_classification else 'tolérante'}")
    typer.echo(f"Encodeurs connus : {len(config.encoder_tags)}")
    typer.echo(f"Niveau de log : {config.log_level}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo("movielog v0.1.0")


def main() -> None:
    """Point d'entrée de l'application."""
    logger.info("Démarrage de movielog", version="0.1.0")
    app()


if __name__ == "__main__":
    main()
