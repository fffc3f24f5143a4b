"""
Commandes CLI du catalogue (update, rename).
"""

import asyncio
from typing import Annotated

import httpx
import typer

from src.adapters.api.retry import RateLimitError
from src.adapters.cli.helpers import console, render_result, suppress_loguru, with_container
from src.core.errors import CatalogError
from src.services.catalog_updater import UpdateConfig


def update(
    lenient: Annotated[
        bool,
        typer.Option(
            "--lenient",
            help="Catalogue les pistes non reconnues avec des valeurs XXX au lieu d'echouer",
        ),
    ] = False,
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", help="Calcule le bilan sans ecrire le catalogue"),
    ] = False,
) -> None:
    """Met a jour le catalogue depuis la videotheque et la liste de notes."""
    asyncio.run(_update_async(lenient, dry_run))


@with_container()
async def _update_async(container, lenient: bool, dry_run: bool) -> None:
    """Implementation async de la commande update."""
    settings = container.config()
    updater = container.catalog_updater_service()

    update_config = UpdateConfig(
        library_dir=settings.library_dir,
        scan_depth=settings.scan_depth,
        strict=False if lenient else None,
        dry_run=dry_run,
    )

    try:
        result = await updater.update(update_config)
    except CatalogError as e:
        console.print(f"[red]Erreur: {e}[/red]")
        console.print("[dim]Le catalogue precedent est inchange.[/dim]")
        raise typer.Exit(1)
    except (httpx.HTTPError, RateLimitError) as e:
        console.print(f"[red]Source de notes injoignable: {e}[/red]")
        console.print("[dim]Le catalogue precedent est inchange.[/dim]")
        raise typer.Exit(1)

    with suppress_loguru():
        render_result(result)
        if dry_run:
            console.print("[yellow]Dry-run: catalogue non ecrit.[/yellow]")
        else:
            console.print(f"[bold]Catalogue ecrit: {settings.catalog_path}[/bold]")


def rename(
    yes: Annotated[
        bool,
        typer.Option("--yes", "-y", help="Renomme sans demander de confirmation"),
    ] = False,
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", help="Affiche les renommages sans les appliquer"),
    ] = False,
) -> None:
    """Renomme les dossiers de films d'apres le catalogue."""
    asyncio.run(_rename_async(yes, dry_run))


@with_container()
async def _rename_async(container, yes: bool, dry_run: bool) -> None:
    """Implementation de la commande rename."""
    settings = container.config()
    repository = container.catalog_repository()
    scanner = container.file_system()
    renamer = container.renamer_service()

    try:
        records = repository.load()
        paths = scanner.list_video_files(settings.library_dir, settings.scan_depth)
        files = [scanner.stat(path) for path in paths]
    except CatalogError as e:
        console.print(f"[red]Erreur: {e}[/red]")
        raise typer.Exit(1)

    operations = renamer.plan(records, files, settings.library_dir)
    if not operations:
        console.print("[green]Tous les dossiers sont deja a jour.[/green]")
        raise typer.Exit(0)

    with suppress_loguru():
        for operation in operations:
            console.print(f"[cyan]{operation.source.name}[/cyan]")
            console.print(f"  -> {operation.target.name}")
        console.print(f"\n[bold]{len(operations)} dossier(s) a renommer[/bold]")

    if dry_run:
        console.print("[yellow]Dry-run: aucun dossier renomme.[/yellow]")
        return

    if not yes and not typer.confirm("Appliquer les renommages ?"):
        console.print("[dim]Annule.[/dim]")
        raise typer.Exit(0)

    try:
        renamed = renamer.apply(operations)
    except OSError as e:
        console.print(f"[red]Renommage interrompu: {e}[/red]")
        raise typer.Exit(1)

    console.print(f"[green]{renamed} dossier(s) renomme(s).[/green]")
