"""
Utilitaires partages pour les commandes CLI de movielog.

Ce module fournit :
- console : instance Rich Console partagee
- suppress_loguru : context manager pour desactiver/reactiver les logs loguru
- with_container : decorateur injectant un container initialise
- render_result : affichage Rich du bilan d'une mise a jour
"""

from contextlib import contextmanager
from functools import wraps

from loguru import logger as loguru_logger
from rich.console import Console
from rich.table import Table

from src.container import Container
from src.services.reconciler import ReconciliationResult

console = Console()


@contextmanager
def suppress_loguru():
    """
    Context manager pour desactiver les logs loguru pendant l'affichage Rich.

    Usage:
        with suppress_loguru():
            console.print(...)
    """
    loguru_logger.disable("src")
    try:
        yield
    finally:
        loguru_logger.enable("src")


def with_container():
    """
    Decorateur qui injecte un container initialise en premier argument.

    Usage:
        @with_container()
        async def my_command(container, ...):
            config = container.config()
    """
    def decorator(func):
        @wraps(func)
        async def wrapper(*args, **kwargs):
            container = Container()
            return await func(container, *args, **kwargs)
        return wrapper
    return decorator


def render_result(result: ReconciliationResult) -> None:
    """Affiche le bilan d'une mise a jour : ajouts, suppressions, inchanges."""
    console.print(f"[green]Added:[/green] {len(result.added)}")
    for title in result.added:
        console.print(f"  + {title}")

    console.print(f"[red]Removed:[/red] {len(result.removed)}")
    for title in result.removed:
        console.print(f"  - {title}")

    console.print(f"[dim]Unchanged:[/dim] {result.unchanged}")

    if result.unresolved:
        table = Table(title="Pistes non reconnues")
        table.add_column("Fichier", style="cyan")
        table.add_column("Valeurs")
        for entry in result.unresolved:
            table.add_row(str(entry.path), ", ".join(entry.reasons))
        console.print(table)

    if result.duplicates:
        console.print(f"[yellow]Doublons ignores:[/yellow] {len(result.duplicates)}")
        for path in result.duplicates:
            console.print(f"  ! {path}")
