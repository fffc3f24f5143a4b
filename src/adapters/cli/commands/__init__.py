"""Sous-package CLI commands - re-exporte les commandes publiques."""

from src.adapters.cli.commands.catalog_commands import (
    rename,
    update,
)

__all__ = [
    "rename",
    "update",
]
