"""Sous-package CLI commands - re-exporte les commandes publiques."""

from submatch.adapters.cli.commands.interactive_command import interactive
from submatch.adapters.cli.commands.reconcile_command import reconcile

__all__ = [
    "interactive",
    "reconcile",
]
