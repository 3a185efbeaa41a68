"""
Utilitaires partages pour les commandes CLI de SubMatch.

Ce module fournit :
- console : instance Rich Console partagee
- suppress_loguru : context manager pour desactiver les logs loguru
- rich_log_sink : affichage colore des messages du journal d'audit
- confirm_delete : confirmation de suppression via un prompt Rich
"""

from contextlib import contextmanager

from loguru import logger as loguru_logger
from rich.console import Console
from rich.markup import escape
from rich.prompt import Confirm

console = Console()

# Etat global pour les options de verbosite (renseigne par le callback Typer)
state = {"verbose": 0, "quiet": False}

# Couleur d'affichage selon le debut du message d'audit
_MESSAGE_STYLES = (
    ("Failed", "red"),
    ("Backed up", "cyan"),
    ("Moved", "yellow"),
    ("Renamed", "yellow"),
    ("Correct name", "green"),
    ("Multiple subtitle candidates", "magenta"),
    ("Deleted", "magenta"),
    ("Skipped", "dim"),
    ("Extracted", "blue"),
)


@contextmanager
def suppress_loguru():
    """
    Context manager pour desactiver les logs loguru pendant l'affichage Rich.

    Usage:
        with suppress_loguru():
            console.print(...)
    """
    loguru_logger.disable("submatch")
    try:
        yield
    finally:
        loguru_logger.enable("submatch")


def style_for(message: str) -> str:
    """Retourne le style Rich d'un message d'audit."""
    for prefix, style in _MESSAGE_STYLES:
        if message.startswith(prefix):
            return style
    if message.endswith("is ready to be watched!"):
        return "bold green"
    return "white"


def rich_log_sink(message: str) -> None:
    """LogSink affichant chaque message d'audit en couleur."""
    style = style_for(message)
    console.print(f"[{style}]{escape(message)}[/{style}]", soft_wrap=True)


def confirm_delete(kind: str, description: str) -> bool:
    """
    ConfirmCallback : demande a l'utilisateur de confirmer une suppression.

    Args:
        kind: Type d'elements ("folders", "files")
        description: "<n> <kind>?" suivi des noms, un par ligne

    Returns:
        True si l'utilisateur accepte.
    """
    header, _, names = description.partition("\n")
    console.print(f"\n[bold yellow]Suppression de {kind}[/bold yellow]")
    for name in names.splitlines():
        console.print(f"  [dim]-[/dim] {escape(name)}")
    return Confirm.ask(f"Supprimer {header}", default=False, console=console)
