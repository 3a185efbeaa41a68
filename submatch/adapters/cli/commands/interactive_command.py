"""Commande CLI interactive : reconciliation de dossiers saisis au clavier."""

from pathlib import Path

from rich.prompt import Prompt

from submatch.adapters.cli.commands.reconcile_command import run_reconcile
from submatch.adapters.cli.console import console
from submatch.container import Container

EXIT_WORD = "exit"


def clean_input(raw: str) -> str:
    """Retire les espaces et les guillemets d'un chemin colle depuis l'explorateur."""
    return raw.strip().strip('"').strip()


def interactive() -> None:
    """Demande des dossiers en boucle et les reconcilie un par un."""
    container = Container()
    config = container.config()

    while True:
        try:
            raw = Prompt.ask(
                f"\n[bold]Dossier a traiter[/bold] ([dim]{EXIT_WORD}[/dim] pour quitter)",
                console=console,
                default="",
                show_default=False,
            )
        except (EOFError, KeyboardInterrupt):
            break

        answer = clean_input(raw)
        if not answer:
            continue
        if answer.lower() == EXIT_WORD:
            break

        folder = Path(answer).expanduser()
        try:
            valid = folder.is_dir()
        except OSError:
            # Nom trop long, parent non traversable
            valid = False
        if not valid:
            console.print("[dark_orange]Chemin invalide. Reessayez.[/dark_orange]")
            continue

        run_reconcile(
            container,
            folder,
            cleanup_subfolders=config.cleanup_subfolders,
            cleanup_unrelated_files=config.cleanup_unrelated_files,
            require_confirmation=config.require_confirmation,
            extract_archives=config.extract_archives,
        )
