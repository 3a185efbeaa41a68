"""Commande CLI reconcile : reconciliation d'un dossier de serie."""

from contextlib import nullcontext
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.markup import escape

from submatch.adapters.cli.console import (
    confirm_delete,
    console,
    rich_log_sink,
    state,
    suppress_loguru,
)
from submatch.container import Container
from submatch.core.errors import FilesystemError
from submatch.services.cleanup import CleanupOutcome
from submatch.services.matcher import MatchStatus
from submatch.services.reconciler import ReconcileReport


def reconcile(
    folder: Annotated[
        Path,
        typer.Argument(help="Dossier de la serie a reconcilier"),
    ],
    cleanup: Annotated[
        bool,
        typer.Option("--cleanup", help="Activer les deux nettoyages"),
    ] = False,
    cleanup_subfolders: Annotated[
        bool,
        typer.Option("--cleanup-subfolders", help="Supprimer les sous-dossiers"),
    ] = False,
    cleanup_files: Annotated[
        bool,
        typer.Option("--cleanup-files", help="Supprimer les fichiers etrangers"),
    ] = False,
    yes: Annotated[
        bool,
        typer.Option("--yes", "-y", help="Supprimer sans demander confirmation"),
    ] = False,
    no_extract: Annotated[
        bool,
        typer.Option("--no-extract", help="Ne pas extraire les archives"),
    ] = False,
) -> None:
    """Regroupe les videos et renomme leurs sous-titres."""
    container = Container()
    config = container.config()

    report = run_reconcile(
        container,
        folder,
        cleanup_subfolders=cleanup or cleanup_subfolders or config.cleanup_subfolders,
        cleanup_unrelated_files=cleanup or cleanup_files or config.cleanup_unrelated_files,
        require_confirmation=config.require_confirmation and not yes,
        extract_archives=config.extract_archives and not no_extract,
    )
    if report is None:
        raise typer.Exit(1)


def run_reconcile(
    container: Container,
    folder: Path,
    cleanup_subfolders: bool,
    cleanup_unrelated_files: bool,
    require_confirmation: bool,
    extract_archives: bool,
) -> Optional[ReconcileReport]:
    """
    Execute un run avec affichage Rich.

    Returns:
        Le bilan du run, ou None si le dossier est inaccessible.
    """
    reconciler = container.reconciler_service(extract_archives=extract_archives)

    console.print(f"\n[bold cyan]Traitement du dossier:[/bold cyan] {escape(str(folder))}")

    # Les messages d'audit sont deja affiches par rich_log_sink
    quiet_logs = suppress_loguru() if not state["verbose"] else nullcontext()
    try:
        with quiet_logs:
            report = reconciler.reconcile(
                folder,
                cleanup_subfolders=cleanup_subfolders,
                cleanup_unrelated_files=cleanup_unrelated_files,
                require_confirmation=require_confirmation,
                log_sink=rich_log_sink,
                confirm_callback=confirm_delete,
            )
    except FilesystemError as e:
        console.print(f"[red]Erreur: {escape(str(e))}[/red]", soft_wrap=True)
        return None

    display_summary(report)
    return report


def display_summary(report: ReconcileReport) -> None:
    """Affiche le bilan d'un run."""
    renamed = sum(1 for m in report.matches if m.status == MatchStatus.RENAMED)
    correct = sum(1 for m in report.matches if m.status == MatchStatus.CORRECT_NAME)
    failed = sum(1 for m in report.matches if m.status == MatchStatus.FAILED)
    without = len(report.videos) - len(report.matches)

    console.print("\n[bold]Bilan[/bold]")
    console.print(f"  Videos: {len(report.videos)}")
    console.print(f"  Sous-titres renommes: [yellow]{renamed}[/yellow]")
    console.print(f"  Sous-titres deja corrects: [green]{correct}[/green]")
    if failed:
        console.print(f"  Echecs de renommage: [red]{failed}[/red]")
    if without:
        console.print(f"  Videos sans sous-titre: [dim]{without}[/dim]")
    if report.extracted_archives or report.failed_archives:
        console.print(
            f"  Archives extraites: {len(report.extracted_archives)}"
            f" (echecs: {len(report.failed_archives)})"
        )
    for label, result in (
        ("Dossiers", report.subfolders_cleanup),
        ("Fichiers", report.files_cleanup),
    ):
        if result.outcome == CleanupOutcome.EXECUTED:
            console.print(
                f"  {label} supprimes: {len(result.deleted)}"
                f" (echecs: {len(result.failed)})"
            )
        elif result.outcome == CleanupOutcome.SKIPPED:
            console.print(f"  {label} conserves: {len(result.skipped)}")
    console.print(f"  [dim]Journal: {report.log_file}[/dim]")
