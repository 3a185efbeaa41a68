"""
Point d'entrée CLI de SubMatch.

Initialise le container DI, configure le logging et fournit les commandes CLI.
"""

from typing import Annotated

import typer
from loguru import logger

from . import __version__
from .adapters.cli.commands import interactive, reconcile
from .adapters.cli.console import state
from .config import Settings
from .container import Container
from .logging_config import configure_logging, set_console_level

app = typer.Typer(
    name="submatch",
    help="Regroupe les épisodes d'une série et renomme leurs sous-titres",
)
container = Container()

# Niveaux console selon -v/-vv (index = nombre de -v)
_VERBOSE_LEVELS = ("INFO", "DEBUG", "TRACE")


def console_level(verbose: int, quiet: bool, default: str) -> str:
    """Niveau de log console effectif selon les options globales."""
    if quiet:
        return "ERROR"
    if verbose:
        return _VERBOSE_LEVELS[min(verbose, len(_VERBOSE_LEVELS) - 1)]
    return default


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
    """SubMatch - Reconciliation des sous-titres d'une série."""
    state["quiet"] = quiet
    state["verbose"] = 0 if quiet else verbose

    if quiet or verbose:
        set_console_level(console_level(verbose, quiet, get_config().log_level))


# Monter les commandes
app.command()(reconcile)
app.command()(interactive)


def get_config() -> Settings:
    """Récupère les paramètres de l'application depuis le container DI."""
    return container.config()


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = get_config()
    logger.info("Configuration SubMatch")
    typer.echo(f"Extensions vidéo : {', '.join(sorted(config.video_extensions))}")
    typer.echo(f"Extensions sous-titres : {', '.join(sorted(config.subtitle_extensions))}")
    typer.echo(f"Extensions archives : {', '.join(sorted(config.archive_extensions))}")
    typer.echo(f"Extraction des archives : {'activée' if config.extract_archives else 'désactivée'}")
    typer.echo(f"7-Zip : {config.seven_zip_path or 'recherché dans le PATH'}")
    typer.echo(f"Journal d'audit : {config.audit_log_name}")
    typer.echo(f"Dossier de sauvegarde : {config.backup_dir_name}")
    typer.echo(f"Nettoyage sous-dossiers : {'activé' if config.cleanup_subfolders else 'désactivé'}")
    typer.echo(f"Nettoyage fichiers : {'activé' if config.cleanup_unrelated_files else 'désactivé'}")
    typer.echo(f"Confirmation : {'requise' if config.require_confirmation else 'non requise'}")
    typer.echo(f"Niveau de log : {config.log_level}")
    typer.echo(f"Fichier de log : {config.log_file}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"SubMatch v{__version__}")


def main() -> None:
    """Point d'entrée de l'application."""
    # Charge la configuration et configure le logging
    settings = container.config()
    configure_logging(
        log_level=settings.log_level,
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
    )

    logger.info("Démarrage de SubMatch", version=__version__)

    # Lance la CLI
    app()


if __name__ == "__main__":
    main()
