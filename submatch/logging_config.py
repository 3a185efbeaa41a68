"""
Configuration du logging de diagnostic via loguru.

Deux handlers :
- stderr : texte coloré, niveau réglable à chaud par les options -v/-q
- fichier : JSON avec rotation, toujours en DEBUG, pour l'analyse après coup

Le journal d'audit par dossier (match-subtitles.log) ne passe pas par ces
handlers : AuditLogger l'écrit lui-même au format texte imposé.
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)

# Identifiant loguru du handler stderr courant
_console_handler_id: Optional[int] = None


def set_console_level(log_level: str) -> None:
    """Remplace le handler stderr par un handler au niveau demandé."""
    global _console_handler_id
    if _console_handler_id is not None:
        logger.remove(_console_handler_id)
    _console_handler_id = logger.add(
        sys.stderr,
        level=log_level,
        format=CONSOLE_FORMAT,
        colorize=True,
    )


def configure_logging(
    log_level: str = "INFO",
    log_file: Optional[Path] = None,
    rotation_size: str = "10 MB",
    retention_count: int = 5,
) -> None:
    """Configure le logging de diagnostic.

    Args :
        log_level : Niveau minimum de la sortie console (DEBUG, INFO, WARNING, ERROR)
        log_file : Fichier JSON avec rotation (None : console seule)
        rotation_size : Taille maximale du fichier avant rotation (ex: "10 MB")
        retention_count : Nombre de fichiers rotatifs à conserver
    """
    global _console_handler_id
    logger.remove()
    _console_handler_id = None
    set_console_level(log_level)

    if log_file is None:
        return

    # Un dossier de log impossible à créer ne doit pas empêcher la réconciliation
    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        logger.warning(f"Fichier de log indisponible ({log_file}): {e}")
        return

    logger.add(
        log_file,
        level="DEBUG",
        format="{message}",
        serialize=True,  # Sortie JSON
        rotation=rotation_size,
        retention=retention_count,
        compression="zip",
        enqueue=True,  # Thread-safe
    )

    logger.debug("Logging configuré", log_file=str(log_file), rotation=rotation_size)
