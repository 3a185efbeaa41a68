"""
Methodes d'analyse pour le nettoyage du dossier principal.

Determinent, sans rien modifier, les sous-dossiers et les fichiers
candidats a la suppression.
"""

from pathlib import Path
from typing import Iterable

from submatch.core.errors import FilesystemError
from submatch.core.ports.file_system import IFileSystem
from submatch.utils.helpers import normalize_extensions

from .dataclasses import CleanupPlan, CleanupStepType


def plan_subfolders(
    file_system: IFileSystem,
    top_folder: Path,
    backup_dir_name: str,
) -> CleanupPlan:
    """
    Liste les sous-dossiers immediats du dossier principal.

    Le dossier de sauvegarde n'est jamais propose a la suppression.

    Raises:
        FilesystemError: Si le dossier ne peut pas etre liste.
    """
    try:
        subdirs = file_system.list_subdirs(top_folder)
    except OSError as e:
        raise FilesystemError(top_folder, str(e)) from e

    return CleanupPlan(
        step=CleanupStepType.SUBFOLDERS,
        items=[d for d in subdirs if d.name != backup_dir_name],
    )


def allowed_names(
    videos: Iterable[Path],
    subtitle_extensions: Iterable[str],
) -> set[str]:
    """
    Noms (casse ignoree) des fichiers a conserver dans le dossier principal.

    Pour chaque video : la video elle-meme et toutes les variantes
    <nom><extension sous-titre>, qu'un sous-titre ait ete associe ou non.
    """
    extensions = normalize_extensions(subtitle_extensions)
    allowed: set[str] = set()
    for video in videos:
        allowed.add(video.name.casefold())
        for ext in extensions:
            allowed.add(f"{video.stem}{ext}".casefold())
    return allowed


def plan_unrelated_files(
    file_system: IFileSystem,
    top_folder: Path,
    video_extensions: Iterable[str],
    subtitle_extensions: Iterable[str],
    protected_names: Iterable[str] = (),
) -> CleanupPlan:
    """
    Liste les fichiers du dossier principal etrangers a l'ensemble final.

    Args:
        file_system: Adaptateur systeme de fichiers
        top_folder: Dossier principal
        video_extensions: Extensions video (videos residentes conservees)
        subtitle_extensions: Extensions sous-titres autorisees par video
        protected_names: Noms toujours conserves (journal d'audit)

    Raises:
        FilesystemError: Si le dossier ne peut pas etre liste.
    """
    try:
        files = file_system.list_files(top_folder)
    except OSError as e:
        raise FilesystemError(top_folder, str(e)) from e

    wanted_videos = normalize_extensions(video_extensions)
    videos = [f for f in files if f.suffix.lower() in wanted_videos]
    keep = allowed_names(videos, subtitle_extensions)
    keep.update(name.casefold() for name in protected_names)

    return CleanupPlan(
        step=CleanupStepType.UNRELATED_FILES,
        items=[f for f in files if f.name.casefold() not in keep],
    )
