"""
Service de scan du dossier a reconcilier.

Parcourt recursivement le dossier et classe les fichiers par role
(video, sous-titre, autre) selon leur extension.
"""

from pathlib import Path
from typing import Iterable

from loguru import logger

from submatch.core.entities import MediaFile
from submatch.core.errors import FilesystemError
from submatch.core.ports.file_system import IFileSystem
from submatch.utils.constants import SUBTITLE_EXTENSIONS, VIDEO_EXTENSIONS
from submatch.utils.helpers import normalize_extensions


class ScannerService:
    """
    Service de decouverte des fichiers video et sous-titres.

    L'ordre de decouverte est deterministe (voir IFileSystem.walk_files) :
    il sert d'ordre de traitement des videos et de dernier critere de
    departage entre sous-titres candidats.
    """

    def __init__(
        self,
        file_system: IFileSystem,
        video_extensions: Iterable[str] = VIDEO_EXTENSIONS,
        subtitle_extensions: Iterable[str] = SUBTITLE_EXTENSIONS,
    ) -> None:
        """
        Initialise le service de scan.

        Args:
            file_system: Implementation de IFileSystem pour le parcours
            video_extensions: Extensions video reconnues
            subtitle_extensions: Extensions sous-titres reconnues
        """
        self._file_system = file_system
        self._video_extensions = normalize_extensions(video_extensions)
        self._subtitle_extensions = normalize_extensions(subtitle_extensions)

    @property
    def video_extensions(self) -> frozenset[str]:
        return self._video_extensions

    @property
    def subtitle_extensions(self) -> frozenset[str]:
        return self._subtitle_extensions

    def classify(self, path: Path) -> MediaFile:
        """Construit le MediaFile d'un chemin avec son role."""
        return MediaFile.from_path(
            path, self._video_extensions, self._subtitle_extensions
        )

    def scan(self, root: Path, extensions: Iterable[str]) -> list[MediaFile]:
        """
        Liste les fichiers sous root dont l'extension est dans extensions.

        Args:
            root: Dossier racine du scan
            extensions: Extensions retenues (insensibles a la casse)

        Returns:
            MediaFile dans l'ordre de decouverte

        Raises:
            FilesystemError: Si root n'existe pas ou ne peut pas etre lu
        """
        wanted = normalize_extensions(extensions)
        if not self._file_system.is_dir(root):
            raise FilesystemError(root, "introuvable ou pas un repertoire")

        try:
            paths = self._file_system.walk_files(root)
        except OSError as e:
            raise FilesystemError(root, str(e)) from e

        found = [
            self.classify(path)
            for path in paths
            if path.suffix.lower() in wanted
        ]
        logger.debug(f"Scan de {root}: {len(found)} fichier(s) {sorted(wanted)}")
        return found

    def scan_videos(self, root: Path) -> list[MediaFile]:
        """Liste les videos sous root."""
        return self.scan(root, self._video_extensions)

    def scan_subtitles(self, root: Path) -> list[MediaFile]:
        """Liste les sous-titres sous root."""
        return self.scan(root, self._subtitle_extensions)

