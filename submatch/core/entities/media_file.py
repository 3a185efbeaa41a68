"""
Entites fichier media.

Un MediaFile represente un fichier decouvert lors du scan, classe par role
(video, sous-titre, autre) selon son extension. Il est derive a la demande
depuis un chemin et n'est jamais persiste.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Iterable, Optional

from submatch.core.value_objects import EpisodeCode
from submatch.utils.constants import SUBTITLE_EXTENSIONS, VIDEO_EXTENSIONS


class FileRole(Enum):
    """Role d'un fichier dans la reconciliation."""

    VIDEO = "video"
    SUBTITLE = "subtitle"
    OTHER = "other"


@dataclass(frozen=True)
class MediaFile:
    """
    Fichier decouvert dans le dossier traite.

    Attributs :
        path : Chemin absolu du fichier
        extension : Extension en minuscules (ex: ".mkv")
        role : Role deduit de l'extension
    """

    path: Path
    extension: str
    role: FileRole = FileRole.OTHER

    @property
    def name(self) -> str:
        """Nom du fichier avec extension."""
        return self.path.name

    @property
    def stem(self) -> str:
        """Nom du fichier sans extension."""
        return self.path.stem

    @property
    def episode_code(self) -> Optional[EpisodeCode]:
        """Code d'episode extrait du nom sans extension."""
        return EpisodeCode.from_filename(self.stem)

    @classmethod
    def from_path(
        cls,
        path: Path,
        video_extensions: Iterable[str] = VIDEO_EXTENSIONS,
        subtitle_extensions: Iterable[str] = SUBTITLE_EXTENSIONS,
    ) -> "MediaFile":
        """
        Construit un MediaFile en deduisant le role depuis l'extension.

        Args :
            path : Chemin du fichier
            video_extensions : Extensions video reconnues (minuscules)
            subtitle_extensions : Extensions sous-titres reconnues (minuscules)
        """
        extension = path.suffix.lower()
        if extension in video_extensions:
            role = FileRole.VIDEO
        elif extension in subtitle_extensions:
            role = FileRole.SUBTITLE
        else:
            role = FileRole.OTHER
        return cls(path=Path(path).absolute(), extension=extension, role=role)
