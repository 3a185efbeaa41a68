"""
Hierarchie des exceptions de SubMatch.

Seules les erreurs fatales pour un run remontent jusqu'a l'appelant.
Les echecs par fichier (deplacement, suppression, extraction) sont
interceptes au niveau de l'operation et consignes dans le journal d'audit.
"""

from pathlib import Path
from typing import Optional


class SubMatchError(Exception):
    """Exception de base pour toutes les erreurs de SubMatch."""


class FilesystemError(SubMatchError):
    """
    Exception levee quand le dossier racine est inaccessible.

    Attributes:
        path: Chemin du dossier en cause
    """

    def __init__(self, path: Path, reason: Optional[str] = None) -> None:
        """
        Initialise l'erreur avec le chemin et la cause optionnelle.

        Args:
            path: Dossier introuvable ou illisible
            reason: Message de l'erreur sous-jacente (optionnel)
        """
        self.path = path
        self.reason = reason
        message = f"Dossier inaccessible: {path}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class ArchiveError(SubMatchError):
    """Exception levee quand une archive ne peut pas etre extraite."""

    def __init__(self, archive: Path, reason: str) -> None:
        self.archive = archive
        self.reason = reason
        super().__init__(f"Extraction impossible de {archive.name}: {reason}")
