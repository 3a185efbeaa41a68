"""
Interface port pour l'extraction d'archives.

L'extraction est une capacite externe enfichable : le coeur de la
reconciliation ne connait que ce contrat, jamais l'API d'une
bibliotheque de compression particuliere.
"""

from abc import ABC, abstractmethod
from pathlib import Path


class IArchiveExtractor(ABC):
    """Interface d'extraction d'une archive dans un repertoire."""

    @abstractmethod
    def can_extract(self, archive: Path) -> bool:
        """Verifie si le format de l'archive est pris en charge."""
        ...

    @abstractmethod
    def extract(self, archive: Path, destination: Path) -> list[Path]:
        """
        Extrait le contenu d'une archive dans un repertoire.

        Les entrees sont ecrites avec leur chemin relatif et ecrasent
        les fichiers existants.

        Args :
            archive : Chemin de l'archive (.zip, .rar)
            destination : Repertoire cible

        Retourne :
            Liste des chemins des fichiers extraits

        Raises :
            ArchiveError : Si l'archive est illisible ou l'outil indisponible
        """
        ...
