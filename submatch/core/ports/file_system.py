"""
Interfaces ports pour le système de fichiers.

Interfaces abstraites (ports) définissant les contrats pour les opérations
fichiers. Contrairement à un simple booléen de succès, les opérations
destructrices lèvent OSError : les services ont besoin du message sous-jacent
pour le consigner dans le journal d'audit.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterator


class IFileSystem(ABC):
    """
    Interface pour les opérations de base sur les fichiers.

    Définit les opérations utilisées par la réconciliation : parcours
    ordonné, listage d'un répertoire, déplacement et suppression.
    """

    @abstractmethod
    def exists(self, path: Path) -> bool:
        """Vérifie si un chemin existe."""
        ...

    @abstractmethod
    def is_dir(self, path: Path) -> bool:
        """Vérifie si un chemin est un répertoire."""
        ...

    @abstractmethod
    def walk_files(self, root: Path) -> Iterator[Path]:
        """
        Parcourt récursivement les fichiers sous un répertoire.

        L'ordre est déterministe : fichiers du répertoire (triés par nom),
        puis sous-répertoires (triés par nom), en profondeur d'abord.

        Args :
            root : Répertoire racine du parcours

        Raises :
            OSError : Si la racine ne peut pas être lue
        """
        ...

    @abstractmethod
    def list_files(self, directory: Path) -> list[Path]:
        """
        Liste les fichiers directement contenus dans un répertoire (triés).

        Raises :
            OSError : Si le répertoire ne peut pas être lu
        """
        ...

    @abstractmethod
    def list_subdirs(self, directory: Path) -> list[Path]:
        """
        Liste les sous-répertoires immédiats d'un répertoire (triés).

        Raises :
            OSError : Si le répertoire ne peut pas être lu
        """
        ...

    @abstractmethod
    def move(self, source: Path, destination: Path) -> None:
        """
        Déplace un fichier en écrasant la destination.

        Crée les répertoires parents si nécessaire.

        Raises :
            OSError : Si le déplacement échoue
        """
        ...

    @abstractmethod
    def delete(self, path: Path) -> None:
        """
        Supprime un fichier.

        Raises :
            OSError : Si la suppression échoue
        """
        ...

    @abstractmethod
    def delete_tree(self, path: Path) -> None:
        """
        Supprime récursivement un répertoire et son contenu.

        Raises :
            OSError : Si la suppression échoue
        """
        ...
