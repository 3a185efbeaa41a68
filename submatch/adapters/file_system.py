"""
Adaptateur pour les operations sur le systeme de fichiers.

Implementation concrete de IFileSystem pour les operations fichiers reelles.
Les erreurs OSError sont propagees telles quelles : c'est aux services de
les intercepter et de les consigner dans le journal d'audit.
"""

import errno
import os
import shutil
import uuid
from pathlib import Path
from typing import Iterator

from loguru import logger

from submatch.core.ports.file_system import IFileSystem


class FileSystemAdapter(IFileSystem):
    """
    Implementation de IFileSystem pour le systeme de fichiers reel.

    Fournit le parcours ordonne des fichiers ainsi que les operations
    de deplacement (atomique si possible) et de suppression.
    """

    def exists(self, path: Path) -> bool:
        """Verifie si un chemin existe."""
        return path.exists()

    def is_dir(self, path: Path) -> bool:
        """Verifie si un chemin est un repertoire."""
        return path.is_dir()

    def walk_files(self, root: Path) -> Iterator[Path]:
        """
        Parcourt recursivement les fichiers sous root.

        Les fichiers d'un repertoire sont produits avant ses sous-repertoires,
        chacun trie par nom. Un sous-repertoire illisible est ignore avec un
        avertissement ; seule la racine illisible leve OSError.
        """
        # Lecture de la racine hors generateur pour lever immediatement
        files, subdirs = self._split_entries(root)
        return self._walk(files, subdirs)

    def _walk(self, files: list[Path], subdirs: list[Path]) -> Iterator[Path]:
        yield from files
        for subdir in subdirs:
            try:
                sub_files, sub_subdirs = self._split_entries(subdir)
            except OSError as e:
                logger.warning(f"Repertoire illisible ignore: {subdir} ({e})")
                continue
            yield from self._walk(sub_files, sub_subdirs)

    def _split_entries(self, directory: Path) -> tuple[list[Path], list[Path]]:
        """Separe les entrees d'un repertoire en fichiers et sous-repertoires tries."""
        files: list[Path] = []
        subdirs: list[Path] = []
        with os.scandir(directory) as entries:
            for entry in entries:
                # Les symlinks de repertoires ne sont pas suivis
                if entry.is_dir(follow_symlinks=False):
                    subdirs.append(Path(entry.path))
                elif entry.is_file():
                    files.append(Path(entry.path))
        files.sort(key=lambda p: p.name)
        subdirs.sort(key=lambda p: p.name)
        return files, subdirs

    def list_files(self, directory: Path) -> list[Path]:
        """Liste les fichiers directement contenus dans directory (tries)."""
        files, _ = self._split_entries(directory)
        return files

    def list_subdirs(self, directory: Path) -> list[Path]:
        """Liste les sous-repertoires immediats de directory (tries)."""
        _, subdirs = self._split_entries(directory)
        return subdirs

    def move(self, source: Path, destination: Path) -> None:
        """
        Deplace un fichier de maniere atomique en ecrasant la destination.

        Utilise os.replace pour un deplacement atomique sur le meme filesystem.
        Pour un deplacement cross-filesystem, utilise une copie intermediaire
        avec un fichier temporaire pour garantir l'atomicite.

        Args:
            source: Chemin du fichier source
            destination: Chemin de destination

        Raises:
            OSError: Si le deplacement echoue
        """
        # Creer les repertoires parents si necessaire
        destination.parent.mkdir(parents=True, exist_ok=True)

        try:
            os.replace(source, destination)
        except OSError as e:
            if e.errno != errno.EXDEV:
                raise
            # Cross-filesystem: copie intermediaire avec fichier temporaire
            temp = destination.with_name(f".tmp_{uuid.uuid4().hex}_{destination.name}")
            try:
                shutil.copy2(source, temp)
                os.replace(temp, destination)
                source.unlink()
            except Exception:
                # Nettoyer le fichier temporaire en cas d'erreur
                if temp.exists():
                    temp.unlink()
                raise

    def delete(self, path: Path) -> None:
        """Supprime un fichier."""
        path.unlink()

    def delete_tree(self, path: Path) -> None:
        """Supprime recursivement un repertoire."""
        shutil.rmtree(path)
