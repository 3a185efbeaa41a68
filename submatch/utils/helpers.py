"""
Fonctions utilitaires partagees dans le projet SubMatch.

Ce module centralise les fonctions reutilisees a travers le codebase :
- path_key : cle de comparaison insensible a la casse d'un chemin
- same_path : egalite de deux chemins insensible a la casse
- normalize_extensions : normalisation d'une liste d'extensions
"""

import os
from pathlib import Path
from typing import Iterable


def path_key(path: Path) -> str:
    """
    Calcule la cle de comparaison d'un chemin.

    Chemin absolu normalise puis casefold, pour que deux ecritures
    du meme fichier (casse, segments ".") donnent la meme cle.
    """
    return os.path.normpath(os.path.abspath(path)).casefold()


def same_path(first: Path, second: Path) -> bool:
    """Verifie si deux chemins designent le meme fichier (insensible a la casse)."""
    return path_key(first) == path_key(second)


def normalize_extensions(extensions: Iterable[str]) -> frozenset[str]:
    """
    Normalise des extensions en minuscules avec point initial.

    Exemples:
        ["MKV", ".Mp4", " srt "] -> {".mkv", ".mp4", ".srt"}
    """
    normalized = set()
    for ext in extensions:
        ext = ext.strip().lower()
        if not ext:
            continue
        if not ext.startswith("."):
            ext = f".{ext}"
        normalized.add(ext)
    return frozenset(normalized)
