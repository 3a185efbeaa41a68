"""
Objets valeur immutables representant des concepts du domaine sans identite.

Exports :
- EpisodeCode : Code saison/episode (S01E02) extrait d'un nom de fichier
- extract_episode_code : Extraction du code depuis un nom de fichier
"""

from submatch.core.value_objects.episode_code import (
    EPISODE_CODE_PATTERN,
    EpisodeCode,
    extract_episode_code,
)

__all__ = [
    "EPISODE_CODE_PATTERN",
    "EpisodeCode",
    "extract_episode_code",
]
