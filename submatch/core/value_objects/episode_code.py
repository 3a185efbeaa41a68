"""
Objet valeur pour les codes d'episode (SxxExx).

Le code d'episode est la cle de jointure entre videos et sous-titres.
Seul le motif simple S<saison>E<episode> sur deux chiffres est reconnu :
les plages multi-episodes (S01E01-E02) ne sont pas gerees, seule la
premiere occurrence compte.
"""

import re
from dataclasses import dataclass
from typing import Optional

# Separateurs toleres entre saison et episode : espace . _ -
EPISODE_CODE_PATTERN = re.compile(r"S(\d{2})[ ._-]*E(\d{2})", re.IGNORECASE)


@dataclass(frozen=True)
class EpisodeCode:
    """
    Code saison/episode extrait d'un nom de fichier.

    Les valeurs sont conservees telles qu'ecrites (chaines de deux chiffres)
    pour que "S01E02" et "s01e02" produisent un code identique.

    Attributs:
        season: Numero de saison sur deux chiffres (ex: "01")
        episode: Numero d'episode sur deux chiffres (ex: "02")
    """

    season: str
    episode: str

    def __str__(self) -> str:
        return f"S{self.season}E{self.episode}"

    @classmethod
    def from_filename(cls, filename: str) -> Optional["EpisodeCode"]:
        """
        Extrait le code d'episode d'un nom de fichier.

        Args:
            filename: Nom de fichier sans repertoire (extension deja retiree
                      de preference)

        Returns:
            EpisodeCode de la premiere occurrence, ou None si aucun code.
        """
        match = EPISODE_CODE_PATTERN.search(filename)
        if not match:
            return None
        return cls(season=match.group(1), episode=match.group(2))


def extract_episode_code(filename: str) -> Optional[EpisodeCode]:
    """Raccourci fonctionnel vers EpisodeCode.from_filename."""
    return EpisodeCode.from_filename(filename)
