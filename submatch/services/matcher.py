"""
Service d'association des sous-titres aux videos.

Chaque video est associee a au plus un sous-titre partageant son code
d'episode (SxxExx), puis le sous-titre est renomme a l'image de la video.

Departage entre plusieurs candidats (premier critere satisfait):
1. Nom sans extension identique a celui de la video (casse ignoree)
2. Extension .srt (format le plus compatible)
3. Distance de Levenshtein minimale entre les noms sans extension,
   le premier candidat decouvert l'emportant en cas d'egalite

Un sous-titre choisi est consomme pour tout le run, meme si une video
traitee plus tard l'aurait prefere.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional

from loguru import logger
from rapidfuzz.distance import Levenshtein

from submatch.core.entities import MediaFile
from submatch.core.value_objects import EpisodeCode
from submatch.services.audit import AuditLogger
from submatch.services.safe_mover import SafeMover
from submatch.utils.constants import PREFERRED_SUBTITLE_EXTENSION
from submatch.utils.helpers import path_key, same_path


class MatchStatus(Enum):
    """Issue de l'association d'une video."""

    RENAMED = "renamed"  # Sous-titre renomme/deplace avec succes
    CORRECT_NAME = "correct_name"  # Sous-titre deja a sa place
    FAILED = "failed"  # Echec du renommage


@dataclass
class MatchResult:
    """
    Resultat de l'association d'une video a un sous-titre.

    Attributs:
        video: Chemin de la video
        subtitle: Sous-titre choisi (chemin avant renommage)
        expected_path: Chemin final attendu du sous-titre
        status: Issue de l'association
        candidates: Tous les candidats consideres, dans l'ordre de decouverte
    """

    video: Path
    subtitle: Path
    expected_path: Path
    status: MatchStatus
    candidates: list[Path] = field(default_factory=list)


def levenshtein_distance(first: str, second: str) -> int:
    """
    Distance d'edition entre deux chaines (insertion, suppression,
    substitution de cout 1). Une chaine vide donne la longueur de l'autre.
    """
    return Levenshtein.distance(first, second)


class SubtitleMatcher:
    """
    Service d'association et de renommage des sous-titres.

    Utilisation:
        matcher = SubtitleMatcher(safe_mover)
        results = matcher.match_and_rename(videos, subtitles, top_folder, audit)
    """

    def __init__(
        self,
        safe_mover: SafeMover,
        preferred_extension: str = PREFERRED_SUBTITLE_EXTENSION,
    ) -> None:
        """
        Initialise le service.

        Args:
            safe_mover: Service de deplacement avec sauvegarde
            preferred_extension: Extension favorisee au 2e critere de departage
        """
        self._mover = safe_mover
        self._preferred_extension = preferred_extension.lower()

    def choose_subtitle(
        self, video_stem: str, candidates: list[MediaFile]
    ) -> MediaFile:
        """
        Choisit un sous-titre parmi des candidats non vides.

        Args:
            video_stem: Nom de la video sans extension
            candidates: Candidats dans l'ordre de decouverte

        Returns:
            Le candidat retenu par la cascade de departage.
        """
        if len(candidates) == 1:
            return candidates[0]

        target = video_stem.casefold()
        for candidate in candidates:
            if candidate.stem.casefold() == target:
                return candidate

        for candidate in candidates:
            if candidate.extension == self._preferred_extension:
                return candidate

        # min() garde le premier element en cas d'egalite
        return min(
            candidates,
            key=lambda c: levenshtein_distance(c.stem, video_stem),
        )

    def find_candidates(
        self,
        code: EpisodeCode,
        subtitles: list[MediaFile],
        used: set[str],
    ) -> list[MediaFile]:
        """Sous-titres de meme code d'episode non encore consommes."""
        return [
            sub
            for sub in subtitles
            if sub.episode_code == code and path_key(sub.path) not in used
        ]

    def match_and_rename(
        self,
        videos: list[Path],
        subtitles: list[MediaFile],
        top_folder: Path,
        audit: AuditLogger,
    ) -> list[MatchResult]:
        """
        Associe et renomme les sous-titres des videos, dans l'ordre donne.

        Args:
            videos: Videos presentes a la racine (ordre de traitement)
            subtitles: Sous-titres decouverts (ordre de decouverte)
            top_folder: Dossier principal ou sont places les sous-titres
            audit: Journal d'audit du run

        Returns:
            Un MatchResult par video associee. Les videos sans code
            d'episode ou sans candidat ne produisent pas de resultat.
        """
        used: set[str] = set()
        results: list[MatchResult] = []

        for video in videos:
            code = EpisodeCode.from_filename(video.stem)
            if code is None:
                logger.debug(f"Pas de code d'episode: {video.name}")
                continue

            candidates = self.find_candidates(code, subtitles, used)
            if not candidates:
                logger.debug(f"Aucun sous-titre pour {video.name} ({code})")
                continue

            chosen = self.choose_subtitle(video.stem, candidates)
            if len(candidates) > 1:
                audit.info(
                    f"Multiple subtitle candidates for {video.stem}: "
                    f"{', '.join(str(c.path) for c in candidates)}. "
                    f"Chosen: {chosen.path}"
                )
            used.add(path_key(chosen.path))

            results.append(
                self._place_subtitle(video, chosen, candidates, top_folder, audit)
            )

        return results

    def _place_subtitle(
        self,
        video: Path,
        subtitle: MediaFile,
        candidates: list[MediaFile],
        top_folder: Path,
        audit: AuditLogger,
    ) -> MatchResult:
        """Renomme le sous-titre choisi en <nom de la video><extension d'origine>."""
        # Extension d'origine conservee telle qu'ecrite (casse comprise)
        expected = top_folder / f"{video.stem}{subtitle.path.suffix}"
        status: Optional[MatchStatus] = None

        if same_path(subtitle.path, expected):
            audit.info(f"Correct name: {expected.name}")
            status = MatchStatus.CORRECT_NAME
        else:
            result = self._mover.move(
                subtitle.path, expected, audit, "subtitle", action="Renamed"
            )
            status = MatchStatus.RENAMED if result.success else MatchStatus.FAILED

        return MatchResult(
            video=video,
            subtitle=subtitle.path,
            expected_path=expected,
            status=status,
            candidates=[c.path for c in candidates],
        )
