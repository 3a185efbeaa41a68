"""
Service de regroupement des videos dans le dossier principal.

Les videos trouvees dans des sous-dossiers sont remontees a la racine du
dossier traite, sous le meme nom. Un homonyme deja present est sauvegarde
par le SafeMover (le dernier deplace l'emporte).
"""

from pathlib import Path

from loguru import logger

from submatch.core.entities import MediaFile
from submatch.services.audit import AuditLogger
from submatch.services.safe_mover import SafeMover
from submatch.utils.helpers import path_key, same_path


class VideoRelocator:
    """Remonte les videos des sous-dossiers a la racine du dossier traite."""

    def __init__(self, safe_mover: SafeMover) -> None:
        self._mover = safe_mover

    def relocate(
        self,
        videos: list[MediaFile],
        top_folder: Path,
        audit: AuditLogger,
    ) -> list[Path]:
        """
        Deplace chaque video hors de la racine vers la racine.

        Args:
            videos: Videos decouvertes, dans l'ordre du scan
            top_folder: Dossier principal
            audit: Journal d'audit du run

        Returns:
            Chemins des videos presentes a la racine (deja en place ou
            deplacees avec succes), dans l'ordre de decouverte et sans
            doublon. Une video dont le deplacement echoue est exclue.
        """
        resident: list[Path] = []
        seen: set[str] = set()

        for video in videos:
            destination = top_folder / video.name

            if not same_path(video.path, destination):
                result = self._mover.move(video.path, destination, audit, "video")
                if not result.success:
                    continue

            # Deux homonymes de sous-dossiers differents donnent la meme video finale
            key = path_key(destination)
            if key in seen:
                logger.debug(f"Video deja retenue: {destination}")
                continue
            seen.add(key)
            resident.append(destination)

        return resident
