"""
Service de deplacement securise des fichiers.

Ce module fournit le deplacement (ou renommage) d'un fichier avec:
- Sauvegarde horodatee de tout fichier qui serait ecrase
- Journalisation du resultat dans le journal d'audit
- Interception locale des erreurs : un fichier en echec n'interrompt
  jamais la reconciliation du reste du dossier
"""

import shutil
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional

from submatch.core.ports.file_system import IFileSystem
from submatch.services.audit import AuditLogger
from submatch.utils.constants import BACKUP_DIR_NAME, BACKUP_TIMESTAMP_FORMAT
from submatch.utils.helpers import same_path


@dataclass
class MoveResult:
    """
    Resultat d'une operation de deplacement.

    Attributs:
        success: True si le fichier est a sa destination
        source: Chemin d'origine
        destination: Chemin cible
        moved: False si source et destination etaient deja identiques
        backup_path: Sauvegarde du fichier ecrase (si la destination existait)
        error: Message d'erreur (si echec)
    """

    success: bool
    source: Path
    destination: Path
    moved: bool = False
    backup_path: Optional[Path] = None
    error: Optional[str] = None


def backup_timestamp(now: datetime) -> str:
    """Horodatage a la milliseconde : yyyyMMddHHmmssfff."""
    return f"{now.strftime(BACKUP_TIMESTAMP_FORMAT)}{now.microsecond // 1000:03d}"


class SafeMover:
    """
    Deplacement de fichiers avec sauvegarde avant ecrasement.

    Utilisation:
        mover = SafeMover(file_system)
        result = mover.move(source, destination, audit, "subtitle", action="Renamed")
        if not result.success:
            print(result.error)
    """

    def __init__(
        self,
        file_system: IFileSystem,
        backup_dir_name: str = BACKUP_DIR_NAME,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        """
        Initialise le service.

        Args:
            file_system: Adaptateur systeme de fichiers
            backup_dir_name: Nom du dossier de sauvegarde, cree a cote de la destination
            clock: Source de l'heure locale pour l'horodatage des sauvegardes
        """
        self._fs = file_system
        self._backup_dir_name = backup_dir_name
        self._clock = clock

    def backup_path_for(self, destination: Path) -> Path:
        """
        Calcule le chemin de sauvegarde d'un fichier.

        <dossier>/backups/<nom>.bak.<yyyyMMddHHmmssfff>, suffixe .1, .2, ...
        si ce nom est deja pris (collision sous la milliseconde).
        """
        backup_dir = destination.parent / self._backup_dir_name
        base = backup_dir / f"{destination.name}.bak.{backup_timestamp(self._clock())}"
        candidate = base
        counter = 0
        while self._fs.exists(candidate):
            counter += 1
            candidate = base.with_name(f"{base.name}.{counter}")
        return candidate

    def move(
        self,
        source: Path,
        destination: Path,
        audit: AuditLogger,
        item_kind: str = "file",
        action: str = "Moved",
    ) -> MoveResult:
        """
        Deplace source vers destination en sauvegardant la destination existante.

        Operations effectuees:
        1. Si source et destination sont identiques (casse ignoree): rien
        2. Si la destination existe: deplacement vers backups/
        3. Deplacement de la source (ecrasement)

        Args:
            source: Fichier a deplacer
            destination: Chemin final
            audit: Journal d'audit du run
            item_kind: Type d'element pour les messages ("video", "subtitle")
            action: Verbe du message de succes ("Moved", "Renamed")

        Returns:
            MoveResult, jamais d'exception pour un echec de fichier.
        """
        if same_path(source, destination):
            return MoveResult(success=True, source=source, destination=destination)

        backup_path = None
        try:
            if self._fs.exists(destination):
                backup_path = self.backup_path_for(destination)
                self._fs.move(destination, backup_path)
                audit.info(
                    f"Backed up existing {item_kind}: {destination} -> {backup_path}"
                )

            self._fs.move(source, destination)
        except (OSError, shutil.Error) as e:
            audit.error(f"Failed to move {item_kind}: {source} -> {destination}: {e}")
            return MoveResult(
                success=False,
                source=source,
                destination=destination,
                backup_path=backup_path,
                error=str(e),
            )

        audit.info(
            f"{action} {item_kind}: {source.name} -> {destination.name} "
            f"({source} -> {destination})"
        )
        return MoveResult(
            success=True,
            source=source,
            destination=destination,
            moved=True,
            backup_path=backup_path,
        )
