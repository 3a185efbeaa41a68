"""
Service de nettoyage du dossier principal apres reconciliation.

CleanupService enchaine, pour chaque action destructive, l'analyse
(analyzers), la confirmation eventuelle de l'hote puis l'execution
(executors).

Machine a etats par action :
    Evaluation -> {NoOp, Confirmation -> {Acceptee -> Execution,
    Refusee -> Tout conserver}, Execution sans confirmation}
"""

from pathlib import Path
from typing import Iterable, Optional

from loguru import logger

from submatch.core.ports.file_system import IFileSystem
from submatch.core.ports.interaction import ConfirmCallback
from submatch.services.audit import AuditLogger
from submatch.utils.constants import (
    AUDIT_LOG_FILENAME,
    BACKUP_DIR_NAME,
    SUBTITLE_EXTENSIONS,
    VIDEO_EXTENSIONS,
)
from submatch.utils.helpers import normalize_extensions

from .analyzers import plan_subfolders, plan_unrelated_files
from .dataclasses import CleanupPlan, CleanupResult, CleanupStepType
from .executors import delete_files, delete_subfolders, skip_all


class CleanupService:
    """
    Service de suppression des sous-dossiers et fichiers etrangers.

    La confirmation est demandee une seule fois par action, pour
    l'ensemble des elements concernes.
    """

    def __init__(
        self,
        file_system: IFileSystem,
        video_extensions: Iterable[str] = VIDEO_EXTENSIONS,
        subtitle_extensions: Iterable[str] = SUBTITLE_EXTENSIONS,
        backup_dir_name: str = BACKUP_DIR_NAME,
        audit_log_name: str = AUDIT_LOG_FILENAME,
    ) -> None:
        """
        Initialise le service de cleanup.

        Args:
            file_system: Adaptateur systeme de fichiers
            video_extensions: Extensions des videos a conserver
            subtitle_extensions: Extensions des sous-titres a conserver
            backup_dir_name: Dossier de sauvegarde, jamais supprime
            audit_log_name: Journal d'audit, jamais supprime
        """
        self._fs = file_system
        self._video_extensions = normalize_extensions(video_extensions)
        self._subtitle_extensions = normalize_extensions(subtitle_extensions)
        self._backup_dir_name = backup_dir_name
        self._audit_log_name = audit_log_name

    def purge_subfolders(
        self,
        top_folder: Path,
        audit: AuditLogger,
        enabled: bool = False,
        require_confirmation: bool = True,
        confirm_callback: Optional[ConfirmCallback] = None,
    ) -> CleanupResult:
        """
        Supprime les sous-dossiers immediats du dossier principal.

        Args:
            top_folder: Dossier principal
            audit: Journal d'audit du run
            enabled: Action activee
            require_confirmation: Demander confirmation avant suppression
            confirm_callback: Demande de confirmation de l'hote (optionnel)

        Returns:
            CleanupResult de l'action.

        Raises:
            FilesystemError: Si le dossier ne peut pas etre liste.
        """
        if not enabled:
            return CleanupResult()

        plan = plan_subfolders(self._fs, top_folder, self._backup_dir_name)
        return self._apply(plan, audit, require_confirmation, confirm_callback)

    def purge_unrelated_files(
        self,
        top_folder: Path,
        audit: AuditLogger,
        enabled: bool = False,
        require_confirmation: bool = True,
        confirm_callback: Optional[ConfirmCallback] = None,
    ) -> CleanupResult:
        """
        Supprime les fichiers du dossier principal qui ne sont ni une video
        residente ni un sous-titre nomme d'apres l'une d'elles.

        Memes arguments et retour que purge_subfolders.
        """
        if not enabled:
            return CleanupResult()

        plan = plan_unrelated_files(
            self._fs,
            top_folder,
            self._video_extensions,
            self._subtitle_extensions,
            protected_names=(self._audit_log_name,),
        )
        return self._apply(plan, audit, require_confirmation, confirm_callback)

    def _apply(
        self,
        plan: CleanupPlan,
        audit: AuditLogger,
        require_confirmation: bool,
        confirm_callback: Optional[ConfirmCallback],
    ) -> CleanupResult:
        if plan.is_empty:
            logger.debug(f"Cleanup {plan.noun}: rien a supprimer")
            return CleanupResult()

        if require_confirmation and confirm_callback is not None:
            if not confirm_callback(plan.noun, plan.description):
                return skip_all(plan, audit)

        if plan.step is CleanupStepType.SUBFOLDERS:
            return delete_subfolders(self._fs, plan, audit)
        return delete_files(self._fs, plan, audit)
