"""
Methodes d'execution du nettoyage.

Chaque element est supprime independamment : un echec est consigne et
n'empeche pas la suppression des suivants.
"""

import shutil

from submatch.core.ports.file_system import IFileSystem
from submatch.services.audit import AuditLogger

from .dataclasses import CleanupOutcome, CleanupPlan, CleanupResult, CleanupStepType


def delete_subfolders(
    file_system: IFileSystem,
    plan: CleanupPlan,
    audit: AuditLogger,
) -> CleanupResult:
    """
    Supprime recursivement chaque sous-dossier du plan.

    Returns:
        CleanupResult avec les dossiers supprimes et en echec.
    """
    result = CleanupResult(outcome=CleanupOutcome.EXECUTED)

    for directory in plan.items:
        try:
            file_system.delete_tree(directory)
            result.deleted.append(directory)
            audit.info(f"Deleted folder: {directory}")
        except (OSError, shutil.Error) as e:
            result.failed.append(directory)
            result.errors.append(f"{directory}: {e}")
            audit.error(f"Failed to delete folder {directory}: {e}")

    return result


def delete_files(
    file_system: IFileSystem,
    plan: CleanupPlan,
    audit: AuditLogger,
) -> CleanupResult:
    """
    Supprime chaque fichier du plan.

    Returns:
        CleanupResult avec les fichiers supprimes et en echec.
    """
    result = CleanupResult(outcome=CleanupOutcome.EXECUTED)

    for path in plan.items:
        try:
            file_system.delete(path)
            result.deleted.append(path)
            audit.info(f"Deleted file: {path}")
        except OSError as e:
            result.failed.append(path)
            result.errors.append(f"{path}: {e}")
            audit.error(f"Failed to delete file: {path}: {e}")

    return result


def skip_all(plan: CleanupPlan, audit: AuditLogger) -> CleanupResult:
    """Consigne chaque element comme conserve apres un refus de confirmation."""
    label = "folder" if plan.step is CleanupStepType.SUBFOLDERS else "file"
    for item in plan.items:
        audit.info(f"Skipped deleting {label}: {item}")
    return CleanupResult(outcome=CleanupOutcome.SKIPPED, skipped=list(plan.items))
