"""
Package de nettoyage du dossier principal.

Reexporte CleanupService et les dataclasses du cleanup.
"""

from .cleanup_service import CleanupService
from .dataclasses import CleanupOutcome, CleanupPlan, CleanupResult, CleanupStepType

__all__ = [
    "CleanupService",
    "CleanupStepType",
    "CleanupOutcome",
    "CleanupPlan",
    "CleanupResult",
]
