"""
Dataclasses et enums pour le service de cleanup.

Definit le plan d'une action de nettoyage (elements a supprimer) et le
resultat de son execution.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class CleanupStepType(str, Enum):
    """Types d'actions de nettoyage."""

    SUBFOLDERS = "folders"
    UNRELATED_FILES = "files"


class CleanupOutcome(str, Enum):
    """Etat terminal d'une action de nettoyage."""

    NO_OP = "no_op"  # Action desactivee ou rien a supprimer
    SKIPPED = "skipped"  # Confirmation refusee, tout est conserve
    EXECUTED = "executed"  # Suppressions tentees element par element


@dataclass
class CleanupPlan:
    """Elements candidats a une action de nettoyage."""

    step: CleanupStepType
    items: list[Path] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.items

    @property
    def noun(self) -> str:
        """Nom des elements dans les messages ("folders", "files")."""
        return self.step.value

    @property
    def description(self) -> str:
        """Texte de la demande de confirmation : "<n> files?\\n<noms>"."""
        names = "\n".join(item.name for item in self.items)
        return f"{len(self.items)} {self.noun}?\n{names}"


@dataclass
class CleanupResult:
    """Resultat de l'execution d'une action de nettoyage."""

    outcome: CleanupOutcome = CleanupOutcome.NO_OP
    deleted: list[Path] = field(default_factory=list)
    skipped: list[Path] = field(default_factory=list)
    failed: list[Path] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)
