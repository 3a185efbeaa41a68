"""
Configuration de l'application via pydantic-settings.

La configuration est chargée depuis les variables d'environnement avec le préfixe SUBMATCH_,
et peut optionnellement être fournie via un fichier .env.

Les listes d'extensions s'écrivent en JSON dans l'environnement.
Exemple : SUBMATCH_SUBTITLE_EXTENSIONS='[".srt", ".ass", ".vtt", ".sub"]'
"""

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from submatch.utils.constants import (
    ARCHIVE_EXTENSIONS,
    AUDIT_LOG_FILENAME,
    BACKUP_DIR_NAME,
    SUBTITLE_EXTENSIONS,
    VIDEO_EXTENSIONS,
)
from submatch.utils.helpers import normalize_extensions

# Trouver le fichier .env à la racine du projet (parent de submatch/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Paramètres de l'application avec support des variables d'environnement.

    Tous les paramètres peuvent être surchargés via des variables d'environnement
    avec le préfixe SUBMATCH_.
    Exemple : SUBMATCH_LOG_LEVEL=DEBUG

    Les chemins sont automatiquement étendus (~ -> répertoire home).
    """

    model_config = SettingsConfigDict(
        env_prefix="SUBMATCH_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Classification des fichiers
    video_extensions: frozenset[str] = Field(default=VIDEO_EXTENSIONS)
    subtitle_extensions: frozenset[str] = Field(default=SUBTITLE_EXTENSIONS)
    archive_extensions: frozenset[str] = Field(default=ARCHIVE_EXTENSIONS)

    # Fichiers produits dans le dossier traité
    audit_log_name: str = Field(default=AUDIT_LOG_FILENAME, min_length=1)
    backup_dir_name: str = Field(default=BACKUP_DIR_NAME, min_length=1)

    # Archives (7-Zip requis pour les .rar)
    extract_archives: bool = Field(default=True)
    seven_zip_path: Optional[str] = Field(default=None)

    # Valeurs par défaut du nettoyage (surchargées par les options CLI)
    cleanup_subfolders: bool = Field(default=False)
    cleanup_unrelated_files: bool = Field(default=False)
    require_confirmation: bool = Field(default=True)

    # Logging de diagnostic (fichier + stderr, rotation 10MB, 5 fichiers de rétention)
    log_level: str = Field(default="INFO")
    log_file: Path = Field(default=Path("~/.local/state/submatch/submatch.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5, ge=1)

    @field_validator("video_extensions", "subtitle_extensions", "archive_extensions")
    @classmethod
    def normalize(cls, v: frozenset[str]) -> frozenset[str]:
        """Normalise les extensions en minuscules avec point initial."""
        normalized = normalize_extensions(v)
        if not normalized:
            raise ValueError("au moins une extension est requise")
        return normalized

    @field_validator("log_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Étend ~ vers le répertoire home dans les chemins."""
        return Path(v).expanduser()

    @field_validator("log_level")
    @classmethod
    def upper_level(cls, v: str) -> str:
        """Normalise le niveau de log en majuscules."""
        return v.upper()
