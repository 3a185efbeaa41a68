"""
Utilitaires et constantes pour SubMatch.

Ce module contient les constantes et fonctions utilitaires partagees.
"""

from submatch.utils.constants import (
    ARCHIVE_EXTENSIONS,
    AUDIT_LOG_FILENAME,
    BACKUP_DIR_NAME,
    PREFERRED_SUBTITLE_EXTENSION,
    SUBTITLE_EXTENSIONS,
    VIDEO_EXTENSIONS,
)
from submatch.utils.helpers import normalize_extensions, same_path

__all__ = [
    "VIDEO_EXTENSIONS",
    "SUBTITLE_EXTENSIONS",
    "PREFERRED_SUBTITLE_EXTENSION",
    "ARCHIVE_EXTENSIONS",
    "AUDIT_LOG_FILENAME",
    "BACKUP_DIR_NAME",
    "normalize_extensions",
    "same_path",
]
