"""
Entités du domaine.

- MediaFile : fichier découvert, classé par rôle
- FileRole : rôle d'un fichier (VIDEO, SUBTITLE, OTHER)
"""

from submatch.core.entities.media_file import FileRole, MediaFile

__all__ = [
    "FileRole",
    "MediaFile",
]
