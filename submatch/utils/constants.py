"""
Constantes globales pour SubMatch.

Ce module contient les constantes partagees dans l'application:
- Extensions video et sous-titres reconnues
- Extensions d'archives extraites avant le scan
- Noms du journal d'audit et du dossier de sauvegarde
"""

# Extensions video reconnues
VIDEO_EXTENSIONS = frozenset({
    ".mkv",
    ".mp4",
    ".avi",
    ".mov",
})

# Extensions de sous-titres reconnues
SUBTITLE_EXTENSIONS = frozenset({
    ".srt",
    ".ass",
    ".vtt",
})

# Extension privilegiee lors du departage entre plusieurs candidats
PREFERRED_SUBTITLE_EXTENSION = ".srt"

# Archives extraites dans le dossier avant le scan
ARCHIVE_EXTENSIONS = frozenset({
    ".zip",
    ".rar",
})

# Journal d'audit ecrit a la racine du dossier traite
AUDIT_LOG_FILENAME = "match-subtitles.log"

# Sous-dossier des sauvegardes avant ecrasement
BACKUP_DIR_NAME = "backups"

# Format d'horodatage des sauvegardes (yyyyMMddHHmmssfff)
BACKUP_TIMESTAMP_FORMAT = "%Y%m%d%H%M%S"
