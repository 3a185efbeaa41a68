"""
Ports (interfaces abstraites) définissant les contrats pour les adaptateurs.

Les ports sont les frontières de l'architecture hexagonale. Ils définissent
ce dont le domaine a besoin du monde extérieur sans spécifier
comment ces besoins sont satisfaits.

Ports système de fichiers :
- IFileSystem : Parcours, déplacement et suppression de fichiers

Ports archives :
- IArchiveExtractor : Extraction des archives .zip/.rar avant le scan

Contrats d'interaction :
- LogSink : Réception des messages du journal d'audit
- ConfirmCallback : Confirmation synchrone avant suppression
"""

from submatch.core.ports.archive import IArchiveExtractor
from submatch.core.ports.file_system import IFileSystem
from submatch.core.ports.interaction import ConfirmCallback, LogSink, null_sink

__all__ = [
    # Système de fichiers
    "IFileSystem",
    # Archives
    "IArchiveExtractor",
    # Interaction
    "LogSink",
    "ConfirmCallback",
    "null_sink",
]
