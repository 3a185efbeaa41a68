"""
Couche adaptateurs (infrastructure).

Les adaptateurs implémentent les ports définis dans core/ports/ et fournissent
des implémentations concrètes pour les systèmes externes.

Sous-packages :
- cli/ : Interface ligne de commande (Typer + Rich)
- file_system : Opérations sur le système de fichiers
- archive_extractor : Extraction des archives zip/rar

Chaque adaptateur dépend de core/ mais core/ ne dépend jamais des adaptateurs.
"""

from submatch.adapters.archive_extractor import ArchiveExtractor
from submatch.adapters.file_system import FileSystemAdapter

__all__ = [
    "ArchiveExtractor",
    "FileSystemAdapter",
]
