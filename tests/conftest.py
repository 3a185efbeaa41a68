"""
Fixtures pytest partagees pour les tests SubMatch.

Ce module contient les fixtures communes utilisees dans les tests:
- Mock de IFileSystem
- Journal d'audit capturant les messages
- Reconciliateur cable sur le vrai systeme de fichiers
- Fabrique d'arborescences de test
"""

from pathlib import Path
from typing import Callable
from unittest.mock import MagicMock

import pytest

from submatch.adapters.archive_extractor import ArchiveExtractor
from submatch.adapters.file_system import FileSystemAdapter
from submatch.core.ports.file_system import IFileSystem
from submatch.services.audit import AuditLogger
from submatch.services.cleanup import CleanupService
from submatch.services.matcher import SubtitleMatcher
from submatch.services.reconciler import ReconcilerService
from submatch.services.relocator import VideoRelocator
from submatch.services.safe_mover import SafeMover
from submatch.services.scanner import ScannerService


@pytest.fixture
def mock_file_system() -> MagicMock:
    """
    Mock de IFileSystem pour les tests.

    Par defaut aucun fichier n'existe et les operations reussissent.
    Configurer le mock dans chaque test pour des comportements specifiques.
    """
    mock = MagicMock(spec=IFileSystem)
    mock.exists.return_value = False
    mock.is_dir.return_value = True
    mock.list_files.return_value = []
    mock.list_subdirs.return_value = []
    mock.move.return_value = None
    return mock


@pytest.fixture
def messages() -> list[str]:
    """Messages recus par le sink du journal d'audit."""
    return []


@pytest.fixture
def audit(tmp_path_factory: pytest.TempPathFactory, messages: list[str]) -> AuditLogger:
    """AuditLogger ecrivant hors du dossier de test et capturant les messages."""
    log_dir = tmp_path_factory.mktemp("audit")
    return AuditLogger(log_dir / "match-subtitles.log", sink=messages.append)


@pytest.fixture
def make_files(tmp_path: Path) -> Callable[..., list[Path]]:
    """
    Fabrique de fichiers sous tmp_path.

    Usage:
        make_files("Show.S01E01.mkv", "sub/Show.S01E01.srt")
    """

    def _make(*relative_paths: str, content: str = "x") -> list[Path]:
        created = []
        for relative in relative_paths:
            path = tmp_path / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
            created.append(path)
        return created

    return _make


@pytest.fixture
def reconciler() -> ReconcilerService:
    """ReconcilerService complet sur le systeme de fichiers reel."""
    file_system = FileSystemAdapter()
    mover = SafeMover(file_system)
    return ReconcilerService(
        file_system=file_system,
        scanner=ScannerService(file_system),
        relocator=VideoRelocator(mover),
        matcher=SubtitleMatcher(mover),
        cleanup=CleanupService(file_system),
        archive_extractor=ArchiveExtractor(),
    )


@pytest.fixture
def audit_lines() -> Callable[[Path], list[str]]:
    """Lecture du journal match-subtitles.log d'un dossier, sans l'horodatage."""

    def _read(folder: Path) -> list[str]:
        log_file = folder / "match-subtitles.log"
        if not log_file.exists():
            return []
        return [
            line.split("] ", 1)[1]
            for line in log_file.read_text(encoding="utf-8").splitlines()
        ]

    return _read
