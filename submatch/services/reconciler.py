"""
Service d'orchestration d'un run de reconciliation.

Enchaine les etapes sur un dossier de serie :
1. Extraction des archives (.zip, .rar) du dossier principal
2. Scan des videos et remontee a la racine
3. Scan des sous-titres, association et renommage
4. Nettoyage optionnel (sous-dossiers, fichiers etrangers)

Un seul AuditLogger et un seul ConfirmCallback traversent toutes les
etapes. Seule l'inaccessibilite du dossier principal interrompt le run ;
les echecs par fichier sont consignes et le run continue.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Optional

from loguru import logger

from submatch.core.errors import ArchiveError, FilesystemError
from submatch.core.ports.archive import IArchiveExtractor
from submatch.core.ports.file_system import IFileSystem
from submatch.core.ports.interaction import ConfirmCallback, LogSink
from submatch.services.audit import AuditLogger
from submatch.services.cleanup import CleanupResult, CleanupService
from submatch.services.matcher import MatchResult, SubtitleMatcher
from submatch.services.relocator import VideoRelocator
from submatch.services.scanner import ScannerService
from submatch.utils.constants import ARCHIVE_EXTENSIONS, AUDIT_LOG_FILENAME
from submatch.utils.helpers import normalize_extensions


@dataclass
class ReconcileReport:
    """Bilan d'un run, pour l'affichage par l'hote."""

    top_folder: Path
    extracted_archives: list[Path] = field(default_factory=list)
    failed_archives: list[Path] = field(default_factory=list)
    videos: list[Path] = field(default_factory=list)
    matches: list[MatchResult] = field(default_factory=list)
    subfolders_cleanup: CleanupResult = field(default_factory=CleanupResult)
    files_cleanup: CleanupResult = field(default_factory=CleanupResult)
    log_file: Optional[Path] = None


class ReconcilerService:
    """
    Point d'entree de la reconciliation d'un dossier.

    Utilisation:
        reconciler.run(Path("/tv/Show"), cleanup_subfolders=True,
                       log_sink=print, confirm_callback=ask_user)
    """

    def __init__(
        self,
        file_system: IFileSystem,
        scanner: ScannerService,
        relocator: VideoRelocator,
        matcher: SubtitleMatcher,
        cleanup: CleanupService,
        archive_extractor: Optional[IArchiveExtractor] = None,
        archive_extensions: Iterable[str] = ARCHIVE_EXTENSIONS,
        extract_archives: bool = True,
        audit_log_name: str = AUDIT_LOG_FILENAME,
    ) -> None:
        """
        Initialise l'orchestrateur.

        Args:
            file_system: Adaptateur systeme de fichiers
            scanner: Service de scan
            relocator: Service de remontee des videos
            matcher: Service d'association des sous-titres
            cleanup: Service de nettoyage
            archive_extractor: Extracteur d'archives (None = pas d'extraction)
            archive_extensions: Extensions des archives a extraire
            extract_archives: Active l'extraction des archives
            audit_log_name: Nom du journal d'audit dans le dossier traite
        """
        self._fs = file_system
        self._scanner = scanner
        self._relocator = relocator
        self._matcher = matcher
        self._cleanup = cleanup
        self._archive_extractor = archive_extractor
        self._archive_extensions = normalize_extensions(archive_extensions)
        self._extract_archives = extract_archives
        self._audit_log_name = audit_log_name

    def run(
        self,
        top_folder: Path,
        cleanup_subfolders: bool = False,
        cleanup_unrelated_files: bool = False,
        require_confirmation: bool = True,
        log_sink: Optional[LogSink] = None,
        confirm_callback: Optional[ConfirmCallback] = None,
    ) -> None:
        """
        Reconcilie un dossier de serie.

        Args:
            top_folder: Dossier principal
            cleanup_subfolders: Supprimer les sous-dossiers en fin de run
            cleanup_unrelated_files: Supprimer les fichiers etrangers
            require_confirmation: Demander confirmation avant suppression
            log_sink: Destination des messages du journal (optionnel)
            confirm_callback: Demande de confirmation (optionnel)

        Raises:
            FilesystemError: Si le dossier est absent ou illisible
        """
        self.reconcile(
            top_folder,
            cleanup_subfolders=cleanup_subfolders,
            cleanup_unrelated_files=cleanup_unrelated_files,
            require_confirmation=require_confirmation,
            log_sink=log_sink,
            confirm_callback=confirm_callback,
        )

    def reconcile(
        self,
        top_folder: Path,
        cleanup_subfolders: bool = False,
        cleanup_unrelated_files: bool = False,
        require_confirmation: bool = True,
        log_sink: Optional[LogSink] = None,
        confirm_callback: Optional[ConfirmCallback] = None,
    ) -> ReconcileReport:
        """Comme run(), en retournant le bilan detaille du run."""
        top = Path(top_folder).expanduser().absolute()
        try:
            is_dir = self._fs.is_dir(top)
        except OSError as e:
            raise FilesystemError(top, str(e)) from e
        if not is_dir:
            raise FilesystemError(top, "introuvable ou pas un repertoire")

        logger.info(f"Reconciliation de {top}")
        audit = AuditLogger(top / self._audit_log_name, sink=log_sink)
        report = ReconcileReport(top_folder=top, log_file=audit.log_file)

        if self._extract_archives and self._archive_extractor is not None:
            self._extract_all(top, audit, report)

        videos = self._scanner.scan_videos(top)
        report.videos = self._relocator.relocate(videos, top, audit)

        subtitles = self._scanner.scan_subtitles(top)
        report.matches = self._matcher.match_and_rename(
            report.videos, subtitles, top, audit
        )

        report.subfolders_cleanup = self._cleanup.purge_subfolders(
            top,
            audit,
            enabled=cleanup_subfolders,
            require_confirmation=require_confirmation,
            confirm_callback=confirm_callback,
        )
        report.files_cleanup = self._cleanup.purge_unrelated_files(
            top,
            audit,
            enabled=cleanup_unrelated_files,
            require_confirmation=require_confirmation,
            confirm_callback=confirm_callback,
        )

        audit.info(f"{top} is ready to be watched!")
        return report

    def _extract_all(
        self, top: Path, audit: AuditLogger, report: ReconcileReport
    ) -> None:
        """Extrait sur place les archives situees directement dans le dossier."""
        try:
            files = self._fs.list_files(top)
        except OSError as e:
            raise FilesystemError(top, str(e)) from e

        archives = sorted(
            (f for f in files if f.suffix.lower() in self._archive_extensions),
            key=lambda p: p.name.casefold(),
        )
        for archive in archives:
            if not self._archive_extractor.can_extract(archive):
                logger.debug(f"Format d'archive non pris en charge: {archive.name}")
                continue
            try:
                extracted = self._archive_extractor.extract(archive, top)
            except ArchiveError as e:
                report.failed_archives.append(archive)
                audit.error(f"Failed to extract archive: {archive}: {e.reason}")
                continue
            report.extracted_archives.append(archive)
            logger.debug(f"{len(extracted)} fichier(s) extrait(s) de {archive.name}")
            audit.info(f"Extracted archive: {archive}")
