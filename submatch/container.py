"""
Container d'injection de dependances via dependency-injector.

Fournit une gestion centralisee des dependances pour l'interface CLI.
"""

from dependency_injector import containers, providers

from .adapters.archive_extractor import ArchiveExtractor
from .adapters.file_system import FileSystemAdapter
from .config import Settings
from .services.cleanup import CleanupService
from .services.matcher import SubtitleMatcher
from .services.reconciler import ReconcilerService
from .services.relocator import VideoRelocator
from .services.safe_mover import SafeMover
from .services.scanner import ScannerService


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        reconciler = container.reconciler_service()
        reconciler.run(Path("/tv/Show"))
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Adapters - implementations concretes des ports
    file_system = providers.Singleton(FileSystemAdapter)
    archive_extractor = providers.Singleton(
        ArchiveExtractor,
        seven_zip_path=config.provided.seven_zip_path,
    )

    # Services
    scanner_service = providers.Factory(
        ScannerService,
        file_system=file_system,
        video_extensions=config.provided.video_extensions,
        subtitle_extensions=config.provided.subtitle_extensions,
    )

    safe_mover = providers.Factory(
        SafeMover,
        file_system=file_system,
        backup_dir_name=config.provided.backup_dir_name,
    )

    relocator_service = providers.Factory(
        VideoRelocator,
        safe_mover=safe_mover,
    )

    matcher_service = providers.Factory(
        SubtitleMatcher,
        safe_mover=safe_mover,
    )

    cleanup_service = providers.Factory(
        CleanupService,
        file_system=file_system,
        video_extensions=config.provided.video_extensions,
        subtitle_extensions=config.provided.subtitle_extensions,
        backup_dir_name=config.provided.backup_dir_name,
        audit_log_name=config.provided.audit_log_name,
    )

    reconciler_service = providers.Factory(
        ReconcilerService,
        file_system=file_system,
        scanner=scanner_service,
        relocator=relocator_service,
        matcher=matcher_service,
        cleanup=cleanup_service,
        archive_extractor=archive_extractor,
        archive_extensions=config.provided.archive_extensions,
        extract_archives=config.provided.extract_archives,
        audit_log_name=config.provided.audit_log_name,
    )
