"""
Tests unitaires pour le service de nettoyage.
"""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from submatch.adapters.file_system import FileSystemAdapter
from submatch.core.errors import FilesystemError
from submatch.services.cleanup import (
    CleanupOutcome,
    CleanupPlan,
    CleanupService,
    CleanupStepType,
)
from submatch.services.cleanup.analyzers import allowed_names


@pytest.fixture
def cleanup():
    return CleanupService(FileSystemAdapter())


@pytest.fixture
def show(tmp_path, make_files):
    """Dossier reconcilie avec un sous-dossier et des fichiers etrangers."""
    make_files(
        "Show.S01E01.mkv",
        "Show.S01E01.srt",
        "Show.S01E02.mkv",
        "readme.nfo",
        "cover.jpg",
        "match-subtitles.log",
        "Season 1/extra.txt",
        "Samples/sample.mkv",
        "backups/Show.S01E01.srt.bak.20240101000000000",
    )
    return tmp_path


# ====================
# Tests CleanupPlan
# ====================


class TestCleanupPlan:
    """Tests pour la description de confirmation."""

    def test_description(self):
        plan = CleanupPlan(
            step=CleanupStepType.UNRELATED_FILES,
            items=[Path("/tv/a.nfo"), Path("/tv/b.jpg")],
        )
        assert plan.noun == "files"
        assert plan.description == "2 files?\na.nfo\nb.jpg"


class TestAllowedNames:
    """Tests pour l'ensemble des noms conserves."""

    def test_all_subtitle_variants_allowed(self):
        allowed = allowed_names([Path("/tv/Show.S01E01.mkv")], [".srt", ".ass"])
        assert allowed == {"show.s01e01.mkv", "show.s01e01.srt", "show.s01e01.ass"}


# ====================
# Tests purge_subfolders
# ====================


class TestPurgeSubfolders:
    """Tests pour la suppression des sous-dossiers."""

    def test_disabled_is_noop(self, cleanup, show, audit, messages):
        confirm = MagicMock(return_value=True)
        result = cleanup.purge_subfolders(
            show, audit, enabled=False, confirm_callback=confirm
        )
        assert result.outcome == CleanupOutcome.NO_OP
        confirm.assert_not_called()
        assert (show / "Season 1").exists()

    def test_confirmed_deletes_all_but_backups(self, cleanup, show, audit, messages):
        confirm = MagicMock(return_value=True)
        result = cleanup.purge_subfolders(
            show, audit, enabled=True, confirm_callback=confirm
        )

        confirm.assert_called_once_with("folders", "2 folders?\nSamples\nSeason 1")
        assert result.outcome == CleanupOutcome.EXECUTED
        assert not (show / "Season 1").exists()
        assert not (show / "Samples").exists()
        assert (show / "backups").exists()
        assert messages == [
            f"Deleted folder: {show / 'Samples'}",
            f"Deleted folder: {show / 'Season 1'}",
        ]

    def test_only_exact_backup_name_protected(self, cleanup, show, audit, make_files):
        make_files("Backups/junk.nfo")
        result = cleanup.purge_subfolders(
            show, audit, enabled=True, require_confirmation=False
        )

        assert result.outcome == CleanupOutcome.EXECUTED
        assert not (show / "Backups").exists()
        assert (show / "backups").is_dir()

    def test_declined_skips_all(self, cleanup, show, audit, messages):
        result = cleanup.purge_subfolders(
            show, audit, enabled=True, confirm_callback=lambda kind, desc: False
        )
        assert result.outcome == CleanupOutcome.SKIPPED
        assert (show / "Season 1").exists()
        assert messages == [
            f"Skipped deleting folder: {show / 'Samples'}",
            f"Skipped deleting folder: {show / 'Season 1'}",
        ]

    def test_no_confirmation_required(self, cleanup, show, audit):
        confirm = MagicMock(return_value=False)
        result = cleanup.purge_subfolders(
            show,
            audit,
            enabled=True,
            require_confirmation=False,
            confirm_callback=confirm,
        )
        confirm.assert_not_called()
        assert result.outcome == CleanupOutcome.EXECUTED

    def test_missing_callback_executes(self, cleanup, show, audit):
        result = cleanup.purge_subfolders(show, audit, enabled=True)
        assert len(result.deleted) == 2

    def test_no_subfolder_no_prompt(self, cleanup, tmp_path, make_files, audit):
        make_files("Show.S01E01.mkv")
        confirm = MagicMock(return_value=True)
        result = cleanup.purge_subfolders(
            tmp_path, audit, enabled=True, confirm_callback=confirm
        )
        assert result.outcome == CleanupOutcome.NO_OP
        confirm.assert_not_called()

    def test_one_failure_does_not_block_others(self, mock_file_system, audit, messages):
        mock_file_system.list_subdirs.return_value = [Path("/tv/a"), Path("/tv/b")]
        mock_file_system.delete_tree.side_effect = [PermissionError("denied"), None]
        cleanup = CleanupService(mock_file_system)

        result = cleanup.purge_subfolders(Path("/tv"), audit, enabled=True)

        assert result.failed == [Path("/tv/a")]
        assert result.deleted == [Path("/tv/b")]
        assert messages == [
            "Failed to delete folder /tv/a: denied",
            "Deleted folder: /tv/b",
        ]

    def test_listing_failure_raises(self, mock_file_system, audit):
        mock_file_system.list_subdirs.side_effect = OSError("gone")
        cleanup = CleanupService(mock_file_system)
        with pytest.raises(FilesystemError):
            cleanup.purge_subfolders(Path("/tv"), audit, enabled=True)


# ====================
# Tests purge_unrelated_files
# ====================


class TestPurgeUnrelatedFiles:
    """Tests pour la suppression des fichiers etrangers."""

    def test_confirmed_deletes_unrelated(self, cleanup, show, audit, messages):
        confirm = MagicMock(return_value=True)
        result = cleanup.purge_unrelated_files(
            show, audit, enabled=True, confirm_callback=confirm
        )

        confirm.assert_called_once_with("files", "2 files?\ncover.jpg\nreadme.nfo")
        assert result.deleted == [show / "cover.jpg", show / "readme.nfo"]
        assert (show / "Show.S01E01.mkv").exists()
        assert (show / "Show.S01E01.srt").exists()
        assert (show / "Show.S01E02.mkv").exists()
        assert (show / "match-subtitles.log").exists()
        assert messages == [
            f"Deleted file: {show / 'cover.jpg'}",
            f"Deleted file: {show / 'readme.nfo'}",
        ]

    def test_subtitle_variant_without_match_kept(self, cleanup, tmp_path, make_files, audit):
        """Toutes les variantes d'extension du nom de la video sont conservees."""
        make_files("Show.S01E01.mkv", "Show.S01E01.ass", "Show.S01E01.VTT")
        result = cleanup.purge_unrelated_files(tmp_path, audit, enabled=True)
        assert result.outcome == CleanupOutcome.NO_OP
        assert (tmp_path / "Show.S01E01.VTT").exists()

    def test_orphan_subtitle_deleted(self, cleanup, tmp_path, make_files, audit):
        make_files("Show.S01E01.mkv", "Other.S01E02.srt")
        result = cleanup.purge_unrelated_files(tmp_path, audit, enabled=True)
        assert result.deleted == [tmp_path / "Other.S01E02.srt"]

    def test_declined_skips_all(self, cleanup, show, audit, messages):
        result = cleanup.purge_unrelated_files(
            show, audit, enabled=True, confirm_callback=lambda kind, desc: False
        )
        assert result.outcome == CleanupOutcome.SKIPPED
        assert (show / "readme.nfo").exists()
        assert messages == [
            f"Skipped deleting file: {show / 'cover.jpg'}",
            f"Skipped deleting file: {show / 'readme.nfo'}",
        ]

    def test_zero_candidates_no_prompt(self, cleanup, tmp_path, make_files, audit):
        make_files("Show.S01E01.mkv", "Show.S01E01.srt")
        confirm = MagicMock(return_value=True)
        result = cleanup.purge_unrelated_files(
            tmp_path, audit, enabled=True, confirm_callback=confirm
        )
        assert result.outcome == CleanupOutcome.NO_OP
        confirm.assert_not_called()

    def test_one_failure_does_not_block_others(self, mock_file_system, audit, messages):
        mock_file_system.list_files.return_value = [Path("/tv/a.nfo"), Path("/tv/b.jpg")]
        mock_file_system.delete.side_effect = [PermissionError("locked"), None]
        cleanup = CleanupService(mock_file_system)

        result = cleanup.purge_unrelated_files(Path("/tv"), audit, enabled=True)

        assert result.failed == [Path("/tv/a.nfo")]
        assert result.deleted == [Path("/tv/b.jpg")]
        assert messages[0] == "Failed to delete file: /tv/a.nfo: locked"
