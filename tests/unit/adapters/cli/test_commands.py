"""
Tests unitaires pour les commandes CLI.

Ces tests verifient :
- Les commandes info et version
- La commande reconcile (options de nettoyage, confirmation, erreurs)
- La boucle interactive (sortie, chemins invalides, guillemets)
- Le choix du niveau de log console
"""

from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from submatch.adapters.cli.commands.interactive_command import clean_input
from submatch.adapters.cli.console import style_for
from submatch.main import app, console_level

runner = CliRunner()


@pytest.fixture
def show(tmp_path, make_files):
    """Dossier de serie avec un episode range dans un sous-dossier."""
    make_files(
        "Season 1/Show.S01E01.mkv",
        "Season 1/subs/random.s01e01.srt",
        "readme.nfo",
    )
    return tmp_path


# ====================
# Tests info / version
# ====================


class TestInfoVersion:
    """Tests pour les commandes informatives."""

    def test_version(self):
        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert "SubMatch v0.1.0" in result.output

    def test_info(self):
        result = runner.invoke(app, ["info"])
        assert result.exit_code == 0
        assert "Extensions vidéo" in result.output
        assert ".mkv" in result.output
        assert "match-subtitles.log" in result.output


# ====================
# Tests reconcile
# ====================


class TestReconcileCommand:
    """Tests pour la commande reconcile."""

    def test_reconcile_without_cleanup(self, show):
        result = runner.invoke(app, ["reconcile", str(show)])

        assert result.exit_code == 0
        assert (show / "Show.S01E01.mkv").exists()
        assert (show / "Show.S01E01.srt").exists()
        assert (show / "Season 1").exists()
        assert (show / "readme.nfo").exists()
        assert "is ready to be watched!" in result.output

    def test_reconcile_cleanup_yes(self, show):
        result = runner.invoke(app, ["reconcile", str(show), "--cleanup", "--yes"])

        assert result.exit_code == 0
        assert not (show / "Season 1").exists()
        assert not (show / "readme.nfo").exists()
        assert (show / "Show.S01E01.srt").exists()
        assert (show / "match-subtitles.log").exists()

    def test_reconcile_cleanup_declined(self, show):
        result = runner.invoke(
            app, ["reconcile", str(show), "--cleanup-files"], input="n\n"
        )

        assert result.exit_code == 0
        assert (show / "readme.nfo").exists()
        assert "Skipped deleting file" in result.output

    def test_reconcile_cleanup_confirmed(self, show):
        result = runner.invoke(
            app, ["reconcile", str(show), "--cleanup-subfolders"], input="y\n"
        )

        assert result.exit_code == 0
        assert not (show / "Season 1").exists()
        assert (show / "readme.nfo").exists()

    def test_missing_folder_exits_with_error(self, tmp_path):
        result = runner.invoke(app, ["reconcile", str(tmp_path / "missing")])

        assert result.exit_code == 1
        assert "Dossier inaccessible" in result.output

    def test_name_too_long_exits_with_error(self, tmp_path):
        result = runner.invoke(app, ["reconcile", str(tmp_path / ("x" * 300))])

        assert result.exit_code == 1
        assert "Dossier inaccessible" in result.output
        assert not isinstance(result.exception, OSError)

    def test_no_extract_option(self, show):
        with patch(
            "submatch.adapters.cli.commands.reconcile_command.Container"
        ) as mock_container_cls:
            container = mock_container_cls.return_value
            container.config.return_value.extract_archives = True
            container.config.return_value.cleanup_subfolders = False
            container.config.return_value.cleanup_unrelated_files = False
            container.config.return_value.require_confirmation = True
            runner.invoke(app, ["reconcile", str(show), "--no-extract"])

        container.reconciler_service.assert_called_once_with(extract_archives=False)


# ====================
# Tests interactive
# ====================


class TestInteractiveCommand:
    """Tests pour la boucle interactive."""

    def test_exit_word(self):
        result = runner.invoke(app, ["interactive"], input="EXIT\n")
        assert result.exit_code == 0

    def test_end_of_input_stops(self):
        result = runner.invoke(app, ["interactive"], input="")
        assert result.exit_code == 0

    def test_invalid_path_reprompts(self, tmp_path):
        result = runner.invoke(
            app, ["interactive"], input=f"{tmp_path / 'missing'}\nexit\n"
        )
        assert result.exit_code == 0
        assert "Chemin invalide" in result.output

    def test_name_too_long_reprompts(self, tmp_path):
        result = runner.invoke(
            app, ["interactive"], input=f"{tmp_path / ('x' * 300)}\nexit\n"
        )
        assert result.exit_code == 0
        assert "Chemin invalide" in result.output

    def test_quoted_folder_processed(self, show):
        result = runner.invoke(app, ["interactive"], input=f'"{show}"\nexit\n')

        assert result.exit_code == 0
        assert (show / "Show.S01E01.srt").exists()

    def test_clean_input(self):
        assert clean_input('  "/tv/My Show"  ') == "/tv/My Show"
        assert clean_input("/tv/Show") == "/tv/Show"


# ====================
# Tests affichage et verbosite
# ====================


class TestConsoleHelpers:
    """Tests pour les utilitaires d'affichage."""

    def test_style_for(self):
        assert style_for("Failed to move video: a -> b: denied") == "red"
        assert style_for("Renamed subtitle: a -> b (x -> y)") == "yellow"
        assert style_for("/tv/Show is ready to be watched!") == "bold green"
        assert style_for("unknown") == "white"

    def test_console_level(self):
        assert console_level(0, False, "INFO") == "INFO"
        assert console_level(1, False, "INFO") == "DEBUG"
        assert console_level(5, False, "INFO") == "TRACE"
        assert console_level(2, True, "INFO") == "ERROR"
