"""
Tests unitaires pour l'extraction des codes d'episode.
"""

import pytest

from submatch.core.value_objects import EpisodeCode, extract_episode_code


class TestEpisodeCodeExtraction:
    """Tests pour EpisodeCode.from_filename."""

    @pytest.mark.parametrize(
        "filename",
        [
            "Show.S01E02.1080p",
            "Show s01e02",
            "Show.S01.E02",
            "Show_S01_E02",
            "Show - S01 - E02",
            "Show.S01 ._-E02.x264",
        ],
    )
    def test_separators_and_case(self, filename):
        """Les separateurs espace . _ - et la casse sont toleres."""
        assert EpisodeCode.from_filename(filename) == EpisodeCode("01", "02")

    def test_no_code_returns_none(self):
        """Un nom sans motif SxxExx ne produit aucun code."""
        assert EpisodeCode.from_filename("Show.Episode.2") is None
        assert EpisodeCode.from_filename("Show.1x02") is None

    def test_single_digit_not_recognized(self):
        """Saison et episode doivent faire deux chiffres."""
        assert EpisodeCode.from_filename("Show.S1E2") is None

    def test_first_occurrence_wins(self):
        """Seule la premiere occurrence est retenue."""
        code = EpisodeCode.from_filename("Show.S01E02.S03E04")
        assert code == EpisodeCode("01", "02")

    def test_multi_episode_range_takes_first(self):
        """Une plage S01E01-E02 donne le premier episode."""
        assert EpisodeCode.from_filename("Show.S01E01-E02") == EpisodeCode("01", "01")

    def test_values_kept_as_strings(self):
        """Les valeurs sont des chaines a deux chiffres."""
        code = EpisodeCode.from_filename("Show.S10E05")
        assert code.season == "10"
        assert code.episode == "05"
        assert str(code) == "S10E05"

    def test_three_digit_episode_uses_first_two(self):
        """Un episode a trois chiffres correspond sur ses deux premiers."""
        assert EpisodeCode.from_filename("Show.S01E123") == EpisodeCode("01", "12")

    def test_shortcut_function(self):
        """extract_episode_code delegue a from_filename."""
        assert extract_episode_code("a.s02e03.b") == EpisodeCode("02", "03")
