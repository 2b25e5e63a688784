"""Tests for the chordsense command-line interface."""

import json
import logging

import pytest
from typer.testing import CliRunner

from chordsense.cli import app

runner = CliRunner()


@pytest.fixture
def restore_logging():
    """--verbose reconfigures the root logger; put it back afterwards."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


class TestDetectCommand:
    """Tests for `chordsense detect`."""

    def test_triad(self):
        result = runner.invoke(app, ["detect", "C4", "E4", "G4"])
        assert result.exit_code == 0
        assert "C Major" in result.stdout
        assert "No scale detected" in result.stdout

    def test_json_output(self):
        result = runner.invoke(app, ["detect", "C4", "E4", "G4", "A4", "--json"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["chord"]["name"] == "C 6"
        assert data["probable_tonic"] == "C"

    def test_first_note_option(self):
        result = runner.invoke(app, ["detect", "C4", "E4", "G4", "A4", "--first", "A4", "--json"])
        assert result.exit_code == 0
        assert json.loads(result.stdout)["chord"]["name"] == "A Minor 7th"

    def test_inversion(self):
        result = runner.invoke(app, ["detect", "E3", "G4", "C5"])
        assert result.exit_code == 0
        assert "C Major/E" in result.stdout
        assert "Bass: E3" in result.stdout

    def test_chord_scale_fit(self):
        result = runner.invoke(app, ["detect", "C3", "D4", "E5", "F4", "G5", "A4", "B4"])
        assert result.exit_code == 0
        assert "Fit: C Major 7th fits C Major (100%)" in result.stdout

    def test_json_bass_and_fit(self):
        result = runner.invoke(app, ["detect", "G2", "C4", "E4", "--json"])
        data = json.loads(result.stdout)
        assert data["bass"] == "G2"
        assert data["chord"]["symbol"] == "C Major/G"
        assert data["analysis"]["compatibility"]["compatible"] is False

    def test_all_notes_invalid(self):
        result = runner.invoke(app, ["detect", "X9", "H2"])
        assert result.exit_code == 1
        assert "No valid notes" in result.stdout

    def test_verbose(self, restore_logging):
        result = runner.invoke(app, ["detect", "C4", "E4", "--verbose"])
        assert result.exit_code == 0
        assert "Probable tonic" in result.stdout


class TestPatternsCommand:
    """Tests for `chordsense patterns`."""

    def test_chords_for_tonic(self):
        result = runner.invoke(app, ["patterns", "--tonic", "C"])
        assert result.exit_code == 0
        assert "C Major 7th" in result.stdout
        assert "G Major" not in result.stdout

    def test_scales_for_flat_tonic(self):
        result = runner.invoke(app, ["patterns", "--category", "scale", "--tonic", "D#"])
        assert result.exit_code == 0
        assert "Eb Dorian" in result.stdout

    def test_unknown_category(self):
        result = runner.invoke(app, ["patterns", "--category", "arpeggio"])
        assert result.exit_code == 1

    def test_invalid_tonic(self):
        result = runner.invoke(app, ["patterns", "--tonic", "Q"])
        assert result.exit_code == 1


class TestInfoCommand:
    """Tests for `chordsense info`."""

    def test_info(self):
        result = runner.invoke(app, ["info"])
        assert result.exit_code == 0
        assert "Chord types: 17" in result.stdout
        assert "Scale types: 16" in result.stdout
        assert "chord_exact_bonus" in result.stdout
