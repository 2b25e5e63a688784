"""Tests for display formatting and serialization."""

import json
from dataclasses import replace

from chordsense.core import Note
from chordsense.inference import PatternDetector
from chordsense.output import (
    detection_info,
    format_bass,
    format_chord_display,
    format_notes,
    format_scale_display,
    highlighted_notes,
    result_to_dict,
)
from chordsense.reference import ChordType, ScaleType

from conftest import make_match


class TestLabels:
    """Tests for chord and scale labels."""

    def test_exact_chord(self):
        chord = make_match("C", ChordType.MAJOR, is_exact_match=True)
        assert format_chord_display(chord) == "C Major ✓"

    def test_partial_chord(self):
        chord = make_match("C", ChordType.MAJOR, confidence=0.78)
        assert format_chord_display(chord) == "C Major (78%)"

    def test_no_chord(self):
        assert format_chord_display(None) == "No chord detected"

    def test_no_scale(self):
        assert format_scale_display(None) == "No scale detected"

    def test_partial_scale_rounds(self):
        scale = make_match("C", ScaleType.MAJOR_BLUES, confidence=4 / 6 - 0.2)
        assert format_scale_display(scale) == "C Major Blues (47%)"

    def test_inverted_chord(self):
        chord = replace(make_match("C", ChordType.MAJOR, is_exact_match=True), inversion=1)
        assert format_chord_display(chord) == "C Major/E ✓"

    def test_inverted_partial_chord(self):
        chord = replace(make_match("A", ChordType.MINOR_7, confidence=0.95), inversion=1)
        assert format_chord_display(chord) == "A Minor 7th/C (95%)"

    def test_format_bass(self):
        assert format_bass(Note.parse("Bb2")) == "Bb2"
        assert format_bass(None) == ""

    def test_format_notes(self):
        assert format_notes(("C", "E", "G")) == "C - E - G"
        assert format_notes([]) == ""
        assert format_notes(None) == ""


class TestResultViews:
    """Tests for detection_info, highlighted_notes and result_to_dict."""

    def test_detection_info(self):
        result = PatternDetector().detect(["C4", "E4", "G4"])
        info = detection_info(result)
        assert info["chord"] == "C Major ✓"
        assert info["scale"] == "No scale detected"
        assert info["chord_notes"] == "C - E - G"
        assert info["scale_notes"] == ""
        assert info["filter"] == "contextual"
        assert info["bass"] == "C4"
        assert info["fit"] == "Chord or scale missing"

    def test_highlighted_notes(self):
        result = PatternDetector().detect(["C4", "Eb4", "G4"])
        assert highlighted_notes(result) == ["C", "Eb", "G"]

    def test_highlighted_notes_empty(self):
        assert highlighted_notes(PatternDetector().detect([])) == []

    def test_result_to_dict_is_json_serializable(self):
        result = PatternDetector().detect(["C3", "D4", "E5", "F4", "G5", "A4", "B4"])
        data = json.loads(json.dumps(result_to_dict(result)))
        assert data["scale"]["name"] == "C Major"
        assert data["scale"]["type"] == "Major"
        assert data["scale"]["category"] == "scale"
        assert data["scale"]["is_exact_match"] is True
        assert data["filter"] == "anti-noise"
        assert data["input"] == ["A", "B", "C", "D", "E", "F", "G"]
        assert data["analysis"]["modality"] == "major"
        assert data["analysis"]["suggested_key"] == "C major"
        assert data["analysis"]["compatibility"]["compatible"] is True
        assert data["analysis"]["compatibility"]["outside_notes"] == []
        assert data["bass"] == "C3"
        assert data["chord"]["inversion"] == 0

    def test_result_to_dict_empty(self):
        data = result_to_dict(PatternDetector().detect([]))
        assert data["chord"] is None
        assert data["scale"] is None
        assert data["has_detection"] is False
        assert data["reasoning"] == "No notes selected"

    def test_inversion_views(self):
        result = PatternDetector().detect(["E3", "G4", "C5"])
        assert detection_info(result)["chord"] == "C Major/E ✓"
        data = result_to_dict(result)
        assert data["bass"] == "E3"
        assert data["chord"]["name"] == "C Major"
        assert data["chord"]["symbol"] == "C Major/E"
        assert data["chord"]["inversion"] == 1

    def test_no_octaves_no_bass(self):
        data = result_to_dict(PatternDetector().detect(["C", "E", "G"]))
        assert data["bass"] is None
        assert data["chord"]["inversion"] is None
