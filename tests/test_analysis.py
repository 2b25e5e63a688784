"""Tests for the supplementary tonal summary."""

import numpy as np
import pytest

from chordsense.core import DetectionConfig
from chordsense.inference import (
    PatternDetector,
    certainty,
    compatibility,
    chroma_vector,
    chromaticism,
    modality,
    suggested_key,
    summarize,
)
from chordsense.reference import ChordType, ScaleType

from conftest import make_match


class TestCertainty:
    """Tests for certainty bands."""

    @pytest.mark.parametrize("confidence,expected", [
        (1.0, "high"),
        (0.85, "high"),
        (0.84, "medium"),
        (0.65, "medium"),
        (0.64, "low"),
        (0.0, "low"),
    ])
    def test_bands(self, confidence, expected):
        assert certainty(confidence) == expected

    def test_configured_bands(self):
        config = DetectionConfig(high_certainty=0.95, medium_certainty=0.5)
        assert certainty(0.9, config) == "medium"
        assert certainty(0.5, config) == "medium"
        assert certainty(0.49, config) == "low"


class TestCompatibility:
    """Tests for the chord-scale fit check."""

    def test_full_fit(self):
        fit = compatibility(make_match("C", ChordType.MAJOR_7), make_match("C", ScaleType.MAJOR))
        assert fit.score == 1.0
        assert fit.compatible
        assert fit.outside_notes == ()
        assert fit.reason == "C Major 7th fits C Major"

    def test_mostly_fits(self):
        """C major against C natural minor: only E is outside."""
        fit = compatibility(make_match("C", ChordType.MAJOR), make_match("C", ScaleType.NATURAL_MINOR))
        assert fit.score == pytest.approx(2 / 3)
        assert fit.compatible
        assert fit.outside_notes == ("E",)
        assert fit.reason == "C Major mostly fits C Natural Minor"

    def test_compatible_boundary_inclusive(self):
        """Three of five notes inside is exactly the compatible threshold."""
        fit = compatibility(make_match("C", ChordType.MAJOR_NINTH), make_match("C", ScaleType.NATURAL_MINOR))
        assert fit.score == 0.6
        assert fit.compatible

    def test_partial_fit(self):
        fit = compatibility(make_match("C", ChordType.MAJOR_7), make_match("C", ScaleType.NATURAL_MINOR))
        assert fit.score == 0.5
        assert not fit.compatible
        assert fit.outside_notes == ("E", "B")
        assert fit.reason == "Partial fit; outside C Natural Minor: E, B"

    def test_no_fit(self):
        fit = compatibility(make_match("F#", ChordType.MAJOR), make_match("C", ScaleType.MAJOR))
        assert fit.score == 0.0
        assert not fit.compatible
        assert fit.outside_notes == ("F#", "A#", "C#")
        assert fit.reason == "Conflicts with C Major: F#, A#, C#"

    def test_enharmonic_notes_inside(self):
        """Eb in the chord matches D# in the scale by pitch class."""
        fit = compatibility(make_match("C", ChordType.MINOR), make_match("Eb", ScaleType.MAJOR))
        assert fit.score == 1.0

    @pytest.mark.parametrize("chord,scale", [
        (make_match("C", ChordType.MAJOR), None),
        (None, make_match("C", ScaleType.MAJOR)),
        (None, None),
    ])
    def test_missing_chord_or_scale(self, chord, scale):
        fit = compatibility(chord, scale)
        assert fit.score == 0.0
        assert not fit.compatible
        assert fit.outside_notes == ()
        assert fit.reason == "Chord or scale missing"

    def test_configured_bands(self):
        config = DetectionConfig(full_fit=1.0, compatible_fit=0.7, partial_fit=0.5)
        fit = compatibility(make_match("C", ChordType.MAJOR), make_match("C", ScaleType.NATURAL_MINOR), config)
        assert not fit.compatible
        assert fit.reason.startswith("Partial fit")


class TestChromaticism:
    """Tests for chroma vectors and chromaticism."""

    def test_chroma_vector(self):
        chroma = chroma_vector(["C", "E", "G"])
        assert chroma.shape == (12,)
        assert chroma.sum() == 3
        assert list(np.flatnonzero(chroma)) == [0, 4, 7]

    def test_triad(self):
        assert chromaticism(["C", "E", "G"]) == pytest.approx(0.25)

    def test_semitone_pair(self):
        assert chromaticism(["C", "C#"]) == pytest.approx(2 / 12 + 1 / 2)

    def test_wraps_around_octave(self):
        """B and C are adjacent."""
        assert chromaticism(["B", "C"]) == pytest.approx(2 / 12 + 1 / 2)

    def test_diatonic_scale(self):
        pcs = ["C", "D", "E", "F", "G", "A", "B"]
        assert chromaticism(pcs) == pytest.approx(7 / 12 + 2 / 7)

    def test_full_chromatic_capped(self):
        pcs = ["C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B"]
        assert chromaticism(pcs) == 1.0

    def test_empty(self):
        assert chromaticism([]) == 0.0


class TestModality:
    """Tests for modality and suggested key."""

    def test_unknown_without_scale(self):
        assert modality(None) == "unknown"

    @pytest.mark.parametrize("scale_type,expected", [
        (ScaleType.MAJOR, "major"),
        (ScaleType.MIXOLYDIAN, "major"),
        (ScaleType.MAJOR_BLUES, "major"),
        (ScaleType.NATURAL_MINOR, "minor"),
        (ScaleType.DORIAN, "minor"),
        (ScaleType.MINOR_PENTATONIC, "minor"),
        (ScaleType.LOCRIAN, "modal"),
    ])
    def test_families(self, scale_type, expected):
        assert modality(make_match("C", scale_type)) == expected

    def test_suggested_key_major(self):
        assert suggested_key(make_match("Eb", ScaleType.MAJOR)) == "Eb major"

    def test_suggested_key_aeolian(self):
        assert suggested_key(make_match("A", ScaleType.AEOLIAN)) == "A minor"

    def test_suggested_key_other_scale(self):
        assert suggested_key(make_match("G", ScaleType.MAJOR_PENTATONIC)) == "G"

    def test_suggested_key_none(self):
        assert suggested_key(None) is None


class TestSummarize:
    """Tests for summarize() on real detections."""

    def test_c_natural_minor(self):
        result = PatternDetector().detect(["C4", "D4", "Eb4", "F4", "G4", "Ab4", "Bb4"])
        summary = summarize(result)
        assert result.scale.name == "C Natural Minor"
        assert summary.modality == "minor"
        assert summary.suggested_key == "C minor"
        assert summary.scale_certainty == "high"

    def test_triad(self):
        summary = summarize(PatternDetector().detect(["C4", "E4", "G4"]))
        assert summary.chord_certainty == "high"
        assert summary.scale_certainty is None
        assert summary.modality == "unknown"
        assert summary.chromaticism == pytest.approx(0.25)

    def test_empty(self):
        summary = summarize(PatternDetector().detect([]))
        assert summary.chord_certainty is None
        assert summary.suggested_key is None
        assert summary.chromaticism == 0.0

    def test_fit_on_detection(self):
        """The C major scale spread over octaves yields C Major 7th inside C Major."""
        summary = summarize(PatternDetector().detect(["C3", "D4", "E5", "F4", "G5", "A4", "B4"]))
        assert summary.fit.compatible
        assert summary.fit.score == 1.0

    def test_fit_without_scale(self):
        summary = summarize(PatternDetector().detect(["C4", "E4", "G4"]))
        assert not summary.fit.compatible
        assert summary.fit.reason == "Chord or scale missing"

    def test_config_passed_through(self):
        config = DetectionConfig(high_certainty=1.0, medium_certainty=0.99)
        summary = summarize(PatternDetector().detect(["C4", "E4"]), config)
        assert summary.chord_certainty == "low"
