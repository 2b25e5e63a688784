"""Tests for chord and scale candidate generation."""

import logging
from dataclasses import replace

import pytest

from chordsense.core import DetectionConfig
from chordsense.inference import CandidateGenerator, ContextRanker
from chordsense.reference import ChordType, ScaleType

from conftest import make_match

C_MAJOR_SCALE = ["A", "B", "C", "D", "E", "F", "G"]


class FailingRanker(ContextRanker):
    """Ranker that breaks on one pattern type."""

    def popularity_score(self, tonic, pattern_type):
        if pattern_type is ChordType.MAJOR:
            raise RuntimeError("broken popularity entry")
        return super().popularity_score(tonic, pattern_type)


# ============================================================================
# Chord Candidates
# ============================================================================

class TestChordCandidates:
    """Tests for CandidateGenerator.chords."""

    def test_exact_triad_first(self):
        chords = CandidateGenerator().chords(["C", "E", "G"], "C")
        best = chords[0]
        assert best.name == "C Major"
        assert best.is_exact_match
        assert best.confidence == pytest.approx(1.0)
        assert best.rank_score == pytest.approx(2.0)

    def test_exact_outranks_same_confidence(self):
        """An exact match beats any non-exact candidate."""
        chords = CandidateGenerator().chords(["C", "E", "G"], "C")
        exact = [c for c in chords if c.is_exact_match]
        others = [c for c in chords if not c.is_exact_match]
        assert exact and others
        assert min(c.rank_score for c in exact) > max(c.rank_score for c in others)

    def test_minimum_notes(self):
        assert CandidateGenerator().chords(["C"], "C") == []

    def test_confidence_floor(self):
        for chord in CandidateGenerator().chords(["C", "E", "G"], "C"):
            assert chord.confidence >= 0.4

    def test_relevance_flag(self):
        chords = {c.name: c for c in CandidateGenerator().chords(["C", "E", "G"], "C")}
        assert chords["C Major"].is_relevant
        assert chords["E Minor"].confidence == pytest.approx(2 / 3 - 0.1)
        assert not chords["E Minor"].is_relevant

    def test_sorted_by_rank(self):
        chords = CandidateGenerator().chords(["C", "E", "G", "A"], "C")
        ranks = [c.rank_score for c in chords]
        assert ranks == sorted(ranks, reverse=True)

    def test_ambiguous_input_follows_probable_tonic(self):
        """C-E-G-A reads as C 6 around C and as A Minor 7th around A."""
        gen = CandidateGenerator()
        assert gen.chords(["A", "C", "E", "G"], "C")[0].name == "C 6"
        assert gen.chords(["A", "C", "E", "G"], "A")[0].name == "A Minor 7th"

    def test_flat_key_spelling(self):
        best = CandidateGenerator().chords(["A#", "D#", "G"], "D#")[0]
        assert best.name == "Eb Major"
        assert best.matched_notes == ("Eb", "G", "Bb")
        assert best.tonic_pc == "D#"

    def test_breakdown_fields(self):
        chords = {c.name: c for c in CandidateGenerator().chords(["C", "E"], "C")}
        major = chords["C Major"]
        assert major.missing_notes == ("G",)
        assert major.extra_notes == ()
        assert not major.is_exact_match

    def test_failure_isolated_per_candidate(self, caplog):
        """A candidate that fails to score is skipped; the rest still rank."""
        gen = CandidateGenerator(ranker=FailingRanker())
        with caplog.at_level(logging.WARNING, logger="chordsense.inference.candidates"):
            chords = gen.chords(["C", "E", "G"], "C")
        assert chords
        assert all(c.pattern_type is not ChordType.MAJOR for c in chords)
        assert "Skipping candidate" in caplog.text

    def test_config_overrides(self):
        gen = CandidateGenerator(config=DetectionConfig(min_chord_notes=4))
        assert gen.chords(["C", "E", "G"], "C") == []


# ============================================================================
# Scale Candidates
# ============================================================================

class TestScaleCandidates:
    """Tests for CandidateGenerator.scales."""

    def test_exact_scale_first(self):
        scales = CandidateGenerator().scales(C_MAJOR_SCALE, "C")
        assert scales[0].name == "C Major"
        assert scales[0].is_exact_match

    def test_minimum_notes(self):
        assert CandidateGenerator().scales(["C", "E"], "C") == []

    def test_confidence_floor(self):
        for scale in CandidateGenerator().scales(["C", "E", "G", "A"], "C"):
            assert scale.confidence >= 0.3

    def test_specificity_dominates(self):
        """Scales are ordered by note count before rank score."""
        scales = CandidateGenerator().scales(["A", "C", "E", "G"], "C")
        sizes = [s.specificity for s in scales]
        assert sizes == sorted(sizes, reverse=True)
        assert scales[0].name == "C Major Blues"
        assert scales[0].specificity == 6

    def test_more_specific_wins_despite_lower_rank(self):
        scales = CandidateGenerator().scales(["A", "C", "E", "G"], "C")
        blues = scales[0]
        pentatonic = next(s for s in scales if s.pattern_type is ScaleType.MAJOR_PENTATONIC)
        assert pentatonic.rank_score > blues.rank_score
        assert scales.index(blues) < scales.index(pentatonic)

    def test_modes_share_pitch_classes(self):
        """Every mode of the white keys is an exact match; the tonic bonus picks C."""
        scales = CandidateGenerator().scales(C_MAJOR_SCALE, "C")
        exact = {s.name for s in scales if s.is_exact_match}
        assert {"C Major", "C Ionian", "D Dorian", "A Aeolian", "B Locrian"} <= exact

    def test_exact_pentatonic_behind_partial_major(self):
        """C-D-E-G-A is exactly C Major Pentatonic, yet 7-note scales come first."""
        scales = CandidateGenerator().scales(["A", "C", "D", "E", "G"], "C")
        pentatonic = next(s for s in scales if s.name == "C Major Pentatonic")
        assert pentatonic.is_exact_match
        assert scales[0].name == "C Major"
        assert scales[0].confidence == pytest.approx(5 / 7 - 0.2)
        assert pentatonic.rank_score > scales[0].rank_score


# ============================================================================
# Candidate Helpers
# ============================================================================

class TestCandidateMatch:
    """Tests for CandidateMatch positions and slash names."""

    def test_position_of(self):
        chord = make_match("C", ChordType.MAJOR_7)
        assert chord.position_of("C") == 0
        assert chord.position_of("B") == 3
        assert chord.position_of("D") is None

    def test_position_of_flat_spelling(self):
        chord = make_match("Eb", ChordType.MAJOR)
        assert chord.position_of("A#") == 2

    def test_slash_name(self):
        chord = replace(make_match("C", ChordType.MAJOR), inversion=1)
        assert chord.slash_name == "C Major/E"

    def test_slash_name_root_position(self):
        assert replace(make_match("C", ChordType.MAJOR), inversion=0).slash_name == "C Major"
        assert make_match("C", ChordType.MAJOR).slash_name == "C Major"
