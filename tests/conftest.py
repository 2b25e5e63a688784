"""Shared fixtures for chordsense tests."""

import pytest

from chordsense.inference import CandidateMatch
from chordsense.inference.context import ContextRanker
from chordsense.reference import default_registry


def make_match(
    tonic: str,
    pattern_type,
    confidence: float = 1.0,
    is_exact_match: bool = False,
    is_relevant: bool = True,
    rank_score: float = 1.0,
) -> CandidateMatch:
    """Build a CandidateMatch from the bundled tables with chosen scores."""
    pattern = default_registry().get(tonic, pattern_type)
    return CandidateMatch(
        tonic=pattern.tonic,
        tonic_pc=pattern.tonic_pc,
        pattern_type=pattern.pattern_type,
        notes=pattern.notes,
        pitch_classes=pattern.pitch_classes,
        confidence=confidence,
        specificity=pattern.specificity,
        popularity=ContextRanker().popularity_score(pattern.tonic_pc, pattern.pattern_type),
        is_exact_match=is_exact_match,
        is_relevant=is_relevant,
        rank_score=rank_score,
        matched_notes=pattern.notes,
    )


@pytest.fixture
def registry():
    return default_registry()
