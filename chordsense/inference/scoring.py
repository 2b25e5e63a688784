"""Candidate scoring - how well a set of pitch classes fits one pattern.

The same pure function scores chords and scales; categories differ only in
the thresholds applied afterwards.
"""

from dataclasses import dataclass, field
from typing import Collection, List

from ..core import constants as C
from ..core import spelling_to_pitch_class
from ..reference import PatternDefinition


@dataclass(frozen=True)
class MatchBreakdown:
    """Which notes of a pattern were played, missed, or left unexplained."""
    confidence: float
    matched_notes: List[str] = field(default_factory=list)  # spelled as in the pattern
    missing_notes: List[str] = field(default_factory=list)  # spelled as in the pattern
    extra_notes: List[str] = field(default_factory=list)  # canonical input pitch classes

    @property
    def is_exact(self) -> bool:
        return not self.missing_notes and not self.extra_notes


def score(
    input_pitch_classes: Collection[str],
    candidate_pitch_classes: Collection[str],
    extra_penalty: float = C.EXTRA_NOTE_PENALTY,
    missing_penalty: float = C.MISSING_NOTE_PENALTY,
) -> float:
    """
    Confidence in [0, 1] that the input is an instance of the candidate.

    Base probability is matches / expected, reduced by a small linear
    penalty per input note beyond the pattern size and per expected note
    that was not played.

    Args:
        input_pitch_classes: Normalized input pitch classes
        candidate_pitch_classes: Canonical pitch classes of the pattern
        extra_penalty: Penalty per unexplained input note
        missing_penalty: Penalty per missing pattern note

    Returns:
        Confidence score, floored at 0
    """
    expected = len(set(candidate_pitch_classes))
    if expected == 0:
        return 0.0

    played = set(input_pitch_classes)
    matches = len(played & set(candidate_pitch_classes))
    extra = max(0, len(played) - expected)

    probability = matches / expected
    probability -= extra * extra_penalty
    probability -= (expected - matches) * missing_penalty
    return max(0.0, probability)


def score_pattern(
    input_pitch_classes: Collection[str],
    pattern: PatternDefinition,
    extra_penalty: float = C.EXTRA_NOTE_PENALTY,
    missing_penalty: float = C.MISSING_NOTE_PENALTY,
) -> MatchBreakdown:
    """Score a pattern and report the matched, missing and extra notes."""
    played = set(input_pitch_classes)
    confidence = score(played, pattern.pitch_classes, extra_penalty, missing_penalty)

    matched, missing = [], []
    for spelled in pattern.notes:
        (matched if spelling_to_pitch_class(spelled) in played else missing).append(spelled)
    extra = sorted(played - pattern.pitch_classes)

    return MatchBreakdown(
        confidence=confidence,
        matched_notes=matched,
        missing_notes=missing,
        extra_notes=extra,
    )
