"""Noise filtering - reduce ranked candidates to at most one per category.

Filters are pluggable policies. The detector only depends on
``apply(chords, scales) -> FilterOutcome``.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Sequence

from ..core import DetectionConfig
from .candidates import CandidateMatch


class FilterKind(Enum):
    """Which filtering rule produced the result."""
    ANTI_NOISE = "anti-noise"
    CONTEXTUAL = "contextual"
    NONE = "none"


@dataclass(frozen=True)
class FilterOutcome:
    """Surviving candidates plus an explanation of the rule that fired."""
    chords: List[CandidateMatch] = field(default_factory=list)
    scales: List[CandidateMatch] = field(default_factory=list)
    kind: FilterKind = FilterKind.NONE
    reasoning: str = "No special filters applied"


class TopCandidateFilter:
    """Keep the single best candidate of each category."""

    def apply(
        self,
        chords: Sequence[CandidateMatch],
        scales: Sequence[CandidateMatch],
    ) -> FilterOutcome:
        return FilterOutcome(chords=list(chords[:1]), scales=list(scales[:1]))


class NoiseFilter(TopCandidateFilter):
    """Three-rule filter; the first applicable rule wins.

    1. Anti-noise: when a large, confidently matched scale is present, drop
       simple chords that are merely fragments of it.
    2. Contextual: when many candidates compete, keep only the best
       relevant one per category.
    3. Default: keep the best candidate per category.
    """

    def __init__(self, config: Optional[DetectionConfig] = None):
        self.config = config or DetectionConfig()

    def apply(
        self,
        chords: Sequence[CandidateMatch],
        scales: Sequence[CandidateMatch],
    ) -> FilterOutcome:
        outcome = self._anti_noise(chords, scales)
        if outcome is None:
            outcome = self._contextual(chords, scales)
        if outcome is None:
            outcome = super().apply(chords, scales)
        return outcome

    def significant_scale(self, scales: Sequence[CandidateMatch]) -> Optional[CandidateMatch]:
        """First scale large and confident enough to explain simple chords."""
        cfg = self.config
        for scale in scales:
            if (scale.specificity >= cfg.significant_scale_min_notes
                    and scale.confidence >= cfg.significant_scale_min_confidence):
                return scale
        return None

    def _anti_noise(self, chords, scales) -> Optional[FilterOutcome]:
        scale = self.significant_scale(scales)
        if scale is None:
            return None

        cfg = self.config
        kept = [
            chord for chord in chords
            if not chord.is_subset_of(scale)
            or chord.specificity >= cfg.complex_chord_min_notes
            or chord.confidence >= cfg.independent_chord_confidence
        ]
        if len(kept) == len(chords):
            return None

        return FilterOutcome(
            chords=kept[:1],
            scales=list(scales[:1]),
            kind=FilterKind.ANTI_NOISE,
            reasoning=f"Filtered simple chords that are subsets of {scale.name}",
        )

    def _contextual(self, chords, scales) -> Optional[FilterOutcome]:
        cfg = self.config
        if len(chords) <= cfg.contextual_max_chords and len(scales) <= cfg.contextual_max_scales:
            return None

        top_chords = [c for c in chords if c.is_relevant][:1]
        top_scales = [s for s in scales if s.is_relevant][:1]
        if not top_chords and not top_scales:
            return None

        return FilterOutcome(
            chords=top_chords,
            scales=top_scales,
            kind=FilterKind.CONTEXTUAL,
            reasoning="Filtered by musical relevance and simplicity",
        )
