"""Candidate generation - score every (tonic, type) pair of one category.

Implements the ranking used by the detector:
- Confidence from :func:`score_pattern`, discarded below a category floor
- Bonuses for exact matches and for the probable tonic
- Popularity blended in with a small weight
- Scales ordered by specificity before rank score
"""

import logging
from dataclasses import dataclass, field
from typing import FrozenSet, List, Optional, Sequence, Tuple

from ..core import DetectionConfig, spelling_to_pitch_class
from ..reference import Category, PatternDefinition, PatternRegistry, PatternType, default_registry
from .context import ContextRanker
from .scoring import score_pattern

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CandidateMatch:
    """A scored pattern candidate."""

    tonic: str  # Display spelling (e.g. "Eb")
    tonic_pc: str  # Canonical pitch class (e.g. "D#")
    pattern_type: PatternType
    notes: Tuple[str, ...]  # Spelled pattern notes
    pitch_classes: FrozenSet[str]  # Canonical pitch classes of notes
    confidence: float  # 0.0 - 1.0
    specificity: int  # Distinct pitch classes in the pattern
    popularity: float  # 0.0 - 1.0
    is_exact_match: bool
    is_relevant: bool
    rank_score: float
    matched_notes: Tuple[str, ...] = field(default_factory=tuple)
    missing_notes: Tuple[str, ...] = field(default_factory=tuple)
    extra_notes: Tuple[str, ...] = field(default_factory=tuple)
    inversion: Optional[int] = None  # Index of the bass in notes; None if unknown

    @property
    def category(self) -> Category:
        return self.pattern_type.category

    @property
    def name(self) -> str:
        """Human-readable label, e.g. 'C Major 7th'."""
        return f"{self.tonic} {self.pattern_type.display_name}"

    @property
    def slash_name(self) -> str:
        """Name with the bass appended for inversions, e.g. 'C Major/E'."""
        if not self.inversion:
            return self.name
        return f"{self.name}/{self.notes[self.inversion]}"

    def is_subset_of(self, other: "CandidateMatch") -> bool:
        """True if every pitch class of this candidate is in ``other``."""
        return self.pitch_classes <= other.pitch_classes

    def position_of(self, pitch_class: str) -> Optional[int]:
        """Index of ``pitch_class`` in the spelled notes, or None if absent."""
        for i, note in enumerate(self.notes):
            if spelling_to_pitch_class(note) == pitch_class:
                return i
        return None


class CandidateGenerator:
    """Rank chord and scale candidates for a normalized pitch-class set.

    Features:
    - One pass over the registry per category
    - Per-candidate failure isolation (a broken pattern is logged and skipped)
    - Deterministic ordering; ties keep registry order
    """

    def __init__(
        self,
        config: Optional[DetectionConfig] = None,
        registry: Optional[PatternRegistry] = None,
        ranker: Optional[ContextRanker] = None,
    ):
        """
        Initialize CandidateGenerator.

        Args:
            config: Weights and thresholds (defaults to DetectionConfig())
            registry: Pattern registry (defaults to the bundled tables)
            ranker: Popularity model (defaults to ContextRanker())
        """
        self.config = config or DetectionConfig()
        self.registry = registry or default_registry()
        self.ranker = ranker or ContextRanker()

    def chords(
        self,
        pitch_classes: Sequence[str],
        probable_tonic: Optional[str] = None,
    ) -> List[CandidateMatch]:
        """
        Ranked chord candidates, best first.

        Args:
            pitch_classes: Normalized input pitch classes
            probable_tonic: Canonical pitch class receiving the tonic bonus

        Returns:
            Candidates at or above the chord confidence floor
        """
        cfg = self.config
        if len(pitch_classes) < cfg.min_chord_notes:
            return []
        matches = self._collect(
            pitch_classes,
            self.registry.patterns(Category.CHORD),
            probable_tonic,
            floor=cfg.chord_confidence_floor,
            relevance=cfg.chord_relevance_threshold,
            exact_bonus=cfg.chord_exact_bonus,
            tonic_bonus=cfg.chord_tonic_bonus,
            popularity_weight=cfg.chord_popularity_weight,
        )
        return sorted(matches, key=lambda m: -m.rank_score)

    def scales(
        self,
        pitch_classes: Sequence[str],
        probable_tonic: Optional[str] = None,
    ) -> List[CandidateMatch]:
        """
        Ranked scale candidates, most specific first, then by rank score.

        A fully matched 7-note scale outranks a pentatonic subset even when
        the pentatonic scores marginally higher on popularity.
        """
        cfg = self.config
        if len(pitch_classes) < cfg.min_scale_notes:
            return []
        matches = self._collect(
            pitch_classes,
            self.registry.patterns(Category.SCALE),
            probable_tonic,
            floor=cfg.scale_confidence_floor,
            relevance=cfg.scale_relevance_threshold,
            exact_bonus=cfg.scale_exact_bonus,
            tonic_bonus=cfg.scale_tonic_bonus,
            popularity_weight=cfg.scale_popularity_weight,
        )
        return sorted(matches, key=lambda m: (-m.specificity, -m.rank_score))

    def _collect(
        self,
        pitch_classes: Sequence[str],
        patterns: Sequence[PatternDefinition],
        probable_tonic: Optional[str],
        floor: float,
        relevance: float,
        exact_bonus: float,
        tonic_bonus: float,
        popularity_weight: float,
    ) -> List[CandidateMatch]:
        played = frozenset(pitch_classes)
        results = []
        for pattern in patterns:
            try:
                match = self._evaluate(
                    played, pattern, probable_tonic,
                    floor, relevance, exact_bonus, tonic_bonus, popularity_weight,
                )
            except Exception as e:
                logger.warning("Skipping candidate %s: %s", pattern.name, e)
                continue
            if match is not None:
                results.append(match)
        return results

    def _evaluate(
        self,
        played: FrozenSet[str],
        pattern: PatternDefinition,
        probable_tonic: Optional[str],
        floor: float,
        relevance: float,
        exact_bonus: float,
        tonic_bonus: float,
        popularity_weight: float,
    ) -> Optional[CandidateMatch]:
        breakdown = score_pattern(
            played,
            pattern,
            extra_penalty=self.config.extra_note_penalty,
            missing_penalty=self.config.missing_note_penalty,
        )
        if breakdown.confidence < floor:
            return None

        is_exact = played == pattern.pitch_classes
        popularity = self.ranker.popularity_score(pattern.tonic_pc, pattern.pattern_type)

        rank = breakdown.confidence
        if is_exact:
            rank += exact_bonus
        if probable_tonic is not None and pattern.tonic_pc == probable_tonic:
            rank += tonic_bonus
        rank += popularity_weight * popularity

        return CandidateMatch(
            tonic=pattern.tonic,
            tonic_pc=pattern.tonic_pc,
            pattern_type=pattern.pattern_type,
            notes=pattern.notes,
            pitch_classes=pattern.pitch_classes,
            confidence=breakdown.confidence,
            specificity=pattern.specificity,
            popularity=popularity,
            is_exact_match=is_exact,
            is_relevant=breakdown.confidence >= relevance,
            rank_score=rank,
            matched_notes=tuple(breakdown.matched_notes),
            missing_notes=tuple(breakdown.missing_notes),
            extra_notes=tuple(breakdown.extra_notes),
        )
