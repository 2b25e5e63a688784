"""Detection configuration - every tunable weight and threshold in one place."""

from dataclasses import asdict, dataclass, fields, replace
from typing import Any, Dict

from . import constants as C


@dataclass(frozen=True)
class DetectionConfig:
    """Weights and thresholds used by the detection pipeline.

    Defaults mirror the constants in :mod:`chordsense.core.constants`.
    The scoring penalties must stay small and additive so that a mostly
    complete scale still beats a partial triad on raw signal.
    """

    extra_note_penalty: float = C.EXTRA_NOTE_PENALTY
    missing_note_penalty: float = C.MISSING_NOTE_PENALTY

    min_chord_notes: int = C.MIN_CHORD_NOTES
    min_scale_notes: int = C.MIN_SCALE_NOTES
    chord_confidence_floor: float = C.CHORD_CONFIDENCE_FLOOR
    scale_confidence_floor: float = C.SCALE_CONFIDENCE_FLOOR
    chord_relevance_threshold: float = C.CHORD_RELEVANCE_THRESHOLD
    scale_relevance_threshold: float = C.SCALE_RELEVANCE_THRESHOLD

    chord_exact_bonus: float = C.CHORD_EXACT_BONUS
    scale_exact_bonus: float = C.SCALE_EXACT_BONUS
    chord_tonic_bonus: float = C.CHORD_TONIC_BONUS
    scale_tonic_bonus: float = C.SCALE_TONIC_BONUS
    chord_popularity_weight: float = C.CHORD_POPULARITY_WEIGHT
    scale_popularity_weight: float = C.SCALE_POPULARITY_WEIGHT

    significant_scale_min_notes: int = C.SIGNIFICANT_SCALE_MIN_NOTES
    significant_scale_min_confidence: float = C.SIGNIFICANT_SCALE_MIN_CONFIDENCE
    complex_chord_min_notes: int = C.COMPLEX_CHORD_MIN_NOTES
    independent_chord_confidence: float = C.INDEPENDENT_CHORD_CONFIDENCE
    contextual_max_chords: int = C.CONTEXTUAL_MAX_CHORDS
    contextual_max_scales: int = C.CONTEXTUAL_MAX_SCALES

    high_certainty: float = C.HIGH_CERTAINTY
    medium_certainty: float = C.MEDIUM_CERTAINTY
    full_fit: float = C.FULL_FIT
    compatible_fit: float = C.COMPATIBLE_FIT
    partial_fit: float = C.PARTIAL_FIT

    cache_size: int = C.DEFAULT_CACHE_SIZE

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if value < 0:
                raise ValueError(f"DetectionConfig.{f.name} must be >= 0, got {value}")
        for name in (
            "chord_confidence_floor",
            "scale_confidence_floor",
            "chord_relevance_threshold",
            "scale_relevance_threshold",
            "significant_scale_min_confidence",
            "independent_chord_confidence",
            "high_certainty",
            "medium_certainty",
            "full_fit",
            "compatible_fit",
            "partial_fit",
        ):
            value = getattr(self, name)
            if value > 1:
                raise ValueError(f"DetectionConfig.{name} must be in [0, 1], got {value}")
        if self.medium_certainty > self.high_certainty:
            raise ValueError(
                f"DetectionConfig.medium_certainty ({self.medium_certainty}) "
                f"exceeds high_certainty ({self.high_certainty})"
            )
        if not self.partial_fit <= self.compatible_fit <= self.full_fit:
            raise ValueError(
                "DetectionConfig fit bands must satisfy partial_fit <= compatible_fit <= full_fit"
            )
        if self.cache_size < 1:
            raise ValueError(f"DetectionConfig.cache_size must be >= 1, got {self.cache_size}")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DetectionConfig":
        """Build a config from a (possibly partial) mapping of overrides."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown DetectionConfig keys: {', '.join(unknown)}")
        return cls(**data)

    def with_overrides(self, **overrides: Any) -> "DetectionConfig":
        """Return a copy with the given fields replaced."""
        return replace(self, **overrides)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
