"""Tonal summary - best-effort interpretation layered on a detection result.

Adds the descriptive extras a UI shows next to the chord and scale labels:
- Certainty band for each match
- Modality (major, minor or modal) of the detected scale
- Chromaticism of the pressed notes, from a 12-bin chroma vector
- A suggested key for further playing
- How well the detected chord fits inside the detected scale
"""

from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

import numpy as np

from ..core import PITCH_NAMES, DetectionConfig, spelling_to_pitch_class
from ..reference import ScaleType
from .candidates import CandidateMatch

MAJOR_FAMILY = {
    ScaleType.MAJOR,
    ScaleType.IONIAN,
    ScaleType.LYDIAN,
    ScaleType.MIXOLYDIAN,
    ScaleType.MAJOR_PENTATONIC,
    ScaleType.MAJOR_BLUES,
}

MINOR_FAMILY = {
    ScaleType.NATURAL_MINOR,
    ScaleType.HARMONIC_MINOR,
    ScaleType.MELODIC_MINOR_ASCENDING,
    ScaleType.MELODIC_MINOR_DESCENDING,
    ScaleType.MINOR_PENTATONIC,
    ScaleType.MINOR_BLUES,
    ScaleType.AEOLIAN,
    ScaleType.DORIAN,
    ScaleType.PHRYGIAN,
}

# Scales whose tonic names a conventional key
KEY_SCALES = {
    ScaleType.MAJOR: "major",
    ScaleType.IONIAN: "major",
    ScaleType.NATURAL_MINOR: "minor",
    ScaleType.AEOLIAN: "minor",
}


@dataclass(frozen=True)
class ChordScaleFit:
    """How well a chord sits inside a scale."""
    score: float  # Share of chord notes inside the scale
    compatible: bool
    outside_notes: Tuple[str, ...]  # Chord spellings outside the scale
    reason: str


@dataclass(frozen=True)
class TonalSummary:
    """Descriptive summary of one detection."""
    chord_certainty: Optional[str]  # "high", "medium", "low" or None
    scale_certainty: Optional[str]
    modality: str  # "major", "minor", "modal" or "unknown"
    chromaticism: float  # 0.0 - 1.0
    suggested_key: Optional[str]  # e.g. "C major", "Eb"
    fit: ChordScaleFit


def certainty(confidence: float, config: Optional[DetectionConfig] = None) -> str:
    """Band a confidence value into high / medium / low."""
    cfg = config or DetectionConfig()
    if confidence >= cfg.high_certainty:
        return "high"
    if confidence >= cfg.medium_certainty:
        return "medium"
    return "low"


def compatibility(
    chord: Optional[CandidateMatch],
    scale: Optional[CandidateMatch],
    config: Optional[DetectionConfig] = None,
) -> ChordScaleFit:
    """
    Score how many of the chord's notes belong to the scale.

    Args:
        chord: Detected chord, or None
        scale: Detected scale, or None
        config: Supplies the full / compatible / partial fit bands

    Returns:
        ChordScaleFit; a missing chord or scale scores 0 and is not compatible
    """
    cfg = config or DetectionConfig()
    if chord is None or scale is None:
        return ChordScaleFit(0.0, False, (), "Chord or scale missing")

    outside = tuple(
        note for note in chord.notes
        if spelling_to_pitch_class(note) not in scale.pitch_classes
    )
    fit = (len(chord.notes) - len(outside)) / len(chord.notes)
    listed = ", ".join(outside)

    if fit >= cfg.full_fit:
        reason = f"{chord.name} fits {scale.name}"
    elif fit >= cfg.compatible_fit:
        reason = f"{chord.name} mostly fits {scale.name}"
    elif fit >= cfg.partial_fit:
        reason = f"Partial fit; outside {scale.name}: {listed}"
    else:
        reason = f"Conflicts with {scale.name}: {listed}"

    return ChordScaleFit(
        score=fit,
        compatible=fit >= cfg.compatible_fit,
        outside_notes=outside,
        reason=reason,
    )


def modality(scale: Optional[CandidateMatch]) -> str:
    if scale is None:
        return "unknown"
    if scale.pattern_type in MAJOR_FAMILY:
        return "major"
    if scale.pattern_type in MINOR_FAMILY:
        return "minor"
    return "modal"


def chroma_vector(pitch_classes: Iterable[str]) -> np.ndarray:
    """12-element presence vector indexed by pitch class (0 = C)."""
    chroma = np.zeros(12)
    for pc in pitch_classes:
        chroma[PITCH_NAMES.index(pc)] = 1.0
    return chroma


def chromaticism(pitch_classes: Iterable[str]) -> float:
    """
    How chromatic a pitch-class set is, in [0, 1].

    Sum of the share of the octave covered and the share of present pitch
    classes whose upper semitone neighbour is also present, capped at 1.
    A triad scores 0.25; the full chromatic set scores 1.0.
    """
    chroma = chroma_vector(pitch_classes)
    distinct = chroma.sum()
    if distinct == 0:
        return 0.0
    adjacent = float(np.sum(chroma * np.roll(chroma, -1)))
    return float(min(1.0, distinct / 12 + adjacent / distinct))


def suggested_key(scale: Optional[CandidateMatch]) -> Optional[str]:
    """Key name for a major/minor scale, else the scale's tonic."""
    if scale is None:
        return None
    mode = KEY_SCALES.get(scale.pattern_type)
    if mode is None:
        return scale.tonic
    return f"{scale.tonic} {mode}"


def summarize(result, config: Optional[DetectionConfig] = None) -> TonalSummary:
    """
    Build a TonalSummary for a DetectionResult.

    Args:
        result: Any object with ``chord``, ``scale`` and ``pitch_classes``
        config: Certainty and fit bands (defaults to DetectionConfig())

    Returns:
        TonalSummary
    """
    cfg = config or DetectionConfig()
    chord, scale = result.chord, result.scale
    return TonalSummary(
        chord_certainty=certainty(chord.confidence, cfg) if chord is not None else None,
        scale_certainty=certainty(scale.confidence, cfg) if scale is not None else None,
        modality=modality(scale),
        chromaticism=chromaticism(result.pitch_classes),
        suggested_key=suggested_key(scale),
        fit=compatibility(chord, scale, cfg),
    )
