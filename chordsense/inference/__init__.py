"""Inference layer - Musical pattern recognition.

This layer turns a normalized pitch-class set into musical labels:
- Candidate scoring (fuzzy set matching)
- Context ranking (probable tonic, popularity)
- Candidate generation for chords and scales
- Noise filtering (at most one result per category)
- Supplementary tonal summary and chord-scale fit

Pipeline: Pitch classes → [Chords, Scales] → Noise filter → DetectionResult
"""

from .scoring import score, score_pattern, MatchBreakdown
from .context import ContextRanker, TONIC_POPULARITY, CHORD_TYPE_POPULARITY, SCALE_TYPE_POPULARITY
from .candidates import CandidateGenerator, CandidateMatch
from .noise import NoiseFilter, TopCandidateFilter, FilterKind, FilterOutcome
from .detector import PatternDetector, DetectionResult
from .analysis import (
    TonalSummary,
    ChordScaleFit,
    certainty,
    compatibility,
    modality,
    chroma_vector,
    chromaticism,
    suggested_key,
    summarize,
)

__all__ = [
    # Scoring
    "score",
    "score_pattern",
    "MatchBreakdown",
    # Context
    "ContextRanker",
    "TONIC_POPULARITY",
    "CHORD_TYPE_POPULARITY",
    "SCALE_TYPE_POPULARITY",
    # Candidates
    "CandidateGenerator",
    "CandidateMatch",
    # Filtering
    "NoiseFilter",
    "TopCandidateFilter",
    "FilterKind",
    "FilterOutcome",
    # Detection
    "PatternDetector",
    "DetectionResult",
    # Analysis
    "TonalSummary",
    "ChordScaleFit",
    "certainty",
    "compatibility",
    "modality",
    "chroma_vector",
    "chromaticism",
    "suggested_key",
    "summarize",
]
