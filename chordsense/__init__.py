"""chordsense - Chord and Scale Recognition for Pressed Notes.

Architecture Layers:
    1. core/       - Note parsing, constants, configuration, errors
    2. reference/  - Chord and scale tables for all 12 tonics (validated registry)
    3. processing/ - Pitch-class normalization and result caching
    4. inference/  - Scoring, context ranking, noise filtering, detection
    5. output/     - UI labels and JSON-ready dicts
"""

__version__ = "0.1.0"

# Core types
from .core import Note, parse_note, DetectionConfig, InvalidNoteIdentifier, RegistryError

# Reference layer
from .reference import Category, ChordType, ScaleType, PatternDefinition, PatternRegistry

# Processing layer
from .processing import normalize, ResultCache

# Inference layer
from .inference import (
    PatternDetector,
    DetectionResult,
    CandidateMatch,
    NoiseFilter,
    TopCandidateFilter,
    FilterKind,
    summarize,
    compatibility,
)

# Output layer
from .output import format_chord_display, format_scale_display, result_to_dict

__all__ = [
    # Core
    "Note",
    "parse_note",
    "DetectionConfig",
    "InvalidNoteIdentifier",
    "RegistryError",
    # Reference
    "Category",
    "ChordType",
    "ScaleType",
    "PatternDefinition",
    "PatternRegistry",
    # Processing
    "normalize",
    "ResultCache",
    # Inference
    "PatternDetector",
    "DetectionResult",
    "CandidateMatch",
    "NoiseFilter",
    "TopCandidateFilter",
    "FilterKind",
    "summarize",
    "compatibility",
    # Output
    "format_chord_display",
    "format_scale_display",
    "result_to_dict",
]
