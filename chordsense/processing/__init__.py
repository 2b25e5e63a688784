"""Processing layer - Input preparation and result reuse.

This layer sits between raw key presses and inference:
- Note parsing and pitch-class normalization
- Bass (lowest sounding note) extraction
- Bounded result cache
"""

from .normalize import normalize, parse_notes, pitch_classes_of, lowest_note, cache_key
from .cache import ResultCache, CacheInfo

__all__ = [
    "normalize",
    "parse_notes",
    "pitch_classes_of",
    "lowest_note",
    "cache_key",
    "ResultCache",
    "CacheInfo",
]
