"""Reference layer - static chord and scale tables for all 12 tonics."""

from .types import Category, ChordType, ScaleType, PatternType, PatternDefinition
from .registry import PatternRegistry, default_registry, TONIC_SPELLINGS
from .chord_tables import CHORD_TABLE
from .scale_tables import SCALE_TABLE

__all__ = [
    "Category",
    "ChordType",
    "ScaleType",
    "PatternType",
    "PatternDefinition",
    "PatternRegistry",
    "default_registry",
    "TONIC_SPELLINGS",
    "CHORD_TABLE",
    "SCALE_TABLE",
]
