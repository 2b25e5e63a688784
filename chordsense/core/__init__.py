"""Core types and constants for chordsense."""

from .note import Note, parse_note, spelling_to_pitch_class
from .config import DetectionConfig
from .errors import ChordsenseError, InvalidNoteIdentifier, RegistryError
from .constants import (
    PITCH_NAMES,
    DEFAULT_CACHE_SIZE,
    DEFAULT_TONIC,
)

__all__ = [
    "Note",
    "parse_note",
    "spelling_to_pitch_class",
    "DetectionConfig",
    "ChordsenseError",
    "InvalidNoteIdentifier",
    "RegistryError",
    "PITCH_NAMES",
    "DEFAULT_CACHE_SIZE",
    "DEFAULT_TONIC",
]
