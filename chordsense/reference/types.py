"""Closed enumerations of pattern types and the PatternDefinition value object."""

from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, Tuple, Union


class Category(Enum):
    """Kind of musical structure a pattern describes."""
    CHORD = "chord"
    SCALE = "scale"


class _PatternType(Enum):
    """Enum member carrying a display name and a semitone formula."""

    def __init__(self, display_name: str, intervals: Tuple[int, ...]):
        self.display_name = display_name
        self.intervals = intervals

    @property
    def size(self) -> int:
        return len(self.intervals)

    @classmethod
    def from_display_name(cls, name: str):
        for member in cls:
            if member.display_name == name:
                return member
        raise ValueError(f"Unknown {cls.__name__} display name {name!r}")


class ChordType(_PatternType):
    """Chord qualities, ordered as they appear in the reference tables."""
    MAJOR = ("Major", (0, 4, 7))
    MINOR = ("Minor", (0, 3, 7))
    POWER = ("5", (0, 7))
    DOMINANT_7 = ("Dominant 7th", (0, 4, 7, 10))
    MAJOR_7 = ("Major 7th", (0, 4, 7, 11))
    MINOR_7 = ("Minor 7th", (0, 3, 7, 10))
    MINOR_MAJOR_7 = ("Minor Major 7th", (0, 3, 7, 11))
    SUS_4 = ("Sus 4", (0, 5, 7))
    SUS_2 = ("Sus 2", (0, 2, 7))
    SIXTH = ("6", (0, 4, 7, 9))
    MINOR_SIXTH = ("Minor 6", (0, 3, 7, 9))
    NINTH = ("9", (0, 4, 7, 10, 2))
    MINOR_NINTH = ("Minor 9", (0, 3, 7, 10, 2))
    MAJOR_NINTH = ("Major 9", (0, 4, 7, 11, 2))
    ADD_9 = ("add 9", (0, 4, 7, 2))
    DIMINISHED = ("Diminished", (0, 3, 6))
    AUGMENTED = ("Augmented", (0, 4, 8))

    @property
    def category(self) -> Category:
        return Category.CHORD


class ScaleType(_PatternType):
    """Scale types, ordered as they appear in the reference tables."""
    MAJOR = ("Major", (0, 2, 4, 5, 7, 9, 11))
    NATURAL_MINOR = ("Natural Minor", (0, 2, 3, 5, 7, 8, 10))
    HARMONIC_MINOR = ("Harmonic Minor", (0, 2, 3, 5, 7, 8, 11))
    MELODIC_MINOR_ASCENDING = ("Melodic Minor Ascending", (0, 2, 3, 5, 7, 9, 11))
    MELODIC_MINOR_DESCENDING = ("Melodic Minor Descending", (0, 2, 3, 5, 7, 8, 10))
    MAJOR_PENTATONIC = ("Major Pentatonic", (0, 2, 4, 7, 9))
    MINOR_PENTATONIC = ("Minor Pentatonic", (0, 3, 5, 7, 10))
    MAJOR_BLUES = ("Major Blues", (0, 2, 3, 4, 7, 9))
    MINOR_BLUES = ("Minor Blues", (0, 3, 5, 6, 7, 10))
    IONIAN = ("Ionian", (0, 2, 4, 5, 7, 9, 11))
    DORIAN = ("Dorian", (0, 2, 3, 5, 7, 9, 10))
    PHRYGIAN = ("Phrygian", (0, 1, 3, 5, 7, 8, 10))
    LYDIAN = ("Lydian", (0, 2, 4, 6, 7, 9, 11))
    MIXOLYDIAN = ("Mixolydian", (0, 2, 4, 5, 7, 9, 10))
    AEOLIAN = ("Aeolian", (0, 2, 3, 5, 7, 8, 10))
    LOCRIAN = ("Locrian", (0, 1, 3, 5, 6, 8, 10))

    @property
    def category(self) -> Category:
        return Category.SCALE


PatternType = Union[ChordType, ScaleType]


@dataclass(frozen=True)
class PatternDefinition:
    """A pattern type rooted at a specific tonic, spelled as used in that key.

    Attributes:
        tonic:          Display spelling of the tonic, e.g. "Eb"
        tonic_pc:       Canonical pitch class of the tonic, e.g. "D#"
        pattern_type:   ChordType or ScaleType member
        notes:          Ordered spelled notes, e.g. ("Eb", "G", "Bb")
        pitch_classes:  Canonical pitch classes of ``notes``
    """

    tonic: str
    tonic_pc: str
    pattern_type: PatternType
    notes: Tuple[str, ...]
    pitch_classes: FrozenSet[str]

    @property
    def category(self) -> Category:
        return self.pattern_type.category

    @property
    def name(self) -> str:
        """Human-readable label, e.g. 'Eb Major 7th'."""
        return f"{self.tonic} {self.pattern_type.display_name}"

    @property
    def specificity(self) -> int:
        """Number of distinct pitch classes the pattern requires."""
        return len(self.pitch_classes)
