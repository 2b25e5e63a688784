"""Note data class - a single pressed key as seen at the input boundary."""

import re
from dataclasses import dataclass
from typing import Optional

from .constants import LETTER_VALUES, PITCH_NAMES
from .errors import InvalidNoteIdentifier

_NOTE_RE = re.compile(r"^([A-Ga-g])(##|#|bb|b)?(-?\d+)?$")


def spelling_to_pitch_class(spelling: str) -> str:
    """
    Reduce a letter spelling (e.g. "Eb", "F##", "Cb") to its canonical pitch class.

    Raises:
        InvalidNoteIdentifier: If the spelling is not a letter plus accidentals
    """
    if not spelling or spelling[0].upper() not in LETTER_VALUES:
        raise InvalidNoteIdentifier(spelling, "unknown letter")
    accidentals = spelling[1:]
    if accidentals.strip("#") and accidentals.strip("b"):
        raise InvalidNoteIdentifier(spelling, "malformed accidentals")
    offset = accidentals.count("#") - accidentals.count("b")
    return PITCH_NAMES[(LETTER_VALUES[spelling[0].upper()] + offset) % 12]


@dataclass(frozen=True)
class Note:
    """Represents a pressed note."""

    pitch_class: str  # Canonical sharp name (e.g. "D#")
    spelling: str  # As written at the boundary (e.g. "Eb")
    octave: Optional[int] = None

    @classmethod
    def parse(cls, identifier: str) -> "Note":
        """
        Parse a note identifier such as "C4", "F#5", "Bb3" or "Eb".

        Raises:
            InvalidNoteIdentifier: If the identifier is not a valid note
        """
        if not isinstance(identifier, str):
            raise InvalidNoteIdentifier(identifier, "not a string")
        match = _NOTE_RE.match(identifier.strip())
        if match is None:
            raise InvalidNoteIdentifier(identifier)
        letter, accidental, octave = match.groups()
        spelling = letter.upper() + (accidental or "")
        return cls(
            pitch_class=spelling_to_pitch_class(spelling),
            spelling=spelling,
            octave=int(octave) if octave is not None else None,
        )

    @property
    def pitch_name(self) -> str:
        """Get canonical note name with octave (e.g., 'C4', 'A#3')."""
        if self.octave is None:
            return self.pitch_class
        return f"{self.pitch_class}{self.octave}"

    @property
    def pitch_class_index(self) -> int:
        """Get pitch class (0-11, where 0=C)."""
        return PITCH_NAMES.index(self.pitch_class)

    @property
    def midi(self) -> Optional[int]:
        """MIDI pitch, or None when no octave was given."""
        if self.octave is None:
            return None
        return (self.octave + 1) * 12 + self.pitch_class_index


def parse_note(identifier: str) -> Note:
    """Parse a note identifier; see :meth:`Note.parse`."""
    return Note.parse(identifier)
