"""Pitch-class normalization - reduce pressed notes to a canonical set.

Octaves are stripped, enharmonic spellings collapse to the sharp name and
repeated pitch classes are merged. Malformed identifiers are skipped with a
warning so one garbled key press does not abort detection of the rest.
The lowest sounding note is kept apart as the bass.
"""

import logging
from typing import Iterable, List, Optional

from ..core import InvalidNoteIdentifier, Note

logger = logging.getLogger(__name__)


def parse_notes(notes: Iterable[str]) -> List[Note]:
    """Parse identifiers, skipping (and logging) the invalid ones."""
    parsed = []
    for identifier in notes:
        try:
            parsed.append(Note.parse(identifier))
        except InvalidNoteIdentifier as e:
            logger.warning("Skipping note: %s", e)
    return parsed


def normalize(notes: Iterable[str]) -> List[str]:
    """
    Normalize note identifiers to a sorted list of unique pitch classes.

    Args:
        notes: Identifiers such as ["E4", "C3", "G4", "C5", "Eb2"]

    Returns:
        Lexicographically sorted canonical pitch classes, e.g. ["C", "D#", "E", "G"]
    """
    return pitch_classes_of(parse_notes(notes))


def pitch_classes_of(parsed: Iterable[Note]) -> List[str]:
    """Sorted unique pitch classes of already-parsed notes."""
    return sorted({note.pitch_class for note in parsed})


def lowest_note(parsed: Iterable[Note]) -> Optional[Note]:
    """
    The sounding bass: lowest note by MIDI pitch.

    Notes without an octave carry no register and are ignored; returns None
    when none of the notes has one.
    """
    pitched = [note for note in parsed if note.midi is not None]
    if not pitched:
        return None
    return min(pitched, key=lambda note: note.midi)


def cache_key(pitch_classes: Iterable[str]) -> str:
    """Canonical cache key: sorted, comma-joined pitch classes."""
    return ",".join(sorted(pitch_classes))
