"""Context ranking - bias candidates toward common, contextually likely readings.

Ambiguous inputs (C-E-G-A is both C6 and Am7) are resolved by which tonic
the performer most likely means and how common each tonic and pattern type
is, rather than by alphabetical accident.
"""

from typing import Optional, Sequence

from ..core import DEFAULT_TONIC, InvalidNoteIdentifier, Note
from ..reference import ChordType, PatternType, ScaleType

# Most common tonics first (canonical spelling; A# = Bb, D# = Eb, G# = Ab)
TONIC_POPULARITY = ["C", "G", "D", "A", "F", "E", "B", "A#", "D#", "G#", "F#", "C#"]

CHORD_TYPE_POPULARITY = [
    ChordType.MAJOR,
    ChordType.MINOR,
    ChordType.DOMINANT_7,
    ChordType.MINOR_7,
    ChordType.MAJOR_7,
    ChordType.SUS_4,
    ChordType.SUS_2,
    ChordType.SIXTH,
    ChordType.MINOR_SIXTH,
    ChordType.DIMINISHED,
    ChordType.AUGMENTED,
    ChordType.NINTH,
    ChordType.MINOR_NINTH,
    ChordType.MAJOR_NINTH,
    ChordType.ADD_9,
    ChordType.MINOR_MAJOR_7,
]

SCALE_TYPE_POPULARITY = [
    ScaleType.MAJOR,
    ScaleType.NATURAL_MINOR,
    ScaleType.MAJOR_PENTATONIC,
    ScaleType.MINOR_PENTATONIC,
    ScaleType.DORIAN,
    ScaleType.MIXOLYDIAN,
    ScaleType.HARMONIC_MINOR,
    ScaleType.MELODIC_MINOR_ASCENDING,
    ScaleType.MINOR_BLUES,
    ScaleType.MAJOR_BLUES,
    ScaleType.IONIAN,
    ScaleType.AEOLIAN,
    ScaleType.PHRYGIAN,
    ScaleType.LYDIAN,
    ScaleType.LOCRIAN,
]


def rank_score(item, preference: Sequence) -> float:
    """(len - index) / len; items absent from the list score as one past the end."""
    size = len(preference)
    if size == 0:
        return 0.0
    index = preference.index(item) if item in preference else size
    return (size - index) / size


class ContextRanker:
    """Popularity and tonic heuristics used to break ties between candidates."""

    def __init__(
        self,
        tonic_popularity: Optional[Sequence[str]] = None,
        chord_popularity: Optional[Sequence[ChordType]] = None,
        scale_popularity: Optional[Sequence[ScaleType]] = None,
        default_tonic: str = DEFAULT_TONIC,
    ):
        """
        Initialize ContextRanker.

        Args:
            tonic_popularity: Canonical pitch classes, most common first
            chord_popularity: Chord types, most common first
            scale_popularity: Scale types, most common first
            default_tonic: Tonic assumed when nothing else is known
        """
        self.tonic_popularity = list(tonic_popularity if tonic_popularity is not None else TONIC_POPULARITY)
        self.chord_popularity = list(chord_popularity if chord_popularity is not None else CHORD_TYPE_POPULARITY)
        self.scale_popularity = list(scale_popularity if scale_popularity is not None else SCALE_TYPE_POPULARITY)
        self.default_tonic = default_tonic

    def popularity_score(self, tonic: str, pattern_type: PatternType) -> float:
        """
        Popularity of a (tonic, type) pair in [0, 1].

        Args:
            tonic: Canonical tonic pitch class
            pattern_type: ChordType or ScaleType; selects the type list

        Returns:
            Mean of the tonic score and the type score
        """
        if isinstance(pattern_type, ChordType):
            type_list = self.chord_popularity
        else:
            type_list = self.scale_popularity
        tonic_pop = rank_score(tonic, self.tonic_popularity)
        type_pop = rank_score(pattern_type, type_list)
        return (tonic_pop + type_pop) / 2

    def probable_tonic(
        self,
        input_pitch_classes: Sequence[str],
        first_note: Optional[str] = None,
    ) -> str:
        """
        Guess the tonic the performer has in mind.

        Preference order: the first note pressed (when still sounding), the
        most popular tonic among the input, the first input note, then the
        default tonic.

        Args:
            input_pitch_classes: Normalized input pitch classes
            first_note: Identifier of the first key pressed, if known

        Returns:
            Canonical pitch class
        """
        if first_note:
            try:
                first_pc = Note.parse(first_note).pitch_class
            except InvalidNoteIdentifier:
                first_pc = None
            if first_pc in input_pitch_classes:
                return first_pc

        known = [pc for pc in input_pitch_classes if pc in self.tonic_popularity]
        if known:
            return min(known, key=self.tonic_popularity.index)

        if input_pitch_classes:
            return input_pitch_classes[0]
        return self.default_tonic
