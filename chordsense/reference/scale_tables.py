"""Scale reference table.

Every scale type spelled from every tonic, ascending from the tonic.
Modes that share notes with a parent scale (Ionian/Major, Aeolian/Natural
Minor) are kept as separate entries; popularity decides between them.
"""

from typing import Dict, Tuple

from .types import ScaleType

SCALE_TABLE: Dict[str, Dict[ScaleType, Tuple[str, ...]]] = {
    "C": {
        ScaleType.MAJOR: ("C", "D", "E", "F", "G", "A", "B"),
        ScaleType.NATURAL_MINOR: ("C", "D", "Eb", "F", "G", "Ab", "Bb"),
        ScaleType.HARMONIC_MINOR: ("C", "D", "Eb", "F", "G", "Ab", "B"),
        ScaleType.MELODIC_MINOR_ASCENDING: ("C", "D", "Eb", "F", "G", "A", "B"),
        ScaleType.MELODIC_MINOR_DESCENDING: ("C", "D", "Eb", "F", "G", "Ab", "Bb"),
        ScaleType.MAJOR_PENTATONIC: ("C", "D", "E", "G", "A"),
        ScaleType.MINOR_PENTATONIC: ("C", "Eb", "F", "G", "Bb"),
        ScaleType.MAJOR_BLUES: ("C", "D", "Eb", "E", "G", "A"),
        ScaleType.MINOR_BLUES: ("C", "Eb", "F", "F#", "G", "Bb"),
        ScaleType.IONIAN: ("C", "D", "E", "F", "G", "A", "B"),
        ScaleType.DORIAN: ("C", "D", "Eb", "F", "G", "A", "Bb"),
        ScaleType.PHRYGIAN: ("C", "Db", "Eb", "F", "G", "Ab", "Bb"),
        ScaleType.LYDIAN: ("C", "D", "E", "F#", "G", "A", "B"),
        ScaleType.MIXOLYDIAN: ("C", "D", "E", "F", "G", "A", "Bb"),
        ScaleType.AEOLIAN: ("C", "D", "Eb", "F", "G", "Ab", "Bb"),
        ScaleType.LOCRIAN: ("C", "Db", "Eb", "F", "Gb", "Ab", "Bb"),
    },
    "C#": {
        ScaleType.MAJOR: ("C#", "D#", "E#", "F#", "G#", "A#", "B#"),
        ScaleType.NATURAL_MINOR: ("C#", "D#", "E", "F#", "G#", "A", "B"),
        ScaleType.HARMONIC_MINOR: ("C#", "D#", "E", "F#", "G#", "A", "B#"),
        ScaleType.MELODIC_MINOR_ASCENDING: ("C#", "D#", "E", "F#", "G#", "A#", "B#"),
        ScaleType.MELODIC_MINOR_DESCENDING: ("C#", "D#", "E", "F#", "G#", "A", "B"),
        ScaleType.MAJOR_PENTATONIC: ("C#", "D#", "E#", "G#", "A#"),
        ScaleType.MINOR_PENTATONIC: ("C#", "E", "F#", "G#", "B"),
        ScaleType.MAJOR_BLUES: ("C#", "D#", "E", "E#", "G#", "A#"),
        ScaleType.MINOR_BLUES: ("C#", "E", "F#", "F##", "G#", "B"),
        ScaleType.IONIAN: ("C#", "D#", "E#", "F#", "G#", "A#", "B#"),
        ScaleType.DORIAN: ("C#", "D#", "E", "F#", "G#", "A#", "B"),
        ScaleType.PHRYGIAN: ("C#", "D", "E", "F#", "G#", "A", "B"),
        ScaleType.LYDIAN: ("C#", "D#", "E#", "F##", "G#", "A#", "B#"),
        ScaleType.MIXOLYDIAN: ("C#", "D#", "E#", "F#", "G#", "A#", "B"),
        ScaleType.AEOLIAN: ("C#", "D#", "E", "F#", "G#", "A", "B"),
        ScaleType.LOCRIAN: ("C#", "D", "E", "F#", "G", "A", "B"),
    },
    "D": {
        ScaleType.MAJOR: ("D", "E", "F#", "G", "A", "B", "C#"),
        ScaleType.NATURAL_MINOR: ("D", "E", "F", "G", "A", "Bb", "C"),
        ScaleType.HARMONIC_MINOR: ("D", "E", "F", "G", "A", "Bb", "C#"),
        ScaleType.MELODIC_MINOR_ASCENDING: ("D", "E", "F", "G", "A", "B", "C#"),
        ScaleType.MELODIC_MINOR_DESCENDING: ("D", "E", "F", "G", "A", "Bb", "C"),
        ScaleType.MAJOR_PENTATONIC: ("D", "E", "F#", "A", "B"),
        ScaleType.MINOR_PENTATONIC: ("D", "F", "G", "A", "C"),
        ScaleType.MAJOR_BLUES: ("D", "E", "F", "F#", "A", "B"),
        ScaleType.MINOR_BLUES: ("D", "F", "G", "G#", "A", "C"),
        ScaleType.IONIAN: ("D", "E", "F#", "G", "A", "B", "C#"),
        ScaleType.DORIAN: ("D", "E", "F", "G", "A", "B", "C"),
        ScaleType.PHRYGIAN: ("D", "Eb", "F", "G", "A", "Bb", "C"),
        ScaleType.LYDIAN: ("D", "E", "F#", "G#", "A", "B", "C#"),
        ScaleType.MIXOLYDIAN: ("D", "E", "F#", "G", "A", "B", "C"),
        ScaleType.AEOLIAN: ("D", "E", "F", "G", "A", "Bb", "C"),
        ScaleType.LOCRIAN: ("D", "Eb", "F", "G", "Ab", "Bb", "C"),
    },
    "Eb": {
        ScaleType.MAJOR: ("Eb", "F", "G", "Ab", "Bb", "C", "D"),
        ScaleType.NATURAL_MINOR: ("Eb", "F", "Gb", "Ab", "Bb", "Cb", "Db"),
        ScaleType.HARMONIC_MINOR: ("Eb", "F", "Gb", "Ab", "Bb", "Cb", "D"),
        ScaleType.MELODIC_MINOR_ASCENDING: ("Eb", "F", "Gb", "Ab", "Bb", "C", "D"),
        ScaleType.MELODIC_MINOR_DESCENDING: ("Eb", "F", "Gb", "Ab", "Bb", "Cb", "Db"),
        ScaleType.MAJOR_PENTATONIC: ("Eb", "F", "G", "Bb", "C"),
        ScaleType.MINOR_PENTATONIC: ("Eb", "Gb", "Ab", "Bb", "Db"),
        ScaleType.MAJOR_BLUES: ("Eb", "F", "Gb", "G", "Bb", "C"),
        ScaleType.MINOR_BLUES: ("Eb", "Gb", "Ab", "A", "Bb", "Db"),
        ScaleType.IONIAN: ("Eb", "F", "G", "Ab", "Bb", "C", "D"),
        ScaleType.DORIAN: ("Eb", "F", "Gb", "Ab", "Bb", "C", "Db"),
        ScaleType.PHRYGIAN: ("Eb", "Fb", "Gb", "Ab", "Bb", "Cb", "Db"),
        ScaleType.LYDIAN: ("Eb", "F", "G", "A", "Bb", "C", "D"),
        ScaleType.MIXOLYDIAN: ("Eb", "F", "G", "Ab", "Bb", "C", "Db"),
        ScaleType.AEOLIAN: ("Eb", "F", "Gb", "Ab", "Bb", "Cb", "Db"),
        ScaleType.LOCRIAN: ("Eb", "Fb", "Gb", "Ab", "Bbb", "Cb", "Db"),
    },
    "E": {
        ScaleType.MAJOR: ("E", "F#", "G#", "A", "B", "C#", "D#"),
        ScaleType.NATURAL_MINOR: ("E", "F#", "G", "A", "B", "C", "D"),
        ScaleType.HARMONIC_MINOR: ("E", "F#", "G", "A", "B", "C", "D#"),
        ScaleType.MELODIC_MINOR_ASCENDING: ("E", "F#", "G", "A", "B", "C#", "D#"),
        ScaleType.MELODIC_MINOR_DESCENDING: ("E", "F#", "G", "A", "B", "C", "D"),
        ScaleType.MAJOR_PENTATONIC: ("E", "F#", "G#", "B", "C#"),
        ScaleType.MINOR_PENTATONIC: ("E", "G", "A", "B", "D"),
        ScaleType.MAJOR_BLUES: ("E", "F#", "G", "G#", "B", "C#"),
        ScaleType.MINOR_BLUES: ("E", "G", "A", "A#", "B", "D"),
        ScaleType.IONIAN: ("E", "F#", "G#", "A", "B", "C#", "D#"),
        ScaleType.DORIAN: ("E", "F#", "G", "A", "B", "C#", "D"),
        ScaleType.PHRYGIAN: ("E", "F", "G", "A", "B", "C", "D"),
        ScaleType.LYDIAN: ("E", "F#", "G#", "A#", "B", "C#", "D#"),
        ScaleType.MIXOLYDIAN: ("E", "F#", "G#", "A", "B", "C#", "D"),
        ScaleType.AEOLIAN: ("E", "F#", "G", "A", "B", "C", "D"),
        ScaleType.LOCRIAN: ("E", "F", "G", "A", "Bb", "C", "D"),
    },
    "F": {
        ScaleType.MAJOR: ("F", "G", "A", "Bb", "C", "D", "E"),
        ScaleType.NATURAL_MINOR: ("F", "G", "Ab", "Bb", "C", "Db", "Eb"),
        ScaleType.HARMONIC_MINOR: ("F", "G", "Ab", "Bb", "C", "Db", "E"),
        ScaleType.MELODIC_MINOR_ASCENDING: ("F", "G", "Ab", "Bb", "C", "D", "E"),
        ScaleType.MELODIC_MINOR_DESCENDING: ("F", "G", "Ab", "Bb", "C", "Db", "Eb"),
        ScaleType.MAJOR_PENTATONIC: ("F", "G", "A", "C", "D"),
        ScaleType.MINOR_PENTATONIC: ("F", "Ab", "Bb", "C", "Eb"),
        ScaleType.MAJOR_BLUES: ("F", "G", "Ab", "A", "C", "D"),
        ScaleType.MINOR_BLUES: ("F", "Ab", "Bb", "B", "C", "Eb"),
        ScaleType.IONIAN: ("F", "G", "A", "Bb", "C", "D", "E"),
        ScaleType.DORIAN: ("F", "G", "Ab", "Bb", "C", "D", "Eb"),
        ScaleType.PHRYGIAN: ("F", "Gb", "Ab", "Bb", "C", "Db", "Eb"),
        ScaleType.LYDIAN: ("F", "G", "A", "B", "C", "D", "E"),
        ScaleType.MIXOLYDIAN: ("F", "G", "A", "Bb", "C", "D", "Eb"),
        ScaleType.AEOLIAN: ("F", "G", "Ab", "Bb", "C", "Db", "Eb"),
        ScaleType.LOCRIAN: ("F", "Gb", "Ab", "Bb", "Cb", "Db", "Eb"),
    },
    "F#": {
        ScaleType.MAJOR: ("F#", "G#", "A#", "B", "C#", "D#", "E#"),
        ScaleType.NATURAL_MINOR: ("F#", "G#", "A", "B", "C#", "D", "E"),
        ScaleType.HARMONIC_MINOR: ("F#", "G#", "A", "B", "C#", "D", "E#"),
        ScaleType.MELODIC_MINOR_ASCENDING: ("F#", "G#", "A", "B", "C#", "D#", "E#"),
        ScaleType.MELODIC_MINOR_DESCENDING: ("F#", "G#", "A", "B", "C#", "D", "E"),
        ScaleType.MAJOR_PENTATONIC: ("F#", "G#", "A#", "C#", "D#"),
        ScaleType.MINOR_PENTATONIC: ("F#", "A", "B", "C#", "E"),
        ScaleType.MAJOR_BLUES: ("F#", "G#", "A", "A#", "C#", "D#"),
        ScaleType.MINOR_BLUES: ("F#", "A", "B", "B#", "C#", "E"),
        ScaleType.IONIAN: ("F#", "G#", "A#", "B", "C#", "D#", "E#"),
        ScaleType.DORIAN: ("F#", "G#", "A", "B", "C#", "D#", "E"),
        ScaleType.PHRYGIAN: ("F#", "G", "A", "B", "C#", "D", "E"),
        ScaleType.LYDIAN: ("F#", "G#", "A#", "B#", "C#", "D#", "E#"),
        ScaleType.MIXOLYDIAN: ("F#", "G#", "A#", "B", "C#", "D#", "E"),
        ScaleType.AEOLIAN: ("F#", "G#", "A", "B", "C#", "D", "E"),
        ScaleType.LOCRIAN: ("F#", "G", "A", "B", "C", "D", "E"),
    },
    "G": {
        ScaleType.MAJOR: ("G", "A", "B", "C", "D", "E", "F#"),
        ScaleType.NATURAL_MINOR: ("G", "A", "Bb", "C", "D", "Eb", "F"),
        ScaleType.HARMONIC_MINOR: ("G", "A", "Bb", "C", "D", "Eb", "F#"),
        ScaleType.MELODIC_MINOR_ASCENDING: ("G", "A", "Bb", "C", "D", "E", "F#"),
        ScaleType.MELODIC_MINOR_DESCENDING: ("G", "A", "Bb", "C", "D", "Eb", "F"),
        ScaleType.MAJOR_PENTATONIC: ("G", "A", "B", "D", "E"),
        ScaleType.MINOR_PENTATONIC: ("G", "Bb", "C", "D", "F"),
        ScaleType.MAJOR_BLUES: ("G", "A", "Bb", "B", "D", "E"),
        ScaleType.MINOR_BLUES: ("G", "Bb", "C", "C#", "D", "F"),
        ScaleType.IONIAN: ("G", "A", "B", "C", "D", "E", "F#"),
        ScaleType.DORIAN: ("G", "A", "Bb", "C", "D", "E", "F"),
        ScaleType.PHRYGIAN: ("G", "Ab", "Bb", "C", "D", "Eb", "F"),
        ScaleType.LYDIAN: ("G", "A", "B", "C#", "D", "E", "F#"),
        ScaleType.MIXOLYDIAN: ("G", "A", "B", "C", "D", "E", "F"),
        ScaleType.AEOLIAN: ("G", "A", "Bb", "C", "D", "Eb", "F"),
        ScaleType.LOCRIAN: ("G", "Ab", "Bb", "C", "Db", "Eb", "F"),
    },
    "G#": {
        ScaleType.MAJOR: ("G#", "A#", "B#", "C#", "D#", "E#", "F##"),
        ScaleType.NATURAL_MINOR: ("G#", "A#", "B", "C#", "D#", "E", "F#"),
        ScaleType.HARMONIC_MINOR: ("G#", "A#", "B", "C#", "D#", "E", "F##"),
        ScaleType.MELODIC_MINOR_ASCENDING: ("G#", "A#", "B", "C#", "D#", "E#", "F##"),
        ScaleType.MELODIC_MINOR_DESCENDING: ("G#", "A#", "B", "C#", "D#", "E", "F#"),
        ScaleType.MAJOR_PENTATONIC: ("G#", "A#", "B#", "D#", "E#"),
        ScaleType.MINOR_PENTATONIC: ("G#", "B", "C#", "D#", "F#"),
        ScaleType.MAJOR_BLUES: ("G#", "A#", "B", "B#", "D#", "E#"),
        ScaleType.MINOR_BLUES: ("G#", "B", "C#", "C##", "D#", "F#"),
        ScaleType.IONIAN: ("G#", "A#", "B#", "C#", "D#", "E#", "F##"),
        ScaleType.DORIAN: ("G#", "A#", "B", "C#", "D#", "E#", "F#"),
        ScaleType.PHRYGIAN: ("G#", "A", "B", "C#", "D#", "E", "F#"),
        ScaleType.LYDIAN: ("G#", "A#", "B#", "C##", "D#", "E#", "F##"),
        ScaleType.MIXOLYDIAN: ("G#", "A#", "B#", "C#", "D#", "E#", "F#"),
        ScaleType.AEOLIAN: ("G#", "A#", "B", "C#", "D#", "E", "F#"),
        ScaleType.LOCRIAN: ("G#", "A", "B", "C#", "D", "E", "F#"),
    },
    "A": {
        ScaleType.MAJOR: ("A", "B", "C#", "D", "E", "F#", "G#"),
        ScaleType.NATURAL_MINOR: ("A", "B", "C", "D", "E", "F", "G"),
        ScaleType.HARMONIC_MINOR: ("A", "B", "C", "D", "E", "F", "G#"),
        ScaleType.MELODIC_MINOR_ASCENDING: ("A", "B", "C", "D", "E", "F#", "G#"),
        ScaleType.MELODIC_MINOR_DESCENDING: ("A", "B", "C", "D", "E", "F", "G"),
        ScaleType.MAJOR_PENTATONIC: ("A", "B", "C#", "E", "F#"),
        ScaleType.MINOR_PENTATONIC: ("A", "C", "D", "E", "G"),
        ScaleType.MAJOR_BLUES: ("A", "B", "C", "C#", "E", "F#"),
        ScaleType.MINOR_BLUES: ("A", "C", "D", "D#", "E", "G"),
        ScaleType.IONIAN: ("A", "B", "C#", "D", "E", "F#", "G#"),
        ScaleType.DORIAN: ("A", "B", "C", "D", "E", "F#", "G"),
        ScaleType.PHRYGIAN: ("A", "Bb", "C", "D", "E", "F", "G"),
        ScaleType.LYDIAN: ("A", "B", "C#", "D#", "E", "F#", "G#"),
        ScaleType.MIXOLYDIAN: ("A", "B", "C#", "D", "E", "F#", "G"),
        ScaleType.AEOLIAN: ("A", "B", "C", "D", "E", "F", "G"),
        ScaleType.LOCRIAN: ("A", "Bb", "C", "D", "Eb", "F", "G"),
    },
    "Bb": {
        ScaleType.MAJOR: ("Bb", "C", "D", "Eb", "F", "G", "A"),
        ScaleType.NATURAL_MINOR: ("Bb", "C", "Db", "Eb", "F", "Gb", "Ab"),
        ScaleType.HARMONIC_MINOR: ("Bb", "C", "Db", "Eb", "F", "Gb", "A"),
        ScaleType.MELODIC_MINOR_ASCENDING: ("Bb", "C", "Db", "Eb", "F", "G", "A"),
        ScaleType.MELODIC_MINOR_DESCENDING: ("Bb", "C", "Db", "Eb", "F", "Gb", "Ab"),
        ScaleType.MAJOR_PENTATONIC: ("Bb", "C", "D", "F", "G"),
        ScaleType.MINOR_PENTATONIC: ("Bb", "Db", "Eb", "F", "Ab"),
        ScaleType.MAJOR_BLUES: ("Bb", "C", "Db", "D", "F", "G"),
        ScaleType.MINOR_BLUES: ("Bb", "Db", "Eb", "E", "F", "Ab"),
        ScaleType.IONIAN: ("Bb", "C", "D", "Eb", "F", "G", "A"),
        ScaleType.DORIAN: ("Bb", "C", "Db", "Eb", "F", "G", "Ab"),
        ScaleType.PHRYGIAN: ("Bb", "Cb", "Db", "Eb", "F", "Gb", "Ab"),
        ScaleType.LYDIAN: ("Bb", "C", "D", "E", "F", "G", "A"),
        ScaleType.MIXOLYDIAN: ("Bb", "C", "D", "Eb", "F", "G", "Ab"),
        ScaleType.AEOLIAN: ("Bb", "C", "Db", "Eb", "F", "Gb", "Ab"),
        ScaleType.LOCRIAN: ("Bb", "Cb", "Db", "Eb", "Fb", "Gb", "Ab"),
    },
    "B": {
        ScaleType.MAJOR: ("B", "C#", "D#", "E", "F#", "G#", "A#"),
        ScaleType.NATURAL_MINOR: ("B", "C#", "D", "E", "F#", "G", "A"),
        ScaleType.HARMONIC_MINOR: ("B", "C#", "D", "E", "F#", "G", "A#"),
        ScaleType.MELODIC_MINOR_ASCENDING: ("B", "C#", "D", "E", "F#", "G#", "A#"),
        ScaleType.MELODIC_MINOR_DESCENDING: ("B", "C#", "D", "E", "F#", "G", "A"),
        ScaleType.MAJOR_PENTATONIC: ("B", "C#", "D#", "F#", "G#"),
        ScaleType.MINOR_PENTATONIC: ("B", "D", "E", "F#", "A"),
        ScaleType.MAJOR_BLUES: ("B", "C#", "D", "D#", "F#", "G#"),
        ScaleType.MINOR_BLUES: ("B", "D", "E", "E#", "F#", "A"),
        ScaleType.IONIAN: ("B", "C#", "D#", "E", "F#", "G#", "A#"),
        ScaleType.DORIAN: ("B", "C#", "D", "E", "F#", "G#", "A"),
        ScaleType.PHRYGIAN: ("B", "C", "D", "E", "F#", "G", "A"),
        ScaleType.LYDIAN: ("B", "C#", "D#", "E#", "F#", "G#", "A#"),
        ScaleType.MIXOLYDIAN: ("B", "C#", "D#", "E", "F#", "G#", "A"),
        ScaleType.AEOLIAN: ("B", "C#", "D", "E", "F#", "G", "A"),
        ScaleType.LOCRIAN: ("B", "C", "D", "E", "F", "G", "A"),
    },
}
