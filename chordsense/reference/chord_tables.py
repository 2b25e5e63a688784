"""Chord reference table.

Every chord type spelled from every tonic, using the spelling a musician
would write in that key (F# major is F#-A#-C#, never F#-Bb-C#). The C#, F#
and G# rows use plain letters instead of E#, B# and double sharps
(C# major is C#-F-G#). Note order is root, third, fifth, then extensions.
"""

from typing import Dict, Tuple

from .types import ChordType

CHORD_TABLE: Dict[str, Dict[ChordType, Tuple[str, ...]]] = {
    "C": {
        ChordType.MAJOR: ("C", "E", "G"),
        ChordType.MINOR: ("C", "Eb", "G"),
        ChordType.POWER: ("C", "G"),
        ChordType.DOMINANT_7: ("C", "E", "G", "Bb"),
        ChordType.MAJOR_7: ("C", "E", "G", "B"),
        ChordType.MINOR_7: ("C", "Eb", "G", "Bb"),
        ChordType.MINOR_MAJOR_7: ("C", "Eb", "G", "B"),
        ChordType.SUS_4: ("C", "F", "G"),
        ChordType.SUS_2: ("C", "D", "G"),
        ChordType.SIXTH: ("C", "E", "G", "A"),
        ChordType.MINOR_SIXTH: ("C", "Eb", "G", "A"),
        ChordType.NINTH: ("C", "E", "G", "Bb", "D"),
        ChordType.MINOR_NINTH: ("C", "Eb", "G", "Bb", "D"),
        ChordType.MAJOR_NINTH: ("C", "E", "G", "B", "D"),
        ChordType.ADD_9: ("C", "E", "G", "D"),
        ChordType.DIMINISHED: ("C", "Eb", "Gb"),
        ChordType.AUGMENTED: ("C", "E", "G#"),
    },
    "C#": {
        ChordType.MAJOR: ("C#", "F", "G#"),
        ChordType.MINOR: ("C#", "E", "G#"),
        ChordType.POWER: ("C#", "G#"),
        ChordType.DOMINANT_7: ("C#", "F", "G#", "B"),
        ChordType.MAJOR_7: ("C#", "F", "G#", "C"),
        ChordType.MINOR_7: ("C#", "E", "G#", "B"),
        ChordType.MINOR_MAJOR_7: ("C#", "E", "G#", "C"),
        ChordType.SUS_4: ("C#", "F#", "G#"),
        ChordType.SUS_2: ("C#", "D#", "G#"),
        ChordType.SIXTH: ("C#", "F", "G#", "A#"),
        ChordType.MINOR_SIXTH: ("C#", "E", "G#", "A#"),
        ChordType.NINTH: ("C#", "F", "G#", "B", "D#"),
        ChordType.MINOR_NINTH: ("C#", "E", "G#", "B", "D#"),
        ChordType.MAJOR_NINTH: ("C#", "F", "G#", "C", "D#"),
        ChordType.ADD_9: ("C#", "F", "G#", "D#"),
        ChordType.DIMINISHED: ("C#", "E", "G"),
        ChordType.AUGMENTED: ("C#", "F", "A"),
    },
    "D": {
        ChordType.MAJOR: ("D", "F#", "A"),
        ChordType.MINOR: ("D", "F", "A"),
        ChordType.POWER: ("D", "A"),
        ChordType.DOMINANT_7: ("D", "F#", "A", "C"),
        ChordType.MAJOR_7: ("D", "F#", "A", "C#"),
        ChordType.MINOR_7: ("D", "F", "A", "C"),
        ChordType.MINOR_MAJOR_7: ("D", "F", "A", "C#"),
        ChordType.SUS_4: ("D", "G", "A"),
        ChordType.SUS_2: ("D", "E", "A"),
        ChordType.SIXTH: ("D", "F#", "A", "B"),
        ChordType.MINOR_SIXTH: ("D", "F", "A", "B"),
        ChordType.NINTH: ("D", "F#", "A", "C", "E"),
        ChordType.MINOR_NINTH: ("D", "F", "A", "C", "E"),
        ChordType.MAJOR_NINTH: ("D", "F#", "A", "C#", "E"),
        ChordType.ADD_9: ("D", "F#", "A", "E"),
        ChordType.DIMINISHED: ("D", "F", "Ab"),
        ChordType.AUGMENTED: ("D", "F#", "A#"),
    },
    "Eb": {
        ChordType.MAJOR: ("Eb", "G", "Bb"),
        ChordType.MINOR: ("Eb", "Gb", "Bb"),
        ChordType.POWER: ("Eb", "Bb"),
        ChordType.DOMINANT_7: ("Eb", "G", "Bb", "Db"),
        ChordType.MAJOR_7: ("Eb", "G", "Bb", "D"),
        ChordType.MINOR_7: ("Eb", "Gb", "Bb", "Db"),
        ChordType.MINOR_MAJOR_7: ("Eb", "Gb", "Bb", "D"),
        ChordType.SUS_4: ("Eb", "Ab", "Bb"),
        ChordType.SUS_2: ("Eb", "F", "Bb"),
        ChordType.SIXTH: ("Eb", "G", "Bb", "C"),
        ChordType.MINOR_SIXTH: ("Eb", "Gb", "Bb", "C"),
        ChordType.NINTH: ("Eb", "G", "Bb", "Db", "F"),
        ChordType.MINOR_NINTH: ("Eb", "Gb", "Bb", "Db", "F"),
        ChordType.MAJOR_NINTH: ("Eb", "G", "Bb", "D", "F"),
        ChordType.ADD_9: ("Eb", "G", "Bb", "F"),
        ChordType.DIMINISHED: ("Eb", "Gb", "Bbb"),
        ChordType.AUGMENTED: ("Eb", "G", "B"),
    },
    "E": {
        ChordType.MAJOR: ("E", "G#", "B"),
        ChordType.MINOR: ("E", "G", "B"),
        ChordType.POWER: ("E", "B"),
        ChordType.DOMINANT_7: ("E", "G#", "B", "D"),
        ChordType.MAJOR_7: ("E", "G#", "B", "D#"),
        ChordType.MINOR_7: ("E", "G", "B", "D"),
        ChordType.MINOR_MAJOR_7: ("E", "G", "B", "D#"),
        ChordType.SUS_4: ("E", "A", "B"),
        ChordType.SUS_2: ("E", "F#", "B"),
        ChordType.SIXTH: ("E", "G#", "B", "C#"),
        ChordType.MINOR_SIXTH: ("E", "G", "B", "C#"),
        ChordType.NINTH: ("E", "G#", "B", "D", "F#"),
        ChordType.MINOR_NINTH: ("E", "G", "B", "D", "F#"),
        ChordType.MAJOR_NINTH: ("E", "G#", "B", "D#", "F#"),
        ChordType.ADD_9: ("E", "G#", "B", "F#"),
        ChordType.DIMINISHED: ("E", "G", "Bb"),
        ChordType.AUGMENTED: ("E", "G#", "B#"),
    },
    "F": {
        ChordType.MAJOR: ("F", "A", "C"),
        ChordType.MINOR: ("F", "Ab", "C"),
        ChordType.POWER: ("F", "C"),
        ChordType.DOMINANT_7: ("F", "A", "C", "Eb"),
        ChordType.MAJOR_7: ("F", "A", "C", "E"),
        ChordType.MINOR_7: ("F", "Ab", "C", "Eb"),
        ChordType.MINOR_MAJOR_7: ("F", "Ab", "C", "E"),
        ChordType.SUS_4: ("F", "Bb", "C"),
        ChordType.SUS_2: ("F", "G", "C"),
        ChordType.SIXTH: ("F", "A", "C", "D"),
        ChordType.MINOR_SIXTH: ("F", "Ab", "C", "D"),
        ChordType.NINTH: ("F", "A", "C", "Eb", "G"),
        ChordType.MINOR_NINTH: ("F", "Ab", "C", "Eb", "G"),
        ChordType.MAJOR_NINTH: ("F", "A", "C", "E", "G"),
        ChordType.ADD_9: ("F", "A", "C", "G"),
        ChordType.DIMINISHED: ("F", "Ab", "Cb"),
        ChordType.AUGMENTED: ("F", "A", "C#"),
    },
    "F#": {
        ChordType.MAJOR: ("F#", "A#", "C#"),
        ChordType.MINOR: ("F#", "A", "C#"),
        ChordType.POWER: ("F#", "C#"),
        ChordType.DOMINANT_7: ("F#", "A#", "C#", "E"),
        ChordType.MAJOR_7: ("F#", "A#", "C#", "F"),
        ChordType.MINOR_7: ("F#", "A", "C#", "E"),
        ChordType.MINOR_MAJOR_7: ("F#", "A", "C#", "F"),
        ChordType.SUS_4: ("F#", "B", "C#"),
        ChordType.SUS_2: ("F#", "G#", "C#"),
        ChordType.SIXTH: ("F#", "A#", "C#", "D#"),
        ChordType.MINOR_SIXTH: ("F#", "A", "C#", "D#"),
        ChordType.NINTH: ("F#", "A#", "C#", "E", "G#"),
        ChordType.MINOR_NINTH: ("F#", "A", "C#", "E", "G#"),
        ChordType.MAJOR_NINTH: ("F#", "A#", "C#", "F", "G#"),
        ChordType.ADD_9: ("F#", "A#", "C#", "G#"),
        ChordType.DIMINISHED: ("F#", "A", "C"),
        ChordType.AUGMENTED: ("F#", "A#", "D"),
    },
    "G": {
        ChordType.MAJOR: ("G", "B", "D"),
        ChordType.MINOR: ("G", "Bb", "D"),
        ChordType.POWER: ("G", "D"),
        ChordType.DOMINANT_7: ("G", "B", "D", "F"),
        ChordType.MAJOR_7: ("G", "B", "D", "F#"),
        ChordType.MINOR_7: ("G", "Bb", "D", "F"),
        ChordType.MINOR_MAJOR_7: ("G", "Bb", "D", "F#"),
        ChordType.SUS_4: ("G", "C", "D"),
        ChordType.SUS_2: ("G", "A", "D"),
        ChordType.SIXTH: ("G", "B", "D", "E"),
        ChordType.MINOR_SIXTH: ("G", "Bb", "D", "E"),
        ChordType.NINTH: ("G", "B", "D", "F", "A"),
        ChordType.MINOR_NINTH: ("G", "Bb", "D", "F", "A"),
        ChordType.MAJOR_NINTH: ("G", "B", "D", "F#", "A"),
        ChordType.ADD_9: ("G", "B", "D", "A"),
        ChordType.DIMINISHED: ("G", "Bb", "Db"),
        ChordType.AUGMENTED: ("G", "B", "D#"),
    },
    "G#": {
        ChordType.MAJOR: ("G#", "C", "D#"),
        ChordType.MINOR: ("G#", "B", "D#"),
        ChordType.POWER: ("G#", "D#"),
        ChordType.DOMINANT_7: ("G#", "C", "D#", "F#"),
        ChordType.MAJOR_7: ("G#", "C", "D#", "G"),
        ChordType.MINOR_7: ("G#", "B", "D#", "F#"),
        ChordType.MINOR_MAJOR_7: ("G#", "B", "D#", "G"),
        ChordType.SUS_4: ("G#", "C#", "D#"),
        ChordType.SUS_2: ("G#", "A#", "D#"),
        ChordType.SIXTH: ("G#", "C", "D#", "F"),
        ChordType.MINOR_SIXTH: ("G#", "B", "D#", "F"),
        ChordType.NINTH: ("G#", "C", "D#", "F#", "A#"),
        ChordType.MINOR_NINTH: ("G#", "B", "D#", "F#", "A#"),
        ChordType.MAJOR_NINTH: ("G#", "C", "D#", "G", "A#"),
        ChordType.ADD_9: ("G#", "C", "D#", "A#"),
        ChordType.DIMINISHED: ("G#", "B", "D"),
        ChordType.AUGMENTED: ("G#", "C", "E"),
    },
    "A": {
        ChordType.MAJOR: ("A", "C#", "E"),
        ChordType.MINOR: ("A", "C", "E"),
        ChordType.POWER: ("A", "E"),
        ChordType.DOMINANT_7: ("A", "C#", "E", "G"),
        ChordType.MAJOR_7: ("A", "C#", "E", "G#"),
        ChordType.MINOR_7: ("A", "C", "E", "G"),
        ChordType.MINOR_MAJOR_7: ("A", "C", "E", "G#"),
        ChordType.SUS_4: ("A", "D", "E"),
        ChordType.SUS_2: ("A", "B", "E"),
        ChordType.SIXTH: ("A", "C#", "E", "F#"),
        ChordType.MINOR_SIXTH: ("A", "C", "E", "F#"),
        ChordType.NINTH: ("A", "C#", "E", "G", "B"),
        ChordType.MINOR_NINTH: ("A", "C", "E", "G", "B"),
        ChordType.MAJOR_NINTH: ("A", "C#", "E", "G#", "B"),
        ChordType.ADD_9: ("A", "C#", "E", "B"),
        ChordType.DIMINISHED: ("A", "C", "Eb"),
        ChordType.AUGMENTED: ("A", "C#", "E#"),
    },
    "Bb": {
        ChordType.MAJOR: ("Bb", "D", "F"),
        ChordType.MINOR: ("Bb", "Db", "F"),
        ChordType.POWER: ("Bb", "F"),
        ChordType.DOMINANT_7: ("Bb", "D", "F", "Ab"),
        ChordType.MAJOR_7: ("Bb", "D", "F", "A"),
        ChordType.MINOR_7: ("Bb", "Db", "F", "Ab"),
        ChordType.MINOR_MAJOR_7: ("Bb", "Db", "F", "A"),
        ChordType.SUS_4: ("Bb", "Eb", "F"),
        ChordType.SUS_2: ("Bb", "C", "F"),
        ChordType.SIXTH: ("Bb", "D", "F", "G"),
        ChordType.MINOR_SIXTH: ("Bb", "Db", "F", "G"),
        ChordType.NINTH: ("Bb", "D", "F", "Ab", "C"),
        ChordType.MINOR_NINTH: ("Bb", "Db", "F", "Ab", "C"),
        ChordType.MAJOR_NINTH: ("Bb", "D", "F", "A", "C"),
        ChordType.ADD_9: ("Bb", "D", "F", "C"),
        ChordType.DIMINISHED: ("Bb", "Db", "Fb"),
        ChordType.AUGMENTED: ("Bb", "D", "F#"),
    },
    "B": {
        ChordType.MAJOR: ("B", "D#", "F#"),
        ChordType.MINOR: ("B", "D", "F#"),
        ChordType.POWER: ("B", "F#"),
        ChordType.DOMINANT_7: ("B", "D#", "F#", "A"),
        ChordType.MAJOR_7: ("B", "D#", "F#", "A#"),
        ChordType.MINOR_7: ("B", "D", "F#", "A"),
        ChordType.MINOR_MAJOR_7: ("B", "D", "F#", "A#"),
        ChordType.SUS_4: ("B", "E", "F#"),
        ChordType.SUS_2: ("B", "C#", "F#"),
        ChordType.SIXTH: ("B", "D#", "F#", "G#"),
        ChordType.MINOR_SIXTH: ("B", "D", "F#", "G#"),
        ChordType.NINTH: ("B", "D#", "F#", "A", "C#"),
        ChordType.MINOR_NINTH: ("B", "D", "F#", "A", "C#"),
        ChordType.MAJOR_NINTH: ("B", "D#", "F#", "A#", "C#"),
        ChordType.ADD_9: ("B", "D#", "F#", "C#"),
        ChordType.DIMINISHED: ("B", "D", "F"),
        ChordType.AUGMENTED: ("B", "D#", "F##"),
    },
}
