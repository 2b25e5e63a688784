"""Global constants for chordsense."""

# Canonical pitch names (sharps are the internal spelling)
PITCH_NAMES = ["C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B"]

# Semitone value of each natural letter
LETTER_VALUES = {"C": 0, "D": 2, "E": 4, "F": 5, "G": 7, "A": 9, "B": 11}

# Preferred flat spellings for display
SHARP_TO_FLAT = {"C#": "Db", "D#": "Eb", "F#": "Gb", "G#": "Ab", "A#": "Bb"}
FLAT_TO_SHARP = {v: k for k, v in SHARP_TO_FLAT.items()}

# Candidate scoring
EXTRA_NOTE_PENALTY = 0.05  # per unexplained input note
MISSING_NOTE_PENALTY = 0.1  # per expected note not played

# Minimum distinct pitch classes before a category is attempted
MIN_CHORD_NOTES = 2
MIN_SCALE_NOTES = 3

# Confidence floors below which a candidate is discarded
CHORD_CONFIDENCE_FLOOR = 0.4
SCALE_CONFIDENCE_FLOOR = 0.3

# Confidence above which a candidate is flagged relevant
CHORD_RELEVANCE_THRESHOLD = 0.6
SCALE_RELEVANCE_THRESHOLD = 0.5

# Rank score bonuses
CHORD_EXACT_BONUS = 0.5
SCALE_EXACT_BONUS = 0.6
CHORD_TONIC_BONUS = 0.3
SCALE_TONIC_BONUS = 0.4
CHORD_POPULARITY_WEIGHT = 0.2
SCALE_POPULARITY_WEIGHT = 0.3

# Anti-noise filtering
SIGNIFICANT_SCALE_MIN_NOTES = 5
SIGNIFICANT_SCALE_MIN_CONFIDENCE = 0.7
COMPLEX_CHORD_MIN_NOTES = 4
INDEPENDENT_CHORD_CONFIDENCE = 0.8

# Contextual filtering kicks in above these candidate counts
CONTEXTUAL_MAX_CHORDS = 3
CONTEXTUAL_MAX_SCALES = 2

# Certainty bands
HIGH_CERTAINTY = 0.85
MEDIUM_CERTAINTY = 0.65

# Chord-scale fit bands (share of chord notes inside the scale)
FULL_FIT = 0.8
COMPATIBLE_FIT = 0.6
PARTIAL_FIT = 0.4

# Result cache
DEFAULT_CACHE_SIZE = 1000
DEFAULT_TONIC = "C"
