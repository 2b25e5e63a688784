"""Pattern detection - the end-to-end pipeline from pressed keys to labels.

Pipeline: notes -> normalize -> probable tonic -> ranked candidates
-> noise filter -> one chord + one scale.

The detector keeps no musical history between calls. Its only state is a
bounded result cache keyed by the normalized input, so a cache miss always
reproduces what a hit would have returned. The bass (lowest sounding note)
is not part of the key; it is attached to the cached result on every call.
"""

import logging
from dataclasses import dataclass, replace
from typing import Any, Dict, Iterable, Optional, Tuple

from ..core import DetectionConfig, InvalidNoteIdentifier, Note
from ..processing import CacheInfo, ResultCache, cache_key, lowest_note, parse_notes, pitch_classes_of
from ..reference import Category, PatternRegistry, default_registry
from .candidates import CandidateGenerator, CandidateMatch
from .context import ContextRanker
from .noise import FilterKind, NoiseFilter

logger = logging.getLogger(__name__)

NO_NOTES_REASON = "No notes selected"
NO_PATTERN_REASON = "No valid musical patterns detected"


@dataclass(frozen=True)
class DetectionResult:
    """Best chord and best scale for one set of pressed notes."""
    chord: Optional[CandidateMatch]
    scale: Optional[CandidateMatch]
    pitch_classes: Tuple[str, ...]  # Normalized input
    has_detection: bool
    reasoning: str
    filter_kind: FilterKind = FilterKind.NONE
    probable_tonic: Optional[str] = None
    bass: Optional[Note] = None  # Lowest sounding note, when octaves were given

    @property
    def has_exact_match(self) -> bool:
        return any(m is not None and m.is_exact_match for m in (self.chord, self.scale))


class PatternDetector:
    """Detect the most plausible chord and scale for a set of notes.

    Features:
    - Fuzzy matching against every tonic and pattern type
    - Tie-breaking by exactness, probable tonic and popularity
    - Pluggable noise filter (defaults to NoiseFilter)
    - Thread-safe FIFO result cache owned by the instance
    """

    def __init__(
        self,
        config: Optional[DetectionConfig] = None,
        registry: Optional[PatternRegistry] = None,
        noise_filter=None,
        cache_size: Optional[int] = None,
    ):
        """
        Initialize PatternDetector.

        Args:
            config: Weights and thresholds (defaults to DetectionConfig())
            registry: Pattern registry (defaults to the bundled tables)
            noise_filter: Object with ``apply(chords, scales) -> FilterOutcome``
            cache_size: Cache capacity; overrides ``config.cache_size``
        """
        self.config = config or DetectionConfig()
        self.registry = registry or default_registry()
        self.ranker = ContextRanker()
        self.generator = CandidateGenerator(self.config, self.registry, self.ranker)
        self.noise_filter = noise_filter or NoiseFilter(self.config)
        self._cache: ResultCache[DetectionResult] = ResultCache(
            cache_size if cache_size is not None else self.config.cache_size
        )

    def detect(self, notes: Iterable[str], first_note: Optional[str] = None) -> DetectionResult:
        """
        Detect the best chord and scale.

        Args:
            notes: Note identifiers such as ["C4", "E4", "G4"]; invalid
                entries are skipped with a warning
            first_note: The first key the performer pressed, if known

        Returns:
            DetectionResult (never raises for musical reasons). ``bass`` and
            the chord's ``inversion`` are set when the notes carry octaves.
        """
        parsed = parse_notes(notes)
        pitch_classes = pitch_classes_of(parsed)
        if not pitch_classes:
            return DetectionResult(
                chord=None,
                scale=None,
                pitch_classes=(),
                has_detection=False,
                reasoning=NO_NOTES_REASON,
            )

        key = cache_key(pitch_classes)
        context_pc = self._context_pitch_class(first_note, pitch_classes)
        if context_pc is not None:
            key = f"{key}@{context_pc}"

        result = self._cache.get(key)
        if result is not None:
            logger.debug("Cache hit for %s", key)
        else:
            result = self._run(pitch_classes, context_pc)
            self._cache.put(key, result)
        return self._with_bass(result, lowest_note(parsed))

    @staticmethod
    def _with_bass(result: DetectionResult, bass: Optional[Note]) -> DetectionResult:
        """Attach the voicing to a cached (pitch-class only) result."""
        if bass is None:
            return result
        chord = result.chord
        if chord is not None:
            chord = replace(chord, inversion=chord.position_of(bass.pitch_class))
        return replace(result, chord=chord, bass=bass)

    def _run(self, pitch_classes, first_note: Optional[str]) -> DetectionResult:
        tonic = self.ranker.probable_tonic(pitch_classes, first_note)

        chords = self.generator.chords(pitch_classes, tonic)
        scales = self.generator.scales(pitch_classes, tonic)
        outcome = self.noise_filter.apply(chords, scales)

        chord = outcome.chords[0] if outcome.chords else None
        scale = outcome.scales[0] if outcome.scales else None
        found = chord is not None or scale is not None

        logger.debug(
            "%s: %d chord / %d scale candidates, filter=%s",
            ",".join(pitch_classes), len(chords), len(scales), outcome.kind.value,
        )

        return DetectionResult(
            chord=chord,
            scale=scale,
            pitch_classes=tuple(pitch_classes),
            has_detection=found,
            reasoning=outcome.reasoning if found else NO_PATTERN_REASON,
            filter_kind=outcome.kind,
            probable_tonic=tonic,
        )

    @staticmethod
    def _context_pitch_class(first_note: Optional[str], pitch_classes) -> Optional[str]:
        """Pitch class of first_note when it is still sounding, else None."""
        if not first_note:
            return None
        try:
            pc = Note.parse(first_note).pitch_class
        except InvalidNoteIdentifier as e:
            logger.warning("Ignoring first note: %s", e)
            return None
        return pc if pc in pitch_classes else None

    def cache_info(self) -> CacheInfo:
        return self._cache.info()

    def clear_cache(self) -> None:
        self._cache.clear()

    def stats(self) -> Dict[str, Any]:
        """Diagnostic figures: cache state, registry sizes and configuration."""
        info = self._cache.info()
        return {
            "cache_size": info.size,
            "max_cache_size": info.max_size,
            "cache_hits": info.hits,
            "cache_misses": info.misses,
            "supported_chord_types": self.registry.type_count(Category.CHORD),
            "supported_scale_types": self.registry.type_count(Category.SCALE),
            "config": self.config.to_dict(),
        }
