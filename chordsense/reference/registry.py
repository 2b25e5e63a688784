"""Pattern registry - the validated, process-lifetime view of the reference tables.

The registry is built once from :data:`CHORD_TABLE` and :data:`SCALE_TABLE`
and checked on load:
- every tonic defines every pattern type of its category
- every spelled note parses and the first note is the tonic
- the spelled notes realise the pattern's semitone formula
"""

from functools import lru_cache
from typing import Dict, Iterator, List, Mapping, Optional, Tuple, Type

from ..core import PITCH_NAMES, InvalidNoteIdentifier, RegistryError, spelling_to_pitch_class
from .chord_tables import CHORD_TABLE
from .scale_tables import SCALE_TABLE
from .types import Category, ChordType, PatternDefinition, PatternType, ScaleType

# Display spelling of each tonic, in chromatic order
TONIC_SPELLINGS = ["C", "C#", "D", "Eb", "E", "F", "F#", "G", "G#", "A", "Bb", "B"]


class PatternRegistry:
    """Immutable lookup of PatternDefinitions by category, tonic and type."""

    def __init__(
        self,
        chord_table: Optional[Mapping[str, Mapping[ChordType, Tuple[str, ...]]]] = None,
        scale_table: Optional[Mapping[str, Mapping[ScaleType, Tuple[str, ...]]]] = None,
    ):
        """
        Build and validate a registry.

        Args:
            chord_table: Tonic spelling -> chord type -> spelled notes
            scale_table: Tonic spelling -> scale type -> spelled notes

        Raises:
            RegistryError: If the tables are inconsistent
        """
        self._patterns: Dict[Category, List[PatternDefinition]] = {
            Category.CHORD: self._load(chord_table if chord_table is not None else CHORD_TABLE, ChordType),
            Category.SCALE: self._load(scale_table if scale_table is not None else SCALE_TABLE, ScaleType),
        }
        self._index: Dict[Tuple[str, PatternType], PatternDefinition] = {
            (p.tonic_pc, p.pattern_type): p
            for patterns in self._patterns.values()
            for p in patterns
        }

    @staticmethod
    def _load(table, enum_cls: Type[PatternType]) -> List[PatternDefinition]:
        if not table:
            raise RegistryError(f"Empty {enum_cls.__name__} table")

        expected_types = set(enum_cls)
        seen_tonics = set()
        patterns = []

        for tonic, entries in table.items():
            try:
                tonic_pc = spelling_to_pitch_class(tonic)
            except InvalidNoteIdentifier as e:
                raise RegistryError(f"Tonic {tonic!r} does not parse: {e.reason}") from e
            if tonic_pc in seen_tonics:
                raise RegistryError(f"Tonic {tonic!r} defined twice (as {tonic_pc})")
            seen_tonics.add(tonic_pc)

            foreign = [t for t in entries if not isinstance(t, enum_cls)]
            if foreign:
                raise RegistryError(f"{tonic}: unknown {enum_cls.__name__} entries {foreign!r}")
            missing = expected_types - set(entries)
            if missing:
                names = sorted(t.display_name for t in missing)
                raise RegistryError(f"{tonic}: missing pattern types {names}")

            root = PITCH_NAMES.index(tonic_pc)
            for pattern_type in enum_cls:
                notes = tuple(entries[pattern_type])
                label = f"{tonic} {pattern_type.display_name}"
                try:
                    pcs = [spelling_to_pitch_class(n) for n in notes]
                except InvalidNoteIdentifier as e:
                    raise RegistryError(f"{label}: {e}") from e
                if not pcs or pcs[0] != tonic_pc:
                    raise RegistryError(f"{label}: first note must be the tonic, got {notes!r}")
                expected = [PITCH_NAMES[(root + i) % 12] for i in pattern_type.intervals]
                if pcs != expected:
                    raise RegistryError(
                        f"{label}: notes {notes!r} do not match formula {pattern_type.intervals}"
                    )
                patterns.append(PatternDefinition(
                    tonic=tonic,
                    tonic_pc=tonic_pc,
                    pattern_type=pattern_type,
                    notes=notes,
                    pitch_classes=frozenset(pcs),
                ))

        return patterns

    def patterns(self, category: Category) -> List[PatternDefinition]:
        """All patterns of a category, in table order."""
        return list(self._patterns[category])

    def __iter__(self) -> Iterator[PatternDefinition]:
        for patterns in self._patterns.values():
            yield from patterns

    def __len__(self) -> int:
        return len(self._index)

    def get(self, tonic: str, pattern_type: PatternType) -> Optional[PatternDefinition]:
        """Look up a pattern by tonic (any spelling) and type."""
        try:
            tonic_pc = spelling_to_pitch_class(tonic)
        except InvalidNoteIdentifier:
            return None
        return self._index.get((tonic_pc, pattern_type))

    def tonics(self, category: Category) -> List[str]:
        """Tonic display spellings defined for a category."""
        seen = []
        for p in self._patterns[category]:
            if p.tonic not in seen:
                seen.append(p.tonic)
        return seen

    def type_count(self, category: Category) -> int:
        return len({p.pattern_type for p in self._patterns[category]})


@lru_cache(maxsize=1)
def default_registry() -> PatternRegistry:
    """The registry built from the bundled tables (loaded once)."""
    return PatternRegistry()
