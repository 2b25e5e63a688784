"""Display helpers - labels and JSON-ready dicts for UI and CLI consumers."""

from typing import Any, Dict, List, Optional, Sequence

from ..core import Note
from ..inference import CandidateMatch, DetectionResult, compatibility, summarize

NO_CHORD = "No chord detected"
NO_SCALE = "No scale detected"


def _label(match: Optional[CandidateMatch], empty: str) -> str:
    if match is None:
        return empty
    if match.is_exact_match:
        return f"{match.slash_name} ✓"
    return f"{match.slash_name} ({round(match.confidence * 100)}%)"


def format_chord_display(chord: Optional[CandidateMatch]) -> str:
    """'C Major ✓' for an exact match, 'C Major (78%)' for a partial one.

    Inversions carry their bass, e.g. 'C Major/E ✓'.
    """
    return _label(chord, NO_CHORD)


def format_scale_display(scale: Optional[CandidateMatch]) -> str:
    return _label(scale, NO_SCALE)


def format_notes(notes: Optional[Sequence[str]]) -> str:
    """Join spelled notes for display, e.g. 'C - E - G'."""
    if not notes:
        return ""
    return " - ".join(notes)


def format_bass(note: Optional[Note]) -> str:
    """Bass note as pressed, e.g. 'E3' or 'Bb2'."""
    if note is None:
        return ""
    return f"{note.spelling}{note.octave}"


def detection_info(result: DetectionResult) -> Dict[str, str]:
    """
    Human-readable fields for a result panel.

    Returns:
        Dict with chord/scale labels, their notes, the bass, the filter that
        fired, the reasoning and the chord-scale fit
    """
    return {
        "chord": format_chord_display(result.chord),
        "scale": format_scale_display(result.scale),
        "chord_notes": format_notes(result.chord.notes if result.chord else None),
        "scale_notes": format_notes(result.scale.notes if result.scale else None),
        "bass": format_bass(result.bass),
        "filter": result.filter_kind.value,
        "reasoning": result.reasoning,
        "fit": compatibility(result.chord, result.scale).reason,
    }


def match_to_dict(match: Optional[CandidateMatch]) -> Optional[Dict[str, Any]]:
    if match is None:
        return None
    return {
        "name": match.name,
        "symbol": match.slash_name,
        "tonic": match.tonic,
        "type": match.pattern_type.display_name,
        "category": match.category.value,
        "notes": list(match.notes),
        "confidence": round(match.confidence, 4),
        "is_exact_match": match.is_exact_match,
        "specificity": match.specificity,
        "popularity": round(match.popularity, 4),
        "rank_score": round(match.rank_score, 4),
        "matched_notes": list(match.matched_notes),
        "missing_notes": list(match.missing_notes),
        "extra_notes": list(match.extra_notes),
        "inversion": match.inversion,
    }


def highlighted_notes(result: DetectionResult) -> List[str]:
    """Spelled notes of the detected chord (or scale) that were actually played."""
    match = result.chord or result.scale
    if match is None:
        return []
    return list(match.matched_notes)


def result_to_dict(result: DetectionResult) -> Dict[str, Any]:
    """Serialize a DetectionResult (plus its tonal summary) for JSON output."""
    summary = summarize(result)
    return {
        "input": list(result.pitch_classes),
        "bass": format_bass(result.bass) or None,
        "chord": match_to_dict(result.chord),
        "scale": match_to_dict(result.scale),
        "has_detection": result.has_detection,
        "has_exact_match": result.has_exact_match,
        "filter": result.filter_kind.value,
        "reasoning": result.reasoning,
        "probable_tonic": result.probable_tonic,
        "analysis": {
            "chord_certainty": summary.chord_certainty,
            "scale_certainty": summary.scale_certainty,
            "modality": summary.modality,
            "chromaticism": round(summary.chromaticism, 4),
            "suggested_key": summary.suggested_key,
            "compatibility": {
                "score": round(summary.fit.score, 4),
                "compatible": summary.fit.compatible,
                "outside_notes": list(summary.fit.outside_notes),
                "reason": summary.fit.reason,
            },
        },
    }
