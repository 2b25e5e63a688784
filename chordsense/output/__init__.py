"""Output layer - Present detection results.

This layer formats results for consumers:
- UI labels ("C Major ✓", "C Major (78%)", "C Major/E ✓")
- JSON-ready dictionaries
"""

from .display import (
    format_chord_display,
    format_scale_display,
    format_notes,
    format_bass,
    detection_info,
    highlighted_notes,
    match_to_dict,
    result_to_dict,
)

__all__ = [
    "format_chord_display",
    "format_scale_display",
    "format_notes",
    "format_bass",
    "detection_info",
    "highlighted_notes",
    "match_to_dict",
    "result_to_dict",
]
