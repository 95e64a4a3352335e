from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

from correction_feedback.alignment.aligner import align
from correction_feedback.alignment.config import AlignmentConfig
from correction_feedback.models.classified_element import (
    ELEMENT_KINDS,
    EXTRA,
    INCORRECT,
    MISSING,
    ClassifiedElement,
)
from correction_feedback.preprocess import format_user_text


def build_feedback(elements: Sequence[ClassifiedElement]) -> List[Dict[str, Any]]:
    """
    Turn aligned elements into render-ready feedback entries.

    Each entry: {text, type, correction, is_missing, missing_type}
      - missing_type is "word" when the text holds a word character,
        "punctuation" otherwise. Renderers style the two differently
        (missing comma vs. missing word).

    Args:
        elements: Output of align()

    Returns:
        List of dicts, one per element, in order
    """
    feedback: List[Dict[str, Any]] = []
    for element in elements:
        entry = element.to_dict()
        entry["is_missing"] = element.kind == MISSING
        entry["missing_type"] = "word" if element.is_word else "punctuation"
        feedback.append(entry)
    return feedback


def summarize(elements: Sequence[ClassifiedElement]) -> Dict[str, int]:
    """Count elements per kind, plus the total and the number of errors."""
    counts = {kind: 0 for kind in ELEMENT_KINDS}
    for element in elements:
        counts[element.kind] += 1

    summary: Dict[str, int] = dict(counts)
    summary["total"] = len(elements)
    summary["errors"] = counts[INCORRECT] + counts[MISSING] + counts[EXTRA]
    return summary


def to_display_text(
    elements: Sequence[ClassifiedElement], show_missing: bool = True
) -> str:
    """Join elements back into a line of text for display.

    Elements are space-separated, except that an element with no word
    character (punctuation split off a word, e.g. a missing "." or extra
    "()") is attached to the element before it.
    Missing elements are dropped when show_missing is False.

    Example: [correct "Hello", missing ",", correct "world"] -> "Hello, world"
    """
    shown = [e for e in elements if show_missing or e.kind != MISSING]
    parts: List[str] = []
    for idx, element in enumerate(shown):
        if idx > 0 and element.is_word:
            parts.append(" ")
        parts.append(element.text)
    return "".join(parts)


def generate_feedback_report(
    user_text: str,
    reference_text: str,
    format_user: bool = True,
    config: Optional[AlignmentConfig] = None,
) -> Dict[str, Any]:
    """
    Align the learner's text against the reference and package the result.

    Args:
        user_text: The learner's submitted correction
        reference_text: The canonical corrected text
        format_user: Run format_user_text on the learner's text first
        config: Optional AlignmentConfig passed through to align()

    Returns:
        {"elements": [...], "summary": {...}, "display_text": str}
    """
    if format_user:
        user_text = format_user_text(user_text)

    elements = align(user_text, reference_text, config)
    return {
        "elements": build_feedback(elements),
        "summary": summarize(elements),
        "display_text": to_display_text(elements),
    }
