"""Correction feedback: align a learner's corrected passage to the reference text."""
from .alignment import AlignmentConfig, align
from .models.classified_element import ClassifiedElement
from .preprocess import format_user_text
from .report_generator import build_feedback, generate_feedback_report, summarize, to_display_text

__all__ = [
    "align",
    "AlignmentConfig",
    "ClassifiedElement",
    "format_user_text",
    "build_feedback",
    "generate_feedback_report",
    "summarize",
    "to_display_text",
]
