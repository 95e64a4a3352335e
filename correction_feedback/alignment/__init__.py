"""Alignment utilities for matching a learner's correction to the reference text."""
from .aligner import align, align_tokens
from .config import AlignmentConfig, DEFAULT_CONFIG, LOOKAHEAD_WINDOW, PUNCTUATION_MARKS
from .normalizer import are_equal, normalize_token, same_word_different_punctuation
from .tokenizer import tokenize_text

__all__ = [
    "align",
    "align_tokens",
    "AlignmentConfig",
    "DEFAULT_CONFIG",
    "LOOKAHEAD_WINDOW",
    "PUNCTUATION_MARKS",
    "are_equal",
    "normalize_token",
    "same_word_different_punctuation",
    "tokenize_text",
]
