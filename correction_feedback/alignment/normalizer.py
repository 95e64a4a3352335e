"""Token normalization and comparison for alignment."""
from __future__ import annotations

import unicodedata
from dataclasses import dataclass
from typing import Optional

from .config import PUNCTUATION_MARKS


@dataclass(frozen=True)
class PunctuationDiff:
    """Outcome of comparing two tokens with punctuation removed.

    Attributes:
        is_same_word: True if the tokens differ only in punctuation, and only
            one side carries it
        missing_punctuation: Punctuation present in the reference token only
        extra_punctuation: Punctuation present in the user token only
        user_word: Normalized user token without punctuation
        correct_word: Normalized reference token without punctuation
    """
    is_same_word: bool
    missing_punctuation: Optional[str] = None
    extra_punctuation: Optional[str] = None
    user_word: Optional[str] = None
    correct_word: Optional[str] = None


NOT_SAME_WORD = PunctuationDiff(is_same_word=False)


def normalize_token(token: str) -> str:
    """Normalize a token for comparison: lowercase, NFC composition, trimmed."""
    return unicodedata.normalize("NFC", token.lower()).strip()


def strip_punctuation(text: str, punctuation: str = PUNCTUATION_MARKS) -> str:
    """Remove every punctuation character from text."""
    return "".join(ch for ch in text if ch not in punctuation)


def extract_punctuation(text: str, punctuation: str = PUNCTUATION_MARKS) -> str:
    """Return only the punctuation characters of text, in order."""
    return "".join(ch for ch in text if ch in punctuation)


def are_equal(a: str, b: str) -> bool:
    """Check if two tokens are identical after normalization."""
    return normalize_token(a) == normalize_token(b)


def same_word_different_punctuation(
    user_token: str, ref_token: str, punctuation: str = PUNCTUATION_MARKS
) -> PunctuationDiff:
    """Check if two tokens are the same word with punctuation on one side only.

    Example: ("hello", "hello.") -> missing_punctuation="."
             ("hello!", "hello") -> extra_punctuation="!"
             ("hello!", "hello.") -> not the same word (both carry punctuation)

    Args:
        user_token: Token from the learner's text
        ref_token: Token from the reference text
        punctuation: Characters treated as punctuation

    Returns:
        PunctuationDiff describing which side carries the punctuation
    """
    user_norm = normalize_token(user_token)
    ref_norm = normalize_token(ref_token)

    user_word = strip_punctuation(user_norm, punctuation)
    correct_word = strip_punctuation(ref_norm, punctuation)
    if not user_word or not correct_word or user_word != correct_word:
        return NOT_SAME_WORD

    user_punct = extract_punctuation(user_norm, punctuation)
    ref_punct = extract_punctuation(ref_norm, punctuation)

    if ref_punct and not user_punct:
        return PunctuationDiff(
            is_same_word=True,
            missing_punctuation=ref_punct,
            user_word=user_word,
            correct_word=correct_word,
        )
    if user_punct and not ref_punct:
        return PunctuationDiff(
            is_same_word=True,
            extra_punctuation=user_punct,
            user_word=user_word,
            correct_word=correct_word,
        )
    return NOT_SAME_WORD
