"""Caller-side cleanup of the learner's text before alignment."""
from __future__ import annotations

import re

from correction_feedback.alignment.config import SPACING_PUNCTUATION


def format_user_text(text: str, punctuation: str = SPACING_PUNCTUATION) -> str:
    """Normalize spacing so whitespace slips don't show up as wrong words.

    Adds a space after a punctuation mark that is glued to the next word,
    collapses whitespace runs and trims the ends.

    Example: "Hello,world.  Bye" -> "Hello, world. Bye"
    """
    if punctuation:
        text = re.sub(rf"([{re.escape(punctuation)}])(?!\s|$)", r"\1 ", text)
    text = re.sub(r"\s+", " ", text)
    return text.strip()
