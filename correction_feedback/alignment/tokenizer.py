"""Text tokenization for alignment."""
from __future__ import annotations

import re
from typing import List


def tokenize_text(text: str) -> List[str]:
    """Split text into whitespace-delimited tokens, keeping punctuation attached.

    Example: "Hello,  world. " -> ["Hello,", "world."]

    Args:
        text: The text to tokenize

    Returns:
        List of non-empty tokens (empty list for blank input)
    """
    raw = re.split(r"\s+", text.strip())
    return [token for token in raw if token]
