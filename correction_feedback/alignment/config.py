"""Policy constants for aligning a learner's correction to the reference text."""
from __future__ import annotations

from dataclasses import dataclass

# Characters stripped when deciding whether two tokens are the same word
# with different punctuation
PUNCTUATION_MARKS = ".,!?;:()[]{}\"'-–—…"

# How many positions ahead of the current cursor to scan for a resync match
LOOKAHEAD_WINDOW = 3

# Marks that should be followed by a space in the user's text
SPACING_PUNCTUATION = ".,!?;:"


@dataclass(frozen=True)
class AlignmentConfig:
    """Tuning levers for the alignment walker.

    Attributes:
        punctuation: Characters treated as punctuation by the comparator
        lookahead_window: Number of tokens scanned ahead on either stream
            before falling back to a substitution (0 disables resync)
    """
    punctuation: str = PUNCTUATION_MARKS
    lookahead_window: int = LOOKAHEAD_WINDOW

    def __post_init__(self) -> None:
        if not isinstance(self.punctuation, str):
            raise ValueError(f"punctuation must be a string, got {type(self.punctuation).__name__}")
        if isinstance(self.lookahead_window, bool) or not isinstance(self.lookahead_window, int):
            raise ValueError(f"lookahead_window must be an int, got {self.lookahead_window!r}")
        if self.lookahead_window < 0:
            raise ValueError(f"lookahead_window must be >= 0, got {self.lookahead_window}")


DEFAULT_CONFIG = AlignmentConfig()
