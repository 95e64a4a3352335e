"""Data model for one classified element of an alignment."""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Dict, Literal, Optional

ElementKind = Literal["correct", "incorrect", "missing", "extra"]

CORRECT = "correct"
INCORRECT = "incorrect"
MISSING = "missing"
EXTRA = "extra"

ELEMENT_KINDS = (CORRECT, INCORRECT, MISSING, EXTRA)


@dataclass(frozen=True)
class ClassifiedElement:
    """A token of the aligned output with its classification.

    Attributes:
        text: Token text (user side, or reference side for missing elements)
        kind: "correct", "incorrect", "missing" or "extra"
        correction: Reference text that would make this element correct
            (set for incorrect and missing, None otherwise)
    """
    text: str
    kind: ElementKind
    correction: Optional[str] = None

    @property
    def is_word(self) -> bool:
        """True if the text holds at least one word character (not bare punctuation)."""
        return re.search(r"\w", self.text) is not None

    def to_dict(self) -> Dict[str, Any]:
        return {"text": self.text, "type": self.kind, "correction": self.correction}


def correct(text: str) -> ClassifiedElement:
    return ClassifiedElement(text=text, kind=CORRECT)


def incorrect(text: str, correction: str) -> ClassifiedElement:
    return ClassifiedElement(text=text, kind=INCORRECT, correction=correction)


def missing(text: str) -> ClassifiedElement:
    return ClassifiedElement(text=text, kind=MISSING, correction=text)


def extra(text: str) -> ClassifiedElement:
    return ClassifiedElement(text=text, kind=EXTRA)
