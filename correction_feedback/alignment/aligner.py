"""Alignment of a learner's corrected text against the reference text."""
from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from correction_feedback.models.classified_element import (
    ClassifiedElement,
    correct,
    extra,
    incorrect,
    missing,
)
from .config import DEFAULT_CONFIG, AlignmentConfig
from .normalizer import are_equal, same_word_different_punctuation, strip_punctuation
from .tokenizer import tokenize_text

logger = logging.getLogger(__name__)


def find_later_match(
    token: str, tokens: Sequence[str], index: int, window: int
) -> Optional[int]:
    """Scan tokens[index + 1 .. index + window] for one equal to token.

    Args:
        token: The token to look for
        tokens: The stream to scan
        index: Current cursor position in tokens (not itself scanned)
        window: Number of positions to look ahead

    Returns:
        Index of the first equal token, or None if none lies inside the window
    """
    end = min(index + window, len(tokens) - 1)
    for i in range(index + 1, end + 1):
        if are_equal(token, tokens[i]):
            return i
    return None


def align_tokens(
    user_tokens: Sequence[str],
    ref_tokens: Sequence[str],
    config: AlignmentConfig = DEFAULT_CONFIG,
) -> List[ClassifiedElement]:
    """Walk both token streams and classify every token.

    Single pass with bounded lookahead: after a mismatch, the reference is
    scanned ahead for the user token (missing words), then the user stream
    is scanned ahead for the reference token (extra words). If neither
    resyncs within the window the pair is taken as a substitution.

    Args:
        user_tokens: Tokens of the learner's text
        ref_tokens: Tokens of the reference text
        config: Punctuation set and lookahead window

    Returns:
        List of ClassifiedElement covering every token of both streams once
    """
    elements: List[ClassifiedElement] = []
    u, c = 0, 0
    n_user, n_ref = len(user_tokens), len(ref_tokens)

    while u < n_user or c < n_ref:
        if c >= n_ref:
            elements.append(extra(user_tokens[u]))
            u += 1
            continue
        if u >= n_user:
            elements.append(missing(ref_tokens[c]))
            c += 1
            continue

        user_token = user_tokens[u]
        ref_token = ref_tokens[c]

        if are_equal(user_token, ref_token):
            elements.append(correct(user_token))
            u += 1
            c += 1
            continue

        diff = same_word_different_punctuation(user_token, ref_token, config.punctuation)
        if diff.missing_punctuation:
            elements.append(correct(strip_punctuation(user_token, config.punctuation)))
            elements.append(missing(diff.missing_punctuation))
            u += 1
            c += 1
            continue
        if diff.extra_punctuation:
            elements.append(correct(strip_punctuation(user_token, config.punctuation)))
            elements.append(extra(diff.extra_punctuation))
            u += 1
            c += 1
            continue

        # User token appears later in the reference: reference words were skipped
        found = find_later_match(user_token, ref_tokens, c, config.lookahead_window)
        if found is not None:
            logger.debug("Resync: %r found at reference[%d], %d missing", user_token, found, found - c)
            elements.extend(missing(ref_tokens[i]) for i in range(c, found))
            c = found
            continue

        # Reference token appears later in the user text: user added words
        found = find_later_match(ref_token, user_tokens, u, config.lookahead_window)
        if found is not None:
            logger.debug("Resync: %r found at user[%d], %d extra", ref_token, found, found - u)
            elements.extend(extra(user_tokens[i]) for i in range(u, found))
            u = found
            continue

        logger.debug("No resync within %d tokens: %r -> %r", config.lookahead_window, user_token, ref_token)
        elements.append(incorrect(user_token, ref_token))
        u += 1
        c += 1

    return elements


def align(
    user_text: str,
    reference_text: str,
    config: Optional[AlignmentConfig] = None,
) -> List[ClassifiedElement]:
    """Align the learner's text to the reference text.

    Example:
        align("a b c d", "a b d") ->
            [correct "a", correct "b", extra "c", correct "d"]

    Args:
        user_text: The learner's submitted correction
        reference_text: The canonical corrected text
        config: Optional AlignmentConfig (defaults to DEFAULT_CONFIG)

    Returns:
        List of ClassifiedElement, empty if both texts are blank
    """
    config = config or DEFAULT_CONFIG
    user_tokens = tokenize_text(user_text)
    ref_tokens = tokenize_text(reference_text)
    logger.debug("Tokens: %d user, %d reference", len(user_tokens), len(ref_tokens))

    elements = align_tokens(user_tokens, ref_tokens, config)

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Aligned: %s", " ".join(f"{e.text}[{e.kind}]" for e in elements))
    return elements
