"""Text normalization, tokenization, and stop-word filtering.

Turns raw user text into the filtered token sequence consumed by the
TF-IDF vectorizer and the heuristic classifier. Every step is a total
function: any string (including an empty one) produces a valid, possibly
empty, result.

Pipeline::

    raw text -> clean_text -> tokenize -> remove_stop_words
"""

from __future__ import annotations

import re

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

# English function words dropped before vectorization. Must stay in sync with
# the stop-word list used when the vocabulary was exported.
STOP_WORDS: frozenset[str] = frozenset(
    {
        "i", "me", "my", "myself", "we", "our", "ours", "ourselves", "you",
        "your", "yours", "yourself", "yourselves", "he", "him", "his",
        "himself", "she", "her", "hers", "herself", "it", "its", "itself",
        "they", "them", "their", "theirs", "themselves", "what", "which",
        "who", "whom", "this", "that", "these", "those", "am", "is", "are",
        "was", "were", "be", "been", "being", "have", "has", "had", "having",
        "do", "does", "did", "doing", "a", "an", "the", "and", "but", "if",
        "or", "because", "as", "until", "while", "of", "at", "by", "for",
        "with", "about", "against", "between", "into", "through", "during",
        "before", "after", "above", "below", "to", "from", "up", "down", "in",
        "out", "on", "off", "over", "under", "again", "further", "then",
        "once",
    }
)

# Tokens must be strictly longer than this to survive filtering
MIN_TOKEN_LENGTH = 2

_NON_ALPHA_RE = re.compile(r"[^a-zA-Z\s]")
_WHITESPACE_RE = re.compile(r"\s+")


# ---------------------------------------------------------------------------
# Pipeline steps
# ---------------------------------------------------------------------------


def clean_text(text: str) -> str:
    """Lowercase text and reduce it to ASCII letters and single spaces.

    Every character outside ``[A-Za-z]`` becomes a space, whitespace runs
    collapse to one space, and the ends are trimmed.

    Args:
        text: Arbitrary input text.

    Returns:
        Normalized text. ``clean_text(clean_text(s)) == clean_text(s)``.
    """
    if not text:
        return ""
    text = _NON_ALPHA_RE.sub(" ", text.lower())
    return _WHITESPACE_RE.sub(" ", text).strip()


def tokenize(text: str) -> list[str]:
    """Split normalized text on single spaces, dropping empty pieces."""
    return [token for token in text.split(" ") if token]


def remove_stop_words(
    tokens: list[str],
    min_length: int = MIN_TOKEN_LENGTH,
    stop_words: frozenset[str] = STOP_WORDS,
) -> list[str]:
    """Drop stop words and short tokens, preserving order.

    Args:
        tokens: Token sequence from :func:`tokenize`.
        min_length: Tokens of this length or shorter are dropped.
        stop_words: Words to drop regardless of length.

    Returns:
        Filtered tokens. An empty list is a valid result.
    """
    return [t for t in tokens if t not in stop_words and len(t) > min_length]


# ---------------------------------------------------------------------------
# Text Preprocessor
# ---------------------------------------------------------------------------


class TextPreprocessor:
    """Run the full normalize / tokenize / filter chain.

    Example::

        preprocessor = TextPreprocessor()
        tokens = preprocessor.process("I can't take this anymore!!")
        # ['can', 'take', 'anymore']

    Args:
        stop_words: Stop-word set to filter against.
        min_token_length: Tokens of this length or shorter are dropped.
    """

    def __init__(
        self,
        stop_words: frozenset[str] = STOP_WORDS,
        min_token_length: int = MIN_TOKEN_LENGTH,
    ) -> None:
        self.stop_words = stop_words
        self.min_token_length = min_token_length

    def clean(self, text: str) -> str:
        return clean_text(text)

    def tokenize(self, text: str) -> list[str]:
        return tokenize(text)

    def filter_tokens(self, tokens: list[str]) -> list[str]:
        """Remove this preprocessor's stop words and short tokens."""
        return remove_stop_words(tokens, self.min_token_length, self.stop_words)

    def process(self, text: str) -> list[str]:
        """Normalize, tokenize, and filter raw text in one call."""
        return self.filter_tokens(self.tokenize(self.clean(text)))
