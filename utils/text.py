"""
Text Utilities — Shared Message Processing Helpers

THIS MODULE DEFINES NO COMMANDS.

Provides reusable helpers for:
- Whitespace tokenization
- Word normalization (punctuation trimming and case folding)
- Optional regex word filtering

Normalization policy: a raw token has every leading and trailing
non-alphanumeric character removed, then is lower-cased. Characters inside
the word ("don't", "well-known") are kept as-is.

Used by the word store and the ingestion path.
"""

from __future__ import annotations

import re
from typing import Iterable, List, Optional, Pattern

__all__ = [
    "tokenize",
    "normalize_word",
    "normalize_words",
    "matches_pattern",
    "normalize_whitespace",
]

# Leading/trailing runs of anything that is not a letter or digit.
_EDGE_RE = re.compile(r"^[\W_]+|[\W_]+$", re.UNICODE)


def tokenize(text: str) -> List[str]:
    """
    Split text on whitespace. Returns raw tokens, punctuation included.
    """
    if not text:
        return []
    return text.split()


def normalize_word(token: str) -> str:
    """
    Trim non-alphanumeric edges and case-fold a single token.
    Returns an empty string for tokens with no letters or digits.
    """
    if not token:
        return ""
    return _EDGE_RE.sub("", token.strip()).lower()


def normalize_words(tokens: Iterable[str]) -> List[str]:
    return [word for word in (normalize_word(t) for t in tokens) if word]


def matches_pattern(word: str, pattern: Optional[Pattern[str]]) -> bool:
    if pattern is None:
        return True
    return pattern.fullmatch(word) is not None


def normalize_whitespace(text: str) -> str:
    """
    Collapse all whitespace runs to a single space and strip ends.
    """
    return " ".join(text.split())
