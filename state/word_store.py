"""Word Store — Shared Word Frequency Memory

THIS MODULE DEFINES NO COMMANDS.

This module stores the words PinoBot has heard.

- Track per-word occurrence counts
- Track when each word was last heard
- Drop excluded words before they are stored
- Forget words that have not been heard for longer than a maximum age
- Hand out consistent point-in-time snapshots to the selector

Entries are immutable; an observation swaps in a new entry under the store
lock, so readers never see a half-updated entry.
This module contains logic only and performs no Discord actions.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, replace
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, Mapping, Optional, Pattern, Set

from utils.text import matches_pattern, normalize_word

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WordEntry:
    word: str
    count: int
    last_seen: float

    def age(self, now: float) -> float:
        return now - self.last_seen


Snapshot = Mapping[str, WordEntry]


class WordStore:
    """Thread-safe mapping of normalized word to its `WordEntry`."""

    def __init__(
        self,
        exclude: Optional[Iterable[str]] = None,
        *,
        word_pattern: Optional[Pattern[str]] = None,
    ) -> None:
        self._exclude: Set[str] = {
            word for word in (normalize_word(w) for w in (exclude or ())) if word
        }
        self._word_pattern = word_pattern
        self._entries: Dict[str, WordEntry] = {}
        self._lock = threading.Lock()

    @property
    def exclude(self) -> frozenset:
        return frozenset(self._exclude)

    def is_excluded(self, word: str) -> bool:
        return normalize_word(word) in self._exclude

    def observe(self, word: str, at_time: float) -> Optional[WordEntry]:
        """Record one sighting of `word` at `at_time`.

        Returns the updated entry, or None when the word was dropped
        (empty after normalization, excluded, or rejected by the pattern).
        """
        normalized = normalize_word(word or "")
        if not normalized:
            return None
        if normalized in self._exclude:
            return None
        if not matches_pattern(normalized, self._word_pattern):
            return None

        with self._lock:
            current = self._entries.get(normalized)
            if current is None:
                entry = WordEntry(word=normalized, count=1, last_seen=at_time)
            else:
                entry = replace(current, count=current.count + 1, last_seen=at_time)
            self._entries[normalized] = entry
        return entry

    def evict(self, now: float, max_age: Optional[float]) -> int:
        """Remove every entry with `now - last_seen > max_age`.

        A `max_age` of None disables eviction. Returns the number removed.
        """
        if max_age is None:
            return 0
        with self._lock:
            stale = [word for word, entry in self._entries.items() if entry.age(now) > max_age]
            for word in stale:
                del self._entries[word]
        if stale:
            logger.debug("word_store_evicted", extra={"removed": len(stale), "max_age": max_age})
        return len(stale)

    def snapshot(self) -> Snapshot:
        """Return a read-only copy of the store taken under the lock."""
        with self._lock:
            return MappingProxyType(dict(self._entries))

    def get(self, word: str) -> Optional[WordEntry]:
        with self._lock:
            return self._entries.get(normalize_word(word))

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, word: object) -> bool:
        if not isinstance(word, str):
            return False
        return self.get(word) is not None

    def __iter__(self) -> Iterator[str]:
        return iter(self.snapshot())
