"""
Word Selector — Weighted Random Word Choice

THIS MODULE DEFINES NO COMMANDS.

Responsibilities:
- Weight every stored word by its count plus a random boost
- Roll one weighted draw over the whole vocabulary
- Fall back to the configured default word when nothing has been heard

Boosts are re-rolled for every word on every call, so a rarely heard word
can still beat the most common one now and then.
The selector only reads snapshots and never touches the store.
"""

from __future__ import annotations

import math
import random
from typing import Dict, Optional

from state.word_store import Snapshot


def effective_weights(
    snapshot: Snapshot,
    max_boost: float,
    rng: Optional[random.Random] = None,
) -> Dict[str, float]:
    """Return `count + uniform(0, max_boost)` for each word in the snapshot."""
    source = rng or random
    boost = max(0.0, max_boost)
    weights: Dict[str, float] = {}
    for word, entry in snapshot.items():
        extra = source.uniform(0.0, boost) if boost > 0 else 0.0
        weights[word] = entry.count + extra
    return weights


def _pick_maximal(weights: Dict[str, float], rng) -> str:
    top = max(weights.values())
    candidates = [word for word, weight in weights.items() if weight == top]
    return rng.choice(candidates)


def select(
    snapshot: Snapshot,
    max_boost: float = 0.0,
    default_word: Optional[str] = None,
    rng: Optional[random.Random] = None,
) -> Optional[str]:
    """Choose one word from `snapshot`.

    Returns `default_word` (possibly None) when the snapshot is empty.
    """
    if not snapshot:
        return default_word

    source = rng or random
    weights = effective_weights(snapshot, max_boost, source)

    total = sum(weights.values())
    if total <= 0:
        return _pick_maximal(weights, source)
    if not math.isfinite(total):
        # Huge boosts overflow the sum; rescale so the largest weight is 1.
        top = max(weights.values())
        weights = {word: weight / top for word, weight in weights.items()}

    words, word_weights = zip(*weights.items())
    return source.choices(list(words), weights=list(word_weights), k=1)[0]
