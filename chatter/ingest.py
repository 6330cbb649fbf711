"""
Message Ingestion — Feeding Heard Words Into Memory

THIS MODULE DEFINES NO COMMANDS.

Responsibilities:
- Split inbound message text on whitespace
- Normalize each token (trim punctuation, lower-case)
- Skip empty tokens
- Record every surviving word in the word store

Ingestion never raises; unusable text simply records nothing.
"""

from __future__ import annotations

import logging
from typing import Optional

from state.word_store import WordStore
from utils import timers
from utils.text import normalize_words, tokenize

logger = logging.getLogger(__name__)


def ingest(store: WordStore, raw_text: Optional[str], at_time: Optional[float] = None) -> int:
    """Observe every word of `raw_text` at `at_time`.

    Returns how many words were recorded.
    """
    if not raw_text or not isinstance(raw_text, str):
        return 0

    timestamp = timers.wall_time() if at_time is None else at_time
    recorded = 0
    for word in normalize_words(tokenize(raw_text)):
        if store.observe(word, timestamp) is not None:
            recorded += 1

    logger.debug("ingest", extra={"recorded": recorded, "at": timestamp})
    return recorded
