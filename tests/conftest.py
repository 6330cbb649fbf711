"""Shared fixtures for PinoBot tests."""
import random

import pytest

from chatter.errors import PostError
from state.word_store import WordStore

NOW = 1_700_000_000.0


class RecordingPoster:
    """Poster that remembers every word it was asked to send."""

    def __init__(self):
        self.words = []

    async def __call__(self, word):
        self.words.append(word)


class FailingPoster:
    """Poster that always fails with the given exception type."""

    def __init__(self, exc_type=PostError):
        self.exc_type = exc_type
        self.calls = 0

    async def __call__(self, word):
        self.calls += 1
        raise self.exc_type(f"cannot post {word}")


class FixedClock:
    def __init__(self, now=NOW):
        self.now = now

    def __call__(self):
        return self.now


@pytest.fixture
def rng():
    return random.Random(69)


@pytest.fixture
def store():
    return WordStore()


@pytest.fixture
def poster():
    return RecordingPoster()


@pytest.fixture
def clock():
    return FixedClock()


def fill(store, counts, at=NOW):
    """Helper: observe each word `count` times at `at`."""
    for word, count in counts.items():
        for _ in range(count):
            store.observe(word, at)
    return store
