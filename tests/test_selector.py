from collections import Counter
from types import MappingProxyType

from chatter import selector
from conftest import NOW, fill
from state.word_store import WordEntry

TRIALS = 6000


def _snapshot(counts):
    return MappingProxyType(
        {word: WordEntry(word=word, count=count, last_seen=NOW) for word, count in counts.items()}
    )


def test_empty_snapshot_returns_default_word(rng):
    empty = _snapshot({})
    assert all(selector.select(empty, 5, "...", rng) == "..." for _ in range(100))


def test_empty_snapshot_without_default_emits_nothing(rng):
    empty = _snapshot({})
    assert all(selector.select(empty, 5, None, rng) is None for _ in range(100))


def test_single_entry_without_boost_is_deterministic(rng):
    snap = _snapshot({"only": 3})
    assert {selector.select(snap, 0, "fallback", rng) for _ in range(50)} == {"only"}


def test_selection_always_comes_from_snapshot(rng):
    snap = _snapshot({"cat": 5, "dog": 1, "owl": 2})
    picks = {selector.select(snap, 10, "fallback", rng) for _ in range(500)}
    assert picks <= set(snap)


def test_frequency_follows_counts_without_boost(rng):
    snap = _snapshot({"cat": 5, "dog": 1})
    tally = Counter(selector.select(snap, 0, None, rng) for _ in range(TRIALS))
    assert abs(tally["cat"] / TRIALS - 5 / 6) < 0.03


def test_frequency_converges_to_count_share(rng):
    counts = {"a": 1, "b": 2, "c": 3, "d": 4}
    snap = _snapshot(counts)
    tally = Counter(selector.select(snap, 0, None, rng) for _ in range(TRIALS))
    total = sum(counts.values())
    for word, count in counts.items():
        assert abs(tally[word] / TRIALS - count / total) < 0.03


def test_boost_lets_rare_words_win_more_often(rng):
    snap = _snapshot({"common": 20, "rare": 1})
    plain = Counter(selector.select(snap, 0, None, rng) for _ in range(TRIALS))
    boosted = Counter(selector.select(snap, 40, None, rng) for _ in range(TRIALS))
    assert boosted["rare"] > plain["rare"]


def test_effective_weight_is_bounded_by_boost(rng):
    snap = _snapshot({"cat": 5, "dog": 1})
    for _ in range(500):
        weights = selector.effective_weights(snap, 3, rng)
        for word, weight in weights.items():
            assert snap[word].count <= weight <= snap[word].count + 3


def test_zero_boost_weights_equal_counts(rng):
    snap = _snapshot({"cat": 5, "dog": 1})
    assert selector.effective_weights(snap, 0, rng) == {"cat": 5, "dog": 1}


def test_boost_is_rerolled_each_call(rng):
    snap = _snapshot({"cat": 1})
    rolls = {selector.effective_weights(snap, 10, rng)["cat"] for _ in range(20)}
    assert len(rolls) > 1


def test_select_does_not_touch_store(store, rng):
    fill(store, {"cat": 5, "dog": 1})
    before = dict(store.snapshot())
    for _ in range(100):
        selector.select(store.snapshot(), 4, None, rng)
    assert dict(store.snapshot()) == before


def test_all_zero_weights_pick_among_maximal(rng):
    snap = _snapshot({"ghost": 0, "phantom": 0})
    picks = {selector.select(snap, 0, None, rng) for _ in range(200)}
    assert picks == {"ghost", "phantom"}


def test_huge_boost_does_not_overflow_the_draw(rng):
    snap = _snapshot({"cat": 3, "dog": 2, "owl": 1})
    picks = {selector.select(snap, 1e308, None, rng) for _ in range(300)}
    assert picks <= set(snap)
    assert len(picks) > 1
