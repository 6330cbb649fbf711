"""
Chatter Scheduler — Autonomous Word Posting Loop

THIS MODULE DEFINES BACKGROUND TASKS ONLY.

Responsibilities:
- Wait a random interval between the configured bounds
- Forget words older than the configured maximum age
- Pick a word with the selector
- Hand the word to the poster
- Keep going when a post fails

The loop runs as a single asyncio task. `stop()` wakes the current wait
immediately and no further firing cycle starts afterwards.
No commands are defined here.
"""

from __future__ import annotations

import asyncio
import logging
import random
from enum import Enum
from typing import Awaitable, Callable, Optional

from chatter import selector
from chatter.config import EngineConfig
from chatter.errors import PostError
from state.word_store import WordStore
from utils import audit, timers

logger = logging.getLogger(__name__)

Poster = Callable[[str], Awaitable[None]]

DEFAULT_STOP_GRACE_SECONDS = 5.0


class SchedulerState(str, Enum):
    WAITING = "waiting"
    FIRING = "firing"


class WordScheduler:
    def __init__(
        self,
        store: WordStore,
        config: EngineConfig,
        poster: Poster,
        *,
        clock: timers.Clock = timers.wall_time,
        rng: Optional[random.Random] = None,
    ) -> None:
        self._store = store
        self._config = config
        self._poster = poster
        self._clock = clock
        self._rng = rng or random.Random()
        self._state = SchedulerState.WAITING
        self._task: Optional[asyncio.Task] = None
        self._stop_event: Optional[asyncio.Event] = None

    @property
    def state(self) -> SchedulerState:
        return self._state

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def next_delay(self) -> float:
        return timers.randomized_delay_value(
            self._config.interval_min,
            self._config.interval_max,
            rng=self._rng,
        )

    async def fire_once(self, now: Optional[float] = None) -> Optional[str]:
        """Run one evict, select, post cycle.

        Returns the word that was posted, or None when the cycle was skipped
        or the post failed.
        """
        self._state = SchedulerState.FIRING
        try:
            timestamp = self._clock() if now is None else now
            removed = self._store.evict(timestamp, self._config.max_age)
            if removed:
                audit.log_eviction(
                    "forgot stale words",
                    removed=removed,
                    context=audit.LogContext(vocabulary_size=len(self._store)),
                )

            word = selector.select(
                self._store.snapshot(),
                self._config.max_boost,
                self._config.default_word,
                self._rng,
            )
            if word is None:
                logger.debug("scheduler_skipped", extra={"reason": "nothing_to_emit"})
                return None

            try:
                await self._poster(word)
            except PostError as exc:
                audit.log_error("post failed", context=audit.LogContext(word=word), error=exc)
                return None
            except Exception as exc:
                audit.log_error("unexpected post failure", context=audit.LogContext(word=word), error=exc)
                return None

            audit.log_emission(
                f"posted '{word}'",
                context=audit.LogContext(word=word, vocabulary_size=len(self._store)),
            )
            return word
        finally:
            self._state = SchedulerState.WAITING

    async def run(self) -> None:
        if self._stop_event is None:
            self._stop_event = asyncio.Event()
        stop_event = self._stop_event
        try:
            while not stop_event.is_set():
                self._state = SchedulerState.WAITING
                delay = self.next_delay()
                logger.info("scheduler_waiting", extra={"delay": delay})
                if await timers.wait_or_stop(stop_event, delay):
                    break
                try:
                    await self.fire_once()
                except Exception:
                    logger.exception("scheduler_cycle_error")
        except asyncio.CancelledError:
            logger.info("scheduler_cancelled")
            raise
        finally:
            self._state = SchedulerState.WAITING
        logger.info("scheduler_stopped")

    async def start(self) -> None:
        if self.running:
            return
        self._stop_event = asyncio.Event()
        self._task = asyncio.create_task(self.run())

    async def stop(self, grace_seconds: float = DEFAULT_STOP_GRACE_SECONDS) -> None:
        if not self._task:
            return
        if self._stop_event is not None:
            self._stop_event.set()
        task = self._task
        done, _ = await asyncio.wait({task}, timeout=grace_seconds)
        if not done:
            task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            pass
        self._task = None
