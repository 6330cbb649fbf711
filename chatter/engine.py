"""
Chatter Engine — Process Context for PinoBot's Core

THIS MODULE DEFINES NO COMMANDS.

Owns the single word store, the startup configuration and the scheduler.
The Discord client calls `ingest` for every inbound message and
`start`/`stop` around its own lifetime.
"""

from __future__ import annotations

import random
from typing import Optional

from chatter import ingest as ingestion
from chatter.config import EngineConfig
from chatter.scheduler import Poster, WordScheduler
from state.word_store import WordStore
from utils import timers


class ChatterEngine:
    def __init__(
        self,
        config: EngineConfig,
        poster: Poster,
        *,
        clock: timers.Clock = timers.wall_time,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.config = config
        self.store = WordStore(config.exclude, word_pattern=config.word_pattern)
        self._clock = clock
        self.scheduler = WordScheduler(
            self.store,
            config,
            poster,
            clock=clock,
            rng=rng,
        )

    def ingest(self, text: Optional[str], at: Optional[float] = None) -> int:
        return ingestion.ingest(self.store, text, self._clock() if at is None else at)

    async def start(self) -> None:
        await self.scheduler.start()

    async def stop(self) -> None:
        await self.scheduler.stop()
