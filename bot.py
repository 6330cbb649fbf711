"""
PinoBot — Word Parrot Discord Bot (Main Entry Point)

This file initializes and runs PinoBot.

Responsibilities of this file ONLY:
- Create the Discord client instance
- Load configuration and environment variables
- Feed inbound messages to the chatter engine
- Start and stop the background posting loop
- Start the bot

IMPORTANT ARCHITECTURE RULES:
- All word memory, selection and scheduling logic lives in modules, not in this file.
- The bot never learns from its own messages.

PinoBot listens to the chat, remembers which words people keep saying,
and every so often parrots one of them back, favouring the popular ones.
"""

from __future__ import annotations

import logging
import os

import discord
from dotenv import load_dotenv

from chatter.config import EngineConfig
from chatter.engine import ChatterEngine
from chatter.poster import ChannelPoster


LOG_LEVEL = os.getenv("PINOBOT_LOG_LEVEL", "INFO").upper()
logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger("pinobot")


def _build_intents() -> discord.Intents:
    intents = discord.Intents.default()
    intents.message_content = True
    return intents


class PinoClient(discord.Client):
    def __init__(self, engine: ChatterEngine, poster: ChannelPoster) -> None:
        super().__init__(intents=_build_intents())
        self.engine = engine
        self.poster = poster

    async def on_ready(self) -> None:
        logger.info("PinoBot connected as %s", self.user)
        await self.engine.start()

    async def on_message(self, message: discord.Message) -> None:
        if self.user is not None and message.author.id == self.user.id:
            return
        self.poster.remember(message.channel)
        self.engine.ingest(message.content, message.created_at.timestamp())

    async def close(self) -> None:
        await self.engine.stop()
        await super().close()


def _build_bot(config: EngineConfig) -> PinoClient:
    poster = ChannelPoster()
    engine = ChatterEngine(config, poster)
    return PinoClient(engine, poster)


def main() -> None:
    load_dotenv()

    token = os.getenv("DISCORD_TOKEN")
    if not token:
        raise RuntimeError("Missing DISCORD_TOKEN environment variable.")

    config = EngineConfig.from_env()
    logger.info(
        "Starting PinoBot",
        extra={
            "interval_min": config.interval_min,
            "interval_max": config.interval_max,
            "max_age": config.max_age,
            "max_boost": config.max_boost,
        },
    )

    bot = _build_bot(config)
    bot.run(token, log_handler=None)


if __name__ == "__main__":
    main()
