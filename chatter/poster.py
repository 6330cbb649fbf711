"""
Channel Poster — Delivering Chosen Words to Discord

THIS MODULE DEFINES NO COMMANDS.

Responsibilities:
- Remember the channel the most recent message arrived in
- Send chosen words to that channel
- Report delivery problems as `PostError`

PinoBot answers wherever people last talked.
"""

from __future__ import annotations

import logging
import threading
from typing import Optional

import discord

from chatter.errors import PostError
from utils.text import normalize_whitespace

logger = logging.getLogger(__name__)

MAX_MESSAGE_LENGTH = 1900


class ChannelPoster:
    def __init__(self) -> None:
        self._channel: Optional[discord.abc.Messageable] = None
        self._lock = threading.Lock()

    @property
    def channel(self) -> Optional[discord.abc.Messageable]:
        with self._lock:
            return self._channel

    def remember(self, channel: discord.abc.Messageable) -> None:
        with self._lock:
            self._channel = channel

    async def __call__(self, word: str) -> None:
        channel = self.channel
        if channel is None:
            raise PostError("Most recent channel is unknown, type some text to set it")

        content = normalize_whitespace(word)[:MAX_MESSAGE_LENGTH]
        if not content:
            raise PostError("Refusing to post an empty message")

        try:
            await channel.send(content, allowed_mentions=discord.AllowedMentions.none())
        except discord.DiscordException as exc:
            raise PostError(f"Error sending message: {exc}") from exc

        logger.info(
            "poster_sent",
            extra={"word": content, "channel_id": getattr(channel, "id", None)},
        )
