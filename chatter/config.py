"""
Engine Configuration — Startup Settings

THIS MODULE DEFINES NO COMMANDS.

Configuration is read once at startup and never reloaded.
Values come from the environment (a `.env` file is loaded by `bot.py`):

- PINOBOT_INTERVAL_MIN / PINOBOT_INTERVAL_MAX: seconds between posts
- PINOBOT_MAX_AGE: forget words unheard for this many seconds (unset = never)
- PINOBOT_EXCLUDE: comma-separated words that are never stored
- PINOBOT_MAX_BOOST: upper bound of the random weight added per word
- PINOBOT_DEFAULT_WORD: word posted when nothing has been heard
- PINOBOT_WORD_REGEX: only store words fully matching this pattern

Invalid values raise `ConfigError` before the scheduler starts.
"""

from __future__ import annotations

import math
import os
import re
from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, Mapping, Optional, Pattern

from chatter.errors import ConfigError

DEFAULT_INTERVAL_MIN = 600.0
DEFAULT_INTERVAL_MAX = 1200.0

ENV_PREFIX = "PINOBOT_"


@dataclass(frozen=True)
class EngineConfig:
    interval_min: float = DEFAULT_INTERVAL_MIN
    interval_max: float = DEFAULT_INTERVAL_MAX
    max_age: Optional[float] = None
    exclude: FrozenSet[str] = field(default_factory=frozenset)
    max_boost: float = 0.0
    default_word: Optional[str] = None
    word_pattern: Optional[Pattern[str]] = None

    def __post_init__(self) -> None:
        numbers = {
            "interval_min": self.interval_min,
            "interval_max": self.interval_max,
            "max_boost": self.max_boost,
        }
        if self.max_age is not None:
            numbers["max_age"] = self.max_age
        for name, value in numbers.items():
            if not math.isfinite(value):
                raise ConfigError(f"{name} must be a finite number, got {value!r}")
        if self.interval_min < 0 or self.interval_max < 0:
            raise ConfigError("interval bounds must be non-negative")
        if self.interval_min > self.interval_max:
            raise ConfigError(
                f"interval_min ({self.interval_min}) must be <= interval_max ({self.interval_max})"
            )
        if self.max_age is not None and self.max_age < 0:
            raise ConfigError("max_age must be non-negative")
        if self.max_boost < 0:
            raise ConfigError("max_boost must be non-negative")
        if not isinstance(self.exclude, frozenset):
            object.__setattr__(self, "exclude", frozenset(self.exclude))
        if self.default_word is not None and not self.default_word.strip():
            object.__setattr__(self, "default_word", None)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "EngineConfig":
        env = os.environ if environ is None else environ

        def _get(name: str) -> Optional[str]:
            raw = env.get(ENV_PREFIX + name)
            if raw is None or not raw.strip():
                return None
            return raw.strip()

        return cls(
            interval_min=_parse_float(_get("INTERVAL_MIN"), "INTERVAL_MIN", DEFAULT_INTERVAL_MIN),
            interval_max=_parse_float(_get("INTERVAL_MAX"), "INTERVAL_MAX", DEFAULT_INTERVAL_MAX),
            max_age=_parse_float(_get("MAX_AGE"), "MAX_AGE", None),
            exclude=frozenset(_split_words(_get("EXCLUDE") or "")),
            max_boost=_parse_float(_get("MAX_BOOST"), "MAX_BOOST", 0.0),
            default_word=_get("DEFAULT_WORD"),
            word_pattern=_compile_pattern(_get("WORD_REGEX")),
        )


def _parse_float(raw: Optional[str], name: str, default: Optional[float]) -> Optional[float]:
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError:
        raise ConfigError(f"{ENV_PREFIX}{name} must be a number, got {raw!r}") from None


def _split_words(raw: str) -> Iterable[str]:
    return [part.strip() for part in raw.split(",") if part.strip()]


def _compile_pattern(raw: Optional[str]) -> Optional[Pattern[str]]:
    if raw is None:
        return None
    try:
        return re.compile(raw)
    except re.error as exc:
        raise ConfigError(f"{ENV_PREFIX}WORD_REGEX is not a valid pattern: {exc}") from exc
