"""Errors raised by the chatter engine."""

from __future__ import annotations


class ConfigError(ValueError):
    """Configuration rejected at startup."""


class PostError(RuntimeError):
    """The poster could not deliver a word. Never fatal to the scheduler."""
