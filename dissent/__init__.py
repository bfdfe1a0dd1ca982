"""Helpers for a chat client: colour hashing, emoji, dimensions, events and naming."""

__version__ = "0.1.0"

__all__ = ["colorhash", "dimensions", "emoji", "handler", "naming"]