"""Player names and score records."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ScoreEntry:
    """A player's name and the score reached."""

    name: str
    score: int


def normalize_username(text: str | None) -> str:
    """Trim a user name, rejecting a missing or blank one."""
    if text is None or not text.strip():
        raise ValueError("Please enter a user name.")
    return text.strip()