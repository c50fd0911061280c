"""Immutable value objects for the media bounded context."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Final

from discord_video_queue.domain.shared.messages import ErrorMessages

YOUTUBE_ID_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"(?:youtube\.com/watch\?(?:[^\s#]*&)?v=|youtu\.be/|youtube\.com/embed/|youtube\.com/shorts/)"
    r"([a-zA-Z0-9_-]{11})"
)
_SOURCE_ID_CHARS: Final[re.Pattern[str]] = re.compile(r"^[\w-]+$")


@dataclass(frozen=True)
class SourceId:
    """Identifier of a playable video; currently always a YouTube video ID."""

    value: str

    def __post_init__(self) -> None:
        if not self.value or not self.value.strip():
            raise ValueError(ErrorMessages.EMPTY_SOURCE_ID)
        if not _SOURCE_ID_CHARS.match(self.value):
            raise ValueError(ErrorMessages.INVALID_SOURCE_ID.format(value=self.value))

    def __str__(self) -> str:
        return self.value

    @property
    def url(self) -> str:
        return f"https://youtube.com/watch?v={self.value}"

    @classmethod
    def find_all(cls, text: str) -> list[SourceId]:
        """Extract every video ID linked in free-form text, in order of appearance."""
        return [cls(match.group(1)) for match in YOUTUBE_ID_PATTERN.finditer(text)]


class PlaybackState(Enum):
    """Derived controller state.

    State transitions:
    - IDLE -> PLAYING (a playback task is installed)
    - PLAYING -> PLAYING (skip replaces the task)
    - PLAYING -> IDLE (the task drained the queue)
    """

    IDLE = "idle"
    PLAYING = "playing"

    @property
    def is_playing(self) -> bool:
        return self == PlaybackState.PLAYING


class PlayOutcome(Enum):
    """How a single media player run ended."""

    COMPLETED = "completed"
    CANCELLED = "cancelled"
    FAILED = "failed"
