"""Core domain entities for the media bounded context."""

from __future__ import annotations

from typing import ClassVar

from pydantic import BaseModel, ConfigDict

from discord_video_queue.domain.media.value_objects import SourceId
from discord_video_queue.domain.shared.types import (
    DiscordSnowflake,
    DurationSeconds,
    MediaTitleStr,
    NonEmptyStr,
)

UNKNOWN_TITLE = "Unknown"


class Submitter(BaseModel):
    """The chat user who posted a link."""

    model_config = ConfigDict(frozen=True, strict=True)

    user_id: DiscordSnowflake
    display_name: NonEmptyStr

    def __str__(self) -> str:
        return self.display_name


class MediaMetadata(BaseModel):
    """Display metadata resolved for a source."""

    model_config = ConfigDict(frozen=True, strict=True)

    title: MediaTitleStr = UNKNOWN_TITLE
    duration_seconds: DurationSeconds = 0

    @classmethod
    def unknown(cls) -> MediaMetadata:
        return cls()

    @property
    def is_unknown(self) -> bool:
        return self.title == UNKNOWN_TITLE and self.duration_seconds == 0


class MediaEntity(BaseModel):
    """Immutable description of one queued video."""

    model_config = ConfigDict(frozen=True, strict=True)

    ICON: ClassVar[str] = "\U0001f3ac"

    source_id: SourceId
    title: MediaTitleStr = UNKNOWN_TITLE
    duration_seconds: DurationSeconds = 0
    submitter: Submitter

    @classmethod
    def create(
        cls, source_id: SourceId, submitter: Submitter, metadata: MediaMetadata | None = None
    ) -> MediaEntity:
        meta = metadata or MediaMetadata.unknown()
        return cls(
            source_id=source_id,
            title=meta.title,
            duration_seconds=meta.duration_seconds,
            submitter=submitter,
        )

    @property
    def url(self) -> str:
        return self.source_id.url

    @property
    def duration_formatted(self) -> str:
        """Format duration as MM:SS or HH:MM:SS; zero means unknown."""
        if not self.duration_seconds:
            return UNKNOWN_TITLE

        hours, remainder = divmod(self.duration_seconds, 3600)
        minutes, seconds = divmod(remainder, 60)

        if hours > 0:
            return f"{hours}:{minutes:02d}:{seconds:02d}"
        return f"{minutes}:{seconds:02d}"

    @property
    def display_title(self) -> str:
        if self.duration_seconds:
            return f"{self.title} [{self.duration_formatted}]"
        return self.title

    def __str__(self) -> str:
        return f"{self.ICON} {self.url}"
