"""Pydantic models returned by the media queue service."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from ...domain.media.entities import MediaEntity
from ...domain.shared.types import NonNegativeInt


class QueueSnapshot(BaseModel):
    """Point-in-time view of the queue for display."""

    model_config = ConfigDict(frozen=True)

    items: tuple[MediaEntity, ...] = ()
    is_playing: bool = False
    now_playing: MediaEntity | None = None

    @property
    def pending_count(self) -> int:
        return len(self.items)

    @property
    def is_empty(self) -> bool:
        return not self.items and self.now_playing is None

    @property
    def total_duration_seconds(self) -> NonNegativeInt | None:
        """Sum of pending durations, or None if any pending item has unknown duration."""
        total = 0
        for item in self.items:
            if not item.duration_seconds:
                return None
            total += item.duration_seconds
        return total
