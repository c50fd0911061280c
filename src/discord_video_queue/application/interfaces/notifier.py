"""Port interface for user-visible playback announcements."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ...domain.media.entities import MediaEntity


class PlaybackNotifier(ABC):
    """Best-effort announcements; callers log and ignore any exception."""

    @abstractmethod
    async def now_playing(self, entity: MediaEntity) -> None:
        ...

    @abstractmethod
    async def playback_failed(self, entity: MediaEntity) -> None:
        ...
