"""In-memory FIFO store of pending media entities."""

from __future__ import annotations

import asyncio
import logging
from collections import deque
from typing import TYPE_CHECKING

from ...domain.shared.messages import LogTemplates

if TYPE_CHECKING:
    from ...domain.media.entities import MediaEntity

logger = logging.getLogger(__name__)


class QueueStore:
    """Ordered, exclusively-locked collection of pending media.

    Every operation holds the lock only around its deque manipulation and never
    awaits anything else while holding it. Consumption is destructive: an entity
    handed out by ``consume_front`` is no longer in the store.
    """

    def __init__(self) -> None:
        self._items: deque[MediaEntity] = deque()
        self._lock = asyncio.Lock()

    async def append(self, entity: MediaEntity) -> int:
        """Add ``entity`` at the tail and return its 1-based position."""
        async with self._lock:
            self._items.append(entity)
            position = len(self._items)
        logger.debug(LogTemplates.QUEUE_APPENDED, entity.source_id, position)
        return position

    async def consume_front(self) -> MediaEntity | None:
        """Remove and return the head, or None when the store is empty."""
        async with self._lock:
            if not self._items:
                return None
            entity = self._items.popleft()
            remaining = len(self._items)
        logger.debug(LogTemplates.QUEUE_CONSUMED, entity.source_id, remaining)
        return entity

    async def snapshot(self) -> tuple[MediaEntity, ...]:
        """Return a point-in-time copy in play order."""
        async with self._lock:
            return tuple(self._items)

    def __len__(self) -> int:
        return len(self._items)

    @property
    def is_empty(self) -> bool:
        return not self._items
