"""Media Queue Service - the operations exposed to chat command handlers."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from ...domain.media.entities import MediaEntity, MediaMetadata
from ...domain.shared.exceptions import MetadataUnavailableError
from ...domain.shared.messages import LogTemplates
from .queue_models import QueueSnapshot

if TYPE_CHECKING:
    from ...domain.media.entities import Submitter
    from ...domain.media.value_objects import SourceId
    from ..interfaces.metadata_resolver import MetadataResolver
    from .playback_controller import PlaybackController
    from .queue_store import QueueStore

logger = logging.getLogger(__name__)

DEFAULT_METADATA_TIMEOUT: float = 15.0


class MediaQueueService:
    """Enqueue, skip and snapshot, safe to call concurrently from many handlers.

    Calls only report that a request was accepted; nothing that happens inside
    the playback loop is propagated back to the caller.
    """

    def __init__(
        self,
        *,
        queue_store: QueueStore,
        playback_controller: PlaybackController,
        metadata_resolver: MetadataResolver,
        metadata_timeout: float = DEFAULT_METADATA_TIMEOUT,
    ) -> None:
        self._queue = queue_store
        self._controller = playback_controller
        self._resolver = metadata_resolver
        self._metadata_timeout = metadata_timeout

    async def enqueue(self, source_id: SourceId, submitter: Submitter) -> MediaEntity:
        """Resolve metadata, append the entity and start playback if idle."""
        metadata = await self._resolve_metadata(source_id)
        entity = MediaEntity.create(source_id, submitter, metadata)

        await self._queue.append(entity)
        logger.info(LogTemplates.LINK_ENQUEUED, entity.source_id, submitter.display_name)

        await self._controller.start_if_idle()
        return entity

    async def skip(self) -> None:
        """Abandon the current item and continue with the next one."""
        await self._controller.restart()

    async def snapshot(self) -> QueueSnapshot:
        items = await self._queue.snapshot()
        return QueueSnapshot(
            items=items,
            is_playing=self._controller.is_playing,
            now_playing=self._controller.now_playing,
        )

    async def _resolve_metadata(self, source_id: SourceId) -> MediaMetadata:
        """Look up metadata without holding any queue lock; never raises."""
        try:
            metadata = await asyncio.wait_for(
                self._resolver.resolve(source_id), timeout=self._metadata_timeout
            )
        except MetadataUnavailableError as e:
            logger.warning(LogTemplates.METADATA_FALLBACK, source_id, e.message)
            return MediaMetadata.unknown()
        except TimeoutError:
            logger.warning(LogTemplates.METADATA_TIMEOUT, source_id, self._metadata_timeout)
            return MediaMetadata.unknown()
        except Exception:
            logger.exception(LogTemplates.METADATA_UNEXPECTED_ERROR, source_id)
            return MediaMetadata.unknown()

        logger.debug(
            LogTemplates.METADATA_RESOLVED, source_id, metadata.title, metadata.duration_seconds
        )
        return metadata
