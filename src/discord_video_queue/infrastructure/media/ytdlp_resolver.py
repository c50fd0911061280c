"""MetadataResolver implementation using yt-dlp."""

from __future__ import annotations

import asyncio
import logging
import time
from typing import Any, cast

from yt_dlp import YoutubeDL

from discord_video_queue.application.interfaces.metadata_resolver import MetadataResolver
from discord_video_queue.config.settings import MetadataSettings
from discord_video_queue.domain.media.entities import UNKNOWN_TITLE, MediaMetadata
from discord_video_queue.domain.media.value_objects import SourceId
from discord_video_queue.domain.shared.exceptions import MetadataUnavailableError
from discord_video_queue.domain.shared.messages import ErrorMessages, LogTemplates
from discord_video_queue.domain.shared.types import MAX_DURATION_SECONDS

from .models import CacheEntry, YtDlpOpts, YtDlpVideoInfo

logger = logging.getLogger(__name__)

MAX_TITLE_LENGTH = 500


class YtDlpMetadataResolver(MetadataResolver):
    """Looks up title and duration with yt-dlp in a worker thread.

    Successful lookups are cached per source ID for ``cache_ttl_seconds``;
    failures are not cached so a later post of the same link retries.
    """

    def __init__(self, settings: MetadataSettings | None = None) -> None:
        self._settings = settings or MetadataSettings()
        self._opts = YtDlpOpts(socket_timeout=self._settings.socket_timeout)
        self._cache: dict[str, CacheEntry] = {}

    async def resolve(self, source_id: SourceId) -> MediaMetadata:
        info = await asyncio.to_thread(self._extract_info_sync, source_id)
        return self._info_to_metadata(info)

    def _extract_info_sync(self, source_id: SourceId) -> YtDlpVideoInfo:
        key = source_id.value
        now = time.time()

        cached = self._cache.get(key)
        if cached is not None:
            if now - cached.cached_at < self._settings.cache_ttl_seconds:
                logger.debug(LogTemplates.CACHE_HIT, key)
                return cached.info
            self._cache.pop(key, None)

        try:
            with YoutubeDL(params=cast(Any, self._opts.model_dump())) as ydl:
                data = ydl.extract_info(source_id.url, download=False)
        except Exception as e:
            logger.debug(LogTemplates.YTDLP_EXTRACT_FAILED, key, exc_info=True)
            raise MetadataUnavailableError(key, str(e) or None) from e

        if not isinstance(data, dict):
            raise MetadataUnavailableError(
                key, ErrorMessages.METADATA_EMPTY_RESPONSE.format(source_id=key)
            )

        info = YtDlpVideoInfo.model_validate(data)
        self._store(key, info, now)
        return info

    def _store(self, key: str, info: YtDlpVideoInfo, now: float) -> None:
        self._cache[key] = CacheEntry(info=info, cached_at=now)

        if len(self._cache) > self._settings.cache_max_size:
            ttl = self._settings.cache_ttl_seconds
            expired = [k for k, entry in self._cache.items() if now - entry.cached_at >= ttl]
            for k in expired:
                self._cache.pop(k, None)
            if expired:
                logger.debug(LogTemplates.CACHE_EXPIRED_CLEANED, len(expired))
            # Still over budget: evict oldest entries first.
            while len(self._cache) > self._settings.cache_max_size:
                oldest = min(self._cache, key=lambda k: self._cache[k].cached_at)
                self._cache.pop(oldest, None)

    @staticmethod
    def _info_to_metadata(info: YtDlpVideoInfo) -> MediaMetadata:
        title = (info.title or UNKNOWN_TITLE)[:MAX_TITLE_LENGTH]
        duration = info.duration or 0
        if info.is_live or duration > MAX_DURATION_SECONDS:
            duration = 0
        return MediaMetadata(title=title, duration_seconds=duration)
