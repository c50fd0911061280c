"""Dependency Injection Container

Owns the process-wide queue store and playback controller and hands the same
instances to every command handler. Components are created on first access and
cached for the lifetime of the container.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..domain.shared.messages import ErrorMessages, LogTemplates

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from discord.ext.commands import Bot

    from ..application.interfaces.media_player import MediaPlayer
    from ..application.interfaces.metadata_resolver import MetadataResolver
    from ..application.interfaces.notifier import PlaybackNotifier
    from ..application.services.media_queue_service import MediaQueueService
    from ..application.services.playback_controller import PlaybackController
    from ..application.services.queue_store import QueueStore
    from .settings import Settings


@dataclass
class Container:
    """Dependency injection container.

    This container manages all application dependencies and their lifecycle.
    Components are lazily initialized when first accessed.
    """

    settings: Settings
    _bot: Bot | None = None

    # Infrastructure adapters
    _metadata_resolver: MetadataResolver | None = None
    _media_player: MediaPlayer | None = None
    _notifier: PlaybackNotifier | None = None

    # Core
    _queue_store: QueueStore | None = None
    _playback_controller: PlaybackController | None = None

    # Application services
    _media_queue_service: MediaQueueService | None = None

    def set_bot(self, bot: Bot) -> None:
        """Set the Discord bot instance."""
        self._bot = bot

    @property
    def bot(self) -> Bot:
        """Get the Discord bot instance."""
        if self._bot is None:
            raise RuntimeError(ErrorMessages.BOT_NOT_INITIALIZED)
        return self._bot

    # === Infrastructure Adapters ===

    @property
    def metadata_resolver(self) -> MetadataResolver:
        """Get the video metadata resolver."""
        if self._metadata_resolver is None:
            from ..infrastructure.media.ytdlp_resolver import YtDlpMetadataResolver

            self._metadata_resolver = YtDlpMetadataResolver(self.settings.metadata)
        return self._metadata_resolver

    @property
    def media_player(self) -> MediaPlayer:
        """Get the external media player supervisor."""
        if self._media_player is None:
            from ..infrastructure.media.mpv_player import MpvPlayer

            self._media_player = MpvPlayer(self.settings.player)
        return self._media_player

    @property
    def notifier(self) -> PlaybackNotifier:
        """Get the Discord channel notifier."""
        if self._notifier is None:
            from ..infrastructure.discord.notifier import DiscordChannelNotifier

            self._notifier = DiscordChannelNotifier(self.bot, self.settings.discord.channel_id)
        return self._notifier

    # === Core ===

    @property
    def queue_store(self) -> QueueStore:
        """Get the process-wide queue store."""
        if self._queue_store is None:
            from ..application.services.queue_store import QueueStore

            self._queue_store = QueueStore()
        return self._queue_store

    @property
    def playback_controller(self) -> PlaybackController:
        """Get the process-wide playback controller."""
        if self._playback_controller is None:
            from ..application.services.playback_controller import PlaybackController

            self._playback_controller = PlaybackController(
                queue_store=self.queue_store,
                media_player=self.media_player,
                notifier=self.notifier,
            )
        return self._playback_controller

    # === Application Services ===

    @property
    def media_queue_service(self) -> MediaQueueService:
        """Get the media queue service used by command handlers."""
        if self._media_queue_service is None:
            from ..application.services.media_queue_service import MediaQueueService

            self._media_queue_service = MediaQueueService(
                queue_store=self.queue_store,
                playback_controller=self.playback_controller,
                metadata_resolver=self.metadata_resolver,
                metadata_timeout=self.settings.metadata.timeout_seconds,
            )
        return self._media_queue_service

    # === Lifecycle ===

    async def shutdown(self) -> None:
        """Stop playback and reap the player process."""
        if self._playback_controller is not None:
            try:
                await self._playback_controller.shutdown()
            except Exception as exc:
                logger.warning(LogTemplates.PLAYBACK_SHUTDOWN_FAILED, exc)


def create_container(settings: Settings) -> Container:
    """Create a new dependency injection container."""
    return Container(settings)
