"""PlaybackNotifier implementation that posts to the queue channel."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import discord

from discord_video_queue.application.interfaces.notifier import PlaybackNotifier
from discord_video_queue.domain.shared.messages import DiscordUIMessages, LogTemplates

if TYPE_CHECKING:
    from discord.abc import Messageable
    from discord.ext import commands

    from ...domain.media.entities import MediaEntity

logger = logging.getLogger(__name__)


class DiscordChannelNotifier(PlaybackNotifier):
    def __init__(self, bot: commands.Bot, channel_id: int | None) -> None:
        self._bot = bot
        self._channel_id = channel_id

    async def now_playing(self, entity: MediaEntity) -> None:
        await self._send(
            DiscordUIMessages.NOW_PLAYING.format(
                url=entity.url,
                title=entity.title,
                duration=entity.duration_formatted,
                submitter=entity.submitter,
            )
        )

    async def playback_failed(self, entity: MediaEntity) -> None:
        await self._send(DiscordUIMessages.PLAYBACK_FAILED.format(url=entity.url))

    async def _send(self, content: str) -> None:
        if self._channel_id is None:
            return
        channel = await self._resolve_channel()
        if channel is None:
            logger.warning(LogTemplates.NOTIFY_CHANNEL_UNAVAILABLE, self._channel_id)
            return
        await channel.send(content)

    async def _resolve_channel(self) -> Messageable | None:
        channel = self._bot.get_channel(self._channel_id)
        if channel is None:
            try:
                channel = await self._bot.fetch_channel(self._channel_id)
            except discord.HTTPException:
                return None

        if not hasattr(channel, "send"):
            return None
        return channel  # type: ignore[return-value]
