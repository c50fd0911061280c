"""Message listener that turns YouTube links posted in the queue channel into queue items."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import discord
from discord.ext import commands

from discord_video_queue.domain.media.entities import Submitter
from discord_video_queue.domain.media.value_objects import SourceId
from discord_video_queue.domain.shared.messages import (
    DiscordUIMessages,
    ErrorMessages,
    LogTemplates,
)
from discord_video_queue.infrastructure.discord.guards.channel_guards import (
    is_authorized_channel,
    is_maintainer,
)
from discord_video_queue.utils.reply import plural_suffix

if TYPE_CHECKING:
    from ....config.container import Container

logger = logging.getLogger(__name__)


class LinkCog(commands.Cog):
    def __init__(self, bot: commands.Bot, container: Container) -> None:
        self.bot = bot
        self.container = container

    @commands.Cog.listener()
    async def on_message(self, message: discord.Message) -> None:
        if message.author.bot:
            return

        discord_settings = self.container.settings.discord
        if message.content.startswith(discord_settings.command_prefix):
            return

        if message.guild is None:
            if not is_maintainer(message.author, discord_settings.owner_ids):
                logger.info(
                    LogTemplates.PRIVATE_MESSAGE_REJECTED, message.author, message.author.id
                )
                await message.reply(DiscordUIMessages.PRIVATE_NOT_AUTHORIZED)
            return

        if not is_authorized_channel(message.channel.id, discord_settings.channel_id):
            return

        await self._enqueue_links(message)

    async def _enqueue_links(self, message: discord.Message) -> None:
        source_ids = SourceId.find_all(message.content)
        count = len(source_ids)
        if count == 0:
            return

        logger.info(LogTemplates.LINKS_FOUND, count, message.author, message.channel.id)
        await message.reply(
            DiscordUIMessages.LINKS_ADDED.format(count=count, plural=plural_suffix(count))
        )

        submitter = Submitter(
            user_id=message.author.id,
            display_name=message.author.display_name or message.author.name,
        )
        service = self.container.media_queue_service
        for source_id in source_ids:
            await service.enqueue(source_id, submitter)


async def setup(bot: commands.Bot) -> None:
    container = getattr(bot, "container", None)
    if container is None:
        raise RuntimeError(ErrorMessages.CONTAINER_NOT_FOUND)

    await bot.add_cog(LinkCog(bot, container))
