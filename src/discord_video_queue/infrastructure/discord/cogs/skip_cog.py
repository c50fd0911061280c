"""Slash-command cog for skipping the current video."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import discord
from discord import app_commands
from discord.ext import commands

from discord_video_queue.domain.shared.messages import (
    DiscordUIMessages,
    ErrorMessages,
    LogTemplates,
)
from discord_video_queue.infrastructure.discord.guards.channel_guards import (
    can_skip,
    send_ephemeral,
)

if TYPE_CHECKING:
    from ....config.container import Container

logger = logging.getLogger(__name__)


class SkipCog(commands.Cog):
    def __init__(self, bot: commands.Bot, container: Container) -> None:
        self.bot = bot
        self.container = container

    @app_commands.command(name="skip", description="Skip the current video (maintainers only).")
    async def skip(self, interaction: discord.Interaction) -> None:
        user = interaction.user
        if not can_skip(user, self.container.settings.discord.owner_ids):
            logger.info(LogTemplates.SKIP_DENIED, user, user.id)
            await send_ephemeral(interaction, DiscordUIMessages.SKIP_NOT_ALLOWED)
            return

        logger.info(LogTemplates.SKIP_REQUESTED, user, user.id)
        await self.container.media_queue_service.skip()
        await interaction.response.send_message(DiscordUIMessages.SKIP_ACCEPTED)


async def setup(bot: commands.Bot) -> None:
    container = getattr(bot, "container", None)
    if container is None:
        raise RuntimeError(ErrorMessages.CONTAINER_NOT_FOUND)

    await bot.add_cog(SkipCog(bot, container))
