"""Slash-command cog for viewing the queue."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import discord
from discord import app_commands
from discord.ext import commands

from discord_video_queue.domain.shared.messages import DiscordUIMessages, ErrorMessages
from discord_video_queue.utils.reply import format_duration, truncate

if TYPE_CHECKING:
    from ....application.services.queue_models import QueueSnapshot
    from ....config.container import Container
    from ....domain.media.entities import MediaEntity

logger = logging.getLogger(__name__)

QUEUE_MAX_LINES = 15
MESSAGE_MAX_LENGTH = 2000


def _duration(entity: MediaEntity) -> str:
    return format_duration(entity.duration_seconds or None)


def render_queue(
    snapshot: QueueSnapshot,
    max_lines: int = QUEUE_MAX_LINES,
    max_length: int = MESSAGE_MAX_LENGTH,
) -> str:
    """Render a queue snapshot as a plain chat message.

    Pending lines that would push the message past ``max_length`` are left out
    and counted in the trailing "and N more" line.
    """
    lines = [DiscordUIMessages.QUEUE_HEADER]

    current = snapshot.now_playing
    if current is not None:
        lines.append(
            DiscordUIMessages.QUEUE_NOW_PLAYING_LINE.format(
                title=truncate(current.title),
                duration=_duration(current),
                submitter=current.submitter,
            )
        )

    if not snapshot.items and current is None:
        lines.append(DiscordUIMessages.QUEUE_EMPTY)

    status = (
        DiscordUIMessages.STATUS_PLAYING
        if snapshot.is_playing
        else DiscordUIMessages.STATUS_NOT_PLAYING
    )
    footer = ["", DiscordUIMessages.QUEUE_STATUS.format(status=status)]
    # Room for the overflow line is reserved whether or not it ends up used.
    reserved = len(DiscordUIMessages.QUEUE_MORE.format(count=snapshot.pending_count)) + 1
    used = len("\n".join(lines + footer)) + reserved

    shown = 0
    for item in snapshot.items[:max_lines]:
        line = DiscordUIMessages.QUEUE_ITEM_LINE.format(
            title=truncate(item.title),
            duration=_duration(item),
            submitter=item.submitter,
        )
        if used + len(line) + 1 > max_length:
            break
        lines.append(line)
        used += len(line) + 1
        shown += 1

    hidden = snapshot.pending_count - shown
    if hidden > 0:
        lines.append(DiscordUIMessages.QUEUE_MORE.format(count=hidden))

    return "\n".join(lines + footer)


class QueueCog(commands.Cog):
    def __init__(self, bot: commands.Bot, container: Container) -> None:
        self.bot = bot
        self.container = container

    @app_commands.command(name="queue", description="Show the current queue.")
    async def queue(self, interaction: discord.Interaction) -> None:
        snapshot = await self.container.media_queue_service.snapshot()
        await interaction.response.send_message(render_queue(snapshot))


async def setup(bot: commands.Bot) -> None:
    container = getattr(bot, "container", None)
    if container is None:
        raise RuntimeError(ErrorMessages.CONTAINER_NOT_FOUND)

    await bot.add_cog(QueueCog(bot, container))
