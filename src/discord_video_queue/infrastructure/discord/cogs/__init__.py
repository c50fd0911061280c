"""Discord cogs - command handlers."""

from discord_video_queue.infrastructure.discord.cogs.info_cog import InfoCog
from discord_video_queue.infrastructure.discord.cogs.link_cog import LinkCog
from discord_video_queue.infrastructure.discord.cogs.queue_cog import QueueCog
from discord_video_queue.infrastructure.discord.cogs.skip_cog import SkipCog

__all__ = [
    "LinkCog",
    "QueueCog",
    "SkipCog",
    "InfoCog",
]
