"""Infrastructure layer - external systems integration.

This layer contains implementations for:
- Discord (bot, cogs, channel notifier)
- Media (yt-dlp metadata lookup, mpv player process)
"""

from discord_video_queue.infrastructure.discord.bot import create_bot
from discord_video_queue.infrastructure.media.mpv_player import MpvPlayer
from discord_video_queue.infrastructure.media.ytdlp_resolver import YtDlpMetadataResolver

__all__ = [
    "create_bot",
    "MpvPlayer",
    "YtDlpMetadataResolver",
]
