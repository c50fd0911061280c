"""Permission and channel guard functions for Discord cogs."""

from discord_video_queue.infrastructure.discord.guards.channel_guards import (
    can_skip,
    is_authorized_channel,
    is_maintainer,
    send_ephemeral,
)

__all__ = [
    "can_skip",
    "is_authorized_channel",
    "is_maintainer",
    "send_ephemeral",
]
