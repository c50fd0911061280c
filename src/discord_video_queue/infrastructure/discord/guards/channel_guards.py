"""Reusable permission and channel guard functions for Discord handlers.

These are free functions that accept explicit dependencies rather than relying
on a specific cog instance, making them usable from any cog.
"""

from __future__ import annotations

from collections.abc import Collection

import discord


async def send_ephemeral(interaction: discord.Interaction, message: str) -> None:
    """Send an ephemeral message, handling both fresh and already-responded interactions."""
    if interaction.response.is_done():
        await interaction.followup.send(message, ephemeral=True)
    else:
        await interaction.response.send_message(message, ephemeral=True)


def is_maintainer(user: discord.abc.User, owner_ids: Collection[int]) -> bool:
    """Check if the user is listed as a bot maintainer."""
    return user.id in owner_ids


def can_skip(user: discord.abc.User, owner_ids: Collection[int]) -> bool:
    """Check if the user is a bot maintainer or a server administrator."""
    if is_maintainer(user, owner_ids):
        return True
    permissions = getattr(user, "guild_permissions", None)
    return bool(permissions is not None and permissions.administrator)


def is_authorized_channel(channel_id: int | None, authorized_channel_id: int | None) -> bool:
    """Check whether ``channel_id`` is the configured queue channel.

    With no channel configured every channel is accepted.
    """
    if authorized_channel_id is None:
        return True
    return channel_id == authorized_channel_id
