"""Tests for LinkCog - the queue channel message listener."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import discord
import pytest

from discord_video_queue.domain.media.value_objects import SourceId
from discord_video_queue.domain.shared.messages import DiscordUIMessages
from discord_video_queue.infrastructure.discord.cogs.link_cog import LinkCog, setup

QUEUE_CHANNEL = 555
MAINTAINER = 999


@pytest.fixture
def mock_container():
    container = MagicMock()
    container.settings.discord.command_prefix = "!"
    container.settings.discord.owner_ids = (MAINTAINER,)
    container.settings.discord.channel_id = QUEUE_CHANNEL
    container.media_queue_service.enqueue = AsyncMock()
    return container


@pytest.fixture
def cog(mock_container):
    return LinkCog(MagicMock(), mock_container)


def _message(
    content: str,
    *,
    channel_id: int = QUEUE_CHANNEL,
    author_id: int = 222,
    in_guild: bool = True,
    is_bot: bool = False,
) -> MagicMock:
    message = MagicMock(spec=discord.Message)
    message.content = content
    message.reply = AsyncMock()
    message.guild = MagicMock() if in_guild else None
    message.channel = MagicMock()
    message.channel.id = channel_id
    message.author = MagicMock()
    message.author.id = author_id
    message.author.bot = is_bot
    message.author.display_name = "TestUser"
    message.author.name = "testuser"
    return message


class TestQueueChannel:
    @pytest.mark.asyncio
    async def test_single_link_is_enqueued(self, cog, mock_container):
        message = _message("check this https://youtu.be/dQw4w9WgXcQ")

        await cog.on_message(message)

        message.reply.assert_awaited_once_with(
            DiscordUIMessages.LINKS_ADDED.format(count=1, plural="")
        )
        enqueue = mock_container.media_queue_service.enqueue
        enqueue.assert_awaited_once()
        source_id, submitter = enqueue.await_args.args
        assert source_id == SourceId("dQw4w9WgXcQ")
        assert submitter.user_id == 222
        assert submitter.display_name == "TestUser"

    @pytest.mark.asyncio
    async def test_multiple_links_enqueued_in_order(self, cog, mock_container):
        message = _message(
            "https://youtu.be/aaaaaaaaaaa https://www.youtube.com/watch?v=bbbbbbbbbbb"
        )

        await cog.on_message(message)

        message.reply.assert_awaited_once_with("Added 2 videos to queue!")
        calls = mock_container.media_queue_service.enqueue.await_args_list
        assert [c.args[0].value for c in calls] == ["aaaaaaaaaaa", "bbbbbbbbbbb"]

    @pytest.mark.asyncio
    async def test_message_without_links_is_ignored(self, cog, mock_container):
        message = _message("good morning")

        await cog.on_message(message)

        message.reply.assert_not_awaited()
        mock_container.media_queue_service.enqueue.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_other_channel_is_ignored(self, cog, mock_container):
        message = _message("https://youtu.be/dQw4w9WgXcQ", channel_id=777)

        await cog.on_message(message)

        mock_container.media_queue_service.enqueue.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_any_channel_when_none_configured(self, cog, mock_container):
        mock_container.settings.discord.channel_id = None
        message = _message("https://youtu.be/dQw4w9WgXcQ", channel_id=777)

        await cog.on_message(message)

        mock_container.media_queue_service.enqueue.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_bot_messages_are_ignored(self, cog, mock_container):
        message = _message("https://youtu.be/dQw4w9WgXcQ", is_bot=True)

        await cog.on_message(message)

        mock_container.media_queue_service.enqueue.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_prefixed_commands_are_ignored(self, cog, mock_container):
        message = _message("!play https://youtu.be/dQw4w9WgXcQ")

        await cog.on_message(message)

        mock_container.media_queue_service.enqueue.assert_not_awaited()


class TestPrivateMessages:
    @pytest.mark.asyncio
    async def test_non_maintainer_is_rejected(self, cog, mock_container):
        message = _message("https://youtu.be/dQw4w9WgXcQ", in_guild=False)

        await cog.on_message(message)

        message.reply.assert_awaited_once_with(DiscordUIMessages.PRIVATE_NOT_AUTHORIZED)
        mock_container.media_queue_service.enqueue.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_maintainer_is_not_rejected(self, cog, mock_container):
        message = _message("hello", in_guild=False, author_id=MAINTAINER)

        await cog.on_message(message)

        message.reply.assert_not_awaited()
        mock_container.media_queue_service.enqueue.assert_not_awaited()


class TestSetup:
    @pytest.mark.asyncio
    async def test_setup_adds_cog(self, mock_container):
        bot = MagicMock()
        bot.container = mock_container
        bot.add_cog = AsyncMock()

        await setup(bot)

        bot.add_cog.assert_awaited_once()
        assert isinstance(bot.add_cog.await_args.args[0], LinkCog)

    @pytest.mark.asyncio
    async def test_setup_requires_container(self):
        bot = MagicMock(spec=[])

        with pytest.raises(RuntimeError):
            await setup(bot)
