"""Tests for MpvPlayer process supervision."""

from __future__ import annotations

import asyncio
from unittest.mock import AsyncMock, patch

import pytest

from conftest import make_entity
from discord_video_queue.application.services.cancellation import CancellationToken
from discord_video_queue.config.settings import PlayerSettings
from discord_video_queue.domain.media.value_objects import PlayOutcome
from discord_video_queue.infrastructure.media.mpv_player import MpvPlayer

SPAWN = "discord_video_queue.infrastructure.media.mpv_player.asyncio.create_subprocess_exec"


class FakeProcess:
    """Stand-in for asyncio.subprocess.Process."""

    def __init__(self, *, ignore_terminate: bool = False) -> None:
        self.pid = 4242
        self.returncode: int | None = None
        self.ignore_terminate = ignore_terminate
        self.terminated = False
        self.killed = False
        self._exited = asyncio.Event()

    def exit(self, code: int) -> None:
        self.returncode = code
        self._exited.set()

    async def wait(self) -> int:
        await self._exited.wait()
        return self.returncode

    def terminate(self) -> None:
        self.terminated = True
        if not self.ignore_terminate:
            self.exit(-15)

    def kill(self) -> None:
        self.killed = True
        self.exit(-9)


@pytest.fixture
def mpv() -> MpvPlayer:
    return MpvPlayer(PlayerSettings(terminate_timeout_seconds=0.1))


class TestBuildCommand:
    def test_default_command_plays_url(self):
        player = MpvPlayer()
        entity = make_entity("dQw4w9WgXcQ")

        assert player.build_command(entity) == [
            "mpv",
            "https://youtube.com/watch?v=dQw4w9WgXcQ",
        ]

    def test_extra_args_precede_url(self):
        player = MpvPlayer(PlayerSettings(executable="/usr/bin/mpv", extra_args=["--fs"]))
        entity = make_entity("dQw4w9WgXcQ")

        assert player.build_command(entity) == [
            "/usr/bin/mpv",
            "--fs",
            "https://youtube.com/watch?v=dQw4w9WgXcQ",
        ]


class TestPlay:
    @pytest.mark.asyncio
    async def test_zero_exit_is_completed(self, mpv):
        proc = FakeProcess()
        proc.exit(0)

        with patch(SPAWN, new=AsyncMock(return_value=proc)) as spawn:
            outcome = await mpv.play(make_entity("abc"), CancellationToken())

        assert outcome is PlayOutcome.COMPLETED
        assert spawn.await_args.args == ("mpv", "https://youtube.com/watch?v=abc")
        assert proc.terminated is False

    @pytest.mark.asyncio
    async def test_nonzero_exit_is_failed(self, mpv):
        proc = FakeProcess()
        proc.exit(2)

        with patch(SPAWN, new=AsyncMock(return_value=proc)):
            outcome = await mpv.play(make_entity("abc"), CancellationToken())

        assert outcome is PlayOutcome.FAILED

    @pytest.mark.asyncio
    async def test_missing_executable_is_failed(self, mpv):
        with patch(SPAWN, new=AsyncMock(side_effect=FileNotFoundError("mpv"))):
            outcome = await mpv.play(make_entity("abc"), CancellationToken())

        assert outcome is PlayOutcome.FAILED

    @pytest.mark.asyncio
    async def test_already_cancelled_token_never_spawns(self, mpv):
        token = CancellationToken()
        token.cancel()

        with patch(SPAWN, new=AsyncMock()) as spawn:
            outcome = await mpv.play(make_entity("abc"), token)

        assert outcome is PlayOutcome.CANCELLED
        spawn.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_cancel_terminates_and_reaps(self, mpv):
        proc = FakeProcess()
        token = CancellationToken()

        with patch(SPAWN, new=AsyncMock(return_value=proc)):
            task = asyncio.create_task(mpv.play(make_entity("abc"), token))
            await asyncio.sleep(0.01)
            token.cancel()
            outcome = await asyncio.wait_for(task, timeout=1.0)

        assert outcome is PlayOutcome.CANCELLED
        assert proc.terminated is True
        assert proc.killed is False
        assert proc.returncode == -15

    @pytest.mark.asyncio
    async def test_stubborn_process_is_killed(self, mpv):
        proc = FakeProcess(ignore_terminate=True)
        token = CancellationToken()

        with patch(SPAWN, new=AsyncMock(return_value=proc)):
            task = asyncio.create_task(mpv.play(make_entity("abc"), token))
            await asyncio.sleep(0.01)
            token.cancel()
            outcome = await asyncio.wait_for(task, timeout=1.0)

        assert outcome is PlayOutcome.CANCELLED
        assert proc.terminated is True
        assert proc.killed is True
        assert proc.returncode == -9

    @pytest.mark.asyncio
    async def test_task_cancellation_reaps_process(self, mpv):
        proc = FakeProcess()

        with patch(SPAWN, new=AsyncMock(return_value=proc)):
            task = asyncio.create_task(mpv.play(make_entity("abc"), CancellationToken()))
            await asyncio.sleep(0.01)
            task.cancel()
            with pytest.raises(asyncio.CancelledError):
                await task

        assert proc.terminated is True
        assert proc.returncode is not None
