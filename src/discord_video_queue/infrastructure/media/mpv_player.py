"""
mpv Player Supervisor

Infrastructure component that runs one external media player process per
queued video and races its natural exit against a cancellation token.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from discord_video_queue.application.interfaces.media_player import MediaPlayer
from discord_video_queue.config.settings import PlayerSettings
from discord_video_queue.domain.media.value_objects import PlayOutcome
from discord_video_queue.domain.shared.messages import LogTemplates

if TYPE_CHECKING:
    from ...application.services.cancellation import CancellationToken
    from ...domain.media.entities import MediaEntity

logger = logging.getLogger(__name__)


class MpvPlayer(MediaPlayer):
    """Plays media through an external player process (mpv by default).

    On cancellation the process is sent SIGTERM, then SIGKILL if it has not
    exited within ``terminate_timeout_seconds``, and is always reaped before
    ``play`` returns.
    """

    def __init__(self, settings: PlayerSettings | None = None) -> None:
        """Initialize the player.

        Args:
            settings: Player settings from application config.
        """
        self._settings = settings or PlayerSettings()

    def build_command(self, entity: MediaEntity) -> list[str]:
        """Build the argv used to play ``entity``."""
        return [self._settings.executable, *self._settings.extra_args, entity.url]

    async def play(self, entity: MediaEntity, cancel_token: CancellationToken) -> PlayOutcome:
        """Play ``entity`` until it finishes or ``cancel_token`` fires.

        Returns:
            COMPLETED on a zero exit code, FAILED when the process could not be
            started or exited non-zero, CANCELLED when the token won the race.
        """
        if cancel_token.is_cancelled():
            return PlayOutcome.CANCELLED

        cmd = self.build_command(entity)
        try:
            process = await asyncio.create_subprocess_exec(
                *cmd,
                stdin=asyncio.subprocess.DEVNULL,
                stdout=asyncio.subprocess.DEVNULL,
                stderr=asyncio.subprocess.DEVNULL,
            )
        except OSError as e:
            logger.error(LogTemplates.PLAYER_SPAWN_FAILED, cmd[0], entity.source_id, e)
            return PlayOutcome.FAILED

        logger.debug(LogTemplates.PLAYER_SPAWNED, cmd[0], process.pid, entity.source_id)

        exit_waiter = asyncio.create_task(process.wait())
        cancel_waiter = asyncio.create_task(cancel_token.wait())
        try:
            done, _ = await asyncio.wait(
                {exit_waiter, cancel_waiter}, return_when=asyncio.FIRST_COMPLETED
            )
        except asyncio.CancelledError:
            await self._terminate(process)
            raise
        finally:
            for waiter in (exit_waiter, cancel_waiter):
                if not waiter.done():
                    waiter.cancel()

        if exit_waiter in done:
            returncode = exit_waiter.result()
            logger.debug(LogTemplates.PLAYER_EXITED, entity.source_id, returncode)
            return PlayOutcome.COMPLETED if returncode == 0 else PlayOutcome.FAILED

        await self._terminate(process)
        return PlayOutcome.CANCELLED

    async def _terminate(self, process: asyncio.subprocess.Process) -> None:
        """Stop ``process`` and wait for it to be reaped."""
        if process.returncode is not None:
            logger.debug(LogTemplates.PLAYER_ALREADY_GONE, process.pid)
            return

        logger.debug(LogTemplates.PLAYER_TERMINATING, process.pid)
        try:
            process.terminate()
        except ProcessLookupError:
            pass

        timeout = self._settings.terminate_timeout_seconds
        try:
            await asyncio.wait_for(process.wait(), timeout=timeout)
        except TimeoutError:
            logger.warning(LogTemplates.PLAYER_KILLING, process.pid, timeout)
            try:
                process.kill()
            except ProcessLookupError:
                pass
            await process.wait()

        logger.debug(LogTemplates.PLAYER_REAPED, process.pid, process.returncode)
