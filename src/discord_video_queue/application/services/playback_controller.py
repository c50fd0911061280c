"""Playback Controller - owns the single active playback task.

The controller keeps one cancellation token (the *handle*) identifying the
authoritative playback task. ``restart`` cancels the installed handle and
installs a fresh one inside the same critical section, so callers never observe
an idle gap during a skip. Each task runs the consume-play loop and only checks
for supersession after the player returns; a superseded task therefore never
consumes a second item.

The queue store lock and the handle lock are never held at the same time.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ...domain.media.value_objects import PlaybackState, PlayOutcome
from ...domain.shared.messages import LogTemplates
from .cancellation import CancellationToken

if TYPE_CHECKING:
    from ...domain.media.entities import MediaEntity
    from ..interfaces.media_player import MediaPlayer
    from ..interfaces.notifier import PlaybackNotifier
    from .queue_store import QueueStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NowPlaying:
    token: CancellationToken
    entity: MediaEntity


class PlaybackController:
    """Drives the consume -> play -> consume loop with at most one live task."""

    def __init__(
        self,
        *,
        queue_store: QueueStore,
        media_player: MediaPlayer,
        notifier: PlaybackNotifier | None = None,
    ) -> None:
        self._queue = queue_store
        self._player = media_player
        self._notifier = notifier

        self._handle_lock = asyncio.Lock()
        self._handle: CancellationToken | None = None
        self._now_playing: NowPlaying | None = None
        self._stopped = False

        # Strong references so running tasks are not garbage collected.
        self._tasks: set[asyncio.Task[None]] = set()

    # === State ===

    @property
    def state(self) -> PlaybackState:
        return PlaybackState.PLAYING if self._handle is not None else PlaybackState.IDLE

    @property
    def is_playing(self) -> bool:
        return self.state.is_playing

    @property
    def current_handle(self) -> CancellationToken | None:
        return self._handle

    @property
    def now_playing(self) -> MediaEntity | None:
        current = self._now_playing
        return current.entity if current is not None else None

    # === Start / replace / stop protocol ===

    async def start_if_idle(self) -> bool:
        """Start a playback task unless one is already installed.

        Returns True if a new task was launched.
        """
        async with self._handle_lock:
            if self._stopped:
                return False
            if self._handle is not None:
                logger.debug(LogTemplates.PLAYBACK_ALREADY_ACTIVE)
                return False
            token = self._install_handle()
        self._spawn(token)
        return True

    async def restart(self) -> None:
        """Cancel the current task (if any) and launch a fresh one.

        The previous task is signalled but not awaited; it stops on its own once
        its player call returns.
        """
        async with self._handle_lock:
            if self._stopped:
                return
            previous = self._handle
            if previous is not None:
                previous.cancel()
            token = self._install_handle()
        logger.info(LogTemplates.PLAYBACK_RESTART, previous is not None)
        self._spawn(token)

    async def shutdown(self) -> None:
        """Cancel the active task and wait for every task to finish."""
        async with self._handle_lock:
            self._stopped = True
            if self._handle is not None:
                self._handle.cancel()
                self._handle = None
        pending = list(self._tasks)
        logger.info(LogTemplates.PLAYBACK_SHUTDOWN, len(pending))
        if pending:
            await asyncio.gather(*pending, return_exceptions=True)

    async def wait_until_idle(self) -> None:
        """Wait until no playback task is running, including ones spawned meanwhile."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

    def _install_handle(self) -> CancellationToken:
        # Caller must hold ``_handle_lock``.
        token = CancellationToken()
        self._handle = token
        return token

    async def _release_handle(self, token: CancellationToken) -> None:
        async with self._handle_lock:
            if self._handle is token:
                self._handle = None

    def _spawn(self, token: CancellationToken) -> None:
        task = asyncio.create_task(self._run(token), name=f"playback-{token.id}")
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        logger.debug(LogTemplates.PLAYBACK_TASK_SPAWNED, token)

    # === Playback task ===

    async def _run(self, token: CancellationToken) -> None:
        drained = False
        try:
            drained = await self._consume_play_loop(token)
        except Exception:
            logger.exception(LogTemplates.PLAYBACK_TASK_CRASHED, token)
        finally:
            await self._release_handle(token)
            token.cancel()

        # An enqueue may have seen our handle just before we released it.
        if drained and not self._queue.is_empty:
            logger.info(LogTemplates.PLAYBACK_REQUEUED_AFTER_IDLE)
            await self.start_if_idle()

    async def _consume_play_loop(self, token: CancellationToken) -> bool:
        """Play queued items until the queue drains (True) or the token is superseded (False)."""
        while True:
            entity = await self._queue.consume_front()
            if entity is None:
                logger.info(LogTemplates.PLAYBACK_TASK_IDLE, token)
                return True

            self._now_playing = NowPlaying(token, entity)
            try:
                await self._announce(entity)
                outcome = await self._play(entity, token)
            finally:
                current = self._now_playing
                if current is not None and current.token is token:
                    self._now_playing = None

            if token.is_cancelled():
                logger.info(LogTemplates.PLAYBACK_TASK_SUPERSEDED, token)
                return False

            if outcome is PlayOutcome.FAILED:
                logger.warning(LogTemplates.PLAYBACK_FAILED, entity.source_id)
                await self._report_failure(entity)

    async def _play(self, entity: MediaEntity, token: CancellationToken) -> PlayOutcome:
        try:
            outcome = await self._player.play(entity, token)
        except Exception:
            logger.exception(LogTemplates.PLAYBACK_PLAYER_ERROR, entity.source_id)
            outcome = PlayOutcome.FAILED
        logger.info(LogTemplates.PLAYBACK_FINISHED, entity.source_id, outcome.value)
        return outcome

    async def _announce(self, entity: MediaEntity) -> None:
        logger.info(LogTemplates.PLAYBACK_NOW_PLAYING, entity)
        if self._notifier is None:
            return
        try:
            await self._notifier.now_playing(entity)
        except Exception as e:
            logger.warning(LogTemplates.PLAYBACK_ANNOUNCE_FAILED, entity.source_id, e)

    async def _report_failure(self, entity: MediaEntity) -> None:
        if self._notifier is None:
            return
        try:
            await self._notifier.playback_failed(entity)
        except Exception as e:
            logger.warning(LogTemplates.PLAYBACK_ANNOUNCE_FAILED, entity.source_id, e)
