"""Shared fixtures and in-memory fakes for the video queue tests."""

from __future__ import annotations

import asyncio

import pytest
import pytest_asyncio

from discord_video_queue.application.interfaces.media_player import MediaPlayer
from discord_video_queue.application.interfaces.metadata_resolver import MetadataResolver
from discord_video_queue.application.interfaces.notifier import PlaybackNotifier
from discord_video_queue.application.services.cancellation import CancellationToken
from discord_video_queue.application.services.playback_controller import PlaybackController
from discord_video_queue.application.services.queue_store import QueueStore
from discord_video_queue.domain.media.entities import MediaEntity, MediaMetadata, Submitter
from discord_video_queue.domain.media.value_objects import PlayOutcome, SourceId
from discord_video_queue.domain.shared.exceptions import MetadataUnavailableError


# ============================================================================
# Builders
# ============================================================================


def make_submitter(user_id: int = 1001, name: str = "alice") -> Submitter:
    return Submitter(user_id=user_id, display_name=name)


def make_entity(
    video_id: str = "dQw4w9WgXcQ",
    *,
    title: str = "Some video",
    duration: int = 212,
    submitter: Submitter | None = None,
) -> MediaEntity:
    return MediaEntity.create(
        SourceId(video_id),
        submitter or make_submitter(),
        MediaMetadata(title=title, duration_seconds=duration),
    )


async def wait_for(predicate, timeout: float = 1.0) -> None:
    """Yield to the loop until ``predicate()`` is true."""

    async def _poll() -> None:
        while not predicate():
            await asyncio.sleep(0)

    await asyncio.wait_for(_poll(), timeout=timeout)


# ============================================================================
# Fakes
# ============================================================================


class FakePlayer(MediaPlayer):
    """Scriptable media player.

    With ``auto_complete`` each item finishes right away; otherwise an item runs
    until ``finish(video_id)`` is called or its token is cancelled.
    """

    def __init__(self, *, auto_complete: bool = True) -> None:
        self.auto_complete = auto_complete
        self.calls: list[MediaEntity] = []
        self.played: list[MediaEntity] = []
        self.cancelled: list[MediaEntity] = []
        self.outcomes: dict[str, PlayOutcome] = {}
        self.errors: dict[str, Exception] = {}
        self.live_tokens: set[CancellationToken] = set()
        self.max_live = 0
        self._finish: dict[str, asyncio.Event] = {}

    def finish(self, video_id: str) -> None:
        self._finish.setdefault(video_id, asyncio.Event()).set()

    @property
    def played_ids(self) -> list[str]:
        return [e.source_id.value for e in self.played]

    async def play(self, entity: MediaEntity, cancel_token: CancellationToken) -> PlayOutcome:
        self.calls.append(entity)
        if cancel_token.is_cancelled():
            self.cancelled.append(entity)
            return PlayOutcome.CANCELLED

        key = entity.source_id.value
        self.played.append(entity)
        self.live_tokens.add(cancel_token)
        live = sum(1 for t in self.live_tokens if not t.is_cancelled())
        self.max_live = max(self.max_live, live)
        try:
            if key in self.errors:
                raise self.errors[key]

            if self.auto_complete:
                await asyncio.sleep(0)
                return self.outcomes.get(key, PlayOutcome.COMPLETED)

            finished = self._finish.setdefault(key, asyncio.Event())
            finish_waiter = asyncio.ensure_future(finished.wait())
            cancel_waiter = asyncio.ensure_future(cancel_token.wait())
            done, _ = await asyncio.wait(
                {finish_waiter, cancel_waiter}, return_when=asyncio.FIRST_COMPLETED
            )
            for waiter in (finish_waiter, cancel_waiter):
                waiter.cancel()

            if finish_waiter in done:
                return self.outcomes.get(key, PlayOutcome.COMPLETED)
            self.cancelled.append(entity)
            return PlayOutcome.CANCELLED
        finally:
            self.live_tokens.discard(cancel_token)


class FakeResolver(MetadataResolver):
    def __init__(self) -> None:
        self.metadata: dict[str, MediaMetadata] = {}
        self.unavailable: set[str] = set()
        self.errors: dict[str, Exception] = {}
        self.delay = 0.0
        self.calls: list[SourceId] = []

    async def resolve(self, source_id: SourceId) -> MediaMetadata:
        self.calls.append(source_id)
        if self.delay:
            await asyncio.sleep(self.delay)
        key = source_id.value
        if key in self.errors:
            raise self.errors[key]
        if key in self.unavailable:
            raise MetadataUnavailableError(key)
        return self.metadata.get(key, MediaMetadata(title=f"Video {key}", duration_seconds=60))


class RecordingNotifier(PlaybackNotifier):
    def __init__(self) -> None:
        self.announced: list[MediaEntity] = []
        self.failed: list[MediaEntity] = []
        self.fail_announcements = False

    async def now_playing(self, entity: MediaEntity) -> None:
        self.announced.append(entity)
        if self.fail_announcements:
            raise RuntimeError("channel gone")

    async def playback_failed(self, entity: MediaEntity) -> None:
        self.failed.append(entity)


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture
def submitter() -> Submitter:
    return make_submitter()


@pytest.fixture
def queue_store() -> QueueStore:
    return QueueStore()


@pytest.fixture
def player() -> FakePlayer:
    return FakePlayer()


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def resolver() -> FakeResolver:
    return FakeResolver()


@pytest_asyncio.fixture
async def controller(queue_store, player, notifier):
    """Playback controller wired to fakes; shut down after each test."""
    ctrl = PlaybackController(queue_store=queue_store, media_player=player, notifier=notifier)
    yield ctrl
    await ctrl.shutdown()
