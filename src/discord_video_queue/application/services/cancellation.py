"""Cancellation token shared between a playback task and the media player."""

from __future__ import annotations

import asyncio
import itertools

_token_ids = itertools.count(1)


class CancellationToken:
    """One-shot cancellation signal identifying a single playback task.

    Cancelling is idempotent and never blocks; waiters are woken on the next
    loop iteration. Tokens compare by identity.
    """

    __slots__ = ("_event", "id")

    def __init__(self) -> None:
        self._event = asyncio.Event()
        self.id = next(_token_ids)

    def cancel(self) -> None:
        self._event.set()

    def is_cancelled(self) -> bool:
        return self._event.is_set()

    async def wait(self) -> None:
        """Block until the token is cancelled."""
        await self._event.wait()

    def __repr__(self) -> str:
        state = "cancelled" if self.is_cancelled() else "live"
        return f"<CancellationToken #{self.id} {state}>"
