"""Port interface for the external media player process."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ...domain.media.entities import MediaEntity
    from ...domain.media.value_objects import PlayOutcome
    from ..services.cancellation import CancellationToken


class MediaPlayer(ABC):
    """Interface for playing one media entity to completion or cancellation."""

    @abstractmethod
    async def play(self, entity: MediaEntity, cancel_token: CancellationToken) -> PlayOutcome:
        """Play ``entity`` until it ends naturally or ``cancel_token`` is cancelled.

        Implementations must not raise for ordinary player failures; they report
        ``PlayOutcome.FAILED`` instead. When the token wins, the underlying
        process must have exited before this coroutine returns.
        """
        ...
