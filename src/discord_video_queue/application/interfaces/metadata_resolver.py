"""Port interface for looking up display metadata of a video."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ...domain.media.entities import MediaMetadata
    from ...domain.media.value_objects import SourceId


class MetadataResolver(ABC):
    """Interface for resolving a source ID to its title and duration."""

    @abstractmethod
    async def resolve(self, source_id: SourceId) -> MediaMetadata:
        """Return metadata for ``source_id``.

        Raises:
            MetadataUnavailableError: If the source could not be described.
        """
        ...
