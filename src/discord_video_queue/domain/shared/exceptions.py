"""Base exception classes for domain-level errors."""

from __future__ import annotations

from discord_video_queue.domain.shared.messages import ErrorMessages


class DomainError(Exception):
    """Base exception for all domain-level errors."""

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__


class MetadataUnavailableError(DomainError):
    """Raised by a metadata resolver when it cannot describe a source."""

    def __init__(self, source_id: str, message: str | None = None) -> None:
        msg = message or ErrorMessages.METADATA_UNAVAILABLE.format(source_id=source_id)
        super().__init__(msg, code="METADATA_UNAVAILABLE")
        self.source_id = source_id
