"""Exceptions raised while decoding and fetching StatsBomb event feeds."""

from __future__ import annotations


class EventLogError(Exception):
    """Base class for errors raised by this package."""


class DecodeError(EventLogError, ValueError):
    """A match document or event record does not have the expected structure."""

    def __init__(
        self,
        message: str,
        *,
        position: int | None = None,
        event_id: str | None = None,
    ) -> None:
        super().__init__(message)
        self.position = position
        self.event_id = event_id


class FetchError(EventLogError, ConnectionError):
    """A match document could not be retrieved from its source."""

    def __init__(self, message: str, *, source: str | None = None) -> None:
        super().__init__(message)
        self.source = source


__all__ = ["DecodeError", "EventLogError", "FetchError"]
