"""Typed, queryable event logs decoded from StatsBomb open-data event files."""

from __future__ import annotations

from .errors import DecodeError, EventLogError, FetchError
from .events import (
    Event,
    EventCategory,
    EventLog,
    LookupValue,
    PlayPattern,
    Unknown,
    decode,
)
from .ingest import download_all_events, fetch_events

__all__ = [
    "DecodeError",
    "Event",
    "EventCategory",
    "EventLog",
    "EventLogError",
    "FetchError",
    "LookupValue",
    "PlayPattern",
    "Unknown",
    "decode",
    "download_all_events",
    "fetch_events",
]
