from __future__ import annotations

from .decode import decode, decode_event
from .enums import (
    Card,
    EventCategory,
    FiftyFiftyOutcome,
    Period,
    PlayPattern,
    Unknown,
    feed_name,
)
from .event import Event
from .log import EventLog
from .lookup import LookupValue

__all__ = [
    "Card",
    "Event",
    "EventCategory",
    "EventLog",
    "FiftyFiftyOutcome",
    "LookupValue",
    "Period",
    "PlayPattern",
    "Unknown",
    "decode",
    "decode_event",
    "feed_name",
]
