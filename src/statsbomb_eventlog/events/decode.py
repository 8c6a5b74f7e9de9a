from __future__ import annotations

import json
import logging
from typing import Any, Iterable, Mapping, Union

from pydantic import ValidationError

from statsbomb_eventlog.errors import DecodeError
from statsbomb_eventlog.events.event import Event
from statsbomb_eventlog.events.log import EventLog

logger = logging.getLogger(__name__)

RawDocument = Union[bytes, bytearray, str, Iterable[Any], Mapping[str, Any]]


def decode(raw: RawDocument, *, strict: bool = True) -> EventLog:
    """Decode one match document into an :class:`EventLog`.

    ``raw`` may be the JSON text of an events file, its parsed array, or an
    object holding that array under ``"events"``.

    With ``strict`` (the default) the first invalid record raises
    :class:`DecodeError` and nothing is returned. With ``strict=False`` invalid
    records are logged and skipped; an unreadable document still raises.
    """

    records = _records(raw)
    events: list[Event] = []
    for position, record in enumerate(records):
        try:
            events.append(_decode_record(record, position))
        except DecodeError as error:
            if strict:
                raise
            logger.warning("Skipping event %s: %s", _describe(position, error.event_id), error)
    return EventLog(events)


def decode_event(record: Any) -> Event:
    """Decode a single raw event record."""

    return _decode_record(record, None)


def _decode_record(record: Any, position: int | None) -> Event:
    if not isinstance(record, Mapping):
        raise DecodeError(
            "Each event must be represented as a JSON object", position=position
        )

    event_id = record.get("id")
    event_id = event_id if isinstance(event_id, str) else None
    try:
        return Event.model_validate(record)
    except ValidationError as error:
        raise DecodeError(
            f"Invalid event {_describe(position, event_id)}: {_summarise(error)}",
            position=position,
            event_id=event_id,
        ) from error


def _records(raw: RawDocument) -> list[Any]:
    data: Any = raw
    if isinstance(raw, (bytes, bytearray)):
        try:
            data = raw.decode("utf-8")
        except UnicodeDecodeError as error:
            raise DecodeError("StatsBomb event files must be UTF-8 encoded") from error
    if isinstance(data, str):
        try:
            data = json.loads(data)
        except (json.JSONDecodeError, RecursionError) as error:
            raise DecodeError("StatsBomb event files must contain valid JSON") from error

    if isinstance(data, Mapping):
        if "events" not in data:
            raise DecodeError("StatsBomb event files must contain a JSON array")
        data = data["events"]

    if isinstance(data, (str, bytes)) or not isinstance(data, Iterable):
        raise DecodeError("StatsBomb event files must contain a JSON array")
    return list(data)


def _describe(position: int | None, event_id: str | None) -> str:
    parts = []
    if event_id:
        parts.append(repr(event_id))
    if position is not None:
        parts.append(f"at position {position}")
    return " ".join(parts) or "record"


def _summarise(error: ValidationError) -> str:
    messages = []
    for detail in error.errors():
        location = ".".join(str(part) for part in detail.get("loc", ())) or "<root>"
        messages.append(f"{location}: {detail.get('msg')}")
    return "; ".join(messages)


__all__ = ["RawDocument", "decode", "decode_event"]
