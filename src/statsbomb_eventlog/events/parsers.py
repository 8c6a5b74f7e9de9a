"""Decode adapters for the feed fields that do not map directly onto a model.

Each adapter handles exactly one irregularity of the source format so that a
change in one field's encoding stays local to one function:

* ``type`` and ``play_pattern`` are lookup values of which only ``name``
  matters; the name is mapped to an enumeration.
* ``card`` lookups (inside ``foul_committed`` and ``bad_behaviour``) and the
  ``outcome`` lookup of ``50_50`` map to open enumerations.
* ``bad_behaviour`` wraps its card one level deeper than every other lookup.
* ``period`` is a bare integer; strings and booleans are not coerced.

The adapters are used as pydantic ``PlainValidator`` functions, so a
``ValueError`` raised here surfaces as a validation error of the field.
"""

from __future__ import annotations

from typing import Any, Callable, Mapping, TypeVar

from statsbomb_eventlog.events.enums import (
    Card,
    CardKind,
    EventCategory,
    EventKind,
    FiftyFiftyOutcome,
    FiftyFiftyResult,
    Period,
    PlayPattern,
    Unknown,
    parse_card,
    parse_event_category,
    parse_fifty_fifty_outcome,
    parse_play_pattern,
)
from statsbomb_eventlog.events.lookup import LookupValue

_T = TypeVar("_T")


def lookup_name(value: Any) -> str:
    """Return the ``name`` of a lookup value given as a mapping or model."""

    if isinstance(value, LookupValue):
        return value.name
    if isinstance(value, Mapping):
        name = value.get("name")
        if isinstance(name, str):
            return name
        raise ValueError("lookup value is missing a 'name' string")
    raise ValueError(f"expected a lookup object, got {type(value).__name__}")


def _from_lookup(
    parse: Callable[[str], _T], *passthrough: type
) -> Callable[[Any], _T]:
    def _validate(value: Any) -> _T:
        if isinstance(value, passthrough):
            return value
        return parse(lookup_name(value))

    _validate.__name__ = f"{parse.__name__}_from_lookup"
    return _validate


category_from_nested: Callable[[Any], EventKind] = _from_lookup(
    parse_event_category, EventCategory, Unknown
)
play_pattern_from_nested: Callable[[Any], PlayPattern] = _from_lookup(
    parse_play_pattern, PlayPattern
)
fifty_fifty_outcome_from_lookup: Callable[[Any], FiftyFiftyResult] = _from_lookup(
    parse_fifty_fifty_outcome, FiftyFiftyOutcome, Unknown
)
card_from_lookup: Callable[[Any], CardKind] = _from_lookup(parse_card, Card, Unknown)


def optional_card_from_lookup(value: Any) -> CardKind | None:
    if value is None:
        return None
    return card_from_lookup(value)


def card_from_bad_behaviour(value: Any) -> CardKind | None:
    """Decode ``{"card": {"id": .., "name": ..}}``; absent wrapper or card is ``None``."""

    if value is None:
        return None
    if isinstance(value, (Card, Unknown)):
        return value
    if not isinstance(value, Mapping):
        raise ValueError("bad_behaviour must be an object")
    return optional_card_from_lookup(value.get("card"))


def period_from_number(value: Any) -> Period:
    if isinstance(value, Period):
        return value
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"period must be an integer, got {type(value).__name__}")
    return Period(value)


__all__ = [
    "card_from_bad_behaviour",
    "card_from_lookup",
    "category_from_nested",
    "fifty_fifty_outcome_from_lookup",
    "lookup_name",
    "optional_card_from_lookup",
    "period_from_number",
    "play_pattern_from_nested",
]
