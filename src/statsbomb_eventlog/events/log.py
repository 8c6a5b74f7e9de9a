"""Ordered, queryable collection of decoded events."""

from __future__ import annotations

from collections import Counter
from typing import Callable, Iterable, Iterator, overload

from statsbomb_eventlog.events.enums import EventKind
from statsbomb_eventlog.events.event import Event

EventPredicate = Callable[[Event], bool]


class EventLog:
    """Events in feed order.

    A log built from one match keeps the feed's chronological order. Logs
    merged from several matches hold all of the first match's events followed
    by all of the next one's; events are never interleaved by timestamp.

    Filtering returns a new log. Only :meth:`retain` and :meth:`extend` change
    the receiver.
    """

    __slots__ = ("_events",)

    def __init__(self, events: Iterable[Event] | None = None) -> None:
        self._events: list[Event] = list(events) if events is not None else []

    @classmethod
    def concat(cls, logs: Iterable[EventLog]) -> EventLog:
        merged = cls()
        for log in logs:
            merged.extend(log)
        return merged

    @property
    def events(self) -> tuple[Event, ...]:
        return tuple(self._events)

    def filter_by_predicate(self, predicate: EventPredicate) -> EventLog:
        return EventLog(event for event in self._events if predicate(event))

    def filter_by_category(self, category: EventKind) -> EventLog:
        return self.filter_by_predicate(lambda event: event.event_type == category)

    filter_by_event_type = filter_by_category

    def filter_by_team(self, team: str) -> EventLog:
        return self.filter_by_predicate(lambda event: event.team.name == team)

    def filter_by_player(self, player: str) -> EventLog:
        return self.filter_by_predicate(
            lambda event: event.player is not None and event.player.name == player
        )

    def retain(self, category: EventKind) -> None:
        """Drop, in place, every event whose category is not ``category``."""

        self._events = [event for event in self._events if event.event_type == category]

    def extend(self, other: EventLog) -> None:
        """Append ``other``'s events after this log's, keeping both orders."""

        if not isinstance(other, EventLog):
            raise TypeError(f"can only extend with an EventLog, not {type(other).__name__}")
        self._events.extend(list(other._events))

    def category_counts(self) -> Counter:
        return Counter(event.event_type for event in self._events)

    def __add__(self, other: EventLog) -> EventLog:
        if not isinstance(other, EventLog):
            return NotImplemented
        return EventLog([*self._events, *other._events])

    def __len__(self) -> int:
        return len(self._events)

    def __iter__(self) -> Iterator[Event]:
        return iter(self._events)

    @overload
    def __getitem__(self, index: int) -> Event: ...

    @overload
    def __getitem__(self, index: slice) -> EventLog: ...

    def __getitem__(self, index: int | slice) -> Event | EventLog:
        if isinstance(index, slice):
            return EventLog(self._events[index])
        return self._events[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EventLog):
            return NotImplemented
        return self._events == other._events

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"EventLog({len(self._events)} events)"


__all__ = [EventLog, "EventPredicate"]
