"""Enumerations decoded from the display names of StatsBomb lookup values.

Every ``parse_*`` function is total: a name outside the known vocabulary maps
to ``Unknown(name)`` for open enumerations, or to the documented default
member for closed ones.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Mapping, TypeVar, Union


@dataclass(frozen=True)
class Unknown:
    """A vocabulary value this package does not know about yet."""

    text: str

    def __str__(self) -> str:
        return self.text


class EventCategory(str, Enum):
    BALL_RECEIPT = "Ball Receipt*"
    BALL_RECOVERY = "Ball Recovery"
    DISPOSSESSED = "Dispossessed"
    DUEL = "Duel"
    CAMERA_ON = "Camera On"
    CAMERA_OFF = "Camera off"
    BLOCK = "Block"
    OFFSIDE = "Offside"
    CLEARANCE = "Clearance"
    INTERCEPTION = "Interception"
    DRIBBLE = "Dribble"
    SHOT = "Shot"
    PRESSURE = "Pressure"
    HALF_START = "Half Start"
    SUBSTITUTION = "Substitution"
    OWN_GOAL_AGAINST = "Own Goal Against"
    FOUL_WON = "Foul Won"
    FOUL_COMMITTED = "Foul Committed"
    GOAL_KEEPER = "Goal Keeper"
    BAD_BEHAVIOUR = "Bad Behaviour"
    OWN_GOAL_FOR = "Own Goal For"
    PLAYER_ON = "Player On"
    PLAYER_OFF = "Player Off"
    SHIELD = "Shield"
    PASS = "Pass"
    FIFTY_FIFTY = "50/50"
    HALF_END = "Half End"
    STARTING_XI = "Starting XI"
    TACTICAL_SHIFT = "Tactical Shift"
    ERROR = "Error"
    MISCONTROL = "Miscontrol"
    DRIBBLED_PAST = "Dribbled Past"
    INJURY_STOPPAGE = "Injury Stoppage"
    REFEREE_BALL_DROP = "Referee Ball-Drop"
    CARRY = "Carry"


class PlayPattern(str, Enum):
    """How the possession started. Unrecognised names collapse to ``OTHER``."""

    REGULAR_PLAY = "Regular Play"
    FROM_CORNER = "From Corner"
    FROM_FREE_KICK = "From Free Kick"
    FROM_THROW_IN = "From Throw In"
    OTHER = "Other"
    FROM_COUNTER = "From Counter"
    FROM_GOAL_KICK = "From Goal Kick"
    FROM_KEEPER = "From Keeper"
    FROM_KICK_OFF = "From Kick Off"


class Period(IntEnum):
    FIRST_HALF = 1
    SECOND_HALF = 2
    FIRST_EXTRA_TIME = 3
    SECOND_EXTRA_TIME = 4
    PENALTY_SHOOTOUT = 5


class FiftyFiftyOutcome(str, Enum):
    WON = "Won"
    LOST = "Lost"
    SUCCESS_TO_TEAM = "Success To Team"
    SUCCESS_TO_OPPOSITION = "Success To Opposition"


class Card(str, Enum):
    YELLOW = "Yellow Card"
    SECOND_YELLOW = "Second Yellow"
    RED = "Red Card"


EventKind = Union[EventCategory, Unknown]
FiftyFiftyResult = Union[FiftyFiftyOutcome, Unknown]
CardKind = Union[Card, Unknown]

_E = TypeVar("_E", bound=Enum)


def _by_feed_name(enum_cls: type[_E]) -> dict[str, _E]:
    return {member.value: member for member in enum_cls}


_EVENT_CATEGORIES: Mapping[str, EventCategory] = _by_feed_name(EventCategory)
_PLAY_PATTERNS: Mapping[str, PlayPattern] = {
    **_by_feed_name(PlayPattern),
    # older feed releases
    "FromCorner": PlayPattern.FROM_CORNER,
    "From KickOff": PlayPattern.FROM_KICK_OFF,
}
_FIFTY_FIFTY_OUTCOMES: Mapping[str, FiftyFiftyOutcome] = _by_feed_name(FiftyFiftyOutcome)
_CARDS: Mapping[str, Card] = _by_feed_name(Card)


def parse_event_category(name: str) -> EventKind:
    member = _EVENT_CATEGORIES.get(name)
    return member if member is not None else Unknown(name)


def parse_play_pattern(name: str) -> PlayPattern:
    return _PLAY_PATTERNS.get(name, PlayPattern.OTHER)


def parse_fifty_fifty_outcome(name: str) -> FiftyFiftyResult:
    member = _FIFTY_FIFTY_OUTCOMES.get(name)
    return member if member is not None else Unknown(name)


def parse_card(name: str) -> CardKind:
    member = _CARDS.get(name)
    return member if member is not None else Unknown(name)


def feed_name(value: Enum | Unknown) -> str:
    """Return the text the feed uses for ``value``."""

    if isinstance(value, Unknown):
        return value.text
    return str(value.value)


__all__ = [
    "Card",
    "CardKind",
    "EventCategory",
    "EventKind",
    "FiftyFiftyOutcome",
    "FiftyFiftyResult",
    "Period",
    "PlayPattern",
    "Unknown",
    "feed_name",
    "parse_card",
    "parse_event_category",
    "parse_fifty_fifty_outcome",
    "parse_play_pattern",
]
