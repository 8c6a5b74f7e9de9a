"""The per-record StatsBomb event model."""

from __future__ import annotations

from typing import Annotated, Any, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, PlainValidator

from statsbomb_eventlog.events.enums import (
    CardKind,
    EventCategory,
    EventKind,
    Period,
    PlayPattern,
)
from statsbomb_eventlog.events.lookup import LookupValue
from statsbomb_eventlog.events.parsers import (
    card_from_bad_behaviour,
    category_from_nested,
    period_from_number,
    play_pattern_from_nested,
)
from statsbomb_eventlog.events.payloads import (
    BallReceipt,
    BallRecovery,
    Block,
    Carry,
    Clearance,
    Dribble,
    DribbledPast,
    Duel,
    FiftyFifty,
    FoulCommitted,
    FoulWon,
    GoalKeeper,
    HalfEnd,
    HalfStart,
    InjuryStoppage,
    Interception,
    Miscontrol,
    Pass,
    PlayerOff,
    Point,
    Pressure,
    Shot,
    Substitution,
    Tactics,
)

# Attribute holding the payload that belongs to each category. Categories not
# listed here (Camera On, Offside, ...) carry no payload in the feed.
PAYLOAD_SLOTS: dict[EventCategory, str] = {
    EventCategory.BALL_RECEIPT: "ball_receipt",
    EventCategory.BALL_RECOVERY: "ball_recovery",
    EventCategory.BLOCK: "block",
    EventCategory.CARRY: "carry",
    EventCategory.CLEARANCE: "clearance",
    EventCategory.DRIBBLE: "dribble",
    EventCategory.DRIBBLED_PAST: "dribbled_past",
    EventCategory.DUEL: "duel",
    EventCategory.FOUL_COMMITTED: "foul_committed",
    EventCategory.FOUL_WON: "foul_won",
    EventCategory.GOAL_KEEPER: "goalkeeper",
    EventCategory.HALF_END: "half_end",
    EventCategory.HALF_START: "half_start",
    EventCategory.INJURY_STOPPAGE: "injury_stoppage",
    EventCategory.INTERCEPTION: "interception",
    EventCategory.MISCONTROL: "miscontrol",
    EventCategory.PASS: "pass_",
    EventCategory.PLAYER_OFF: "player_off",
    EventCategory.PRESSURE: "pressure",
    EventCategory.SHOT: "shot",
    EventCategory.SUBSTITUTION: "substitution",
    EventCategory.FIFTY_FIFTY: "fifty_fifty",
    EventCategory.BAD_BEHAVIOUR: "bad_behaviour",
    EventCategory.STARTING_XI: "tactics",
    EventCategory.TACTICAL_SHIFT: "tactics",
}


class Event(BaseModel):
    """One action in a match, as published in a StatsBomb events file.

    ``event_type`` is the discriminant: at most one payload slot is expected
    to be populated and it should match the category, but the feed does not
    guarantee this and the model keeps whatever was delivered. Use
    :attr:`payload` rather than probing the slots.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(..., strict=True)
    index: int = Field(..., ge=1, strict=True, description="1-based position within the match")
    period: Annotated[Period, PlainValidator(period_from_number)]
    timestamp: str = Field(..., strict=True, description="HH:MM:SS.fff since the start of the period")
    minute: int = Field(default=0, ge=0)
    second: int = Field(default=0, ge=0)
    event_type: Annotated[EventKind, PlainValidator(category_from_nested)] = Field(
        ..., validation_alias=AliasChoices("type", "event_type")
    )
    possession: Optional[int] = None
    possession_team: Optional[LookupValue] = None
    play_pattern: Annotated[PlayPattern, PlainValidator(play_pattern_from_nested)]
    team: LookupValue
    player: Optional[LookupValue] = None
    position: Optional[LookupValue] = None
    location: Optional[Point] = None
    duration: Optional[float] = None

    under_pressure: bool = Field(default=False, strict=True)
    out: bool = Field(default=False, strict=True)
    off_camera: bool = Field(default=False, strict=True)
    counterpress: bool = Field(default=False, strict=True)
    related_events: tuple[str, ...] = ()
    tactics: Optional[Tactics] = None
    fifty_fifty: Optional[FiftyFifty] = Field(
        default=None, validation_alias=AliasChoices("50_50", "50/50", "fifty_fifty")
    )
    bad_behaviour: Annotated[Optional[CardKind], PlainValidator(card_from_bad_behaviour)] = None

    ball_receipt: Optional[BallReceipt] = None
    ball_recovery: Optional[BallRecovery] = None
    block: Optional[Block] = None
    carry: Optional[Carry] = None
    clearance: Optional[Clearance] = None
    dribble: Optional[Dribble] = None
    dribbled_past: Optional[DribbledPast] = None
    duel: Optional[Duel] = None
    foul_committed: Optional[FoulCommitted] = Field(
        default=None, validation_alias=AliasChoices("foul_committed", "foul_comitted")
    )
    foul_won: Optional[FoulWon] = None
    goalkeeper: Optional[GoalKeeper] = None
    half_end: Optional[HalfEnd] = None
    half_start: Optional[HalfStart] = None
    injury_stoppage: Optional[InjuryStoppage] = None
    interception: Optional[Interception] = None
    miscontrol: Optional[Miscontrol] = None
    pass_: Optional[Pass] = Field(default=None, validation_alias=AliasChoices("pass", "pass_"))
    player_off: Optional[PlayerOff] = None
    pressure: Optional[Pressure] = None
    shot: Optional[Shot] = None
    substitution: Optional[Substitution] = None

    @property
    def payload(self) -> Optional[Any]:
        """The payload matching ``event_type``, or ``None`` when it has none."""

        slot = PAYLOAD_SLOTS.get(self.event_type)  # type: ignore[arg-type]
        if slot is None:
            return None
        return getattr(self, slot)

    @property
    def team_name(self) -> str:
        return self.team.name

    @property
    def player_name(self) -> Optional[str]:
        return self.player.name if self.player is not None else None


__all__ = ["Event", "PAYLOAD_SLOTS"]
