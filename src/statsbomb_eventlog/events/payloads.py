"""Category-specific payloads attached to StatsBomb events.

The feed omits boolean flags when they are false, so every flag defaults to
``False``. A few keys were published with hyphens or capitalised words in
older releases; those fields accept both spellings through ``AliasChoices``.
"""

from __future__ import annotations

from typing import Annotated, Any, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, PlainValidator

from statsbomb_eventlog.events.enums import CardKind, FiftyFiftyResult
from statsbomb_eventlog.events.lookup import LookupValue
from statsbomb_eventlog.events.parsers import (
    fifty_fifty_outcome_from_lookup,
    optional_card_from_lookup,
)

Point = tuple[float, float]


def _flag(*aliases: str) -> Any:
    if aliases:
        return Field(default=False, strict=True, validation_alias=AliasChoices(*aliases))
    return Field(default=False, strict=True)


class Payload(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class Pass(Payload):
    backheel: bool = _flag()
    deflected: bool = _flag()
    miscommunication: bool = _flag()
    cross: bool = _flag()
    cut_back: bool = _flag("cut_back", "cut-back")
    switch: bool = _flag()
    shot_assist: bool = _flag("shot_assist", "shot-assist")
    goal_assist: bool = _flag("goal_assist", "goal-assist")
    through_ball: bool = _flag()
    aerial_won: bool = _flag()
    body_part: Optional[LookupValue] = None
    type: Optional[LookupValue] = None
    outcome: Optional[LookupValue] = None
    technique: Optional[LookupValue] = Field(
        default=None, validation_alias=AliasChoices("technique", "Technique")
    )
    recipient: Optional[LookupValue] = None
    length: Optional[float] = None
    angle: Optional[float] = None
    height: Optional[LookupValue] = None
    end_location: Point
    assisted_shot_id: Optional[str] = None

    @property
    def completed(self) -> bool:
        """Passes carry an outcome only when they fail."""

        return self.outcome is None


class FreezeFrame(Payload):
    location: Point
    player: LookupValue
    position: Optional[LookupValue] = None
    teammate: bool = _flag()
    keeper: bool = _flag()


class Shot(Payload):
    aerial_won: bool = _flag()
    follows_dribble: bool = _flag()
    first_time: bool = _flag()
    open_goal: bool = _flag()
    one_on_one: bool = _flag()
    deflected: bool = _flag()
    statsbomb_xg: float
    body_part: Optional[LookupValue] = None
    type: Optional[LookupValue] = None
    outcome: Optional[LookupValue] = None
    technique: Optional[LookupValue] = Field(
        default=None, validation_alias=AliasChoices("technique", "Technique")
    )
    freeze_frame: Optional[list[FreezeFrame]] = None
    # x, y and, for shots on target, the height at the goal line
    end_location: list[float] = Field(..., min_length=2, max_length=3)
    key_pass_id: Optional[str] = None

    @property
    def is_goal(self) -> bool:
        return self.outcome is not None and self.outcome.name == "Goal"


class Carry(Payload):
    end_location: Point


class Duel(Payload):
    counterpress: bool = _flag()
    type: LookupValue
    outcome: Optional[LookupValue] = None


class Dribble(Payload):
    overrun: bool = _flag("overrun", "Overrun")
    nutmeg: bool = _flag("nutmeg", "Nutmeg")
    no_touch: bool = _flag("no_touch", "No Touch")
    outcome: LookupValue


class DribbledPast(Payload):
    counterpress: bool = _flag()


class FoulCommitted(Payload):
    counterpress: bool = _flag()
    offensive: bool = _flag()
    advantage: bool = _flag()
    penalty: bool = _flag()
    type: Optional[LookupValue] = None
    card: Annotated[Optional[CardKind], PlainValidator(optional_card_from_lookup)] = None


class FoulWon(Payload):
    defensive: bool = _flag()
    advantage: bool = _flag()
    penalty: bool = _flag()


class GoalKeeper(Payload):
    position: Optional[LookupValue] = None
    technique: Optional[LookupValue] = None
    body_part: Optional[LookupValue] = None
    type: LookupValue
    outcome: Optional[LookupValue] = None


class HalfStart(Payload):
    late_video_start: bool = _flag("late_video_start", "Late Video Start")


class HalfEnd(Payload):
    early_video_end: bool = _flag("early_video_end", "Early Video End")
    match_suspended: bool = _flag("match_suspended", "Match Suspended")


class InjuryStoppage(Payload):
    in_chain: bool = _flag()


class PlayerOff(Payload):
    permanent: bool = _flag("permanent", "Permenant", "Permanent")


class Pressure(Payload):
    counterpress: bool = _flag()


class Block(Payload):
    deflection: bool = _flag()
    offensive: bool = _flag()
    save_block: bool = _flag()
    counterpress: bool = _flag()


class Clearance(Payload):
    aerial_won: bool = _flag()
    body_part: Optional[LookupValue] = None


class Interception(Payload):
    outcome: LookupValue


class Miscontrol(Payload):
    aerial_won: bool = _flag()


class BallReceipt(Payload):
    outcome: LookupValue


class BallRecovery(Payload):
    recovery_failure: bool = _flag()
    offensive: bool = _flag()


class Substitution(Payload):
    replacement: LookupValue
    outcome: Optional[LookupValue] = None


class FiftyFifty(Payload):
    """Outcome of a contested loose ball (the feed's ``50_50`` object)."""

    outcome: Annotated[FiftyFiftyResult, PlainValidator(fifty_fifty_outcome_from_lookup)]
    counterpress: bool = _flag()


class LineupPlayer(Payload):
    player: LookupValue
    position: LookupValue
    jersey_number: int = Field(..., ge=0)


class Tactics(Payload):
    """Formation and the eleven players on the pitch."""

    formation: int
    lineup: list[LineupPlayer] = Field(..., min_length=11, max_length=11)


__all__ = [
    "BallReceipt",
    "BallRecovery",
    "Block",
    "Carry",
    "Clearance",
    "Dribble",
    "DribbledPast",
    "Duel",
    "FiftyFifty",
    "FoulCommitted",
    "FoulWon",
    "FreezeFrame",
    "GoalKeeper",
    "HalfEnd",
    "HalfStart",
    "InjuryStoppage",
    "Interception",
    "LineupPlayer",
    "Miscontrol",
    "Pass",
    "Payload",
    "PlayerOff",
    "Point",
    "Pressure",
    "Shot",
    "Substitution",
    "Tactics",
]
