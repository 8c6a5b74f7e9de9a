from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

import pytest

HOME = {"id": 100, "name": "Team A"}
AWAY = {"id": 200, "name": "Team B"}

EventFactory = Callable[..., Dict[str, Any]]


def _event(
    event_id: str,
    index: int,
    type_name: str,
    *,
    team: Optional[Dict[str, Any]] = None,
    player: Optional[Dict[str, Any]] = None,
    type_id: int = 30,
    **extra: Any,
) -> Dict[str, Any]:
    record: Dict[str, Any] = {
        "id": event_id,
        "index": index,
        "period": 1,
        "timestamp": f"00:00:{index % 60:02d}.000",
        "minute": 0,
        "second": index % 60,
        "type": {"id": type_id, "name": type_name},
        "possession": 1,
        "possession_team": HOME,
        "play_pattern": {"id": 1, "name": "Regular Play"},
        "team": team or HOME,
    }
    if player is not None:
        record["player"] = player
        record["position"] = {"id": 13, "name": "Right Center Midfield"}
        record["location"] = [60.0, 40.0]
    record.update(extra)
    return record


@pytest.fixture()
def event_factory() -> EventFactory:
    return _event


@pytest.fixture()
def lineup() -> List[Dict[str, Any]]:
    return [
        {
            "player": {"id": 1000 + number, "name": f"Player {number}"},
            "position": {"id": number, "name": f"Position {number}"},
            "jersey_number": number,
        }
        for number in range(1, 12)
    ]


@pytest.fixture()
def match_events(lineup: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    playmaker = {"id": 10, "name": "Playmaker"}
    striker = {"id": 9, "name": "Striker"}
    defender = {"id": 40, "name": "Defender"}
    return [
        _event(
            "xi-1",
            1,
            "Starting XI",
            type_id=35,
            duration=0.0,
            tactics={"formation": 433, "lineup": lineup},
        ),
        _event(
            "pass-1",
            2,
            "Pass",
            player=playmaker,
            duration=1.1,
            related_events=["receipt-1"],
            **{
                "pass": {
                    "recipient": striker,
                    "length": 20.0,
                    "angle": 0.2,
                    "height": {"id": 1, "name": "Ground Pass"},
                    "end_location": [80.0, 35.0],
                    "shot_assist": True,
                }
            },
        ),
        _event(
            "receipt-1",
            3,
            "Ball Receipt*",
            type_id=42,
            player=striker,
            under_pressure=True,
            related_events=["pass-1"],
        ),
        _event(
            "shot-1",
            4,
            "Shot",
            type_id=16,
            player=striker,
            play_pattern={"id": 6, "name": "From Counter"},
            shot={
                "statsbomb_xg": 0.34,
                "key_pass_id": "pass-1",
                "outcome": {"id": 97, "name": "Goal"},
                "body_part": {"id": 40, "name": "Right Foot"},
                "type": {"id": 87, "name": "Open Play"},
                "first_time": True,
                "end_location": [120.0, 40.0, 1.0],
                "freeze_frame": [
                    {
                        "location": [118.0, 40.0],
                        "player": {"id": 30, "name": "Goalkeeper"},
                        "position": {"id": 1, "name": "Goalkeeper"},
                        "teammate": False,
                        "keeper": True,
                    }
                ],
            },
        ),
        _event(
            "foul-1",
            5,
            "Foul Committed",
            type_id=22,
            team=AWAY,
            player=defender,
            foul_committed={"card": {"id": 7, "name": "Yellow Card"}},
        ),
        _event("camera-1", 6, "Camera On", type_id=5, team=AWAY),
        _event(
            "pass-2",
            7,
            "Pass",
            team=AWAY,
            player=defender,
            **{
                "pass": {
                    "end_location": [30.0, 20.0],
                    "outcome": {"id": 9, "name": "Incomplete"},
                }
            },
        ),
    ]


@pytest.fixture()
def match_file(tmp_path: Path, match_events: List[Dict[str, Any]]) -> Path:
    path = tmp_path / "3775620.json"
    path.write_text(json.dumps(match_events), encoding="utf-8")
    return path
