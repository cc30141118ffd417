"""Pytest configuration and fixtures for Lane Diff tests.

Fixtures build raw Match-V5 shaped dicts (camelCase, string participant keys)
so every test also exercises contract parsing.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

import pytest

MAIN_PUUID = "puuid-main-0001"
OPPONENT_PUUID = "puuid-opponent-0002"
THIRD_PUUID = "puuid-jungle-0003"

MAIN_ID = 1
OPPONENT_ID = 2
THIRD_ID = 3


def build_snapshot(
    participant_id: int, gold: float = 0, dealt: float = 0, taken: float = 0
) -> dict[str, Any]:
    return {
        "participantId": participant_id,
        "totalGold": gold,
        "currentGold": gold,
        "level": 1,
        "position": {"x": 500, "y": 500},
        "damageStats": {
            "totalDamageDoneToChampions": dealt,
            "totalDamageTaken": taken,
            "physicalDamageDone": dealt,
        },
    }


def build_frame(
    timestamp: int,
    snapshots: list[dict[str, Any]],
    events: list[dict[str, Any]] | None = None,
) -> dict[str, Any]:
    return {
        "timestamp": timestamp,
        "participantFrames": {str(s["participantId"]): s for s in snapshots},
        "events": events or [],
    }


def build_timeline(frames: list[dict[str, Any]]) -> dict[str, Any]:
    return {
        "metadata": {
            "dataVersion": "2",
            "matchId": "NA1_TEST_0001",
            "participants": [MAIN_PUUID, OPPONENT_PUUID, THIRD_PUUID],
        },
        "info": {
            "frameInterval": 60000,
            "gameId": 1,
            "frames": frames,
            "participants": [
                {"participantId": MAIN_ID, "puuid": MAIN_PUUID},
                {"participantId": OPPONENT_ID, "puuid": OPPONENT_PUUID},
                {"participantId": THIRD_ID, "puuid": THIRD_PUUID},
            ],
        },
    }


@pytest.fixture
def make_snapshot() -> Callable[..., dict[str, Any]]:
    return build_snapshot


@pytest.fixture
def make_frame() -> Callable[..., dict[str, Any]]:
    return build_frame


@pytest.fixture
def make_timeline() -> Callable[..., dict[str, Any]]:
    return build_timeline


@pytest.fixture
def worked_example_timeline() -> dict[str, Any]:
    """Two scored minutes: a 100 gold lead, then a kill on top of a 400 gold lead."""
    return build_timeline(
        [
            build_frame(0, [build_snapshot(MAIN_ID), build_snapshot(OPPONENT_ID)]),
            build_frame(
                60000,
                [build_snapshot(MAIN_ID, gold=500), build_snapshot(OPPONENT_ID, gold=400)],
                [{"type": "ITEM_PURCHASED", "timestamp": 30000, "participantId": 1, "itemId": 1055}],
            ),
            build_frame(
                120000,
                [build_snapshot(MAIN_ID, gold=1200), build_snapshot(OPPONENT_ID, gold=800)],
                [
                    {
                        "type": "CHAMPION_KILL",
                        "timestamp": 90000,
                        "killerId": MAIN_ID,
                        "victimId": OPPONENT_ID,
                        "assistingParticipantIds": [],
                        "bounty": 300,
                    }
                ],
            ),
        ]
    )


@dataclass(frozen=True)
class Players:
    main_puuid: str = MAIN_PUUID
    opponent_puuid: str = OPPONENT_PUUID
    third_puuid: str = THIRD_PUUID
    main_id: int = MAIN_ID
    opponent_id: int = OPPONENT_ID
    third_id: int = THIRD_ID


@pytest.fixture
def players() -> Players:
    return Players()
