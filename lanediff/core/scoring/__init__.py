"""Lane matchup scoring engine.

Replays a Match-V5 timeline frame by frame and compares two participants'
weighted influence scores. Pure domain logic (zero I/O operations).

Weights per stat unit:
gold 1, kills 300, deaths -500, assists 150, wards placed 100,
wards killed 100, damage dealt 0.1, damage taken 0.1, buildings 700,
elite monsters 500.
"""

from lanediff.core.scoring.aggregator import stat_breakdown
from lanediff.core.scoring.models import (
    ChartPoint,
    GameEvent,
    GameEventType,
    MatchupResult,
    PlayerStats,
    StatBreakdownRow,
    StatKey,
    StatValue,
)
from lanediff.core.scoring.processor import load_timeline, process_timeline
from lanediff.core.scoring.weights import SCORE_WEIGHTS

__all__ = [
    "SCORE_WEIGHTS",
    "ChartPoint",
    "GameEvent",
    "GameEventType",
    "MatchupResult",
    "PlayerStats",
    "StatBreakdownRow",
    "StatKey",
    "StatValue",
    "load_timeline",
    "process_timeline",
    "stat_breakdown",
]
