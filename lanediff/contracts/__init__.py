"""Contract models for data validation."""

from .common import BaseContract
from .events import (
    BuildingKillEvent,
    ChampionKillEvent,
    EliteMonsterKillEvent,
    EventType,
    TimelineEvent,
    WardKillEvent,
    WardPlacedEvent,
)
from .match import LaneRole, MatchDetails, MatchParticipant
from .timeline import (
    DamageStats,
    Frame,
    MatchTimeline,
    ParticipantSnapshot,
    TimelineParticipant,
)

__all__ = [
    "BaseContract",
    "BuildingKillEvent",
    "ChampionKillEvent",
    "EliteMonsterKillEvent",
    "EventType",
    "TimelineEvent",
    "WardKillEvent",
    "WardPlacedEvent",
    "LaneRole",
    "MatchDetails",
    "MatchParticipant",
    "DamageStats",
    "Frame",
    "MatchTimeline",
    "ParticipantSnapshot",
    "TimelineParticipant",
]
