"""
Timeline event models for Match-V5 API.
Only the event types that feed the matchup score are modelled; everything
else in a frame's event list is dropped while the frame is parsed.
"""

from enum import Enum
from typing import Annotated, Any, Literal, Union

from pydantic import Field, field_validator

from .common import BaseContract


class EventType(str, Enum):
    """Timeline event types the scoring engine consumes."""

    CHAMPION_KILL = "CHAMPION_KILL"
    WARD_PLACED = "WARD_PLACED"
    WARD_KILL = "WARD_KILL"
    BUILDING_KILL = "BUILDING_KILL"
    ELITE_MONSTER_KILL = "ELITE_MONSTER_KILL"


SCORED_EVENT_TYPES = frozenset(t.value for t in EventType)


class BaseEvent(BaseContract):
    """Base class for all timeline events."""

    timestamp: int = Field(0, description="Game time in milliseconds when event occurred")

    @field_validator("timestamp", "killer_id", "victim_id", "creator_id", mode="before", check_fields=False)
    @classmethod
    def default_actor(cls, v: Any) -> Any:
        """A null actor id matches no participant."""
        return 0 if v is None else v


class ChampionKillEvent(BaseEvent):
    """Champion kill event."""

    type: Literal["CHAMPION_KILL"] = "CHAMPION_KILL"
    killer_id: int = Field(0, description="0 for executions by minions/turrets")
    victim_id: int = Field(0)
    assisting_participant_ids: list[int] = Field(default_factory=list)

    @field_validator("assisting_participant_ids", mode="before")
    @classmethod
    def default_assists(cls, v: Any) -> Any:
        return [] if v is None else v


class WardPlacedEvent(BaseEvent):
    """Ward placed event."""

    type: Literal["WARD_PLACED"] = "WARD_PLACED"
    creator_id: int = Field(0)
    ward_type: str | None = Field(None)


class WardKillEvent(BaseEvent):
    """Ward destroyed event."""

    type: Literal["WARD_KILL"] = "WARD_KILL"
    killer_id: int = Field(0)
    ward_type: str | None = Field(None)


class BuildingKillEvent(BaseEvent):
    """Building (tower/inhibitor) destroyed event."""

    type: Literal["BUILDING_KILL"] = "BUILDING_KILL"
    killer_id: int = Field(0)
    building_type: str | None = Field(None, description="TOWER_BUILDING or INHIBITOR_BUILDING")
    team_id: int | None = Field(None, description="Team that LOST the building")


class EliteMonsterKillEvent(BaseEvent):
    """Elite monster (dragon/baron/herald) kill event."""

    type: Literal["ELITE_MONSTER_KILL"] = "ELITE_MONSTER_KILL"
    killer_id: int = Field(0)
    monster_type: str | None = Field(None)
    monster_sub_type: str | None = Field(None)


TimelineEvent = Annotated[
    Union[
        ChampionKillEvent,
        WardPlacedEvent,
        WardKillEvent,
        BuildingKillEvent,
        EliteMonsterKillEvent,
    ],
    Field(discriminator="type"),
]
