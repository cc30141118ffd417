"""Scoring data models for the lane matchup comparison.

Data structures only, no business logic. Output is serialized with camelCase
aliases (``chartData``, ``scoreDifference`` ...) for the presentation layer.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class StatKey(str, Enum):
    """The ten stats that make up a player's influence score."""

    GOLD = "gold"
    KILLS = "kills"
    DEATHS = "deaths"
    ASSISTS = "assists"
    WARDS_PLACED = "wardsPlaced"
    WARDS_KILLED = "wardsKilled"
    DAMAGE_DEALT = "damageDealt"
    DAMAGE_TAKEN = "damageTaken"
    BUILDINGS = "buildings"
    ELITE_MONSTERS = "eliteMonsters"

    @property
    def field_name(self) -> str:
        """Attribute name on PlayerStats."""
        return self.name.lower()


class GameEventType(str, Enum):
    KILL = "KILL"
    OBJECTIVE = "OBJECTIVE"


class OutputModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class StatValue(OutputModel):
    """One stat as both its raw value and its score contribution."""

    raw: int | float
    weighted: int | float


class PlayerStats(OutputModel):
    """Fixed-shape stat record for one player at one frame."""

    gold: StatValue
    kills: StatValue
    deaths: StatValue
    assists: StatValue
    wards_placed: StatValue
    wards_killed: StatValue
    damage_dealt: StatValue
    damage_taken: StatValue
    buildings: StatValue
    elite_monsters: StatValue

    def get(self, key: StatKey) -> StatValue:
        value: StatValue = getattr(self, key.field_name)
        return value

    def items(self) -> list[tuple[StatKey, StatValue]]:
        return [(key, self.get(key)) for key in StatKey]


class ChartPoint(OutputModel):
    """One time-series sample of the matchup comparison."""

    time: float = Field(..., ge=0, description="Game time in minutes")
    score_difference: float
    main_player_score: float
    opponent_player_score: float
    main_player_stats: PlayerStats
    opponent_player_stats: PlayerStats


class GameEvent(OutputModel):
    """Curated kill or objective marker for the chart."""

    type: GameEventType
    time: float = Field(..., ge=0, description="Game time in minutes")
    killer_id: int
    victim_id: int | None = None
    objective_type: str | None = None


class StatBreakdownRow(OutputModel):
    """Side-by-side comparison of one stat at one chart point."""

    key: StatKey
    main_raw: float
    main_weighted: float
    opponent_raw: float
    opponent_weighted: float
    raw_difference: float
    weighted_difference: float


class MatchupResult(OutputModel):
    """Structured matchup comparison consumed by the chart layer."""

    chart_data: list[ChartPoint] = Field(default_factory=list)
    game_events: list[GameEvent] = Field(default_factory=list)
    average_score_difference: int = 0

    @classmethod
    def empty(cls) -> "MatchupResult":
        return cls()

    def to_payload(self) -> dict[str, Any]:
        """camelCase JSON-ready dict; optional GameEvent fields are omitted when unset."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
