"""
Match information data contracts for Riot API Match-V5.
Only the participant metadata needed to pair lane opponents is modelled.
"""

from enum import Enum
from typing import Any

from pydantic import Field, model_validator

from .common import BaseContract


class LaneRole(str, Enum):
    """Match-V5 ``teamPosition`` values for Summoner's Rift."""

    TOP = "TOP"
    JUNGLE = "JUNGLE"
    MIDDLE = "MIDDLE"
    BOTTOM = "BOTTOM"
    UTILITY = "UTILITY"


class MatchParticipant(BaseContract):
    """Participant entry of a match details payload."""

    puuid: str = Field(..., description="Player's PUUID")
    participant_id: int = Field(..., ge=1, le=16)
    team_id: int = Field(..., description="100 (blue) or 200 (red)")
    team_position: str = Field("", description="Empty for ARAM/Arena or unassigned roles")
    champion_name: str = Field("")
    riot_id_game_name: str | None = Field(None)
    riot_id_tagline: str | None = Field(None)

    @property
    def riot_id(self) -> str | None:
        if not self.riot_id_game_name:
            return None
        if not self.riot_id_tagline:
            return self.riot_id_game_name
        return f"{self.riot_id_game_name}#{self.riot_id_tagline}"


class MatchDetails(BaseContract):
    """Match details payload, reduced to its participant list."""

    match_id: str | None = Field(None)
    participants: list[MatchParticipant] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def unwrap_match_v5(cls, data: Any) -> Any:
        if isinstance(data, dict) and isinstance(data.get("info"), dict):
            metadata = data.get("metadata") or {}
            return {**data["info"], "matchId": metadata.get("matchId")}
        return data

    def get_participant(self, puuid: str) -> MatchParticipant | None:
        for participant in self.participants:
            if participant.puuid == puuid:
                return participant
        return None
