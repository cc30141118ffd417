"""
Match Timeline data contracts for Riot API Match-V5.
This is the input structure of the matchup scoring engine.
"""

from typing import Any

from pydantic import AliasChoices, Field, field_validator, model_validator

from .common import BaseContract
from .events import SCORED_EVENT_TYPES, BaseEvent, TimelineEvent


def _zero_if_none(v: Any) -> Any:
    return 0 if v is None else v


class DamageStats(BaseContract):
    """Cumulative damage statistics at a specific frame."""

    total_damage_done_to_champions: int | float = Field(0)
    total_damage_taken: int | float = Field(0)

    @field_validator("total_damage_done_to_champions", "total_damage_taken", mode="before")
    @classmethod
    def default_damage(cls, v: Any) -> Any:
        return _zero_if_none(v)


class ParticipantSnapshot(BaseContract):
    """Continuous, cumulative-to-date participant state at a specific frame."""

    participant_id: int | None = Field(None)
    total_gold: int | float = Field(0)
    damage_stats: DamageStats = Field(default_factory=DamageStats)

    @field_validator("total_gold", mode="before")
    @classmethod
    def default_gold(cls, v: Any) -> Any:
        return _zero_if_none(v)

    @field_validator("damage_stats", mode="before")
    @classmethod
    def default_damage_stats(cls, v: Any) -> Any:
        return {} if v is None else v


class Frame(BaseContract):
    """A single frame in the match timeline."""

    timestamp: int = Field(..., description="Frame timestamp in milliseconds")
    participant_frames: dict[int, ParticipantSnapshot] = Field(
        default_factory=dict, description="Participant states indexed by participant ID"
    )
    events: list[TimelineEvent] = Field(
        default_factory=list, description="Scored events that occurred during this frame"
    )

    @field_validator("participant_frames", mode="before")
    @classmethod
    def drop_empty_snapshots(cls, v: Any) -> Any:
        """Riot occasionally ships null snapshots for disconnected players."""
        if v is None:
            return {}
        if isinstance(v, dict):
            return {key: value for key, value in v.items() if value is not None}
        return v

    @field_validator("events", mode="before")
    @classmethod
    def keep_scored_events(cls, v: Any) -> Any:
        """Drop event types that never influence the matchup score."""
        if v is None:
            return []
        if isinstance(v, list):
            return [
                event
                for event in v
                if isinstance(event, BaseEvent)
                or (isinstance(event, dict) and event.get("type") in SCORED_EVENT_TYPES)
            ]
        return v

    def snapshot_for(self, participant_id: int) -> ParticipantSnapshot | None:
        return self.participant_frames.get(participant_id)


class TimelineParticipant(BaseContract):
    """Participant mapping in timeline: external PUUID to timeline-local ID."""

    participant_id: int = Field(
        ..., validation_alias=AliasChoices("participantId", "participant_id", "localId")
    )
    puuid: str = Field(..., validation_alias=AliasChoices("puuid", "externalId"))


class MatchTimeline(BaseContract):
    """Complete match timeline.

    Accepts either the raw Match-V5 payload (``{"metadata": ..., "info": ...}``)
    or the bare ``{"frames": ..., "participants": ...}`` shape.
    """

    match_id: str | None = Field(None, description="Match ID, when metadata was supplied")
    frame_interval: int = Field(60000, description="Milliseconds between frames (usually 60000)")
    frames: list[Frame] = Field(..., description="List of all frames in the match")
    participants: list[TimelineParticipant] = Field(
        ..., description="Participant ID to PUUID mapping"
    )

    @model_validator(mode="before")
    @classmethod
    def unwrap_match_v5(cls, data: Any) -> Any:
        if isinstance(data, dict) and isinstance(data.get("info"), dict):
            metadata = data.get("metadata") or {}
            return {**data["info"], "matchId": metadata.get("matchId")}
        return data

    def get_participant_by_puuid(self, puuid: str | None) -> int | None:
        """Get participant ID by PUUID."""
        if puuid is None:
            return None
        for participant in self.participants:
            if participant.puuid == puuid:
                return participant.participant_id
        return None

    def ordered_frames(self) -> list[Frame]:
        """Frames in ascending timestamp order (stable for equal timestamps)."""
        return sorted(self.frames, key=lambda frame: frame.timestamp)
