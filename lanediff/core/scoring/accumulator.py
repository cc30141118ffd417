"""Event-sourced stat counters, replayed frame by frame.

Kills, deaths, assists, wards and objectives are not part of a participant
snapshot; they are rebuilt by folding every frame's event list into an
immutable AccumulatorState.
"""

from collections import Counter
from collections.abc import Iterable, Iterator, Mapping

from pydantic import BaseModel, ConfigDict

from lanediff.contracts.events import (
    BuildingKillEvent,
    ChampionKillEvent,
    EliteMonsterKillEvent,
    WardKillEvent,
    WardPlacedEvent,
)
from lanediff.contracts.timeline import Frame

MAIN = "main"
OPPONENT = "opponent"


class EventCounters(BaseModel):
    """Cumulative event counts for one tracked player."""

    model_config = ConfigDict(frozen=True)

    kills: int = 0
    deaths: int = 0
    assists: int = 0
    wards_placed: int = 0
    wards_killed: int = 0
    building_kill: int = 0
    elite_monster_kill: int = 0

    def plus(self, delta: Mapping[str, int]) -> "EventCounters":
        if not delta:
            return self
        return self.model_copy(
            update={name: getattr(self, name) + amount for name, amount in delta.items()}
        )


class AccumulatorState(BaseModel):
    """Counters for both tracked players at a point in the replay."""

    model_config = ConfigDict(frozen=True)

    main: EventCounters = EventCounters()
    opponent: EventCounters = EventCounters()


def apply_frame_events(
    state: AccumulatorState,
    events: Iterable[object],
    main_id: int,
    opponent_id: int,
) -> AccumulatorState:
    """Fold one frame's events into ``state`` and return the new state.

    Main and opponent are checked independently, so one event can move both.
    Ward events are deduplicated by (actor, timestamp) within this frame only.
    """
    tracked = ((MAIN, main_id), (OPPONENT, opponent_id))
    deltas: dict[str, Counter[str]] = {MAIN: Counter(), OPPONENT: Counter()}
    seen_wards: set[tuple[str, int, int]] = set()

    def credit(actor_id: int, counter: str) -> None:
        for role, participant_id in tracked:
            if actor_id == participant_id:
                deltas[role][counter] += 1

    for event in events:
        if isinstance(event, ChampionKillEvent):
            credit(event.killer_id, "kills")
            credit(event.victim_id, "deaths")
            for role, participant_id in tracked:
                if participant_id in event.assisting_participant_ids:
                    deltas[role]["assists"] += 1

        elif isinstance(event, (WardPlacedEvent, WardKillEvent)):
            if isinstance(event, WardPlacedEvent):
                actor_id, counter = event.creator_id, "wards_placed"
            else:
                actor_id, counter = event.killer_id, "wards_killed"
            # A placement and a ward kill at the same ms by one actor both count
            key = (counter, actor_id, event.timestamp)
            if key in seen_wards:
                continue
            seen_wards.add(key)
            credit(actor_id, counter)

        elif isinstance(event, BuildingKillEvent):
            credit(event.killer_id, "building_kill")

        elif isinstance(event, EliteMonsterKillEvent):
            credit(event.killer_id, "elite_monster_kill")

    return AccumulatorState(
        main=state.main.plus(deltas[MAIN]),
        opponent=state.opponent.plus(deltas[OPPONENT]),
    )


def replay(
    frames: Iterable[Frame], main_id: int, opponent_id: int
) -> Iterator[tuple[Frame, AccumulatorState]]:
    """Yield each frame with the counters as they stand after its events."""
    state = AccumulatorState()
    for frame in frames:
        state = apply_frame_events(state, frame.events, main_id, opponent_id)
        yield frame, state
