"""Unit tests for the event accumulator fold."""

from lanediff.contracts.events import (
    BuildingKillEvent,
    ChampionKillEvent,
    EliteMonsterKillEvent,
    WardKillEvent,
    WardPlacedEvent,
)
from lanediff.contracts.timeline import Frame
from lanediff.core.scoring.accumulator import (
    AccumulatorState,
    EventCounters,
    apply_frame_events,
    replay,
)

MAIN_ID = 1
OPPONENT_ID = 6


def _apply(*events, state: AccumulatorState | None = None) -> AccumulatorState:
    return apply_frame_events(state or AccumulatorState(), events, MAIN_ID, OPPONENT_ID)


def test_kill_and_death_from_one_event() -> None:
    state = _apply(ChampionKillEvent(timestamp=1000, killer_id=MAIN_ID, victim_id=OPPONENT_ID))

    assert state.main.kills == 1
    assert state.main.deaths == 0
    assert state.opponent.deaths == 1
    assert state.opponent.kills == 0


def test_main_and_opponent_checked_independently() -> None:
    state = _apply(
        ChampionKillEvent(
            timestamp=1000, killer_id=3, victim_id=OPPONENT_ID, assisting_participant_ids=[MAIN_ID]
        ),
        ChampionKillEvent(
            timestamp=2000, killer_id=8, victim_id=4, assisting_participant_ids=[MAIN_ID, OPPONENT_ID]
        ),
    )

    assert state.main.assists == 2
    assert state.opponent.deaths == 1
    assert state.opponent.assists == 1


def test_ward_events_deduplicated_within_frame() -> None:
    state = _apply(
        WardPlacedEvent(timestamp=5000, creator_id=MAIN_ID),
        WardPlacedEvent(timestamp=5000, creator_id=MAIN_ID),
        WardPlacedEvent(timestamp=5001, creator_id=MAIN_ID),
        WardKillEvent(timestamp=5000, killer_id=OPPONENT_ID),
        WardKillEvent(timestamp=5000, killer_id=OPPONENT_ID),
        # Placement and kill by the same actor at the same time are distinct
        WardKillEvent(timestamp=5000, killer_id=MAIN_ID),
    )

    assert state.main.wards_placed == 2
    assert state.main.wards_killed == 1
    assert state.opponent.wards_killed == 1


def test_ward_dedup_resets_between_frames() -> None:
    ward = WardPlacedEvent(timestamp=5000, creator_id=MAIN_ID)

    first = _apply(ward)
    second = _apply(ward, state=first)

    assert first.main.wards_placed == 1
    assert second.main.wards_placed == 2


def test_objectives_credit_killer() -> None:
    state = _apply(
        BuildingKillEvent(timestamp=1, killer_id=MAIN_ID, building_type="TOWER_BUILDING"),
        BuildingKillEvent(timestamp=1, killer_id=MAIN_ID, building_type="INHIBITOR_BUILDING"),
        EliteMonsterKillEvent(timestamp=2, killer_id=OPPONENT_ID, monster_type="BARON_NASHOR"),
    )

    assert state.main.building_kill == 2
    assert state.opponent.elite_monster_kill == 1
    assert state.opponent.building_kill == 0


def test_untracked_actors_ignored() -> None:
    state = _apply(
        ChampionKillEvent(timestamp=1, killer_id=0, victim_id=9, assisting_participant_ids=[2, 3]),
        WardPlacedEvent(timestamp=1, creator_id=4),
        BuildingKillEvent(timestamp=1, killer_id=0),
    )

    assert state == AccumulatorState()


def test_fold_step_does_not_mutate_input_state() -> None:
    before = AccumulatorState()
    after = _apply(ChampionKillEvent(timestamp=1, killer_id=MAIN_ID, victim_id=OPPONENT_ID), state=before)

    assert before.main.kills == 0
    assert after.main.kills == 1
    assert after is not before


def test_counters_plus_empty_delta_returns_same_object() -> None:
    counters = EventCounters(kills=3)

    assert counters.plus({}) is counters
    assert counters.plus({"kills": 2, "assists": 1}) == EventCounters(kills=5, assists=1)


def test_replay_yields_cumulative_state() -> None:
    frames = [
        Frame(timestamp=0),
        Frame(
            timestamp=60000,
            events=[{"type": "CHAMPION_KILL", "timestamp": 30000, "killerId": MAIN_ID, "victimId": OPPONENT_ID}],
        ),
        Frame(
            timestamp=120000,
            events=[{"type": "CHAMPION_KILL", "timestamp": 90000, "killerId": MAIN_ID, "victimId": OPPONENT_ID}],
        ),
    ]

    states = [state for _, state in replay(frames, MAIN_ID, OPPONENT_ID)]

    assert [s.main.kills for s in states] == [0, 1, 2]
    assert [s.opponent.deaths for s in states] == [0, 1, 2]
