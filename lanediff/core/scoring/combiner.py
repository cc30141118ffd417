"""Combine a participant snapshot with the replayed event counters."""

from lanediff.contracts.timeline import ParticipantSnapshot
from lanediff.core.scoring.accumulator import EventCounters
from lanediff.core.scoring.models import PlayerStats, StatKey, StatValue
from lanediff.core.scoring.weights import weigh

# Displayed in place of the ward count when ward telemetry is unreliable
WARD_SENTINEL = -1


def raw_stats(
    snapshot: ParticipantSnapshot,
    counters: EventCounters,
    *,
    is_ward_count_abnormal: bool = False,
) -> dict[StatKey, float]:
    return {
        StatKey.GOLD: snapshot.total_gold,
        StatKey.KILLS: counters.kills,
        StatKey.DEATHS: counters.deaths,
        StatKey.ASSISTS: counters.assists,
        StatKey.WARDS_PLACED: WARD_SENTINEL if is_ward_count_abnormal else counters.wards_placed,
        StatKey.WARDS_KILLED: counters.wards_killed,
        StatKey.DAMAGE_DEALT: snapshot.damage_stats.total_damage_done_to_champions,
        StatKey.DAMAGE_TAKEN: snapshot.damage_stats.total_damage_taken,
        StatKey.BUILDINGS: counters.building_kill,
        StatKey.ELITE_MONSTERS: counters.elite_monster_kill,
    }


def combine_frame_stats(
    snapshot: ParticipantSnapshot,
    counters: EventCounters,
    *,
    is_ward_count_abnormal: bool = False,
) -> PlayerStats:
    """Build the {raw, weighted} record for every stat key."""
    raw = raw_stats(snapshot, counters, is_ward_count_abnormal=is_ward_count_abnormal)
    return PlayerStats(
        **{
            key.field_name: StatValue(raw=value, weighted=weigh(key, value))
            for key, value in raw.items()
        }
    )
