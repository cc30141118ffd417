"""Score weights: raw stat unit -> influence points."""

from collections.abc import Mapping
from types import MappingProxyType

from lanediff.core.scoring.models import StatKey

SCORE_WEIGHTS: Mapping[StatKey, float] = MappingProxyType(
    {
        StatKey.GOLD: 1,
        StatKey.KILLS: 300,
        StatKey.DEATHS: -500,
        StatKey.ASSISTS: 150,
        StatKey.WARDS_PLACED: 100,
        StatKey.WARDS_KILLED: 100,
        StatKey.DAMAGE_DEALT: 0.1,
        StatKey.DAMAGE_TAKEN: 0.1,
        StatKey.BUILDINGS: 700,
        StatKey.ELITE_MONSTERS: 500,
    }
)


def weigh(key: StatKey, raw: float) -> float:
    return raw * SCORE_WEIGHTS[key]
