"""Pick the kills and objectives worth marking on the matchup chart."""

from collections.abc import Iterable

from lanediff.contracts.events import (
    BuildingKillEvent,
    ChampionKillEvent,
    EliteMonsterKillEvent,
)
from lanediff.core.scoring.aggregator import MS_PER_MINUTE
from lanediff.core.scoring.models import GameEvent, GameEventType


def curate_events(events: Iterable[object], main_id: int, opponent_id: int) -> list[GameEvent]:
    """Kills and objectives secured by either tracked player, in log order.

    Being the victim or an assister does not qualify a kill.
    """
    tracked = {main_id, opponent_id}
    curated: list[GameEvent] = []

    for event in events:
        if isinstance(event, ChampionKillEvent):
            if event.killer_id in tracked:
                curated.append(
                    GameEvent(
                        type=GameEventType.KILL,
                        time=event.timestamp / MS_PER_MINUTE,
                        killer_id=event.killer_id,
                        victim_id=event.victim_id,
                    )
                )
        elif isinstance(event, BuildingKillEvent):
            if event.killer_id in tracked:
                curated.append(
                    GameEvent(
                        type=GameEventType.OBJECTIVE,
                        time=event.timestamp / MS_PER_MINUTE,
                        killer_id=event.killer_id,
                        objective_type=event.building_type,
                    )
                )
        elif isinstance(event, EliteMonsterKillEvent):
            if event.killer_id in tracked:
                curated.append(
                    GameEvent(
                        type=GameEventType.OBJECTIVE,
                        time=event.timestamp / MS_PER_MINUTE,
                        killer_id=event.killer_id,
                        objective_type=event.monster_type,
                    )
                )

    return curated
