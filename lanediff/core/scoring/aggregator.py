"""Reduce stat records to scores and compare the two tracked players."""

from collections.abc import Sequence

import numpy as np

from lanediff.core.scoring.models import ChartPoint, PlayerStats, StatBreakdownRow, StatKey

MS_PER_MINUTE = 60_000


def score_player(stats: PlayerStats) -> float:
    """Sum of weighted values over all ten stat keys."""
    return sum(value.weighted for _, value in stats.items())


def build_chart_point(
    timestamp_ms: int,
    main_stats: PlayerStats,
    opponent_stats: PlayerStats,
    *,
    baseline: bool = False,
) -> ChartPoint:
    """Score both players at one frame.

    The baseline point pins ``score_difference`` to 0 regardless of the
    starting snapshots.
    """
    main_score = score_player(main_stats)
    opponent_score = score_player(opponent_stats)
    return ChartPoint(
        time=timestamp_ms / MS_PER_MINUTE,
        score_difference=0 if baseline else main_score - opponent_score,
        main_player_score=main_score,
        opponent_player_score=opponent_score,
        main_player_stats=main_stats,
        opponent_player_stats=opponent_stats,
    )


def average_score_difference(differences: Sequence[float]) -> int:
    """Mean of per-frame differences, rounded half toward +infinity; 0 when empty."""
    if not differences:
        return 0
    mean = np.mean(np.asarray(differences, dtype=np.float64)).item()
    return int(np.floor(mean + 0.5))


def stat_breakdown(point: ChartPoint) -> list[StatBreakdownRow]:
    """Per-stat comparison rows (main minus opponent) in StatKey order."""
    rows: list[StatBreakdownRow] = []
    for key in StatKey:
        main = point.main_player_stats.get(key)
        opponent = point.opponent_player_stats.get(key)
        rows.append(
            StatBreakdownRow(
                key=key,
                main_raw=main.raw,
                main_weighted=main.weighted,
                opponent_raw=opponent.raw,
                opponent_weighted=opponent.weighted,
                raw_difference=main.raw - opponent.raw,
                weighted_difference=main.weighted - opponent.weighted,
            )
        )
    return rows
