"""Timeline processor - drives the frame-by-frame matchup replay.

Pure domain function: no I/O, no clock, no shared state. Degraded input never
raises; it yields the empty result or skips the affected frame.
"""

import logging
from typing import Any

from pydantic import ValidationError

from lanediff.config import Settings, get_settings
from lanediff.contracts.timeline import MatchTimeline
from lanediff.core.observability import trace_performance
from lanediff.core.scoring.accumulator import AccumulatorState, replay
from lanediff.core.scoring.aggregator import average_score_difference, build_chart_point
from lanediff.core.scoring.anomaly import is_ward_count_abnormal
from lanediff.core.scoring.combiner import combine_frame_stats
from lanediff.core.scoring.curator import curate_events
from lanediff.core.scoring.models import ChartPoint, GameEvent, MatchupResult

logger = logging.getLogger(__name__)


def load_timeline(timeline: MatchTimeline | dict[str, Any] | None) -> MatchTimeline | None:
    """Validate a raw timeline payload; ``None`` when it lacks frames or participants."""
    if isinstance(timeline, MatchTimeline):
        return timeline
    if not isinstance(timeline, dict):
        logger.warning("Timeline payload is not a mapping: %s", type(timeline).__name__)
        return None
    try:
        return MatchTimeline.model_validate(timeline)
    except ValidationError as e:
        logger.warning("Malformed timeline payload (%d errors): %s", e.error_count(), e)
        return None


@trace_performance
def process_timeline(
    timeline: MatchTimeline | dict[str, Any] | None,
    main_puuid: str | None,
    opponent_puuid: str | None,
    *,
    settings: Settings | None = None,
) -> MatchupResult:
    """Compare two participants' influence scores across a match timeline.

    Args:
        timeline: Match-V5 timeline payload or parsed MatchTimeline
        main_puuid: External ID of the player whose perspective is charted
        opponent_puuid: External ID of the player compared against

    Returns:
        MatchupResult with one chart point per scored frame (plus the zero
        baseline), curated kill/objective markers and the rounded mean
        score difference. Empty when the timeline or either ID is unusable.
    """
    settings = settings or get_settings()

    parsed = load_timeline(timeline)
    if parsed is None:
        return MatchupResult.empty()

    main_id = parsed.get_participant_by_puuid(main_puuid)
    opponent_id = parsed.get_participant_by_puuid(opponent_puuid)
    if main_id is None or opponent_id is None:
        logger.info(
            "Tracked player not in timeline %s (main resolved=%s, opponent resolved=%s)",
            parsed.match_id,
            main_id is not None,
            opponent_id is not None,
        )
        return MatchupResult.empty()

    frames = parsed.ordered_frames()
    abnormal_wards = is_ward_count_abnormal(
        frames, main_id, opponent_id, threshold=settings.ward_anomaly_threshold
    )

    chart_data: list[ChartPoint] = []
    game_events: list[GameEvent] = []
    differences: list[float] = []

    if frames:
        first = frames[0]
        main_snapshot = first.snapshot_for(main_id)
        opponent_snapshot = first.snapshot_for(opponent_id)
        if main_snapshot is not None and opponent_snapshot is not None:
            # Nothing has happened yet; counters are zero and wards are not suppressed
            zero = AccumulatorState()
            chart_data.append(
                build_chart_point(
                    0,
                    combine_frame_stats(main_snapshot, zero.main),
                    combine_frame_stats(opponent_snapshot, zero.opponent),
                    baseline=True,
                )
            )

    for frame, state in replay(frames, main_id, opponent_id):
        # The opening frame is covered by the baseline point
        if frame.timestamp == 0:
            continue

        game_events.extend(curate_events(frame.events, main_id, opponent_id))

        main_snapshot = frame.snapshot_for(main_id)
        opponent_snapshot = frame.snapshot_for(opponent_id)
        if main_snapshot is None or opponent_snapshot is None:
            logger.debug("Skipping frame at %dms: tracked snapshot missing", frame.timestamp)
            continue

        point = build_chart_point(
            frame.timestamp,
            combine_frame_stats(
                main_snapshot, state.main, is_ward_count_abnormal=abnormal_wards
            ),
            combine_frame_stats(
                opponent_snapshot, state.opponent, is_ward_count_abnormal=abnormal_wards
            ),
        )
        chart_data.append(point)
        differences.append(point.score_difference)

    return MatchupResult(
        chart_data=chart_data,
        game_events=game_events,
        average_score_difference=average_score_difference(differences),
    )
