"""Whole-match ward telemetry sanity check.

Match-V5 occasionally double-reports WARD_PLACED events. When either tracked
player's deduplicated whole-match placement count exceeds the threshold, the
combiner replaces the wardsPlaced stat with a sentinel instead of scoring it.
"""

import logging
from collections.abc import Iterable

from lanediff.contracts.events import WardPlacedEvent
from lanediff.contracts.timeline import Frame

logger = logging.getLogger(__name__)

DEFAULT_WARD_ANOMALY_THRESHOLD = 200


def count_unique_ward_placements(
    frames: Iterable[Frame], participant_ids: Iterable[int]
) -> dict[int, int]:
    """Count WARD_PLACED events per participant, deduplicated by (creator, timestamp) match-wide."""
    tracked = set(participant_ids)
    seen: set[tuple[int, int]] = set()
    counts = {participant_id: 0 for participant_id in tracked}

    for frame in frames:
        for event in frame.events:
            if not isinstance(event, WardPlacedEvent) or event.creator_id not in tracked:
                continue
            key = (event.creator_id, event.timestamp)
            if key in seen:
                continue
            seen.add(key)
            counts[event.creator_id] += 1

    return counts


def is_ward_count_abnormal(
    frames: Iterable[Frame],
    main_id: int,
    opponent_id: int,
    threshold: int = DEFAULT_WARD_ANOMALY_THRESHOLD,
) -> bool:
    counts = count_unique_ward_placements(frames, (main_id, opponent_id))
    abnormal = counts[main_id] > threshold or counts[opponent_id] > threshold
    if abnormal:
        logger.warning(
            "Ward placement count above threshold %d (main=%d, opponent=%d); suppressing ward score",
            threshold,
            counts[main_id],
            counts[opponent_id],
        )
    return abnormal
