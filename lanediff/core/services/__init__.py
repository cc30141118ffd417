"""Core services."""

from lanediff.core.services.matchup_service import (
    LaneMatchup,
    MatchupResolutionError,
    analyze_matchup,
    find_lane_opponent,
    require_matchup,
    resolve_role_matchup,
    role_score_differences,
)

__all__ = [
    "LaneMatchup",
    "MatchupResolutionError",
    "analyze_matchup",
    "find_lane_opponent",
    "require_matchup",
    "resolve_role_matchup",
    "role_score_differences",
]
