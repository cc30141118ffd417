"""Matchup Service - pairs a searched player with their lane opponent.

Match details carry each participant's ``teamPosition``; the lane opponent is
the participant on the other team in the same position. Role switching picks
the searched player's teammate in another position and compares them with
their own lane opponent.
"""

from dataclasses import dataclass
from typing import Any

import structlog

from lanediff.contracts.match import LaneRole, MatchDetails, MatchParticipant
from lanediff.contracts.timeline import MatchTimeline
from lanediff.core.observability import trace_performance
from lanediff.core.scoring.models import MatchupResult
from lanediff.core.scoring.processor import load_timeline, process_timeline

logger = structlog.get_logger(__name__)


class MatchupResolutionError(Exception):
    """Raised when a strict matchup lookup cannot pair two players."""

    pass


@dataclass(frozen=True)
class LaneMatchup:
    """Resolved pair of players to compare."""

    main: MatchParticipant
    opponent: MatchParticipant | None
    role: str


def find_lane_opponent(
    participants: list[MatchParticipant], player: MatchParticipant
) -> MatchParticipant | None:
    """Participant on the other team in the same position, if any."""
    if not player.team_position:
        return None
    for participant in participants:
        if (
            participant.team_id != player.team_id
            and participant.team_position == player.team_position
        ):
            return participant
    return None


def resolve_role_matchup(
    match: MatchDetails, searched_puuid: str, role: LaneRole | str | None = None
) -> LaneMatchup | None:
    """Resolve who to compare for ``role`` from the searched player's side.

    Without a role (or when no teammate plays it) the searched player is the
    main player. Returns None when the searched player is not in the match.
    """
    searched = match.get_participant(searched_puuid)
    if searched is None:
        return None

    role_value = role.value if isinstance(role, LaneRole) else role
    main = searched
    if role_value:
        for participant in match.participants:
            if participant.team_id == searched.team_id and participant.team_position == role_value:
                main = participant
                break

    return LaneMatchup(
        main=main,
        opponent=find_lane_opponent(match.participants, main),
        role=main.team_position,
    )


def require_matchup(
    match: MatchDetails, searched_puuid: str, role: LaneRole | str | None = None
) -> LaneMatchup:
    """Like resolve_role_matchup, but raises when no opponent can be paired."""
    matchup = resolve_role_matchup(match, searched_puuid, role)
    if matchup is None:
        raise MatchupResolutionError(f"Player {searched_puuid} is not in match {match.match_id}")
    if matchup.opponent is None:
        raise MatchupResolutionError(
            f"No lane opponent for {matchup.main.puuid} ({matchup.role or 'no position'}) "
            f"in match {match.match_id}"
        )
    return matchup


def _load_match(match: MatchDetails | dict[str, Any]) -> MatchDetails:
    if isinstance(match, MatchDetails):
        return match
    return MatchDetails.model_validate(match)


@trace_performance
def analyze_matchup(
    match: MatchDetails | dict[str, Any],
    timeline: MatchTimeline | dict[str, Any],
    searched_puuid: str,
    role: LaneRole | str | None = None,
) -> MatchupResult:
    """Score the searched player's side of ``role`` against its lane opponent."""
    details = _load_match(match)
    matchup = resolve_role_matchup(details, searched_puuid, role)
    if matchup is None or matchup.opponent is None:
        logger.info(
            "matchup_unresolved",
            match_id=details.match_id,
            role=role.value if isinstance(role, LaneRole) else role,
            searched_found=matchup is not None,
        )
        return MatchupResult.empty()

    return process_timeline(timeline, matchup.main.puuid, matchup.opponent.puuid)


@trace_performance
def role_score_differences(
    match: MatchDetails | dict[str, Any],
    timeline: MatchTimeline | dict[str, Any],
    searched_puuid: str,
) -> dict[LaneRole, int]:
    """Average score difference of every resolvable lane, from the searched player's side."""
    details = _load_match(match)
    parsed = load_timeline(timeline)
    if parsed is None or details.get_participant(searched_puuid) is None:
        return {}

    differences: dict[LaneRole, int] = {}
    for role in LaneRole:
        matchup = resolve_role_matchup(details, searched_puuid, role)
        if matchup is None or matchup.opponent is None or matchup.role != role.value:
            continue
        result = process_timeline(parsed, matchup.main.puuid, matchup.opponent.puuid)
        differences[role] = result.average_score_difference

    logger.debug("role_score_differences", match_id=details.match_id, roles=len(differences))
    return differences
