#!/usr/bin/env python3
"""Preview a lane matchup comparison from saved Match-V5 JSON files.

Usage:
    # Compare two players directly
    python scripts/preview_matchup.py --timeline NA1_123_timeline.json --main PUUID_A --opponent PUUID_B

    # Let the match details pick the lane opponent (optionally for another role)
    python scripts/preview_matchup.py --timeline tl.json --match match.json --main PUUID_A --role JUNGLE

    # Dump the raw payload instead of the table
    python scripts/preview_matchup.py --timeline tl.json --match match.json --main PUUID_A --json
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from lanediff.config import get_settings  # noqa: E402
from lanediff.core.observability import configure_logging  # noqa: E402
from lanediff.core.scoring import MatchupResult, process_timeline, stat_breakdown  # noqa: E402
from lanediff.core.services import analyze_matchup, role_score_differences  # noqa: E402


def print_section(title: str, symbol: str = "=") -> None:
    """Print a formatted section header."""
    print(f"\n{symbol * 60}")
    print(f"{title}")
    print(f"{symbol * 60}")


def load_json(path: Path) -> dict:
    return json.loads(path.read_text(encoding="utf-8"))


def print_result(result: MatchupResult) -> None:
    print_section("SCORE DIFFERENCE BY MINUTE")
    for point in result.chart_data:
        print(
            f"{point.time:6.1f}m  diff={point.score_difference:+10.1f}  "
            f"main={point.main_player_score:10.1f}  opp={point.opponent_player_score:10.1f}"
        )

    print_section("EVENTS", "-")
    for event in result.game_events:
        detail = event.victim_id if event.victim_id is not None else event.objective_type
        print(f"{event.time:6.2f}m  {event.type.value:<9} killer={event.killer_id} {detail}")

    if result.chart_data:
        print_section("FINAL BREAKDOWN (main - opponent)", "-")
        for row in stat_breakdown(result.chart_data[-1]):
            print(
                f"{row.key.value:<14} raw={row.raw_difference:+10.1f}  "
                f"score={row.weighted_difference:+10.1f}"
            )

    print_section(f"AVERAGE SCORE DIFFERENCE: {result.average_score_difference:+d}")


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawTextHelpFormatter)
    parser.add_argument("--timeline", type=Path, required=True, help="Match-V5 timeline JSON")
    parser.add_argument("--match", type=Path, help="Match-V5 match details JSON")
    parser.add_argument("--main", required=True, help="PUUID of the searched/main player")
    parser.add_argument("--opponent", help="PUUID of the opponent (skips lane resolution)")
    parser.add_argument("--role", help="TOP/JUNGLE/MIDDLE/BOTTOM/UTILITY (requires --match)")
    parser.add_argument("--json", action="store_true", help="Print the raw payload")
    args = parser.parse_args()

    configure_logging(get_settings().effective_log_level)

    timeline = load_json(args.timeline)

    if args.opponent:
        result = process_timeline(timeline, args.main, args.opponent)
    elif args.match:
        match = load_json(args.match)
        result = analyze_matchup(match, timeline, args.main, args.role)
        if not args.json:
            print_section("AVERAGE DIFFERENCE PER ROLE", "-")
            for role, diff in role_score_differences(match, timeline, args.main).items():
                print(f"{role.value:<8} {diff:+d}")
    else:
        parser.error("either --opponent or --match is required")

    if args.json:
        print(json.dumps(result.to_payload(), indent=2, ensure_ascii=False))
    else:
        print_result(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
