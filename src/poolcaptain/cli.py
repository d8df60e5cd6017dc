"""Command-line interface for generating match lineups from a roster file."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Mapping, Sequence

from poolcaptain.config import EIGHT_BALL, GAME_TYPES, NINE_BALL
from poolcaptain.config_loader import MappingProfile
from poolcaptain.export import export_results_to_csv
from poolcaptain.generator import GenerationResult
from poolcaptain.ingest import RosterLoadError, load_team
from poolcaptain.session import RosterSession


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate valid 5-player match lineups from a team roster")
    parser.add_argument("roster", type=Path, help="Path to roster JSON or CSV")
    parser.add_argument(
        "--game-type",
        default=None,
        help=f"One of {', '.join(GAME_TYPES)} (default: the roster's own game type)",
    )
    parser.add_argument(
        "--require-8",
        nargs="*",
        default=[],
        help="Player IDs to pin into every 8-Ball lineup",
    )
    parser.add_argument(
        "--require-9",
        nargs="*",
        default=[],
        help="Player IDs to pin into every 9-Ball lineup",
    )
    parser.add_argument(
        "--absent",
        nargs="*",
        default=[],
        help="Player IDs who cannot play this week",
    )
    parser.add_argument(
        "--column",
        action="append",
        default=[],
        help="Mapping for roster CSV columns (e.g., skill8=SL8)",
    )
    parser.add_argument("--load-profile", type=Path, help="Load column mapping JSON", default=None)
    parser.add_argument("--save-profile", type=Path, help="Save column mapping JSON", default=None)
    parser.add_argument("--limit", type=int, default=10, help="Lineups to print per variant")
    parser.add_argument("--output", type=Path, default=None, help="Optional CSV path for all lineups")
    parser.add_argument("--json", type=Path, default=None, help="Optional JSON path for full results")
    return parser.parse_args(argv)


def _parse_mapping(entries: list[str]) -> dict[str, str]:
    mapping: dict[str, str] = {}
    for entry in entries:
        if "=" not in entry:
            raise ValueError(f"Invalid mapping entry '{entry}', expected key=value")
        key, value = entry.split("=", 1)
        mapping[key.strip()] = value.strip()
    return mapping


def _print_result(result: GenerationResult, limit: int) -> None:
    print(f"== {result.variant}: {len(result.lineups)} lineup(s)")
    for advisory in result.advisories:
        print(f"  [{advisory.kind}] {advisory.message}")
    for lineup in result.lineups[: max(0, limit)]:
        members = ", ".join(f"{player.name} ({player.skill(result.variant)})" for player in lineup.players)
        suffix = " [fallback]" if lineup.fallback else ""
        print(f"  {lineup.lineup_id} total={lineup.skill_total}{suffix}: {members}")
    hidden = len(result.lineups) - max(0, limit)
    if hidden > 0:
        print(f"  ... +{hidden} more")


def _write_outputs(args: argparse.Namespace, results: Mapping[str, GenerationResult]) -> None:
    if args.output:
        args.output.write_text(export_results_to_csv(results), encoding="utf-8")
        print(f"Wrote lineups to {args.output}")
    if args.json:
        payload = {variant: result.to_dict() for variant, result in results.items()}
        args.json.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        print(f"Wrote results to {args.json}")


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)

    try:
        profile = MappingProfile(_parse_mapping(args.column), args.game_type)
        if args.load_profile:
            saved = MappingProfile.load(args.load_profile)
            profile = MappingProfile(
                saved.roster_mapping | profile.roster_mapping,
                profile.game_type or saved.game_type,
            )
    except (OSError, ValueError, KeyError) as exc:
        print(f"Invalid column mapping: {exc}", file=sys.stderr)
        return 2
    roster_mapping = profile.roster_mapping
    game_type = profile.game_type

    try:
        team = load_team(args.roster, game_type=game_type, mapping=roster_mapping or None)
    except (OSError, RosterLoadError, KeyError) as exc:
        print(f"Could not load roster: {exc}", file=sys.stderr)
        return 2

    if args.save_profile:
        profile.save(args.save_profile)
        print(f"Saved mapping profile to {args.save_profile}")

    session = RosterSession(team)
    try:
        for player_id in args.require_8:
            session.set_required(player_id, EIGHT_BALL, True)
        for player_id in args.require_9:
            session.set_required(player_id, NINE_BALL, True)
        for player_id in args.absent:
            session.set_absent(player_id, True)
    except KeyError as exc:
        print(f"Unknown player: {exc}", file=sys.stderr)
        return 2

    print(f"{session.team.name or session.team.id}: {session.team.game_type}, {len(session.team.players)} players")
    results = session.results
    for result in results.values():
        _print_result(result, args.limit)

    _write_outputs(args, results)

    if all(result.error is not None for result in results.values()):
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
