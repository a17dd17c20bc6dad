"""Entry point for the draftroom package."""

import argparse
import json
import logging
import sys
from typing import Any

from rich.console import Console
from rich.table import Table

from draftroom.config import get_config
from draftroom.errors import DraftroomError
from draftroom.league import League, load_league

console = Console()


def _print_json(data: Any) -> None:
    console.print_json(json.dumps(data))


def _cmd_evaluate(league: League, args: argparse.Namespace) -> None:
    evaluator = league.evaluator
    if args.player:
        evaluations = [evaluator.evaluate(pid) for pid in args.player]
        evaluator.ranking.update_ranks()
        evaluations = [evaluator.get_evaluation(e.player_id) for e in evaluations]
    else:
        result = evaluator.evaluate_all()
        if result.failed:
            for player_id, error in result.failed.items():
                console.print(f"[yellow]Skipped {player_id}:[/yellow] {error}")
        evaluations = evaluator.list_evaluations()

    if args.json:
        _print_json([e.to_dict() for e in evaluations])
        return

    table = Table(title="Player Evaluations")
    table.add_column("Rank", justify="right")
    table.add_column("Player")
    table.add_column("Rated")
    table.add_column("Best")
    table.add_column("Score", justify="right")
    table.add_column("Adj", justify="right")
    table.add_column("Tier", justify="right")
    table.add_column("Archetype")
    table.add_column("Viable")
    for e in evaluations:
        table.add_row(
            str(e.rank or "-"),
            e.player_name or e.player_id,
            e.rated_role.value if e.rated_role else "-",
            e.best_role.value if e.best_role else "-",
            f"{e.normalized_score:.1f}",
            f"{e.age_adjusted_score:.1f}",
            str(e.position_tier),
            e.archetype.primary if e.archetype else "-",
            ", ".join(r.value for r in e.viable_roles),
        )
    console.print(table)


def _cmd_recommend(league: League, args: argparse.Namespace) -> None:
    league.evaluator.evaluate_all()
    recommendations = league.recommendations.generate(
        args.session, args.round, args.pick, limit=args.limit
    )

    if args.json:
        _print_json([r.to_dict() for r in recommendations])
        return

    overall = recommendations[0].overall_pick if recommendations else "?"
    table = Table(title=f"Round {args.round}, pick {args.pick} (overall {overall})")
    table.add_column("#", justify="right")
    table.add_column("Player")
    table.add_column("Projected", justify="right")
    table.add_column("Score", justify="right")
    table.add_column("Reason")
    for i, r in enumerate(recommendations, start=1):
        table.add_row(str(i), r.player_name or r.player_id, str(r.projected_pick), f"{r.score:.3f}", r.reason)
    console.print(table)


def _cmd_needs(league: League, args: argparse.Namespace) -> None:
    league.evaluator.evaluate_all()
    needs = league.roster.positional_needs(args.session)

    if args.json:
        _print_json({role.value: need.to_dict() for role, need in needs.items()})
        return

    table = Table(title=f"Positional needs - session {args.session}")
    table.add_column("Role")
    table.add_column("Needed", justify="right")
    table.add_column("Priority", justify="right")
    table.add_column("Players")
    ordered = sorted(needs.values(), key=lambda n: n.priority, reverse=True)
    for need in ordered:
        players = ", ".join(
            f"{p.player_name} ({p.score:.0f}{'*' if p.is_secondary else ''})"
            for p in need.current_players
        )
        table.add_row(need.role.value, str(need.needed), f"{need.priority:.2f}", players or "-")
    console.print(table)


def _cmd_schedule(league: League, args: argparse.Namespace) -> None:
    slots = league.drafts.pick_schedule(args.session)
    if args.rounds:
        slots = slots[: args.rounds]

    if args.json:
        _print_json([s.to_dict() for s in slots])
        return

    table = Table(title=f"Pick schedule - session {args.session}")
    table.add_column("Round", justify="right")
    table.add_column("Pick", justify="right")
    table.add_column("Overall", justify="right")
    for slot in slots:
        table.add_row(str(slot.round), str(slot.pick), str(slot.overall))
    console.print(table)


def _cmd_board(league: League, args: argparse.Namespace) -> None:
    board = league.drafts.draft_board(args.round)

    if args.json:
        _print_json(board.to_dict())
        return

    table = Table(title=f"Draft board - round {board.round}")
    table.add_column("Overall", justify="right")
    table.add_column("Round pick", justify="right")
    table.add_column("Player")
    for entry in board.picks:
        table.add_row(
            str(entry.overall_pick),
            str(entry.round_pick or "-"),
            entry.player_name or entry.player_id,
        )
    console.print(table)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="draftroom - player evaluation and draft decision engine",
        prog="draftroom",
    )
    parser.add_argument("fixture", help="Path to a league fixture JSON file")
    parser.add_argument("--json", action="store_true", help="Print JSON instead of tables")
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Logging level (default: DRAFTROOM_LOG_LEVEL or INFO)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    evaluate = sub.add_parser("evaluate", help="Evaluate and rank players")
    evaluate.add_argument("--player", action="append", help="Only evaluate this player (repeatable)")
    evaluate.set_defaults(handler=_cmd_evaluate)

    recommend = sub.add_parser("recommend", help="Recommend players for a pick")
    recommend.add_argument("--session", required=True)
    recommend.add_argument("--round", type=int, required=True)
    recommend.add_argument("--pick", type=int, required=True)
    recommend.add_argument("--limit", type=int, default=None)
    recommend.set_defaults(handler=_cmd_recommend)

    needs = sub.add_parser("needs", help="Show positional needs for a session")
    needs.add_argument("--session", required=True)
    needs.set_defaults(handler=_cmd_needs)

    schedule = sub.add_parser("schedule", help="List a session's picks across the draft")
    schedule.add_argument("--session", required=True)
    schedule.add_argument("--rounds", type=int, default=None, help="Only show the first N rounds")
    schedule.set_defaults(handler=_cmd_schedule)

    board = sub.add_parser("board", help="Show the reference draft board for a round")
    board.add_argument("--round", type=int, required=True)
    board.set_defaults(handler=_cmd_board)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the draftroom command line."""
    args = build_parser().parse_args(argv)
    try:
        config = get_config()
    except ValueError as e:
        console.print(f"[red]Config error:[/red] {e}")
        return 2

    level = (args.log_level or config.log_level).upper()
    if not isinstance(logging.getLevelName(level), int):
        console.print(f"[red]Config error:[/red] unknown log level {level!r}")
        return 2

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    problems = config.validate()
    if problems:
        for problem in problems:
            console.print(f"[red]Config error:[/red] {problem}")
        return 2

    try:
        league = load_league(args.fixture, config=config)
        args.handler(league, args)
    except DraftroomError as e:
        console.print(f"[red]{type(e).__name__}:[/red] {e}")
        return 1
    except OSError as e:
        console.print(f"[red]Could not read {args.fixture}:[/red] {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
