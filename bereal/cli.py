"""
BeReal CLI - Command-line interface for the engine.

Usage:
    bereal play [--seed N] [--allow-board-first]   Play in the terminal
    bereal serve [--host H] [--port P]             Run the REST API
"""

from __future__ import annotations
import argparse
import logging
import shlex
import sys

from .engine_core.action import ActionResult
from .engine_core.config import GameConfig
from .engine_core.state import GameState
from .session import Session, SessionManager


HELP_TEXT = """Commands:
  select <id>   select an operator, a target or an operand
  stock <id>    stock / unstock / swap a hand card
  back          place the stock card back in the hand
  draw          discard the hand and draw the next 8 cards
  reset         start a new game
  show          print the table
  quit          leave"""


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="BeReal - Gaussian Integer Puzzle Engine",
        prog="bereal",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Play command
    play_parser = subparsers.add_parser("play", help="Play a game in the terminal")
    play_parser.add_argument("--seed", type=int, default=None, help="Seed for a reproducible deal")
    play_parser.add_argument(
        "--allow-board-first",
        action="store_true",
        help="Let a board card be the first operand of a binary operator",
    )

    # Serve command
    serve_parser = subparsers.add_parser("serve", help="Run the REST API")
    serve_parser.add_argument("--host", default="127.0.0.1", help="Bind address")
    serve_parser.add_argument("--port", type=int, default=8000, help="Bind port")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if args.command == "play":
        cmd_play(args)
    elif args.command == "serve":
        cmd_serve(args)
    else:
        parser.print_help()
        sys.exit(1)


def cmd_play(args, stdin=None, out=None):
    """Interactive game loop on stdin/stdout."""
    stdin = stdin or sys.stdin
    out = out or sys.stdout

    config = GameConfig(allow_board_first_operand=args.allow_board_first)
    manager = SessionManager(config=config)
    session = manager.create_session(random_seed=args.seed)

    print("BeReal - make every board card real to clear it.", file=out)
    print(HELP_TEXT, file=out)
    print(render_state(session.game_state), file=out)

    for line in stdin:
        try:
            parts = shlex.split(line)
        except ValueError:
            print("Could not parse input", file=out)
            continue
        if not parts:
            continue

        command, rest = parts[0].lower(), parts[1:]
        if command in ("quit", "exit", "q"):
            break
        if command == "show":
            print(render_state(session.game_state), file=out)
            continue
        if command in ("help", "?"):
            print(HELP_TEXT, file=out)
            continue

        result = run_command(session, command, rest)
        if result is None:
            print(f"Unknown command or missing card id: {line.strip()}", file=out)
            continue
        print(render_result(result), file=out)
        print(render_state(session.game_state), file=out)

    manager.end_session(session.session_id)


def run_command(session: Session, command: str, rest: list) -> ActionResult | None:
    """Dispatch one text command; None if it is not understood."""
    if command == "select" and rest:
        return session.select_card(rest[0])
    if command == "stock" and rest:
        return session.toggle_stock_from_hand(rest[0])
    if command == "back":
        return session.place_stock_back()
    if command == "draw":
        return session.draw_next_batch()
    if command == "reset":
        return session.reset_game()
    return None


def render_result(result: ActionResult) -> str:
    if not result.success:
        return f"Error: {result.error}"
    lines = list(result.state_changes)
    if result.notice is not None:
        lines.append(f"(ignored: {result.notice.value})")
    return "\n".join(lines) if lines else "OK"


def render_state(state: GameState) -> str:
    """Text rendering of the table."""
    selection = state.selection
    targets = set(selection.targets)
    operator_id = selection.operator.id if selection.operator else None

    def cell(card) -> str:
        mark = "*" if card.id in targets or card.id == operator_id else " "
        return f"{mark}[{card.id}] {card.label}"

    lines = [
        f"Moves: {state.moves}   Remaining: {state.remaining}   Removed: {state.total_removed}",
        "Board: " + ("  ".join(cell(c) for c in state.board) or "(empty)"),
        "Hand:  " + ("  ".join(cell(c) for c in state.hand) or "(empty)"),
        "Stock: " + (cell(state.stock) if state.stock else "(empty)"),
    ]
    if selection.operator is not None:
        lines.append(f"Operator: {selection.operator.label}")
    if state.game_over:
        lines.append(f"All cleared in {state.moves} moves! Type 'reset' to play again.")
    return "\n".join(lines)


def cmd_serve(args):
    """Run the REST API with uvicorn."""
    import uvicorn

    uvicorn.run("bereal.api.app:app", host=args.host, port=args.port)


if __name__ == "__main__":
    main()
