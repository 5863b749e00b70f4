#!/usr/bin/env python3
"""
minegrid - text front-end.

Usage:
    python main.py play [--width W] [--height H] [--mines N] [--seed S]
    python main.py show --seed S [--x X --y Y]
"""
import argparse
import logging
import sys
from typing import Callable, List, Optional, Tuple

from minegrid import Board, BoardError, RevealResult

logger = logging.getLogger("minegrid.cli")

HELP_TEXT = """Commands:
  r x y   - reveal cell at column x, row y (1-based)
  f x y   - toggle flag at x, y (1-based)
  n       - new game with the same settings
  q       - quit
  h/help  - show this help"""


def parse_coordinates(parts: List[str]) -> Tuple[Optional[Tuple[int, int]], str]:
    """
    Parse ``cmd x y`` with 1-based coordinates.

    Returns:
        ((x, y) zero-based, "") on success, (None, message) otherwise.
    """
    if len(parts) < 3:
        return None, f"Usage: {parts[0]} x y"
    try:
        x = int(parts[1])
    except ValueError:
        return None, "Invalid x"
    try:
        y = int(parts[2])
    except ValueError:
        return None, "Invalid y"
    if x < 1 or y < 1:
        return None, "Use 1-based coordinates"
    return (x - 1, y - 1), ""


def play_loop(board: Board, read_line: Callable[[str], str] = input) -> None:
    """Run the prompt loop until the game ends, input ends, or the user quits."""
    while True:
        print(f"\n{board}")
        if board.is_lost:
            print("Boom! You hit a mine. Game over.\n")
            print(f"Final board (mines shown):\n{board.render(True, True)}")
            return
        if board.is_won:
            print("Congratulations! You cleared the board!\n")
            print(f"Final board (mines shown):\n{board.render(True, True)}")
            return

        try:
            line = read_line("> ").strip()
        except EOFError:
            return
        if not line:
            continue

        parts = line.split()
        command = parts[0].lower()
        if command in ("q", "quit", "exit"):
            return
        if command in ("h", "help"):
            print(HELP_TEXT)
        elif command in ("n", "new"):
            board.reset()
            print("New game.")
        elif command in ("r", "reveal"):
            position, error = parse_coordinates(parts)
            if position is None:
                print(error)
                continue
            result = board.reveal(*position)
            logger.debug("reveal %s -> %s", position, result.name)
        elif command in ("f", "flag"):
            position, error = parse_coordinates(parts)
            if position is None:
                print(error)
                continue
            if not board.toggle_flag(*position):
                print("Cannot flag revealed cell or out of bounds")
        else:
            print(f"Unknown command '{command}'. Type 'h' for help.")


def play(args: argparse.Namespace) -> int:
    """Play an interactive game on stdin/stdout."""
    try:
        board = Board.new(args.width, args.height, args.mines, args.seed)
    except BoardError as exc:
        print(exc, file=sys.stderr)
        return 1

    seed_note = f" (seed {args.seed})" if args.seed != 0 else ""
    print(f"Minesweeper {args.width}x{args.height} with {args.mines} mines{seed_note}")
    print("Coordinates are 1-based. Type 'h' for help.")
    print(HELP_TEXT)

    play_loop(board)
    return 0


def show(args: argparse.Namespace) -> int:
    """Generate a seeded layout from one reveal and print it fully exposed."""
    try:
        board = Board.new(args.width, args.height, args.mines, args.seed)
    except BoardError as exc:
        print(exc, file=sys.stderr)
        return 1

    result = board.reveal(args.x, args.y)
    print(f"Reveal ({args.x}, {args.y}) -> {result.name}")
    print(board.render(reveal_all_mines=True, one_based_coordinates=False))
    return 0 if result is not RevealResult.NO_OP else 1


def add_board_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--width", type=int, default=9, help="Board width")
    parser.add_argument("--height", type=int, default=9, help="Board height")
    parser.add_argument("--mines", type=int, default=10, help="Number of mines")
    parser.add_argument("--seed", type=int, default=0, help="Seed (0 = random)")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="minegrid - seeded mine-clearing puzzle"
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity",
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    play_parser = subparsers.add_parser("play", help="Play in the terminal")
    add_board_arguments(play_parser)

    show_parser = subparsers.add_parser(
        "show", help="Print the layout produced by a seed and first reveal"
    )
    add_board_arguments(show_parser)
    show_parser.add_argument("--x", type=int, default=0, help="First reveal column (0-based)")
    show_parser.add_argument("--y", type=int, default=0, help="First reveal row (0-based)")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Parse arguments and run the appropriate command."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "play":
        return play(args)
    if args.command == "show":
        return show(args)
    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
