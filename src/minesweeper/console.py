"""
Console front end for Minesweeper.

Reads moves as two integers per line, prints the board after every
move and reports the final state once the game ends.
"""
import argparse
import logging
import re
import sys
from typing import Callable, Optional, Sequence, TextIO, Tuple

from .board import Board, BoardConfig, GameState


logger = logging.getLogger(__name__)

DEFAULT_MOVE: Tuple[int, int] = (0, 0)

INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


class MoveParseError(ValueError):
    """Raised when a line of input is not a 'row col' pair."""


def parse_move(line: str) -> Tuple[int, int]:
    """
    Parse a move from a line of text.

    Args:
        line: Two whitespace separated integers, e.g. "3 -1".

    Returns:
        (row, col) tuple. Values may be negative or off the board.

    Raises:
        MoveParseError: If the line does not hold exactly two integers.
    """
    tokens = line.split()
    if len(tokens) != 2:
        raise MoveParseError(f"Expected 2 values, got {len(tokens)}: {line!r}")
    if not all(INTEGER_PATTERN.fullmatch(token) for token in tokens):
        raise MoveParseError(f"Not a number in {line!r}")
    return int(tokens[0]), int(tokens[1])


def read_move(
    read_line: Callable[[], str],
    output: TextIO,
    strict: bool = False,
) -> Tuple[int, int]:
    """
    Read one move from the player.

    Malformed input prints "error" and falls back to DEFAULT_MOVE. In
    strict mode the player is asked again instead.

    Raises:
        EOFError: If the input is exhausted.
    """
    while True:
        output.flush()
        line = read_line()
        if not line:
            raise EOFError("No more moves to read")
        try:
            return parse_move(line)
        except MoveParseError as error:
            logger.warning(f"Rejected move input: {error}")
            print("error", file=output)
            if not strict:
                return DEFAULT_MOVE


def run_game(
    board: Board,
    input_stream: Optional[TextIO] = None,
    output: Optional[TextIO] = None,
    strict: bool = False,
) -> GameState:
    """
    Play a game to completion.

    Args:
        board: Board to play on.
        input_stream: Source of moves (default: stdin).
        output: Destination for the board display (default: stdout).
        strict: Re-prompt on malformed input instead of playing (0, 0).

    Returns:
        Final game state, WIN or LOST.
    """
    input_stream = input_stream or sys.stdin
    output = output or sys.stdout

    state = GameState.CONTINUE
    while state is GameState.CONTINUE:
        print(board.render(), file=output)
        row, col = read_move(input_stream.readline, output, strict)
        state = board.play_one_round(row, col)

    board.reveal_all()
    print(board.render(), file=output)
    print(state.label, file=output)
    return state


def build_parser() -> argparse.ArgumentParser:
    """Create the command line parser."""
    parser = argparse.ArgumentParser(
        description="Console Minesweeper - reveal cells by typing 'row col'"
    )
    parser.add_argument(
        "--size", type=int, default=8, help="Board size (NxN)"
    )
    parser.add_argument(
        "--mines", type=int, default=8, help="Number of mines"
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="Random seed for mine placement"
    )
    parser.add_argument(
        "--strict-input",
        action="store_true",
        help="Ask again on malformed input instead of playing (0, 0)",
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Enable debug logging"
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Parse arguments and run a game."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = BoardConfig(size=args.size, num_mines=args.mines)
    except ValueError as error:
        parser.error(str(error))

    board = Board.new(config.size, config.num_mines, seed=args.seed)
    try:
        run_game(board, strict=args.strict_input)
    except (EOFError, KeyboardInterrupt):
        print("\nGame aborted")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
