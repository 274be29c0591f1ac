from __future__ import annotations
import argparse
import logging
from typing import List, Optional

from .ai import choose_move
from .config import CLEAR_SCREEN, LOG_LEVELS, default_log_level, setup_logging
from .game import Board, Cell, Coordinate, Player

log = logging.getLogger(__name__)


class InputError(ValueError):
    """Malformed or illegal console input; reported and re-prompted."""


def parse_args(argv: Optional[List[str]] = None):
    p = argparse.ArgumentParser(description="Tic-tac-toe against a perfect-play AI")
    p.add_argument("--side", choices=["x", "o"], type=str.lower, default=None,
                   help="your mark (O always plays first); asked interactively if omitted")
    p.add_argument("--no-clear", action="store_true", help="do not clear the screen between turns")
    p.add_argument("--no-symmetry", action="store_true",
                   help="score every first move, even symmetric duplicates")
    p.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS, default=default_log_level(),
                   help="logging level (default from $TTT_LOG_LEVEL, else WARNING)")
    return p.parse_args(argv)


def parse_coordinates(text: str) -> Coordinate:
    """Turn ``"row-col"`` (1-based) into a Coordinate."""
    parts = text.strip().split("-")
    if len(parts) != 2:
        raise InputError("Input must be in the format 'row-col'")
    try:
        row = int(parts[0])
    except ValueError:
        raise InputError("Invalid row index") from None
    try:
        col = int(parts[1])
    except ValueError:
        raise InputError("Invalid column index") from None
    if not 1 <= row <= 3:
        raise InputError("Row index out of range")
    if not 1 <= col <= 3:
        raise InputError("Column index out of range")
    return Coordinate(row - 1, col - 1)


def _tile(board: Board, coord: Coordinate, highlight: Optional[Coordinate]) -> str:
    cell = board.get(coord)
    if cell is Cell.EMPTY:
        return "[ ]" if coord == highlight else "   "
    return f" {cell.value} "


def render_board(board: Board, highlight: Optional[Coordinate] = None) -> str:
    rows = []
    for r in range(3):
        tiles = "│".join(_tile(board, Coordinate(r, c), highlight) for c in range(3))
        rows.append(f"     {r + 1} ║{tiles}║")
    sep = "       ╟───┼───┼───╢"
    return "\n".join([
        "         1   2   3",
        "       ╔═══╤═══╤═══╗",
        rows[0], sep, rows[1], sep, rows[2],
        "       ╚═══╧═══╧═══╝",
    ])


def clear_screen():
    print(CLEAR_SCREEN, end="")


def pick_side() -> Player:
    while True:
        answer = input("Pick a side. x/o. O always plays first. ").strip().lower()
        if answer in ("x", "o"):
            return Player(answer.upper())
        print("Error: Invalid input. Please pick between 'x' and 'o'.")


def read_human_move(board: Board) -> Coordinate:
    """Select-then-confirm: ``row-col`` picks a cell, ``ok`` plays it, ``cancel`` drops it."""
    selected: Optional[Coordinate] = None
    while True:
        if selected is None:
            print(f"Your turn, {board.turn}.")
        text = input("> ").strip()
        try:
            if text.lower() == "ok":
                if selected is None:
                    raise InputError("You must select a cell to play something in it.")
                board.play(selected)
                return selected
            if text.lower() == "cancel":
                selected = None
                continue
            try:
                coord = parse_coordinates(text)
            except InputError:
                raise InputError(
                    "Invalid input. Please enter coordinates in the format 'row-col' (e.g., '1-2')."
                ) from None
            if board.get(coord) is not Cell.EMPTY:
                raise InputError("That cell is already taken.")
            selected = coord
            print(render_board(board, highlight=selected))
        except InputError as e:
            log.debug("rejected input %r: %s", text, e)
            print(f"Error: {e}")


def play_bot_move(board: Board, ai_player: Player, use_symmetry: bool = True) -> Coordinate:
    coord, nodes = choose_move(board, ai_player, use_symmetry=use_symmetry)
    print(f"I looked at {nodes} parallel universes,\nand {coord} was the only one in which I win.")
    return coord


def play_game(board: Board, human: Player, clear: bool = True, use_symmetry: bool = True) -> Board:
    ai_player = human.opponent
    while not board.outcome.is_decided:
        if clear:
            clear_screen()
        print(render_board(board))
        if board.turn is human:
            read_human_move(board)
        else:
            play_bot_move(board, ai_player, use_symmetry=use_symmetry)
        board.switch_turn()
        board.evaluate_outcome()

    print(render_board(board))
    winner = board.outcome.winner
    if winner is not None:
        print(f"{winner} wins.")
    else:
        print("The game is a draw.")
    log.info("game over: %s", board.outcome.value)
    return board


def run_cli(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging(args.log_level)
    try:
        human = Player(args.side.upper()) if args.side else pick_side()
        play_game(Board.new(), human, clear=not args.no_clear, use_symmetry=not args.no_symmetry)
    except (EOFError, KeyboardInterrupt):
        print("\nBye.")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(run_cli())
