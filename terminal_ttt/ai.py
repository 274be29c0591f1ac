from __future__ import annotations
import logging
import math
from dataclasses import dataclass
from typing import Optional, Set, Tuple

from .config import WIN_SCORE
from .game import Board, ContractViolation, Coordinate, Outcome, Player
from .symmetry import symmetry_key

log = logging.getLogger(__name__)

# Minimax with alpha-beta pruning on a single board, mutated and restored in place.


@dataclass
class SearchStats:
    nodes: int = 0


def search(board: Board, maximizing: bool, ai_player: Player, depth: int,
           alpha: float, beta: float, stats: SearchStats) -> int:
    """Score ``board`` from ``ai_player``'s point of view.

    Faster wins score higher (``10 - depth``), slower losses score higher
    (``depth - 10``), draws are 0. The board is left exactly as it was found.
    """
    stats.nodes += 1

    if board.outcome.is_decided:
        winner = board.outcome.winner
        if winner is None:
            return 0
        return WIN_SCORE - depth if winner is ai_player else depth - WIN_SCORE

    best = -math.inf if maximizing else math.inf
    for coord in board.empty_cells():
        board.play(coord)
        original_turn = board.turn
        board.switch_turn()
        board.evaluate_outcome()

        score = search(board, not maximizing, ai_player, depth + 1, alpha, beta, stats)

        board.undo(coord)
        board.turn = original_turn

        if maximizing:
            best = max(best, score)
            alpha = max(alpha, score)
        else:
            best = min(best, score)
            beta = min(beta, score)
        if beta <= alpha:
            break
    return best


def score_move(board: Board, coord: Coordinate, ai_player: Player,
               stats: SearchStats) -> int:
    """Minimax value of ``ai_player`` playing ``coord`` now."""
    board.play(coord)
    original_turn = board.turn
    board.switch_turn()
    board.evaluate_outcome()
    try:
        return search(board, False, ai_player, 0, -math.inf, math.inf, stats)
    finally:
        board.undo(coord)
        board.turn = original_turn


def choose_move(board: Board, ai_player: Player,
                use_symmetry: bool = True) -> Tuple[Coordinate, int]:
    """Pick the best move for ``ai_player``, play it and return it with the node count.

    Candidates are tried in row-major order and the first one with the
    strictly highest score wins. With ``use_symmetry`` a candidate whose
    resulting position is a rotation or reflection of an earlier candidate's
    is skipped; it would score the same. The turn is not switched.
    """
    if board.outcome.is_decided:
        raise ContractViolation(f"game is already over ({board.outcome.value})")
    if board.turn is not ai_player:
        raise ContractViolation(f"it is {board.turn}'s turn, not {ai_player}'s")

    stats = SearchStats()
    seen: Set[frozenset] = set()
    best_move: Optional[Coordinate] = None
    best_score = -math.inf

    for coord in board.empty_cells():
        if use_symmetry:
            board.play(coord)
            key = symmetry_key(board.cells)
            board.undo(coord)
            if key in seen:
                log.debug("skipping %s, symmetric to an earlier candidate", coord)
                continue
            seen.add(key)

        score = score_move(board, coord, ai_player, stats)
        log.debug("candidate %s scores %d", coord, score)
        if score > best_score:
            best_score, best_move = score, coord

    # an undecided board always has an empty cell, so best_move is set
    board.play(best_move)
    log.debug("%s plays %s (score %d, %d nodes)", ai_player, best_move, best_score, stats.nodes)
    return best_move, stats.nodes
