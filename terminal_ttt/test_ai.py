import math

import pytest

from .ai import SearchStats, choose_move, score_move, search
from .game import Board, Cell, ContractViolation, Coordinate, Outcome, Player


def _root_score(board, ai_player):
    return search(board, board.turn is ai_player, ai_player, 0, -math.inf, math.inf, SearchStats())


def test_empty_board_is_a_draw_for_either_side():
    assert _root_score(Board.new(), Player.O) == 0
    assert _root_score(Board.new(), Player.X) == 0


def test_terminal_scores_prefer_fast_wins():
    won = Board.parse("OOO/XX./...", turn=Player.X)
    assert search(won, True, Player.O, 0, -math.inf, math.inf, SearchStats()) == 10
    assert search(won, True, Player.O, 3, -math.inf, math.inf, SearchStats()) == 7
    assert search(won, True, Player.X, 3, -math.inf, math.inf, SearchStats()) == -7
    draw = Board.parse("OXO/OXX/XOO")
    assert search(draw, True, Player.O, 4, -math.inf, math.inf, SearchStats()) == 0


def test_search_leaves_board_untouched_and_counts_nodes():
    board = Board.parse("O../.X./...")
    before = board.copy()
    stats = SearchStats()
    search(board, True, board.turn, 0, -math.inf, math.inf, stats)
    assert board == before
    assert stats.nodes > 1

    # root plus the single forced reply
    last = Board.parse("OXO/OXX/XO.")
    stats = SearchStats()
    search(last, True, last.turn, 0, -math.inf, math.inf, stats)
    assert stats.nodes == 2


def test_choose_move_counts_every_root_candidate():
    board = Board.parse("OXO/OXX/XO.")
    coord, nodes = choose_move(board, Player.O)
    assert coord == Coordinate(2, 2)
    assert nodes == 1

    # X at 3-1 lets O finish 1-3/2-3/3-3, X at 3-3 draws; two nodes each
    board = Board.parse("OXO/XXO/.O.")
    assert board.turn is Player.X
    coord, nodes = choose_move(board, Player.X)
    assert coord == Coordinate(2, 2)
    assert nodes == 4


def test_takes_the_winning_move():
    # X to move; O threatens 1-2 and 3-3, X wins at 3-3
    board = Board.parse("O.O/.O./XX.")
    assert board.turn is Player.X
    coord, nodes = choose_move(board, Player.X)
    assert coord == Coordinate(2, 2)
    assert nodes > 0
    assert board.get(coord) is Cell.X
    assert board.evaluate_outcome() is Outcome.X_WINS


def test_take_win_simple_fixture():
    board = Board.parse("XX./OO./O..", turn=Player.X)
    coord, _ = choose_move(board, Player.X)
    assert coord == Coordinate(0, 2)


def test_blocks_two_in_a_row():
    board = Board.parse("OO./.X./...")
    assert board.turn is Player.X
    coord, _ = choose_move(board, Player.X)
    assert coord == Coordinate(0, 2)


def test_o_blocks_too():
    board = Board.parse("XX./O../..O")
    assert board.turn is Player.O
    coord, _ = choose_move(board, Player.O)
    assert coord == Coordinate(0, 2)


def test_choose_move_does_not_switch_turn():
    board = Board.new()
    choose_move(board, Player.O)
    assert board.turn is Player.O
    assert board.cells.count(Cell.O) == 1


def test_choose_move_rejects_finished_game_and_wrong_turn():
    with pytest.raises(ContractViolation):
        choose_move(Board.parse("OXO/OXX/XOO"), Player.X)
    with pytest.raises(ContractViolation):
        choose_move(Board.new(), Player.X)


@pytest.mark.parametrize("layout", [
    ".........",
    "O........",
    "....O....",
    "OX./.../...",
    "O../.X./...",
    "X.O/.O./...",
])
def test_symmetry_pruning_keeps_the_best_score(layout):
    ai_player = Board.parse(layout).turn
    pruned = Board.parse(layout)
    full = Board.parse(layout)

    coord, pruned_nodes = choose_move(pruned, ai_player, use_symmetry=True)
    full_coord, full_nodes = choose_move(full, ai_player, use_symmetry=False)

    start = Board.parse(layout)
    best = max(score_move(start, c, ai_player, SearchStats()) for c in start.empty_cells())
    assert score_move(start, coord, ai_player, SearchStats()) == best
    assert score_move(start, full_coord, ai_player, SearchStats()) == best
    assert pruned_nodes <= full_nodes


def test_symmetry_pruning_skips_work_on_empty_board():
    _, pruned = choose_move(Board.new(), Player.O)
    _, full = choose_move(Board.new(), Player.O, use_symmetry=False)
    assert pruned < full


def test_ai_vs_ai_is_a_draw():
    board = Board.new()
    while not board.outcome.is_decided:
        choose_move(board, board.turn)
        board.switch_turn()
        board.evaluate_outcome()
    assert board.outcome is Outcome.DRAW


def test_ai_never_loses_against_any_reply():
    # AI plays O (first); walk every human reply
    def walk(board):
        if board.outcome.is_decided:
            assert board.outcome.winner is not Player.X
            return
        for coord in board.empty_cells():
            b = board.copy()
            b.play(coord)
            b.switch_turn()
            if b.evaluate_outcome().is_decided:
                walk(b)
                continue
            choose_move(b, Player.O)
            b.switch_turn()
            b.evaluate_outcome()
            walk(b)

    start = Board.new()
    choose_move(start, Player.O)
    start.switch_turn()
    start.evaluate_outcome()
    walk(start)
