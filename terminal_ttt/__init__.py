from .game import Board, Cell, ContractViolation, Coordinate, Outcome, Player
from .ai import choose_move, search

__all__ = [
    "Board", "Cell", "ContractViolation", "Coordinate", "Outcome", "Player",
    "choose_move", "search",
]
