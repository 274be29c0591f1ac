from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List, Optional


class ContractViolation(RuntimeError):
    """Raised when a caller breaks a board precondition (a bug, not bad input)."""


class Player(Enum):
    X = "X"
    O = "O"

    @property
    def opponent(self) -> "Player":
        return Player.O if self is Player.X else Player.X

    def __str__(self) -> str:
        return self.value


class Cell(Enum):
    EMPTY = " "
    X = "X"
    O = "O"

    @classmethod
    def of(cls, player: Player) -> "Cell":
        return cls.X if player is Player.X else cls.O

    @property
    def player(self) -> Optional[Player]:
        if self is Cell.EMPTY:
            return None
        return Player(self.value)


class Outcome(Enum):
    UNDECIDED = "undecided"
    X_WINS = "x_wins"
    O_WINS = "o_wins"
    DRAW = "draw"

    @classmethod
    def won_by(cls, player: Player) -> "Outcome":
        return cls.X_WINS if player is Player.X else cls.O_WINS

    @property
    def winner(self) -> Optional[Player]:
        if self is Outcome.X_WINS:
            return Player.X
        if self is Outcome.O_WINS:
            return Player.O
        return None

    @property
    def is_decided(self) -> bool:
        return self is not Outcome.UNDECIDED


SIZE = 3
FIRST_PLAYER = Player.O

LINES = [
    (0, 1, 2), (3, 4, 5), (6, 7, 8),  # rows
    (0, 3, 6), (1, 4, 7), (2, 5, 8),  # cols
    (0, 4, 8), (2, 4, 6)              # diags
]


@dataclass(frozen=True)
class Coordinate:
    row: int
    col: int

    def __post_init__(self):
        for name, value in (("row", self.row), ("col", self.col)):
            if not isinstance(value, int) or isinstance(value, bool) or not 0 <= value < SIZE:
                raise ValueError(f"{name} must be 0, 1 or 2, got {value!r}")

    @classmethod
    def from_index(cls, idx: int) -> "Coordinate":
        if not 0 <= idx < SIZE * SIZE:
            raise ValueError(f"index must be in 0..8, got {idx!r}")
        return cls(idx // SIZE, idx % SIZE)

    @classmethod
    def all(cls) -> Iterator["Coordinate"]:
        """All nine coordinates in row-major order."""
        for idx in range(SIZE * SIZE):
            yield cls.from_index(idx)

    @property
    def index(self) -> int:
        return self.row * SIZE + self.col

    def __str__(self) -> str:
        # 1-based, same notation the console accepts
        return f"{self.row + 1}-{self.col + 1}"


@dataclass
class Board:
    cells: List[Cell] = field(default_factory=lambda: [Cell.EMPTY] * 9)
    turn: Player = FIRST_PLAYER
    outcome: Outcome = Outcome.UNDECIDED

    @classmethod
    def new(cls) -> "Board":
        return cls()

    @classmethod
    def parse(cls, layout: str, turn: Optional[Player] = None) -> "Board":
        """Build a board from rows of X/O/. such as ``"XO./.X./..O"``.

        Slashes and whitespace are ignored. When ``turn`` is omitted it is
        inferred from the marker counts.
        """
        marks = [ch for ch in layout.upper() if ch not in "/ \t\n"]
        if len(marks) != 9:
            raise ValueError(f"layout needs 9 cells, got {len(marks)}")
        cells = []
        for ch in marks:
            if ch == ".":
                cells.append(Cell.EMPTY)
            elif ch in ("X", "O"):
                cells.append(Cell(ch))
            else:
                raise ValueError(f"unexpected cell {ch!r} in layout")
        if turn is None:
            n_x = cells.count(Cell.X)
            n_o = cells.count(Cell.O)
            turn = FIRST_PLAYER if n_o == n_x else FIRST_PLAYER.opponent
        board = cls(cells, turn)
        board.evaluate_outcome()
        return board

    def copy(self) -> "Board":
        return Board(self.cells.copy(), self.turn, self.outcome)

    def get(self, coord: Coordinate) -> Cell:
        return self.cells[coord.index]

    def empty_cells(self) -> List[Coordinate]:
        return [Coordinate.from_index(i) for i, c in enumerate(self.cells) if c is Cell.EMPTY]

    def play(self, coord: Coordinate) -> None:
        """Put the current player's marker on an empty cell. Does not switch turns."""
        if self.cells[coord.index] is not Cell.EMPTY:
            raise ContractViolation(f"cell {coord} is already taken")
        self.cells[coord.index] = Cell.of(self.turn)

    def undo(self, coord: Coordinate) -> None:
        self.cells[coord.index] = Cell.EMPTY
        self.outcome = Outcome.UNDECIDED

    def switch_turn(self) -> None:
        self.turn = self.turn.opponent

    def is_full(self) -> bool:
        return all(c is not Cell.EMPTY for c in self.cells)

    def evaluate_outcome(self) -> Outcome:
        b = self.cells
        for a, c, d in LINES:
            if b[a] is not Cell.EMPTY and b[a] is b[c] is b[d]:
                self.outcome = Outcome.won_by(b[a].player)
                return self.outcome
        self.outcome = Outcome.DRAW if self.is_full() else Outcome.UNDECIDED
        return self.outcome
