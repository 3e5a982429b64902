"""Board state, player colours and game-engine errors."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class CellStatus(Enum):
    """The content of a single board cell."""

    AVAILABLE = "available"
    BLACK = "black"
    WHITE = "white"


class PlayerColor(Enum):
    """A player's colour."""

    BLACK = "black"
    WHITE = "white"

    def other(self) -> PlayerColor:
        """Return the opponent's colour."""
        return PlayerColor.WHITE if self is PlayerColor.BLACK else PlayerColor.BLACK

    def to_cell(self) -> CellStatus:
        """Return the cell status a stone of this colour produces."""
        return CellStatus.BLACK if self is PlayerColor.BLACK else CellStatus.WHITE

    def __str__(self) -> str:
        return f"{self.value} player"


@dataclass(frozen=True)
class Position:
    """A 2D coordinate on the board."""

    x: int
    y: int

    def __str__(self) -> str:
        return f"{self.x},{self.y}"


BoardSize = Position


class CheckRowAxis(Enum):
    """Direction vectors used when looking for five in a row."""

    HORIZONTAL = (1, 0)
    VERTICAL = (0, 1)
    DIAGONAL_UP = (1, -1)
    DIAGONAL_DOWN = (1, 1)


class GameEngineError(Exception):
    """Base class for errors raised by the game engine."""


class NotPlayerTurnError(GameEngineError):
    """A player tried to move out of turn."""

    def __init__(self, color: PlayerColor) -> None:
        super().__init__(f"it is not `{color}` turn")
        self.color = color


class SetCellError(GameEngineError):
    """A stone could not be placed on the board."""


class UnavailableCellError(SetCellError):
    """The targeted cell is already occupied."""

    def __init__(self, position: Position) -> None:
        super().__init__(f"index `{position}` points to unavailable cell")
        self.position = position


class OutOfBoundsError(SetCellError):
    """The targeted cell lies outside the board."""

    def __init__(self, position: Position, size: BoardSize) -> None:
        super().__init__(f"index `{position}` out of bounds: `{size}`")
        self.position = position
        self.size = size


_CELL_SYMBOLS = {
    CellStatus.AVAILABLE: " ",
    CellStatus.BLACK: "X",
    CellStatus.WHITE: "O",
}


class Board:
    """A gomoku board, stored column by column (``cells[x][y]``)."""

    def __init__(self, size: BoardSize) -> None:
        self.size = size
        self.cells: list[list[CellStatus]] = [
            [CellStatus.AVAILABLE] * size.y for _ in range(size.x)
        ]

    def _in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.size.x and 0 <= y < self.size.y

    def set_cell(self, position: Position, status: CellStatus) -> None:
        """Place ``status`` on an available cell."""
        if not self._in_bounds(position.x, position.y):
            raise OutOfBoundsError(position, self.size)
        if self.cells[position.x][position.y] is not CellStatus.AVAILABLE:
            raise UnavailableCellError(position)
        self.cells[position.x][position.y] = status

    def _check_row(self, origin: Position, axis: CheckRowAxis) -> bool:
        status = self.cells[origin.x][origin.y]
        dx, dy = axis.value
        consecutive = 0
        for step in range(-5, 5):
            x, y = origin.x + dx * step, origin.y + dy * step
            if not self._in_bounds(x, y):
                continue
            if self.cells[x][y] is status:
                consecutive += 1
                if consecutive >= 5:
                    return True
            else:
                consecutive = 0
        return False

    def check_win(self, played_move: Position) -> bool:
        """Tell whether the stone at ``played_move`` completes five in a row."""
        return any(self._check_row(played_move, axis) for axis in CheckRowAxis)

    def __str__(self) -> str:
        columns = ("|".join(_CELL_SYMBOLS[cell] for cell in column) for column in self.cells)
        return "\n".join(columns) + "\n"


@dataclass(frozen=True)
class GameEnd:
    """The end of a game: a winner, or a draw when ``winner`` is None."""

    winner: PlayerColor | None = None

    @property
    def is_draw(self) -> bool:
        return self.winner is None

    def __str__(self) -> str:
        if self.winner is None:
            return "board filled, draw"
        return f"{self.winner} won"