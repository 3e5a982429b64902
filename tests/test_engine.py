import asyncio

import pytest

from gomokurs.engine import GameEngine
from gomokurs.state import (
    CellStatus,
    GameEnd,
    NotPlayerTurnError,
    OutOfBoundsError,
    PlayerColor,
    Position,
    UnavailableCellError,
)

SIZE = Position(20, 20)


def _engine():
    return GameEngine(SIZE, 30, 180)


def test_board_size():
    assert _engine().board_size() == SIZE


def test_black_moves_first():
    engine = _engine()
    with pytest.raises(NotPlayerTurnError):
        engine.register_player_move(PlayerColor.WHITE, Position(0, 0))
    assert engine.board.cells[0][0] is CellStatus.AVAILABLE


def test_turns_alternate():
    engine = _engine()
    assert engine.register_player_move(PlayerColor.BLACK, Position(0, 0)) is None
    assert engine.turn_player is PlayerColor.WHITE
    with pytest.raises(NotPlayerTurnError):
        engine.register_player_move(PlayerColor.BLACK, Position(1, 0))
    assert engine.register_player_move(PlayerColor.WHITE, Position(1, 0)) is None
    assert engine.turn_player is PlayerColor.BLACK
    assert engine.board.cells[0][0] is CellStatus.BLACK
    assert engine.board.cells[1][0] is CellStatus.WHITE


def test_occupied_cell_keeps_turn():
    engine = _engine()
    engine.register_player_move(PlayerColor.BLACK, Position(5, 5))
    with pytest.raises(UnavailableCellError):
        engine.register_player_move(PlayerColor.WHITE, Position(5, 5))
    assert engine.turn_player is PlayerColor.WHITE


def test_out_of_bounds_move():
    engine = _engine()
    with pytest.raises(OutOfBoundsError):
        engine.register_player_move(PlayerColor.BLACK, Position(20, 3))
    assert engine.turn_player is PlayerColor.BLACK


def test_five_in_a_row_wins():
    engine = _engine()
    result = None
    for x in range(5):
        result = engine.register_player_move(PlayerColor.BLACK, Position(x, 0))
        if x < 4:
            assert result is None
            engine.register_player_move(PlayerColor.WHITE, Position(x, 10))
    assert result == GameEnd(PlayerColor.BLACK)


def test_reset_clears_board_and_turn():
    engine = _engine()
    engine.register_player_move(PlayerColor.BLACK, Position(3, 3))
    engine.reset()
    assert engine.turn_player is PlayerColor.BLACK
    assert engine.board_size() == SIZE
    assert all(cell is CellStatus.AVAILABLE for col in engine.board.cells for cell in col)
    assert engine.register_player_move(PlayerColor.BLACK, Position(3, 3)) is None


@pytest.mark.asyncio
async def test_black_running_out_of_time_loses():
    engine = GameEngine(SIZE, 0.05, 10)
    result = await asyncio.wait_for(engine.run_timers(), timeout=2)
    assert result == GameEnd(PlayerColor.WHITE)