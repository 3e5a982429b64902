"""The gomoku game engine: board, turn order and player timers."""

from __future__ import annotations

import asyncio

from gomokurs.state import (
    Board,
    BoardSize,
    GameEnd,
    NotPlayerTurnError,
    PlayerColor,
    Position,
)
from gomokurs.timer import Timer


class GameEngine:
    """Keeps the board, whose turn it is and each player's timer."""

    def __init__(self, size: BoardSize, turn_duration: float, match_duration: float) -> None:
        self.board = Board(size)
        self.turn_player = PlayerColor.BLACK
        self.timers = {
            PlayerColor.BLACK: Timer(turn_duration, match_duration),
            PlayerColor.WHITE: Timer(turn_duration, match_duration),
        }

    def board_size(self) -> BoardSize:
        """Return the board's dimensions."""
        return self.board.size

    async def run_timers(self) -> GameEnd:
        """Run both timers; the player whose time runs out first loses."""
        tasks = {
            asyncio.ensure_future(self.timers[PlayerColor.BLACK].run(False)): PlayerColor.WHITE,
            asyncio.ensure_future(self.timers[PlayerColor.WHITE].run(True)): PlayerColor.BLACK,
        }
        try:
            done, _ = await asyncio.wait(tasks, return_when=asyncio.FIRST_COMPLETED)
        finally:
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
        finished = next(iter(done))
        finished.result()
        return GameEnd(tasks[finished])

    def register_player_move(self, color: PlayerColor, position: Position) -> GameEnd | None:
        """Play a stone for ``color``; return the game end if it wins."""
        if color is not self.turn_player:
            raise NotPlayerTurnError(color)
        self.board.set_cell(position, color.to_cell())
        if self.board.check_win(position):
            return GameEnd(color)
        self.timers[self.turn_player].pause()
        self.timers[self.turn_player.other()].resume()
        self.turn_player = self.turn_player.other()
        return None

    def reset(self) -> None:
        """Start a fresh game with the same board size."""
        self.board = Board(self.board.size)
        self.turn_player = PlayerColor.BLACK
        for timer in self.timers.values():
            timer.pause()
            timer.reset()