"""Coordinates two player interfaces with the game engine."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass

from gomokurs.actions import (
    Debug,
    ErrorReport,
    Message,
    Metadata,
    Mode,
    NotifyError,
    Play,
    PlayerAction,
    PlayerNotifyError,
    Ready,
    RelativeGameEnd,
    Suggestion,
    Unknown,
)
from gomokurs.engine import GameEngine
from gomokurs.ports import PlayerInterface
from gomokurs.state import GameEnd, GameEngineError, PlayerColor, Position

logger = logging.getLogger(__name__)

_QUEUE_SIZE = 10000


@dataclass
class Player:
    """One side of the game: its colour, readiness, metadata and interface."""

    color: PlayerColor
    interface: PlayerInterface
    ready: bool = False
    metadata: Metadata | None = None

    async def notify(self, name: str, *args: object) -> None:
        """Call the interface's ``notify_<name>``, tagging failures with the colour."""
        method = getattr(self.interface, f"notify_{name}")
        try:
            await method(*args)
        except NotifyError as exc:
            raise PlayerNotifyError(exc, self.color) from exc


class Coordinator:
    """Forwards player actions to the game engine and reports back to players."""

    def __init__(
        self,
        game_engine: GameEngine,
        black_interface: PlayerInterface,
        white_interface: PlayerInterface,
        mode: Mode = Mode.SINGLE_GAME,
    ) -> None:
        self.game = game_engine
        self.black = Player(PlayerColor.BLACK, black_interface)
        self.white = Player(PlayerColor.WHITE, white_interface)
        self.mode = mode

    def _player(self, color: PlayerColor) -> Player:
        return self.black if color is PlayerColor.BLACK else self.white

    async def start_game(self) -> None:
        """Send START to both players and BEGIN to black."""
        size = self.game.board_size()
        await self.black.notify("start", size.x)
        await self.white.notify("start", size.x)
        await self.black.notify("begin")

    async def end_game(self) -> None:
        """Send END to both players."""
        await self.black.notify("end")
        await self.white.notify("end")

    async def restart_game(self) -> None:
        """Reset the engine and both players, then start a new game."""
        logger.debug("loop mode - restart game")
        self.game.reset()
        self.black.ready = False
        self.white.ready = False
        await self.black.notify("restart")
        await self.white.notify("restart")
        await self.black.notify("begin")

    async def handle_ready(self, color: PlayerColor) -> None:
        """Mark the player ready, or complain if it already was."""
        player = self._player(color)
        if player.ready:
            await player.notify("error", "player has already declared to be ready")
        else:
            player.ready = True

    async def handle_play(self, color: PlayerColor, position: Position) -> GameEnd | None:
        """Register a move; return the game end when the move finishes the game."""
        player = self._player(color)
        opponent = self._player(color.other())

        if not player.ready:
            await player.notify("error", "player has not declared to be ready")
            return None

        try:
            end = self.game.register_player_move(player.color, position)
        except GameEngineError as exc:
            await player.notify("error", str(exc))
            raise

        if end is None:
            await opponent.notify("turn", position)
            return None

        if end.is_draw:
            player_result = opponent_result = RelativeGameEnd.DRAW
        elif end.winner is player.color:
            player_result, opponent_result = RelativeGameEnd.WIN, RelativeGameEnd.LOOSE
        else:
            player_result, opponent_result = RelativeGameEnd.LOOSE, RelativeGameEnd.WIN
        await player.notify("result", player_result)
        await opponent.notify("result", opponent_result)
        return end

    async def handle_metadata(self, color: PlayerColor, metadata: Metadata) -> None:
        """Store the player's self-description."""
        self._player(color).metadata = metadata

    async def handle_unknown(self, color: PlayerColor, content: str) -> None:
        logger.error('%s send unknown error: "%s"', color, content)

    async def handle_error(self, color: PlayerColor, content: str) -> None:
        logger.error('%s send error: "%s"', color, content)

    async def handle_message(self, color: PlayerColor, content: str) -> None:
        logger.info('%s send message: "%s"', color, content)

    async def handle_debug(self, color: PlayerColor, content: str) -> None:
        logger.debug('%s send debug: "%s"', color, content)

    async def handle_suggestion(self, color: PlayerColor, position: Position) -> None:
        logger.info('%s send suggestion: "%s"', color, position)

    async def _dispatch(self, color: PlayerColor, action: PlayerAction) -> GameEnd | None:
        logger.debug("received %r from %s", action, color)
        match action:
            case Ready():
                await self.handle_ready(color)
            case Play(position=position):
                return await self.handle_play(color, position)
            case Metadata():
                await self.handle_metadata(color, action)
            case Unknown(content=content):
                await self.handle_unknown(color, content)
            case ErrorReport(content=content):
                await self.handle_error(color, content)
            case Message(content=content):
                await self.handle_message(color, content)
            case Debug(content=content):
                await self.handle_debug(color, content)
            case Suggestion(position=position):
                await self.handle_suggestion(color, position)
        return None

    async def run(self) -> GameEnd:
        """Listen to both players and play until a game ends for good.

        In single-game mode the first finished game ends the run; in loop mode
        a new game starts after each one. A timer running out always ends the
        run. Listener failures are raised.
        """
        queue: asyncio.Queue[tuple[PlayerColor, PlayerAction]] = asyncio.Queue(
            maxsize=_QUEUE_SIZE
        )
        listeners: set[asyncio.Future[None]] = {
            asyncio.ensure_future(player.interface.listen(player.color, queue))
            for player in (self.black, self.white)
        }
        timers: asyncio.Future[GameEnd] | None = None
        getter: asyncio.Future[tuple[PlayerColor, PlayerAction]] | None = None
        try:
            await self.start_game()
            timers = asyncio.ensure_future(self.game.run_timers())
            while True:
                if getter is None:
                    getter = asyncio.ensure_future(queue.get())
                done, _ = await asyncio.wait(
                    {getter, timers, *listeners}, return_when=asyncio.FIRST_COMPLETED
                )
                if getter in done:
                    color, action = getter.result()
                    getter = None
                    end = await self._dispatch(color, action)
                    if end is not None:
                        if self.mode is Mode.SINGLE_GAME:
                            await self.end_game()
                            return end
                        await self.restart_game()
                        await _cancel(timers)
                        timers = asyncio.ensure_future(self.game.run_timers())
                    continue
                if timers in done:
                    return timers.result()
                for task in done & listeners:
                    listeners.discard(task)
                    task.result()
        finally:
            pending = [t for t in (getter, timers, *listeners) if t is not None]
            for task in pending:
                task.cancel()
            await asyncio.gather(*pending, return_exceptions=True)


async def _cancel(task: asyncio.Future[object]) -> None:
    task.cancel()
    await asyncio.gather(task, return_exceptions=True)