"""The interface every player adapter implements."""

from __future__ import annotations

import asyncio
from abc import ABC, abstractmethod
from collections.abc import Sequence

from gomokurs.actions import Information, PlayerAction, RelativeGameEnd, RelativeTurn
from gomokurs.state import PlayerColor, Position


class PlayerInterface(ABC):
    """Talks to one player: receives its actions and sends it commands.

    Notification methods raise :class:`gomokurs.actions.NotifyError` on
    failure; :meth:`listen` raises :class:`gomokurs.actions.ListenError`.
    """

    @abstractmethod
    async def listen(
        self, color: PlayerColor, queue: asyncio.Queue[tuple[PlayerColor, PlayerAction]]
    ) -> None:
        """Read the player's actions and put ``(color, action)`` on ``queue``."""

    @abstractmethod
    async def notify_start(self, size: int) -> None:
        """Tell the player to set up a square board of ``size``."""

    @abstractmethod
    async def notify_restart(self) -> None:
        """Tell the player to start again with the previous board settings."""

    @abstractmethod
    async def notify_turn(self, position: Position) -> None:
        """Tell the player where the opponent just played."""

    @abstractmethod
    async def notify_begin(self) -> None:
        """Tell the player to make the first move."""

    @abstractmethod
    async def notify_board(self, turns: Sequence[RelativeTurn]) -> None:
        """Send the player the moves already on the board."""

    @abstractmethod
    async def notify_info(self, info: Information) -> None:
        """Send the player a piece of game information."""

    @abstractmethod
    async def notify_result(self, result: RelativeGameEnd) -> None:
        """Send the player the game's result."""

    @abstractmethod
    async def notify_end(self) -> None:
        """Tell the player the session is over."""

    @abstractmethod
    async def notify_about(self) -> None:
        """Ask the player to describe itself."""

    @abstractmethod
    async def notify_unknown(self, content: str) -> None:
        """Tell the player its last action was not understood."""

    @abstractmethod
    async def notify_error(self, content: str) -> None:
        """Tell the player its last action or its arguments were unexpected."""