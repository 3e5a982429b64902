"""Player actions, manager notifications and coordinator errors."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from gomokurs.state import PlayerColor, Position


@dataclass(frozen=True)
class Ready:
    """The player declares it is ready to play."""


@dataclass(frozen=True)
class Play:
    """The player puts a stone on ``position``."""

    position: Position


@dataclass
class Metadata:
    """Key-value description of the player."""

    info: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class Unknown:
    """The player did not recognise the manager's last command."""

    content: str


@dataclass(frozen=True)
class ErrorReport:
    """The player reports an error it ran into."""

    content: str


@dataclass(frozen=True)
class Message:
    """A message from the player."""

    content: str


@dataclass(frozen=True)
class Debug:
    """Debugging output from the player."""

    content: str


@dataclass(frozen=True)
class Suggestion:
    """The player suggests a move to the manager."""

    position: Position


PlayerAction = Ready | Play | Metadata | Unknown | ErrorReport | Message | Debug | Suggestion


class RelativeField(Enum):
    """A stone seen from the receiving player's side."""

    OWN_STONE = "1"
    OPPONENT_STONE = "2"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class RelativeTurn:
    """A move seen from the receiving player's side, as sent with BOARD."""

    position: Position
    field: RelativeField

    def __str__(self) -> str:
        return f"{self.position},{self.field}"


class InfoKey(Enum):
    """The kinds of information the manager can send to a player."""

    TIMEOUT_TURN = "timeout_turn"
    TIMEOUT_MATCH = "timeout_match"
    MAX_MEMORY = "max_memory"
    TIME_LEFT = "time_left"
    GAME_TYPE = "game_type"
    RULE = "rule"
    EVALUATE = "evaluate"
    FOLDER = "folder"


@dataclass(frozen=True)
class Information:
    """One piece of information for a player.

    ``value`` is an integer for the numeric keys, an ``(x, y)`` pair for
    ``EVALUATE`` and a path for ``FOLDER``.
    """

    key: InfoKey
    value: int | tuple[int, int] | Path

    def __post_init__(self) -> None:
        if self.key is InfoKey.EVALUATE:
            if not (isinstance(self.value, tuple) and len(self.value) == 2):
                raise ValueError("evaluate information needs an (x, y) pair")
        elif self.key is InfoKey.FOLDER:
            if not isinstance(self.value, (str, Path)):
                raise ValueError("folder information needs a path")
        elif not isinstance(self.value, int) or isinstance(self.value, bool):
            raise ValueError(f"{self.key.value} information needs an integer")

    def __str__(self) -> str:
        if self.key is InfoKey.EVALUATE:
            x, y = self.value  # type: ignore[misc]
            return f"{self.key.value} {x},{y}"
        return f"{self.key.value} {self.value}"


class RelativeGameEnd(Enum):
    """A game result seen from the receiving player's side."""

    DRAW = "0"
    WIN = "1"
    LOOSE = "2"

    def __str__(self) -> str:
        return self.value


class Mode(Enum):
    """Whether the coordinator plays one game or keeps restarting."""

    SINGLE_GAME = "single_game"
    LOOP = "loop"


class CoordinatorError(Exception):
    """Base class for errors raised by the coordinator."""


class ChannelClosedError(CoordinatorError):
    """The channel carrying player actions closed unexpectedly."""

    def __init__(self) -> None:
        super().__init__("actions' channel abruptly closed")


class ListenError(Exception):
    """A player interface failed while listening."""


class NotifyError(Exception):
    """A player interface failed to deliver a notification."""


class PlayerNotifyError(CoordinatorError):
    """Notifying the player of ``color`` failed."""

    def __init__(self, error: NotifyError, color: PlayerColor) -> None:
        super().__init__(f"failed to notify `{color}`: `{error}`")
        self.error = error
        self.color = color