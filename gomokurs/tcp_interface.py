"""A player interface speaking the binary protocol over a TCP stream."""

from __future__ import annotations

import asyncio
from collections.abc import Sequence

from gomokurs.actions import (
    Debug,
    ErrorReport,
    Information,
    ListenError,
    Message,
    Metadata,
    NotifyError,
    Play,
    PlayerAction,
    Ready,
    RelativeField,
    RelativeGameEnd,
    RelativeTurn,
    Suggestion,
    Unknown,
)
from gomokurs.ports import PlayerInterface
from gomokurs.protocol import PROTOCOL_VERSION, ActionID, encode_string
from gomokurs.state import PlayerColor, Position

_FIELD_BYTES = {RelativeField.OWN_STONE: 0, RelativeField.OPPONENT_STONE: 1}
_RESULT_BYTES = {RelativeGameEnd.DRAW: 0, RelativeGameEnd.WIN: 1, RelativeGameEnd.LOOSE: 2}

_STREAM_ERRORS = (OSError, asyncio.IncompleteReadError)


class CreateTcpPlayerInterfaceError(Exception):
    """The connection with a TCP player could not be set up."""


class IncompatibleProtocolError(CreateTcpPlayerInterfaceError):
    """The player speaks another version of the protocol."""

    def __init__(self, manager_version: str, player_version: str) -> None:
        super().__init__(
            f"manager tcp player interface version `{manager_version}` is incompatible "
            f"with player manager interface version `{player_version}`"
        )
        self.manager_version = manager_version
        self.player_version = player_version


async def _read_string(reader: asyncio.StreamReader) -> str:
    size = int.from_bytes(await reader.readexactly(4), "big")
    return (await reader.readexactly(size)).decode("utf-8")


class TcpPlayerInterface(PlayerInterface):
    """Talks to a remote player over an established stream."""

    def __init__(self, reader: asyncio.StreamReader, writer: asyncio.StreamWriter) -> None:
        self._reader = reader
        self._writer = writer
        self._read_lock = asyncio.Lock()
        self._write_lock = asyncio.Lock()

    @classmethod
    async def create(
        cls, reader: asyncio.StreamReader, writer: asyncio.StreamWriter
    ) -> TcpPlayerInterface:
        """Run the protocol version handshake and return the interface."""
        try:
            action = (await reader.readexactly(1))[0]
            if action == ActionID.PLAYER_PROTOCOL_VERSION:
                try:
                    player_version = await _read_string(reader)
                except UnicodeDecodeError as exc:
                    raise CreateTcpPlayerInterfaceError(
                        f"create tcp interface error: `invalid protocol version: {exc}`"
                    ) from exc
                if player_version == PROTOCOL_VERSION:
                    writer.write(bytes([ActionID.MANAGER_PROTOCOL_COMPATIBLE]))
                    await writer.drain()
                else:
                    error = IncompatibleProtocolError(PROTOCOL_VERSION, player_version)
                    writer.write(encode_string(ActionID.MANAGER_ERROR, str(error)))
                    await writer.drain()
                    raise error
            else:
                writer.write(encode_string(ActionID.MANAGER_ERROR, "unexpected version"))
                await writer.drain()
        except _STREAM_ERRORS as exc:
            raise CreateTcpPlayerInterfaceError(f"create tcp interface error: `{exc}`") from exc
        return cls(reader, writer)

    async def _read_position(self) -> Position:
        x, y = await self._reader.readexactly(2)
        return Position(x, y)

    async def _read_action(self) -> PlayerAction | None:
        action = (await self._reader.readexactly(1))[0]
        match action:
            case ActionID.PLAYER_READY:
                return Ready()
            case ActionID.PLAYER_PLAY:
                return Play(await self._read_position())
            case ActionID.PLAYER_METADATA:
                return Metadata({})
            case ActionID.PLAYER_UNKNOWN:
                return Unknown("")
            case ActionID.PLAYER_ERROR:
                return ErrorReport(await _read_string(self._reader))
            case ActionID.PLAYER_MESSAGE:
                return Message(await _read_string(self._reader))
            case ActionID.PLAYER_DEBUG:
                return Debug(await _read_string(self._reader))
            case ActionID.PLAYER_SUGGESTION:
                return Suggestion(await self._read_position())
            case _:
                return None

    async def listen(
        self, color: PlayerColor, queue: asyncio.Queue[tuple[PlayerColor, PlayerAction]]
    ) -> None:
        while True:
            async with self._read_lock:
                try:
                    action = await self._read_action()
                except (*_STREAM_ERRORS, UnicodeDecodeError) as exc:
                    raise ListenError(str(exc) or type(exc).__name__) from exc
            if action is not None:
                await queue.put((color, action))

    async def _send(self, data: bytes) -> None:
        async with self._write_lock:
            if self._writer.is_closing():
                raise NotifyError("player connection is closed")
            try:
                self._writer.write(data)
                await self._writer.drain()
            except OSError as exc:
                raise NotifyError(str(exc)) from exc

    async def notify_start(self, size: int) -> None:
        await self._send(bytes([ActionID.MANAGER_START, size]))

    async def notify_restart(self) -> None:
        await self._send(bytes([ActionID.MANAGER_RESTART]))

    async def notify_turn(self, position: Position) -> None:
        await self._send(bytes([ActionID.MANAGER_TURN, position.x, position.y]))

    async def notify_begin(self) -> None:
        await self._send(bytes([ActionID.MANAGER_BEGIN]))

    async def notify_board(self, turns: Sequence[RelativeTurn]) -> None:
        data = bytearray([ActionID.MANAGER_BOARD])
        for turn in turns:
            data += bytes([turn.position.x, turn.position.y, _FIELD_BYTES[turn.field]])
        await self._send(bytes(data))

    async def notify_info(self, info: Information) -> None:
        await self._send(encode_string(ActionID.MANAGER_INFO, str(info)))

    async def notify_result(self, result: RelativeGameEnd) -> None:
        await self._send(bytes([ActionID.MANAGER_RESULT, _RESULT_BYTES[result]]))

    async def notify_end(self) -> None:
        await self._send(bytes([ActionID.MANAGER_END]))

    async def notify_about(self) -> None:
        await self._send(bytes([ActionID.MANAGER_ABOUT]))

    async def notify_unknown(self, content: str) -> None:
        """The binary protocol carries no such notification; nothing is sent."""

    async def notify_error(self, content: str) -> None:
        """The binary protocol carries no such notification; nothing is sent."""