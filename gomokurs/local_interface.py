"""A player interface for a local program spoken to over its standard I/O."""

from __future__ import annotations

import asyncio
import logging
import os
from collections.abc import Iterable, Sequence
from pathlib import Path

from gomokurs.actions import (
    Information,
    ListenError,
    NotifyError,
    PlayerAction,
    RelativeGameEnd,
    RelativeTurn,
)
from gomokurs.parsers import ParseInputError, parse_input
from gomokurs.ports import PlayerInterface
from gomokurs.state import PlayerColor, Position

logger = logging.getLogger(__name__)


class CreateLocalPlayerInterfaceError(Exception):
    """The player program could not be started."""


class LocalPlayerInterface(PlayerInterface):
    """Runs a player program as a subprocess and talks the text protocol."""

    def __init__(self, process: asyncio.subprocess.Process) -> None:
        if process.stdin is None or process.stdout is None:
            raise ValueError("the player process needs piped stdin and stdout")
        self._process = process
        self._reader = process.stdout
        self._writer = process.stdin
        self._read_lock = asyncio.Lock()
        self._write_lock = asyncio.Lock()

    @classmethod
    async def create(
        cls, binary: str | Path, args: Iterable[str] = ()
    ) -> LocalPlayerInterface:
        """Start ``binary`` with ``args`` and connect to its stdin and stdout."""
        try:
            process = await asyncio.create_subprocess_exec(
                os.fspath(binary),
                *args,
                stdin=asyncio.subprocess.PIPE,
                stdout=asyncio.subprocess.PIPE,
            )
        except OSError as exc:
            raise CreateLocalPlayerInterfaceError(f"create subprocess error: `{exc}`") from exc
        return cls(process)

    async def close(self) -> None:
        """Stop the player program and wait for it to exit."""
        if not self._writer.is_closing():
            self._writer.close()
        if self._process.returncode is None:
            try:
                self._process.kill()
            except ProcessLookupError:
                pass
        await self._process.wait()

    async def __aenter__(self) -> LocalPlayerInterface:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    async def _read_line(self) -> str:
        async with self._read_lock:
            try:
                raw = await self._reader.readline()
            except (OSError, ValueError) as exc:
                raise ListenError(str(exc)) from exc
        if not raw:
            raise ListenError("player program closed its output")
        raw = raw.removesuffix(b"\n").removesuffix(b"\r")
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise ListenError(f"player output is not valid UTF-8: {exc}") from exc

    async def listen(
        self, color: PlayerColor, queue: asyncio.Queue[tuple[PlayerColor, PlayerAction]]
    ) -> None:
        while True:
            line = await self._read_line()
            try:
                action = parse_input(line)
            except ParseInputError as exc:
                logger.warning("could not parse output of %s %r: %s", color, line, exc)
                continue
            await queue.put((color, action))

    async def _send(self, *lines: str) -> None:
        data = "".join(f"{line}\n" for line in lines).encode("utf-8")
        async with self._write_lock:
            if self._writer.is_closing():
                raise NotifyError("player program input is closed")
            try:
                self._writer.write(data)
                await self._writer.drain()
            except OSError as exc:
                raise NotifyError(str(exc)) from exc

    async def notify_start(self, size: int) -> None:
        await self._send(f"START {size}")

    async def notify_restart(self) -> None:
        await self._send("RESTART")

    async def notify_turn(self, position: Position) -> None:
        await self._send(f"TURN {position}")

    async def notify_begin(self) -> None:
        await self._send("BEGIN")

    async def notify_board(self, turns: Sequence[RelativeTurn]) -> None:
        await self._send("BOARD", *(str(turn) for turn in turns), "DONE")

    async def notify_info(self, info: Information) -> None:
        await self._send(f"INFO {info}")

    async def notify_result(self, result: RelativeGameEnd) -> None:
        await self._send(f"RESULT {result}")

    async def notify_end(self) -> None:
        await self._send("END")

    async def notify_about(self) -> None:
        await self._send("ABOUT")

    async def notify_unknown(self, content: str) -> None:
        await self._send(f"UNKNOWN {content}")

    async def notify_error(self, content: str) -> None:
        await self._send(f"ERROR {content}")