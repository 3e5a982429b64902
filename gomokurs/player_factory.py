"""Building player interfaces from their configuration."""

from __future__ import annotations

import asyncio

from gomokurs.configuration import (
    PlayerConfiguration,
    StdioConfiguration,
    TcpActiveConfiguration,
    TcpPassiveConfiguration,
)
from gomokurs.local_interface import CreateLocalPlayerInterfaceError, LocalPlayerInterface
from gomokurs.ports import PlayerInterface
from gomokurs.tcp_interface import CreateTcpPlayerInterfaceError, TcpPlayerInterface


class CreatePlayerInterfaceError(Exception):
    """A player interface could not be created from its configuration."""


def _connection_error(detail: object) -> CreatePlayerInterfaceError:
    return CreatePlayerInterfaceError(f"tcp connection error: `{detail}`")


def _split_address(address: str) -> tuple[str, int]:
    host, sep, port_text = address.rpartition(":")
    if not sep or not host or not port_text.isdigit():
        raise _connection_error(f"invalid socket address {address!r}")
    port = int(port_text)
    if port > 65535:
        raise _connection_error(f"invalid port in socket address {address!r}")
    if host.startswith("[") and host.endswith("]"):
        host = host[1:-1]
    return host, port


async def _handshake(
    reader: asyncio.StreamReader, writer: asyncio.StreamWriter
) -> TcpPlayerInterface:
    try:
        return await TcpPlayerInterface.create(reader, writer)
    except CreateTcpPlayerInterfaceError as exc:
        writer.close()
        raise CreatePlayerInterfaceError(str(exc)) from exc


async def _connect(address: str) -> tuple[asyncio.StreamReader, asyncio.StreamWriter]:
    host, port = _split_address(address)
    try:
        return await asyncio.open_connection(host, port)
    except OSError as exc:
        raise _connection_error(exc) from exc


async def _accept_one(address: str) -> tuple[asyncio.StreamReader, asyncio.StreamWriter]:
    host, port = _split_address(address)
    accepted: asyncio.Future[tuple[asyncio.StreamReader, asyncio.StreamWriter]] = (
        asyncio.get_running_loop().create_future()
    )

    def on_connect(reader: asyncio.StreamReader, writer: asyncio.StreamWriter) -> None:
        if accepted.done():
            writer.close()
        else:
            accepted.set_result((reader, writer))

    try:
        server = await asyncio.start_server(on_connect, host, port)
    except OSError as exc:
        raise _connection_error(exc) from exc
    try:
        return await accepted
    finally:
        server.close()


async def create_player_interface(cfg: PlayerConfiguration) -> PlayerInterface:
    """Start or connect to the player described by ``cfg``."""
    match cfg.protocol:
        case StdioConfiguration(binary=binary, args=args):
            try:
                return await LocalPlayerInterface.create(binary, args)
            except CreateLocalPlayerInterfaceError as exc:
                raise CreatePlayerInterfaceError(str(exc)) from exc
        case TcpActiveConfiguration(address=address):
            return await _handshake(*await _connect(address))
        case TcpPassiveConfiguration(address=address):
            return await _handshake(*await _accept_one(address))
    raise CreatePlayerInterfaceError(f"unsupported protocol configuration: {cfg.protocol!r}")