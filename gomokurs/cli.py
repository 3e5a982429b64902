"""Command line entry point: run a gomoku match between two players."""

from __future__ import annotations

import argparse
import asyncio
import logging
from collections.abc import Sequence
from contextlib import AsyncExitStack
from pathlib import Path

from gomokurs.actions import Mode
from gomokurs.configuration import (
    ConfigurationError,
    PlayerConfiguration,
    load_player_configuration,
)
from gomokurs.engine import GameEngine
from gomokurs.local_interface import LocalPlayerInterface
from gomokurs.player_factory import CreatePlayerInterfaceError, create_player_interface
from gomokurs.ports import PlayerInterface
from gomokurs.state import PlayerColor, Position

logger = logging.getLogger(__name__)

BOARD_SIZE = Position(20, 20)

_LOG_LEVELS = {
    "trace": logging.DEBUG,
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
    "5": logging.DEBUG,
    "4": logging.DEBUG,
    "3": logging.INFO,
    "2": logging.WARNING,
    "1": logging.ERROR,
}


def _non_negative_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid digit found in string: {text!r}") from None
    if value < 0:
        raise argparse.ArgumentTypeError(f"value must not be negative: {text!r}")
    return value


def _parse_log_level(text: str) -> int:
    try:
        return _LOG_LEVELS[text.strip().lower()]
    except KeyError:
        raise ValueError(
            'error parsing level: expected one of "error", "warn", "info", '
            '"debug", "trace", or a number 1-5'
        ) from None


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse the command line; exits with status 2 on bad usage."""
    parser = argparse.ArgumentParser(
        prog="gomokurs", description="Run gomoku matches between two players."
    )
    parser.add_argument("--black-file", type=Path, required=True)
    parser.add_argument("--white-file", type=Path, required=True)
    parser.add_argument("-t", "--turn-duration", type=_non_negative_int, default=30)
    parser.add_argument("-m", "--match-duration", type=_non_negative_int, default=180)
    parser.add_argument("--log-level", default="INFO")
    return parser.parse_args(argv)


async def _play(
    args: argparse.Namespace, black_cfg: PlayerConfiguration, white_cfg: PlayerConfiguration
) -> int:
    async with AsyncExitStack() as stack:
        interfaces: dict[PlayerColor, PlayerInterface] = {}
        for color, cfg in ((PlayerColor.BLACK, black_cfg), (PlayerColor.WHITE, white_cfg)):
            try:
                interface = await create_player_interface(cfg)
            except CreatePlayerInterfaceError as exc:
                logger.error("failed to create %s player interface: %s", color.value, exc)
                return 1
            if isinstance(interface, LocalPlayerInterface):
                stack.push_async_callback(interface.close)
            logger.debug("created %s player interface", color.value)
            interfaces[color] = interface

        from gomokurs.coordinator import Coordinator

        engine = GameEngine(BOARD_SIZE, args.turn_duration, args.match_duration)
        coordinator = Coordinator(
            engine, interfaces[PlayerColor.BLACK], interfaces[PlayerColor.WHITE], Mode.LOOP
        )
        end = await coordinator.run()
        logger.info("%s", end)
        return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the game manager; return the process exit status."""
    try:
        args = parse_args(argv)
    except SystemExit as exc:
        return exc.code if isinstance(exc.code, int) else 1

    try:
        level = _parse_log_level(args.log_level)
    except ValueError as exc:
        print(f"error: {exc}")
        return 1
    logging.basicConfig(level=level)
    logging.getLogger().setLevel(level)

    loaded: dict[PlayerColor, PlayerConfiguration] = {}
    for color, path in ((PlayerColor.BLACK, args.black_file), (PlayerColor.WHITE, args.white_file)):
        try:
            loaded[color] = load_player_configuration(path)
        except ConfigurationError as exc:
            logger.error("failed to read %s player configuration file: %s", color.value, exc)
            return 1

    return asyncio.run(_play(args, loaded[PlayerColor.BLACK], loaded[PlayerColor.WHITE]))


if __name__ == "__main__":
    raise SystemExit(main())