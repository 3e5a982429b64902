"""Parsing of the text lines a local player program writes."""

from __future__ import annotations

import re

from gomokurs.actions import (
    Debug,
    ErrorReport,
    Message,
    Metadata,
    Play,
    PlayerAction,
    Ready,
    Unknown,
)
from gomokurs.state import Position


class ParseInputError(ValueError):
    """A line from the player could not be turned into an action."""


class UnknownCommandError(ParseInputError):
    """The line matches no known command."""

    def __init__(self) -> None:
        super().__init__("unknown command")


_RE_OK = re.compile(r"OK")
_RE_PLAY = re.compile(r"\d+,\d+")
_RE_DESC = re.compile(r'[\w\-]+="[^"]*"')
_RE_UNK = re.compile(r"UNKNOWN .*")
_RE_ERR = re.compile(r"ERROR .*")
_RE_MSG = re.compile(r"MESSAGE .*")
_RE_DBG = re.compile(r"DEBUG .*")

_RE_POSITION = re.compile(r"(?:SUGGEST\s*)?(\d+),(\d+)")
_RE_METADATA = re.compile(r'([\w\-]+)="([^"]*)"')
_RE_CONTENT = re.compile(r"(?:ERROR|UNKNOWN|DEBUG|MESSAGE)\s?(.*)")


def _parse_coordinate(text: str) -> int:
    if not text.isascii():
        raise ParseInputError(f"parsing error: `invalid digit in coordinate {text!r}`")
    value = int(text)
    if value > 255:
        raise ParseInputError(f"parsing error: `coordinate {text} is too large`")
    return value


def _parse_position(line: str) -> Position:
    match = _RE_POSITION.fullmatch(line)
    if match is None:
        raise ParseInputError("parsing error: `player move format is invalid`")
    return Position(_parse_coordinate(match[1]), _parse_coordinate(match[2]))


def _parse_content(line: str) -> str:
    match = _RE_CONTENT.fullmatch(line)
    if match is None:
        raise ParseInputError("parsing error: `player content format is invalid`")
    return match[1]


def parse_input(line: str) -> PlayerAction:
    """Turn one line of player output into an action."""
    if _RE_OK.fullmatch(line):
        return Ready()
    if _RE_PLAY.fullmatch(line):
        return Play(_parse_position(line))
    if _RE_DESC.search(line):
        return Metadata({key: value for key, value in _RE_METADATA.findall(line)})
    if _RE_UNK.search(line):
        return Unknown(_parse_content(line))
    if _RE_ERR.search(line):
        return ErrorReport(_parse_content(line))
    if _RE_MSG.search(line):
        return Message(_parse_content(line))
    if _RE_DBG.search(line):
        return Debug(_parse_content(line))
    raise UnknownCommandError()