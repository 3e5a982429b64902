"""Constants and encoding of the binary TCP player protocol."""

from __future__ import annotations

from enum import IntEnum

PROTOCOL_VERSION = "0.2.0"


class ActionID(IntEnum):
    """One-byte identifiers that start every protocol message."""

    # Sent by the manager to the player.
    MANAGER_PROTOCOL_COMPATIBLE = 0x00
    MANAGER_START = 0x01
    MANAGER_RESTART = 0x02
    MANAGER_TURN = 0x03
    MANAGER_BEGIN = 0x04
    MANAGER_BOARD = 0x05
    MANAGER_INFO = 0x06
    MANAGER_RESULT = 0x07
    MANAGER_END = 0x08
    MANAGER_ABOUT = 0x09
    MANAGER_UNKNOWN = 0x0A
    MANAGER_ERROR = 0x0B

    # Sent by the player to the manager.
    PLAYER_PROTOCOL_VERSION = 0x0C
    PLAYER_READY = 0x0D
    PLAYER_PLAY = 0x0E
    PLAYER_METADATA = 0x0F
    PLAYER_UNKNOWN = 0x10
    PLAYER_ERROR = 0x11
    PLAYER_MESSAGE = 0x12
    PLAYER_DEBUG = 0x13
    PLAYER_SUGGESTION = 0x14


def encode_string(action_id: int, text: str) -> bytes:
    """Frame ``text`` as an action byte, a big-endian u32 length and UTF-8 bytes."""
    payload = text.encode("utf-8")
    return bytes([action_id]) + len(payload).to_bytes(4, "big") + payload