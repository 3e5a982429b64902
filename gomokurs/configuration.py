"""Player configuration files: how to reach each player."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml


class ConfigurationError(Exception):
    """A player configuration could not be read or is malformed."""


@dataclass(frozen=True)
class StdioConfiguration:
    """A local player program spoken to over its standard input and output."""

    binary: Path
    args: tuple[str, ...] = ()


@dataclass(frozen=True)
class TcpActiveConfiguration:
    """A remote player the manager connects to at ``address`` (``host:port``)."""

    address: str


@dataclass(frozen=True)
class TcpPassiveConfiguration:
    """A remote player that connects to the manager listening on ``address``."""

    address: str


ProtocolConfiguration = StdioConfiguration | TcpActiveConfiguration | TcpPassiveConfiguration


def _single_variant(value: Any, what: str, choices: tuple[str, ...]) -> tuple[str, Any]:
    expected = ", ".join(f"`{choice}`" for choice in choices)
    if not isinstance(value, Mapping) or len(value) != 1:
        raise ConfigurationError(f"{what} must hold exactly one of {expected}")
    ((name, body),) = value.items()
    name = str(name).lower()
    if name not in choices:
        raise ConfigurationError(f"unknown {what} `{name}`, expected one of {expected}")
    return name, body


def _field(body: Any, key: str, what: str) -> Any:
    if not isinstance(body, Mapping):
        raise ConfigurationError(f"{what} configuration must be a mapping")
    if key not in body:
        raise ConfigurationError(f"missing field `{key}` in {what} configuration")
    return body[key]


def _string(value: Any, key: str, what: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"field `{key}` in {what} configuration must be a string")
    return value


def _argument(value: Any) -> str:
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, (str, int, float)):
        return str(value)
    raise ConfigurationError("stdio arguments must be scalar values")


def _stdio(body: Any) -> StdioConfiguration:
    binary = _string(_field(body, "binary", "stdio"), "binary", "stdio")
    args = _field(body, "args", "stdio")
    if not isinstance(args, list):
        raise ConfigurationError("field `args` in stdio configuration must be a list")
    return StdioConfiguration(Path(binary), tuple(_argument(arg) for arg in args))


def _tcp(body: Any) -> TcpActiveConfiguration | TcpPassiveConfiguration:
    mode, settings = _single_variant(body, "tcp mode", ("active", "passive"))
    address = _string(_field(settings, "address", f"tcp {mode}"), "address", f"tcp {mode}")
    if mode == "active":
        return TcpActiveConfiguration(address)
    return TcpPassiveConfiguration(address)


@dataclass(frozen=True)
class PlayerConfiguration:
    """How the manager talks to one player."""

    protocol: ProtocolConfiguration

    @classmethod
    def from_dict(cls, data: Any) -> PlayerConfiguration:
        """Build a configuration from parsed YAML data."""
        if not isinstance(data, Mapping):
            raise ConfigurationError("player configuration must be a mapping")
        if "protocol" not in data:
            raise ConfigurationError("missing field `protocol`")
        name, body = _single_variant(data["protocol"], "protocol", ("stdio", "tcp"))
        if name == "stdio":
            return cls(_stdio(body))
        return cls(_tcp(body))


def load_player_configuration(path: str | Path) -> PlayerConfiguration:
    """Read a YAML player configuration file."""
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigurationError(f"cannot read configuration file {str(path)!r}: {exc}") from exc
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"invalid YAML in {str(path)!r}: {exc}") from exc
    return PlayerConfiguration.from_dict(data)