from pathlib import Path

import pytest

from gomokurs.configuration import (
    ConfigurationError,
    PlayerConfiguration,
    StdioConfiguration,
    TcpActiveConfiguration,
    TcpPassiveConfiguration,
    load_player_configuration,
)


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "player.yaml"
    path.write_text(text, encoding="utf-8")
    return path


def test_load_stdio_configuration(tmp_path):
    path = _write(
        tmp_path,
        "protocol:\n  stdio:\n    binary: /opt/ai/player\n    args: [\"--fast\", \"-v\"]\n",
    )
    cfg = load_player_configuration(path)
    assert cfg.protocol == StdioConfiguration(Path("/opt/ai/player"), ("--fast", "-v"))


def test_load_stdio_with_empty_args(tmp_path):
    path = _write(tmp_path, "protocol:\n  stdio:\n    binary: player\n    args: []\n")
    cfg = load_player_configuration(path)
    assert cfg.protocol.args == ()
    assert cfg.protocol.binary == Path("player")


def test_load_tcp_active_configuration(tmp_path):
    path = _write(tmp_path, "protocol:\n  tcp:\n    active:\n      address: \"127.0.0.1:4242\"\n")
    cfg = load_player_configuration(path)
    assert cfg.protocol == TcpActiveConfiguration("127.0.0.1:4242")


def test_load_tcp_passive_configuration(tmp_path):
    path = _write(tmp_path, "protocol:\n  tcp:\n    passive:\n      address: \"0.0.0.0:4243\"\n")
    cfg = load_player_configuration(path)
    assert cfg.protocol == TcpPassiveConfiguration("0.0.0.0:4243")


def test_from_dict_matches_loaded_file(tmp_path):
    data = {"protocol": {"tcp": {"active": {"address": "localhost:9000"}}}}
    path = _write(tmp_path, "protocol:\n  tcp:\n    active:\n      address: localhost:9000\n")
    assert PlayerConfiguration.from_dict(data) == load_player_configuration(path)


def test_numeric_arguments_become_strings():
    cfg = PlayerConfiguration.from_dict(
        {"protocol": {"stdio": {"binary": "p", "args": ["--depth", 4]}}}
    )
    assert cfg.protocol.args == ("--depth", "4")


def test_missing_file_raises(tmp_path):
    with pytest.raises(ConfigurationError):
        load_player_configuration(tmp_path / "absent.yaml")


def test_invalid_yaml_raises(tmp_path):
    path = _write(tmp_path, "protocol: [unclosed\n")
    with pytest.raises(ConfigurationError):
        load_player_configuration(path)


def test_empty_file_raises(tmp_path):
    path = _write(tmp_path, "")
    with pytest.raises(ConfigurationError):
        load_player_configuration(path)


@pytest.mark.parametrize(
    "data",
    [
        {},
        {"protocol": {"udp": {"address": "x"}}},
        {"protocol": {"stdio": {"binary": "p", "args": []}, "tcp": {}}},
        {"protocol": {"stdio": {"binary": "p"}}},
        {"protocol": {"stdio": {"args": []}}},
        {"protocol": {"stdio": {"binary": "p", "args": "not-a-list"}}},
        {"protocol": {"tcp": {"active": {"address": 42}}}},
        {"protocol": {"tcp": {"sideways": {"address": "h:1"}}}},
        {"protocol": {"tcp": {"passive": {}}}},
        {"protocol": "stdio"},
        ["protocol"],
    ],
)
def test_malformed_configuration_raises(data):
    with pytest.raises(ConfigurationError):
        PlayerConfiguration.from_dict(data)