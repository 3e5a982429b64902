import logging
from pathlib import Path

import pytest

from gomokurs.cli import main, parse_args


def _stdio_config(tmp_path: Path, name: str, binary: Path) -> Path:
    path = tmp_path / name
    path.write_text(f"protocol:\n  stdio:\n    binary: '{binary}'\n    args: []\n", encoding="utf-8")
    return path


def test_parse_args_defaults():
    args = parse_args(["--black-file", "b.yaml", "--white-file", "w.yaml"])
    assert args.black_file == Path("b.yaml")
    assert args.white_file == Path("w.yaml")
    assert args.turn_duration == 30
    assert args.match_duration == 180
    assert args.log_level == "INFO"


def test_parse_args_short_options():
    args = parse_args(
        ["--black-file", "b", "--white-file", "w", "-t", "5", "-m", "60", "--log-level", "debug"]
    )
    assert (args.turn_duration, args.match_duration, args.log_level) == (5, 60, "debug")


def test_parse_args_long_options():
    args = parse_args(
        ["--black-file", "b", "--white-file", "w", "--turn-duration", "7", "--match-duration", "9"]
    )
    assert (args.turn_duration, args.match_duration) == (7, 9)


@pytest.mark.parametrize(
    "argv",
    [
        ["--white-file", "w"],
        ["--black-file", "b"],
        ["--black-file", "b", "--white-file", "w", "-t", "soon"],
        ["--black-file", "b", "--white-file", "w", "-m", "-3"],
    ],
)
def test_parse_args_rejects_bad_usage(argv):
    with pytest.raises(SystemExit) as info:
        parse_args(argv)
    assert info.value.code == 2


def test_main_reports_bad_usage():
    assert main(["--black-file", "b"]) == 2


def test_main_rejects_unknown_log_level(tmp_path, capsys):
    code = main(
        ["--black-file", "b", "--white-file", "w", "--log-level", "loud"]
    )
    assert code == 1
    assert capsys.readouterr().out.startswith("error: ")


def test_main_reports_missing_black_configuration(tmp_path, caplog):
    with caplog.at_level(logging.ERROR):
        code = main(
            [
                "--black-file", str(tmp_path / "absent.yaml"),
                "--white-file", str(tmp_path / "absent.yaml"),
            ]
        )
    assert code == 1
    assert "failed to read black player configuration file" in caplog.text


def test_main_reports_missing_white_configuration(tmp_path, caplog):
    black = _stdio_config(tmp_path, "black.yaml", tmp_path / "player")
    with caplog.at_level(logging.ERROR):
        code = main(["--black-file", str(black), "--white-file", str(tmp_path / "absent.yaml")])
    assert code == 1
    assert "failed to read white player configuration file" in caplog.text


def test_main_reports_player_that_cannot_start(tmp_path, caplog):
    missing = tmp_path / "no-such-player"
    black = _stdio_config(tmp_path, "black.yaml", missing)
    white = _stdio_config(tmp_path, "white.yaml", missing)
    with caplog.at_level(logging.ERROR):
        code = main(["--black-file", str(black), "--white-file", str(white)])
    assert code == 1
    assert "failed to create black player interface" in caplog.text