from pathlib import Path

import pytest

from gomokurs.actions import (
    ChannelClosedError,
    CoordinatorError,
    InfoKey,
    Information,
    Metadata,
    NotifyError,
    Play,
    PlayerNotifyError,
    RelativeField,
    RelativeTurn,
)
from gomokurs.state import PlayerColor, Position


@pytest.mark.parametrize(
    "field, expected",
    [
        (RelativeField.OWN_STONE, "3,4,1"),
        (RelativeField.OPPONENT_STONE, "3,4,2"),
    ],
)
def test_relative_turn_string(field, expected):
    turn = RelativeTurn(Position(3, 4), field)
    assert str(turn) == expected


@pytest.mark.parametrize(
    "key, value, expected",
    [
        (InfoKey.TIMEOUT_TURN, 30000, "timeout_turn 30000"),
        (InfoKey.TIMEOUT_MATCH, 180000, "timeout_match 180000"),
        (InfoKey.MAX_MEMORY, 0, "max_memory 0"),
        (InfoKey.TIME_LEFT, 42, "time_left 42"),
        (InfoKey.GAME_TYPE, 1, "game_type 1"),
        (InfoKey.RULE, 0, "rule 0"),
        (InfoKey.EVALUATE, (-1, 7), "evaluate -1,7"),
        (InfoKey.FOLDER, Path("/tmp/data"), f"folder {Path('/tmp/data')}"),
    ],
)
def test_information_strings(key, value, expected):
    assert str(Information(key, value)) == expected


def test_information_rejects_bad_evaluate_value():
    with pytest.raises(ValueError):
        Information(InfoKey.EVALUATE, 5)


def test_information_rejects_non_integer():
    with pytest.raises(ValueError):
        Information(InfoKey.RULE, "freestyle")


def test_actions_compare_by_value():
    assert Play(Position(1, 2)) == Play(Position(1, 2))
    assert Metadata({"name": "bot"}).info == {"name": "bot"}
    assert Metadata().info == {}


def test_player_notify_error_carries_cause_and_color():
    cause = NotifyError("broken pipe")
    err = PlayerNotifyError(cause, PlayerColor.WHITE)
    assert isinstance(err, CoordinatorError)
    assert err.error is cause
    assert err.color is PlayerColor.WHITE
    assert "white player" in str(err)
    assert "broken pipe" in str(err)


def test_channel_closed_error_is_coordinator_error():
    err = ChannelClosedError()
    assert isinstance(err, CoordinatorError)
    assert "abruptly closed" in str(err)