import pytest

from gomokurs.actions import Debug, ErrorReport, Message, Metadata, Play, Ready, Unknown
from gomokurs.parsers import ParseInputError, UnknownCommandError, parse_input
from gomokurs.state import Position


def test_ok_is_ready():
    assert parse_input("OK") == Ready()


def test_move_is_play():
    assert parse_input("10,11") == Play(Position(10, 11))


def test_move_at_limit():
    assert parse_input("0,255") == Play(Position(0, 255))


def test_move_out_of_byte_range_is_parse_error():
    with pytest.raises(ParseInputError) as info:
        parse_input("256,1")
    assert not isinstance(info.value, UnknownCommandError)


def test_metadata():
    action = parse_input('name="bot", version="1.0", author-x="someone"')
    assert action == Metadata({"name": "bot", "version": "1.0", "author-x": "someone"})


def test_metadata_empty_value():
    assert parse_input('country=""') == Metadata({"country": ""})


@pytest.mark.parametrize(
    "line, expected",
    [
        ("UNKNOWN what", Unknown("what")),
        ("ERROR bad move", ErrorReport("bad move")),
        ("ERROR ", ErrorReport("")),
        ("MESSAGE hi there", Message("hi there")),
        ("DEBUG depth 3", Debug("depth 3")),
    ],
)
def test_content_commands(line, expected):
    assert parse_input(line) == expected


def test_extra_space_is_kept_in_content():
    assert parse_input("MESSAGE  two") == Message(" two")


@pytest.mark.parametrize("line", ["HELLO", " OK", "OK ", "ERROR", "SUGGEST 1,2", "1,2,3", ""])
def test_unknown_commands(line):
    with pytest.raises(UnknownCommandError):
        parse_input(line)


def test_keyword_not_at_start_is_parse_error():
    with pytest.raises(ParseInputError) as info:
        parse_input("note: ERROR here")
    assert not isinstance(info.value, UnknownCommandError)