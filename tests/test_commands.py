import pytest

from seymour.protocol.commands import (
    ListSubscriptions,
    ListUnread,
    MarkRead,
    Subscribe,
    Unsubscribe,
    User,
    parse_command,
    render_command,
)
from seymour.protocol.errors import (
    EmptyMessage,
    InvalidIntegerArgument,
    MissingArgument,
    ParseMessageError,
    TooManyArguments,
    UnknownType,
)

ALL_COMMANDS = [
    User(username="alice"),
    ListSubscriptions(),
    Subscribe(url="http://example.com/feed"),
    Unsubscribe(id=3),
    ListUnread(),
    MarkRead(id=-1),
]


@pytest.mark.parametrize("cmd", ALL_COMMANDS)
def test_round_trip(cmd):
    assert parse_command(render_command(cmd)) == cmd


def test_render_lines():
    assert render_command(User(username="alice")) == "USER alice"
    assert render_command(ListSubscriptions()) == "LISTSUBSCRIPTIONS"
    assert render_command(MarkRead(id=42)) == "MARKREAD 42"
    assert str(Unsubscribe(id=9)) == "UNSUBSCRIBE 9"
    assert not render_command(ListUnread()).endswith("\n")


def test_render_rejects_non_command():
    with pytest.raises(TypeError):
        render_command("USER alice")


def test_empty_line():
    with pytest.raises(EmptyMessage) as ei:
        parse_command("")
    assert str(ei.value) == "empty message"


def test_unknown_verb():
    with pytest.raises(UnknownType) as ei:
        parse_command("FOO")
    assert ei.value.raw_token == "FOO"
    assert str(ei.value) == 'unknown type "FOO"'


def test_verbs_are_case_sensitive():
    with pytest.raises(UnknownType):
        parse_command("user alice")


def test_missing_username():
    with pytest.raises(MissingArgument) as ei:
        parse_command("USER")
    assert ei.value.name == "username"
    assert str(ei.value) == 'missing argument "username"'


def test_too_many_arguments():
    with pytest.raises(TooManyArguments) as ei:
        parse_command("USER a b")
    assert (ei.value.expected, ei.value.actual) == (1, 2)
    assert str(ei.value) == "too many arguments (expected 1, got 2)"


def test_no_arg_commands_reject_arguments():
    with pytest.raises(TooManyArguments) as ei:
        parse_command("LISTUNREAD now")
    assert (ei.value.expected, ei.value.actual) == (0, 1)


def test_trailing_space_counts_as_argument():
    with pytest.raises(TooManyArguments):
        parse_command("LISTSUBSCRIPTIONS ")


def test_invalid_integer():
    with pytest.raises(InvalidIntegerArgument) as ei:
        parse_command("MARKREAD abc")
    assert (ei.value.argument, ei.value.value) == ("id", "abc")
    assert str(ei.value) == 'invalid integer value "abc" for argument "id"'


def test_valid_commands():
    assert parse_command("MARKREAD 42") == MarkRead(id=42)
    assert parse_command("UNSUBSCRIBE 5") == Unsubscribe(id=5)
    assert parse_command("SUBSCRIBE http://x.example/rss") == Subscribe(url="http://x.example/rss")
    assert parse_command("LISTSUBSCRIPTIONS") == ListSubscriptions()


def test_missing_id_and_url():
    with pytest.raises(MissingArgument) as ei:
        parse_command("UNSUBSCRIBE")
    assert ei.value.name == "id"
    with pytest.raises(MissingArgument) as ei:
        parse_command("SUBSCRIBE")
    assert ei.value.name == "url"


def test_errors_are_value_errors():
    with pytest.raises(ValueError):
        parse_command("NOPE")
    assert issubclass(UnknownType, ParseMessageError)


@pytest.mark.parametrize("bad", [2**63, -(2**63) - 1, True, "5"])
def test_integer_fields_must_render_decodably(bad):
    with pytest.raises(ValueError):
        MarkRead(id=bad)
    with pytest.raises(ValueError):
        Unsubscribe(id=bad)


def test_int64_edges_round_trip():
    for value in (2**63 - 1, -(2**63)):
        assert parse_command(render_command(MarkRead(id=value))) == MarkRead(id=value)
