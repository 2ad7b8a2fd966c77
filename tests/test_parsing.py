import pytest

from seymour.protocol.errors import InvalidIntegerArgument, MissingArgument, TooManyArguments
from seymour.protocol.parsing import check_arity, check_int64, extract_int, extract_str, tokenize


def test_tokenize_is_positional():
    assert tokenize("") == []
    assert tokenize("A B") == ["A", "B"]
    # no collapsing, no trimming
    assert tokenize("A  B") == ["A", "", "B"]
    assert tokenize(" A ") == ["", "A", ""]


def test_check_arity_bounds_only_the_maximum():
    check_arity(["USER"], 1)
    check_arity(["USER", "a"], 1)
    with pytest.raises(TooManyArguments) as ei:
        check_arity(["USER", "a", "b"], 1)
    assert (ei.value.expected, ei.value.actual) == (1, 2)


def test_extract_str_missing():
    with pytest.raises(MissingArgument) as ei:
        extract_str(["USER"], "username", 1)
    assert ei.value.name == "username"
    assert extract_str(["USER", ""], "username", 1) == ""


@pytest.mark.parametrize("raw,value", [("0", 0), ("42", 42), ("-7", -7), ("+7", 7), ("007", 7)])
def test_extract_int_accepts_decimal(raw, value):
    assert extract_int(["X", raw], "id", 1) == value


@pytest.mark.parametrize("raw", ["abc", "", "1.5", " 1", "1_000", "0x10", "٣", "9223372036854775808"])
def test_extract_int_rejects(raw):
    with pytest.raises(InvalidIntegerArgument) as ei:
        extract_int(["X", raw], "id", 1)
    assert ei.value.argument == "id"
    assert ei.value.value == raw


def test_extract_int_64bit_limits():
    assert extract_int(["X", "9223372036854775807"], "id", 1) == 2**63 - 1
    assert extract_int(["X", "-9223372036854775808"], "id", 1) == -(2**63)


def test_check_int64():
    check_int64("id", 2**63 - 1)
    check_int64("id", -(2**63))
    for bad in (2**63, -(2**63) - 1, True, "1", 1.0):
        with pytest.raises(ValueError):
            check_int64("id", bad)
