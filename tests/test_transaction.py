import pytest

from ledgerstats.dag import Id, ROOT, Transaction
from ledgerstats.dag.transaction import parse_uint
from ledgerstats.errors import (
    InvalidId,
    InvalidIdentifier,
    InvalidLeft,
    InvalidLeftId,
    InvalidRight,
    InvalidRightId,
    InvalidTimestamp,
    MissingLeft,
    MissingRight,
    MissingTimestamp,
    ReservedIdentifier,
)


def test_parse_success():
    tx = Transaction.parse(2, "5 6 120")
    assert tx == Transaction(
        id=Id.transaction(2),
        left=Id.from_int(5),
        right=Id.from_int(6),
        timestamp=120,
    )


def test_parse_success_root():
    tx = Transaction.parse(2, "1 1 120")
    assert tx.left == ROOT
    assert tx.right == ROOT
    assert tx.timestamp == 120


def test_parse_ignores_extra_whitespace_and_tokens():
    tx = Transaction.parse(3, "  2\t1   7 extra")
    assert (int(tx.left), int(tx.right), tx.timestamp) == (2, 1, 7)


@pytest.mark.parametrize(
    "line, error",
    [
        ("", MissingLeft),
        ("5", MissingRight),
        ("5 6", MissingTimestamp),
        ("abc", InvalidLeft),
        ("5 abc", InvalidRight),
        ("5 6 abc", InvalidTimestamp),
        ("-5 6 1", InvalidLeft),
        ("5 6 -1", InvalidTimestamp),
    ],
)
def test_parse_errors(line, error):
    with pytest.raises(error):
        Transaction.parse(2, line)


def test_checks_left_before_right():
    with pytest.raises(InvalidLeft):
        Transaction.parse(2, "x y")


def test_invalid_left_id_carries_cause():
    with pytest.raises(InvalidLeftId) as exc:
        Transaction.parse(2, "0 5 120")
    assert isinstance(exc.value.cause, InvalidIdentifier)


def test_invalid_right_id_carries_cause():
    with pytest.raises(InvalidRightId) as exc:
        Transaction.parse(2, "5 0 120")
    assert isinstance(exc.value.cause, InvalidIdentifier)


def test_invalid_own_id():
    with pytest.raises(InvalidId) as exc:
        Transaction.parse(1, "1 1 0")
    assert isinstance(exc.value.cause, ReservedIdentifier)


def test_parse_failure_message():
    with pytest.raises(InvalidTimestamp) as exc:
        Transaction.parse(2, "5 6 abc")
    assert str(exc.value).startswith("Invalid timestamp: ")
    assert isinstance(exc.value.cause, ValueError)


def test_parse_uint():
    assert parse_uint("0") == 0
    assert parse_uint("+12") == 12
    for token in ["", " 1", "1_000", "1.5", "-1"]:
        with pytest.raises(ValueError):
            parse_uint(token)


def test_display_and_line():
    tx = Transaction.parse(4, "2 1 9")
    assert str(tx) == "Tx<Tx:4, Tx:2, Root, 9>"
    assert tx.to_line() == "2 1 9"
