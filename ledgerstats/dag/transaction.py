"""
Transaction Record

A single ledger entry: its own identifier, two references to earlier vertices
and a logical timestamp. Transactions are parsed from one line of the
serialized ledger:

    <left> <right> <timestamp>
"""

from dataclasses import dataclass
import re

from .ids import Id
from ..errors import (
    IdentifierError,
    InvalidId,
    InvalidLeft,
    InvalidLeftId,
    InvalidRight,
    InvalidRightId,
    InvalidTimestamp,
    MissingLeft,
    MissingRight,
    MissingTimestamp,
)

_UINT_PATTERN = re.compile(r"\+?[0-9]+")


def parse_uint(token: str) -> int:
    """
    Parse a non-negative decimal integer.

    Stricter than int(): no surrounding whitespace, no sign other than an
    optional '+', no underscores.

    Raises:
        ValueError: If the token is not a non-negative decimal integer
    """
    if not token:
        raise ValueError("cannot parse integer from empty string")
    if not _UINT_PATTERN.fullmatch(token):
        raise ValueError(f"invalid digit found in string {token!r}")
    return int(token)


@dataclass(frozen=True)
class Transaction:
    """
    Parsed ledger entry.

    Attributes:
        id: The transaction's own (non-root) identifier
        left: Left reference, Root or another transaction
        right: Right reference, Root or another transaction
        timestamp: Logical, non-negative timestamp
    """
    id: Id
    left: Id
    right: Id
    timestamp: int

    @classmethod
    def parse(cls, tx_id: int, line: str) -> "Transaction":
        """
        Parse a transaction line.

        Tokens are checked left to right, so the first problem on the line is
        the one reported. Tokens after the timestamp are ignored.

        Args:
            tx_id: Identifier to assign, must not be 0 or 1
            line: Raw line without its line terminator

        Returns:
            The parsed Transaction

        Raises:
            TransactionError: The subclass naming the first invalid token
        """
        try:
            own_id = Id.transaction(tx_id)
        except IdentifierError as e:
            raise InvalidId(e) from e

        tokens = iter(line.split())

        left = _next_token(tokens, MissingLeft)
        left = _parse_reference(left, InvalidLeft, InvalidLeftId)

        right = _next_token(tokens, MissingRight)
        right = _parse_reference(right, InvalidRight, InvalidRightId)

        timestamp = _next_token(tokens, MissingTimestamp)
        try:
            timestamp = parse_uint(timestamp)
        except ValueError as e:
            raise InvalidTimestamp(e) from e

        return cls(id=own_id, left=left, right=right, timestamp=timestamp)

    def to_line(self) -> str:
        """Serialize back to the input line format"""
        return f"{int(self.left)} {int(self.right)} {self.timestamp}"

    def __str__(self) -> str:
        return f"Tx<{self.id}, {self.left}, {self.right}, {self.timestamp}>"


def _next_token(tokens, missing_error) -> str:
    token = next(tokens, None)
    if token is None:
        raise missing_error()
    return token


def _parse_reference(token: str, parse_error, id_error) -> Id:
    try:
        value = parse_uint(token)
    except ValueError as e:
        raise parse_error(e) from e

    try:
        return Id.from_int(value)
    except IdentifierError as e:
        raise id_error(e) from e
