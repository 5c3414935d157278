"""
LedgerStats Errors

Exception hierarchy for identifier, transaction, graph and statistics failures.
Every error keeps its context as attributes so callers can render or inspect it
without re-deriving anything.
"""

from typing import Any, Optional


class LedgerStatsError(Exception):
    """Base class for all ledgerstats errors"""


# ---------------------------------------------------------------------------
# Identifiers
# ---------------------------------------------------------------------------


class IdentifierError(LedgerStatsError, ValueError):
    """A raw integer could not be turned into an identifier"""


class InvalidIdentifier(IdentifierError):
    def __init__(self, value: int = 0):
        self.value = value
        super().__init__(f"Invalid ID {value}")


class ReservedIdentifier(IdentifierError):
    def __init__(self) -> None:
        super().__init__("ID 1 is reserved for Root")


# ---------------------------------------------------------------------------
# Transactions
# ---------------------------------------------------------------------------


class TransactionError(LedgerStatsError, ValueError):
    """
    A single transaction line could not be parsed.

    Attributes:
        cause: The underlying parse or identifier error, if any
    """

    message = "Invalid transaction"

    def __init__(self, cause: Optional[Exception] = None):
        self.cause = cause
        text = self.message if cause is None else f"{self.message}: {cause}"
        super().__init__(text)


class MissingLeft(TransactionError):
    message = "Missing left reference"


class MissingRight(TransactionError):
    message = "Missing right reference"


class MissingTimestamp(TransactionError):
    message = "Missing timestamp"


class InvalidId(TransactionError):
    message = "Invalid Id"


class InvalidLeft(TransactionError):
    message = "Invalid left reference"


class InvalidRight(TransactionError):
    message = "Invalid right reference"


class InvalidTimestamp(TransactionError):
    message = "Invalid timestamp"


class InvalidLeftId(TransactionError):
    message = "Invalid left id"


class InvalidRightId(TransactionError):
    message = "Invalid right id"


# ---------------------------------------------------------------------------
# Graphs
# ---------------------------------------------------------------------------


class GraphError(LedgerStatsError, ValueError):
    """The serialized graph is malformed"""


class MissingCount(GraphError):
    def __init__(self) -> None:
        super().__init__("Missing number of transactions")


class InvalidCount(GraphError):
    def __init__(self, cause: Exception):
        self.cause = cause
        super().__init__(f"Invalid number of transactions: {cause}")


class TooManyTransactions(GraphError):
    def __init__(self, expected: int):
        self.expected = expected
        super().__init__(f"Too many transactions, expected {expected}")


class TooLittleTransactions(GraphError):
    def __init__(self, expected: int, found: int):
        self.expected = expected
        self.found = found
        super().__init__(
            f"Too little transactions, expected {expected} but found {found}"
        )


class InvalidTransaction(GraphError):
    """
    Wraps a TransactionError with the line it came from.

    Attributes:
        cause: The TransactionError raised while parsing
        tx_id: Identifier the line would have received
    """

    def __init__(self, cause: TransactionError, tx_id: Optional[int] = None):
        self.cause = cause
        self.tx_id = tx_id
        where = "" if tx_id is None else f" on Tx:{tx_id}"
        super().__init__(f"Invalid transaction{where}: {cause}")


class InvalidReference(GraphError):
    """
    A reference points past the largest identifier the graph can hold.

    Attributes:
        tx_id: Transaction holding the reference
        reference: The offending identifier
        max_id: Largest allowed identifier (declared count + 1)
    """

    side = ""

    def __init__(self, tx_id: Any, reference: Any, max_id: int):
        self.tx_id = tx_id
        self.reference = reference
        self.max_id = max_id
        super().__init__(
            f"Invalid {self.side} ref to {reference} on {tx_id} max={max_id}"
        )


class InvalidLeftReference(InvalidReference):
    side = "left"


class InvalidRightReference(InvalidReference):
    side = "right"


# ---------------------------------------------------------------------------
# Structure and statistics
# ---------------------------------------------------------------------------


class StructuralError(LedgerStatsError):
    """A syntactically valid graph violates a structural requirement"""


class CyclicGraphError(StructuralError):
    def __init__(self, vertex: Any = None):
        self.vertex = vertex
        where = "" if vertex is None else f" at {vertex}"
        super().__init__(f"Graph is cyclic{where}")


class DisconnectedGraphError(StructuralError):
    def __init__(self) -> None:
        super().__init__("Graph is not connected to Root")


class NumericConversionError(LedgerStatsError, ArithmeticError):
    """An integer count cannot be represented exactly as a float"""

    def __init__(self, value: int):
        self.value = value
        super().__init__(f"Cannot represent {value} exactly as a float")
