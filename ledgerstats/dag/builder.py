"""
Graph Builder

Builds a ledger Graph from its serialized, line-oriented form:

    <n>
    <left> <right> <timestamp>      (n times)

References are checked against the largest identifier the declared count
allows (n + 1), not against the transactions read so far.
"""

from pathlib import Path
from typing import Iterable, Optional, Union
import logging

from .graph import FIRST_TX_VALUE, Graph
from .ids import ROOT_VALUE
from .transaction import Transaction, parse_uint
from ..errors import (
    InvalidCount,
    InvalidLeftReference,
    InvalidRightReference,
    InvalidTransaction,
    MissingCount,
    TooLittleTransactions,
    TooManyTransactions,
    TransactionError,
)

logger = logging.getLogger(__name__)


class GraphBuilder:
    """
    Reads a declared transaction count and then exactly that many lines.

    The builder:
    1. Reads and parses the count line
    2. Parses every following line into a Transaction with sequential ids
    3. Checks both references against the declared maximum identifier
    4. Appends the transaction, updating the reverse index

    I/O errors raised by the line source propagate unchanged.

    Example usage:
        with open("ledger.in", encoding="utf-8") as f:
            graph = GraphBuilder(f).build()

        graph = GraphBuilder("2\\n1 1 0\\n2 1 3".splitlines()).build()
    """

    def __init__(self, lines: Iterable[str]):
        """
        Initialize builder with a line source.

        Args:
            lines: Any iterable of text lines, e.g. an open text file.
                   Trailing line terminators are ignored.
        """
        self.lines = lines
        self.declared: Optional[int] = None

    def build(self) -> Graph:
        """
        Consume the line source and build the graph.

        Returns:
            Graph holding exactly the declared number of transactions

        Raises:
            GraphError: The subclass describing the first format problem
        """
        lines = iter(self.lines)

        first = next(lines, None)
        if first is None:
            raise MissingCount()

        try:
            declared = parse_uint(_strip_terminator(first))
        except ValueError as e:
            raise InvalidCount(e) from e

        self.declared = declared
        max_id = declared + ROOT_VALUE
        logger.debug(f"Expecting {declared} transactions, max id {max_id}")

        graph = Graph()
        for i, line in enumerate(lines):
            if i + 1 > declared:
                raise TooManyTransactions(declared)

            tx_id = i + FIRST_TX_VALUE
            try:
                transaction = Transaction.parse(tx_id, _strip_terminator(line))
            except TransactionError as e:
                raise InvalidTransaction(e, tx_id=tx_id) from e

            if int(transaction.left) > max_id:
                raise InvalidLeftReference(transaction.id, transaction.left, max_id)
            if int(transaction.right) > max_id:
                raise InvalidRightReference(transaction.id, transaction.right, max_id)

            graph.push(transaction)

        if len(graph) < declared:
            raise TooLittleTransactions(declared, len(graph))

        logger.info(f"Built graph with {len(graph)} transactions")
        return graph


def parse_graph(text: str) -> Graph:
    """Build a graph from its full serialized text"""
    return GraphBuilder(text.splitlines()).build()


def load_graph(path: Union[str, Path]) -> Graph:
    """
    Open a ledger file and build its graph.

    Raises:
        OSError: If the file cannot be opened or read
        GraphError: If the content is malformed
    """
    with open(path, encoding="utf-8") as f:
        return GraphBuilder(f).build()


def _strip_terminator(line: str) -> str:
    return line.rstrip("\r\n")
