"""
Ledger Graph

In-memory ledger DAG: the ordered list of transactions plus a reverse index
from every referenced vertex (Root included) to the transactions pointing at it.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Set

from .ids import Id, ROOT, ROOT_VALUE
from .transaction import Transaction

# Transaction ids start right after Root
FIRST_TX_VALUE = ROOT_VALUE + 1


@dataclass
class References:
    """
    Incoming references to one vertex.

    Attributes:
        sources: Transactions referencing the vertex
        count: Number of references, left and right counted separately, so a
               transaction referencing the vertex twice adds one source but
               two to the count
    """
    sources: Set[Id] = field(default_factory=set)
    count: int = 0

    def add(self, source: Id) -> None:
        self.sources.add(source)
        self.count += 1


_NO_REFERENCES = References(sources=frozenset())


class Graph:
    """
    Ledger DAG with a reverse reference index.

    Transactions are stored in id order: the transaction with id k lives at
    position k - 2. The reverse index is kept up to date by push(), which is
    only meant to be called while building; once built the graph is treated as
    read-only by validators, the depth calculator and statistics.

    Example usage:
        graph = Graph()
        graph.push(Transaction.parse(2, "1 1 0"))
        graph.push(Transaction.parse(3, "1 2 0"))

        len(graph)                       # 2
        graph.get_dependents(ROOT)       # {Id(2), Id(3)}
        graph.references(ROOT).count     # 3
    """

    def __init__(self):
        self.transactions: List[Transaction] = []
        self.reverse: Dict[Id, References] = {}

    def push(self, transaction: Transaction) -> None:
        """
        Append a transaction and index both of its references.

        Args:
            transaction: Next transaction, its id must follow the last one

        Raises:
            ValueError: If the transaction id breaks the contiguous sequence
        """
        expected = FIRST_TX_VALUE + len(self.transactions)
        if int(transaction.id) != expected:
            raise ValueError(
                f"Expected transaction Tx:{expected}, got {transaction.id}"
            )

        for target in (transaction.left, transaction.right):
            if target not in self.reverse:
                self.reverse[target] = References()
            self.reverse[target].add(transaction.id)

        self.transactions.append(transaction)

    @property
    def max_id(self) -> int:
        """Largest identifier held by this graph (Root plus every transaction)"""
        return len(self.transactions) + ROOT_VALUE

    def references(self, vertex: Id) -> References:
        """
        Get the incoming references of a vertex.

        Returns:
            References to the vertex, empty if nothing points at it
        """
        return self.reverse.get(vertex, _NO_REFERENCES)

    def get_dependents(self, vertex: Id) -> Set[Id]:
        """Transactions that reference the vertex"""
        return self.references(vertex).sources

    def vertices(self) -> Iterator[Id]:
        """Every vertex id, Root first"""
        yield ROOT
        for transaction in self.transactions:
            yield transaction.id

    def __getitem__(self, vertex: Id) -> Transaction:
        index = int(vertex) - FIRST_TX_VALUE
        if index < 0 or index >= len(self.transactions):
            raise KeyError(f"No transaction {vertex} in graph")
        return self.transactions[index]

    def __iter__(self) -> Iterator[Transaction]:
        return iter(self.transactions)

    def __len__(self) -> int:
        return len(self.transactions)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Graph):
            return NotImplemented
        return self.transactions == other.transactions

    def __repr__(self) -> str:
        return f"Graph(transactions={len(self.transactions)})"
