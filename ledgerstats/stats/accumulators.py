"""
Statistic Accumulators

Concrete statistics computed in a single pass over a ledger graph:
- Depths: average depth and transactions per distinct depth
- InReferences: average number of incoming references
- TimeUnits: transactions per time unit up to the latest timestamp
- Timestamps: transactions per distinct timestamp
"""

from dataclasses import dataclass
from typing import Optional, Set

from .base import ratio, to_float
from ..dag.depth import DepthCalculator
from ..dag.graph import Graph
from ..dag.ids import ROOT
from ..dag.transaction import Transaction


@dataclass
class DepthsResult:
    average_depth: float
    average_txs_per_depth: float

    def __str__(self) -> str:
        return (
            f"> AVG DAG DEPTH: {self.average_depth:.2f}\n"
            f"> AVG TXS PER DEPTH: {self.average_txs_per_depth:.2f}"
        )


class Depths:
    """
    Accumulates transaction depths.

    State:
        sum_of_depths: Sum of every transaction's depth
        unique_depths: Distinct depth values seen
    """

    def __init__(self, graph: Graph, calculator: Optional[DepthCalculator] = None):
        """
        Args:
            graph: Graph being measured, must be acyclic
            calculator: Depth calculator to share, a fresh one by default
        """
        self.calculator = calculator or DepthCalculator(graph)
        self.sum_of_depths = 0
        self.unique_depths: Set[int] = set()

    def accumulate(self, transaction: Transaction) -> None:
        depth = self.calculator.depth(transaction.id)
        self.sum_of_depths += depth
        self.unique_depths.add(depth)

    def result(self, n_transactions: float) -> DepthsResult:
        # Root counts as a vertex of depth 0 for the average depth
        sum_of_depths = to_float(self.sum_of_depths)
        n_unique_depths = to_float(len(self.unique_depths))
        return DepthsResult(
            average_depth=ratio(sum_of_depths, n_transactions + 1.0),
            average_txs_per_depth=ratio(n_transactions, n_unique_depths),
        )


@dataclass
class InReferencesResult:
    average_references: float

    def __str__(self) -> str:
        return f"> AVG REF: {self.average_references:.2f}"


class InReferences:
    """
    Accumulates incoming reference counts from the graph's reverse index.

    Root's own incoming references are folded in on the first accumulation,
    so the total covers every vertex. Until then total_references is None.
    """

    def __init__(self, graph: Graph):
        self.graph = graph
        self.total_references: Optional[int] = None

    def accumulate(self, transaction: Transaction) -> None:
        count = self.graph.references(transaction.id).count
        if self.total_references is None:
            self.total_references = self.graph.references(ROOT).count + count
        else:
            self.total_references += count

    def result(self, n_transactions: float) -> InReferencesResult:
        total_references = to_float(self.total_references or 0)
        return InReferencesResult(
            average_references=ratio(total_references, n_transactions + 1.0)
        )


@dataclass
class TimeUnitsResult:
    average_txs_per_time_unit: float

    def __str__(self) -> str:
        return f"> AVG TXS PER TIME UNIT: {self.average_txs_per_time_unit:.2f}"


class TimeUnits:
    """Tracks the largest timestamp"""

    def __init__(self, graph: Optional[Graph] = None):
        self.max_timestamp = 0

    def accumulate(self, transaction: Transaction) -> None:
        self.max_timestamp = max(self.max_timestamp, transaction.timestamp)

    def result(self, n_transactions: float) -> TimeUnitsResult:
        max_timestamp = to_float(self.max_timestamp)
        return TimeUnitsResult(
            average_txs_per_time_unit=ratio(max_timestamp, n_transactions)
        )


@dataclass
class TimestampsResult:
    average_txs_per_timestamp: float

    def __str__(self) -> str:
        return f"> AVG TXS PER TIMESTAMP: {self.average_txs_per_timestamp:.2f}"


class Timestamps:
    """Tracks distinct timestamps"""

    def __init__(self, graph: Optional[Graph] = None):
        self.unique_timestamps: Set[int] = set()

    def accumulate(self, transaction: Transaction) -> None:
        self.unique_timestamps.add(transaction.timestamp)

    def result(self, n_transactions: float) -> TimestampsResult:
        n_unique_timestamps = to_float(len(self.unique_timestamps))
        return TimestampsResult(
            average_txs_per_timestamp=ratio(n_transactions, n_unique_timestamps)
        )
