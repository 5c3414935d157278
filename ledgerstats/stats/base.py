"""
Statistic Protocol

Defines the contract shared by every statistic accumulator, plus the numeric
helpers used to turn integer counts into averages.
"""

import math
from typing import Protocol

from ..dag.transaction import Transaction
from ..errors import NumericConversionError

# Largest integer magnitude a float holds exactly
MAX_EXACT_FLOAT_INT = 2 ** 53


class StatResult(Protocol):
    """Printable outcome of a statistic; str() gives the report lines"""

    def __str__(self) -> str:
        ...


class Stat(Protocol):
    """
    Protocol for statistic accumulators.

    A statistic sees every transaction of a graph exactly once, in id order,
    then produces one printable result. Statistics only mutate their own
    state.

    Example implementation:
        class MaxTimestamp:
            def __init__(self):
                self.max_timestamp = 0

            def accumulate(self, transaction: Transaction) -> None:
                self.max_timestamp = max(self.max_timestamp, transaction.timestamp)

            def result(self, n_transactions: float) -> StatResult:
                return MaxTimestampResult(to_float(self.max_timestamp))
    """

    def accumulate(self, transaction: Transaction) -> None:
        """
        Fold one transaction into the statistic's state.

        Args:
            transaction: Next transaction in id order
        """
        ...

    def result(self, n_transactions: float) -> StatResult:
        """
        Produce the final result once accumulation is over.

        Args:
            n_transactions: Number of transactions in the graph (Root excluded)

        Returns:
            Printable result

        Raises:
            NumericConversionError: If an internal count cannot be converted
                                    to a float without losing precision
        """
        ...


def to_float(value: int) -> float:
    """
    Convert an integer count to a float, refusing to round.

    Raises:
        NumericConversionError: If the float would not equal the integer
    """
    if abs(value) > MAX_EXACT_FLOAT_INT:
        raise NumericConversionError(value)
    return float(value)


def ratio(numerator: float, denominator: float) -> float:
    """Float division with IEEE-754 results for a zero denominator"""
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator)
    return numerator / denominator
