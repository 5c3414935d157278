"""
Statistics Runner

Feeds every transaction of a graph to a set of statistics in a single pass
and collects their results.
"""

from typing import List
import logging

from .base import Stat, StatResult, to_float
from ..dag.graph import Graph

logger = logging.getLogger(__name__)


class StatsRunner:
    """
    Runs statistics over a graph.

    The runner:
    1. Walks the transactions once, in id order
    2. Hands each transaction to every statistic
    3. Asks each statistic for its result, in the order given

    Example usage:
        registry = default_registry()
        stats = registry.create_all(DEFAULT_STATS, graph)

        results = StatsRunner(graph, stats).run()
        print(render(results))
    """

    def __init__(self, graph: Graph, stats: List[Stat]):
        """
        Args:
            graph: Built graph; must be acyclic when depth statistics run
            stats: Fresh statistics, each used for this run only
        """
        self.graph = graph
        self.stats = stats

        logger.debug(f"Initialized StatsRunner with {len(stats)} statistics")

    def run(self) -> List[StatResult]:
        """
        Accumulate and finalize every statistic.

        Returns:
            One result per statistic, in order

        Raises:
            NumericConversionError: If a count cannot be converted to a float
            CyclicGraphError: If a depth statistic meets a reference cycle
        """
        for transaction in self.graph:
            for stat in self.stats:
                stat.accumulate(transaction)

        n_transactions = to_float(len(self.graph))
        results = [stat.result(n_transactions) for stat in self.stats]

        logger.info(f"Computed {len(results)} statistics over {len(self.graph)} transactions")
        return results


def render(results: List[StatResult]) -> str:
    """Join results into the report text, one metric per line"""
    return "\n".join(str(result) for result in results)
