"""
Ledger Coordinator

Coordinates one ledgerstats run: build the graph, validate its structure,
compute the configured statistics.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional
import logging

from ..config.loader import RunConfig
from ..dag.builder import GraphBuilder
from ..dag.graph import Graph
from ..dag.validation import is_bipartite, is_connected_acyclic
from ..errors import CyclicGraphError, DisconnectedGraphError
from ..stats.base import StatResult
from ..stats.registry import StatRegistry, default_registry
from ..stats.runner import StatsRunner, render

logger = logging.getLogger(__name__)


@dataclass
class LedgerReport:
    """
    Outcome of a run.

    Attributes:
        graph: The built graph
        connected_acyclic: Validator outcome, None when validation was skipped
        bipartite: Validator outcome, None when validation was skipped
        results: Statistic results in configured order
    """
    graph: Graph
    connected_acyclic: Optional[bool] = None
    bipartite: Optional[bool] = None
    results: List[StatResult] = field(default_factory=list)

    def render(self) -> str:
        return render(self.results)


class LedgerCoordinator:
    """
    Coordinates graph loading, validation and statistics.

    The coordinator:
    1. Builds the graph from a line source
    2. Checks connectivity and acyclicity, failing on either violation
    3. Checks bipartiteness, which is advisory only
    4. Runs the configured statistics in one pass

    It never exits the process and never configures logging; failures are
    raised for the front-end to map.

    Example usage:
        coordinator = LedgerCoordinator(RunConfig())

        with open("ledger.in", encoding="utf-8") as f:
            report = coordinator.run(f)

        print(report.render())
    """

    def __init__(self, config: RunConfig, registry: Optional[StatRegistry] = None):
        """
        Args:
            config: Run configuration
            registry: Statistic registry, the built-in one by default
        """
        self.config = config
        self.registry = registry or default_registry()

        logger.debug(
            f"Coordinator initialized: validate_graph={config.validate_graph}, "
            f"stats={config.stats}"
        )

    def load(self, lines: Iterable[str]) -> Graph:
        """
        Build the graph.

        Raises:
            GraphError: If the input is malformed
            OSError: If reading the line source fails
        """
        graph = GraphBuilder(lines).build()

        logger.info(f"Loaded {len(graph)} transactions")
        for transaction in graph:
            logger.debug(f"  {transaction}")

        return graph

    def validate(self, graph: Graph, report: LedgerReport) -> None:
        """
        Run the structural checks and record them on the report.

        Raises:
            CyclicGraphError: If the graph is connected but cyclic
            DisconnectedGraphError: If a transaction is unreachable from Root
        """
        connected_acyclic = is_connected_acyclic(graph)
        report.connected_acyclic = connected_acyclic

        if connected_acyclic is None:
            raise DisconnectedGraphError()
        if not connected_acyclic:
            raise CyclicGraphError()
        logger.info("Graph is connected and acyclic")

        report.bipartite = is_bipartite(graph)
        if report.bipartite:
            logger.info("Graph is bipartite")
        else:
            logger.warning("Graph is not bipartite, this should not be a problem")

    def compute(self, graph: Graph, report: LedgerReport) -> None:
        """
        Run the configured statistics and record their results.

        Raises:
            NumericConversionError: If a count cannot be converted to a float
            CyclicGraphError: If validation was skipped and the graph is cyclic
        """
        stats = self.registry.create_all(self.config.stats, graph)
        report.results = StatsRunner(graph, stats).run()

    def run(self, lines: Iterable[str]) -> LedgerReport:
        """Load, validate (unless disabled) and compute statistics"""
        graph = self.load(lines)
        report = LedgerReport(graph=graph)

        if self.config.validate_graph:
            self.validate(graph, report)
        else:
            logger.info("Graph validation disabled")

        self.compute(graph, report)
        return report

    def get_metrics(self, report: LedgerReport) -> Dict[str, Any]:
        """
        Summarize a run.

        Returns:
            Dictionary with transaction count, validator outcomes and the
            configured statistics
        """
        return {
            "transactions": len(report.graph),
            "connected_acyclic": report.connected_acyclic,
            "bipartite": report.bipartite,
            "stats": list(self.config.stats),
        }
