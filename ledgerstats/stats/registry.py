"""
Statistic Registry

Factory registry for creating statistic accumulators by name.
Lets configuration select which statistics run, and in which order.
"""

from typing import Callable, Dict, List
import logging

from .accumulators import Depths, InReferences, TimeUnits, Timestamps
from .base import Stat
from ..dag.graph import Graph

logger = logging.getLogger(__name__)

StatFactory = Callable[[Graph], Stat]

# Built-in statistics in report order
DEFAULT_STATS = ["depths", "in_references", "time_units", "timestamps"]


class StatRegistry:
    """
    Registry of available statistics with factory functions.

    The registry maps statistic names (e.g. "depths", "timestamps") to
    factories taking the graph to measure.

    Example usage:
        registry = StatRegistry()
        registry.register("max_timestamp", lambda graph: MaxTimestamp())

        stat = registry.create("max_timestamp", graph)
    """

    def __init__(self):
        """Initialize empty registry"""
        self._factories: Dict[str, StatFactory] = {}
        logger.debug("Initialized StatRegistry")

    def register(self, name: str, factory: StatFactory) -> None:
        """
        Register a statistic factory.

        Args:
            name: Statistic name used in configuration
            factory: Callable that takes a Graph and returns a fresh Stat
        """
        if name in self._factories:
            logger.warning(f"Overwriting existing registration for statistic: {name}")

        self._factories[name] = factory
        logger.debug(f"Registered statistic: {name}")

    def create(self, name: str, graph: Graph) -> Stat:
        """
        Create a statistic for a graph.

        Raises:
            ValueError: If name is not registered
        """
        if name not in self._factories:
            available = ", ".join(self._factories.keys())
            raise ValueError(
                f"Unknown statistic: {name}. "
                f"Available statistics: {available if available else 'none'}"
            )

        return self._factories[name](graph)

    def create_all(self, names: List[str], graph: Graph) -> List[Stat]:
        """Create one statistic per name, in the given order"""
        return [self.create(name, graph) for name in names]

    def list_names(self) -> List[str]:
        return list(self._factories.keys())

    def is_registered(self, name: str) -> bool:
        return name in self._factories


def default_registry() -> StatRegistry:
    """
    Build a registry holding the built-in statistics.

    Returns:
        StatRegistry with every name in DEFAULT_STATS registered
    """
    registry = StatRegistry()
    registry.register("depths", Depths)
    registry.register("in_references", InReferences)
    registry.register("time_units", TimeUnits)
    registry.register("timestamps", Timestamps)
    return registry
