"""
Depth Calculator

Depth of a vertex is its shortest number of reference hops back to Root:

    depth(Root) = 0
    depth(t)    = 1 + min(depth(t.left), depth(t.right))

Shared ancestors are computed once through a cache keyed by transaction id.
"""

from typing import Dict, List, Optional, Set

from .graph import Graph
from .ids import Id
from ..errors import CyclicGraphError


class DepthCalculator:
    """
    Memoized depth lookups over one graph.

    Keep a single calculator for a whole statistics pass so every query
    shares the cache.

    Example usage:
        depths = DepthCalculator(graph)
        depths.depth(ROOT)              # 0
        depths.depth(Id.from_int(4))    # 2
    """

    def __init__(self, graph: Graph, cache: Optional[Dict[Id, int]] = None):
        """
        Args:
            graph: Built graph, expected to be acyclic
            cache: Optional pre-filled cache to share between calculators
        """
        self.graph = graph
        self.cache: Dict[Id, int] = cache if cache is not None else {}

    def depth(self, vertex: Id) -> int:
        """
        Get the depth of a vertex.

        Walks unresolved references with an explicit stack. The stack always
        holds the current reference path, so meeting a vertex already on it
        means the graph is cyclic.

        Raises:
            CyclicGraphError: If a reference cycle is reached
            KeyError: If a reference points to a transaction not in the graph
        """
        if vertex.is_root:
            return 0
        if vertex in self.cache:
            return self.cache[vertex]

        stack: List[Id] = [vertex]
        on_path: Set[Id] = {vertex}

        while stack:
            current = stack[-1]
            transaction = self.graph[current]

            pending = self._first_pending(transaction.left, transaction.right)
            if pending is not None:
                if pending in on_path:
                    raise CyclicGraphError(pending)
                stack.append(pending)
                on_path.add(pending)
                continue

            self.cache[current] = 1 + min(
                self._known(transaction.left), self._known(transaction.right)
            )
            stack.pop()
            on_path.discard(current)

        return self.cache[vertex]

    def _first_pending(self, left: Id, right: Id) -> Optional[Id]:
        for reference in (left, right):
            if not reference.is_root and reference not in self.cache:
                return reference
        return None

    def _known(self, reference: Id) -> int:
        return 0 if reference.is_root else self.cache[reference]
