"""
Graph Validation

Structural checks over a built ledger Graph. Both traversals start at Root and
follow reverse references, i.e. from a vertex to every transaction that
references it. Neither recurses, so chain length is not bounded by the
interpreter's recursion limit.
"""

from enum import Enum
from typing import Dict, Iterator, List, Optional, Tuple
import logging

from .graph import Graph
from .ids import Id, ROOT

logger = logging.getLogger(__name__)


class VisitState(Enum):
    """DFS vertex state: on the current path (GRAY) or fully explored (BLACK)"""
    GRAY = "gray"
    BLACK = "black"


def _dependents(graph: Graph, vertex: Id) -> Iterator[Id]:
    # Sorted so traversal order, and the first reported cycle, is deterministic
    return iter(sorted(graph.get_dependents(vertex)))


def is_connected_acyclic(graph: Graph) -> Optional[bool]:
    """
    Check that every vertex is reachable from Root and no cycle exists.

    Uses an iterative depth-first search with vertex states. A reverse edge
    into a GRAY vertex (one still on the current path) is a back edge, i.e. a
    cycle. Unvisited vertices are implicitly WHITE.

    Args:
        graph: Built graph

    Returns:
        True if connected and acyclic, False if connected but cyclic, None if
        some transaction is unreachable from Root
    """
    state: Dict[Id, VisitState] = {ROOT: VisitState.GRAY}
    stack: List[Tuple[Id, Iterator[Id]]] = [(ROOT, _dependents(graph, ROOT))]
    cycle_at: Optional[Id] = None

    while stack:
        vertex, children = stack[-1]
        child = next(children, None)

        if child is None:
            state[vertex] = VisitState.BLACK
            stack.pop()
            continue

        child_state = state.get(child)
        if child_state is None:
            state[child] = VisitState.GRAY
            stack.append((child, _dependents(graph, child)))
        elif child_state is VisitState.GRAY and cycle_at is None:
            cycle_at = child
            logger.debug(f"Back edge {vertex} -> {child}")

    reached = len(state)
    expected = len(graph) + 1
    if reached < expected:
        logger.debug(f"Reached {reached} of {expected} vertices from Root")
        return None

    if cycle_at is not None:
        logger.debug(f"Cycle detected through {cycle_at}")
        return False

    logger.debug("Graph is connected and acyclic")
    return True


def is_bipartite(graph: Graph, root_color: bool = False) -> bool:
    """
    Check whether the graph is two-colorable.

    Colors Root with root_color and every referencing transaction with the
    opposite color of the vertex it references. Stops at the first vertex
    that would need both colors.

    Assumes every transaction is reachable from Root; run
    is_connected_acyclic() first. Vertices not reachable from Root are never
    colored and so never cause a conflict.

    Args:
        graph: Built graph
        root_color: Color assigned to Root

    Returns:
        True if no coloring conflict was found
    """
    colors: Dict[Id, bool] = {ROOT: root_color}
    stack: List[Id] = [ROOT]

    while stack:
        vertex = stack.pop()
        expected = not colors[vertex]

        for child in _dependents(graph, vertex):
            color = colors.get(child)
            if color is None:
                colors[child] = expected
                stack.append(child)
            elif color != expected:
                logger.debug(f"Coloring conflict at {child} via {vertex}")
                return False

    return True
