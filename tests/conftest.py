from pathlib import Path

import pytest

from ledgerstats.dag import Graph, Id, Transaction, parse_graph

TESTDATA = Path(__file__).resolve().parent.parent / "testdata"

EXAMPLE = "5\n1 1 0\n1 2 0\n2 2 1\n3 6 3\n3 3 2"


def _graph_from_rows(rows):
    """Build a graph from (left, right, timestamp) rows, ids starting at 2"""
    graph = Graph()
    for offset, (left, right, timestamp) in enumerate(rows):
        graph.push(
            Transaction(
                id=Id.transaction(offset + 2),
                left=Id.from_int(left),
                right=Id.from_int(right),
                timestamp=timestamp,
            )
        )
    return graph


@pytest.fixture
def graph_from_rows():
    return _graph_from_rows


@pytest.fixture
def testdata_dir():
    return TESTDATA


@pytest.fixture
def example_text():
    return EXAMPLE


@pytest.fixture
def example_graph():
    return parse_graph(EXAMPLE)


@pytest.fixture
def simple_graph():
    return _graph_from_rows([(1, 1, 120), (2, 1, 130)])


@pytest.fixture
def bipartite_graph():
    return _graph_from_rows([(1, 1, 120), (2, 2, 130)])


@pytest.fixture
def cyclic_graph():
    return _graph_from_rows([(1, 3, 120), (1, 4, 130), (1, 2, 130)])


@pytest.fixture
def unconnected_graph():
    return _graph_from_rows([(3, 3, 120), (2, 2, 130)])
