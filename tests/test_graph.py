import io

import pytest

from ledgerstats.dag import Graph, GraphBuilder, Id, ROOT, Transaction, load_graph, parse_graph
from ledgerstats.errors import (
    GraphError,
    InvalidCount,
    InvalidLeftReference,
    InvalidRightReference,
    InvalidTransaction,
    MissingCount,
    MissingTimestamp,
    TooLittleTransactions,
    TooManyTransactions,
)


def test_parse_success(simple_graph):
    graph = parse_graph("2\n1 1 120\n2 1 130")
    assert len(graph) == 2
    assert graph == simple_graph


def test_parse_example(example_graph, graph_from_rows):
    expected = graph_from_rows([(1, 1, 0), (1, 2, 0), (2, 2, 1), (3, 6, 3), (3, 3, 2)])
    assert len(example_graph) == 5
    assert example_graph == expected


def test_builder_accepts_text_stream():
    graph = GraphBuilder(io.StringIO("1\r\n1 1 5\r\n")).build()
    assert len(graph) == 1
    assert graph[Id.from_int(2)].timestamp == 5


def test_empty_graph():
    graph = parse_graph("0")
    assert len(graph) == 0
    assert graph.max_id == 1


def test_missing_count():
    with pytest.raises(MissingCount):
        parse_graph("")


@pytest.mark.parametrize("text", ["\n1 1 120\n2 1 130", "two\n1 1 0", " 2\n1 1 0\n1 1 0"])
def test_invalid_count(text):
    with pytest.raises(InvalidCount) as exc:
        parse_graph(text)
    assert isinstance(exc.value.cause, ValueError)


def test_too_many_transactions():
    with pytest.raises(TooManyTransactions) as exc:
        parse_graph("1\n1 1 0\n2 2 1")
    assert exc.value.expected == 1


def test_trailing_blank_line_counts_as_extra():
    with pytest.raises(TooManyTransactions):
        GraphBuilder(["1", "1 1 0", ""]).build()


def test_too_little_transactions():
    with pytest.raises(TooLittleTransactions) as exc:
        parse_graph("3\n1 1 0\n2 2 1")
    assert (exc.value.expected, exc.value.found) == (3, 2)


def test_invalid_transaction_wraps_cause():
    with pytest.raises(InvalidTransaction) as exc:
        parse_graph("2\n1 1 0\n2 2")
    assert isinstance(exc.value.cause, MissingTimestamp)
    assert exc.value.tx_id == 3
    assert str(exc.value) == "Invalid transaction on Tx:3: Missing timestamp"


def test_invalid_left_reference():
    with pytest.raises(InvalidLeftReference) as exc:
        parse_graph("2\n1 1 0\n4 1 0")
    err = exc.value
    assert err.tx_id == Id.from_int(3)
    assert err.reference == Id.from_int(4)
    assert err.max_id == 3
    assert str(err) == "Invalid left ref to Tx:4 on Tx:3 max=3"


def test_invalid_right_reference():
    with pytest.raises(InvalidRightReference) as exc:
        parse_graph("2\n1 9 0\n1 1 0")
    assert exc.value.tx_id == Id.from_int(2)
    assert exc.value.max_id == 3


def test_forward_reference_within_declared_count():
    # The bound is the declared count, not the line position
    graph = parse_graph("2\n1 3 0\n1 1 0")
    assert graph[Id.from_int(2)].right == Id.from_int(3)


def test_format_errors_are_value_errors():
    with pytest.raises(ValueError):
        parse_graph("x")
    assert issubclass(GraphError, ValueError)


def test_load_graph(testdata_dir):
    graph = load_graph(testdata_dir / "example.in")
    assert len(graph) == 5


def test_load_graph_missing_file(tmp_path):
    with pytest.raises(OSError):
        load_graph(tmp_path / "missing.in")


def test_reverse_index_counts_each_side(example_graph):
    root_refs = example_graph.references(ROOT)
    assert root_refs.sources == {Id.from_int(2), Id.from_int(3)}
    assert root_refs.count == 3

    tx2_refs = example_graph.references(Id.from_int(2))
    assert tx2_refs.sources == {Id.from_int(3), Id.from_int(4)}
    assert tx2_refs.count == 3

    assert example_graph.references(Id.from_int(6)).count == 1
    assert example_graph.references(Id.from_int(5)).count == 0
    assert example_graph.get_dependents(Id.from_int(4)) == set()


def test_indexing_and_iteration(example_graph):
    assert example_graph[Id.from_int(5)].timestamp == 3
    assert [int(tx.id) for tx in example_graph] == [2, 3, 4, 5, 6]
    assert list(example_graph.vertices())[0] == ROOT
    with pytest.raises(KeyError):
        example_graph[ROOT]
    with pytest.raises(KeyError):
        example_graph[Id.from_int(7)]


def test_push_rejects_out_of_order_id():
    graph = Graph()
    with pytest.raises(ValueError):
        graph.push(Transaction(id=Id.transaction(3), left=ROOT, right=ROOT, timestamp=0))
