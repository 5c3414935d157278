import pytest

from ledgerstats.config import RunConfig
from ledgerstats.errors import CyclicGraphError, DisconnectedGraphError, InvalidCount
from ledgerstats.runtime import LedgerCoordinator, LedgerReport


def test_end_to_end_example(example_text):
    coordinator = LedgerCoordinator(RunConfig())
    report = coordinator.run(example_text.splitlines())

    assert len(report.graph) == 5
    assert report.connected_acyclic is True
    assert report.bipartite is False
    assert report.render() == (
        "> AVG DAG DEPTH: 1.33\n"
        "> AVG TXS PER DEPTH: 2.50\n"
        "> AVG REF: 1.67\n"
        "> AVG TXS PER TIME UNIT: 0.60\n"
        "> AVG TXS PER TIMESTAMP: 1.25"
    )


def test_non_bipartite_is_advisory(caplog, example_text):
    report = LedgerCoordinator(RunConfig()).run(example_text.splitlines())
    assert report.results
    assert "Graph is not bipartite" in caplog.text


def test_configured_stats_order(example_text):
    config = RunConfig(stats=["timestamps", "in_references"])
    report = LedgerCoordinator(config).run(example_text.splitlines())
    assert report.render() == "> AVG TXS PER TIMESTAMP: 1.25\n> AVG REF: 1.67"


def test_cyclic_graph_fails():
    with pytest.raises(CyclicGraphError):
        LedgerCoordinator(RunConfig()).run(["3", "1 3 120", "1 4 130", "1 2 130"])


def test_unconnected_graph_fails():
    with pytest.raises(DisconnectedGraphError):
        LedgerCoordinator(RunConfig()).run(["2", "3 3 120", "2 2 130"])


def test_validation_disabled_skips_checks():
    config = RunConfig(validate_graph=False, stats=["timestamps"])
    report = LedgerCoordinator(config).run(["2", "3 3 120", "2 2 130"])
    assert report.connected_acyclic is None
    assert report.bipartite is None
    assert report.render() == "> AVG TXS PER TIMESTAMP: 1.00"


def test_validation_disabled_cycle_surfaces_in_depths():
    config = RunConfig(validate_graph=False)
    with pytest.raises(CyclicGraphError):
        LedgerCoordinator(config).run(["2", "3 3 120", "2 2 130"])


def test_format_error_propagates():
    with pytest.raises(InvalidCount):
        LedgerCoordinator(RunConfig()).run(["x"])


def test_metrics(example_text):
    coordinator = LedgerCoordinator(RunConfig())
    report = coordinator.run(example_text.splitlines())
    assert coordinator.get_metrics(report) == {
        "transactions": 5,
        "connected_acyclic": True,
        "bipartite": False,
        "stats": ["depths", "in_references", "time_units", "timestamps"],
    }


def test_report_defaults(example_graph):
    report = LedgerReport(graph=example_graph)
    assert report.render() == ""
