"""
LedgerStats

Validates DAG-structured ledgers and computes descriptive statistics:
- dag: graph model, builder, validators and depth calculator
- stats: single-pass statistic accumulators
- config: YAML run configuration
- runtime: run coordination and command-line entry point
- generator: random bipartite ledger fixtures
"""

__version__ = "0.1.0"
