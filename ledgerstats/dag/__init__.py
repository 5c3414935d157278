"""
DAG Module

Ledger graph model, construction from serialized input, structural
validation and depth computation.
"""

from .ids import Id, ROOT
from .transaction import Transaction
from .graph import Graph, References
from .builder import GraphBuilder, load_graph, parse_graph
from .validation import is_bipartite, is_connected_acyclic
from .depth import DepthCalculator

__all__ = [
    "Id",
    "ROOT",
    "Transaction",
    "Graph",
    "References",
    "GraphBuilder",
    "load_graph",
    "parse_graph",
    "is_bipartite",
    "is_connected_acyclic",
    "DepthCalculator",
]
