"""
Runtime Module

Run coordination and the command-line entry point.
"""

from .coordinator import LedgerCoordinator, LedgerReport

__all__ = [
    "LedgerCoordinator",
    "LedgerReport",
]
