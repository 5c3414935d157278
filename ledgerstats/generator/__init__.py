"""
Generator Module

Random ledger fixture generation.
"""

from .bpdaggen import generate, render

__all__ = [
    "generate",
    "render",
]
