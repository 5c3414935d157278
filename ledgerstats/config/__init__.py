"""
Config Module

YAML run configuration loading and validation.
"""

from .loader import ConfigLoader, RunConfig

__all__ = [
    "ConfigLoader",
    "RunConfig",
]
