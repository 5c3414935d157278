"""
LedgerStats - Main Entry Point

Reads a ledger file, validates the DAG and prints its statistics.

Usage:
    ledgerstats INPUT_FILE [-d] [--config PATH] [--log-level LEVEL]

Environment Variables:
    LEDGERSTATS_LOG_LEVEL: Logging level (default: "INFO")
    LEDGERSTATS_NO_VALIDATION: Skip graph validation when "1"/"true"
"""

import argparse
import logging
import sys
from enum import IntEnum
from pathlib import Path
from typing import List, Optional

from ..config.loader import ConfigLoader, RunConfig
from ..errors import (
    CyclicGraphError,
    DisconnectedGraphError,
    GraphError,
    NumericConversionError,
)
from .coordinator import LedgerCoordinator, LedgerReport

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

logger = logging.getLogger(__name__)


class ExitCode(IntEnum):
    """Process exit codes"""
    OK = 0
    FAILURE = 1
    BAD_GRAPH = 2
    CYCLIC = 3
    DISCONNECTED = 4


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="ledgerstats",
        description="Validate a ledger DAG and print its statistics.",
    )
    parser.add_argument("input_file", help="Input file")
    parser.add_argument(
        "-d",
        "--no-validation",
        action="store_true",
        help="Disable (slow) graph validation",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Optional YAML run configuration.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level, overrides config and environment.",
    )
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> RunConfig:
    """
    Load configuration and apply command-line overrides.

    Raises:
        ValueError: If the configuration is invalid
    """
    config = ConfigLoader(args.config).load()

    overrides = {}
    if args.no_validation:
        overrides["validate_graph"] = False
    if args.log_level:
        overrides["log_level"] = args.log_level

    if overrides:
        # Re-validate so a bad --log-level is reported like a bad config value
        config = RunConfig(**{**config.model_dump(), **overrides})
    return config


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run ledgerstats.

    Returns:
        ExitCode value for the process
    """
    args = parse_args(argv)

    try:
        config = build_config(args)
    except ValueError as e:
        logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
        logger.error(f"Error loading configuration: {e}")
        return ExitCode.FAILURE

    logging.basicConfig(level=config.log_level, format=LOG_FORMAT)
    logger.info(f"Input file = {args.input_file}")

    coordinator = LedgerCoordinator(config)

    try:
        input_file = open(args.input_file, encoding="utf-8")
    except OSError as e:
        logger.error(f"Error opening file `{args.input_file}`: {e}")
        return ExitCode.FAILURE

    with input_file:
        try:
            graph = coordinator.load(input_file)
        except (GraphError, OSError, UnicodeDecodeError) as e:
            logger.error(f"Error reading graph from `{args.input_file}`: {e}")
            return ExitCode.BAD_GRAPH

    report = LedgerReport(graph=graph)

    if config.validate_graph:
        try:
            coordinator.validate(graph, report)
        except CyclicGraphError:
            logger.error("Graph is connected but cyclic, this is not supported")
            return ExitCode.CYCLIC
        except DisconnectedGraphError:
            logger.error("Graph is unconnected, this is not supported")
            return ExitCode.DISCONNECTED

    try:
        coordinator.compute(graph, report)
    except NumericConversionError as e:
        logger.error(f"Error calculating result: {e}")
        return ExitCode.FAILURE
    except CyclicGraphError as e:
        logger.error(f"Error calculating result: {e}")
        return ExitCode.CYCLIC

    print(report.render())
    logger.debug(f"Run metrics: {coordinator.get_metrics(report)}")
    return ExitCode.OK


def run() -> None:
    """Console script entry point"""
    sys.exit(main())


if __name__ == "__main__":
    run()
