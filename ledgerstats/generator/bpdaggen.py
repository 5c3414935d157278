"""
Bipartite DAG Generator

Generates random ledger files whose graphs are connected, acyclic and
bipartite, for use as test fixtures.

Usage:
    bpdaggen N_VERTICES [--seed SEED] > ledger.in
"""

import argparse
import logging
import random
import sys
from typing import List, Optional

from ..dag.ids import Id, ROOT
from ..dag.transaction import Transaction

logger = logging.getLogger(__name__)

# Timestamps grow by a random step in [1, MAX_STEP) over the newest reference
MAX_STEP = 100


def generate(n_vertices: int, rng: Optional[random.Random] = None) -> List[Transaction]:
    """
    Generate a random bipartite ledger.

    Root is red and vertex 2 is blue, referencing Root twice. Every later
    vertex picks a color at random and references two random vertices of the
    other color. Its timestamp is strictly later than both references'.

    Args:
        n_vertices: Number of transactions to generate (Root excluded)
        rng: Random source, a fresh unseeded one by default

    Returns:
        Transactions with ids 2 .. n_vertices + 1

    Raises:
        ValueError: If n_vertices is negative
    """
    if n_vertices < 0:
        raise ValueError(f"Number of vertices must be non-negative, got {n_vertices}")

    rng = rng or random.Random()
    if n_vertices == 0:
        return []

    # Timestamps by identifier value; Root has timestamp 0
    timestamps = {int(ROOT): 0}
    reds: List[int] = [int(ROOT)]
    blues: List[int] = []

    first = Transaction(
        id=Id.transaction(2), left=ROOT, right=ROOT, timestamp=rng.randrange(0, MAX_STEP)
    )
    transactions = [first]
    timestamps[2] = first.timestamp
    blues.append(2)

    for value in range(3, n_vertices + 2):
        red = rng.random() < 0.5
        parents = blues if red else reds

        left = rng.choice(parents)
        right = rng.choice(parents)
        logger.debug(f"{'RED' if red else 'BLUE'} {value}: left = {left}, right = {right}")

        min_timestamp = max(timestamps[left], timestamps[right]) + rng.randrange(1, MAX_STEP)
        max_timestamp = min_timestamp + rng.randrange(1, MAX_STEP)
        timestamp = rng.randint(min_timestamp, max_timestamp)

        transactions.append(
            Transaction(
                id=Id.transaction(value),
                left=Id.from_int(left),
                right=Id.from_int(right),
                timestamp=timestamp,
            )
        )
        timestamps[value] = timestamp
        (reds if red else blues).append(value)

    return transactions


def render(transactions: List[Transaction]) -> str:
    """Serialize transactions to the ledger input format"""
    lines = [str(len(transactions))]
    lines.extend(transaction.to_line() for transaction in transactions)
    return "\n".join(lines) + "\n"


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="bpdaggen", description="Generate random bipartite DAGs"
    )
    parser.add_argument("n_vertices", type=int, help="Number of vertices")
    parser.add_argument(
        "--seed", type=int, default=None, help="Seed for reproducible output."
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        transactions = generate(args.n_vertices, random.Random(args.seed))
    except ValueError as e:
        logger.error(f"Invalid arguments: {e}")
        return 1

    sys.stdout.write(render(transactions))
    return 0


def run() -> None:
    """Console script entry point"""
    sys.exit(main())


if __name__ == "__main__":
    run()
