"""
Ledger Identifiers

Identifiers for the vertices of a ledger DAG. Identifier 1 is the synthetic
Root vertex, every other positive integer names a transaction. Identifier 0 is
never valid.
"""

from dataclasses import dataclass

from ..errors import InvalidIdentifier, ReservedIdentifier

ROOT_VALUE = 1


@dataclass(frozen=True, order=True)
class Id:
    """
    Identifier of a vertex: either Root or a transaction.

    Use the constructors rather than calling Id() directly:
        Id.from_int(1)      # Root
        Id.from_int(7)      # Tx:7
        Id.transaction(7)   # Tx:7, refuses 1
        ROOT                # the Root identifier

    Identifiers hash and compare by their integer value, so they can key the
    reverse index and be sorted for deterministic traversal.
    """
    value: int

    def __post_init__(self):
        if self.value < ROOT_VALUE:
            raise InvalidIdentifier(self.value)

    @classmethod
    def from_int(cls, value: int) -> "Id":
        """Build any identifier, mapping 1 to Root"""
        return cls(value)

    @classmethod
    def transaction(cls, value: int) -> "Id":
        """
        Build a transaction (non-root) identifier.

        Raises:
            InvalidIdentifier: If value is 0
            ReservedIdentifier: If value is 1
        """
        if value == ROOT_VALUE:
            raise ReservedIdentifier()
        return cls(value)

    @property
    def is_root(self) -> bool:
        return self.value == ROOT_VALUE

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        if self.is_root:
            return "Root"
        return f"Tx:{self.value}"


ROOT = Id(ROOT_VALUE)
