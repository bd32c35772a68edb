"""DNS record types."""

from dataclasses import dataclass
from typing import ClassVar

_A = 1


@dataclass(frozen=True)
class QueryType:
    """A record type; only A is understood, all others are kept by number."""

    num: int

    A: ClassVar["QueryType"]

    def __post_init__(self):
        if not 0 <= self.num <= 0xFFFF:
            raise ValueError(f"query type {self.num} is out of range")

    @classmethod
    def from_num(cls, num):
        """Build a query type from its wire number."""
        return cls(num)

    def to_num(self):
        """Return the wire number of this query type."""
        return self.num

    @property
    def is_unknown(self):
        """True for record types this package does not decode."""
        return self.num != _A

    def __str__(self):
        return "A" if self.num == _A else f"UNKNOWN({self.num})"


QueryType.A = QueryType(_A)