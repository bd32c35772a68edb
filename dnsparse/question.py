"""The question section of a DNS packet."""

from dataclasses import dataclass

from .query_type import QueryType


@dataclass
class DnsQuestion:
    """A queried name and the record type asked for."""

    name: str = ""
    qtype: QueryType = QueryType.A

    @classmethod
    def read(cls, buffer):
        """Read name, type and class from ``buffer``; the class is discarded."""
        name = buffer.read_qname()
        qtype = QueryType.from_num(buffer.read_u16())
        buffer.read_u16()
        return cls(name, qtype)