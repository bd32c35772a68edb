"""Resource records from the answer, authority and additional sections."""

from dataclasses import dataclass
from ipaddress import IPv4Address

from .query_type import QueryType


@dataclass(frozen=True, order=True)
class UnknownRecord:
    """A record of a type this package does not decode; its data is skipped."""

    domain: str
    qtype: int
    data_len: int
    ttl: int


@dataclass(frozen=True, order=True)
class ARecord:
    """An IPv4 address record."""

    domain: str
    addr: IPv4Address
    ttl: int


def read_record(buffer):
    """Read one resource record from ``buffer``."""
    domain = buffer.read_qname()
    qtype_num = buffer.read_u16()
    qtype = QueryType.from_num(qtype_num)
    buffer.read_u16()  # class
    ttl = buffer.read_u32()
    data_len = buffer.read_u16()

    if qtype == QueryType.A:
        addr = IPv4Address(buffer.read_u32())
        return ARecord(domain, addr, ttl)

    buffer.step(data_len)
    return UnknownRecord(domain, qtype_num, data_len, ttl)