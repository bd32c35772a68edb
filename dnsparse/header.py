"""The 12-byte DNS packet header."""

from dataclasses import dataclass

from .result_code import ResultCode


@dataclass
class DnsHeader:
    """Packet id, flag bits and section counts."""

    id: int = 0
    recursion_desired: bool = False
    truncated_message: bool = False
    authoritative_answer: bool = False
    opcode: int = 0
    response: bool = False
    rescode: ResultCode = ResultCode.NOERROR
    checking_disabled: bool = False
    authed_data: bool = False
    z: bool = False
    recursion_available: bool = False
    questions: int = 0
    answers: int = 0
    authoritative_entries: int = 0
    resource_entries: int = 0

    @classmethod
    def read(cls, buffer):
        """Read a header from ``buffer`` at its current position."""
        packet_id = buffer.read_u16()
        flags = buffer.read_u16()
        high = flags >> 8
        low = flags & 0xFF

        return cls(
            id=packet_id,
            recursion_desired=bool(high & 0x01),
            truncated_message=bool(high & 0x02),
            authoritative_answer=bool(high & 0x04),
            opcode=(high >> 3) & 0x0F,
            response=bool(high & 0x80),
            rescode=ResultCode.from_num(low & 0x0F),
            checking_disabled=bool(low & 0x10),
            authed_data=bool(low & 0x20),
            z=bool(low & 0x40),
            recursion_available=bool(low & 0x80),
            questions=buffer.read_u16(),
            answers=buffer.read_u16(),
            authoritative_entries=buffer.read_u16(),
            resource_entries=buffer.read_u16(),
        )