import struct

import pytest

from dnsparse.buffer import EndOfBufferError, PacketBuffer
from dnsparse.header import DnsHeader
from dnsparse.result_code import ResultCode


def make_header(packet_id, flags, qd=0, an=0, ns=0, ar=0):
    return struct.pack(">HHHHHH", packet_id, flags, qd, an, ns, ar)


def test_default_header():
    header = DnsHeader()
    assert header.id == 0
    assert header.rescode is ResultCode.NOERROR
    assert not header.response


def test_read_standard_response():
    buf = PacketBuffer(make_header(0xBEEF, 0x8180, 1, 2, 3, 4))
    header = DnsHeader.read(buf)
    assert header.id == 0xBEEF
    assert header.response
    assert header.recursion_desired
    assert header.recursion_available
    assert not header.truncated_message
    assert not header.authoritative_answer
    assert header.opcode == 0
    assert header.rescode is ResultCode.NOERROR
    assert (header.questions, header.answers) == (1, 2)
    assert (header.authoritative_entries, header.resource_entries) == (3, 4)
    assert buf.pos == 12


def test_query_flags_all_clear():
    header = DnsHeader.read(PacketBuffer(make_header(7, 0x0000, 1)))
    assert header == DnsHeader(id=7, questions=1)


def test_opcode_bits():
    header = DnsHeader.read(PacketBuffer(make_header(1, 0x7800)))
    assert header.opcode == 0x0F
    assert not header.response
    assert not header.authoritative_answer


def test_second_byte_flags():
    header = DnsHeader.read(PacketBuffer(make_header(1, 0x0070)))
    assert header.checking_disabled
    assert header.authed_data
    assert header.z
    assert not header.recursion_available


def test_first_byte_flags():
    header = DnsHeader.read(PacketBuffer(make_header(1, 0x0600)))
    assert header.truncated_message
    assert header.authoritative_answer
    assert not header.recursion_desired


def test_rescode_nxdomain():
    header = DnsHeader.read(PacketBuffer(make_header(1, 0x8183)))
    assert header.rescode is ResultCode.NXDOMAIN


def test_unknown_rescode_defaults():
    header = DnsHeader.read(PacketBuffer(make_header(1, 0x000F)))
    assert header.rescode is ResultCode.NOERROR


def test_header_at_end_raises():
    buf = PacketBuffer()
    buf.step(506)
    with pytest.raises(EndOfBufferError):
        DnsHeader.read(buf)