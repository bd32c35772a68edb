# dnsparse

A small library for reading DNS packets as they arrive over the wire.

`dnsparse` decodes the 12-byte header, question entries and resource records
from a raw DNS message of up to 512 bytes. Domain names are decoded the way
the protocol encodes them: length-prefixed labels, and compression pointers
that refer back to earlier names in the packet. Names come back in lower case.
If pointers loop or chain too deeply, reading stops with an error.

## Installation

```
pip install dnsparse
```

## Usage

```python
from dnsparse.buffer import PacketBuffer
from dnsparse.header import DnsHeader
from dnsparse.question import DnsQuestion
from dnsparse.record import ARecord, read_record

with open("response.bin", "rb") as fh:
    buffer = PacketBuffer(fh.read())

header = DnsHeader.read(buffer)
print(header.id, header.rescode, header.response)

questions = [DnsQuestion.read(buffer) for _ in range(header.questions)]
answers = [read_record(buffer) for _ in range(header.answers)]

for record in answers:
    if isinstance(record, ARecord):
        print(record.domain, record.addr, record.ttl)
```

## What is decoded

- `PacketBuffer` (in `dnsparse.buffer`) holds the packet in a 512-byte buffer,
  zero-padded, with a read cursor `pos`. It offers `read_u16`, `read_u32`
  (big-endian), `step` to skip bytes, and `read_qname`, which returns a
  domain name as a string. Passing more than 512 bytes to the constructor
  raises `ValueError`.
- `DnsHeader.read(buffer)` returns the packet id, all flag bits, the opcode,
  the result code (`ResultCode`) and the four section counts.
- `DnsQuestion.read(buffer)` returns the queried name and its `QueryType`.
  The class field is read and then discarded.
- `read_record(buffer)` returns an `ARecord` (domain, `ipaddress.IPv4Address`,
  TTL) for IPv4 address records. For any other record type it returns an
  `UnknownRecord`, which keeps the numeric type, the data length and the TTL,
  and skips over the record's data.

`QueryType.from_num` and `QueryType.to_num` convert between record type
numbers and `QueryType` values; `QueryType.A` is the address type, and every
other number is kept as it is (`is_unknown` is true for those). Numbers
outside 0 to 65535 raise `ValueError`. `ResultCode.from_num` maps response
codes 0 to 5 to `NOERROR`, `FORMERR`, `SERVFAIL`, `NXDOMAIN`, `NOTIMP` and
`REFUSED`, and treats any other value as `NOERROR`.

## Errors

Every read error derives from `BufferError`:

- `EndOfBufferError` (also an `EOFError`) is raised when a read runs off the
  end of the 512-byte buffer.
- `JumpLimitError` (also a `ValueError`) is raised when a name follows more
  than five compression pointers.

## What it does not do

`dnsparse` only reads. It does not build or write packets, send or receive
anything over the network, or decode record data other than IPv4 addresses.
It has no command-line tool; it is used as a library.

## Running the tests

```
pip install -e ".[test]"
pytest
```