"""Fixed-size DNS packet buffer with big-endian reads and name decoding."""

_PACKET_SIZE = 512
_MAX_JUMPS = 5


class BufferError(Exception):
    """Base class for errors raised while reading a packet buffer."""


class EndOfBufferError(BufferError, EOFError):
    """A read went past the end of the 512-byte packet buffer."""


class JumpLimitError(BufferError, ValueError):
    """A compressed name followed too many pointers."""


class PacketBuffer:
    """A 512-byte DNS packet with a read cursor."""

    def __init__(self, data=b""):
        if len(data) > _PACKET_SIZE:
            raise ValueError(
                f"packet of {len(data)} bytes exceeds {_PACKET_SIZE} bytes"
            )
        self.buf = bytearray(_PACKET_SIZE)
        self.buf[: len(data)] = data
        self.pos = 0

    def step(self, steps):
        """Move the cursor forward by ``steps`` bytes."""
        self.pos += steps

    def _read(self):
        if self.pos >= _PACKET_SIZE:
            raise EndOfBufferError("End of buffer")
        value = self.buf[self.pos]
        self.pos += 1
        return value

    def _get(self, pos):
        if pos >= _PACKET_SIZE:
            raise EndOfBufferError("End of buffer")
        return self.buf[pos]

    def _get_range(self, start, length):
        if start + length >= _PACKET_SIZE:
            raise EndOfBufferError("End of buffer")
        return bytes(self.buf[start : start + length])

    def read_u16(self):
        """Read a big-endian 16-bit integer and advance the cursor."""
        return (self._read() << 8) | self._read()

    def read_u32(self):
        """Read a big-endian 32-bit integer and advance the cursor."""
        result = 0
        for _ in range(4):
            result = (result << 8) | self._read()
        return result

    def read_qname(self):
        """Read a possibly compressed domain name and return it in lower case.

        The cursor ends just past the name as it appears at the current
        position; pointers followed elsewhere do not move it further.
        """
        pos = self.pos
        jumped = False
        jumps_performed = 0
        labels = []

        while True:
            # Untrusted packets may contain pointer cycles.
            if jumps_performed > _MAX_JUMPS:
                raise JumpLimitError(f"Limit of {_MAX_JUMPS} jumps exceeded")

            length = self._get(pos)

            if length & 0xC0 == 0xC0:
                if not jumped:
                    self.pos = pos + 2
                low = self._get(pos + 1)
                pos = ((length & 0x3F) << 8) | low
                jumped = True
                jumps_performed += 1
                continue

            pos += 1
            if length == 0:
                break

            raw = self._get_range(pos, length)
            labels.append(raw.decode("utf-8", errors="replace").lower())
            pos += length

        if not jumped:
            self.pos = pos

        return ".".join(labels)