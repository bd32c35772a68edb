"""DNS response codes."""

from enum import IntEnum


class ResultCode(IntEnum):
    """The RCODE field of a DNS header."""

    NOERROR = 0
    FORMERR = 1
    SERVFAIL = 2
    NXDOMAIN = 3
    NOTIMP = 4
    REFUSED = 5

    @classmethod
    def from_num(cls, num):
        """Map a numeric code to a member; unknown codes become NOERROR."""
        try:
            return cls(num)
        except ValueError:
            return cls.NOERROR