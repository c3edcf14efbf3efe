"""
Raw byte buffers that seed identifiers.

Random buffers are drawn entirely from os.urandom. Ordered buffers carry a
big-endian timestamp in the first K bytes (4 for seconds, 8 for
microseconds) followed by os.urandom output.

os.urandom is the one process-wide source and is safe to call from any
thread, so nothing here holds a lock or keeps state between calls.
"""

import os
import struct

from core.errors import ClockError
from identifiers.limits import MAX_BYTES, MIN_RANDOM_BYTES, Precision, check_length
from internal.logging import get_logger
from utils.timestamp import now_micros, now_seconds

# Seconds wrap at 2**32 (year 2106), same as a u32 unix time.
_PACKERS = {
    Precision.SECONDS: (">I", 0xFFFFFFFF),
    Precision.MICROSECONDS: (">Q", 0xFFFFFFFFFFFFFFFF),
}


def generate_random(n):
    """Return n cryptographically secure random bytes."""
    check_length(n, MIN_RANDOM_BYTES, MAX_BYTES)
    return os.urandom(n)


def read_clock(precision):
    """Offset from the Unix epoch at the given precision."""
    precision = Precision.parse(precision)
    offset = now_seconds() if precision is Precision.SECONDS else now_micros()
    if offset < 0:
        get_logger().error("System clock before Unix epoch", offset=offset, precision=precision.value)
        raise ClockError("system time before Unix epoch", offset=offset)
    return offset


def generate_ordered(n, precision=Precision.SECONDS):
    """Return n bytes: timestamp prefix, then random bytes."""
    precision = Precision.parse(precision)
    check_length(n, precision.width, MAX_BYTES)

    fmt, mask = _PACKERS[precision]
    prefix = struct.pack(fmt, read_clock(precision) & mask)
    return prefix + os.urandom(n - precision.width)
