"""Byte-length bounds and timestamp precision for identifiers."""

from enum import Enum

from core.errors import InvalidLength

MAX_BYTES = 32
MIN_RANDOM_BYTES = 1
# 10 bytes -> 14 encoded chars, ~80 bits of entropy for random ids
DEFAULT_BYTES = 10


class Precision(Enum):
    SECONDS = "seconds"
    MICROSECONDS = "microseconds"

    @property
    def width(self):
        """Bytes taken by the big-endian timestamp prefix."""
        return 4 if self is Precision.SECONDS else 8

    @classmethod
    def parse(cls, value):
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            raise ValueError(f"unknown timestamp precision: {value!r}") from None


def min_bytes(precision=None):
    """Smallest byte count accepted; random ids when precision is None."""
    if precision is None:
        return MIN_RANDOM_BYTES
    return Precision.parse(precision).width


def check_length(n, minimum=MIN_RANDOM_BYTES, maximum=MAX_BYTES):
    """Fail fast unless minimum <= n <= maximum."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise InvalidLength(f"byte count must be an int, got {type(n).__name__}",
                            length=n, minimum=minimum, maximum=maximum)
    if n < minimum or n > maximum:
        raise InvalidLength(f"byte count {n} outside [{minimum}, {maximum}]",
                            length=n, minimum=minimum, maximum=maximum)
    return n
