"""
Short, URL-safe, random or time-ordered IDs.

Random ids are 10 secure random bytes encoded as unpadded base64url, always
14 characters. Ordered ids put a big-endian timestamp in front of the random
bytes so ids from different seconds (or microseconds) start differently.

Ordering caveat: the timestamp prefix makes ids *roughly* chronological, but
base64url character order does not match byte order ('-' and '_' sort before
and after the letters), so string comparison is not a reliable time sort.
"""

from functools import total_ordering

from core.errors import OrderedUnavailable
from identifiers.bytesource import generate_ordered, generate_random
from identifiers.encoder import encode
from identifiers.limits import DEFAULT_BYTES, Precision

_default_precision = Precision.SECONDS
_ordered_enabled = True


def configure(precision=None, ordered_enabled=None):
    """Set the default timestamp precision and whether ordered ids are available."""
    global _default_precision, _ordered_enabled
    if precision is not None:
        _default_precision = Precision.parse(precision)
    if ordered_enabled is not None:
        _ordered_enabled = bool(ordered_enabled)


def default_precision():
    return _default_precision


def ordered_available():
    return _ordered_enabled


def short_id():
    """Generate a 14-character random id."""
    return encode(generate_random(DEFAULT_BYTES))


def short_id_with_bytes(n):
    """Random id built from n bytes (1..32)."""
    return encode(generate_random(n))


def short_id_ordered(precision=None):
    """Generate a 14-character time-ordered id."""
    return short_id_ordered_with_bytes(DEFAULT_BYTES, precision)


def short_id_ordered_with_bytes(n, precision=None):
    """Time-ordered id built from n bytes (timestamp width..32)."""
    if not _ordered_enabled:
        raise OrderedUnavailable("time-ordered ids are disabled")
    return encode(generate_ordered(n, precision or _default_precision))


@total_ordering
class ShortId:
    """A generated id kept distinct from plain strings.

    Wrapping text with ``ShortId(text)`` performs no validation; ids coming
    back from storage or URLs are trusted as-is.
    """

    __slots__ = ("_value",)

    def __init__(self, value):
        if not isinstance(value, str):
            raise TypeError(f"ShortId wraps str, got {type(value).__name__}")
        object.__setattr__(self, "_value", value)

    def __setattr__(self, name, value):
        raise AttributeError("ShortId is immutable")

    @classmethod
    def random(cls):
        return cls(short_id())

    @classmethod
    def random_with_bytes(cls, n):
        return cls(short_id_with_bytes(n))

    @classmethod
    def ordered(cls, precision=None):
        return cls(short_id_ordered(precision))

    @classmethod
    def ordered_with_bytes(cls, n, precision=None):
        return cls(short_id_ordered_with_bytes(n, precision))

    @classmethod
    def from_string(cls, value):
        return cls(value)

    def as_str(self):
        return self._value

    def into_string(self):
        return self._value

    def __str__(self):
        return self._value

    def __repr__(self):
        return f"ShortId({self._value!r})"

    def __len__(self):
        return len(self._value)

    def __hash__(self):
        return hash(self._value)

    def __eq__(self, other):
        if not isinstance(other, ShortId):
            return NotImplemented
        return self._value == other._value

    def __lt__(self, other):
        if not isinstance(other, ShortId):
            return NotImplemented
        return self._value < other._value

    def __reduce__(self):
        return (ShortId, (self._value,))
