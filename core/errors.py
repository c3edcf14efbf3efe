"""Custom errors with tracking IDs."""

import os

from identifiers.encoder import encode
from utils.timestamp import format_timestamp

_ERROR_ID_BYTES = 10


class BaseShortIdError(Exception):
    """Base error with unique ID and timestamp for tracking."""

    def __init__(self, message, context=None):
        super().__init__(message)
        self.error_id = encode(os.urandom(_ERROR_ID_BYTES))
        self.timestamp = format_timestamp()
        self.context = context or {}

    def __str__(self):
        return f"[{self.error_id}] {super().__str__()}"

    def to_dict(self):
        return {
            "error_id": self.error_id,
            "timestamp": self.timestamp,
            "type": type(self).__name__,
            "msg": self.args[0] if self.args else "",
            "context": self.context,
        }


class InvalidLength(BaseShortIdError, ValueError):
    """Byte count outside the accepted bounds. A caller bug, never retried."""

    def __init__(self, message, length=None, minimum=None, maximum=None, **kwargs):
        context = kwargs.pop("context", {})
        context.update({"length": length, "minimum": minimum, "maximum": maximum})
        super().__init__(message, context=context, **kwargs)
        self.length = length
        self.minimum = minimum
        self.maximum = maximum


class ClockError(BaseShortIdError, RuntimeError):
    """System clock reports a time before the Unix epoch."""

    def __init__(self, message, offset=None, **kwargs):
        context = kwargs.pop("context", {})
        if offset is not None:
            context["offset"] = offset
        super().__init__(message, context=context, **kwargs)
        self.offset = offset


class OrderedUnavailable(BaseShortIdError, RuntimeError):
    """Time-ordered generation is switched off in this process."""
