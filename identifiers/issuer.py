import time
from config import load_config
from core.errors import BaseShortIdError
from identifiers.encoder import encoded_length
from identifiers.limits import Precision
from identifiers.shortid import ShortId, ordered_available
from internal.logging import get_logger

class IssueKind:
    RANDOM = "random"
    ORDERED = "ordered"

class Batch:
    __slots__ = ("kind", "ids", "n_bytes", "precision")

    def __init__(self, kind, ids, n_bytes, precision=None):
        self.kind = kind
        self.ids = ids
        self.n_bytes = n_bytes
        self.precision = precision

    def to_dict(self):
        out = {
            "kind": self.kind,
            "bytes": self.n_bytes,
            "length": encoded_length(self.n_bytes),
            "ids": [i.as_str() for i in self.ids],
        }
        if self.precision is not None:
            out["precision"] = self.precision.value
        return out

class IdIssuer:
    """Hands out batches of ids and counts them. Ids themselves are never kept."""

    def __init__(self, config=None):
        self.config = config or load_config().ids
        self._log = get_logger()
        self.started_at = time.time()
        self.issued = {IssueKind.RANDOM: 0, IssueKind.ORDERED: 0}
        self.rejected = {IssueKind.RANDOM: 0, IssueKind.ORDERED: 0}
        self.last_error = None

    def check_count(self, count):
        if count < 1 or count > self.config.max_batch:
            raise ValueError(f"count must be in [1, {self.config.max_batch}], got {count}")

    def issue_random(self, n_bytes=None, count=1):
        self.check_count(count)
        n_bytes = self.config.default_bytes if n_bytes is None else n_bytes
        try:
            ids = [ShortId.random_with_bytes(n_bytes) for _ in range(count)]
        except BaseShortIdError as exc:
            self._record_failure(IssueKind.RANDOM, exc)
            raise
        self.issued[IssueKind.RANDOM] += count
        return Batch(IssueKind.RANDOM, ids, n_bytes)

    def issue_ordered(self, n_bytes=None, count=1, precision=None):
        self.check_count(count)
        n_bytes = self.config.default_bytes if n_bytes is None else n_bytes
        precision = Precision.parse(precision) if precision is not None else self.config.precision
        try:
            ids = [ShortId.ordered_with_bytes(n_bytes, precision) for _ in range(count)]
        except BaseShortIdError as exc:
            self._record_failure(IssueKind.ORDERED, exc)
            raise
        self.issued[IssueKind.ORDERED] += count
        return Batch(IssueKind.ORDERED, ids, n_bytes, precision)

    def _record_failure(self, kind, exc):
        self.rejected[kind] += 1
        self.last_error = exc.to_dict()
        self._log.warn("Id request rejected", error=exc, kind=kind, error_id=exc.error_id)

    def get_stats(self):
        return {
            "issued": dict(self.issued),
            "rejected": dict(self.rejected),
            "total_issued": sum(self.issued.values()),
            "total_rejected": sum(self.rejected.values()),
            "ordered_available": ordered_available(),
            "uptime_s": round(time.time() - self.started_at, 1),
            "last_error": self.last_error,
        }
