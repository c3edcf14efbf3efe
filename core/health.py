import asyncio
import time
from enum import Enum
from core.errors import ClockError
from identifiers.bytesource import generate_random, read_clock
from identifiers.limits import Precision
from utils.timestamp import format_timestamp

class Status(Enum):
    OK = "healthy"
    DEGRADED = "degraded"
    FAIL = "unhealthy"

class CheckResult:
    __slots__ = ("name", "status", "msg")

    def __init__(self, name, status, msg=""):
        self.name = name
        self.status = status
        self.msg = msg

    def to_dict(self):
        return {"name": self.name,
                "status": self.status.value,
                "msg": self.msg}

class HealthReport:
    __slots__ = ("status", "checks", "uptime", "timestamp")

    def __init__(self, status, checks, uptime=0):
        self.status = status
        self.checks = checks
        self.uptime = uptime
        self.timestamp = format_timestamp()

    def to_dict(self):
        return {"status": self.status.value,
                "timestamp": self.timestamp,
                "uptime": round(self.uptime, 1),
                "checks": [check.to_dict() for check in self.checks]}

class HealthChecker:
    def __init__(self, ttl=1.0):
        self._checks = {}
        self._cache = None
        self._cache_time = 0
        self._ttl = ttl
        self._start_time = time.time()

    def register(self, name, check_fn, critical=True):
        self._checks[name] = (check_fn, critical)

    async def check(self):
        now = time.time()
        if self._cache and now - self._cache_time < self._ttl:
            return self._cache

        results = []
        for name, (check_fn, is_critical) in self._checks.items():
            try:
                result = await asyncio.wait_for(check_fn(), timeout=5)
            except asyncio.TimeoutError:
                result = CheckResult(name, Status.FAIL, "timeout")
            except Exception as exc:
                result = CheckResult(name, Status.FAIL, str(exc))
            results.append((result, is_critical))

        status = Status.OK
        for result, is_critical in results:
            if result.status == Status.FAIL and is_critical:
                status = Status.FAIL
            elif result.status != Status.OK and status == Status.OK:
                status = Status.DEGRADED

        self._cache = HealthReport(status, [result for result, _ in results], now - self._start_time)
        self._cache_time = now
        return self._cache

# Checks
async def check_entropy():
    sample = generate_random(16)
    # 16 zero bytes from urandom means the source is broken, not unlucky
    if not any(sample):
        return CheckResult("entropy", Status.FAIL, "zero bytes")
    return CheckResult("entropy", Status.OK)

async def check_clock():
    try:
        offset = read_clock(Precision.SECONDS)
    except ClockError as exc:
        return CheckResult("clock", Status.FAIL, exc.error_id)
    return CheckResult("clock", Status.OK, f"t{offset}")

def create_issuer_check(issuer, threshold=0.5):
    async def check():
        stats = issuer.get_stats()
        total = stats["total_issued"] + stats["total_rejected"]

        # Mostly rejected requests point at a misbehaving caller
        if total > 0 and stats["total_rejected"] / total > threshold:
            return CheckResult("issuer", Status.DEGRADED, "rejections")

        return CheckResult("issuer", Status.OK, f"{stats['total_issued']}ids")
    return check
