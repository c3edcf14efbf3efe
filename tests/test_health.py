"""Unit tests for health checks."""

import pytest
from core.health import (
    CheckResult,
    HealthChecker,
    Status,
    check_clock,
    check_entropy,
    create_issuer_check,
)
from identifiers import bytesource


class TestChecks:
    """Tests for individual checks."""

    @pytest.mark.asyncio
    async def test_entropy_ok(self):
        """Working urandom is healthy."""
        result = await check_entropy()
        assert result.status == Status.OK

    @pytest.mark.asyncio
    async def test_entropy_zero_bytes(self, monkeypatch):
        """All-zero output fails."""
        monkeypatch.setattr(bytesource.os, "urandom", lambda n: bytes(n))
        result = await check_entropy()
        assert result.status == Status.FAIL

    @pytest.mark.asyncio
    async def test_clock_ok(self):
        """Normal clock is healthy."""
        result = await check_clock()
        assert result.status == Status.OK
        assert result.msg.startswith("t")

    @pytest.mark.asyncio
    async def test_clock_before_epoch(self, monkeypatch):
        """Clock before epoch fails with the error id."""
        monkeypatch.setattr(bytesource, "now_seconds", lambda: -1)
        result = await check_clock()
        assert result.status == Status.FAIL
        assert len(result.msg) == 14

    @pytest.mark.asyncio
    async def test_issuer_ok(self, issuer):
        """Idle issuer is healthy."""
        result = await create_issuer_check(issuer)()
        assert result.status == Status.OK

    @pytest.mark.asyncio
    async def test_issuer_degraded(self, issuer):
        """Mostly rejected requests degrade the issuer."""
        for _ in range(3):
            with pytest.raises(ValueError):
                issuer.issue_random(n_bytes=0)
        result = await create_issuer_check(issuer)()
        assert result.status == Status.DEGRADED


class TestHealthChecker:
    """Tests for HealthChecker aggregation."""

    @pytest.mark.asyncio
    async def test_all_ok(self):
        """All passing checks give a healthy report."""
        checker = HealthChecker()
        checker.register("entropy", check_entropy)
        report = await checker.check()
        assert report.status == Status.OK
        assert report.to_dict()["checks"][0]["name"] == "entropy"

    @pytest.mark.asyncio
    async def test_critical_failure(self):
        """A failing critical check fails the report."""
        async def broken():
            raise RuntimeError("no entropy")

        checker = HealthChecker()
        checker.register("broken", broken, critical=True)
        report = await checker.check()
        assert report.status == Status.FAIL
        assert report.checks[0].msg == "no entropy"

    @pytest.mark.asyncio
    async def test_non_critical_failure_degrades(self):
        """A failing non-critical check only degrades."""
        async def failing():
            return CheckResult("extra", Status.FAIL, "x")

        checker = HealthChecker()
        checker.register("entropy", check_entropy)
        checker.register("extra", failing, critical=False)
        report = await checker.check()
        assert report.status == Status.DEGRADED

    @pytest.mark.asyncio
    async def test_cached(self):
        """Reports are cached for the ttl."""
        checker = HealthChecker(ttl=60)
        checker.register("entropy", check_entropy)
        assert await checker.check() is await checker.check()
