"""Health and observability routes."""

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from core.health import Status
from identifiers.shortid import ordered_available
from utils.timestamp import format_timestamp

router = APIRouter(prefix="/api/v1", tags=["health"])

# These will be set by app.py
_issuer = None
_health_checker = None


def init(issuer, health_checker):
    """Initialize with issuer and health checker references."""
    global _issuer, _health_checker
    _issuer = issuer
    _health_checker = health_checker


@router.get("/health")
async def health():
    """Health check with component status."""
    report = await _health_checker.check()
    status_code = 200 if report.status != Status.FAIL else 503
    return JSONResponse(content=report.to_dict(), status_code=status_code)


@router.get("/heartbeat")
async def heartbeat():
    """Lightweight heartbeat for frequent polling."""
    stats = _issuer.get_stats()
    return {
        "status": "ok",
        "timestamp": format_timestamp(),
        "issued": stats["total_issued"],
        "uptime_s": stats["uptime_s"],
        "ordered": ordered_available(),
    }
