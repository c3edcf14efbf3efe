"""API routes for issuer stats."""

from fastapi import APIRouter, Depends

from identifiers.encoder import encoded_length
from identifiers.limits import MAX_BYTES, min_bytes
from utils.timestamp import format_timestamp
from ui.auth import verify_basic_auth

router = APIRouter(prefix="/api/v1", tags=["api"])

# These will be set by app.py
_issuer = None


def init(issuer):
    """Initialize with the issuer reference."""
    global _issuer
    _issuer = issuer


@router.get("/stats")
async def stats(username=Depends(verify_basic_auth)):
    """Return issuer counters and id settings (requires basic auth)."""
    ids_config = _issuer.config
    return {
        "timestamp": format_timestamp(),
        "issuer": _issuer.get_stats(),
        "ids": {
            **ids_config.to_dict(),
            "default_length": encoded_length(ids_config.default_bytes),
            "max_bytes": MAX_BYTES,
            "min_random_bytes": min_bytes(),
            "min_ordered_bytes": min_bytes(ids_config.precision),
        },
    }
