"""Identifier generation routes."""

from typing import Optional

from fastapi import APIRouter, HTTPException, Query

router = APIRouter(prefix="/api/v1/ids", tags=["ids"])
ordered_router = APIRouter(prefix="/api/v1/ids", tags=["ids"])

# Set by app.py
_issuer = None


def init(issuer):
    """Initialize with the issuer reference."""
    global _issuer
    _issuer = issuer


def _batch_count(count):
    try:
        _issuer.check_count(count)
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc))
    return count


@router.get("")
async def random_ids(n_bytes: Optional[int] = Query(None, alias="bytes"), count: int = 1):
    """Random ids, 14 characters unless bytes is given."""
    batch = _issuer.issue_random(n_bytes, _batch_count(count))
    return batch.to_dict()


@ordered_router.get("/ordered")
async def ordered_ids(n_bytes: Optional[int] = Query(None, alias="bytes"), count: int = 1,
                      precision: Optional[str] = None):
    """Time-ordered ids. Only mounted when ordered ids are enabled."""
    if precision is not None and precision.lower() not in ("seconds", "microseconds"):
        raise HTTPException(status_code=422, detail=f"unknown precision: {precision}")
    batch = _issuer.issue_ordered(n_bytes, _batch_count(count), precision)
    return batch.to_dict()
