"""
Health check routes for the gateway
"""

import time
from datetime import datetime, timezone
from typing import Optional

from fastapi import APIRouter

from gateway.models.routing import HealthResponse

router = APIRouter()


def rfc3339_nano(ns: Optional[int] = None) -> str:
    """
    Format a UTC timestamp in RFC 3339 with nanosecond precision

    Trailing zeros of the fraction are dropped, and the fraction is left
    out entirely on a whole second.
    """
    if ns is None:
        ns = time.time_ns()
    seconds, nanos = divmod(ns, 1_000_000_000)
    stamp = datetime.fromtimestamp(seconds, tz=timezone.utc).strftime("%Y-%m-%dT%H:%M:%S")
    fraction = f"{nanos:09d}".rstrip("0")
    if fraction:
        stamp = f"{stamp}.{fraction}"
    return f"{stamp}Z"


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Health check endpoint"""
    return HealthResponse(status="ok", time=rfc3339_nano())
