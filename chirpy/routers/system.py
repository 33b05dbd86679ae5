"""
System routes
  GET /api/healthz   readiness check
  GET /api/metrics   hit count as plain text
"""

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from ..dependencies import get_hit_counter
from ..metrics import HitCounter

router = APIRouter(prefix="/api", tags=["System"])


@router.get("/healthz", response_class=PlainTextResponse, summary="Readiness check")
async def handler_readiness():
    """Returns 200 OK if the server is running."""
    return "OK"


@router.get("/metrics", response_class=PlainTextResponse)
async def handler_metrics_text(counter: HitCounter = Depends(get_hit_counter)):
    return f"Hits: {counter.load()}"
