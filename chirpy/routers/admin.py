"""
Admin routes for the file server hit counter
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import HTMLResponse, PlainTextResponse

from ..config import Settings
from ..dependencies import get_hit_counter, get_queries, get_settings
from ..metrics import HitCounter

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin", tags=["Admin"])

METRICS_TEMPLATE = """<html>
  <body>
    <h1>Welcome, Chirpy Admin</h1>
    <p>Chirpy has been visited {hits} times!</p>
  </body>
</html>"""


@router.get("/metrics", response_class=HTMLResponse)
async def handler_metrics(counter: HitCounter = Depends(get_hit_counter)):
    """HTML page with the number of requests served under /app/"""
    return METRICS_TEMPLATE.format(hits=counter.load())


@router.post("/reset", response_class=PlainTextResponse)
async def handler_reset(
    counter: HitCounter = Depends(get_hit_counter),
    settings: Settings = Depends(get_settings),
    queries=Depends(get_queries),
):
    """
    Reset the hit counter to zero.

    On the dev platform all users (and with them their chirps) are deleted too.
    """
    counter.store(0)
    logger.info("File server hit counter reset")

    if settings.is_dev:
        try:
            deleted = await queries.delete_all_users()
            logger.info(f"Deleted {deleted} users (platform={settings.platform})")
        except Exception as e:
            logger.error(
                f"Error deleting users: {type(e).__name__}: {e}", exc_info=True
            )
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Couldn't reset users",
            )

    return "OK"
