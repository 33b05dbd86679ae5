"""
FastAPI dependencies resolving per-app state
"""

from fastapi import Request

from .config import Settings
from .metrics import HitCounter


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_hit_counter(request: Request) -> HitCounter:
    return request.app.state.fileserver_hits


def get_queries(request: Request):
    """Return the active query backend (ChirpyQueries or MemoryQueries)"""
    return request.app.state.queries
