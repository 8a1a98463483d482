#!/usr/bin/env python3
"""
FastAPI dependencies for dependency injection.
"""

from .config import get_config
from .services.match_service import MatchService


def get_match_service() -> MatchService:
    """
    FastAPI dependency that provides a MatchService.

    Usage:
        @app.post("/endpoint")
        def my_endpoint(service: MatchService = Depends(get_match_service)):
            ...
    """
    return MatchService(get_config())
