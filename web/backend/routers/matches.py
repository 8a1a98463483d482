#!/usr/bin/env python3
"""
Match endpoints - rank candidates for a project's required skills.
"""

import logging
from fastapi import APIRouter, Depends

from ..dependencies import get_match_service
from ..services.match_service import MatchService
from ..models.requests import MatchRequest
from ..models.responses import MatchesResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/matches", tags=["matches"])


@router.post("", response_model=MatchesResponse)
def rank_candidates(
    request: MatchRequest,
    service: MatchService = Depends(get_match_service)
):
    """
    Rank workers against the required skills.

    Every worker in the snapshot gets exactly one entry, sorted by match
    score (highest first); equal scores keep roster order.
    """
    return service.match(request)
