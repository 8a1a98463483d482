#!/usr/bin/env python3
"""
Response models for API endpoints.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Dict, List, Optional


class RankedCandidate(BaseModel):
    """One ranked worker."""
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "rank": 1,
                "worker_id": "EMP001",
                "match_score": 86,
                "skill_match_percent": 80,
                "band": "strong",
                "availability": "Available",
                "workload": 30,
                "skill_utilization": 82
            }
        }
    )

    rank: int = Field(ge=1)
    worker_id: str
    match_score: int = Field(ge=0, le=100)
    skill_match_percent: int = Field(ge=0, le=100)
    band: str
    availability: str
    workload: int = Field(ge=0, le=100)
    skill_utilization: int = Field(ge=0, le=100)


class MatchSummaryStats(BaseModel):
    """Summary of a ranked list."""
    candidates: int
    bands: Dict[str, int]
    top_worker_id: Optional[str]
    mean_score: float


class MatchesResponse(BaseModel):
    """Response for a match request."""
    success: bool
    count: int
    results: List[RankedCandidate]
    summary: MatchSummaryStats
