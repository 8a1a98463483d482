#!/usr/bin/env python3
"""
Match service - runs the matching engine for API requests.
"""

import logging
from typing import List, Sequence

from core.config_loader import AppConfig
from core.matching import MatchingService, Worker, score_band, summarize
from core.roster import load_roster
from ..models.requests import MatchRequest
from ..models.responses import MatchesResponse, MatchSummaryStats, RankedCandidate
from ..exceptions import InvalidWorkerException, RosterUnavailableException

logger = logging.getLogger(__name__)


class MatchService:
    """Service for ranking candidates against a project's skill profile."""

    def __init__(self, config: AppConfig):
        self.config = config
        self.engine = MatchingService(config.matching.scorer)

    def _resolve_workers(self, request: MatchRequest) -> Sequence[Worker]:
        if request.workers is not None:
            try:
                return [w.to_domain() for w in request.workers]
            except ValueError as e:
                raise InvalidWorkerException(str(e)) from e
        if not self.config.roster_file:
            raise RosterUnavailableException(
                "Request has no workers and no roster_file is configured"
            )
        # Read per request: the roster snapshot is never cached between calls
        return load_roster(self.config.roster_file)

    def match(self, request: MatchRequest) -> MatchesResponse:
        """
        Rank the request's (or the configured) roster.

        Returns:
            MatchesResponse with one ranked entry per worker.
        """
        requirements = [r.to_domain() for r in request.required_skills]
        workers = self._resolve_workers(request)

        ranked = self.engine.rank(requirements, workers)
        bands = self.config.matching.bands

        results: List[RankedCandidate] = [
            RankedCandidate(
                rank=idx + 1,
                worker_id=r.worker_id,
                match_score=r.match_score,
                skill_match_percent=r.skill_match_percent,
                band=score_band(r.match_score, bands).value,
                availability=r.availability.value,
                workload=r.workload_percent,
                skill_utilization=r.skill_utilization_percent,
            )
            for idx, r in enumerate(ranked)
        ]

        return MatchesResponse(
            success=True,
            count=len(results),
            results=results,
            summary=MatchSummaryStats(**summarize(ranked, bands)),
        )
