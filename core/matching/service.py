#!/usr/bin/env python3
"""
Matching Service - Score and rank a worker roster against a project.

Pipeline per worker:
- Skill coverage: weighted fraction of required skills the worker covers
- Adjustments: availability bonus and workload term
- Match score: bounded composite of the above

The service is stateless: roster and requirements are passed into every
call, inputs are never mutated, and identical inputs give identical,
identically ordered output.
"""

from typing import List, Optional, Sequence
import logging

from core.config_loader import ScorerConfig
from core.matching.exceptions import InvalidRequirementsError
from core.matching.models import MatchResult, Project, SkillRequirement, Worker
from core.matching import coverage, match_score
from core.matching.ranking import rank_results
from core.utils import clamp_percent

logger = logging.getLogger(__name__)


def validate_requirements(
    requirements: Sequence[SkillRequirement],
    allow_empty: bool = False
) -> None:
    """
    Reject requirement lists the engine will not score.

    Raises:
        InvalidRequirementsError: empty list (unless allow_empty) or a
            requirement that is not a SkillRequirement
    """
    if not requirements and not allow_empty:
        raise InvalidRequirementsError("At least one required skill must be specified")
    for req in requirements:
        if not isinstance(req, SkillRequirement):
            raise InvalidRequirementsError(f"Invalid requirement entry: {req!r}")


class MatchingService:
    """
    Scores workers against a requirement list and ranks them.

    Every worker in the snapshot receives exactly one MatchResult.
    """

    def __init__(self, config: Optional[ScorerConfig] = None):
        self.config = match_score.sanitize_config(config or ScorerConfig())

    def score_worker(
        self,
        requirements: Sequence[SkillRequirement],
        worker: Worker
    ) -> MatchResult:
        """Calculate the MatchResult of one worker."""
        skill_coverage = coverage.calculate_skill_coverage(requirements, worker)

        workload = clamp_percent("workload_percent", worker.workload_percent)
        utilization = clamp_percent("skill_utilization_percent", worker.skill_utilization_percent)

        score, components = match_score.calculate_match_score(
            skill_match_percent=skill_coverage.skill_match_percent,
            availability=worker.availability,
            workload_percent=workload,
            config=self.config
        )
        components["matched_weight"] = skill_coverage.matched_weight
        components["total_required_weight"] = skill_coverage.total_required_weight

        logger.debug(
            f"Worker {worker.worker_id}: skill={skill_coverage.skill_match_percent}%, "
            f"score={score}"
        )

        return MatchResult(
            worker_id=worker.worker_id,
            match_score=score,
            skill_match_percent=skill_coverage.skill_match_percent,
            availability=worker.availability,
            workload_percent=workload,
            skill_utilization_percent=utilization,
            components=components,
        )

    def rank(
        self,
        requirements: Sequence[SkillRequirement],
        workers: Sequence[Worker]
    ) -> List[MatchResult]:
        """
        Score every worker and rank them.

        Args:
            requirements: Project's required skills
            workers: Roster snapshot; may be empty

        Returns:
            One MatchResult per worker, sorted by match_score (highest first),
            equal scores in roster order

        Raises:
            InvalidRequirementsError: if the requirement list is rejected
        """
        requirements = tuple(requirements)
        validate_requirements(requirements, allow_empty=self.config.allow_empty_requirements)

        # Score everything before returning anything: a failure aborts the whole request.
        results = [self.score_worker(requirements, worker) for worker in workers]
        ranked = rank_results(results)

        logger.info(
            f"Ranked {len(ranked)} workers against {len(requirements)} requirement(s)"
            + (f", top: {ranked[0].worker_id} ({ranked[0].match_score})" if ranked else "")
        )
        return ranked


def rank_workers(
    requirements: Sequence[SkillRequirement],
    workers: Sequence[Worker],
    config: Optional[ScorerConfig] = None
) -> List[MatchResult]:
    """Score and rank a roster against a requirement list."""
    return MatchingService(config).rank(requirements, workers)


def match_project(
    project: Project,
    workers: Sequence[Worker],
    config: Optional[ScorerConfig] = None
) -> List[MatchResult]:
    """Score and rank a roster against a project's required skills."""
    return rank_workers(project.required_skills, workers, config)
