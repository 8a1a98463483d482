#!/usr/bin/env python3
"""
Matching Module - Rank workers against a project's required skills.

Public API:
- rank_workers / match_project: score and rank a roster snapshot
- MatchingService: the same, bound to a ScorerConfig
- MatchResult: one scored worker

Modules, leaf-first:

- skill_levels.py: Skill tiers and their weights
- models.py: Requirement, worker, project and result records
- coverage.py: Skill match percent of one worker
- adjustments.py: Availability bonus and workload term
- match_score.py: Composite [0, 100] score
- ranking.py: Ordering, score bands and summaries
- service.py: MatchingService orchestrator
"""

from core.matching.exceptions import InvalidRequirementsError, RosterError, ScoringError
from core.matching.models import (
    AvailabilityState,
    MatchResult,
    Project,
    ProjectPriority,
    ScoreBand,
    SkillRequirement,
    Worker,
    WorkerSkill,
    validate_project,
)
from core.matching.ranking import rank_results, score_band, summarize
from core.matching.service import MatchingService, match_project, rank_workers
from core.matching.skill_levels import SkillLevel, weight_of

__all__ = [
    'AvailabilityState',
    'InvalidRequirementsError',
    'MatchResult',
    'MatchingService',
    'Project',
    'ProjectPriority',
    'RosterError',
    'ScoreBand',
    'ScoringError',
    'SkillLevel',
    'SkillRequirement',
    'Worker',
    'WorkerSkill',
    'match_project',
    'rank_results',
    'rank_workers',
    'score_band',
    'summarize',
    'validate_project',
    'weight_of',
]
