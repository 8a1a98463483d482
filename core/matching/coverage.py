#!/usr/bin/env python3
"""
Skill Coverage - How much of a project's required skill weight a worker covers.

Each requirement contributes min(worker tier weight, required tier weight),
so exceeding a required tier earns nothing extra and a missing skill can't be
offset by over-qualification elsewhere.
"""

from dataclasses import dataclass
from typing import Sequence
import logging

from core.matching.models import SkillRequirement, Worker
from core.matching.skill_levels import weight_of
from core.utils import round_half_up

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SkillCoverage:
    matched_weight: int
    total_required_weight: int
    skill_match_percent: int


def calculate_skill_coverage(
    requirements: Sequence[SkillRequirement],
    worker: Worker
) -> SkillCoverage:
    """
    Calculate the skill match percent of one worker.

    Duplicate requirements are each counted; de-duplicating is up to the caller.

    Returns:
        SkillCoverage with skill_match_percent in [0, 100] (0 when there is no
        required weight at all)
    """
    total_required_weight = 0
    matched_weight = 0

    for req in requirements:
        required_weight = weight_of(req.required_level)
        total_required_weight += required_weight

        skill = worker.find_skill(req.skill_name)
        if skill is not None:
            matched_weight += min(weight_of(skill.level), required_weight)

    if total_required_weight > 0:
        skill_match_percent = round_half_up(matched_weight / total_required_weight * 100)
    else:
        skill_match_percent = 0

    return SkillCoverage(
        matched_weight=matched_weight,
        total_required_weight=total_required_weight,
        skill_match_percent=skill_match_percent,
    )
