#!/usr/bin/env python3
"""
Match Score - Composite [0, 100] score of one worker.

    match_score = clamp(0, 100, round(skill_match_percent * skill_weight
                                      + availability_bonus
                                      + workload_term))

Rounding is half-up and happens at three stages, in this order:
skill_match_percent, workload_penalty, final score. With the default weights
a perfect candidate lands exactly on 100, so the clamp only matters for
custom configurations.
"""

from typing import Any, Dict, Tuple
import logging

from core.config_loader import ScorerConfig
from core.matching.adjustments import calculate_availability_bonus, calculate_workload_term
from core.matching.models import AvailabilityState
from core.utils import clamp, round_half_up

logger = logging.getLogger(__name__)

MIN_SCORE = 0
MAX_SCORE = 100


def _warn_correct(name: str, old: Any, new: Any) -> None:
    if old != new:
        logger.warning("Corrected %s from %r to %r", name, old, new)


def _nonneg(name: str, x: float) -> float:
    y = max(0.0, float(x))
    _warn_correct(name, x, y)
    return y


def sanitize_config(config: ScorerConfig) -> ScorerConfig:
    """Return a copy of config with negative weights and bonuses corrected to 0."""
    return config.model_copy(update={
        "skill_weight": _nonneg("skill_weight", config.skill_weight),
        "workload_penalty_rate": _nonneg("workload_penalty_rate", config.workload_penalty_rate),
        "workload_weight": _nonneg("workload_weight", config.workload_weight),
        "availability_bonus": {
            state: _nonneg(f"availability_bonus[{state}]", bonus)
            for state, bonus in config.availability_bonus.items()
        },
    })


def calculate_match_score(
    skill_match_percent: int,
    availability: AvailabilityState,
    workload_percent: int,
    config: ScorerConfig
) -> Tuple[int, Dict[str, Any]]:
    """
    Blend skill fit, availability and workload into one score.

    Args:
        skill_match_percent: Output of the skill coverage step (0-100)
        availability: Worker availability state
        workload_percent: Worker workload; clamped to [0, 100]
        config: ScorerConfig with weight settings

    Returns: (match_score, components)
    """
    availability_bonus = calculate_availability_bonus(availability, config)
    workload_term, workload_penalty = calculate_workload_term(workload_percent, config)

    raw_score = skill_match_percent * config.skill_weight + availability_bonus + workload_term
    match_score = int(clamp(round_half_up(raw_score), MIN_SCORE, MAX_SCORE))

    components: Dict[str, Any] = {
        "skill_match_percent": skill_match_percent,
        "skill_points": skill_match_percent * config.skill_weight,
        "availability_bonus": availability_bonus,
        "workload_penalty": workload_penalty,
        "workload_term": workload_term,
        "raw_score": raw_score,
        "match_score": match_score,
    }

    logger.debug(
        "Match score %d (skill=%d%%, avail_bonus=%.1f, workload_term=%.1f)",
        match_score, skill_match_percent, availability_bonus, workload_term
    )

    return match_score, components
