#!/usr/bin/env python3
"""
Availability & Workload Adjustments - Score terms independent of skill fit.

- Availability bonus: fixed lookup per availability state.
- Workload term: (100 - round(workload * rate)) * weight, shrinking as the
  worker's current workload grows.
"""

from typing import Tuple
import logging

from core.config_loader import ScorerConfig
from core.matching.models import AvailabilityState
from core.utils import clamp_percent, round_half_up

logger = logging.getLogger(__name__)


def calculate_availability_bonus(availability: AvailabilityState, config: ScorerConfig) -> float:
    """Bonus for the worker's availability (20 / 5 / 0 by default)."""
    state = AvailabilityState(availability)
    return config.availability_bonus[state.value]


def calculate_workload_term(workload_percent: int, config: ScorerConfig) -> Tuple[float, int]:
    """
    Calculate the workload term.

    workload_percent is clamped to [0, 100] first, which keeps the term in
    [14, 20] under the default rate and weight.

    Returns: (workload_term, workload_penalty)
    """
    workload = clamp_percent("workload_percent", workload_percent)
    workload_penalty = round_half_up(workload * config.workload_penalty_rate)
    workload_term = (100 - workload_penalty) * config.workload_weight
    return workload_term, workload_penalty
