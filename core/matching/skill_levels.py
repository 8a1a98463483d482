#!/usr/bin/env python3
"""
Skill Level Scale - Ordinal proficiency tiers and their numeric weights.

Beginner < Intermediate < Advanced < Expert map to 25 / 50 / 75 / 100.
The weights are the only arithmetic the skill matcher performs on tiers.
"""

from enum import Enum
from typing import Dict, Union


class SkillLevel(str, Enum):
    """Proficiency tier of a skill, ordered from lowest to highest."""
    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"
    EXPERT = "Expert"

    @classmethod
    def _missing_(cls, value):
        # Accept "expert", "EXPERT" etc. Anything else is a caller error.
        if isinstance(value, str):
            for member in cls:
                if member.value.lower() == value.strip().lower():
                    return member
        return None

    @property
    def weight(self) -> int:
        return LEVEL_WEIGHTS[self]


LEVEL_WEIGHTS: Dict[SkillLevel, int] = {
    SkillLevel.BEGINNER: 25,
    SkillLevel.INTERMEDIATE: 50,
    SkillLevel.ADVANCED: 75,
    SkillLevel.EXPERT: 100,
}


def weight_of(level: Union[SkillLevel, str]) -> int:
    """
    Return the numeric weight of a skill tier.

    Raises:
        ValueError: if ``level`` is not one of the four tiers.
    """
    return LEVEL_WEIGHTS[SkillLevel(level)]
