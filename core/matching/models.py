#!/usr/bin/env python3
"""
Matching Models - Request-scoped records consumed and produced by the engine.

Records validate themselves on construction so that malformed input is
rejected before any scoring starts.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from core.matching.exceptions import InvalidRequirementsError
from core.matching.skill_levels import SkillLevel
from core.utils import normalize_skill_name


class AvailabilityState(str, Enum):
    """Current availability of a worker."""
    AVAILABLE = "Available"
    BUSY = "Busy"
    ON_LEAVE = "On Leave"

    @classmethod
    def _missing_(cls, value):
        # "OnLeave", "on leave" and "ON_LEAVE" all name the same state
        if isinstance(value, str):
            key = value.replace(" ", "").replace("_", "").lower()
            for member in cls:
                if member.value.replace(" ", "").lower() == key:
                    return member
        return None


class ProjectPriority(str, Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    CRITICAL = "Critical"


class ScoreBand(str, Enum):
    """Badge tier shown next to a match score."""
    STRONG = "strong"
    PARTIAL = "partial"
    WEAK = "weak"


def _require_name(kind: str, value: Any) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"{kind} must be a non-empty string, got {value!r}")
    return value


def _require_int(name: str, value: Any, lo: Optional[int] = None, hi: Optional[int] = None) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    if lo is not None and value < lo:
        raise ValueError(f"{name} must be >= {lo}, got {value}")
    if hi is not None and value > hi:
        raise ValueError(f"{name} must be <= {hi}, got {value}")
    return value


@dataclass(frozen=True)
class SkillRequirement:
    """A skill a project needs, at a minimum tier."""
    skill_name: str
    required_level: SkillLevel

    def __post_init__(self):
        if not isinstance(self.skill_name, str) or not self.skill_name.strip():
            raise InvalidRequirementsError(
                f"Requirement skill name must be a non-empty string, got {self.skill_name!r}"
            )
        object.__setattr__(self, "required_level", SkillLevel(self.required_level))

    @property
    def key(self) -> str:
        return normalize_skill_name(self.skill_name)


@dataclass(frozen=True)
class WorkerSkill:
    """A skill declared by a worker."""
    skill_name: str
    level: SkillLevel
    proficiency_score: int
    years_experience: int

    def __post_init__(self):
        _require_name("Worker skill name", self.skill_name)
        object.__setattr__(self, "level", SkillLevel(self.level))
        _require_int("proficiency_score", self.proficiency_score, 0, 100)
        _require_int("years_experience", self.years_experience, 0)

    @property
    def key(self) -> str:
        return normalize_skill_name(self.skill_name)


@dataclass(frozen=True)
class Worker:
    """
    Snapshot of a candidate worker.

    workload_percent and skill_utilization_percent are accepted as given;
    the scorer clamps them into [0, 100] before use.
    """
    worker_id: str
    availability: AvailabilityState
    workload_percent: int
    skill_utilization_percent: int
    skills: Tuple[WorkerSkill, ...] = ()

    def __post_init__(self):
        _require_name("worker_id", self.worker_id)
        object.__setattr__(self, "availability", AvailabilityState(self.availability))
        _require_int("workload_percent", self.workload_percent)
        _require_int("skill_utilization_percent", self.skill_utilization_percent)

        skills = tuple(self.skills)
        seen = set()
        for skill in skills:
            if not isinstance(skill, WorkerSkill):
                raise TypeError(f"Worker {self.worker_id} has a non-WorkerSkill entry: {skill!r}")
            if skill.key in seen:
                raise ValueError(f"Worker {self.worker_id} declares skill {skill.skill_name!r} twice")
            seen.add(skill.key)
        object.__setattr__(self, "skills", skills)

    def find_skill(self, skill_name: str) -> Optional[WorkerSkill]:
        """Case-insensitive exact lookup of a declared skill."""
        key = normalize_skill_name(skill_name)
        for skill in self.skills:
            if skill.key == key:
                return skill
        return None


@dataclass(frozen=True)
class MatchResult:
    """Scored match of one worker against one requirement list."""
    worker_id: str
    match_score: int
    skill_match_percent: int
    availability: AvailabilityState
    workload_percent: int
    skill_utilization_percent: int
    components: Dict[str, Any] = field(default_factory=dict, hash=False)


@dataclass(frozen=True)
class Project:
    """Project a team is being staffed for."""
    name: str
    required_skills: Tuple[SkillRequirement, ...]
    description: str = ""
    deadline: str = ""
    priority: ProjectPriority = ProjectPriority.MEDIUM
    category: str = "Web Application"

    def __post_init__(self):
        object.__setattr__(self, "required_skills", tuple(self.required_skills))
        object.__setattr__(self, "priority", ProjectPriority(self.priority))


def validate_project(project: Project) -> Dict[str, str]:
    """
    Check a project the way the project creation form does.

    Returns:
        Mapping of field name to error message; empty when the project is valid.
    """
    errors: Dict[str, str] = {}
    if not project.name.strip():
        errors["name"] = "Project name is required"
    if not project.description.strip():
        errors["description"] = "Description is required"
    if not project.deadline.strip():
        errors["deadline"] = "Deadline is required"
    if not project.required_skills:
        errors["skills"] = "At least one required skill must be specified"
    return errors

