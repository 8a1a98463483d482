#!/usr/bin/env python3
"""
Request models for API endpoints.
"""

from pydantic import BaseModel, Field, field_validator
from typing import List, Optional

from core.matching.models import (
    AvailabilityState,
    SkillRequirement,
    Worker,
    WorkerSkill,
)
from core.matching.skill_levels import SkillLevel


class RequiredSkillIn(BaseModel):
    """A skill the project requires."""
    name: str = Field(..., description="Skill name, matched case-insensitively")
    level: SkillLevel = Field(..., description="Beginner, Intermediate, Advanced or Expert")

    @field_validator("level", mode="before")
    @classmethod
    def _parse_level(cls, value):
        return SkillLevel(value)

    def to_domain(self) -> SkillRequirement:
        return SkillRequirement(self.name, self.level)


class WorkerSkillIn(BaseModel):
    """A skill declared by a worker."""
    name: str
    level: SkillLevel
    proficiency: int = Field(ge=0, le=100)
    years_exp: int = Field(ge=0)

    @field_validator("level", mode="before")
    @classmethod
    def _parse_level(cls, value):
        return SkillLevel(value)


class WorkerIn(BaseModel):
    """Worker snapshot supplied with a match request."""
    id: str = Field(..., min_length=1)
    availability: AvailabilityState
    workload: int = Field(..., description="Current workload percent; clamped to 0-100")
    skill_utilization: int = Field(..., description="Informational, passed through")
    skills: List[WorkerSkillIn] = Field(default_factory=list)

    @field_validator("availability", mode="before")
    @classmethod
    def _parse_availability(cls, value):
        return AvailabilityState(value)

    def to_domain(self) -> Worker:
        return Worker(
            worker_id=self.id,
            availability=self.availability,
            workload_percent=self.workload,
            skill_utilization_percent=self.skill_utilization,
            skills=tuple(
                WorkerSkill(s.name, s.level, s.proficiency, s.years_exp)
                for s in self.skills
            ),
        )


class MatchRequest(BaseModel):
    """Request to rank workers against a set of required skills."""
    required_skills: List[RequiredSkillIn] = Field(default_factory=list)
    workers: Optional[List[WorkerIn]] = Field(
        None,
        description="Roster snapshot; omit to use the configured roster file"
    )
