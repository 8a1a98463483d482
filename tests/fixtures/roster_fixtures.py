#!/usr/bin/env python3
"""
Test fixtures for matching tests.

Builders keep the individual tests focused on the field under test.
"""
from core.matching.models import SkillRequirement, Worker, WorkerSkill


def skill(name, level, proficiency=50, years=1):
    return WorkerSkill(name, level, proficiency, years)


def worker(worker_id="EMP001", availability="Available", workload=0, utilization=50, skills=()):
    return Worker(
        worker_id=worker_id,
        availability=availability,
        workload_percent=workload,
        skill_utilization_percent=utilization,
        skills=tuple(skills),
    )


def requirements(*pairs):
    return [SkillRequirement(name, level) for name, level in pairs]


# Python/Advanced + React/Intermediate: total weight 125
PYTHON_REACT = (("Python", "Advanced"), ("React", "Intermediate"))

ROSTER_YAML = """
workers:
  - id: EMP001
    availability: Available
    workload: 30
    skill_utilization: 82
    skills:
      - {name: Python, level: Expert, proficiency: 95, years_exp: 6}
      - {name: React, level: Beginner, proficiency: 38, years_exp: 1}
  - id: EMP002
    availability: On Leave
    workload: 0
    skill_utilization: 60
    skills:
      - {name: Figma, level: Expert, proficiency: 94, years_exp: 6}
"""

PROJECT_YAML = """
name: AI Integration Platform
description: Integrate ML models
deadline: "2026-12-15"
priority: High
category: AI/ML
required_skills:
  - {name: Python, level: Advanced}
  - {name: React, level: Intermediate}
"""
