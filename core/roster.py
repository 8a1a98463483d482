#!/usr/bin/env python3
"""
Roster Loading - Build validated worker and project records from files.

Files are YAML; JSON documents load too since YAML is a superset. A roster
file is either a list of workers or a mapping with a ``workers`` key:

    workers:
      - id: EMP001
        availability: Available
        workload: 30
        skill_utilization: 82
        skills:
          - {name: React, level: Expert, proficiency: 92, years_exp: 4}

A project file holds the project fields plus ``required_skills``:

    name: Analytics Revamp
    required_skills:
      - {name: Python, level: Advanced}
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Union

import yaml

from core.matching.exceptions import RosterError
from core.matching.models import Project, SkillRequirement, Worker, WorkerSkill

logger = logging.getLogger(__name__)


def _field(data: Dict[str, Any], *names: str) -> Any:
    """Return the first present key among names; a missing field is an error."""
    for name in names:
        if name in data:
            return data[name]
    raise RosterError(f"Missing field {names[0]!r} in {data!r}")


def worker_skill_from_dict(data: Dict[str, Any]) -> WorkerSkill:
    return WorkerSkill(
        skill_name=_field(data, "name", "skill_name"),
        level=_field(data, "level"),
        proficiency_score=_field(data, "proficiency", "proficiency_score"),
        years_experience=_field(data, "years_exp", "years_experience"),
    )


def worker_from_dict(data: Dict[str, Any]) -> Worker:
    """Build a Worker from a roster entry."""
    if not isinstance(data, dict):
        raise RosterError(f"Worker entry must be a mapping, got {data!r}")
    try:
        skills = tuple(worker_skill_from_dict(s) for s in data.get("skills") or [])
        return Worker(
            worker_id=_field(data, "id", "worker_id"),
            availability=_field(data, "availability"),
            workload_percent=_field(data, "workload", "workload_percent"),
            skill_utilization_percent=_field(data, "skill_utilization", "skill_utilization_percent"),
            skills=skills,
        )
    except (ValueError, TypeError) as e:
        raise RosterError(f"Invalid worker entry {data.get('id', '?')!r}: {e}") from e


def requirement_from_dict(data: Dict[str, Any]) -> SkillRequirement:
    if not isinstance(data, dict):
        raise RosterError(f"Requirement entry must be a mapping, got {data!r}")
    try:
        return SkillRequirement(
            skill_name=_field(data, "name", "skill_name"),
            required_level=_field(data, "level", "required_level"),
        )
    except ValueError as e:
        raise RosterError(f"Invalid requirement {data!r}: {e}") from e


def project_from_dict(data: Dict[str, Any]) -> Project:
    """Build a Project from a mapping."""
    if not isinstance(data, dict):
        raise RosterError(f"Project must be a mapping, got {data!r}")
    requirements = tuple(requirement_from_dict(r) for r in data.get("required_skills") or [])
    try:
        return Project(
            name=str(data.get("name", "")),
            description=str(data.get("description", "")),
            deadline=str(data.get("deadline", "")),
            priority=data.get("priority", "Medium"),
            category=str(data.get("category", "Web Application")),
            required_skills=requirements,
        )
    except ValueError as e:
        raise RosterError(f"Invalid project {data.get('name')!r}: {e}") from e


def _read_yaml(path: Union[str, Path]) -> Any:
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f)
    except OSError as e:
        raise RosterError(f"Could not read {path}: {e}") from e
    except yaml.YAMLError as e:
        raise RosterError(f"Could not parse {path}: {e}") from e


def load_roster(path: Union[str, Path]) -> List[Worker]:
    """
    Load a worker roster snapshot.

    Raises:
        RosterError: if the file is unreadable or any entry is malformed
    """
    data = _read_yaml(path)
    if isinstance(data, dict):
        data = data.get("workers")
    if data is None:
        data = []
    if not isinstance(data, list):
        raise RosterError(f"Roster {path} must contain a list of workers")

    workers = [worker_from_dict(entry) for entry in data]
    logger.info(f"Loaded {len(workers)} workers from {path}")
    return workers


def load_project(path: Union[str, Path]) -> Project:
    """
    Load a project definition.

    Raises:
        RosterError: if the file is unreadable or the project is malformed
    """
    project = project_from_dict(_read_yaml(path))
    logger.info(f"Loaded project {project.name!r} with {len(project.required_skills)} required skill(s)")
    return project
