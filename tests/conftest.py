"""
Pytest configuration and fixtures.

This file provides pytest-specific configuration and fixtures.
For builder helpers, see tests/fixtures/roster_fixtures.py
"""

import pytest

from tests.fixtures.roster_fixtures import PROJECT_YAML, ROSTER_YAML


@pytest.fixture
def roster_file(tmp_path):
    """Write the sample roster to a temporary YAML file."""
    path = tmp_path / "roster.yaml"
    path.write_text(ROSTER_YAML, encoding="utf-8")
    return path


@pytest.fixture
def project_file(tmp_path):
    """Write the sample project to a temporary YAML file."""
    path = tmp_path / "project.yaml"
    path.write_text(PROJECT_YAML, encoding="utf-8")
    return path
