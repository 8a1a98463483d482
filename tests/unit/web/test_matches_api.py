#!/usr/bin/env python3
"""
Unit tests for the match ranking API.
"""

import os
import unittest
from unittest.mock import patch

from fastapi.testclient import TestClient

from core.config_loader import AppConfig
from web.backend.app import app
from web.backend.config import get_config
from web.backend.dependencies import get_match_service
from web.backend.services.match_service import MatchService


STRONG_WORKER = {
    "id": "EMP001",
    "availability": "Available",
    "workload": 30,
    "skill_utilization": 82,
    "skills": [
        {"name": "Python", "level": "Expert", "proficiency": 95, "years_exp": 6},
        {"name": "React", "level": "Beginner", "proficiency": 38, "years_exp": 1},
    ],
}

ABSENT_WORKER = {
    "id": "EMP002",
    "availability": "OnLeave",
    "workload": 0,
    "skill_utilization": 60,
    "skills": [],
}

REQUIRED = [
    {"name": "Python", "level": "Advanced"},
    {"name": "React", "level": "Intermediate"},
]


class MatchesApiTestCase(unittest.TestCase):
    """Base class wiring the API to a test configuration."""

    config = AppConfig()

    def setUp(self):
        app.dependency_overrides[get_match_service] = lambda: MatchService(self.config)
        self.client = TestClient(app)

    def tearDown(self):
        app.dependency_overrides.clear()


class TestRankCandidates(MatchesApiTestCase):

    def test_ranked_results(self):
        response = self.client.post("/api/matches", json={
            "required_skills": REQUIRED,
            "workers": [ABSENT_WORKER, STRONG_WORKER],
        })

        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertTrue(data["success"])
        self.assertEqual(data["count"], 2)

        top, bottom = data["results"]
        self.assertEqual(top["rank"], 1)
        self.assertEqual(top["worker_id"], "EMP001")
        self.assertEqual(top["match_score"], 86)
        self.assertEqual(top["skill_match_percent"], 80)
        self.assertEqual(top["band"], "strong")
        self.assertEqual(top["availability"], "Available")
        self.assertEqual(top["workload"], 30)
        self.assertEqual(top["skill_utilization"], 82)

        self.assertEqual(bottom["rank"], 2)
        self.assertEqual(bottom["match_score"], 20)
        self.assertEqual(bottom["band"], "weak")
        self.assertEqual(bottom["availability"], "On Leave")

        self.assertEqual(data["summary"]["top_worker_id"], "EMP001")
        self.assertEqual(data["summary"]["bands"], {"strong": 1, "partial": 0, "weak": 1})

    def test_empty_worker_list(self):
        response = self.client.post("/api/matches", json={"required_skills": REQUIRED, "workers": []})

        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertEqual(data["count"], 0)
        self.assertEqual(data["results"], [])
        self.assertIsNone(data["summary"]["top_worker_id"])

    def test_empty_requirements_rejected(self):
        response = self.client.post("/api/matches", json={"required_skills": [], "workers": [STRONG_WORKER]})

        self.assertEqual(response.status_code, 400)
        data = response.json()
        self.assertFalse(data["success"])
        self.assertEqual(data["type"], "InvalidRequirementsError")

    def test_blank_skill_name_rejected(self):
        response = self.client.post("/api/matches", json={
            "required_skills": [{"name": "  ", "level": "Expert"}],
            "workers": [STRONG_WORKER],
        })
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["type"], "InvalidRequirementsError")

    def test_unknown_level_is_a_validation_error(self):
        response = self.client.post("/api/matches", json={
            "required_skills": [{"name": "Python", "level": "Guru"}],
            "workers": [STRONG_WORKER],
        })
        self.assertEqual(response.status_code, 422)

    def test_unknown_availability_is_a_validation_error(self):
        worker = dict(STRONG_WORKER, availability="Remote")
        response = self.client.post("/api/matches", json={"required_skills": REQUIRED, "workers": [worker]})
        self.assertEqual(response.status_code, 422)

    def test_duplicate_worker_skill_rejected(self):
        worker = dict(STRONG_WORKER, skills=[
            {"name": "Python", "level": "Expert", "proficiency": 95, "years_exp": 6},
            {"name": "PYTHON", "level": "Beginner", "proficiency": 10, "years_exp": 1},
        ])
        response = self.client.post("/api/matches", json={"required_skills": REQUIRED, "workers": [worker]})
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["type"], "InvalidWorkerException")

    def test_no_workers_and_no_roster_file(self):
        response = self.client.post("/api/matches", json={"required_skills": REQUIRED})
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["type"], "RosterUnavailableException")

    def test_health(self):
        response = self.client.get("/health")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["status"], "healthy")


class TestConfiguredRoster(MatchesApiTestCase):

    def setUp(self):
        import tempfile
        from pathlib import Path
        from tests.fixtures.roster_fixtures import ROSTER_YAML

        self._tmpdir = tempfile.TemporaryDirectory()
        roster_path = Path(self._tmpdir.name) / "roster.yaml"
        roster_path.write_text(ROSTER_YAML, encoding="utf-8")
        self.config = AppConfig(roster_file=str(roster_path))
        super().setUp()

    def tearDown(self):
        super().tearDown()
        self._tmpdir.cleanup()

    def test_roster_file_used_when_workers_omitted(self):
        response = self.client.post("/api/matches", json={"required_skills": REQUIRED})

        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertEqual([r["worker_id"] for r in data["results"]], ["EMP001", "EMP002"])
        self.assertEqual(data["results"][0]["match_score"], 86)


class TestRelativeRosterFile(unittest.TestCase):
    """A relative roster_file resolves next to config.yaml, not the working directory."""

    def setUp(self):
        import tempfile
        from pathlib import Path
        from tests.fixtures.roster_fixtures import ROSTER_YAML

        self._tmpdir = tempfile.TemporaryDirectory()
        root = Path(self._tmpdir.name)
        (root / "app" / "data").mkdir(parents=True)
        (root / "app" / "data" / "roster.yaml").write_text(ROSTER_YAML, encoding="utf-8")
        (root / "app" / "config.yaml").write_text("roster_file: data/roster.yaml\n", encoding="utf-8")
        (root / "elsewhere").mkdir()

        self._cwd = os.getcwd()
        os.chdir(root / "elsewhere")
        self._env = patch.dict(os.environ, {"SKILLMATCH_CONFIG": str(root / "app" / "config.yaml")})
        self._env.start()
        os.environ.pop("SKILLMATCH_ROSTER_FILE", None)
        get_config.cache_clear()
        self.client = TestClient(app)

    def tearDown(self):
        get_config.cache_clear()
        self._env.stop()
        os.chdir(self._cwd)
        self._tmpdir.cleanup()

    def test_roster_found_from_other_working_directory(self):
        response = self.client.post("/api/matches", json={"required_skills": REQUIRED})

        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertEqual([r["worker_id"] for r in data["results"]], ["EMP001", "EMP002"])
        self.assertEqual(data["results"][0]["match_score"], 86)


if __name__ == '__main__':
    unittest.main()
