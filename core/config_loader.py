import yaml
import os
import logging
from typing import Dict, Optional
from pydantic import BaseModel, Field, field_validator

logger = logging.getLogger(__name__)

# Availability tags accepted as keys of ScorerConfig.availability_bonus
AVAILABILITY_STATES = ("Available", "Busy", "On Leave")

DEFAULT_AVAILABILITY_BONUS: Dict[str, float] = {
    "Available": 20.0,
    "Busy": 5.0,
    "On Leave": 0.0,
}


def _canonical_availability(key: str) -> str:
    folded = key.replace(" ", "").replace("_", "").lower()
    for state in AVAILABILITY_STATES:
        if state.replace(" ", "").lower() == folded:
            return state
    raise ValueError(f"Unknown availability state {key!r}; expected one of {AVAILABILITY_STATES}")


class ScorerConfig(BaseModel):
    """
    Configuration for the composite scorer.

    Defaults reproduce the reference scoring formula:
        round(skill_match_percent * 0.6 + availability_bonus + (100 - round(workload * 0.3)) * 0.2)
    """
    skill_weight: float = 0.6
    availability_bonus: Dict[str, float] = Field(default_factory=lambda: dict(DEFAULT_AVAILABILITY_BONUS))
    workload_penalty_rate: float = 0.3
    workload_weight: float = 0.2

    # False: an empty requirement list is rejected.
    # True: every worker is scored on availability and workload only.
    allow_empty_requirements: bool = False

    @field_validator("availability_bonus")
    @classmethod
    def _complete_availability_table(cls, value: Dict[str, float]) -> Dict[str, float]:
        # The lookup must stay total over the three states; unset ones keep their default.
        table = dict(DEFAULT_AVAILABILITY_BONUS)
        for key, bonus in value.items():
            table[_canonical_availability(key)] = float(bonus)
        return table


class BandConfig(BaseModel):
    """Score thresholds for the strong / partial / weak badges."""
    strong_threshold: int = 80
    partial_threshold: int = 60


class MatchingConfig(BaseModel):
    """
    Top-level matching configuration.
    """
    scorer: ScorerConfig = Field(default_factory=ScorerConfig)
    bands: BandConfig = Field(default_factory=BandConfig)


class WebConfig(BaseModel):
    """Web server configuration."""
    host: str = "0.0.0.0"
    port: int = 8080


class AppConfig(BaseModel):
    matching: MatchingConfig = Field(default_factory=MatchingConfig)
    web: WebConfig = Field(default_factory=WebConfig)
    # Roster used when a request does not carry its own worker snapshot
    roster_file: Optional[str] = None


def load_config(config_path: str = "config.yaml") -> AppConfig:
    data = {}
    if os.path.exists(config_path):
        with open(config_path, "r") as f:
            data = yaml.safe_load(f) or {}

        # A relative roster path in the file is relative to the file itself
        roster_file = data.get("roster_file")
        if roster_file and not os.path.isabs(roster_file):
            config_dir = os.path.dirname(os.path.abspath(config_path))
            data["roster_file"] = os.path.join(config_dir, roster_file)
    else:
        logger.info(f"Config file {config_path} not found, using defaults")

    # Allow env var override for the roster file
    env_roster_file = os.environ.get("SKILLMATCH_ROSTER_FILE")
    if env_roster_file:
        data['roster_file'] = env_roster_file

    # Allow env var overrides for the web server
    env_web_host = os.environ.get("WEB_HOST")
    if env_web_host:
        if 'web' not in data or data['web'] is None:
            data['web'] = {}
        data['web']['host'] = env_web_host

    env_web_port = os.environ.get("WEB_PORT")
    if env_web_port:
        if 'web' not in data or data['web'] is None:
            data['web'] = {}
        data['web']['port'] = int(env_web_port)

    return AppConfig(**data)
