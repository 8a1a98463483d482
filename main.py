import sys
import json
import logging
import argparse

from core.config_loader import load_config
from core.matching import MatchingService, ScoringError, score_band, summarize, validate_project
from core.roster import load_project, load_roster

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def format_table(ranked, bands) -> str:
    """Render ranked results as a plain-text table."""
    header = f"{'Rank':>4}  {'Worker':<12} {'Score':>5}  {'Skill%':>6}  {'Band':<8} {'Availability':<12} {'Workload':>8}  {'Util':>4}"
    lines = [header, "-" * len(header)]
    for idx, r in enumerate(ranked, start=1):
        lines.append(
            f"{idx:>4}  {r.worker_id:<12} {r.match_score:>5}  {r.skill_match_percent:>6}  "
            f"{score_band(r.match_score, bands).value:<8} {r.availability.value:<12} "
            f"{r.workload_percent:>7}%  {r.skill_utilization_percent:>3}%"
        )
    return "\n".join(lines)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Rank workers against a project's required skills")
    parser.add_argument("--config", default="config.yaml", help="Path to config.yaml")
    parser.add_argument("--roster", help="Roster file (defaults to roster_file from config)")
    parser.add_argument("--project", required=True, help="Project file with required_skills")
    parser.add_argument("--top", type=int, default=None, help="Only print the top N candidates")
    parser.add_argument("--json", action="store_true", help="Print results as JSON")
    args = parser.parse_args(argv)
    if args.top is not None and args.top < 1:
        parser.error("--top must be a positive integer")

    config = load_config(args.config)
    roster_path = args.roster or config.roster_file
    if not roster_path:
        logger.error("No roster given: pass --roster or set roster_file in the config")
        return 2

    try:
        project = load_project(args.project)
        errors = validate_project(project)
        if errors:
            for field, message in errors.items():
                logger.error(f"Invalid project ({field}): {message}")
            return 2

        workers = load_roster(roster_path)
        ranked = MatchingService(config.matching.scorer).rank(project.required_skills, workers)
    except ScoringError as e:
        logger.error(f"Matching failed: {e}")
        return 1

    bands = config.matching.bands
    shown = ranked[:args.top] if args.top is not None else ranked

    if args.json:
        payload = {
            "project": project.name,
            "summary": summarize(ranked, bands),
            "results": [
                {
                    "rank": idx,
                    "worker_id": r.worker_id,
                    "match_score": r.match_score,
                    "skill_match_percent": r.skill_match_percent,
                    "band": score_band(r.match_score, bands).value,
                    "availability": r.availability.value,
                    "workload": r.workload_percent,
                    "skill_utilization": r.skill_utilization_percent,
                }
                for idx, r in enumerate(shown, start=1)
            ],
        }
        print(json.dumps(payload, indent=2))
    else:
        print(f"Project: {project.name} ({project.priority.value} priority, {project.category})")
        print(format_table(shown, bands))

    return 0


if __name__ == "__main__":
    sys.exit(main())
