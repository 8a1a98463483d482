#!/usr/bin/env python3
"""
Ranking - Order scored candidates and summarize a ranked list.

Results are sorted by match_score, highest first. Python's sort is stable,
so candidates with equal scores keep the order they had in the roster
snapshot. Nothing is filtered out.
"""

from typing import Any, Dict, List, Optional, Sequence
import logging

from core.config_loader import BandConfig
from core.matching.models import MatchResult, ScoreBand

logger = logging.getLogger(__name__)


def rank_results(results: Sequence[MatchResult]) -> List[MatchResult]:
    """Return a new list sorted by match_score descending, ties in input order."""
    # reverse=True keeps equal elements in their original order
    return sorted(results, key=lambda r: r.match_score, reverse=True)


def score_band(score: int, bands: Optional[BandConfig] = None) -> ScoreBand:
    """Classify a match score into its badge tier."""
    bands = bands or BandConfig()
    if score >= bands.strong_threshold:
        return ScoreBand.STRONG
    if score >= bands.partial_threshold:
        return ScoreBand.PARTIAL
    return ScoreBand.WEAK


def summarize(ranked: Sequence[MatchResult], bands: Optional[BandConfig] = None) -> Dict[str, Any]:
    """
    Summary statistics of a ranked result list.

    Returns:
        Dict with candidate count, per-band counts, the top worker id
        (None for an empty list) and the mean match score.
    """
    band_counts = {band.value: 0 for band in ScoreBand}
    for result in ranked:
        band_counts[score_band(result.match_score, bands).value] += 1

    count = len(ranked)
    mean_score = sum(r.match_score for r in ranked) / count if count else 0.0

    return {
        "candidates": count,
        "bands": band_counts,
        "top_worker_id": ranked[0].worker_id if ranked else None,
        "mean_score": round(mean_score, 1),
    }
