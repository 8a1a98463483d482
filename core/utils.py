import math
import logging

logger = logging.getLogger(__name__)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with .5 always rounding up.

    Python's built-in round() uses banker's rounding (round(0.5) == 0),
    which would drift from the reference scores on exact halves.
    """
    return int(math.floor(value + 0.5))


def clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))


def clamp_percent(name: str, value: int) -> int:
    """Clamp a percentage into [0, 100], logging when a correction was needed."""
    clamped = int(clamp(value, 0, 100))
    if clamped != value:
        logger.warning("Corrected %s from %r to %r", name, value, clamped)
    return clamped


def normalize_skill_name(name: str) -> str:
    """Key used for case-insensitive skill lookups (no trimming, no synonyms)."""
    return name.lower()
