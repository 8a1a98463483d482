#!/usr/bin/env python3
"""
Matching Exceptions - Errors raised by the scoring and ranking engine.
"""


class ScoringError(Exception):
    """Base exception for matching engine errors."""
    pass


class InvalidRequirementsError(ScoringError, ValueError):
    """Raised when a project's requirement list cannot be scored."""
    pass


class RosterError(ScoringError):
    """Raised when a roster or project file cannot be loaded."""
    pass
