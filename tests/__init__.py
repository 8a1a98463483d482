#!/usr/bin/env python3
"""
Test suite for SkillMatch.

All tests can be run with standard Python tools:

    # Run all tests
    python -m pytest tests/ -v

    # Using unittest
    python -m unittest discover tests -v

Shared roster builders live in tests/fixtures/roster_fixtures.py.
"""
