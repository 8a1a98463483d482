#!/usr/bin/env python3
"""
Unit tests for the skill level scale.
"""

import unittest

from core.matching.skill_levels import LEVEL_WEIGHTS, SkillLevel, weight_of


class TestSkillLevelScale(unittest.TestCase):

    def test_weights(self):
        self.assertEqual(weight_of(SkillLevel.BEGINNER), 25)
        self.assertEqual(weight_of(SkillLevel.INTERMEDIATE), 50)
        self.assertEqual(weight_of(SkillLevel.ADVANCED), 75)
        self.assertEqual(weight_of(SkillLevel.EXPERT), 100)

    def test_mapping_is_total_and_strictly_increasing(self):
        ordered = [SkillLevel.BEGINNER, SkillLevel.INTERMEDIATE, SkillLevel.ADVANCED, SkillLevel.EXPERT]
        self.assertEqual(set(LEVEL_WEIGHTS), set(SkillLevel))
        weights = [weight_of(level) for level in ordered]
        self.assertEqual(weights, sorted(set(weights)))

    def test_weight_of_accepts_tier_names(self):
        self.assertEqual(weight_of("Advanced"), 75)
        self.assertEqual(weight_of("expert"), 100)
        self.assertEqual(SkillLevel.INTERMEDIATE.weight, 50)

    def test_unknown_tier_fails_fast(self):
        with self.assertRaises(ValueError):
            weight_of("Guru")
        with self.assertRaises(ValueError):
            SkillLevel(3)


if __name__ == '__main__':
    unittest.main()
