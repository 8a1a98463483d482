"""SkillMatch core: configuration, roster loading and the matching engine."""
