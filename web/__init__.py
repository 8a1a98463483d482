"""SkillMatch web application."""
