"""Configuration for a11y-checker."""
from a11y_checker.config.settings import Settings, settings

__all__ = ["Settings", "settings"]
