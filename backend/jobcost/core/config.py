"""
Configuration settings for JobCost

Re-exports the pydantic-settings implementation from settings.py.

Usage:
    from jobcost.core.config import settings
    # or
    from jobcost.core.settings import get_settings
    settings = get_settings()
"""
from jobcost.core.settings import Settings, get_settings, settings

__all__ = ["Settings", "get_settings", "settings"]
