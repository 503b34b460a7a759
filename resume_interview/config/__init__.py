"""Configuration for resume_interview."""

from resume_interview.config.settings import (
    IntegrationConfig,
    Settings,
    get_settings,
)

__all__ = [
    "IntegrationConfig",
    "Settings",
    "get_settings",
]
