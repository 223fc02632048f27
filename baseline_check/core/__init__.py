"""Configuration and logging shared by the checker."""

from baseline_check.core.config import Settings, get_settings
from baseline_check.core.logging import configure_structlog

__all__ = ["Settings", "get_settings", "configure_structlog"]
