"""
Shared utilities module.

Configuration and logging helpers used across the package.
"""

from monad.shared.config import Settings, get_settings
from monad.shared.logging_config import configure_logging, get_logger

__all__ = ["Settings", "get_settings", "configure_logging", "get_logger"]
