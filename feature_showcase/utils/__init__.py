"""Utility modules for the feature showcase.

This package provides:
- logging: Configured logging with JSON/text output support
"""

from feature_showcase.utils.logging import get_logger, configure_root_logger, JsonFormatter

__all__ = [
    "get_logger",
    "configure_root_logger",
    "JsonFormatter",
]
