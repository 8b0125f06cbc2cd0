"""Configuration management for bulk-queries.

Usage:
    >>> from bulk_queries.config import get_settings
    >>> settings = get_settings()
    >>> settings.DB_BATCH_SIZE
    100
"""

from bulk_queries.config.settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
]
