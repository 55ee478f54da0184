"""
Configuration management for Balance View.

Loads settings from environment variables and an optional .env file.
"""

from balance_view.config.settings import Settings, get_settings  # noqa: F401

__all__ = ["Settings", "get_settings"]
