"""
Application settings.

Responsibilities:
- Read configuration from environment variables and the optional .env file.
- Expose typed, immutable settings for the logging layer.

Nothing here changes resolver output; balance-change resolution is a pure
function of its input.
"""

from __future__ import annotations

from dataclasses import dataclass

from balance_view.config.env import get_log_format, get_log_level


@dataclass(frozen=True)
class Settings:
    log_level: str
    log_format: str

    @property
    def json_logs(self) -> bool:
        return self.log_format == "json"


def get_settings() -> Settings:
    """
    Return the current application settings.

    Read fresh on every call so tests can monkeypatch the environment.
    """
    return Settings(
        log_level=get_log_level(),
        log_format=get_log_format(),
    )
