"""Runtime configuration read from environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class Settings:
    max_periods: int = 12000  # iteration cap for a single schedule
    log_level: str = "INFO"
    preview_rows: int = 120  # rows printed by the CLI before truncating


def load_settings() -> Settings:
    """Build settings from ``LOAN_SCHEDULE_*`` environment variables."""
    defaults = Settings()
    return Settings(
        max_periods=int(os.environ.get("LOAN_SCHEDULE_MAX_PERIODS", defaults.max_periods)),
        log_level=os.environ.get("LOAN_SCHEDULE_LOG_LEVEL", defaults.log_level).upper(),
        preview_rows=int(os.environ.get("LOAN_SCHEDULE_PREVIEW_ROWS", defaults.preview_rows)),
    )


settings = load_settings()
