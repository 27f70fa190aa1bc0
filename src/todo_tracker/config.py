"""Runtime configuration for the task tracker."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from todo_tracker.store import DEFAULT_STORE_FILE

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(slots=True)
class Settings:
    """Process-wide settings resolved once at startup."""

    store_path: Path = Path(DEFAULT_STORE_FILE)
    log_level: str = "WARNING"

    @classmethod
    def from_env(
        cls,
        store_path: Path | None = None,
        log_level: str | None = None,
    ) -> Settings:
        """Load settings from environment; explicit arguments win over env values."""

        env_path = os.getenv("TODO_TRACKER_FILE", "").strip()
        return cls(
            store_path=store_path or Path(env_path or DEFAULT_STORE_FILE),
            log_level=(log_level or os.getenv("TODO_TRACKER_LOG_LEVEL", "WARNING"))
            .strip()
            .upper(),
        )

    def validate(self) -> None:
        """Raise configuration error for unusable values."""

        if self.log_level not in LOG_LEVELS:
            raise ValueError(
                f"Invalid TODO_TRACKER_LOG_LEVEL: {self.log_level!r}. "
                f"Expected one of {', '.join(LOG_LEVELS)}.",
            )

    @property
    def log_level_value(self) -> int:
        return logging.getLevelName(self.log_level)
