from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class Settings:
    """Library settings loaded from environment in a type-safe, framework-free way."""

    log_level: str

    @staticmethod
    def from_env() -> Settings:
        prefix = "CONTRACT_"
        log_level = os.getenv(f"{prefix}LOG_LEVEL", "INFO").strip().upper() or "INFO"
        return Settings(log_level=log_level)
