"""Settings read from the environment (and a local .env file)."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

load_dotenv()

DEFAULT_CORS_ORIGINS = "http://localhost:5173,http://localhost:5174"


def _split(value: str) -> list[str]:
    return [o.strip() for o in value.split(",") if o.strip()]


@dataclass
class Settings:
    cors_origins: list[str] = field(default_factory=lambda: _split(DEFAULT_CORS_ORIGINS))
    theme_primary: str = "#3f91e3"  # blue; purple is #9c27b0, green #4caf50
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            cors_origins=_split(os.getenv("CORS_ORIGINS", DEFAULT_CORS_ORIGINS)),
            theme_primary=os.getenv("THEME_PRIMARY", "#3f91e3"),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )


settings = Settings.from_env()
