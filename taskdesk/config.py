from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv


PROJECT_ROOT = Path(__file__).resolve().parents[1]


def load_env() -> None:
    env_name = os.getenv("APP_ENV", "development")
    candidates = [Path.cwd(), PROJECT_ROOT]
    for base in candidates:
        env_path = base / ".env"
        if env_path.exists():
            load_dotenv(env_path)
            break

    for base in candidates:
        env_specific = base / f".env.{env_name}"
        if env_specific.exists():
            load_dotenv(env_specific, override=True)
            break


@dataclass(frozen=True)
class Settings:
    database_url: str
    log_level: str = "INFO"
    log_dir: str = "logs"
    timezone: str = "UTC"
    reminder_preview_limit: int = 5


load_env()

SETTINGS = Settings(
    database_url=os.getenv("DATABASE_URL", "").strip(),
    log_level=os.getenv("LOG_LEVEL", "INFO"),
    log_dir=os.getenv("LOG_DIR", "logs"),
    timezone=os.getenv("TASKDESK_TIMEZONE", "UTC").strip() or "UTC",
    reminder_preview_limit=int(os.getenv("TASKDESK_REMINDER_LIMIT", "5")),
)
