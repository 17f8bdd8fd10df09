import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from dotenv import load_dotenv

load_dotenv()

# todos.db lives next to the installed package
DEFAULT_DB_PATH = Path(__file__).resolve().parent / "todos.db"
DEFAULT_DATABASE_URL = f"sqlite+aiosqlite:///{DEFAULT_DB_PATH}"

_TRUTHY = {"1", "true", "yes", "on"}


def _split_origins(raw: str) -> List[str]:
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


@dataclass
class Settings:
    database_url: str = DEFAULT_DATABASE_URL
    host: str = "0.0.0.0"
    port: int = 3000
    cors_origins: List[str] = field(default_factory=lambda: ["*"])
    log_level: str = "INFO"
    # re-raise store init errors instead of starting with a broken store
    fail_fast: bool = False

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            database_url=os.getenv("DATABASE_URL", DEFAULT_DATABASE_URL),
            host=os.getenv("TODO_API_HOST", "0.0.0.0"),
            port=int(os.getenv("TODO_API_PORT", "3000")),
            cors_origins=_split_origins(os.getenv("TODO_API_CORS_ORIGINS", "*")),
            log_level=os.getenv("TODO_API_LOG_LEVEL", "INFO").upper(),
            fail_fast=os.getenv("TODO_API_FAIL_FAST", "").lower() in _TRUTHY,
        )
