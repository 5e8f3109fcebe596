"""Application configuration utilities."""

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional
import os

from .storage import DATA_FILE


def get_env(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None:
        return default
    value = raw.strip()
    return value or default


def get_optional_int_env(name: str) -> Optional[int]:
    raw = get_env(name, "")
    if not raw:
        return None
    try:
        value = int(raw)
    except ValueError:
        return None
    return value if value > 0 else None


@dataclass(frozen=True)
class Settings:
    data_file: Path
    env: str = "dev"
    page_size: Optional[int] = None
    log_level: str = "INFO"
    max_sessions: int = 1000


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    data_file = Path(get_env("BOOKCONNECT_DATA_FILE", str(DATA_FILE))).expanduser()
    env = get_env("BOOKCONNECT_ENV", "dev")
    page_size = get_optional_int_env("BOOKCONNECT_PAGE_SIZE")
    log_level = get_env("BOOKCONNECT_LOG_LEVEL", "INFO").upper()
    max_sessions = get_optional_int_env("BOOKCONNECT_MAX_SESSIONS") or 1000
    return Settings(
        data_file=data_file,
        env=env,
        page_size=page_size,
        log_level=log_level,
        max_sessions=max_sessions,
    )
