"""Project-level configuration and path helpers."""

import os
from dataclasses import dataclass
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
LOGS_DIR = PROJECT_ROOT / "04_logs"
DEFAULT_LOG_PATH = LOGS_DIR / "rx_console.log"

LOGS_DIR.mkdir(parents=True, exist_ok=True)

LIMIT_OPTIONS = (20, 50, 100, 200)
DEFAULT_LIMIT = 50
DEFAULT_POLL_INTERVAL = 3.0
RATE_WINDOW_SECONDS = 60


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class Settings:
    """Runtime settings read from the environment."""

    api_base: str = "http://localhost:8000"
    poll_interval: float = DEFAULT_POLL_INTERVAL
    default_limit: int = DEFAULT_LIMIT
    http_timeout: float = 10.0
    start_live: bool = True

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from RX_* environment variables."""
        settings = cls(
            api_base=os.getenv("RX_API_BASE", cls.api_base).rstrip("/"),
            poll_interval=float(os.getenv("RX_POLL_INTERVAL", str(cls.poll_interval))),
            default_limit=int(os.getenv("RX_DEFAULT_LIMIT", str(cls.default_limit))),
            http_timeout=float(os.getenv("RX_HTTP_TIMEOUT", str(cls.http_timeout))),
            start_live=_env_bool("RX_START_LIVE", cls.start_live),
        )
        if settings.default_limit not in LIMIT_OPTIONS:
            raise ValueError(
                f"RX_DEFAULT_LIMIT must be one of {LIMIT_OPTIONS}, got {settings.default_limit}"
            )
        if settings.poll_interval <= 0:
            raise ValueError("RX_POLL_INTERVAL must be positive")
        return settings
