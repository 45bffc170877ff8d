# config.py
import os
from dataclasses import dataclass

DEFAULT_BASE_URL = "https://jsonplaceholder.typicode.com"
DEFAULT_TIMEOUT = 60.0
DEFAULT_LOG_LEVEL = "INFO"


def _timeout_from(raw: str) -> float:
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return DEFAULT_TIMEOUT
    return value if value > 0 else DEFAULT_TIMEOUT


@dataclass(frozen=True)
class AppConfig:
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls) -> "AppConfig":
        base_url = os.getenv("TODO_API_BASE_URL", "").strip() or DEFAULT_BASE_URL
        return cls(
            base_url=base_url.rstrip("/"),
            timeout=_timeout_from(os.getenv("TODO_API_TIMEOUT", "")),
            log_level=(os.getenv("TODO_APP_LOG_LEVEL", "").strip() or DEFAULT_LOG_LEVEL).upper(),
        )
