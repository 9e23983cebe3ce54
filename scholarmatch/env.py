import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

DEFAULT_API_URL = "http://localhost:3000/api"


def load_env() -> None:
    """Load .env from project root if present."""
    env_path = Path.cwd() / ".env"
    if not env_path.exists():
        return
    load_dotenv(dotenv_path=env_path)


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise SystemExit(f"{name} must be a number, got {raw!r}")


@dataclass(frozen=True)
class Settings:
    """
    Runtime configuration.

    Attributes:
        api_url: Base URL of the backend API (no trailing slash)
        use_mocks: Wire canned-data services instead of HTTP ones
        mock_delay_scale: Multiplier for simulated latency (0 disables delays)
        http_timeout: Per-request timeout for the HTTP transport, in seconds
        log_level: Log level name
    """

    api_url: str = DEFAULT_API_URL
    use_mocks: bool = True
    mock_delay_scale: float = 1.0
    http_timeout: float = 30.0
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        load_env()
        return cls(
            api_url=os.getenv("SCHOLARMATCH_API_URL", DEFAULT_API_URL).rstrip("/"),
            use_mocks=_env_bool("SCHOLARMATCH_USE_MOCKS", True),
            mock_delay_scale=_env_float("SCHOLARMATCH_MOCK_DELAY_SCALE", 1.0),
            http_timeout=_env_float("SCHOLARMATCH_HTTP_TIMEOUT", 30.0),
            log_level=os.getenv("SCHOLARMATCH_LOG_LEVEL", "INFO"),
        )
