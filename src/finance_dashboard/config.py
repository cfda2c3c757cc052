"""Runtime configuration read from environment variables."""
import os
from dataclasses import dataclass

_TRUTHY = {"1", "true", "yes", "on"}


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUTHY


def _env_int(name: str) -> int | None:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from e


@dataclass(frozen=True)
class Settings:
    """Server settings.

    Attributes:
        host: Interface uvicorn binds to.
        port: Port uvicorn listens on.
        log_level: Root logger level name (e.g. "INFO", "DEBUG").
        seed_demo: Seed the demo user's sample portfolio, watchlist and preferences.
        history_seed: Fixed seed for the history generator; None draws from OS entropy.
    """

    host: str = "127.0.0.1"
    port: int = 8001
    log_level: str = "INFO"
    seed_demo: bool = True
    history_seed: int | None = None

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from DASHBOARD_* environment variables."""
        return cls(
            host=os.getenv("DASHBOARD_HOST", cls.host),
            port=_env_int("DASHBOARD_PORT") or cls.port,
            log_level=os.getenv("DASHBOARD_LOG_LEVEL", cls.log_level).upper(),
            seed_demo=_env_flag("DASHBOARD_SEED_DEMO", cls.seed_demo),
            history_seed=_env_int("DASHBOARD_HISTORY_SEED"),
        )
