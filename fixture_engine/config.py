import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class FixtureSettings:
    """Scheduling defaults read from the environment."""

    default_match_minutes: int = 60
    default_break_minutes: int = 15
    max_break_minutes: int = 180


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def load_settings() -> FixtureSettings:
    """Read settings fresh from the environment (no caching)."""
    return FixtureSettings(
        default_match_minutes=_int_env("FIXTURE_DEFAULT_MATCH_MINUTES", 60),
        default_break_minutes=_int_env("FIXTURE_DEFAULT_BREAK_MINUTES", 15),
        max_break_minutes=_int_env("FIXTURE_MAX_BREAK_MINUTES", 180),
    )


@lru_cache(maxsize=1)
def get_settings() -> FixtureSettings:
    return load_settings()
