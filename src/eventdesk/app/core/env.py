from __future__ import annotations

import os
import warnings
from enum import StrEnum
from functools import cache


class Env(StrEnum):
    LOCAL = "local"
    DEV = "dev"
    TEST = "test"
    PROD = "prod"


# hosting platforms spell these differently
_ALIASES: dict[str, Env] = {
    "development": Env.DEV,
    "testing": Env.TEST,
    "preview": Env.TEST,
    "production": Env.PROD,
}


def normalize_env(raw: str | None) -> Env | None:
    """Map a raw env name or alias to :class:`Env`; ``None`` when unknown."""
    name = (raw or "").strip().lower()
    if not name:
        return None
    try:
        return Env(name)
    except ValueError:
        return _ALIASES.get(name)


@cache
def get_env() -> Env:
    """
    The deployment environment, read once from ``APP_ENV`` or ``ENVIRONMENT``.

    Anything unrecognised runs as ``local`` after a warning.
    """
    raw = os.getenv("APP_ENV") or os.getenv("ENVIRONMENT")
    env = normalize_env(raw)
    if env is not None:
        return env
    if raw:
        warnings.warn(f"Unrecognized environment '{raw}', defaulting to 'local'.", RuntimeWarning, stacklevel=2)
    return Env.LOCAL


CURRENT_ENVIRONMENT: Env = get_env()
