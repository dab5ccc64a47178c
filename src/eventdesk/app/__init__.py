from .core.env import CURRENT_ENVIRONMENT, Env, get_env
from .core.logging import JsonFormatter, setup_logging
from .settings import AppSettings, get_app_settings

__all__ = [
    "CURRENT_ENVIRONMENT",
    "Env",
    "get_env",
    "JsonFormatter",
    "setup_logging",
    "AppSettings",
    "get_app_settings",
]
