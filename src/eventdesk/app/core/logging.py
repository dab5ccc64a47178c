from __future__ import annotations

import json
import logging
import os
from logging.config import dictConfig
from traceback import format_exception

from .env import Env, get_env


class JsonFormatter(logging.Formatter):
    """One JSON object per line, for hosted log collectors."""

    def format(self, record: logging.LogRecord) -> str:  # type: ignore[override]
        payload: dict[str, object] = {
            "time": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "pid": record.process,
            "message": record.getMessage(),
        }

        http_ctx = {
            k: v
            for k, v in {
                "method": getattr(record, "http_method", None),
                "path": getattr(record, "path", None),
                "status": getattr(record, "status_code", None),
            }.items()
            if v is not None
        }
        if http_ctx:
            payload["http"] = http_ctx

        cache_ctx = {
            k: v
            for k, v in {
                "key": getattr(record, "cache_key", None),
                "op": getattr(record, "cache_op", None),
            }.items()
            if v is not None
        }
        if cache_ctx:
            payload["cache"] = cache_ctx

        if record.exc_info:
            exc_type, exc_value, _tb = record.exc_info
            stack = "".join(format_exception(*record.exc_info))
            max_stack = int(os.getenv("LOG_STACK_LIMIT", "4000"))
            err_obj: dict[str, object] = {
                "stack": stack[:max_stack] + ("...(truncated)" if len(stack) > max_stack else ""),
            }
            if exc_type is not None:
                err_obj["type"] = exc_type.__name__
            if exc_value is not None and str(exc_value):
                err_obj["message"] = str(exc_value)
            payload["error"] = err_obj

        return json.dumps(payload, ensure_ascii=False, default=str)


def read_level(env: Env | None = None) -> str:
    explicit = os.getenv("LOG_LEVEL")
    if explicit:
        return explicit.upper()
    return "INFO" if (env or get_env()) is Env.PROD else "DEBUG"


def read_format(env: Env | None = None) -> str:
    fmt = os.getenv("LOG_FORMAT")
    if fmt:
        return fmt.lower()
    return "json" if (env or get_env()) is Env.PROD else "plain"


def setup_logging(level: str | None = None, fmt: str | None = None) -> None:
    level = (level or read_level()).upper()
    formatter_name = "json" if (fmt or read_format()) == "json" else "plain"

    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,  # keep uvicorn & friends
            "formatters": {
                "plain": {
                    "format": "%(asctime)s %(levelname)-5s [pid:%(process)d] %(name)s: %(message)s",
                    "datefmt": "%Y-%m-%dT%H:%M:%S",
                },
                "json": {
                    "()": JsonFormatter,
                    "datefmt": "%Y-%m-%dT%H:%M:%S",
                },
            },
            "handlers": {
                "stream": {
                    "class": "logging.StreamHandler",
                    "level": level,
                    "formatter": formatter_name,
                }
            },
            "root": {
                "level": level,
                "handlers": ["stream"],
            },
            "loggers": {
                "uvicorn": {"level": "INFO", "handlers": [], "propagate": True},
                "uvicorn.error": {"level": "INFO", "handlers": [], "propagate": True},
                "uvicorn.access": {"level": "INFO", "handlers": [], "propagate": True},
                # redis-py reconnect chatter
                "redis": {"level": "WARNING", "handlers": [], "propagate": True},
            },
        }
    )
