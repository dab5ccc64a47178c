"""ASGI entrypoint: ``uvicorn eventdesk.api.asgi:app``."""

from ..app import setup_logging
from . import create_app

setup_logging()
app = create_app()
