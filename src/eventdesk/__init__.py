from . import app
from .exceptions import EventDeskError, InvalidRequestError, NotFoundError, StoreError

__version__ = "0.1.0"

__all__ = [
    "app",
    "EventDeskError",
    "InvalidRequestError",
    "NotFoundError",
    "StoreError",
    "__version__",
]
