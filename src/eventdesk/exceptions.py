from __future__ import annotations


class EventDeskError(Exception):
    """Base error; handlers render it as ``{"error": message}``."""

    status_code: int = 400

    def __init__(self, message: str, *, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class InvalidRequestError(EventDeskError):
    status_code = 400


class StoreError(EventDeskError):
    """The database rejected a read or write."""

    status_code = 400


class NotFoundError(EventDeskError):
    status_code = 404
