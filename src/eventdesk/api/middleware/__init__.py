from .catchall import CatchAllExceptionMiddleware

__all__ = ["CatchAllExceptionMiddleware"]
