from .logging import RequestLoggerMiddleware

__all__ = ["RequestLoggerMiddleware"]
