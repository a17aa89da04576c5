import logging
from contextvars import ContextVar
from typing import Optional

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger("blog_api.requests")

request_context: ContextVar[Optional[Request]] = ContextVar("request_context", default=None)


def request_line(request: Request) -> str:
    url = request.url.path
    if request.url.query:
        url = f"{url}?{request.url.query}"
    return f"{request.method} {url}"


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Set the current request in the request context and log it"""

    async def dispatch(self, request: Request, call_next):
        token = request_context.set(request)
        try:
            logger.info(request_line(request))
            return await call_next(request)
        finally:
            request_context.reset(token)


class RequestContextFilter(logging.Filter):
    """Tag log records with the request being handled, `-` outside of a request"""

    def filter(self, record: logging.LogRecord) -> bool:
        request = request_context.get()
        record.request = request_line(request) if request is not None else "-"
        return True
