"""Request logging middleware — one line per inbound request."""

import logging

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from dashboards.infrastructure.logging.log_config import REQUEST_LOGGER_NAME

logger = logging.getLogger(REQUEST_LOGGER_NAME)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs the path and query parameters of every request, never the outcome."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        params = {key: request.query_params.getlist(key) for key in request.query_params.keys()}
        logger.info(
            "Request received path=%s params=%s",
            request.url.path,
            params,
            extra={"path": request.url.path, "params": params},
        )
        return await call_next(request)
