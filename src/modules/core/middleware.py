import uuid
from typing import Callable

import structlog
from django.http import HttpRequest, HttpResponse

REQUEST_ID_HEADER = "X-Request-ID"

logger = structlog.get_logger(__name__)


class CorrelationIdMiddleware:
    """Bind a correlation ID to every log line emitted while serving a request.

    The ID comes from the ``X-Request-ID`` header when the client sends one,
    otherwise a UUID4 is generated.  It is echoed back on the response.
    """

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        cid = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(correlation_id=cid)

        logger.info("request.started", method=request.method, path=request.path)
        response = self.get_response(request)
        logger.info(
            "request.finished",
            method=request.method,
            path=request.path,
            status_code=response.status_code,
        )

        response[REQUEST_ID_HEADER] = cid
        return response
