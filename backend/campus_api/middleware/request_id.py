"""
Campus API Backend: Request ID Middleware
===========================================

What:  Assigns a correlation ID to each incoming request and echoes it back.
Why:   Lets one request be followed across every log line it produces, and lets
       a client quote the ID from a response header when reporting a problem.
How:   Adopts a client-sent X-Request-ID when it looks sane, otherwise
       generates a short UUID prefix; stores it in a ContextVar and on
       request.state, and sets it on the response.
When:  Outermost middleware, so every later log line can read the ID.
"""

import re
import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

REQUEST_ID_HEADER = "X-Request-ID"

# Client-supplied IDs end up in log lines; keep them short and printable
_VALID_REQUEST_ID = re.compile(r"^[A-Za-z0-9._-]{1,64}$")

# Coroutine-local: concurrent requests on one event loop each see their own ID
request_id_var: ContextVar[str] = ContextVar("request_id", default="")


def new_request_id() -> str:
    return uuid.uuid4().hex[:8]


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Propagates X-Request-ID from request to logs to response."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        incoming = request.headers.get(REQUEST_ID_HEADER, "")
        rid = incoming if _VALID_REQUEST_ID.match(incoming) else new_request_id()

        token = request_id_var.set(rid)
        request.state.request_id = rid
        try:
            response = await call_next(request)
        finally:
            request_id_var.reset(token)

        response.headers[REQUEST_ID_HEADER] = rid
        return response
