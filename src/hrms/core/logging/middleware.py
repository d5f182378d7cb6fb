# src/hrms/core/logging/middleware.py
"""
Request id middleware.

A caller-supplied `X-Request-ID` is reused when it parses as a UUID; anything
else is replaced by a fresh UUID4. The id is bound for the whole request, so
router, service and repository log lines share it, and it is returned in the
response header.
"""

import uuid

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

from .filters import request_scope

REQUEST_ID_HEADER = "X-Request-ID"


def resolve_request_id(incoming: str | None) -> str:
    try:
        return str(uuid.UUID(incoming))
    except (TypeError, ValueError):
        return str(uuid.uuid4())


class RequestIDMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        with request_scope(resolve_request_id(request.headers.get(REQUEST_ID_HEADER))) as rid:
            response = await call_next(request)
        response.headers[REQUEST_ID_HEADER] = rid
        return response
