# src/hrms/api/v1/error_handlers.py
"""
FastAPI exception handlers: the single place where errors become responses.

Routers never catch errors. A RepositoryError keeps its own status
(`http_status()`) and body (`to_payload()`):

    {"message": "Candidate not found", "data": null, "code": "not_found"}

Anything else is logged with its stack trace and answered with a generic 500.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from hrms.exceptions.base import RepositoryError

logger = logging.getLogger(__name__)


async def repository_error_handler(request: Request, exc: RepositoryError) -> JSONResponse:
    status = exc.http_status()
    # client-side problems at INFO, server-side ones at WARNING
    log = logger.warning if status >= 500 else logger.info
    log(
        "http.repository_error",
        extra={
            "method": request.method,
            "path": request.url.path,
            "status_code": status,
            "error_code": exc.error_code,
            "fields": exc.fields,
            "constraint": exc.constraint,
            "error": exc.message,
        },
    )
    return JSONResponse(status_code=status, content=exc.to_payload())


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "http.unhandled_error",
        exc_info=exc,
        extra={"method": request.method, "path": request.url.path},
    )
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RepositoryError, repository_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
