# src/hrms/tests/test_logging/test_middleware_integration.py
import json
import logging
import uuid

import pytest
from fastapi import FastAPI
from starlette.testclient import TestClient

from hrms.core.logging.builder import setup_logging
from hrms.core.logging.middleware import REQUEST_ID_HEADER, RequestIDMiddleware


class StdoutSettings:
    LOG_FORMAT = "json"
    LOG_LEVEL = "INFO"
    LOG_TO_STDOUT = True
    LOG_DIR = None
    LOG_MAX_BYTES = 1000
    LOG_BACKUP_COUNT = 1
    ENV = "production"
    ENABLE_SQL_LOGGING = False


def make_app() -> FastAPI:
    app = FastAPI()
    app.add_middleware(RequestIDMiddleware)

    @app.get("/hello")
    def hello():
        logging.getLogger("hrms.test").info("handling hello")
        return {"ok": True}

    return app


@pytest.mark.usefixtures("restore_logging")
def test_request_id_in_response_and_logs(capsys):
    setup_logging(StdoutSettings())
    client = TestClient(make_app())

    resp = client.get("/hello")
    assert resp.status_code == 200

    rid = resp.headers.get(REQUEST_ID_HEADER)
    assert rid is not None
    uuid.UUID(rid)

    stderr = capsys.readouterr().err.strip()
    assert stderr, "expected JSON log lines on stderr"

    found = False
    for line in stderr.splitlines():
        try:
            rec = json.loads(line)
        except ValueError:
            continue
        if rec.get("request_id") == rid and rec.get("message") == "handling hello":
            found = True
            break

    assert found, "no log line carries the response's request id"


def test_incoming_uuid_request_id_is_echoed():
    client = TestClient(make_app())
    incoming = str(uuid.uuid4())

    resp = client.get("/hello", headers={REQUEST_ID_HEADER: incoming})

    assert resp.headers[REQUEST_ID_HEADER] == incoming


def test_non_uuid_request_id_is_replaced():
    client = TestClient(make_app())

    resp = client.get("/hello", headers={REQUEST_ID_HEADER: "not-a-uuid"})

    rid = resp.headers[REQUEST_ID_HEADER]
    assert rid != "not-a-uuid"
    uuid.UUID(rid)
