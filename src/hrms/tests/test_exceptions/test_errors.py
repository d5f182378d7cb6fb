import pytest
from sqlalchemy.exc import IntegrityError, OperationalError

from hrms.exceptions.base import (
    DataError,
    InvalidFieldError,
    NotFoundError,
    RepositoryError,
    ServiceUnavailableError,
)
from hrms.exceptions.integrity_classifier import IntegrityKind, classify_integrity_error
from hrms.exceptions.mapper import db_error_handler


class TestErrorTypes:

    @pytest.mark.parametrize("error, status, code", [
        (NotFoundError("branch not found"), 404, "not_found"),
        (DataError("Error creating branch: boom"), 500, "data_error"),
        (ServiceUnavailableError("Error retrieving branches"), 503, "unavailable"),
        (InvalidFieldError("No updatable field supplied for branch", fields=["x"]), 422, "invalid_field"),
    ])
    def test_status_and_code(self, error, status, code):
        assert error.http_status() == status
        assert error.to_payload()["code"] == code
        assert error.to_payload()["data"] is None

    def test_explicit_status_wins(self):
        assert RepositoryError("teapot", 418).http_status() == 418

    def test_plain_error_defaults_to_400(self):
        assert RepositoryError("bad").http_status() == 400

    def test_payload_keeps_constraint_out(self):
        error = DataError("Error creating branch: dup", constraint="uq_branch_code", fields=["branch_code"])

        assert error.to_payload() == {
            "message": "Error creating branch: dup",
            "data": None,
            "code": "data_error",
            "fields": ["branch_code"],
        }
        assert "constraint: uq_branch_code" in str(error)


class _PgOrig(Exception):
    def __init__(self, message, sqlstate, constraint_name=None):
        super().__init__(message)
        self.sqlstate = sqlstate
        self.diag = type("Diag", (), {"constraint_name": constraint_name})()


class TestIntegrityClassifier:

    def test_postgres_sqlstate(self):
        exc = IntegrityError("INSERT", {}, _PgOrig("duplicate key", "23505", "uq_hrms_m_branch_master_branch_code"))

        assert classify_integrity_error(exc) == (IntegrityKind.UNIQUE, "uq_hrms_m_branch_master_branch_code")

    def test_postgres_foreign_key(self):
        exc = IntegrityError("DELETE", {}, _PgOrig("violates foreign key", "23503", "fk_contract_candidate"))

        assert classify_integrity_error(exc)[0] is IntegrityKind.FOREIGN_KEY

    @pytest.mark.parametrize("message, kind", [
        ("UNIQUE constraint failed: hrms_m_branch_master.branch_code", IntegrityKind.UNIQUE),
        ("NOT NULL constraint failed: hrms_m_module.module_name", IntegrityKind.NOT_NULL),
        ("FOREIGN KEY constraint failed", IntegrityKind.FOREIGN_KEY),
        ("something odd", IntegrityKind.UNKNOWN),
    ])
    def test_sqlite_messages(self, message, kind):
        exc = IntegrityError("INSERT", {}, Exception(message))

        assert classify_integrity_error(exc) == (kind, None)


class _FakeSession:
    def __init__(self):
        self.rolled_back = False

    async def rollback(self):
        self.rolled_back = True


@pytest.mark.asyncio
class TestDbErrorHandler:

    async def test_write_failure_becomes_data_error_with_driver_text(self):
        db = _FakeSession()

        with pytest.raises(DataError) as exc_info:
            async with db_error_handler(db, "Branch", "Error creating branch"):
                raise IntegrityError("INSERT", {}, Exception("UNIQUE constraint failed: x"))

        assert db.rolled_back
        assert exc_info.value.message == "Error creating branch: UNIQUE constraint failed: x"

    async def test_read_failure_uses_plain_message(self):
        db = _FakeSession()

        with pytest.raises(ServiceUnavailableError) as exc_info:
            async with db_error_handler(db, "Branch", "Error retrieving branches", error_cls=ServiceUnavailableError):
                raise OperationalError("SELECT", {}, Exception("connection refused"))

        assert db.rolled_back
        assert exc_info.value.message == "Error retrieving branches"

    async def test_repository_error_passes_through(self):
        db = _FakeSession()

        with pytest.raises(NotFoundError) as exc_info:
            async with db_error_handler(db, "EmploymentContract", "Error creating employment contract"):
                raise NotFoundError("Candidate not found")

        assert exc_info.value.http_status() == 404
        assert not db.rolled_back
