"""Tests for store error mapping and logging setup."""

import pytest
from sqlalchemy.exc import IntegrityError, OperationalError

from stock_tracker.constants.error_codes import ErrorCode
from stock_tracker.core.exceptions import StoreOperationError
from stock_tracker.core.logging import build_logging_config
from stock_tracker.utils.store_helpers import commit_or_fail


class FailingSession:
    def __init__(self, error):
        self.error = error
        self.rolled_back = False

    async def commit(self):
        raise self.error

    async def rollback(self):
        self.rolled_back = True


async def test_store_failure_becomes_503():
    session = FailingSession(OperationalError("COMMIT", {}, Exception("connection lost")))

    with pytest.raises(StoreOperationError) as excinfo:
        await commit_or_fail(session, "create_part")

    assert session.rolled_back
    assert excinfo.value.status_code == 503
    assert excinfo.value.error_code == ErrorCode.STORE_ERROR
    assert excinfo.value.details == {"operation": "create_part"}


async def test_integrity_error_propagates():
    session = FailingSession(IntegrityError("INSERT", {}, Exception("unique")))

    with pytest.raises(IntegrityError):
        await commit_or_fail(session, "create_part")

    assert session.rolled_back


async def test_store_error_envelope(client, monkeypatch):
    async def broken(db, search=None):
        raise OperationalError("SELECT", {}, Exception("database is locked"))

    monkeypatch.setattr("stock_tracker.routers.masters.part_router.list_parts", broken)

    response = await client.get("/parts/")

    assert response.status_code == 503
    assert response.json() == {
        "success": False,
        "message": "Record store operation failed",
        "error_code": "STORE_ERROR",
        "details": None,
    }


def test_logging_config():
    config = build_logging_config("WARNING")

    assert config["root"]["level"] == "WARNING"
    assert config["loggers"]["access"]["propagate"] is False
    assert config["loggers"]["stock_tracker.services.ledger"]["level"] == "INFO"


async def test_process_time_header(client):
    response = await client.get("/")

    assert "x-process-time-ms" in response.headers
