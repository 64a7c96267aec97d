# Stock Tracker Test Suite - Shared Configuration and Fixtures
#
# This module provides:
# - Environment defaults applied before the application is imported
# - An in-memory SQLite database per test (StaticPool, one shared connection)
# - An httpx client bound to the ASGI app with get_db overridden
# - An ApiFactory for seeding masters and transactions through the API

import os

os.environ.setdefault("APP_ENV", "development")
os.environ.setdefault("DB_TYPE", "sqlite")
os.environ.setdefault("SQLITE_PATH", ":memory:")

from datetime import date
from typing import Any, Dict

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from main import app
from stock_tracker.core.db import Base, get_db


# =============================================================================
# DATABASE
# =============================================================================

@pytest.fixture
async def engine():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(
        bind=engine,
        class_=AsyncSession,
        autoflush=False,
        expire_on_commit=False,
    )


@pytest.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


# =============================================================================
# HTTP CLIENT
# =============================================================================

@pytest.fixture
async def client(session_factory):
    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac

    app.dependency_overrides.clear()


class ApiFactory:
    """Creates records through the public endpoints and returns their data."""

    def __init__(self, client: AsyncClient):
        self.client = client
        self._seq = 0

    def _next(self) -> int:
        self._seq += 1
        return self._seq

    async def _post(self, path: str, body: Dict[str, Any]) -> Dict[str, Any]:
        response = await self.client.post(path, json=body)
        assert response.status_code == 200, response.text
        return response.json()["data"]

    async def part(self, **overrides) -> Dict[str, Any]:
        n = self._next()
        body = {
            "part_number": f"P-{100 + n}",
            "running_number": f"R-{n}",
            "part_name": f"Part {n}",
            **overrides,
        }
        return await self._post("/parts/", body)

    async def supplier(self, **overrides) -> Dict[str, Any]:
        n = self._next()
        body = {
            "supplier_code": f"SUP-{n}",
            "name": f"Supplier {n}",
            "gst_number": "29ABCDE1234F1Z5",
            "contact_number": "9876543210",
            "address": "12 Industrial Estate",
            **overrides,
        }
        return await self._post("/suppliers/", body)

    async def company(self, supplier_id: int, **overrides) -> Dict[str, Any]:
        n = self._next()
        body = {
            "company_code": f"CMP-{n}",
            "company_name": f"Company {n}",
            "gst_number": "27ABCDE1234F1Z5",
            "contact_number": "9123456780",
            "address": "4 Ring Road",
            "supplier_id": supplier_id,
            **overrides,
        }
        return await self._post("/companies/", body)

    async def receipt(self, supplier_id: int, part_id: int, qty: int, dc_number: str = "DC1",
                      on: date = date(2024, 1, 10)) -> Dict[str, Any]:
        return await self._post(
            "/transactions/warehouse-to-supplier/",
            {
                "date": on.isoformat(),
                "supplier_id": supplier_id,
                "part_id": part_id,
                "dc_number": dc_number,
                "send_quantity": qty,
            },
        )

    async def dispatch(self, company_id: int, part_id: int, qty: int,
                       on: date = date(2024, 1, 12)) -> Dict[str, Any]:
        return await self._post(
            "/transactions/supplier-to-company/",
            {
                "date": on.isoformat(),
                "company_id": company_id,
                "part_id": part_id,
                "send_quantity": qty,
            },
        )


@pytest.fixture
def api(client) -> ApiFactory:
    return ApiFactory(client)
