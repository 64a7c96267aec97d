# stock_tracker/routers/dependencies.py

from datetime import date
from typing import Optional

from fastapi import Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from stock_tracker.core.db import get_db
from stock_tracker.schemas.ledger.filter_schemas import LedgerFilter
from stock_tracker.services.ledger.snapshot import InventorySnapshot, load_snapshot


async def get_snapshot(db: AsyncSession = Depends(get_db)) -> InventorySnapshot:
    return await load_snapshot(db)


def ledger_filter_params(
    supplier: Optional[str] = Query(None, description="Supplier name or ID contains"),
    company: Optional[str] = Query(None, description="Company name or ID contains"),
    part: Optional[str] = Query(None, description="Part number or name contains"),
    dc_number: Optional[str] = Query(None, description="DC number contains"),
    date_from: Optional[date] = Query(None, description="Inclusive lower bound"),
    date_to: Optional[date] = Query(None, description="Inclusive upper bound"),
) -> LedgerFilter:
    return LedgerFilter(
        supplier=supplier,
        company=company,
        part=part,
        dc_number=dc_number,
        date_from=date_from,
        date_to=date_to,
    )
