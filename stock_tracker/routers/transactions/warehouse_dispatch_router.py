from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from stock_tracker.core.db import get_db
from stock_tracker.routers.dependencies import get_snapshot, ledger_filter_params
from stock_tracker.schemas.ledger.filter_schemas import LedgerFilter
from stock_tracker.schemas.transactions.warehouse_dispatch_schemas import (
    WarehouseDispatchCreate,
    WarehouseDispatchOut,
    WarehouseDispatchListData,
)
from stock_tracker.services.ledger.filters import apply_filter
from stock_tracker.services.ledger.snapshot import InventorySnapshot
from stock_tracker.services.ledger.transaction_rows import warehouse_dispatch_rows
from stock_tracker.services.transactions.warehouse_dispatch_service import (
    create_warehouse_dispatch,
)
from stock_tracker.utils.response import APIResponse, success_response
from stock_tracker.utils.logger import get_logger

router = APIRouter(
    prefix="/transactions/warehouse-to-supplier",
    tags=["Warehouse to Supplier"],
)
logger = get_logger(__name__)


@router.post("/", response_model=APIResponse[WarehouseDispatchOut])
async def create_warehouse_dispatch_api(
    payload: WarehouseDispatchCreate,
    db: AsyncSession = Depends(get_db),
):
    logger.info(
        "Create warehouse dispatch",
        extra={
            "supplier_id": payload.supplier_id,
            "part_id": payload.part_id,
            "dc_number": payload.dc_number,
        },
    )
    txn = await create_warehouse_dispatch(db, payload)
    return success_response("Transaction created successfully", txn)


@router.get("/", response_model=APIResponse[WarehouseDispatchListData])
async def list_warehouse_dispatches_api(
    snapshot: InventorySnapshot = Depends(get_snapshot),
    criteria: LedgerFilter = Depends(ledger_filter_params),
    supplier_id: Optional[int] = Query(None),
    part_id: Optional[int] = Query(None),
):
    rows = [
        r for r in warehouse_dispatch_rows(snapshot)
        if (supplier_id is None or r.supplier_id == supplier_id)
        and (part_id is None or r.part_id == part_id)
    ]
    items = apply_filter(rows, criteria).to_list()

    return success_response(
        "Transactions fetched successfully",
        WarehouseDispatchListData(total=len(items), items=items),
    )
