from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from stock_tracker.core.db import get_db
from stock_tracker.routers.dependencies import get_snapshot, ledger_filter_params
from stock_tracker.schemas.ledger.filter_schemas import LedgerFilter
from stock_tracker.schemas.transactions.company_dispatch_schemas import (
    CompanyDispatchCreate,
    CompanyDispatchOut,
    CompanyDispatchListData,
)
from stock_tracker.services.ledger.filters import apply_filter
from stock_tracker.services.ledger.snapshot import InventorySnapshot
from stock_tracker.services.ledger.transaction_rows import company_dispatch_rows
from stock_tracker.services.transactions.company_dispatch_service import (
    create_company_dispatch,
)
from stock_tracker.utils.response import APIResponse, success_response
from stock_tracker.utils.logger import get_logger

router = APIRouter(
    prefix="/transactions/supplier-to-company",
    tags=["Supplier to Company"],
)
logger = get_logger(__name__)


@router.post("/", response_model=APIResponse[CompanyDispatchOut])
async def create_company_dispatch_api(
    payload: CompanyDispatchCreate,
    db: AsyncSession = Depends(get_db),
):
    logger.info(
        "Create company dispatch",
        extra={
            "company_id": payload.company_id,
            "part_id": payload.part_id,
            "send_quantity": payload.send_quantity,
        },
    )
    txn = await create_company_dispatch(db, payload)
    return success_response("Transaction created successfully", txn)


@router.get("/", response_model=APIResponse[CompanyDispatchListData])
async def list_company_dispatches_api(
    snapshot: InventorySnapshot = Depends(get_snapshot),
    criteria: LedgerFilter = Depends(ledger_filter_params),
    supplier_id: Optional[int] = Query(None),
    company_id: Optional[int] = Query(None),
    part_id: Optional[int] = Query(None),
):
    rows = [
        r for r in company_dispatch_rows(snapshot)
        if (supplier_id is None or r.supplier_id == supplier_id)
        and (company_id is None or r.company_id == company_id)
        and (part_id is None or r.part_id == part_id)
    ]
    items = apply_filter(rows, criteria).to_list()

    return success_response(
        "Transactions fetched successfully",
        CompanyDispatchListData(total=len(items), items=items),
    )
