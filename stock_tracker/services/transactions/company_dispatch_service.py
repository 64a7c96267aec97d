from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, desc

from stock_tracker.models.masters.supplier_models import Supplier
from stock_tracker.models.transactions.company_dispatch_models import CompanyDispatch
from stock_tracker.schemas.transactions.company_dispatch_schemas import (
    CompanyDispatchCreate,
    CompanyDispatchOut,
)
from stock_tracker.services.masters.company_service import get_company_or_404
from stock_tracker.services.masters.part_service import get_part_or_404
from stock_tracker.services.transactions.warehouse_dispatch_service import list_warehouse_dispatches
from stock_tracker.services.ledger.availability import available_quantity
from stock_tracker.core.exceptions import AppException
from stock_tracker.constants.error_codes import ErrorCode
from stock_tracker.utils.store_helpers import commit_or_fail
from stock_tracker.utils.logger import get_logger

logger = get_logger(__name__)

STORE_ORDER = (
    desc(CompanyDispatch.date),
    desc(CompanyDispatch.created_at),
    desc(CompanyDispatch.id),
)


def _map_dispatch(txn: CompanyDispatch) -> CompanyDispatchOut:
    return CompanyDispatchOut(
        id=txn.id,
        date=txn.date,
        company_id=txn.company_id,
        part_id=txn.part_id,
        send_quantity=txn.send_quantity,
        supplier_id=txn.supplier_id,
        created_at=txn.created_at,
    )


# =====================================================
# CREATE
# =====================================================
async def create_company_dispatch(
    db: AsyncSession,
    payload: CompanyDispatchCreate,
) -> CompanyDispatchOut:
    """Record a supplier -> company dispatch if the supplier holds enough stock.

    The supplier comes from the company. Availability is read and the row
    written in one transaction, with the supplier row locked where the
    database supports ``SELECT ... FOR UPDATE``.
    """
    company = await get_company_or_404(db, payload.company_id)
    await get_part_or_404(db, payload.part_id)
    supplier_id = company.supplier_id

    # serialises competing dispatches for this supplier (no-op on SQLite)
    await db.execute(
        select(Supplier.id).where(Supplier.id == supplier_id).with_for_update()
    )

    available = available_quantity(
        await list_warehouse_dispatches(db, supplier_id=supplier_id, part_id=payload.part_id),
        await list_company_dispatches(db, supplier_id=supplier_id, part_id=payload.part_id),
        supplier_id,
        payload.part_id,
    )

    if payload.send_quantity > available:
        await db.rollback()
        logger.info(
            "Dispatch rejected: insufficient stock",
            extra={
                "company_id": payload.company_id,
                "supplier_id": supplier_id,
                "part_id": payload.part_id,
                "requested": payload.send_quantity,
                "available": available,
            },
        )
        raise AppException(
            409,
            f"Insufficient quantity. Available: {available}",
            ErrorCode.INSUFFICIENT_STOCK,
            {"available": available, "requested": payload.send_quantity},
        )

    txn = CompanyDispatch(
        **payload.model_dump(),
        supplier_id=supplier_id,
    )
    db.add(txn)

    await db.flush()
    await commit_or_fail(db, "create_company_dispatch")
    await db.refresh(txn)

    logger.info(
        "Company dispatch created",
        extra={
            "transaction_id": txn.id,
            "company_id": txn.company_id,
            "supplier_id": txn.supplier_id,
            "part_id": txn.part_id,
            "send_quantity": txn.send_quantity,
            "available_after": available - txn.send_quantity,
        },
    )
    return _map_dispatch(txn)


# =====================================================
# LIST
# =====================================================
async def list_company_dispatches(
    db: AsyncSession,
    supplier_id: Optional[int] = None,
    part_id: Optional[int] = None,
    company_id: Optional[int] = None,
) -> List[CompanyDispatchOut]:
    filters = []
    if supplier_id is not None:
        filters.append(CompanyDispatch.supplier_id == supplier_id)
    if part_id is not None:
        filters.append(CompanyDispatch.part_id == part_id)
    if company_id is not None:
        filters.append(CompanyDispatch.company_id == company_id)

    result = await db.execute(
        select(CompanyDispatch).where(*filters).order_by(*STORE_ORDER)
    )
    return [_map_dispatch(t) for t in result.scalars().all()]
