from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, desc

from stock_tracker.models.transactions.warehouse_dispatch_models import WarehouseDispatch
from stock_tracker.schemas.transactions.warehouse_dispatch_schemas import (
    WarehouseDispatchCreate,
    WarehouseDispatchOut,
)
from stock_tracker.services.masters.part_service import get_part_or_404
from stock_tracker.services.masters.supplier_service import get_supplier_or_404
from stock_tracker.utils.store_helpers import commit_or_fail
from stock_tracker.utils.logger import get_logger

logger = get_logger(__name__)

# business date first, then creation order
STORE_ORDER = (
    desc(WarehouseDispatch.date),
    desc(WarehouseDispatch.created_at),
    desc(WarehouseDispatch.id),
)


def _map_dispatch(txn: WarehouseDispatch) -> WarehouseDispatchOut:
    return WarehouseDispatchOut(
        id=txn.id,
        date=txn.date,
        supplier_id=txn.supplier_id,
        part_id=txn.part_id,
        dc_number=txn.dc_number,
        send_quantity=txn.send_quantity,
        created_at=txn.created_at,
    )


# =====================================================
# CREATE
# =====================================================
async def create_warehouse_dispatch(
    db: AsyncSession,
    payload: WarehouseDispatchCreate,
) -> WarehouseDispatchOut:
    await get_supplier_or_404(db, payload.supplier_id)
    await get_part_or_404(db, payload.part_id)

    txn = WarehouseDispatch(**payload.model_dump())
    db.add(txn)

    await db.flush()
    await commit_or_fail(db, "create_warehouse_dispatch")
    await db.refresh(txn)

    logger.info(
        "Warehouse dispatch created",
        extra={
            "transaction_id": txn.id,
            "supplier_id": txn.supplier_id,
            "part_id": txn.part_id,
            "dc_number": txn.dc_number,
            "send_quantity": txn.send_quantity,
        },
    )
    return _map_dispatch(txn)


# =====================================================
# LIST
# =====================================================
async def list_warehouse_dispatches(
    db: AsyncSession,
    supplier_id: Optional[int] = None,
    part_id: Optional[int] = None,
) -> List[WarehouseDispatchOut]:
    filters = []
    if supplier_id is not None:
        filters.append(WarehouseDispatch.supplier_id == supplier_id)
    if part_id is not None:
        filters.append(WarehouseDispatch.part_id == part_id)

    result = await db.execute(
        select(WarehouseDispatch).where(*filters).order_by(*STORE_ORDER)
    )
    return [_map_dispatch(t) for t in result.scalars().all()]
