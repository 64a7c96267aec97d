# stock_tracker/services/ledger/snapshot.py

import time
from dataclasses import dataclass
from functools import cached_property
from typing import Dict, Optional, Tuple

from sqlalchemy.ext.asyncio import AsyncSession

from stock_tracker.schemas.masters.part_schemas import PartOut
from stock_tracker.schemas.masters.supplier_schemas import SupplierOut
from stock_tracker.schemas.masters.company_schemas import CompanyOut
from stock_tracker.schemas.transactions.warehouse_dispatch_schemas import WarehouseDispatchOut
from stock_tracker.schemas.transactions.company_dispatch_schemas import CompanyDispatchOut
from stock_tracker.schemas.ledger.stock_ledger_schemas import AvailabilityOut

from stock_tracker.services.masters.part_service import list_parts
from stock_tracker.services.masters.supplier_service import list_suppliers
from stock_tracker.services.masters.company_service import list_companies
from stock_tracker.services.transactions.warehouse_dispatch_service import list_warehouse_dispatches
from stock_tracker.services.transactions.company_dispatch_service import list_company_dispatches
from stock_tracker.services.ledger.availability import available_quantity, total_quantity
from stock_tracker.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class InventorySnapshot:
    """In-memory copy of all five collections, each in store order.

    A snapshot never changes; after a write, load a new one with
    :meth:`refresh`.
    """

    parts: Tuple[PartOut, ...] = ()
    suppliers: Tuple[SupplierOut, ...] = ()
    companies: Tuple[CompanyOut, ...] = ()
    warehouse_dispatches: Tuple[WarehouseDispatchOut, ...] = ()
    company_dispatches: Tuple[CompanyDispatchOut, ...] = ()

    # -------------------------------------------------
    # LOOKUPS
    # -------------------------------------------------
    @cached_property
    def parts_by_id(self) -> Dict[int, PartOut]:
        return {p.id: p for p in self.parts}

    @cached_property
    def suppliers_by_id(self) -> Dict[int, SupplierOut]:
        return {s.id: s for s in self.suppliers}

    @cached_property
    def companies_by_id(self) -> Dict[int, CompanyOut]:
        return {c.id: c for c in self.companies}

    # -------------------------------------------------
    # AVAILABILITY
    # -------------------------------------------------
    def available(self, supplier_id: Optional[int], part_id: Optional[int]) -> int:
        return available_quantity(
            self.warehouse_dispatches,
            self.company_dispatches,
            supplier_id,
            part_id,
        )

    def availability(self, supplier_id: Optional[int], part_id: Optional[int]) -> AvailabilityOut:
        received = total_quantity(self.warehouse_dispatches, supplier_id, part_id)
        dispatched = total_quantity(self.company_dispatches, supplier_id, part_id)
        return AvailabilityOut(
            supplier_id=supplier_id,
            part_id=part_id,
            total_received=received,
            total_dispatched=dispatched,
            available_quantity=received - dispatched,
        )

    async def refresh(self, db: AsyncSession) -> "InventorySnapshot":
        return await load_snapshot(db)


async def load_snapshot(db: AsyncSession) -> InventorySnapshot:
    t0 = time.perf_counter()

    # one session cannot run queries concurrently, so load in sequence
    snapshot = InventorySnapshot(
        parts=tuple(await list_parts(db)),
        suppliers=tuple(await list_suppliers(db)),
        companies=tuple(await list_companies(db)),
        warehouse_dispatches=tuple(await list_warehouse_dispatches(db)),
        company_dispatches=tuple(await list_company_dispatches(db)),
    )

    logger.debug(
        "Inventory snapshot loaded",
        extra={
            "parts": len(snapshot.parts),
            "suppliers": len(snapshot.suppliers),
            "companies": len(snapshot.companies),
            "warehouse_dispatches": len(snapshot.warehouse_dispatches),
            "company_dispatches": len(snapshot.company_dispatches),
            "t_load": round(time.perf_counter() - t0, 4),
        },
    )
    return snapshot
