# stock_tracker/services/ledger/dashboard.py

from stock_tracker.schemas.ledger.dashboard_schemas import (
    DashboardData,
    DashboardStats,
    RecentTransaction,
)
from stock_tracker.services.ledger.snapshot import InventorySnapshot

WAREHOUSE_TO_SUPPLIER_LABEL = "Warehouse to Supplier"
SUPPLIER_TO_COMPANY_LABEL = "Supplier to Company"

RECENT_PER_TYPE = 3
RECENT_LIMIT = 5


def build_dashboard(snapshot: InventorySnapshot) -> DashboardData:
    stats = DashboardStats(
        total_parts=len(snapshot.parts),
        total_suppliers=len(snapshot.suppliers),
        total_companies=len(snapshot.companies),
        total_transactions=(
            len(snapshot.warehouse_dispatches) + len(snapshot.company_dispatches)
        ),
    )

    def _part_name(part_id: int):
        part = snapshot.parts_by_id.get(part_id)
        return part.part_name if part else None

    recent = [
        RecentTransaction(
            id=t.id,
            type=WAREHOUSE_TO_SUPPLIER_LABEL,
            date=t.date,
            part_id=t.part_id,
            part_name=_part_name(t.part_id),
            send_quantity=t.send_quantity,
            dc_number=t.dc_number,
        )
        for t in snapshot.warehouse_dispatches[:RECENT_PER_TYPE]
    ] + [
        RecentTransaction(
            id=t.id,
            type=SUPPLIER_TO_COMPANY_LABEL,
            date=t.date,
            part_id=t.part_id,
            part_name=_part_name(t.part_id),
            send_quantity=t.send_quantity,
        )
        for t in snapshot.company_dispatches[:RECENT_PER_TYPE]
    ]

    # stable sort: on equal dates warehouse dispatches stay first
    recent.sort(key=lambda r: r.date, reverse=True)

    return DashboardData(stats=stats, recent_transactions=recent[:RECENT_LIMIT])
