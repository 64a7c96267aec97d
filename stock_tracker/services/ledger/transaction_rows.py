# stock_tracker/services/ledger/transaction_rows.py

from typing import List

from stock_tracker.schemas.transactions.warehouse_dispatch_schemas import WarehouseDispatchRow
from stock_tracker.schemas.transactions.company_dispatch_schemas import CompanyDispatchRow
from stock_tracker.services.ledger.snapshot import InventorySnapshot


def warehouse_dispatch_rows(snapshot: InventorySnapshot) -> List[WarehouseDispatchRow]:
    """Warehouse dispatches in store order, with names; unresolved names stay None."""
    rows = []
    for txn in snapshot.warehouse_dispatches:
        supplier = snapshot.suppliers_by_id.get(txn.supplier_id)
        part = snapshot.parts_by_id.get(txn.part_id)
        rows.append(
            WarehouseDispatchRow(
                **txn.model_dump(),
                supplier_name=supplier.name if supplier else None,
                supplier_code=supplier.supplier_code if supplier else None,
                part_number=part.part_number if part else None,
                part_name=part.part_name if part else None,
            )
        )
    return rows


def company_dispatch_rows(snapshot: InventorySnapshot) -> List[CompanyDispatchRow]:
    rows = []
    for txn in snapshot.company_dispatches:
        company = snapshot.companies_by_id.get(txn.company_id)
        supplier = snapshot.suppliers_by_id.get(txn.supplier_id)
        part = snapshot.parts_by_id.get(txn.part_id)
        rows.append(
            CompanyDispatchRow(
                **txn.model_dump(),
                company_name=company.company_name if company else None,
                company_code=company.company_code if company else None,
                supplier_name=supplier.name if supplier else None,
                supplier_code=supplier.supplier_code if supplier else None,
                part_number=part.part_number if part else None,
                part_name=part.part_name if part else None,
            )
        )
    return rows
