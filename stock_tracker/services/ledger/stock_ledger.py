# stock_tracker/services/ledger/stock_ledger.py

import datetime as dt
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Tuple

from stock_tracker.schemas.ledger.stock_ledger_schemas import (
    LedgerTieBreak,
    StockLedgerRow,
    StockLedgerTotals,
    UnresolvedReference,
)
from stock_tracker.services.ledger.snapshot import InventorySnapshot
from stock_tracker.utils.logger import get_logger

logger = get_logger(__name__)

WAREHOUSE_TO_SUPPLIER = "warehouse_to_supplier"
SUPPLIER_TO_COMPANY = "supplier_to_company"

LedgerKey = Tuple[int, int]


def _recency(txn) -> tuple:
    return (txn.date, txn.created_at, txn.id)


@dataclass
class _RowAccumulator:
    supplier_id: int
    part_id: int
    part_number: str
    part_name: str
    running_number: str
    supplier_name: str
    supplier_code: str
    dc_number: str
    last_movement_date: dt.date
    total_sent_to_supplier: int = 0
    total_sent_to_company: int = 0
    company_name: Optional[str] = None
    # recency of the transactions currently shown in dc_number / company_name
    dc_source: Optional[tuple] = None
    company_source: Optional[tuple] = None

    def to_row(self) -> StockLedgerRow:
        return StockLedgerRow(
            supplier_id=self.supplier_id,
            part_id=self.part_id,
            part_number=self.part_number,
            part_name=self.part_name,
            running_number=self.running_number,
            supplier_name=self.supplier_name,
            supplier_code=self.supplier_code,
            dc_number=self.dc_number,
            total_sent_to_supplier=self.total_sent_to_supplier,
            total_sent_to_company=self.total_sent_to_company,
            available_quantity=self.total_sent_to_supplier - self.total_sent_to_company,
            company_name=self.company_name,
            last_movement_date=self.last_movement_date,
        )


@dataclass
class StockLedger:
    rows: List[StockLedgerRow]
    unresolved: List[UnresolvedReference] = field(default_factory=list)


def _takes_display(current: Optional[tuple], candidate: tuple, tie_break: LedgerTieBreak) -> bool:
    if tie_break is LedgerTieBreak.STORE_ORDER or current is None:
        return True
    return candidate >= current


def _skip(
    unresolved: List[UnresolvedReference],
    transaction_type: str,
    transaction_id: int,
    reference: str,
    reference_id: int,
    reason: str,
) -> None:
    logger.warning(
        "Transaction excluded from stock ledger",
        extra={
            "transaction_type": transaction_type,
            "transaction_id": transaction_id,
            "reference": reference,
            "reference_id": reference_id,
            "reason": reason,
        },
    )
    unresolved.append(
        UnresolvedReference(
            transaction_type=transaction_type,
            transaction_id=transaction_id,
            reference=reference,
            reference_id=reference_id,
            reason=reason,
        )
    )


def build_stock_ledger(
    snapshot: InventorySnapshot,
    tie_break: LedgerTieBreak = LedgerTieBreak.LATEST,
) -> StockLedger:
    """Fold both transaction streams into one row per (supplier, part).

    A row exists only for pairs with at least one resolvable warehouse
    dispatch. Transactions whose part, supplier or company no longer
    resolves, and company dispatches with no matching row, are left out of
    the rows and reported in ``StockLedger.unresolved``.
    """
    tie_break = LedgerTieBreak(tie_break)
    ledger: Dict[LedgerKey, _RowAccumulator] = {}
    unresolved: List[UnresolvedReference] = []

    # -------------------------------------------------
    # RECEIPTS: WAREHOUSE -> SUPPLIER
    # -------------------------------------------------
    for txn in snapshot.warehouse_dispatches:
        key = (txn.supplier_id, txn.part_id)
        entry = ledger.get(key)

        if entry is None:
            part = snapshot.parts_by_id.get(txn.part_id)
            supplier = snapshot.suppliers_by_id.get(txn.supplier_id)

            if part is None:
                _skip(unresolved, WAREHOUSE_TO_SUPPLIER, txn.id, "part", txn.part_id, "part not found")
                continue
            if supplier is None:
                _skip(unresolved, WAREHOUSE_TO_SUPPLIER, txn.id, "supplier", txn.supplier_id, "supplier not found")
                continue

            entry = ledger[key] = _RowAccumulator(
                supplier_id=supplier.id,
                part_id=part.id,
                part_number=part.part_number,
                part_name=part.part_name,
                running_number=part.running_number,
                supplier_name=supplier.name,
                supplier_code=supplier.supplier_code,
                dc_number=txn.dc_number,
                last_movement_date=txn.date,
            )

        entry.total_sent_to_supplier += txn.send_quantity
        entry.last_movement_date = max(entry.last_movement_date, txn.date)

        recency = _recency(txn)
        if _takes_display(entry.dc_source, recency, tie_break):
            entry.dc_number = txn.dc_number
            entry.dc_source = recency

    # -------------------------------------------------
    # DISPATCHES: SUPPLIER -> COMPANY
    # -------------------------------------------------
    for txn in snapshot.company_dispatches:
        company = snapshot.companies_by_id.get(txn.company_id)
        if company is None:
            _skip(unresolved, SUPPLIER_TO_COMPANY, txn.id, "company", txn.company_id, "company not found")
            continue

        entry = ledger.get((txn.supplier_id, txn.part_id))
        if entry is None:
            _skip(
                unresolved,
                SUPPLIER_TO_COMPANY,
                txn.id,
                "supplier_part",
                txn.supplier_id,
                f"no receipt row for supplier {txn.supplier_id} / part {txn.part_id}",
            )
            continue

        entry.total_sent_to_company += txn.send_quantity
        entry.last_movement_date = max(entry.last_movement_date, txn.date)

        recency = _recency(txn)
        if _takes_display(entry.company_source, recency, tie_break):
            entry.company_name = company.company_name
            entry.company_source = recency

    return StockLedger(
        rows=[entry.to_row() for entry in ledger.values()],
        unresolved=unresolved,
    )


def ledger_totals(rows: Iterable[StockLedgerRow]) -> StockLedgerTotals:
    totals = StockLedgerTotals()
    for row in rows:
        totals.total_sent_to_supplier += row.total_sent_to_supplier
        totals.total_sent_to_company += row.total_sent_to_company
        totals.total_available += row.available_quantity
    return totals
