import datetime as dt
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel


class LedgerTieBreak(str, Enum):
    # display fields follow the most recent transaction by (date, created_at, id)
    LATEST = "latest"
    # display fields follow the last transaction processed, in store order
    STORE_ORDER = "store_order"


class StockLedgerRow(BaseModel):
    supplier_id: int
    part_id: int

    part_number: str
    part_name: str
    running_number: str
    supplier_name: str
    supplier_code: str

    dc_number: str
    total_sent_to_supplier: int
    total_sent_to_company: int
    available_quantity: int
    company_name: Optional[str] = None

    last_movement_date: dt.date


class UnresolvedReference(BaseModel):
    transaction_type: str
    transaction_id: int
    reference: str
    reference_id: int
    reason: str


class StockLedgerTotals(BaseModel):
    total_sent_to_supplier: int = 0
    total_sent_to_company: int = 0
    total_available: int = 0


class StockLedgerData(BaseModel):
    total: int
    items: List[StockLedgerRow]
    totals: StockLedgerTotals
    unresolved: Optional[List[UnresolvedReference]] = None


class AvailabilityOut(BaseModel):
    # missing ids match no transactions
    supplier_id: Optional[int] = None
    part_id: Optional[int] = None
    total_received: int
    total_dispatched: int
    available_quantity: int
