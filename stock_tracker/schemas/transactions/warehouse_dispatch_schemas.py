from pydantic import BaseModel, Field
from typing import Optional, List
import datetime as dt

from stock_tracker.schemas.common import MAX_SEND_QUANTITY, RequiredStr


# ==============================
# INPUT
# ==============================
class WarehouseDispatchCreate(BaseModel):
    date: dt.date
    supplier_id: int
    part_id: int
    dc_number: RequiredStr
    send_quantity: int = Field(ge=1, le=MAX_SEND_QUANTITY, description="Units sent to the supplier")


# ==============================
# OUTPUT
# ==============================
class WarehouseDispatchOut(BaseModel):
    id: int
    date: dt.date
    supplier_id: int
    part_id: int
    dc_number: str
    send_quantity: int
    created_at: dt.datetime

    class Config:
        from_attributes = True


class WarehouseDispatchRow(WarehouseDispatchOut):
    """Listing row with display names resolved from the masters."""

    supplier_name: Optional[str] = None
    supplier_code: Optional[str] = None
    part_number: Optional[str] = None
    part_name: Optional[str] = None


class WarehouseDispatchListData(BaseModel):
    total: int
    items: List[WarehouseDispatchRow]
