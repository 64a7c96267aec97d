from pydantic import BaseModel, Field
from typing import Optional, List
import datetime as dt

from stock_tracker.schemas.common import MAX_SEND_QUANTITY


# ==============================
# INPUT
# ==============================
class CompanyDispatchCreate(BaseModel):
    # supplier_id is derived from the company, never taken from the client
    date: dt.date
    company_id: int
    part_id: int
    send_quantity: int = Field(ge=1, le=MAX_SEND_QUANTITY, description="Units dispatched to the company")


# ==============================
# OUTPUT
# ==============================
class CompanyDispatchOut(BaseModel):
    id: int
    date: dt.date
    company_id: int
    part_id: int
    send_quantity: int
    supplier_id: int
    created_at: dt.datetime

    class Config:
        from_attributes = True


class CompanyDispatchRow(CompanyDispatchOut):
    """Listing row with display names resolved from the masters."""

    company_name: Optional[str] = None
    company_code: Optional[str] = None
    supplier_name: Optional[str] = None
    supplier_code: Optional[str] = None
    part_number: Optional[str] = None
    part_name: Optional[str] = None


class CompanyDispatchListData(BaseModel):
    total: int
    items: List[CompanyDispatchRow]
