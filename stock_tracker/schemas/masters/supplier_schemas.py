from pydantic import BaseModel
from typing import Optional, List
from datetime import datetime

from stock_tracker.schemas.common import RequiredStr


class SupplierBase(BaseModel):
    supplier_code: RequiredStr
    name: RequiredStr
    gst_number: RequiredStr
    contact_number: RequiredStr
    address: RequiredStr


class SupplierCreate(SupplierBase):
    pass


class SupplierUpdate(BaseModel):
    supplier_code: Optional[RequiredStr] = None
    name: Optional[RequiredStr] = None
    gst_number: Optional[RequiredStr] = None
    contact_number: Optional[RequiredStr] = None
    address: Optional[RequiredStr] = None


class SupplierOut(SupplierBase):
    id: int
    created_at: datetime
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class SupplierListData(BaseModel):
    total: int
    items: List[SupplierOut]
