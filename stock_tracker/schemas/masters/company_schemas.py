from pydantic import BaseModel
from typing import Optional, List
from datetime import datetime

from stock_tracker.schemas.common import RequiredStr


class CompanyBase(BaseModel):
    company_code: RequiredStr
    company_name: RequiredStr
    gst_number: RequiredStr
    contact_number: RequiredStr
    address: RequiredStr
    supplier_id: int


class CompanyCreate(CompanyBase):
    pass


class CompanyUpdate(BaseModel):
    company_code: Optional[RequiredStr] = None
    company_name: Optional[RequiredStr] = None
    gst_number: Optional[RequiredStr] = None
    contact_number: Optional[RequiredStr] = None
    address: Optional[RequiredStr] = None
    supplier_id: Optional[int] = None


class CompanyOut(CompanyBase):
    id: int
    created_at: datetime
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class CompanyListData(BaseModel):
    total: int
    items: List[CompanyOut]
