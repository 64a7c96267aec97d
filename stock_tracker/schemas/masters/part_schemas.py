# stock_tracker/schemas/masters/part_schemas.py

from pydantic import BaseModel
from typing import Optional, List
from datetime import datetime

from stock_tracker.schemas.common import RequiredStr


class PartBase(BaseModel):
    part_number: RequiredStr
    running_number: RequiredStr
    part_name: RequiredStr


class PartCreate(PartBase):
    pass


class PartUpdate(BaseModel):
    part_number: Optional[RequiredStr] = None
    running_number: Optional[RequiredStr] = None
    part_name: Optional[RequiredStr] = None


class PartOut(PartBase):
    id: int
    created_at: datetime
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class PartListData(BaseModel):
    total: int
    items: List[PartOut]
