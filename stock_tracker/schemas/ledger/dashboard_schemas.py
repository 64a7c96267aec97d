import datetime as dt
from typing import List, Optional

from pydantic import BaseModel


class DashboardStats(BaseModel):
    total_parts: int
    total_suppliers: int
    total_companies: int
    total_transactions: int


class RecentTransaction(BaseModel):
    id: int
    type: str
    date: dt.date
    part_id: int
    part_name: Optional[str] = None
    send_quantity: int
    dc_number: Optional[str] = None


class DashboardData(BaseModel):
    stats: DashboardStats
    recent_transactions: List[RecentTransaction]
