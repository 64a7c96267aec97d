from sqlalchemy import Column, Integer, String, Text
from stock_tracker.core.db import Base
from stock_tracker.models.base.mixins import TimestampMixin


class Company(Base, TimestampMixin):
    __tablename__ = "companies"

    id = Column(Integer, primary_key=True)
    company_code = Column(String(50), nullable=False, unique=True, index=True)
    company_name = Column(String(255), nullable=False, index=True)
    gst_number = Column(String(15), nullable=False, index=True)
    contact_number = Column(String(20), nullable=False)
    address = Column(Text, nullable=False)

    # soft reference: suppliers can be deleted without touching companies
    supplier_id = Column(Integer, nullable=False, index=True)

    def __repr__(self):
        return f"<Company id={self.id} code={self.company_code} supplier_id={self.supplier_id}>"
