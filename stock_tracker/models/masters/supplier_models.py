from sqlalchemy import Column, Integer, String, Text
from stock_tracker.core.db import Base
from stock_tracker.models.base.mixins import TimestampMixin


class Supplier(Base, TimestampMixin):
    __tablename__ = "suppliers"

    id = Column(Integer, primary_key=True)
    supplier_code = Column(String(50), nullable=False, unique=True, index=True)
    name = Column(String(255), nullable=False, index=True)
    gst_number = Column(String(15), nullable=False, index=True)
    contact_number = Column(String(20), nullable=False)
    address = Column(Text, nullable=False)

    def __repr__(self):
        return f"<Supplier id={self.id} code={self.supplier_code} name={self.name}>"
