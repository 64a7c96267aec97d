from sqlalchemy import Column, Integer, String, Date, Index, CheckConstraint
from stock_tracker.core.db import Base
from stock_tracker.models.base.mixins import CreatedAtMixin


class WarehouseDispatch(Base, CreatedAtMixin):
    """Stock sent from the central warehouse to a supplier. Append-only."""

    __tablename__ = "warehouse_dispatches"

    id = Column(Integer, primary_key=True)
    date = Column(Date, nullable=False, index=True)
    supplier_id = Column(Integer, nullable=False, index=True)
    part_id = Column(Integer, nullable=False, index=True)
    dc_number = Column(String(100), nullable=False, index=True)
    send_quantity = Column(Integer, nullable=False)

    __table_args__ = (
        CheckConstraint("send_quantity >= 1", name="ck_warehouse_dispatch_qty_positive"),
        Index("ix_warehouse_dispatch_supplier_part", "supplier_id", "part_id"),
    )

    def __repr__(self):
        return f"<WarehouseDispatch id={self.id} dc={self.dc_number} qty={self.send_quantity}>"
