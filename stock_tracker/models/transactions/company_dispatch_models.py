from sqlalchemy import Column, Integer, Date, Index, CheckConstraint
from stock_tracker.core.db import Base
from stock_tracker.models.base.mixins import CreatedAtMixin


class CompanyDispatch(Base, CreatedAtMixin):
    """Stock dispatched from a supplier to a company. Append-only."""

    __tablename__ = "company_dispatches"

    id = Column(Integer, primary_key=True)
    date = Column(Date, nullable=False, index=True)
    company_id = Column(Integer, nullable=False, index=True)
    part_id = Column(Integer, nullable=False, index=True)
    send_quantity = Column(Integer, nullable=False)

    # copied from the company when the dispatch is created
    supplier_id = Column(Integer, nullable=False, index=True)

    __table_args__ = (
        CheckConstraint("send_quantity >= 1", name="ck_company_dispatch_qty_positive"),
        Index("ix_company_dispatch_supplier_part", "supplier_id", "part_id"),
    )

    def __repr__(self):
        return f"<CompanyDispatch id={self.id} company_id={self.company_id} qty={self.send_quantity}>"
