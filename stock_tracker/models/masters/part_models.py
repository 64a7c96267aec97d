from sqlalchemy import Column, Integer, String
from stock_tracker.core.db import Base
from stock_tracker.models.base.mixins import TimestampMixin


class Part(Base, TimestampMixin):
    __tablename__ = "parts"

    id = Column(Integer, primary_key=True)
    part_number = Column(String(100), nullable=False, unique=True, index=True)
    running_number = Column(String(100), nullable=False)
    part_name = Column(String(255), nullable=False, index=True)

    def __repr__(self):
        return f"<Part id={self.id} part_number={self.part_number}>"
