import datetime as dt
from typing import Optional

from pydantic import BaseModel


class LedgerFilter(BaseModel):
    """Optional narrowing criteria shared by the ledger and transaction lists.

    Text criteria are case-insensitive substring matches; blank means "any".
    Date bounds are inclusive.
    """

    supplier: Optional[str] = None
    company: Optional[str] = None
    part: Optional[str] = None
    dc_number: Optional[str] = None
    date_from: Optional[dt.date] = None
    date_to: Optional[dt.date] = None

    def is_empty(self) -> bool:
        return not any(
            (
                self.supplier,
                self.company,
                self.part,
                self.dc_number,
                self.date_from,
                self.date_to,
            )
        )
