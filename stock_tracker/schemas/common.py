# stock_tracker/schemas/common.py

from typing import Annotated
from pydantic import StringConstraints

# Required form field: surrounding whitespace stripped, must not be empty
RequiredStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]

# send_quantity is stored in a 32-bit INTEGER column
MAX_SEND_QUANTITY = 2_147_483_647
