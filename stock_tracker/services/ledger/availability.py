# stock_tracker/services/ledger/availability.py

from typing import Iterable, Optional, Protocol


class _Movement(Protocol):
    supplier_id: int
    part_id: int
    send_quantity: int


def total_quantity(
    transactions: Iterable[_Movement],
    supplier_id: Optional[int],
    part_id: Optional[int],
) -> int:
    return sum(
        t.send_quantity
        for t in transactions
        if t.supplier_id == supplier_id and t.part_id == part_id
    )


def available_quantity(
    warehouse_dispatches: Iterable[_Movement],
    company_dispatches: Iterable[_Movement],
    supplier_id: Optional[int],
    part_id: Optional[int],
) -> int:
    """Units received by ``supplier_id`` for ``part_id`` minus units it dispatched.

    Missing ids match nothing, giving 0. The result can be negative when two
    dispatches were written against the same stale availability.
    """
    received = total_quantity(warehouse_dispatches, supplier_id, part_id)
    dispatched = total_quantity(company_dispatches, supplier_id, part_id)
    return received - dispatched
