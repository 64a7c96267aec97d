# stock_tracker/services/ledger/filters.py

from typing import Generic, Iterable, Iterator, Optional, Sequence, TypeVar

from stock_tracker.schemas.ledger.filter_schemas import LedgerFilter

T = TypeVar("T")

# criterion -> attributes it is matched against (any may match)
TEXT_CRITERIA = {
    "supplier": ("supplier_name", "supplier_code"),
    "company": ("company_name", "company_code"),
    "part": ("part_number", "part_name"),
    "dc_number": ("dc_number",),
}

DATE_ATTRIBUTES = ("date", "last_movement_date")


def _contains(item, needle: str, attributes: Sequence[str]) -> bool:
    needle = needle.lower()
    for attr in attributes:
        value = getattr(item, attr, None)
        if value and needle in str(value).lower():
            return True
    return False


def _item_date(item):
    for attr in DATE_ATTRIBUTES:
        value = getattr(item, attr, None)
        if value is not None:
            return value
    return None


def matches(item, criteria: LedgerFilter) -> bool:
    for criterion, attributes in TEXT_CRITERIA.items():
        needle: Optional[str] = getattr(criteria, criterion)
        if needle and not _contains(item, needle, attributes):
            return False

    if criteria.date_from or criteria.date_to:
        item_date = _item_date(item)
        if item_date is None:
            return False
        if criteria.date_from and item_date < criteria.date_from:
            return False
        if criteria.date_to and item_date > criteria.date_to:
            return False

    return True


class FilteredView(Generic[T]):
    """Re-iterable, order-preserving view of the items passing ``criteria``.

    Nothing is evaluated until iteration, and every iteration runs the
    predicate again over the source.
    """

    def __init__(self, source: Iterable[T], criteria: LedgerFilter):
        # one-shot iterators are materialised so the view can be replayed
        self._source = source if isinstance(source, (Sequence, FilteredView)) else tuple(source)
        self._criteria = criteria

    def __iter__(self) -> Iterator[T]:
        if self._criteria.is_empty():
            return iter(self._source)
        return (item for item in self._source if matches(item, self._criteria))

    def to_list(self) -> list[T]:
        return list(self)


def apply_filter(items: Iterable[T], criteria: Optional[LedgerFilter] = None) -> FilteredView[T]:
    return FilteredView(items, criteria or LedgerFilter())
