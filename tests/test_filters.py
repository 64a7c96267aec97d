"""Tests for the ledger / transaction filter layer."""

from datetime import date

from stock_tracker.schemas.ledger.filter_schemas import LedgerFilter
from stock_tracker.services.ledger.filters import FilteredView, apply_filter, matches
from stock_tracker.services.ledger.snapshot import InventorySnapshot
from stock_tracker.services.ledger.stock_ledger import build_stock_ledger
from stock_tracker.services.ledger.transaction_rows import (
    company_dispatch_rows,
    warehouse_dispatch_rows,
)

from builders import company, dispatch, part, receipt, supplier


def _ledger_rows():
    snapshot = InventorySnapshot(
        parts=(part(10, "P-100", "Bearing"), part(11, "HX-9", "Gasket Seal")),
        suppliers=(supplier(1, "Acme Forge", "SUP-1"), supplier(2, "Bolt Works", "SUP-2")),
        companies=(company(5, 1, "Zenith Motors", "CMP-1"),),
        warehouse_dispatches=(
            receipt(1, 1, 10, 100, "DC-001", on=date(2024, 1, 5)),
            receipt(2, 2, 11, 50, "DC-777", on=date(2024, 2, 10)),
            receipt(3, 1, 11, 20, "DC-002", on=date(2024, 3, 15)),
        ),
        company_dispatches=(
            dispatch(1, 5, 1, 10, 10, on=date(2024, 1, 20)),
        ),
    )
    return build_stock_ledger(snapshot).rows


def _keys(rows):
    return [(r.supplier_id, r.part_id) for r in rows]


class TestMatching:

    def test_empty_filter_is_identity(self):
        rows = _ledger_rows()

        assert apply_filter(rows).to_list() == rows
        assert apply_filter(rows, LedgerFilter()).to_list() == rows
        assert LedgerFilter().is_empty()

    def test_blank_strings_mean_any(self):
        rows = _ledger_rows()

        assert apply_filter(rows, LedgerFilter(supplier="", part="")).to_list() == rows

    def test_supplier_matches_name_or_code_case_insensitive(self):
        rows = _ledger_rows()

        assert _keys(apply_filter(rows, LedgerFilter(supplier="acme"))) == [(1, 10), (1, 11)]
        assert _keys(apply_filter(rows, LedgerFilter(supplier="sup-2"))) == [(2, 11)]

    def test_part_matches_number_or_name(self):
        rows = _ledger_rows()

        assert _keys(apply_filter(rows, LedgerFilter(part="hx"))) == [(2, 11), (1, 11)]
        assert _keys(apply_filter(rows, LedgerFilter(part="bear"))) == [(1, 10)]

    def test_company_excludes_rows_without_company(self):
        rows = _ledger_rows()

        assert _keys(apply_filter(rows, LedgerFilter(company="zenith"))) == [(1, 10)]

    def test_dc_number_substring(self):
        rows = _ledger_rows()

        assert _keys(apply_filter(rows, LedgerFilter(dc_number="00"))) == [(1, 10), (1, 11)]

    def test_criteria_combine_with_and(self):
        rows = _ledger_rows()
        criteria = LedgerFilter(supplier="acme", part="gasket")

        assert _keys(apply_filter(rows, criteria)) == [(1, 11)]

    def test_no_match(self):
        assert apply_filter(_ledger_rows(), LedgerFilter(supplier="nobody")).to_list() == []


class TestDateRange:

    def test_bounds_are_inclusive(self):
        rows = _ledger_rows()
        criteria = LedgerFilter(date_from=date(2024, 1, 20), date_to=date(2024, 2, 10))

        # ledger rows are dated by their last movement
        assert _keys(apply_filter(rows, criteria)) == [(1, 10), (2, 11)]

    def test_open_ended_bounds(self):
        rows = _ledger_rows()

        assert _keys(apply_filter(rows, LedgerFilter(date_from=date(2024, 3, 1)))) == [(1, 11)]
        assert _keys(apply_filter(rows, LedgerFilter(date_to=date(2024, 1, 31)))) == [(1, 10)]

    def test_transaction_rows_use_their_own_date(self):
        snapshot = InventorySnapshot(
            parts=(part(10),),
            suppliers=(supplier(1),),
            warehouse_dispatches=(
                receipt(2, 1, 10, 5, "DC-B", on=date(2024, 4, 1)),
                receipt(1, 1, 10, 5, "DC-A", on=date(2024, 3, 1)),
            ),
        )
        rows = warehouse_dispatch_rows(snapshot)

        result = apply_filter(rows, LedgerFilter(date_from=date(2024, 3, 15)))

        assert [r.dc_number for r in result] == ["DC-B"]

    def test_item_without_date_fails_date_criteria(self):
        class Undated:
            supplier_name = "Acme"

        assert matches(Undated(), LedgerFilter(supplier="acme"))
        assert not matches(Undated(), LedgerFilter(date_from=date(2024, 1, 1)))


class TestFilteredView:

    def test_idempotent(self):
        criteria = LedgerFilter(supplier="acme")
        once = apply_filter(_ledger_rows(), criteria).to_list()

        assert apply_filter(once, criteria).to_list() == once

    def test_restartable(self):
        view = apply_filter(_ledger_rows(), LedgerFilter(supplier="acme"))

        assert list(view) == list(view)
        assert len(view.to_list()) == 2

    def test_one_shot_source_can_be_replayed(self):
        view = FilteredView(iter(_ledger_rows()), LedgerFilter(part="gasket"))

        assert len(list(view)) == 2
        assert len(list(view)) == 2

    def test_views_compose(self):
        rows = _ledger_rows()
        view = FilteredView(apply_filter(rows, LedgerFilter(supplier="acme")), LedgerFilter(part="bear"))

        assert _keys(view) == [(1, 10)]

    def test_reflects_source_changes(self):
        rows = _ledger_rows()
        view = apply_filter(rows, LedgerFilter(supplier="bolt"))
        assert len(view.to_list()) == 1

        rows.pop(1)

        assert view.to_list() == []

    def test_company_dispatch_rows_filter_by_company_code(self):
        snapshot = InventorySnapshot(
            parts=(part(10),),
            suppliers=(supplier(1),),
            companies=(company(5, 1, "Zenith Motors", "CMP-1"), company(6, 1, "Orbit Auto", "CMP-2")),
            company_dispatches=(
                dispatch(1, 5, 1, 10, 3),
                dispatch(2, 6, 1, 10, 4),
            ),
        )

        result = apply_filter(company_dispatch_rows(snapshot), LedgerFilter(company="cmp-2"))

        assert [r.id for r in result] == [2]

    def test_empty_criteria_skip_matching(self, monkeypatch):
        def fail(item, criteria):
            raise AssertionError("matches() called for an empty filter")

        monkeypatch.setattr("stock_tracker.services.ledger.filters.matches", fail)
        rows = _ledger_rows()
        view = apply_filter(rows, LedgerFilter(supplier="", dc_number=None))

        assert view.to_list() == rows
        assert list(view) == rows
