from typing import Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import Response

from stock_tracker.core.config import LEDGER_STRICT_REFERENCES, LEDGER_TIE_BREAK
from stock_tracker.core.exceptions import AppException
from stock_tracker.constants.error_codes import ErrorCode
from stock_tracker.routers.dependencies import get_snapshot, ledger_filter_params
from stock_tracker.schemas.ledger.filter_schemas import LedgerFilter
from stock_tracker.schemas.ledger.stock_ledger_schemas import (
    AvailabilityOut,
    LedgerTieBreak,
    StockLedgerData,
)
from stock_tracker.services.ledger.filters import apply_filter
from stock_tracker.services.ledger.ledger_export import export_ledger_excel, export_ledger_pdf
from stock_tracker.services.ledger.snapshot import InventorySnapshot
from stock_tracker.services.ledger.stock_ledger import build_stock_ledger, ledger_totals
from stock_tracker.utils.exporters.export_file import ExportFile
from stock_tracker.utils.response import APIResponse, success_response
from stock_tracker.utils.logger import get_logger

router = APIRouter(prefix="/stock-ledger", tags=["Stock Ledger"])
logger = get_logger(__name__)


def _tie_break_param(
    tie_break: Optional[LedgerTieBreak] = Query(
        None,
        description="How dc_number / company_name are chosen when several transactions feed a row",
    ),
) -> LedgerTieBreak:
    return tie_break or LedgerTieBreak(LEDGER_TIE_BREAK)


def _file_response(export: ExportFile) -> Response:
    return Response(
        content=export.content,
        media_type=export.media_type,
        headers={"Content-Disposition": export.content_disposition},
    )


# =========================
# LEDGER
# =========================
@router.get("/", response_model=APIResponse[StockLedgerData])
async def list_stock_ledger_api(
    snapshot: InventorySnapshot = Depends(get_snapshot),
    criteria: LedgerFilter = Depends(ledger_filter_params),
    tie_break: LedgerTieBreak = Depends(_tie_break_param),
    strict: Optional[bool] = Query(None, description="Report transactions left out of the ledger"),
):
    ledger = build_stock_ledger(snapshot, tie_break)
    items = apply_filter(ledger.rows, criteria).to_list()

    report_unresolved = LEDGER_STRICT_REFERENCES if strict is None else strict

    logger.info(
        "Stock ledger built",
        extra={
            "rows": len(ledger.rows),
            "filtered_rows": len(items),
            "unresolved": len(ledger.unresolved),
        },
    )

    return success_response(
        "Stock ledger fetched successfully",
        StockLedgerData(
            total=len(items),
            items=items,
            totals=ledger_totals(items),
            unresolved=ledger.unresolved if report_unresolved else None,
        ),
    )


# =========================
# AVAILABILITY
# =========================
@router.get("/availability", response_model=APIResponse[AvailabilityOut])
async def get_availability_api(
    supplier_id: Optional[int] = Query(None),
    part_id: Optional[int] = Query(None),
    snapshot: InventorySnapshot = Depends(get_snapshot),
):
    return success_response(
        "Availability fetched successfully",
        snapshot.availability(supplier_id, part_id),
    )


# =========================
# EXPORTS
# =========================
@router.get("/export/excel")
async def export_stock_ledger_excel_api(
    snapshot: InventorySnapshot = Depends(get_snapshot),
    criteria: LedgerFilter = Depends(ledger_filter_params),
    tie_break: LedgerTieBreak = Depends(_tie_break_param),
):
    rows = apply_filter(build_stock_ledger(snapshot, tie_break).rows, criteria).to_list()

    try:
        export = export_ledger_excel(rows)
    except Exception:
        logger.exception("Excel export failed", extra={"rows": len(rows)})
        raise AppException(500, "Error exporting Excel file", ErrorCode.EXPORT_FAILED)

    logger.info("Excel file exported", extra={"rows": len(rows)})
    return _file_response(export)


@router.get("/export/pdf")
async def export_stock_ledger_pdf_api(
    snapshot: InventorySnapshot = Depends(get_snapshot),
    criteria: LedgerFilter = Depends(ledger_filter_params),
    tie_break: LedgerTieBreak = Depends(_tie_break_param),
):
    rows = apply_filter(build_stock_ledger(snapshot, tie_break).rows, criteria).to_list()

    try:
        export = export_ledger_pdf(rows)
    except Exception:
        logger.exception("PDF export failed", extra={"rows": len(rows)})
        raise AppException(500, "Error exporting PDF file", ErrorCode.EXPORT_FAILED)

    logger.info("PDF file exported", extra={"rows": len(rows)})
    return _file_response(export)
