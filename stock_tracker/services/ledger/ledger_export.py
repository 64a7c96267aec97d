# stock_tracker/services/ledger/ledger_export.py

from typing import Dict, Iterable, List

from stock_tracker.schemas.ledger.stock_ledger_schemas import StockLedgerRow
from stock_tracker.utils.exporters.excel_export import export_to_excel
from stock_tracker.utils.exporters.export_file import ExportFile
from stock_tracker.utils.exporters.pdf_export import export_to_pdf

LEDGER_FILENAME = "stock-ledger"
LEDGER_SHEET_NAME = "Stock Ledger"
LEDGER_REPORT_TITLE = "Stock Ledger Report"


def ledger_export_records(rows: Iterable[StockLedgerRow]) -> List[Dict[str, object]]:
    return [
        {
            "Part Number": row.part_number,
            "Part Name": row.part_name,
            "Running Number": row.running_number,
            "DC Number": row.dc_number,
            "Total Sent to Supplier": row.total_sent_to_supplier,
            "Total Sent to Company": row.total_sent_to_company,
            "Available Quantity": row.available_quantity,
            "Supplier": row.supplier_name,
            "Company": row.company_name or "-",
        }
        for row in rows
    ]


def export_ledger_excel(rows: Iterable[StockLedgerRow]) -> ExportFile:
    return export_to_excel(ledger_export_records(rows), LEDGER_FILENAME, LEDGER_SHEET_NAME)


def export_ledger_pdf(rows: Iterable[StockLedgerRow]) -> ExportFile:
    return export_to_pdf(ledger_export_records(rows), LEDGER_FILENAME, LEDGER_REPORT_TITLE)
