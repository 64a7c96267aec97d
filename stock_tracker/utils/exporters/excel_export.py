# stock_tracker/utils/exporters/excel_export.py
from io import BytesIO
from typing import Any, Mapping, Sequence

from openpyxl import Workbook
from openpyxl.styles import Font

from stock_tracker.utils.exporters.export_file import ExportFile, XLSX_MEDIA_TYPE

# Excel rejects sheet titles longer than this
MAX_SHEET_TITLE = 31


def export_to_excel(
    records: Sequence[Mapping[str, Any]],
    filename: str,
    sheet_name: str = "Sheet1",
) -> ExportFile:
    """
    Build a single-sheet workbook from flat records.
    Column headers are the keys of the first record.
    """
    workbook = Workbook()
    sheet = workbook.active
    sheet.title = sheet_name[:MAX_SHEET_TITLE]

    if records:
        headers = list(records[0].keys())
        sheet.append(headers)
        for cell in sheet[1]:
            cell.font = Font(bold=True)

        for record in records:
            sheet.append([record.get(h) for h in headers])

        for idx, header in enumerate(headers, start=1):
            width = max(
                [len(str(header))] + [len(str(r.get(header) or "")) for r in records]
            )
            sheet.column_dimensions[sheet.cell(row=1, column=idx).column_letter].width = width + 2

    buffer = BytesIO()
    workbook.save(buffer)

    return ExportFile(
        filename=f"{filename}.xlsx",
        content=buffer.getvalue(),
        media_type=XLSX_MEDIA_TYPE,
    )
