# stock_tracker/utils/exporters/pdf_export.py
from datetime import datetime
from io import BytesIO
from typing import Any, Mapping, Optional, Sequence

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4, landscape
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.platypus import SimpleDocTemplate, Paragraph, Spacer, Table, TableStyle

from stock_tracker.utils.exporters.export_file import ExportFile, PDF_MEDIA_TYPE

HEADER_FILL = colors.Color(66 / 255, 139 / 255, 202 / 255)
ALTERNATE_ROW_FILL = colors.Color(245 / 255, 245 / 255, 245 / 255)
NO_DATA_TEXT = "No data available"


def _cell(value: Any) -> str:
    return "" if value is None else str(value)


def export_to_pdf(
    records: Sequence[Mapping[str, Any]],
    filename: str,
    title: str = "Report",
    generated_at: Optional[datetime] = None,
) -> ExportFile:
    """
    Render flat records as a titled, paginated table report.
    """
    generated_at = generated_at or datetime.now()
    styles = getSampleStyleSheet()
    story = []

    # -----------------------------
    # HEADER
    # -----------------------------
    story.append(Paragraph(f"<b>{title}</b>", styles["Title"]))
    story.append(
        Paragraph(
            f"Generated on: {generated_at.strftime('%d-%m-%Y %H:%M:%S')}",
            styles["Normal"],
        )
    )
    story.append(Spacer(1, 12))

    # -----------------------------
    # BODY
    # -----------------------------
    if not records:
        story.append(Paragraph(NO_DATA_TEXT, styles["Normal"]))
    else:
        headers = list(records[0].keys())
        data = [headers] + [[_cell(r.get(h)) for h in headers] for r in records]

        table = Table(data, repeatRows=1)
        style = [
            ("BACKGROUND", (0, 0), (-1, 0), HEADER_FILL),
            ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
            ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
            ("FONTSIZE", (0, 0), (-1, -1), 8),
            ("GRID", (0, 0), (-1, -1), 0.5, colors.grey),
            ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
        ]
        for row_idx in range(2, len(data), 2):
            style.append(("BACKGROUND", (0, row_idx), (-1, row_idx), ALTERNATE_ROW_FILL))
        table.setStyle(TableStyle(style))
        story.append(table)

    # -----------------------------
    # GENERATE PDF
    # -----------------------------
    buffer = BytesIO()
    doc = SimpleDocTemplate(buffer, pagesize=landscape(A4), title=title)
    doc.build(story)

    return ExportFile(
        filename=f"{filename}.pdf",
        content=buffer.getvalue(),
        media_type=PDF_MEDIA_TYPE,
    )
