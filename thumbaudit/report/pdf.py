"""PDF report: draw report sections onto A4 pages with reportlab."""

from __future__ import annotations

import logging
from io import BytesIO
from pathlib import Path
from typing import Sequence
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.enums import TA_LEFT
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle
from reportlab.lib.utils import simpleSplit
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont
from reportlab.pdfgen import canvas
from reportlab.platypus import Paragraph, Table, TableStyle

from thumbaudit.errors import ExportError
from thumbaudit.report.parser import is_table, parse_markdown_table
from thumbaudit.schemas.models import MarkdownTable, ReportSection

logger = logging.getLogger(__name__)

PDF_FILENAME = "thumbnail-audit-report.pdf"
PDF_MEDIA_TYPE = "application/pdf"

MARGIN = 40
SECTION_GAP = 20
TITLE_FONT_SIZE = 16
TITLE_ADVANCE = 20
BODY_FONT_SIZE = 10
LINE_HEIGHT = 12
TABLE_FONT_SIZE = 8
TABLE_PADDING = 3
TABLE_GAP = 10

HEADER_FILL = colors.HexColor("#4B5563")
STRIPE_FILL = colors.HexColor("#F3F4F6")

_CUSTOM_FONT = "ThumbAuditReport"


def _register_font(font_path: str | Path | None) -> tuple[str, str]:
    """Return (regular, bold) font names, registering *font_path* when given."""
    if not font_path:
        return "Helvetica", "Helvetica-Bold"
    path = Path(font_path)
    if not path.exists():
        raise FileNotFoundError(f"PDF font not found: {path}")
    pdfmetrics.registerFont(TTFont(_CUSTOM_FONT, str(path)))
    return _CUSTOM_FONT, _CUSTOM_FONT


class _PdfCursor:
    """Tracks the vertical position (distance from the top edge) across pages."""

    def __init__(self, pdf: canvas.Canvas, regular_font: str, bold_font: str):
        self.pdf = pdf
        self.page_width, self.page_height = A4
        self.regular_font = regular_font
        self.bold_font = bold_font
        self.y = MARGIN

    @property
    def printable_width(self) -> float:
        return self.page_width - 2 * MARGIN

    @property
    def bottom(self) -> float:
        return self.page_height - MARGIN

    @property
    def remaining(self) -> float:
        return self.bottom - self.y

    def new_page(self) -> None:
        self.pdf.showPage()
        self.y = MARGIN

    def break_if_full(self) -> None:
        if self.y > self.bottom:
            self.new_page()

    def draw_line(self, text: str, font: str, size: int, advance: float) -> None:
        self.break_if_full()
        self.pdf.setFont(font, size)
        self.pdf.drawString(MARGIN, self.page_height - self.y, text)
        self.y += advance

    def draw_title(self, title: str) -> None:
        for piece in simpleSplit(title, self.bold_font, TITLE_FONT_SIZE, self.printable_width) or [""]:
            self.draw_line(piece, self.bold_font, TITLE_FONT_SIZE, TITLE_ADVANCE)

    def draw_text(self, content: str) -> None:
        for line in content.split("\n"):
            wrapped = simpleSplit(line, self.regular_font, BODY_FONT_SIZE, self.printable_width)
            for piece in wrapped or [""]:
                self.draw_line(piece, self.regular_font, BODY_FONT_SIZE, LINE_HEIGHT)

    def draw_table(self, data: MarkdownTable) -> None:
        pending = [self._build_table(data)]
        while pending:
            flowable = pending.pop(0)
            _, height = flowable.wrapOn(self.pdf, self.printable_width, self.remaining)
            if height <= self.remaining:
                flowable.drawOn(self.pdf, MARGIN, self.page_height - self.y - height)
                self.y += height
                continue
            parts = flowable.split(self.printable_width, self.remaining)
            if len(parts) >= 2:
                pending = list(parts) + pending
            elif self.y > MARGIN:
                self.new_page()
                pending.insert(0, flowable)
            else:
                # A single row taller than a whole page: draw it and let it overflow
                flowable.drawOn(self.pdf, MARGIN, self.page_height - self.y - height)
                self.y += height
        self.y += TABLE_GAP

    def _build_table(self, data: MarkdownTable) -> Table:
        ncols = data.column_count
        rows = [data.head] + data.body
        head_style = ParagraphStyle(
            "TableHead",
            fontName=self.bold_font,
            fontSize=TABLE_FONT_SIZE,
            leading=TABLE_FONT_SIZE + 2,
            textColor=colors.white,
            alignment=TA_LEFT,
        )
        cell_style = ParagraphStyle(
            "TableCell",
            fontName=self.regular_font,
            fontSize=TABLE_FONT_SIZE,
            leading=TABLE_FONT_SIZE + 2,
            alignment=TA_LEFT,
        )
        cells = []
        for i, row in enumerate(rows):
            style = head_style if i == 0 else cell_style
            padded = list(row) + [""] * (ncols - len(row))
            cells.append([Paragraph(escape(text), style) for text in padded])

        table = Table(cells, colWidths=self._column_widths(rows, ncols), repeatRows=1)
        commands = [
            ("BACKGROUND", (0, 0), (-1, 0), HEADER_FILL),
            ("VALIGN", (0, 0), (-1, -1), "TOP"),
            ("LEFTPADDING", (0, 0), (-1, -1), TABLE_PADDING),
            ("RIGHTPADDING", (0, 0), (-1, -1), TABLE_PADDING),
            ("TOPPADDING", (0, 0), (-1, -1), TABLE_PADDING),
            ("BOTTOMPADDING", (0, 0), (-1, -1), TABLE_PADDING),
        ]
        if data.body:
            commands.append(("ROWBACKGROUNDS", (0, 1), (-1, -1), [colors.white, STRIPE_FILL]))
        table.setStyle(TableStyle(commands))
        return table

    def _column_widths(self, rows: list[list[str]], ncols: int) -> list[float]:
        """Natural width of each column's widest cell, scaled down to fit the page."""
        natural = [2 * TABLE_PADDING + 1.0] * ncols
        for i, row in enumerate(rows):
            font = self.bold_font if i == 0 else self.regular_font
            for col, text in enumerate(row):
                width = pdfmetrics.stringWidth(text, font, TABLE_FONT_SIZE) + 2 * TABLE_PADDING + 1
                natural[col] = max(natural[col], width)
        total = sum(natural)
        if total <= self.printable_width:
            return natural
        scale = self.printable_width / total
        return [w * scale for w in natural]


def render_pdf_report(sections: Sequence[ReportSection], font_path: str | Path | None = None) -> bytes:
    """
    Render sections to PDF bytes.

    Titles are bold headings; pipe tables become shaded-header grids; everything else is
    wrapped plain text. Pages break whenever the cursor passes the bottom margin.
    Output is byte-stable for identical input (reportlab invariant mode).
    Raises ExportError if rendering fails.
    """
    buffer = BytesIO()
    try:
        regular, bold = _register_font(font_path)
        pdf = canvas.Canvas(buffer, pagesize=A4, invariant=1)
        pdf.setTitle("YouTube Thumbnail Audit Report")
        cursor = _PdfCursor(pdf, regular, bold)

        for index, section in enumerate(sections):
            if index > 0:
                cursor.y += SECTION_GAP
            cursor.draw_title(section.title)
            if not section.content:
                continue
            table = parse_markdown_table(section.content) if is_table(section.content) else None
            if table is not None and not table.is_empty:
                cursor.draw_table(table)
            else:
                cursor.draw_text(section.content)

        pdf.save()
    except Exception as e:
        raise ExportError(f"PDF generation failed: {e}") from e
    return buffer.getvalue()


def write_pdf_report(
    output_path: str | Path,
    sections: Sequence[ReportSection],
    font_path: str | Path | None = None,
) -> None:
    """Render sections and write the PDF to *output_path*."""
    Path(output_path).parent.mkdir(parents=True, exist_ok=True)
    pdf_bytes = render_pdf_report(sections, font_path=font_path)
    Path(output_path).write_bytes(pdf_bytes)
    logger.info("Wrote PDF report (%d bytes) to %s", len(pdf_bytes), output_path)
