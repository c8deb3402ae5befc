"""DOCX report: map report sections to Word headings, lists, paragraphs and tables."""

from __future__ import annotations

import logging
import re
from io import BytesIO
from pathlib import Path
from typing import Sequence

from docx import Document
from docx.document import Document as DocxDocument
from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.oxml import OxmlElement
from docx.oxml.ns import qn
from docx.shared import Pt, RGBColor

from thumbaudit.errors import ExportError
from thumbaudit.report.parser import is_table, parse_markdown_table
from thumbaudit.schemas.models import MarkdownTable, ReportSection

logger = logging.getLogger(__name__)

DOCX_FILENAME = "thumbnail-audit-report.docx"
DOCX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"

HEADING_COLOR = RGBColor(0x42, 0x99, 0xE1)
HEADER_FILL = "4A5568"

BULLET_MARKERS = ("- ", "* ")
NUMBERED_RE = re.compile(r"^\d+\.\s")


def _configure_styles(doc: DocxDocument) -> None:
    heading = doc.styles["Heading 2"]
    heading.font.size = Pt(16)
    heading.font.bold = True
    heading.font.color.rgb = HEADING_COLOR


def _shade_cell(cell, fill: str) -> None:
    tc_pr = cell._tc.get_or_add_tcPr()
    shd = OxmlElement("w:shd")
    shd.set(qn("w:val"), "clear")
    shd.set(qn("w:color"), "auto")
    shd.set(qn("w:fill"), fill)
    tc_pr.append(shd)


def _set_full_width(table) -> None:
    tbl_pr = table._tbl.tblPr
    tbl_w = tbl_pr.find(qn("w:tblW"))
    if tbl_w is None:
        tbl_w = OxmlElement("w:tblW")
        tbl_pr.append(tbl_w)
    tbl_w.set(qn("w:type"), "pct")
    tbl_w.set(qn("w:w"), "5000")


def _add_table(doc: DocxDocument, data: MarkdownTable) -> None:
    ncols = data.column_count
    table = doc.add_table(rows=1 + len(data.body), cols=ncols)
    table.style = "Table Grid"
    _set_full_width(table)

    header_cells = table.rows[0].cells
    for col in range(ncols):
        cell = header_cells[col]
        cell.text = data.head[col] if col < len(data.head) else ""
        _shade_cell(cell, HEADER_FILL)
        paragraph = cell.paragraphs[0]
        paragraph.alignment = WD_ALIGN_PARAGRAPH.CENTER
        for run in paragraph.runs:
            run.font.bold = True
            run.font.color.rgb = RGBColor(0xFF, 0xFF, 0xFF)

    for row_index, row in enumerate(data.body, start=1):
        cells = table.rows[row_index].cells
        for col, text in enumerate(row):
            cells[col].text = text


def _add_lines(doc: DocxDocument, content: str) -> None:
    # Each line is classified on its own; List Number shares one sequence document-wide
    for line in content.split("\n"):
        stripped = line.strip()
        if stripped.startswith(BULLET_MARKERS):
            doc.add_paragraph(stripped[2:], style="List Bullet")
        elif NUMBERED_RE.match(line):
            doc.add_paragraph(NUMBERED_RE.sub("", line, count=1), style="List Number")
        elif stripped:
            doc.add_paragraph(line)


def build_docx_document(sections: Sequence[ReportSection]) -> DocxDocument:
    """Build the python-docx Document for *sections* without saving it."""
    doc = Document()
    doc.core_properties.title = "YouTube Thumbnail Audit Report"
    doc.core_properties.author = "thumbaudit"
    _configure_styles(doc)

    for section in sections:
        doc.add_heading(section.title, level=2)
        table = parse_markdown_table(section.content) if is_table(section.content) else None
        if table is not None and not table.is_empty:
            _add_table(doc, table)
        else:
            _add_lines(doc, section.content)
        doc.add_paragraph("")
    return doc


def render_docx_report(sections: Sequence[ReportSection]) -> bytes:
    """Render sections to DOCX bytes. Raises ExportError if rendering fails."""
    buffer = BytesIO()
    try:
        build_docx_document(sections).save(buffer)
    except Exception as e:
        raise ExportError(f"DOCX generation failed: {e}") from e
    return buffer.getvalue()


def write_docx_report(output_path: str | Path, sections: Sequence[ReportSection]) -> None:
    """Render sections and write the DOCX to *output_path*."""
    Path(output_path).parent.mkdir(parents=True, exist_ok=True)
    docx_bytes = render_docx_report(sections)
    Path(output_path).write_bytes(docx_bytes)
    logger.info("Wrote DOCX report (%d bytes) to %s", len(docx_bytes), output_path)
