"""Report handling: section parsing plus HTML, PDF and DOCX rendering."""

from thumbaudit.report.docx import DOCX_FILENAME, render_docx_report, write_docx_report
from thumbaudit.report.html import render_html_report, render_sections_html, write_html_report
from thumbaudit.report.parser import is_table, parse_markdown_table, parse_report
from thumbaudit.report.pdf import PDF_FILENAME, render_pdf_report, write_pdf_report

__all__ = [
    "DOCX_FILENAME",
    "PDF_FILENAME",
    "is_table",
    "parse_markdown_table",
    "parse_report",
    "render_docx_report",
    "render_html_report",
    "render_pdf_report",
    "render_sections_html",
    "write_docx_report",
    "write_html_report",
    "write_pdf_report",
]
