"""Tests for DOCX export: headings, list styles, tables, spacing and structural determinism."""

from io import BytesIO

from docx import Document
from docx.oxml.ns import qn

from thumbaudit.report.docx import render_docx_report, write_docx_report
from thumbaudit.report.parser import parse_report
from thumbaudit.schemas.models import ReportSection


def _open(docx_bytes: bytes):
    return Document(BytesIO(docx_bytes))


def _structure(doc) -> list:
    paragraphs = [(p.style.name, p.text) for p in doc.paragraphs]
    tables = [[[cell.text for cell in row.cells] for row in table.rows] for table in doc.tables]
    return [paragraphs, tables]


def test_headings_per_section(sample_report):
    doc = _open(render_docx_report(parse_report(sample_report)))
    headings = [p.text for p in doc.paragraphs if p.style.name == "Heading 2"]
    assert headings == ["Overall Verdict", "Scorecard", "Quick Wins", "Final Note"]


def test_list_styles(sample_report):
    doc = _open(render_docx_report(parse_report(sample_report)))
    bullets = [p.text for p in doc.paragraphs if p.style.name == "List Bullet"]
    numbered = [p.text for p in doc.paragraphs if p.style.name == "List Number"]
    assert bullets == ["Use bigger faces", "Cut the text to three words"]
    assert numbered == ["Test a bright background", "Add a curiosity gap"]


def test_table_section(sample_report):
    doc = _open(render_docx_report(parse_report(sample_report)))
    assert len(doc.tables) == 1
    rows = [[cell.text for cell in row.cells] for row in doc.tables[0].rows]
    assert rows == [
        ["Thumbnail", "Clarity", "Emotion"],
        ["Yours", "7", "5"],
        ["Competitor 1", "8", "9"],
    ]
    header = doc.tables[0].rows[0].cells[0].paragraphs[0]
    assert header.runs[0].font.bold


def test_ragged_table_is_padded():
    section = ReportSection(title="Scores", content="| A | B |\n|---|---|\n| 1 |\n| 2 | 3 | 4 |")
    doc = _open(render_docx_report([section]))
    rows = [[cell.text for cell in row.cells] for row in doc.tables[0].rows]
    assert rows == [["A", "B", ""], ["1", "", ""], ["2", "3", "4"]]


def test_ragged_table_header_row_is_fully_shaded():
    section = ReportSection(title="Scores", content="| A |\n|---|\n| 1 | 2 | 3 |")
    doc = _open(render_docx_report([section]))
    header = doc.tables[0].rows[0].cells
    assert [cell.text for cell in header] == ["A", "", ""]
    fills = [cell._tc.tcPr.find(qn("w:shd")).get(qn("w:fill")) for cell in header]
    assert fills == ["4A5568"] * 3
    assert all(cell.paragraphs[0].runs[0].font.bold for cell in header)


def test_spacer_after_each_section():
    sections = [ReportSection(title="One", content="text"), ReportSection(title="Two")]
    doc = _open(render_docx_report(sections))
    assert [(p.style.name, p.text) for p in doc.paragraphs] == [
        ("Heading 2", "One"),
        ("Normal", "text"),
        ("Normal", ""),
        ("Heading 2", "Two"),
        ("Normal", ""),
    ]


def test_blank_lines_dropped():
    doc = _open(render_docx_report([ReportSection(title="T", content="a\n\n\nb")]))
    assert [p.text for p in doc.paragraphs] == ["T", "a", "b", ""]


def test_numbered_detection_uses_raw_line():
    # Indented numbers are plain paragraphs, indented bullets are still bullets
    doc = _open(render_docx_report([ReportSection(title="T", content="  1. indented\n  - bullet")]))
    styles = [(p.style.name, p.text) for p in doc.paragraphs]
    assert ("Normal", "  1. indented") in styles
    assert ("List Bullet", "bullet") in styles


def test_identical_input_gives_identical_structure(sample_report):
    sections = parse_report(sample_report)
    first = _open(render_docx_report(sections))
    second = _open(render_docx_report(sections))
    assert _structure(first) == _structure(second)


def test_core_properties(sample_report):
    doc = _open(render_docx_report(parse_report(sample_report)))
    assert doc.core_properties.title == "YouTube Thumbnail Audit Report"


def test_write_docx_report(tmp_path, sample_report):
    path = tmp_path / "out" / "report.docx"
    write_docx_report(path, parse_report(sample_report))
    assert path.read_bytes().startswith(b"PK")


def _num_id(paragraph, doc):
    """numId a paragraph renders with: its own numPr if set, else its style's."""
    p_pr = paragraph._p.pPr
    if p_pr is not None and p_pr.numPr is not None and p_pr.numPr.numId is not None:
        return p_pr.numPr.numId.val
    style_pr = doc.styles[paragraph.style.name].element.pPr
    return style_pr.numPr.numId.val


def test_numbering_continues_across_sections():
    sections = [
        ReportSection(title="First", content="1. x"),
        ReportSection(title="Second", content="1. y"),
    ]
    doc = _open(render_docx_report(sections))
    numbered = [p for p in doc.paragraphs if p.style.name == "List Number"]
    assert [p.text for p in numbered] == ["x", "y"]
    # No per-paragraph numbering override, so both items share the style's one list
    for paragraph in numbered:
        p_pr = paragraph._p.pPr
        assert p_pr is None or p_pr.numPr is None
    num_ids = {_num_id(p, doc) for p in numbered}
    assert len(num_ids) == 1
    assert None not in num_ids
