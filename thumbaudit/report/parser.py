"""Split the raw audit text into titled sections and pull pipe tables out of section bodies."""

from __future__ import annotations

import re

from thumbaudit.schemas.models import MarkdownTable, ReportSection

# A line holding only three or more hyphens (surrounding whitespace allowed)
HYPHEN_RULE_RE = re.compile(r"^[ \t]*-{3,}[ \t]*$", re.MULTILINE)


def parse_report(text: str | None) -> list[ReportSection]:
    """
    Split report text on hyphen-rule lines.

    The first line of each block is the section title, the rest is its content.
    Blank blocks are dropped; a single-line block becomes a title-only section.
    """
    if not text:
        return []
    normalized = text.replace("\r\n", "\n").replace("\r", "\n")
    blocks = [b.strip() for b in HYPHEN_RULE_RE.split(normalized)]

    sections: list[ReportSection] = []
    for block in blocks:
        if not block:
            continue
        title, sep, rest = block.partition("\n")
        section = ReportSection(title=title.strip(), content=rest.strip() if sep else "")
        if section.title or section.content:
            sections.append(section)
    return sections


def is_table(content: str) -> bool:
    return "|" in content and "---" in content


def _split_row(line: str) -> list[str]:
    # Leading/trailing pipes leave an empty first and last segment
    return [cell.strip() for cell in line.split("|")][1:-1]


def parse_markdown_table(content: str) -> MarkdownTable:
    """
    Parse a markdown pipe table.

    Only lines starting with "|" are considered. The first is the header, the second
    (alignment row) is skipped, the rest are body rows. Fewer than two pipe lines
    gives an empty table.
    """
    lines = [line for line in content.split("\n") if line.strip().startswith("|")]
    if len(lines) < 2:
        return MarkdownTable()
    head = _split_row(lines[0].strip())
    body = [_split_row(line.strip()) for line in lines[2:]]
    return MarkdownTable(head=head, body=body)
