"""HTML report: render each section's markdown body and wrap it in a styled page."""

from html import escape
from pathlib import Path
from typing import Sequence

import markdown

from thumbaudit.schemas.models import ReportSection

HTML_WRAPPER = """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8"/>
<meta name="viewport" content="width=device-width, initial-scale=1"/>
<title>YouTube Thumbnail Audit Report</title>
<style>
body {{ font-family: system-ui, sans-serif; max-width: 900px; margin: 0 auto; padding: 1rem; line-height: 1.5; }}
h2 {{ margin-top: 1.5rem; color: #4299e1; border-bottom: 2px solid #ddd; padding-bottom: 0.25rem; }}
table {{ border-collapse: collapse; width: 100%; }}
th, td {{ border: 1px solid #ddd; padding: 0.5rem; text-align: left; }}
th {{ background: #4a5568; color: #fff; }}
</style>
</head>
<body>
<h1>AI Audit Report</h1>
{body}
</body>
</html>
"""


def render_section_html(section: ReportSection) -> str:
    """Convert one section's content (markdown) to an HTML fragment; the title is not included."""
    if not section.content:
        return ""
    return markdown.markdown(section.content, extensions=["tables", "sane_lists"])


def render_sections_html(sections: Sequence[ReportSection]) -> list[tuple[str, str]]:
    """(title, content_html) pairs in report order, for templates that lay out titles themselves."""
    return [(section.title, render_section_html(section)) for section in sections]


def render_html_report(sections: Sequence[ReportSection]) -> str:
    """Render all sections into a standalone HTML document."""
    parts = []
    for title, body in render_sections_html(sections):
        parts.append(f"<section>\n<h2>{escape(title)}</h2>\n{body}\n</section>")
    return HTML_WRAPPER.format(body="\n".join(parts))


def write_html_report(output_path: str | Path, content: str) -> None:
    Path(output_path).parent.mkdir(parents=True, exist_ok=True)
    Path(output_path).write_text(content, encoding="utf-8")
