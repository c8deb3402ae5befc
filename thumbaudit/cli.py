"""CLI entry-point: run a thumbnail audit and export the report."""

from pathlib import Path
from typing import Sequence

import typer
from rich.console import Console

from thumbaudit.audit.requester import generate_audit_report
from thumbaudit.config import Settings, get_settings
from thumbaudit.errors import (
    ConfigurationError,
    ExportError,
    ReportGenerationError,
    ValidationError,
)
from thumbaudit.ingest.screenshots import load_screenshot
from thumbaudit.llm import provider_from_settings
from thumbaudit.prompt.audit_template import DEFAULT_AUDIT_TEMPLATE
from thumbaudit.prompt.template import load_template
from thumbaudit.report.docx import DOCX_FILENAME, write_docx_report
from thumbaudit.report.html import render_html_report, write_html_report
from thumbaudit.report.parser import parse_report
from thumbaudit.report.pdf import PDF_FILENAME, write_pdf_report
from thumbaudit.schemas.models import ReportSection

app = typer.Typer(help="AI YouTube Thumbnail Auditor")

REPORT_BASENAME = "thumbnail-audit-report"


def _parse_formats(format: str) -> list[str]:
    return [f.strip().lower() for f in format.split(",") if f.strip()]


def _write_outputs(
    console: Console,
    settings: Settings,
    raw_report: str,
    sections: Sequence[ReportSection],
    out_dir: Path,
    formats: list[str],
) -> None:
    if "md" in formats:
        md_path = out_dir / f"{REPORT_BASENAME}.md"
        md_path.write_text(raw_report, encoding="utf-8")
        console.print(f"Wrote {md_path}")
    if "html" in formats:
        html_path = out_dir / f"{REPORT_BASENAME}.html"
        write_html_report(html_path, render_html_report(sections))
        console.print(f"Wrote {html_path}")
    if "pdf" in formats:
        pdf_path = out_dir / PDF_FILENAME
        write_pdf_report(pdf_path, sections, font_path=settings.pdf_font_path)
        console.print(f"Wrote {pdf_path}")
    if "docx" in formats:
        docx_path = out_dir / DOCX_FILENAME
        write_docx_report(docx_path, sections)
        console.print(f"Wrote {docx_path}")


@app.command()
def audit(
    own: str = typer.Argument(..., help="Screenshot of your channel's 'Most Popular' videos"),
    competitors: list[str] = typer.Argument(..., help="2 or 3 competitor screenshots"),
    language: str = typer.Option(None, help="Report language (default from THUMBAUDIT_DEFAULT_LANGUAGE)"),
    template: str = typer.Option(None, help="Custom .txt/.md audit template (default: built-in)"),
    provider: str = typer.Option(None, help="LLM provider: gemini | openai | anthropic (default from env)"),
    output: str = typer.Option(None, help="Output directory (default from THUMBAUDIT_OUTPUT_DIR or ./output)"),
    format: str = typer.Option("md,pdf,docx", help="Report formats: any of md, html, pdf, docx"),
):
    """Send your and your competitors' screenshots to the model and export the audit report."""
    console = Console()
    settings = get_settings()
    out_dir = Path(output) if output else settings.output_dir
    out_dir.mkdir(parents=True, exist_ok=True)
    formats = _parse_formats(format)

    try:
        own_image = load_screenshot(own)
        competitor_images = [load_screenshot(p) for p in competitors]
        audit_template = load_template(template) if template else DEFAULT_AUDIT_TEMPLATE
    except (FileNotFoundError, ValidationError) as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    try:
        llm = provider_from_settings(settings, provider)
    except (ConfigurationError, ValueError) as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    report_language = language or settings.thumbaudit_default_language
    console.print(f"Analyzing {1 + len(competitor_images)} screenshots ({report_language})...")
    try:
        raw_report = generate_audit_report(
            own_image, competitor_images, audit_template, report_language, llm
        )
    except (ValidationError, ReportGenerationError) as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    sections = parse_report(raw_report)
    console.print(f"Report has {len(sections)} sections. Writing report...")
    try:
        _write_outputs(console, settings, raw_report, sections, out_dir, formats)
    except ExportError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)
    console.print("[green]Done.[/green]")


@app.command()
def export(
    report_file: str = typer.Argument(..., help="Saved raw audit report (text/markdown)"),
    output: str = typer.Option(None, help="Output directory (default from THUMBAUDIT_OUTPUT_DIR or ./output)"),
    format: str = typer.Option("pdf,docx", help="Report formats: any of html, pdf, docx"),
):
    """Re-export a saved audit report without calling the model."""
    console = Console()
    settings = get_settings()
    report_path = Path(report_file)
    if not report_path.exists():
        console.print(f"[red]Error: report not found: {report_path}[/red]")
        raise typer.Exit(1)
    out_dir = Path(output) if output else settings.output_dir
    out_dir.mkdir(parents=True, exist_ok=True)

    raw_report = report_path.read_text(encoding="utf-8")
    sections = parse_report(raw_report)
    if not sections:
        console.print("[yellow]Warning: no sections found in report[/yellow]")
    formats = [f for f in _parse_formats(format) if f != "md"]
    try:
        _write_outputs(console, settings, raw_report, sections, out_dir, formats)
    except ExportError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)
    console.print("[green]Done.[/green]")


@app.command()
def template():
    """Print the built-in audit template."""
    typer.echo(DEFAULT_AUDIT_TEMPLATE)


if __name__ == "__main__":
    app()
