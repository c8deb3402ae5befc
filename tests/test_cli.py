"""Tests for the typer CLI: audit, export and template commands."""

import pytest
from typer.testing import CliRunner

from thumbaudit import cli
from thumbaudit.errors import ConfigurationError
from thumbaudit.prompt.template import LANGUAGE_PLACEHOLDER

runner = CliRunner()


@pytest.fixture
def use_llm(monkeypatch):
    """Route provider_from_settings to the given fake provider."""

    def install(llm):
        monkeypatch.setattr(cli, "provider_from_settings", lambda settings, provider=None: llm)

    return install


def test_audit_writes_reports(tmp_path, screenshot_files, fake_llm, use_llm, sample_report):
    use_llm(fake_llm)
    out_dir = tmp_path / "out"
    result = runner.invoke(
        cli.app,
        [
            "audit",
            screenshot_files["own"],
            screenshot_files["c1"],
            screenshot_files["c2"],
            "--language",
            "Urdu",
            "--output",
            str(out_dir),
            "--format",
            "md,html,pdf,docx",
        ],
    )
    assert result.exit_code == 0, result.output
    assert (out_dir / "thumbnail-audit-report.md").read_text(encoding="utf-8") == sample_report
    assert (out_dir / "thumbnail-audit-report.html").exists()
    assert (out_dir / "thumbnail-audit-report.pdf").read_bytes().startswith(b"%PDF")
    assert (out_dir / "thumbnail-audit-report.docx").read_bytes().startswith(b"PK")
    prompt, images = fake_llm.calls[0]
    assert "for the report: Urdu" in prompt
    assert [img.filename for img in images] == ["own.png", "c1.jpg", "c2.png"]


def test_audit_custom_template(tmp_path, screenshot_files, fake_llm, use_llm):
    use_llm(fake_llm)
    template = tmp_path / "custom.txt"
    template.write_text("Short audit in {{language}}.", encoding="utf-8")
    result = runner.invoke(
        cli.app,
        [
            "audit",
            screenshot_files["own"],
            screenshot_files["c1"],
            screenshot_files["c2"],
            screenshot_files["c3"],
            "--template",
            str(template),
            "--output",
            str(tmp_path / "out"),
            "--format",
            "md",
        ],
    )
    assert result.exit_code == 0, result.output
    assert fake_llm.calls[0][0].startswith("Short audit in ")
    assert len(fake_llm.calls[0][1]) == 4


def test_audit_not_enough_screenshots(tmp_path, screenshot_files, fake_llm, use_llm):
    use_llm(fake_llm)
    result = runner.invoke(
        cli.app,
        ["audit", screenshot_files["own"], screenshot_files["c1"], "--output", str(tmp_path / "out")],
    )
    assert result.exit_code == 1
    assert "Invalid number of screenshots" in result.output
    assert fake_llm.calls == []


def test_audit_missing_file(tmp_path, screenshot_files, fake_llm, use_llm):
    use_llm(fake_llm)
    result = runner.invoke(
        cli.app,
        [
            "audit",
            str(tmp_path / "missing.png"),
            screenshot_files["c1"],
            screenshot_files["c2"],
            "--output",
            str(tmp_path / "out"),
        ],
    )
    assert result.exit_code == 1
    assert "Screenshot not found" in result.output


def test_audit_provider_failure(tmp_path, screenshot_files, failing_llm, use_llm):
    use_llm(failing_llm)
    result = runner.invoke(
        cli.app,
        [
            "audit",
            screenshot_files["own"],
            screenshot_files["c1"],
            screenshot_files["c2"],
            "--output",
            str(tmp_path / "out"),
        ],
    )
    assert result.exit_code == 1
    assert "Failed to generate audit report" in result.output


def test_audit_missing_api_key(tmp_path, screenshot_files, monkeypatch):
    def no_key(settings, provider=None):
        raise ConfigurationError("API key not configured for provider 'gemini'.")

    monkeypatch.setattr(cli, "provider_from_settings", no_key)
    result = runner.invoke(
        cli.app,
        [
            "audit",
            screenshot_files["own"],
            screenshot_files["c1"],
            screenshot_files["c2"],
            "--output",
            str(tmp_path / "out"),
        ],
    )
    assert result.exit_code == 1
    assert "API key not configured" in result.output


def test_export_saved_report(tmp_path, report_file):
    out_dir = tmp_path / "exported"
    result = runner.invoke(cli.app, ["export", str(report_file), "--output", str(out_dir)])
    assert result.exit_code == 0, result.output
    assert (out_dir / "thumbnail-audit-report.pdf").exists()
    assert (out_dir / "thumbnail-audit-report.docx").exists()
    assert not (out_dir / "thumbnail-audit-report.md").exists()


def test_export_missing_report(tmp_path):
    result = runner.invoke(cli.app, ["export", str(tmp_path / "none.md")])
    assert result.exit_code == 1


def test_template_command():
    result = runner.invoke(cli.app, ["template"])
    assert result.exit_code == 0
    assert LANGUAGE_PLACEHOLDER in result.output
