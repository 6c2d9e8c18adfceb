"""Tests for the textmetrics CLI commands."""
from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from textmetrics import __version__
from textmetrics.cli.main import cli

ARIAL = {"fontBoundingBoxAscent": 1854, "fontBoundingBoxDescent": 434, "hangingBaseline": 1556}

TYPOGRAPHY_CSS = """
.p1 { font: 16px/24px Arial, sans-serif; }
@media (max-width: 1499px) {
    .lang-ko .p1 { font-size: 14px; line-height: 20px; font-family: Arial; }
}
.em { font-size: 1em; line-height: 1.5; }
"""

SCSS_SOURCE = """
@import '../common/_base';
.panel {
    padding: {$p2, .p2, .l1} 0 {$p1-5, .p2, .l2};
    padding-bottom: $p2 /*{$p2, .p1, .bcaps}*/;
    margin: 0;
    @include adaptive-padding-margin(padding-top, $map, 0/*{0, .p1, l3}*/);
}
"""


@pytest.fixture
def css_file(tmp_path):
    path = tmp_path / "typography.css"
    path.write_text(TYPOGRAPHY_CSS, encoding="utf-8")
    return path


@pytest.fixture
def metrics_file(tmp_path):
    path = tmp_path / "font-metrics.json"
    path.write_text(json.dumps({"metrics": {"Arial": ARIAL}}), encoding="utf-8")
    return path


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


class TestCLIGroup:
    def test_cli_group_help(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "build" in result.output
        assert "scan" in result.output

    def test_version(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


# ---------------------------------------------------------------------------
# build command
# ---------------------------------------------------------------------------


class TestBuildCommand:
    def test_build_help_shows_options(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["build", "--help"])
        assert result.exit_code == 0
        assert "--metrics" in result.output
        assert "--dot-replacement" in result.output
        assert "--output" in result.output
        assert "--strict" in result.output

    def test_build_prints_json(self, css_file, metrics_file) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["build", str(css_file), "--metrics", str(metrics_file)])
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert list(data) == ["%dot%p1"]
        top, media = data["%dot%p1"]
        assert top == {
            "atRule": None,
            "selector": "",
            "className": ".p1",
            "delta": 6.0,
            "baseDelta": 4.0,
            "decreaseBy": 2.0,
            "fontSize": 16,
            "lineHeight": 24,
        }
        assert media["atRule"] == {"name": "media", "params": "(max-width: 1499px)"}
        assert media["selector"] == ".lang-ko"
        assert media["delta"] == 5.0

    def test_build_to_output_file(self, tmp_path, css_file) -> None:
        out = tmp_path / "corrections.json"
        runner = CliRunner()
        result = runner.invoke(
            cli, ["build", str(css_file), "--dot-replacement", "__", "-o", str(out)]
        )
        assert result.exit_code == 0, result.output
        assert "Wrote 1 correction path(s)" in result.output
        payload = out.read_text(encoding="utf-8")
        assert '"delta": 4,' in payload
        data = json.loads(payload)
        assert [e["delta"] for e in data["__p1"]] == [4, 3]

    def test_build_missing_metrics_file_is_not_fatal(self, tmp_path, css_file) -> None:
        out = tmp_path / "corrections.json"
        runner = CliRunner()
        result = runner.invoke(
            cli,
            ["build", str(css_file), "--metrics", str(tmp_path / "absent.json"), "-o", str(out)],
        )
        assert result.exit_code == 0
        data = json.loads(out.read_text(encoding="utf-8"))
        assert data["%dot%p1"][0]["decreaseBy"] == 0

    def test_build_multiple_files(self, tmp_path, css_file) -> None:
        extra = tmp_path / "extra.css"
        extra.write_text(".p1 { font: 20px/30px Arial; }", encoding="utf-8")
        runner = CliRunner()
        result = runner.invoke(cli, ["build", str(css_file), str(extra)])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert [e["fontSize"] for e in data["%dot%p1"]] == [16, 14, 20]

    def test_build_strict_parse_error(self, tmp_path) -> None:
        bad = tmp_path / "bad.css"
        bad.write_text(".a { color red; }", encoding="utf-8")
        runner = CliRunner()
        result = runner.invoke(cli, ["build", "--strict", str(bad)])
        assert result.exit_code == 1
        assert "Parse error" in result.output

    def test_build_requires_files(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["build"])
        assert result.exit_code != 0


# ---------------------------------------------------------------------------
# scan command
# ---------------------------------------------------------------------------


class TestScanCommand:
    def test_scan_lists_placeholders(self, tmp_path) -> None:
        source = tmp_path / "panel.scss"
        source.write_text(SCSS_SOURCE, encoding="utf-8")
        runner = CliRunner()
        result = runner.invoke(cli, ["scan", str(source)])
        assert result.exit_code == 0, result.output
        lines = result.output.splitlines()
        assert "Declarations: 2" in lines
        assert "  padding: {$p2, .p2, .l1} 0 {$p1-5, .p2, .l2}  groups=2" in lines
        assert "    {$p1-5, .p2, .l2}" in lines
        assert "  padding-bottom: {$p2, .p1, .bcaps}  groups=1" in lines
        assert "At-rules: 1" in lines
        assert "  @include  replace=0/*{0, .p1, l3}*/" in lines

    def test_scan_without_placeholders(self, tmp_path) -> None:
        source = tmp_path / "plain.css"
        source.write_text(".a { margin: 0; }", encoding="utf-8")
        runner = CliRunner()
        result = runner.invoke(cli, ["scan", str(source)])
        assert result.exit_code == 0
        assert "Declarations: 0" in result.output
        assert "At-rules: 0" in result.output

    def test_scan_missing_file(self, tmp_path) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["scan", str(tmp_path / "nope.scss")])
        assert result.exit_code != 0
