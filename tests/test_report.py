"""Tests for report settings and rendering."""

import json

import pytest
from colorama import Style

from argscope.analysis.core import analyze
from argscope.report.config import FALLBACK_SETTINGS, SettingsManager
from argscope.report.renderer import (
    APP_AUTHOR,
    APP_VERSION,
    APP_YEAR,
    ReportRenderer,
    contains_help,
    contains_version,
)

PLAIN = {**FALLBACK_SETTINGS, "color": False, "emoji": False}


class TestSettingsManager:
    def test_packaged_defaults(self):
        settings = SettingsManager().load_settings()
        assert settings["banner_width"] == 60
        assert settings["section_width"] == 40
        assert settings["emoji"] is True

    def test_overrides_applied_and_none_ignored(self):
        settings = SettingsManager().load_settings({"color": False, "emoji": None})
        assert settings["color"] is False
        assert settings["emoji"] is True

    def test_unknown_override_rejected(self):
        with pytest.raises(ValueError, match="Unknown setting"):
            SettingsManager().load_settings({"colour": False})

    @pytest.mark.parametrize(
        "override",
        [{"label_width": 0}, {"banner_width": "60"}, {"section_width": True}, {"average_precision": -1}],
    )
    def test_invalid_values_rejected(self, override):
        with pytest.raises(ValueError):
            SettingsManager().load_settings(override)

    def test_missing_defaults_file_uses_fallbacks(self, tmp_path):
        settings = SettingsManager(base_path=tmp_path).load_settings()
        assert settings == FALLBACK_SETTINGS

    def test_defaults_file_with_comments(self, tmp_path):
        (tmp_path / "defaults.jsonc").write_text(
            '{\n  // narrower\n  "label_width": 8,\n  "ignored": 1\n}\n', encoding="utf-8"
        )
        settings = SettingsManager(base_path=tmp_path).load_settings()
        assert settings["label_width"] == 8
        assert "ignored" not in settings

    def test_unparseable_defaults_file(self, tmp_path):
        (tmp_path / "defaults.jsonc").write_text("{ not json", encoding="utf-8")
        with pytest.raises(IOError, match="Failed to parse"):
            SettingsManager(base_path=tmp_path).load_settings()

    def test_defaults_file_must_be_object(self, tmp_path):
        (tmp_path / "defaults.jsonc").write_text(json.dumps([1, 2]), encoding="utf-8")
        with pytest.raises(IOError, match="JSON object"):
            SettingsManager(base_path=tmp_path).load_settings()


class TestControlTokens:
    def test_help_tokens(self):
        assert contains_help(["a", "--help"])
        assert contains_help(["-h"])
        assert not contains_help(["--helpme", "h"])

    def test_version_tokens(self):
        assert contains_version(["x", "-v"])
        assert contains_version(["--version"])
        assert not contains_version(["-vv"])


class TestReportRenderer:
    def test_full_report(self):
        lines = ReportRenderer(PLAIN).render(
            analyze(["--verbose", "-n", "5", "--output=file.txt", "data.csv"])
        )
        text = "\n".join(lines)

        assert lines[0] == "Processing 5 command-line argument(s)..."
        assert "  [1] (Long Flag)     --verbose" in lines
        assert "  [4] (Long Option)   --output=file.txt" in lines
        assert "  verbose         : enabled" in lines
        assert "  output          : file.txt" in lines
        assert "  [2] data.csv" in lines
        assert "  Average Length      : 7.4 characters" in lines
        assert '  Longest Argument    : "--output=file.txt" (17 chars)' in lines
        assert '  Shortest Argument   : "5" (1 chars)' in lines
        assert "    Valid Numbers  : 1" in lines
        assert "    .csv           : 1" in lines
        assert "    Integers       : 1" in lines
        assert "Valid Emails" not in text
        assert "Booleans" not in text

    def test_empty_sections_omitted(self):
        text = "\n".join(ReportRenderer(PLAIN).render(analyze(["hello"])))
        assert "Parsed Flags:" not in text
        assert "Parsed Options:" not in text
        assert "Validation Results:" not in text
        assert "File Extensions:" not in text
        assert "Positional Arguments:" in text
        assert "Case Patterns:" in text

    def test_emoji_decoration(self):
        settings = {**PLAIN, "emoji": True}
        lines = ReportRenderer(settings).render(analyze(["user@example.com"]))
        assert lines[0].startswith("🔄 Processing")
        assert "    📧 Valid Emails   : 1" in lines

    def test_color_wraps_headings(self):
        settings = {**PLAIN, "color": True}
        banner = ReportRenderer(settings).banner()
        assert banner[1].startswith(Style.BRIGHT)
        assert banner[1].endswith(Style.RESET_ALL)

    def test_validation_section_needs_a_match(self):
        result = analyze(["plain"])
        assert not result.validation.any_match
        text = "\n".join(ReportRenderer(PLAIN).render(result))
        assert "Validation Results:" not in text

    def test_plain_output_has_no_ansi(self):
        lines = ReportRenderer(PLAIN).render(analyze(["-x", "A"]))
        assert not any("\x1b[" in line for line in lines)

    def test_static_text(self):
        renderer = ReportRenderer(PLAIN)
        assert renderer.banner()[0] == "=" * 60
        assert f"Version: {APP_VERSION}" in renderer.version()
        assert f"Author: {APP_AUTHOR}" in renderer.version()
        assert f"Year: {APP_YEAR}" in renderer.version()
        assert "FEATURES:" in renderer.help()
        assert any("--option=value" in line for line in renderer.help())
        assert renderer.usage()[0] == "No command-line arguments provided."
