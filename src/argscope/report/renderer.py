"""
renderer.py

Turns an AnalysisResult into the console report, and holds the static
help, version and usage text shown instead of a report.
"""

from __future__ import annotations

from typing import Any

from colorama import Fore, Style

from argscope.analysis.classifier import ArgumentClassifier
from argscope.analysis.models import AnalysisResult, TokenKind

APP_NAME = "argscope"
APP_TITLE = "Command-Line Argument Inspector"
APP_VERSION = "2.0.0"
APP_AUTHOR = "The argscope developers"
APP_YEAR = "2025"

HELP_TOKENS = ("--help", "-h")
VERSION_TOKENS = ("--version", "-v")

_KIND_COLORS = {
    TokenKind.LONG_OPTION: Fore.CYAN,
    TokenKind.LONG_FLAG: Fore.YELLOW,
    TokenKind.SHORT_FLAG: Fore.YELLOW,
    TokenKind.POSITIONAL: Fore.GREEN,
}


def contains_help(tokens: list[str]) -> bool:
    return any(t in HELP_TOKENS for t in tokens)


def contains_version(tokens: list[str]) -> bool:
    return any(t in VERSION_TOKENS for t in tokens)


class ReportRenderer:
    """
    Builds report lines from analysis results using display settings.
    """

    def __init__(self, settings: dict[str, Any]) -> None:
        self._settings = settings
        self._label_w = settings["label_width"]

    # --- Public API ---

    def banner(self) -> list[str]:
        rule = "=" * self._settings["banner_width"]
        return [rule, self._bright(f"    {APP_TITLE} v{APP_VERSION}"), rule]

    def render(self, result: AnalysisResult) -> list[str]:
        """Full report for a non-empty argument list."""
        lines: list[str] = []
        lines.append(
            f"{self._icon('🔄')}Processing {len(result.arguments)} command-line argument(s)..."
        )
        lines.append("")
        lines.extend(self._token_listing(result))
        lines.extend(self._parsed_sections(result))
        lines.extend(self._statistics_section(result))
        lines.extend(self._advanced_section(result))
        return lines

    def usage(self) -> list[str]:
        return [
            f"{self._icon('📝')}No command-line arguments provided.",
            "",
            f"{self._icon('💡')}Usage Examples:",
            f"   {APP_NAME} hello world",
            f"   {APP_NAME} --verbose -n 5 --output=file.txt data.csv",
            f"   {APP_NAME} --help",
            "",
            f"{self._icon('🔍')}Try running with --help for detailed usage information.",
        ]

    def help(self) -> list[str]:
        return [
            f"{self._icon('📖')}{APP_TITLE} - Help",
            "=" * self._settings["banner_width"],
            "",
            "DESCRIPTION:",
            "  Classifies command-line arguments into flags, options and positional",
            "  values, then reports statistics and pattern analysis for them.",
            "",
            "USAGE:",
            f"  {APP_NAME} [ARGUMENTS...]",
            f"  {APP_NAME} [TOOL OPTIONS] -- [ARGUMENTS...]",
            "",
            "FLAGS:",
            "  -h, --help          Show this help message and exit",
            "  -v, --version       Show version information and exit",
            "  -flag               Short flag (can be any name)",
            "  --flag              Long flag (can be any name)",
            "",
            "OPTIONS:",
            "  --option=value      Long option with value",
            "  --output=file.txt   Example: specify output file",
            "  --count=10          Example: specify count value",
            "",
            "TOOL OPTIONS (only before a '--' separator):",
            "  --no-color          Disable ANSI color codes in output",
            "  --plain             Disable emoji decoration",
            "  --debug             Log each analysis pass (DEBUG level)",
            "  -q, --quiet         Suppress non-errors (ERROR level)",
            "",
            "EXAMPLES:",
            f"  {APP_NAME} hello world",
            "    -> Process two positional arguments",
            "",
            f"  {APP_NAME} --verbose -q --output=result.txt data.csv",
            "    -> Process flags, options, and positional arguments",
            "",
            f"  {APP_NAME} user@email.com https://example.com 42 3.14",
            "    -> Analyze different data types and patterns",
            "",
            "FEATURES:",
            "  • Argument parsing and categorization",
            "  • Data type detection and validation",
            "  • Pattern recognition (emails, URLs, numbers)",
            "  • Statistical analysis of arguments",
            "  • File extension detection",
            "  • Case pattern analysis",
            "",
        ]

    def version(self) -> list[str]:
        return [
            f"{self._icon('📦')}{APP_TITLE}",
            f"Version: {APP_VERSION}",
            f"Author: {APP_AUTHOR}",
            f"Year: {APP_YEAR}",
            "",
            "A command-line argument inspector written in Python.",
        ]

    # --- Sections ---

    def _token_listing(self, result: AnalysisResult) -> list[str]:
        lines = self._heading("📋", "Command-Line Arguments:")
        for i, arg in enumerate(result.arguments, start=1):
            kind = ArgumentClassifier.classify(arg)
            label = self._paint(f"{kind.label:<{self._label_w}}", _KIND_COLORS[kind])
            lines.append(f"  [{i}] {label} {arg}")
        lines.append("")
        return lines

    def _parsed_sections(self, result: AnalysisResult) -> list[str]:
        lines: list[str] = []

        if result.flags:
            lines.extend(self._heading("🚩", "Parsed Flags:"))
            for name, value in result.flags.items():
                state = "enabled" if value else "disabled"
                lines.append(f"  {name:<{self._label_w}} : {state}")
            lines.append("")

        if result.options:
            lines.extend(self._heading("⚙️ ", "Parsed Options:"))
            for name, value in result.options.items():
                lines.append(f"  {name:<{self._label_w}} : {value}")
            lines.append("")

        if result.positional:
            lines.extend(self._heading("📍", "Positional Arguments:"))
            for i, arg in enumerate(result.positional, start=1):
                lines.append(f"  [{i}] {arg}")
            lines.append("")

        return lines

    def _statistics_section(self, result: AnalysisResult) -> list[str]:
        s = result.statistics
        precision = self._settings["average_precision"]
        lines = self._heading("📊", "Argument Analysis:")
        lines.extend(
            [
                f"  Total Arguments     : {s.total}",
                f"  Flags               : {s.flags}",
                f"  Options             : {s.options}",
                f"  Positional Args     : {s.positional}",
                f"  Average Length      : {s.average_length:.{precision}f} characters",
                f'  Longest Argument    : "{s.longest or ""}" ({s.longest_length} chars)',
                f'  Shortest Argument   : "{s.shortest or ""}" ({s.shortest_length} chars)',
                "",
            ]
        )
        return lines

    def _advanced_section(self, result: AnalysisResult) -> list[str]:
        lines = self._heading("🔍", "Advanced Features:")

        v = result.validation
        if v.any_match:
            lines.append("  Validation Results:")
            lines.extend(
                self._counts(
                    [
                        ("📧", "Valid Emails", v.emails),
                        ("🌐", "Valid URLs", v.urls),
                        ("🔢", "Valid Numbers", v.numbers),
                    ]
                )
            )

        p = result.patterns
        if p.any_case:
            lines.append("  Case Patterns:")
            lines.extend(
                self._counts(
                    [
                        ("🔤", "UPPERCASE", p.uppercase),
                        ("🔡", "lowercase", p.lowercase),
                        ("🔀", "MixedCase", p.mixed_case),
                    ]
                )
            )

        if p.extensions:
            lines.append("  File Extensions:")
            lines.extend(self._counts([("📄", ext, n) for ext, n in p.extensions.items()]))

        d = result.data_types
        if d.total:
            lines.append("  Data Types:")
            lines.extend(
                self._counts(
                    [
                        ("🔢", "Integers", d.integers),
                        ("💯", "Decimals", d.decimals),
                        ("✅", "Booleans", d.booleans),
                        ("📝", "Strings", d.strings),
                    ]
                )
            )

        lines.append("")
        return lines

    # --- Private Helpers ---

    def _counts(self, rows: list[tuple[str, str, int]]) -> list[str]:
        """Formats labelled counts, dropping zero rows."""
        return [
            f"    {self._icon(icon)}{label:<14} : {count}"
            for icon, label, count in rows
            if count > 0
        ]

    def _heading(self, icon: str, title: str) -> list[str]:
        return [
            self._bright(f"{self._icon(icon)}{title}"),
            "-" * self._settings["section_width"],
        ]

    def _icon(self, icon: str) -> str:
        return f"{icon} " if self._settings["emoji"] else ""

    def _bright(self, text: str) -> str:
        return self._paint(text, Style.BRIGHT)

    def _paint(self, text: str, color: str) -> str:
        if not self._settings["color"]:
            return text
        return f"{color}{text}{Style.RESET_ALL}"
