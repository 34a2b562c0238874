"""
argscope: inspect how a list of command-line arguments would be parsed.

Every argument is classified as a flag, an option or a positional value,
then analyzed for length statistics, emails/URLs/numbers, case patterns,
file extensions and scalar data types.

Options for argscope itself go before a "--" separator:

  argscope --no-color --plain -- --verbose -n 5 --output=file.txt data.csv

Without a separator, every argument is inspected.
"""

import argparse
import logging
import sys

from argscope.analysis.core import ArgumentAnalyzer
from argscope.report.config import SettingsManager
from argscope.report.renderer import (
    ReportRenderer,
    contains_help,
    contains_version,
)
from argscope.shared.console import ConsoleManager

TOOL_SEPARATOR = "--"


class CliInterface:
    """
    Handles tool options and application bootstrapping.
    """

    def __init__(self) -> None:
        self._parser = self._build_parser()

    def run(self, argv: list[str] | None = None) -> int:
        argv = sys.argv[1:] if argv is None else list(argv)
        tool_argv, tokens = self.split_argv(argv)
        args = self._parser.parse_args(tool_argv)

        log_level = args.log_level or logging.INFO
        logging.basicConfig(
            level=log_level,
            format="%(message)s",  # Handled by ConsoleManager
            handlers=[logging.StreamHandler(sys.stderr)],
            force=True,
        )
        console = ConsoleManager(level=log_level, no_color=args.no_color)

        try:
            settings = SettingsManager().load_settings(
                {
                    "color": False if args.no_color else None,
                    "emoji": False if args.plain else None,
                }
            )
        except (FileNotFoundError, ValueError, TypeError, IOError) as e:
            console.critical(f"Configuration Error: {e}")
            return 1

        try:
            renderer = ReportRenderer(settings)
            console.emit(renderer.banner())

            # Control tokens short-circuit the analysis.
            if contains_help(tokens):
                console.emit(renderer.help())
                return 0
            if contains_version(tokens):
                console.emit(renderer.version())
                return 0
            if not tokens:
                console.emit(renderer.usage())
                return 0

            result = ArgumentAnalyzer(logger=console).analyze(tokens)
            console.emit(renderer.render(result))
            return 0

        except Exception as e:
            console.critical(
                f"An unexpected error occurred: {e}",
                exc_info=log_level <= logging.DEBUG,
            )
            return 1

    @staticmethod
    def split_argv(argv: list[str]) -> tuple[list[str], list[str]]:
        """
        Splits argv into (tool options, inspected tokens) at the first "--".
        """
        if TOOL_SEPARATOR in argv:
            idx = argv.index(TOOL_SEPARATOR)
            return argv[:idx], argv[idx + 1 :]
        return [], argv

    def _build_parser(self) -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(
            prog="argscope",
            description="Command-line argument inspector.",
            epilog="Pass -h or --help after '--' to see the full help text.",
            formatter_class=argparse.RawTextHelpFormatter,
            add_help=False,
        )

        parser.add_argument(
            "--no-color", action="store_true", help="Disable ANSI color codes."
        )
        parser.add_argument(
            "--plain", action="store_true", help="Disable emoji decoration."
        )

        # Log
        log_g = parser.add_mutually_exclusive_group()
        log_g.add_argument(
            "--debug",
            action="store_const",
            dest="log_level",
            const=logging.DEBUG,
            help="Log each analysis pass (DEBUG level).",
        )
        log_g.add_argument(
            "-q",
            "--quiet",
            action="store_const",
            dest="log_level",
            const=logging.ERROR,
            help="Suppress non-errors (ERROR level).",
        )

        return parser


def main() -> None:
    sys.exit(CliInterface().run())


if __name__ == "__main__":
    main()
