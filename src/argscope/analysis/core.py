from __future__ import annotations

from collections import Counter
from typing import Iterable

from argscope.shared.console import ConsoleManager

from . import models
from .classifier import ArgumentClassifier, SHORT_FLAG_PREFIX
from .patterns import TokenPatterns


class ArgumentAnalyzer:
    """
    Classifies an argument list and runs the analysis passes over it.

    Holds no per-call state: every call to analyze() builds its own storage,
    so one instance can be reused freely.
    """

    def __init__(self, *, logger: ConsoleManager | None = None) -> None:
        self._logger = logger
        self._classifier = ArgumentClassifier()

    def analyze(self, arguments: Iterable[str]) -> models.AnalysisResult:
        """
        Executes the classifier and all four analysis passes.
        """
        args = tuple(arguments)
        self._debug(f"Analyzing {len(args)} argument(s)")

        parsed = self._classifier.partition(args)
        self._debug(
            f"Classified: {len(parsed.flags)} flag name(s), "
            f"{len(parsed.options)} option name(s), "
            f"{len(parsed.positional)} positional"
        )

        return models.AnalysisResult(
            arguments=args,
            parsed=parsed,
            statistics=self._compute_statistics(args),
            validation=self._validate(args),
            patterns=self._find_patterns(args),
            data_types=self._detect_data_types(args),
        )

    # --- Analysis Passes ---

    def _compute_statistics(self, args: tuple[str, ...]) -> models.ArgumentStatistics:
        counts: Counter[models.TokenKind] = Counter(
            self._classifier.classify(a) for a in args
        )
        flag_count = counts[models.TokenKind.LONG_FLAG] + counts[models.TokenKind.SHORT_FLAG]

        longest: str | None = None
        shortest: str | None = args[0] if args else None
        total_length = 0

        for arg in args:
            total_length += len(arg)
            if longest is None or len(arg) > len(longest):
                longest = arg
            if shortest is not None and len(arg) < len(shortest):
                shortest = arg

        stats = models.ArgumentStatistics(
            total=len(args),
            flags=flag_count,
            options=counts[models.TokenKind.LONG_OPTION],
            positional=counts[models.TokenKind.POSITIONAL],
            average_length=total_length / len(args) if args else 0.0,
            longest=longest,
            longest_length=len(longest) if longest is not None else 0,
            shortest=shortest,
            shortest_length=len(shortest) if shortest is not None else 0,
        )
        self._debug(f"Statistics pass: {stats}")
        return stats

    def _validate(self, args: tuple[str, ...]) -> models.ValidationCounts:
        result = models.ValidationCounts(
            emails=sum(1 for a in args if TokenPatterns.is_email(a)),
            urls=sum(1 for a in args if TokenPatterns.is_url(a)),
            numbers=sum(1 for a in args if TokenPatterns.is_number(a)),
        )
        self._debug(f"Validation pass: {result}")
        return result

    def _find_patterns(self, args: tuple[str, ...]) -> models.LexicalPatterns:
        upper = lower = mixed = 0
        extensions: dict[str, int] = {}

        for arg in args:
            if TokenPatterns.has_letter(arg):
                if arg == arg.upper():
                    upper += 1
                elif arg == arg.lower():
                    lower += 1
                else:
                    mixed += 1

            if ext := TokenPatterns.get_extension(arg):
                extensions[ext] = extensions.get(ext, 0) + 1

        result = models.LexicalPatterns(
            uppercase=upper, lowercase=lower, mixed_case=mixed, extensions=extensions
        )
        self._debug(f"Pattern pass: {result}")
        return result

    def _detect_data_types(self, args: tuple[str, ...]) -> models.DataTypeCounts:
        # Anything starting with "-" is a flag or option, long forms included.
        counts: Counter[models.ScalarType] = Counter(
            TokenPatterns.detect_type(a) for a in args if not a.startswith(SHORT_FLAG_PREFIX)
        )
        result = models.DataTypeCounts(
            integers=counts[models.ScalarType.INTEGER],
            decimals=counts[models.ScalarType.DECIMAL],
            booleans=counts[models.ScalarType.BOOLEAN],
            strings=counts[models.ScalarType.STRING],
        )
        self._debug(f"Data type pass: {result}")
        return result

    def _debug(self, msg: str) -> None:
        if self._logger:
            self._logger.debug(msg)


def analyze(arguments: Iterable[str]) -> models.AnalysisResult:
    return ArgumentAnalyzer().analyze(arguments)
