from __future__ import annotations

from typing import Iterable

from .models import ParsedArguments, TokenKind

SHORT_FLAG_PREFIX = "-"
LONG_FLAG_PREFIX = "--"
OPTION_SEPARATOR = "="


class ArgumentClassifier:
    """
    Splits raw tokens into flags, options and positional arguments.

    Every string is accepted. A bare "-" or "--" becomes a flag with an empty
    name rather than an error.
    """

    @staticmethod
    def classify(token: str) -> TokenKind:
        if token.startswith(LONG_FLAG_PREFIX):
            if OPTION_SEPARATOR in token:
                return TokenKind.LONG_OPTION
            return TokenKind.LONG_FLAG
        if token.startswith(SHORT_FLAG_PREFIX):
            return TokenKind.SHORT_FLAG
        return TokenKind.POSITIONAL

    @staticmethod
    def split_option(token: str) -> tuple[str, str]:
        """Returns (name, value) for a "--name=value" token."""
        name, value = token.split(OPTION_SEPARATOR, 1)
        return name[len(LONG_FLAG_PREFIX) :], value

    def partition(self, tokens: Iterable[str]) -> ParsedArguments:
        flags: dict[str, bool] = {}
        options: dict[str, str] = {}
        positional: list[str] = []

        for token in tokens:
            kind = self.classify(token)
            if kind is TokenKind.LONG_OPTION:
                name, value = self.split_option(token)
                options[name] = value
            elif kind is TokenKind.LONG_FLAG:
                flags[token[len(LONG_FLAG_PREFIX) :]] = True
            elif kind is TokenKind.SHORT_FLAG:
                flags[token[len(SHORT_FLAG_PREFIX) :]] = True
            else:
                positional.append(token)

        return ParsedArguments(
            flags=flags, options=options, positional=tuple(positional)
        )


def classify(token: str) -> TokenKind:
    return ArgumentClassifier.classify(token)
