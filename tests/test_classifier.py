"""Tests for token classification and partitioning."""

import pytest

from argscope.analysis.classifier import ArgumentClassifier, classify
from argscope.analysis.models import TokenKind


class TestClassify:
    """Single-token category labels."""

    @pytest.mark.parametrize(
        "token,expected",
        [
            ("--output=results.txt", TokenKind.LONG_OPTION),
            ("--verbose", TokenKind.LONG_FLAG),
            ("-v", TokenKind.SHORT_FLAG),
            ("data.csv", TokenKind.POSITIONAL),
            ("--", TokenKind.LONG_FLAG),
            ("-", TokenKind.SHORT_FLAG),
            ("--=x", TokenKind.LONG_OPTION),
            ("-a=b", TokenKind.SHORT_FLAG),
            ("", TokenKind.POSITIONAL),
            ("a=b", TokenKind.POSITIONAL),
        ],
    )
    def test_labels(self, token, expected):
        assert classify(token) is expected

    def test_label_text(self):
        assert TokenKind.LONG_OPTION.label == "(Long Option)"
        assert TokenKind.POSITIONAL.label == "(Positional)"


class TestPartition:
    """Splitting a token list into flags, options and positional values."""

    def test_mixed_tokens(self):
        parsed = ArgumentClassifier().partition(
            ["--verbose", "-n", "5", "--output=file.txt", "data.csv"]
        )
        assert parsed.flags == {"verbose": True, "n": True}
        assert parsed.options == {"output": "file.txt"}
        assert parsed.positional == ("5", "data.csv")

    def test_option_splits_on_first_separator(self):
        parsed = ArgumentClassifier().partition(["--filter=a=b=c"])
        assert parsed.options == {"filter": "a=b=c"}

    def test_last_option_wins(self):
        parsed = ArgumentClassifier().partition(["--a=1", "--a=2"])
        assert parsed.options == {"a": "2"}

    def test_repeated_flag_stored_once(self):
        parsed = ArgumentClassifier().partition(["-x", "--x", "-x"])
        assert parsed.flags == {"x": True}

    def test_bare_prefix_markers_give_empty_names(self):
        parsed = ArgumentClassifier().partition(["-", "--", "--=value"])
        assert parsed.flags == {"": True}
        assert parsed.options == {"": "value"}
        assert parsed.positional == ()

    def test_positional_keeps_order_and_duplicates(self):
        parsed = ArgumentClassifier().partition(["b", "a", "b", ""])
        assert parsed.positional == ("b", "a", "b", "")

    def test_empty_input(self):
        parsed = ArgumentClassifier().partition([])
        assert parsed.flags == {}
        assert parsed.options == {}
        assert parsed.positional == ()

    def test_fresh_storage_per_call(self):
        classifier = ArgumentClassifier()
        classifier.partition(["--a=1", "-x", "pos"])
        parsed = classifier.partition(["other"])
        assert parsed.flags == {}
        assert parsed.options == {}
        assert parsed.positional == ("other",)
