import math
import re
import unicodedata

from .classifier import SHORT_FLAG_PREFIX
from .models import ScalarType

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1
INT32_MAX_DIGITS = len(str(INT32_MAX))

EMAIL_PATTERN = re.compile(r"[A-Za-z0-9+_.-]+@([A-Za-z0-9.-]+\.[A-Za-z]{2,})")
URL_PATTERN = re.compile(r"https?://[A-Za-z0-9.-]+\.[A-Za-z]{2,}(/.*)?")
NUMBER_PATTERN = re.compile(r"-?[0-9]+(\.[0-9]+)?")

# A letter on a single line; any line terminator disqualifies the token.
_LETTER_PATTERN = re.compile(
    r"[^\n\r\u0085\u2028\u2029]*[A-Za-z][^\n\r\u0085\u2028\u2029]*"
)
_INTEGER_PATTERN = re.compile(r"[+-]?\d+")
_DECIMAL_PATTERN = re.compile(
    r"""
    (?P<sign>[+-]?)
    (?:
        (?P<nan>NaN)
      | (?P<inf>Infinity)
      | (?:
            (?P<hex>0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)[pP][+-]?[0-9]+)
          | (?P<dec>(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)
        )
        [fFdD]?
    )
    """,
    re.VERBOSE,
)

# Characters trimmed around a decimal literal: space and everything below it.
_TRIM_CHARS = "".join(chr(c) for c in range(0x21))

_BOOLEAN_WORDS = {"true": True, "false": False}


class TokenPatterns:
    """
    Static helpers for pattern matching and scalar detection on raw tokens.
    """

    @staticmethod
    def is_email(token: str) -> bool:
        return EMAIL_PATTERN.fullmatch(token) is not None

    @staticmethod
    def is_url(token: str) -> bool:
        return URL_PATTERN.fullmatch(token) is not None

    @staticmethod
    def is_number(token: str) -> bool:
        return NUMBER_PATTERN.fullmatch(token) is not None

    @staticmethod
    def has_letter(token: str) -> bool:
        return _LETTER_PATTERN.fullmatch(token) is not None

    @staticmethod
    def get_extension(token: str) -> str | None:
        """
        Returns the final ".suffix" of a token, or None for tokens without a
        dot and for anything that looks like a flag.
        """
        if token.startswith(SHORT_FLAG_PREFIX) or "." not in token:
            return None
        return token[token.rfind(".") :]

    @staticmethod
    def parse_integer(token: str) -> int | None:
        """
        Parses a signed base-10 integer that fits in 32 bits.
        """
        if not _INTEGER_PATTERN.fullmatch(token):
            return None

        negative = token[0] == "-"
        digits = token[1:] if token[0] in "+-" else token
        # Normalize to ASCII so zero padding of any script can be dropped.
        digits = "".join(str(unicodedata.decimal(c)) for c in digits).lstrip("0")
        if len(digits) > INT32_MAX_DIGITS:
            return None

        value = int(digits or "0")
        if negative:
            value = -value
        if value < INT32_MIN or value > INT32_MAX:
            return None
        return value

    @staticmethod
    def parse_decimal(token: str) -> float | None:
        """
        Parses a general floating-point literal.

        Accepts exponents, a trailing f/F/d/D type suffix, NaN, Infinity and
        hexadecimal literals such as 0x1.8p1. Surrounding whitespace and
        control characters are ignored.
        """
        m = _DECIMAL_PATTERN.fullmatch(token.strip(_TRIM_CHARS))
        if m is None:
            return None

        sign = -1.0 if m.group("sign") == "-" else 1.0
        if m.group("nan"):
            return math.nan
        if m.group("inf"):
            return sign * math.inf
        if m.group("hex"):
            try:
                return sign * float.fromhex(m.group("hex"))
            except OverflowError:
                return sign * math.inf
        return sign * float(m.group("dec"))

    @staticmethod
    def parse_boolean(token: str) -> bool | None:
        return _BOOLEAN_WORDS.get(token.casefold())

    @staticmethod
    def detect_type(token: str) -> ScalarType:
        if TokenPatterns.parse_integer(token) is not None:
            return ScalarType.INTEGER
        if TokenPatterns.parse_decimal(token) is not None:
            return ScalarType.DECIMAL
        if TokenPatterns.parse_boolean(token) is not None:
            return ScalarType.BOOLEAN
        return ScalarType.STRING
