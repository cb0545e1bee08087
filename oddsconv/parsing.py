"""Reading betting odds from text in any of the three notations."""

from __future__ import annotations

import re

from .errors import OddsParseError
from .odds import Odds

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1
_U32_MAX = 2**32 - 1

_SIGNED_INT = re.compile(r"[+-]?[0-9]+")
_UNSIGNED_INT = re.compile(r"\+?[0-9]+")
_FLOAT = re.compile(
    r"""
    [+-]?
    (?:
        (?i:inf|infinity|nan)
      | (?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?
    )
    """,
    re.VERBOSE,
)


def _parse_int(text: str, pattern: re.Pattern, low: int, high: int) -> int | None:
    """Read a whole number in [low, high], or None if the text is not one."""
    if not pattern.fullmatch(text):
        return None
    value = int(text)
    if value < low or value > high:
        return None
    return value


def _parse_float(text: str) -> float | None:
    """Read a floating-point literal, or None if the text is not one."""
    if not _FLOAT.fullmatch(text):
        return None
    return float(text)


def _parse_fraction(text: str) -> Odds:
    parts = text.split("/")
    if len(parts) != 2:
        raise OddsParseError(
            f"Invalid fractional format, expected 'num/den': '{text}'"
        )
    num_text, den_text = (part.strip() for part in parts)
    if not num_text or not den_text:
        raise OddsParseError("Empty numerator or denominator in fraction")

    numerator = _parse_int(num_text, _UNSIGNED_INT, 0, _U32_MAX)
    if numerator is None:
        raise OddsParseError(f"Invalid numerator: '{num_text}'")
    denominator = _parse_int(den_text, _UNSIGNED_INT, 0, _U32_MAX)
    if denominator is None:
        raise OddsParseError(f"Invalid denominator: '{den_text}'")

    odds = Odds.from_fractional(numerator, denominator)
    odds.validate()
    return odds


def parse_odds(text: str) -> Odds:
    """Parse odds written as American (+150), fractional (3/2) or decimal (2.50).

    The parsed odds are validated; any problem raises an OddsError.
    """
    s = text.strip()
    if not s:
        raise OddsParseError("Empty string")

    signed = s.startswith(("+", "-"))
    if signed or all(c in "0123456789" for c in s):
        value = _parse_int(s, _SIGNED_INT, _I32_MIN, _I32_MAX)
        if value is not None:
            odds = Odds.from_american(value)
            odds.validate()
            return odds
        if signed:
            raise OddsParseError(f"Invalid American odds format: '{s}'")

    if "/" in s:
        return _parse_fraction(s)

    decimal = _parse_float(s)
    if decimal is not None:
        odds = Odds.from_decimal(decimal)
        odds.validate()
        return odds

    raise OddsParseError(f"Unable to parse '{s}' as any odds format")