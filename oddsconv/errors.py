"""Exceptions raised when odds are invalid or cannot be parsed."""

from __future__ import annotations


class OddsError(ValueError):
    """Base class for every error about betting odds."""

    _prefix = "Odds error"

    def __init__(self, detail: str = "") -> None:
        self.detail = detail
        message = f"{self._prefix}: {detail}" if detail else self._prefix
        super().__init__(message)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OddsError):
            return NotImplemented
        return type(self) is type(other) and self.detail == other.detail

    def __hash__(self) -> int:
        return hash((type(self), self.detail))


class InvalidAmericanOdds(OddsError):
    """American odds are zero or otherwise unusable."""

    _prefix = "Invalid American odds"


class InvalidDecimalOdds(OddsError):
    """Decimal odds are below 1.0 or otherwise unusable."""

    _prefix = "Invalid decimal odds"


class InvalidFractionalOdds(OddsError):
    """Fractional odds hold values that make no sense."""

    _prefix = "Invalid fractional odds"


class OddsParseError(OddsError):
    """A string could not be read as odds in any format."""

    _prefix = "Failed to parse odds string"


class ValueOutOfRange(OddsError):
    """Odds are well formed but too large for practical betting."""

    _prefix = "Value out of range"


class ZeroDenominator(OddsError):
    """Fractional odds have a denominator of zero."""

    _prefix = "Denominator cannot be zero"

    def __init__(self) -> None:
        super().__init__()


class NegativeValue(OddsError):
    """A negative number was given where only non-negative ones are allowed."""

    _prefix = "Negative value not allowed"


class InfiniteOrNaN(OddsError):
    """A number was infinite or not a number."""

    _prefix = "Value must be finite and not NaN"

    def __init__(self) -> None:
        super().__init__()