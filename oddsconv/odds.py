"""Betting odds in American, decimal and fractional form, with conversions."""

from __future__ import annotations

import enum
import math
import operator
from dataclasses import dataclass
from typing import Tuple, Union

from .errors import (
    InfiniteOrNaN,
    InvalidAmericanOdds,
    InvalidDecimalOdds,
    NegativeValue,
    ValueOutOfRange,
    ZeroDenominator,
)

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1
_U32_MAX = 2**32 - 1

_AMERICAN_LIMIT = 100_000
_DECIMAL_LIMIT = 1000.0
_FRACTIONAL_LIMIT = 10_000
_FRACTION_DENOMINATOR = 1000


class OddsFormat(enum.Enum):
    """The notation a set of odds is held in."""

    AMERICAN = "american"
    DECIMAL = "decimal"
    FRACTIONAL = "fractional"


def normalize_american_odds(odds: int) -> int:
    """Map American odds in the -99..+99 band to their standard equivalent.

    +1..+99 become the matching negative line and -1..-99 the matching
    positive line; anything else is returned unchanged.
    """
    if 0 < odds < 100:
        return -(10_000 // odds)
    if -100 < odds < 0:
        return 10_000 // -odds
    return odds


def _round_half_away(x: float) -> float:
    """Round to the nearest integer, halves away from zero."""
    magnitude = abs(x)
    whole = math.floor(magnitude)
    if magnitude - whole >= 0.5:
        whole += 1
    return math.copysign(whole, x)


def _saturate(x: float, low: int, high: int) -> int:
    """Convert a float to an int clamped to [low, high]; NaN becomes 0."""
    if math.isnan(x):
        return 0
    if x <= low:
        return low
    if x >= high:
        return high
    return int(x)


def _format_float(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if value.is_integer():
        return str(int(value))
    return repr(value)


def _american_from_decimal(decimal: float) -> int:
    profit = decimal - 1.0
    if decimal >= 2.0:
        american = _saturate(_round_half_away(profit * 100.0), _I32_MIN, _I32_MAX)
        return normalize_american_odds(american)
    if profit == 0.0:
        # -100 / 0 is negative infinity, which saturates to the lowest line.
        return _I32_MIN
    return _saturate(_round_half_away(-100.0 / profit), _I32_MIN, _I32_MAX)


OddsValue = Union[int, float, Tuple[int, int]]


@dataclass(frozen=True)
class Odds:
    """A price held in one of the three odds notations."""

    format: OddsFormat
    value: OddsValue

    @classmethod
    def from_american(cls, value: int) -> "Odds":
        """American odds; lines between -99 and +99 are normalised."""
        return cls(OddsFormat.AMERICAN, normalize_american_odds(operator.index(value)))

    @classmethod
    def from_decimal(cls, value: float) -> "Odds":
        """Decimal odds: the total return on a unit stake."""
        return cls(OddsFormat.DECIMAL, float(value))

    @classmethod
    def from_fractional(cls, numerator: int, denominator: int) -> "Odds":
        """Fractional odds: profit over stake."""
        numerator = operator.index(numerator)
        denominator = operator.index(denominator)
        if numerator < 0 or denominator < 0:
            raise NegativeValue(
                f"fractional odds parts must not be negative: {numerator}/{denominator}"
            )
        return cls(OddsFormat.FRACTIONAL, (numerator, denominator))

    def to_american(self) -> int:
        """The odds as an American moneyline."""
        if self.format is OddsFormat.AMERICAN:
            return self.value
        if self.format is OddsFormat.DECIMAL:
            decimal = self.value
            if decimal >= 2.0 or decimal > 1.0:
                return _american_from_decimal(decimal)
            raise InvalidDecimalOdds(
                f"Decimal odds must be greater than 1.0, got: {_format_float(decimal)}"
            )
        numerator, denominator = self.value
        if denominator == 0:
            raise ZeroDenominator()
        return _american_from_decimal(numerator / denominator + 1.0)

    def to_decimal(self) -> float:
        """The odds as a decimal price, stake included."""
        if self.format is OddsFormat.DECIMAL:
            return self.value
        if self.format is OddsFormat.AMERICAN:
            american = self.value
            if american > 0:
                return american / 100.0 + 1.0
            if american < 0:
                return 100.0 / -american + 1.0
            raise InvalidAmericanOdds("American odds cannot be zero")
        numerator, denominator = self.value
        if denominator == 0:
            raise ZeroDenominator()
        return numerator / denominator + 1.0

    def to_fractional(self) -> Tuple[int, int]:
        """The odds as a reduced (numerator, denominator) pair."""
        if self.format is OddsFormat.FRACTIONAL:
            return self.value
        profit = self.to_decimal() - 1.0
        numerator = _saturate(
            _round_half_away(profit * _FRACTION_DENOMINATOR), 0, _U32_MAX
        )
        divisor = math.gcd(numerator, _FRACTION_DENOMINATOR)
        return numerator // divisor, _FRACTION_DENOMINATOR // divisor

    def implied_probability(self) -> float:
        """The probability the price implies, 1 / decimal."""
        decimal = self.to_decimal()
        if decimal == 0.0:
            return math.copysign(math.inf, decimal)
        return 1.0 / decimal

    def validate(self) -> None:
        """Raise an OddsError if the odds are invalid or out of range."""
        if self.format is OddsFormat.AMERICAN:
            value = self.value
            if value == 0:
                raise InvalidAmericanOdds("American odds cannot be zero")
            if value < -_AMERICAN_LIMIT or value > _AMERICAN_LIMIT:
                raise ValueOutOfRange(f"American odds out of reasonable range: {value}")
            return
        if self.format is OddsFormat.DECIMAL:
            value = self.value
            if not math.isfinite(value):
                raise InfiniteOrNaN()
            if value < 1.0:
                raise InvalidDecimalOdds(
                    f"Decimal odds must be >= 1.0, got: {_format_float(value)}"
                )
            if value > _DECIMAL_LIMIT:
                raise ValueOutOfRange(f"Decimal odds too large: {_format_float(value)}")
            return
        numerator, denominator = self.value
        if denominator == 0:
            raise ZeroDenominator()
        if numerator > _FRACTIONAL_LIMIT or denominator > _FRACTIONAL_LIMIT:
            raise ValueOutOfRange("Fractional odds values too large")

    def __str__(self) -> str:
        if self.format is OddsFormat.AMERICAN:
            return f"+{self.value}" if self.value > 0 else str(self.value)
        if self.format is OddsFormat.DECIMAL:
            if math.isnan(self.value):
                return "NaN"
            return f"{self.value:.2f}"
        numerator, denominator = self.value
        return f"{numerator}/{denominator}"