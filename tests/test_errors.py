import pytest

from oddsconv.errors import (
    InfiniteOrNaN,
    InvalidAmericanOdds,
    InvalidDecimalOdds,
    InvalidFractionalOdds,
    NegativeValue,
    OddsError,
    OddsParseError,
    ValueOutOfRange,
    ZeroDenominator,
)

DETAIL = "American odds cannot be zero"


def test_detailed_message_has_prefix_and_detail():
    cases = [
        (InvalidAmericanOdds(DETAIL), "Invalid American odds: "),
        (InvalidDecimalOdds(DETAIL), "Invalid decimal odds: "),
        (InvalidFractionalOdds(DETAIL), "Invalid fractional odds: "),
        (OddsParseError(DETAIL), "Failed to parse odds string: "),
        (ValueOutOfRange(DETAIL), "Value out of range: "),
        (NegativeValue(DETAIL), "Negative value not allowed: "),
    ]
    for err, prefix in cases:
        assert str(err) == prefix + DETAIL
        assert err.detail == DETAIL


@pytest.mark.parametrize(
    "error_type",
    [
        InvalidAmericanOdds,
        InvalidDecimalOdds,
        InvalidFractionalOdds,
        OddsParseError,
        ValueOutOfRange,
        NegativeValue,
    ],
)
def test_detailed_errors_are_odds_and_value_errors(error_type):
    detail = "Fractional odds values too large"
    err = error_type(detail)
    assert isinstance(err, OddsError)
    assert isinstance(err, ValueError)
    assert err.detail == detail
    assert str(err).endswith(detail)


def test_zero_denominator_message():
    assert str(ZeroDenominator()) == "Denominator cannot be zero"


def test_infinite_or_nan_message():
    assert str(InfiniteOrNaN()) == "Value must be finite and not NaN"


def test_equality_by_type_and_detail():
    assert InvalidAmericanOdds("x") == InvalidAmericanOdds("x")
    assert InvalidAmericanOdds("x") != InvalidAmericanOdds("y")
    assert InvalidAmericanOdds("x") != InvalidDecimalOdds("x")
    assert ZeroDenominator() == ZeroDenominator()
    assert ZeroDenominator() != InfiniteOrNaN()


def test_equal_errors_hash_alike():
    assert len({ValueOutOfRange("a"), ValueOutOfRange("a"), ValueOutOfRange("b")}) == 2


def test_detail_of_unit_errors_is_empty():
    assert ZeroDenominator().detail == ""
    assert InfiniteOrNaN().detail == ""