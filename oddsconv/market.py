"""Betting markets and helpers for working with collections of odds."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence, Tuple

from .errors import OddsError
from .odds import Odds
from .parsing import parse_odds


@dataclass(frozen=True)
class MarketOutcome:
    """One selection in a market with its price."""

    name: str
    odds: Odds
    is_favorite: bool


@dataclass
class BettingMarket:
    """A set of mutually exclusive outcomes, each with its own odds."""

    description: str
    outcomes: List[MarketOutcome] = field(default_factory=list)

    def add_outcome(self, name: str, odds: Odds) -> MarketOutcome:
        """Validate the odds and add an outcome; raises OddsError if invalid."""
        odds.validate()
        outcome = MarketOutcome(name, odds, odds.implied_probability() > 0.5)
        self.outcomes.append(outcome)
        return outcome

    def total_probability(self) -> float:
        """Sum of the implied probabilities of every outcome."""
        return sum(outcome.odds.implied_probability() for outcome in self.outcomes)

    def favorite(self) -> Optional[MarketOutcome]:
        """The outcome with the shortest price, or None for an empty market."""
        if not self.outcomes:
            return None
        return min(self.outcomes, key=_decimal_or_infinity)


def _decimal_or_infinity(outcome: MarketOutcome) -> float:
    try:
        decimal = outcome.odds.to_decimal()
    except OddsError:
        return math.inf
    return math.inf if math.isnan(decimal) else decimal


def parse_all(texts: Iterable[str]) -> Tuple[List[Odds], List[OddsError]]:
    """Parse every string, returning the parsed odds and the errors, in order."""
    parsed: List[Odds] = []
    failures: List[OddsError] = []
    for text in texts:
        try:
            parsed.append(parse_odds(text))
        except OddsError as error:
            failures.append(error)
    return parsed, failures


def best_and_worst(odds_list: Sequence[Odds]) -> Tuple[Optional[float], Optional[float]]:
    """Highest and lowest decimal prices, or (None, None) for no odds.

    Raises an OddsError if any of the odds cannot be converted.
    """
    if not odds_list:
        return None, None
    decimals = [odds.to_decimal() for odds in odds_list]
    finite = [d for d in decimals if not math.isnan(d)]
    best = max(finite, default=-math.inf)
    worst = min(finite, default=math.inf)
    return best, worst