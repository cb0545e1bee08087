"""Sports-betting analysis built on odds: arbitrage, expected value and margins."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List

from .odds import Odds


@dataclass(frozen=True)
class Arbitrage:
    """How two opposing prices on a two-way event combine.

    Stakes split ``total_stake`` in proportion to each side's implied
    probability, so both sides return the same amount.
    """

    total_probability: float
    total_stake: float
    first_stake: float
    second_stake: float

    @property
    def is_opportunity(self) -> bool:
        """True when the implied probabilities add up to less than one."""
        return self.total_probability < 1.0

    @property
    def profit_margin(self) -> float:
        """Share of the stake won whatever the result (negative if none)."""
        return 1.0 - self.total_probability

    @property
    def overround(self) -> float:
        """How far the implied probabilities exceed one."""
        return self.total_probability - 1.0

    @property
    def guaranteed_profit(self) -> float:
        """Profit on the total stake implied by the margin."""
        return self.total_stake * self.profit_margin


def detect_arbitrage(first: Odds, second: Odds, total_stake: float = 1000.0) -> Arbitrage:
    """Combine the prices of the two sides of an event.

    Raises an OddsError if either price cannot be converted.
    """
    first_probability = first.implied_probability()
    second_probability = second.implied_probability()
    total = first_probability + second_probability
    return Arbitrage(
        total_probability=total,
        total_stake=total_stake,
        first_stake=total_stake * first_probability / total,
        second_stake=total_stake * second_probability / total,
    )


def expected_value(probability: float, odds: Odds, stake: float = 100.0) -> float:
    """Expected profit of a stake at the given price, for an estimated win chance."""
    payout = odds.to_decimal() * stake
    profit = payout - stake
    return probability * profit + (1.0 - probability) * -stake


def _probabilities(odds_list: Iterable[Odds]) -> List[float]:
    return [odds.implied_probability() for odds in odds_list]


def market_margin(odds_list: Iterable[Odds]) -> float:
    """The bookmaker's overround: total implied probability minus one."""
    return sum(_probabilities(odds_list)) - 1.0


def true_probabilities(odds_list: Iterable[Odds]) -> List[float]:
    """Implied probabilities rescaled so that they add up to one.

    Raises ValueError for an empty market.
    """
    probabilities = _probabilities(odds_list)
    if not probabilities:
        raise ValueError("a market needs at least one price")
    total = sum(probabilities)
    return [probability / total for probability in probabilities]