"""Interactive odds calculator: conversions, payouts and break-even figures."""

from __future__ import annotations

import sys
from typing import List, Optional, Sequence

from .errors import InvalidAmericanOdds, OddsError
from .parsing import parse_odds

_BANNER = (
    "=== Betting Odds Calculator ===",
    "Enter odds in any format (American: +150/-200, Decimal: 2.50, Fractional: 3/2)",
    "Type 'quit' to exit",
    "",
)


def format_american(value: int) -> str:
    """Write an American line with an explicit plus sign for positive values."""
    return f"+{value}" if value > 0 else str(value)


def betting_scenarios(american: int, decimal: float, probability: float) -> List[str]:
    """Describe payouts and the break-even rate for a price, one line per item."""
    lines: List[str] = []
    if american > 0:
        lines += [
            "Underdog bet:",
            f"  - Bet $100, win ${american} profit (total return ${100 + american})",
            f"  - Bet $10, win ${american / 10.0:.2f} profit "
            f"(total return ${10.0 + american / 10.0:.2f})",
        ]
    else:
        if american == 0:
            raise InvalidAmericanOdds("American odds cannot be zero")
        bet_amount = -american
        ten_dollar_win = 1000.0 / bet_amount
        lines += [
            "Favorite bet:",
            f"  - Bet ${bet_amount}, win $100 profit (total return ${bet_amount + 100})",
            f"  - Bet $10, win ${ten_dollar_win:.2f} profit "
            f"(total return ${10.0 + ten_dollar_win:.2f})",
        ]

    lines += [
        "Decimal calculation:",
        f"  - Bet $1, total return ${decimal:.3f}",
        f"  - Bet $100, total return ${decimal * 100.0:.2f}",
        "Break-even analysis:",
        f"  - Need to win {probability * 100.0:.1f}% of bets to break even long-term",
    ]

    if probability > 0.5:
        lines.append("  - This is a FAVORITE (> 50% implied probability)")
    elif probability < 0.5:
        lines.append("  - This is an UNDERDOG (< 50% implied probability)")
    else:
        lines.append("  - This is EVEN ODDS (exactly 50% implied probability)")
    return lines


def describe_odds(text: str) -> str:
    """Parse odds from text and report them in every format with scenarios.

    Raises an OddsError if the text is not valid odds.
    """
    odds = parse_odds(text)
    odds.validate()

    american = odds.to_american()
    decimal = odds.to_decimal()
    numerator, denominator = odds.to_fractional()
    probability = odds.implied_probability()

    lines = [
        "--- Conversion Results ---",
        f"American odds:     {format_american(american)}",
        f"Decimal odds:      {decimal:.3f}",
        f"Fractional odds:   {numerator}/{denominator}",
        f"Implied probability: {probability * 100.0:.2f}% ({probability:.4f})",
        "",
        "--- Betting Scenarios ---",
    ]
    lines += betting_scenarios(american, decimal, probability)
    return "\n".join(lines)


def _report(entry: str) -> None:
    try:
        report = describe_odds(entry)
    except OddsError as error:
        print(f"Error: {error}\n")
        return
    print()
    print(report)
    print()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Describe the odds given as arguments, or prompt for odds until 'quit'."""
    args = list(sys.argv[1:] if argv is None else argv)
    if args:
        for entry in args:
            _report(entry.strip())
        return 0

    for line in _BANNER:
        print(line)

    while True:
        print("Enter odds: ", end="", flush=True)
        line = sys.stdin.readline()
        if not line:
            print()
            break
        entry = line.strip()
        if entry.lower() == "quit":
            print("Goodbye!")
            break
        if not entry:
            continue
        _report(entry)
    return 0


if __name__ == "__main__":
    sys.exit(main())