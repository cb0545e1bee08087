# oddsconv

Convert betting odds between the three common formats and work out what they imply:

- **American** (moneyline): `+150`, `-200`
- **Decimal**: `2.50`, `1.50`
- **Fractional**: `3/2`, `1/2`

Only the standard library is needed.

## Installation

```
pip install oddsconv
```

## Usage

```python
from oddsconv.odds import Odds, OddsFormat
from oddsconv.parsing import parse_odds

odds = Odds.from_american(150)
odds.format                  # OddsFormat.AMERICAN
odds.value                   # 150
odds.to_decimal()            # 2.5
odds.to_fractional()         # (3, 2)
odds.implied_probability()   # 0.4

Odds.from_decimal(1.5).to_american()      # -200
Odds.from_fractional(9, 4).to_american()  # 225

str(Odds.from_american(150))      # "+150"
str(Odds.from_decimal(2.5))       # "2.50"
str(Odds.from_fractional(3, 2))   # "3/2"

parse_odds("+200")   # American
parse_odds("1.75")   # decimal
parse_odds("5/4")    # fractional
```

`Odds` is an immutable dataclass holding a `format` (an `OddsFormat` member:
`AMERICAN`, `DECIMAL` or `FRACTIONAL`) and a `value` (an int, a float, or a
`(numerator, denominator)` tuple).

American values between -99 and +99 are normalised on creation:
`Odds.from_american(50)` holds `-200`, and `Odds.from_american(-50)` holds `+200`.
The same rule is available on its own as `oddsconv.odds.normalize_american_odds`.

Conversion to fractional odds from another format uses a denominator of 1000,
reduced to lowest terms: `Odds.from_decimal(2.5).to_fractional()` is `(3, 2)`.

### Validation and errors

Every error is a subclass of `oddsconv.errors.OddsError`, which is itself a
`ValueError`. `Odds.validate()` raises one when odds make no sense or fall
outside practical limits:

- `InvalidAmericanOdds` for American odds of zero; `ValueOutOfRange` beyond ±100000
- `InfiniteOrNaN` for decimal odds that are not finite, `InvalidDecimalOdds` below
  1.0, `ValueOutOfRange` above 1000
- `ZeroDenominator` for a fractional denominator of zero, `ValueOutOfRange` for a
  part above 10000

`Odds.from_fractional` raises `NegativeValue` for a negative part. Conversions
raise the matching error when the odds cannot be converted, for example
`to_decimal()` on a zero denominator.

`parse_odds` validates what it reads. It raises `OddsParseError` for text it
cannot read, and the validation errors above for values it can read but that
are invalid.

```python
from oddsconv.errors import OddsError

try:
    parse_odds("3/0")
except OddsError as exc:
    print(exc)   # Denominator cannot be zero
```

### Markets

`oddsconv.market` collects odds for one event:

```python
from oddsconv.market import BettingMarket, parse_all, best_and_worst

market = BettingMarket("City vs United")
market.add_outcome("City", Odds.from_decimal(2.10))
market.add_outcome("Draw", Odds.from_decimal(3.40))
market.add_outcome("United", Odds.from_decimal(3.75))

market.total_probability()   # sum of implied probabilities
market.favorite().name       # "City": the shortest price

parsed, errors = parse_all(["+150", "3/2", "nonsense"])
best_and_worst(parsed)       # (highest decimal, lowest decimal)
```

`add_outcome` validates the odds first and returns the `MarketOutcome` it added;
`is_favorite` is set when the implied probability is above one half.
`favorite()` returns `None` for an empty market, and `best_and_worst` returns
`(None, None)` for no odds.

### Betting analysis

`oddsconv.betting` has:

- `detect_arbitrage(first, second, total_stake=1000.0)`, returning an `Arbitrage`
  with the total implied probability, the stake on each side, and the
  properties `is_opportunity`, `profit_margin`, `overround` and
  `guaranteed_profit`
- `expected_value(probability, odds, stake=100.0)`: expected profit for your
  own estimate of the win chance
- `market_margin(odds_list)`: the bookmaker's overround
- `true_probabilities(odds_list)`: implied probabilities rescaled to add up to
  one (raises `ValueError` for an empty list)

## Command line

The `oddsconv` command converts odds into every format and shows the implied
probability, sample returns and the break-even rate:

```
oddsconv +150 3/2 1.91
```

Run it with no arguments for an interactive prompt; type `quit` (or send end
of input) to leave. Invalid input prints the error and carries on.

The same report is available from Python as
`oddsconv.calculator.describe_odds(text)`.

## What it does not do

It works only on prices you give it: it does not fetch odds from bookmakers,
and it keeps nothing between runs.

## Running the tests

```
pip install -e ".[test]"
pytest
```