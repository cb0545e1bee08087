import io

import pytest
from hypothesis import given
from hypothesis import strategies as st

from oddsconv.calculator import (
    betting_scenarios,
    describe_odds,
    format_american,
    main,
)
from oddsconv.errors import (
    InvalidAmericanOdds,
    InvalidDecimalOdds,
    OddsParseError,
    ZeroDenominator,
)
from oddsconv.parsing import parse_odds


def _fields(report):
    fields = {}
    for line in report.splitlines():
        if ":" in line and not line.startswith(" "):
            key, _, value = line.partition(":")
            fields[key.strip()] = value.strip()
    return fields


def test_format_american_signs():
    assert format_american(150) == "+150"
    assert format_american(-200) == "-200"


@given(st.integers(min_value=100, max_value=10000) | st.integers(min_value=-10000, max_value=-100))
def test_format_american_round_trips_through_parser(value):
    assert parse_odds(format_american(value)).to_american() == value


@pytest.mark.parametrize("text", ["+150", "-200", "2.50", "3/2", "9/4", "-110", "1.91"])
def test_describe_odds_fields_are_consistent(text):
    original = parse_odds(text)
    fields = _fields(describe_odds(text))

    assert parse_odds(fields["American odds"]).to_american() == original.to_american()
    assert float(fields["Decimal odds"]) == pytest.approx(original.to_decimal(), abs=0.0005)
    fractional = parse_odds(fields["Fractional odds"])
    assert fractional.to_decimal() == pytest.approx(original.to_decimal(), abs=0.01)


def test_describe_odds_has_both_sections():
    report = describe_odds("+150")
    assert report.splitlines()[0] == "--- Conversion Results ---"
    assert "--- Betting Scenarios ---" in report
    assert "Fractional odds:   3/2" in report


def test_describe_odds_rejects_bad_input():
    with pytest.raises(InvalidDecimalOdds):
        describe_odds("0.5")
    with pytest.raises(OddsParseError):
        describe_odds("invalid")
    with pytest.raises(ZeroDenominator):
        describe_odds("3/0")
    with pytest.raises(InvalidAmericanOdds):
        describe_odds("0")


def test_betting_scenarios_underdog():
    lines = betting_scenarios(150, 2.5, 0.4)
    assert lines[0] == "Underdog bet:"
    assert "  - Bet $100, win $150 profit (total return $250)" in lines
    assert lines[-1] == "  - This is an UNDERDOG (< 50% implied probability)"


def test_betting_scenarios_favorite():
    lines = betting_scenarios(-200, 1.5, 2 / 3)
    assert lines[0] == "Favorite bet:"
    assert lines[1].startswith("  - Bet $200, win $100 profit")
    assert lines[-1] == "  - This is a FAVORITE (> 50% implied probability)"


def test_betting_scenarios_even_odds():
    lines = betting_scenarios(100, 2.0, 0.5)
    assert lines[-1] == "  - This is EVEN ODDS (exactly 50% implied probability)"


def test_betting_scenarios_rejects_zero_line():
    with pytest.raises(InvalidAmericanOdds):
        betting_scenarios(0, 2.0, 0.5)


def test_main_with_arguments(capsys):
    assert main(["+150", "invalid"]) == 0
    out = capsys.readouterr().out
    assert "--- Conversion Results ---" in out
    assert "Error: Failed to parse odds string" in out


def test_main_interactive_until_quit(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2.5\n\nabc\nQUIT\n+300\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.startswith("=== Betting Odds Calculator ===")
    assert "Decimal odds:" in out
    assert "Error: Failed to parse odds string" in out
    assert out.rstrip().endswith("Goodbye!")
    assert "American odds:     +300" not in out


def test_main_stops_at_end_of_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("-110\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "American odds:     -110" in out
    assert "Goodbye!" not in out