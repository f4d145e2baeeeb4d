"""
Pytest configuration and shared fixtures.
"""

import pytest

from optcalc.utils.types import (
    BlackScholesParams,
    GreeksParams,
    MonteCarloParams,
    OptionType,
)


@pytest.fixture
def standard_market():
    """At-the-money market: S=K=100, T=1, r=5%, σ=20%."""
    return {
        "interest_rate": 0.05,
        "underlying_price": 100.0,
        "strike_price": 100.0,
        "time_to_expiry": 1.0,
        "volatility": 0.20,
    }


@pytest.fixture
def bs_call(standard_market):
    """ATM call for the analytic evaluator."""
    return BlackScholesParams(**standard_market, option_type=OptionType.CALL)


@pytest.fixture
def bs_put(standard_market):
    """ATM put for the analytic evaluator."""
    return BlackScholesParams(**standard_market, option_type=OptionType.PUT)


@pytest.fixture
def greeks_call(standard_market):
    """ATM call for the Greeks evaluator, no dividend."""
    return GreeksParams(**standard_market, option_type=OptionType.CALL)


@pytest.fixture
def greeks_put(standard_market):
    """ATM put for the Greeks evaluator, no dividend."""
    return GreeksParams(**standard_market, option_type=OptionType.PUT)


@pytest.fixture
def mc_call():
    """Slightly out-of-the-money call used for Monte Carlo checks."""
    return MonteCarloParams(
        number_of_simulations=20_000,
        interest_rate=0.05,
        underlying_price=100.0,
        strike_price=105.0,
        time_to_expiry=0.5,
        volatility=0.30,
        option_type=OptionType.CALL,
    )
