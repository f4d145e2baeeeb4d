"""
Unit tests for the Greeks evaluator.

Signs and ranges are checked on the standard ATM bundle, every Greek is
compared with a finite difference of the Black-Scholes price, and the
dividend-yield terms are checked through call/put relationships.
"""

import math
from dataclasses import replace

import pytest

from optcalc.core.black_scholes import calculate_black_scholes
from optcalc.core.greeks import calculate_all_greeks, calculate_greeks
from optcalc.utils.exceptions import InvalidSelectorError, ValidationError
from optcalc.utils.types import BlackScholesParams, Greek, GreeksParams, OptionType


def bs_from(params: GreeksParams, **changes) -> float:
    """Black-Scholes price of a (q = 0) Greeks bundle with some fields bumped."""
    p = replace(params, **changes)
    return calculate_black_scholes(
        BlackScholesParams(
            p.interest_rate, p.underlying_price, p.strike_price,
            p.time_to_expiry, p.volatility, p.option_type,
        )
    )


# ===========================
# Known Values
# ===========================


def test_atm_call_delta_known_value(greeks_call):
    """ATM call delta = N(0.35) ≈ 0.6368."""
    assert abs(calculate_greeks(greeks_call, Greek.DELTA) - 0.636831) < 1e-5


def test_atm_gamma_known_value(greeks_call):
    """Γ = φ(0.35) / (100·0.2·1) ≈ 0.018762."""
    assert abs(calculate_greeks(greeks_call, Greek.GAMMA) - 0.018762) < 1e-5


def test_atm_vega_known_value(greeks_call):
    """ν = 100·φ(0.35) ≈ 37.524."""
    assert abs(calculate_greeks(greeks_call, Greek.VEGA) - 37.524) < 1e-2


# ===========================
# Sign and Range Tests
# ===========================


def test_call_delta_range(greeks_call):
    """Call delta should be in (0, 1)."""
    assert 0.0 < calculate_greeks(greeks_call, Greek.DELTA) < 1.0


def test_put_delta_range(greeks_put):
    """Put delta should be in (-1, 0)."""
    assert -1.0 < calculate_greeks(greeks_put, Greek.DELTA) < 0.0


@pytest.mark.parametrize("option_type", [OptionType.CALL, OptionType.PUT])
def test_gamma_and_vega_non_negative(greeks_call, option_type):
    """Gamma and vega are non-negative for both sides."""
    params = replace(greeks_call, option_type=option_type)
    assert calculate_greeks(params, Greek.GAMMA) >= 0.0
    assert calculate_greeks(params, Greek.VEGA) >= 0.0


def test_gamma_and_vega_same_for_call_and_put(greeks_call, greeks_put):
    """Gamma and vega do not depend on the option side."""
    for greek in (Greek.GAMMA, Greek.VEGA):
        assert calculate_greeks(greeks_call, greek) == calculate_greeks(greeks_put, greek)


def test_call_rho_positive(greeks_call):
    """Call rho should be positive."""
    assert calculate_greeks(greeks_call, Greek.RHO) > 0.0


def test_put_rho_negative(greeks_put):
    """Put rho should be negative."""
    assert calculate_greeks(greeks_put, Greek.RHO) < 0.0


def test_call_theta_negative(greeks_call):
    """Long ATM call decays with time."""
    assert calculate_greeks(greeks_call, Greek.THETA) < 0.0


# ===========================
# Deep In/Out of the Money Limits
# ===========================


def test_call_delta_tends_to_one_deep_itm(greeks_call):
    """S → ∞: call delta → 1 with no dividend."""
    params = replace(greeks_call, underlying_price=10_000.0)
    assert abs(calculate_greeks(params, Greek.DELTA) - 1.0) < 1e-9


def test_call_delta_tends_to_dividend_discount(greeks_call):
    """S → ∞: call delta → e^(-qT)."""
    params = replace(greeks_call, underlying_price=10_000.0, dividend_yield=0.03)
    assert abs(calculate_greeks(params, Greek.DELTA) - math.exp(-0.03)) < 1e-9


def test_put_delta_tends_to_minus_one_deep_itm(greeks_put):
    """S → 0: put delta → -1 with no dividend."""
    params = replace(greeks_put, underlying_price=1.0)
    assert abs(calculate_greeks(params, Greek.DELTA) + 1.0) < 1e-9


def test_put_delta_tends_to_minus_dividend_discount(greeks_put):
    """S → 0: put delta → -e^(-qT)."""
    params = replace(greeks_put, underlying_price=1.0, dividend_yield=0.04)
    assert abs(calculate_greeks(params, Greek.DELTA) + math.exp(-0.04)) < 1e-9


# ===========================
# Finite-Difference Validation
# ===========================


def test_delta_finite_difference(greeks_call):
    """Delta matches (V(S+h) - V(S-h)) / 2h."""
    h = 0.01
    numerical = (bs_from(greeks_call, underlying_price=100.0 + h)
                 - bs_from(greeks_call, underlying_price=100.0 - h)) / (2 * h)
    assert abs(calculate_greeks(greeks_call, Greek.DELTA) - numerical) < 1e-6


def test_put_delta_finite_difference(greeks_put):
    """Put delta matches its finite difference."""
    h = 0.01
    numerical = (bs_from(greeks_put, underlying_price=100.0 + h)
                 - bs_from(greeks_put, underlying_price=100.0 - h)) / (2 * h)
    assert abs(calculate_greeks(greeks_put, Greek.DELTA) - numerical) < 1e-6


def test_gamma_finite_difference(greeks_call):
    """Gamma matches (V(S+h) - 2V(S) + V(S-h)) / h²."""
    h = 0.1
    numerical = (bs_from(greeks_call, underlying_price=100.0 + h)
                 - 2 * bs_from(greeks_call)
                 + bs_from(greeks_call, underlying_price=100.0 - h)) / (h * h)
    assert abs(calculate_greeks(greeks_call, Greek.GAMMA) - numerical) < 1e-5


def test_vega_finite_difference(greeks_call):
    """Vega matches (V(σ+h) - V(σ-h)) / 2h."""
    h = 1e-4
    numerical = (bs_from(greeks_call, volatility=0.20 + h)
                 - bs_from(greeks_call, volatility=0.20 - h)) / (2 * h)
    assert abs(calculate_greeks(greeks_call, Greek.VEGA) - numerical) < 1e-4


@pytest.mark.parametrize("option_type", [OptionType.CALL, OptionType.PUT])
def test_theta_finite_difference(greeks_call, option_type):
    """Annualized theta matches -(V(T+h) - V(T-h)) / 2h."""
    params = replace(greeks_call, option_type=option_type)
    h = 1e-4
    numerical = -(bs_from(params, time_to_expiry=1.0 + h)
                  - bs_from(params, time_to_expiry=1.0 - h)) / (2 * h)
    assert abs(calculate_greeks(params, Greek.THETA) - numerical) < 1e-4


@pytest.mark.parametrize("option_type", [OptionType.CALL, OptionType.PUT])
def test_rho_finite_difference(greeks_call, option_type):
    """Rho matches (V(r+h) - V(r-h)) / 2h."""
    params = replace(greeks_call, option_type=option_type)
    h = 1e-4
    numerical = (bs_from(params, interest_rate=0.05 + h)
                 - bs_from(params, interest_rate=0.05 - h)) / (2 * h)
    assert abs(calculate_greeks(params, Greek.RHO) - numerical) < 1e-4


# ===========================
# Dividend Yield Tests
# ===========================


def test_delta_call_minus_put_is_dividend_discount(greeks_call):
    """Δ_call - Δ_put = e^(-qT)."""
    params = replace(greeks_call, dividend_yield=0.02, time_to_expiry=2.0)
    call_delta = calculate_greeks(params, Greek.DELTA)
    put_delta = calculate_greeks(replace(params, option_type=OptionType.PUT), Greek.DELTA)
    assert abs(call_delta - put_delta - math.exp(-0.04)) < 1e-12


def test_theta_call_minus_put_with_dividend(greeks_call):
    """Θ_call - Θ_put = q·S·e^(-qT) - r·K·e^(-rT)."""
    q, r, S, K, T = 0.03, 0.05, 100.0, 100.0, 1.0
    params = replace(greeks_call, dividend_yield=q)
    call_theta = calculate_greeks(params, Greek.THETA)
    put_theta = calculate_greeks(replace(params, option_type=OptionType.PUT), Greek.THETA)
    expected = q * S * math.exp(-q * T) - r * K * math.exp(-r * T)
    assert abs(call_theta - put_theta - expected) < 1e-10


def test_dividend_lowers_call_delta(greeks_call):
    """A dividend yield reduces call delta."""
    with_div = calculate_greeks(replace(greeks_call, dividend_yield=0.05), Greek.DELTA)
    assert with_div < calculate_greeks(greeks_call, Greek.DELTA)


# ===========================
# Validation Tests
# ===========================


@pytest.mark.parametrize(
    "field,value",
    [
        ("time_to_expiry", 0.0),
        ("time_to_expiry", -0.5),
        ("volatility", 0.0),
        ("volatility", -0.1),
        ("underlying_price", 0.0),
        ("strike_price", -1.0),
    ],
)
def test_invalid_inputs_raise(greeks_call, field, value):
    """Invalid inputs raise ValidationError rather than returning NaN."""
    with pytest.raises(ValidationError):
        calculate_greeks(replace(greeks_call, **{field: value}), Greek.DELTA)


@pytest.mark.parametrize(
    "field,value",
    [
        ("dividend_yield", math.nan),
        ("dividend_yield", math.inf),
        ("dividend_yield", -math.inf),
        ("interest_rate", math.nan),
        ("interest_rate", math.inf),
    ],
)
@pytest.mark.parametrize("greek", [Greek.DELTA, Greek.THETA, Greek.RHO])
def test_non_finite_rate_or_dividend_raises(greeks_call, field, value, greek):
    """NaN or infinite r and q raise ValidationError for every Greek."""
    with pytest.raises(ValidationError, match="must be finite"):
        calculate_greeks(replace(greeks_call, **{field: value}), greek)


def test_invalid_greek_raises(greeks_call):
    """Unknown selector raises InvalidSelectorError."""
    with pytest.raises(InvalidSelectorError):
        calculate_greeks(greeks_call, "charm")


def test_invalid_option_type_raises(greeks_call):
    """Unknown option type raises InvalidSelectorError."""
    with pytest.raises(InvalidSelectorError):
        calculate_greeks(replace(greeks_call, option_type="binary"), Greek.DELTA)


def test_greek_selected_by_string(greeks_call):
    """String values of the enum select the same Greek."""
    assert calculate_greeks(greeks_call, "vega") == calculate_greeks(greeks_call, Greek.VEGA)


# ===========================
# calculate_all_greeks() Tests
# ===========================


@pytest.mark.parametrize("option_type", [OptionType.CALL, OptionType.PUT])
def test_calculate_all_greeks_consistency(greeks_call, option_type):
    """calculate_all_greeks matches the individual selectors."""
    params = replace(greeks_call, option_type=option_type, dividend_yield=0.01)
    greeks = calculate_all_greeks(params)

    assert greeks.delta == calculate_greeks(params, Greek.DELTA)
    assert greeks.gamma == calculate_greeks(params, Greek.GAMMA)
    assert greeks.theta == calculate_greeks(params, Greek.THETA)
    assert greeks.vega == calculate_greeks(params, Greek.VEGA)
    assert greeks.rho == calculate_greeks(params, Greek.RHO)
