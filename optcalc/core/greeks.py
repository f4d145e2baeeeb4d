"""
Analytic Greeks for European options with a continuous dividend yield.

The sensitivities reuse the d1/d2 quantities of the Black-Scholes
evaluator. All values are in natural units: theta is per year, vega per
unit of volatility (1.0 = 100 vol points) and rho per unit of rate.

Formulas (q = dividend yield, D = e^(-rT), Dq = e^(-qT)):
    Delta  call: Dq·N(d1)                 put: Dq·(N(d1) - 1)
    Gamma       : Dq·φ(d1) / (S·σ·√T)
    Theta       : -S·σ·Dq·φ(d1) / (2√T)
                  call: - r·K·D·N(d2)  + q·S·Dq·N(d1)
                  put : + r·K·D·N(-d2) - q·S·Dq·N(-d1)
    Vega        : S·Dq·φ(d1)·√T
    Rho    call: K·T·D·N(d2)              put: -K·T·D·N(-d2)
"""

import math

from optcalc.core.black_scholes import (
    d1,
    require_finite,
    validate_inputs,
    validate_option_type,
)
from optcalc.core.distributions import normal_cdf, normal_pdf
from optcalc.utils.exceptions import InvalidSelectorError
from optcalc.utils.types import Greek, Greeks, GreeksParams, OptionType


def calculate_greeks(params: GreeksParams, greek: Greek) -> float:
    """
    Calculate one sensitivity of a European option.

    Args:
        params: Market and contract inputs, including the dividend yield
        greek: Which sensitivity to return

    Returns:
        The selected Greek

    Raises:
        ValidationError: If S, K, T or σ is not strictly positive, or r or q
            is not finite
        InvalidSelectorError: If greek or option_type is not recognised

    Examples:
        >>> from optcalc.utils.types import OptionType
        >>> p = GreeksParams(0.05, 100.0, 100.0, 1.0, 0.20, OptionType.CALL)
        >>> round(calculate_greeks(p, Greek.DELTA), 4)
        0.6368
    """
    S = params.underlying_price
    K = params.strike_price
    T = params.time_to_expiry
    r = params.interest_rate
    sigma = params.volatility
    q = params.dividend_yield

    validate_inputs(S, K, T, r, sigma)
    require_finite("Dividend yield", q)
    validate_option_type(params.option_type)

    sqrt_T = math.sqrt(T)
    d1_value = d1(S, K, T, r, sigma)
    d2_value = d1_value - sigma * sqrt_T

    discount = math.exp(-r * T)
    dividend_discount = math.exp(-q * T)
    is_call = params.option_type == OptionType.CALL

    if greek == Greek.DELTA:
        if is_call:
            value = dividend_discount * normal_cdf(d1_value)
        else:
            value = dividend_discount * (normal_cdf(d1_value) - 1.0)
    elif greek == Greek.GAMMA:
        value = dividend_discount * normal_pdf(d1_value) / (S * sigma * sqrt_T)
    elif greek == Greek.THETA:
        # Diffusion term, shared by calls and puts
        theta_part1 = -(S * sigma * dividend_discount * normal_pdf(d1_value)) / (2.0 * sqrt_T)
        if is_call:
            theta_part2 = (-r * K * discount * normal_cdf(d2_value)
                           + q * S * dividend_discount * normal_cdf(d1_value))
        else:
            theta_part2 = (r * K * discount * normal_cdf(-d2_value)
                           - q * S * dividend_discount * normal_cdf(-d1_value))
        value = theta_part1 + theta_part2
    elif greek == Greek.VEGA:
        value = S * dividend_discount * normal_pdf(d1_value) * sqrt_T
    elif greek == Greek.RHO:
        if is_call:
            value = K * T * discount * normal_cdf(d2_value)
        else:
            value = -K * T * discount * normal_cdf(-d2_value)
    else:
        raise InvalidSelectorError(f"Unknown Greek: {greek!r}")

    return float(value)


def calculate_all_greeks(params: GreeksParams) -> Greeks:
    """
    Calculate all five Greeks for an option.

    Example:
        >>> from optcalc.utils.types import OptionType
        >>> g = calculate_all_greeks(GreeksParams(0.05, 100.0, 100.0, 1.0, 0.20, OptionType.PUT))
        >>> g.delta < 0 < g.gamma
        True
    """
    return Greeks(
        delta=calculate_greeks(params, Greek.DELTA),
        gamma=calculate_greeks(params, Greek.GAMMA),
        theta=calculate_greeks(params, Greek.THETA),
        vega=calculate_greeks(params, Greek.VEGA),
        rho=calculate_greeks(params, Greek.RHO),
    )
