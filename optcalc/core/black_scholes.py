"""
Closed-form Black-Scholes pricing for European options.

Mathematical Background:
    Under the Black-Scholes assumptions (log-normal prices, constant
    volatility and rate, frictionless continuous trading) a European
    option has the closed-form value

        Call = S·N(d1) - K·e^(-rT)·N(d2)
        Put  = K·e^(-rT)·N(-d2) - S·N(-d1)

    with
        d1 = [ln(S/K) + (r + σ²/2)T] / (σ√T)
        d2 = d1 - σ√T

References:
    Black, F., & Scholes, M. (1973). The Pricing of Options and Corporate Liabilities.
    Journal of Political Economy, 81(3), 637-654.
"""

import math

from optcalc.core.distributions import normal_cdf
from optcalc.utils.exceptions import InvalidSelectorError, ValidationError
from optcalc.utils.types import BlackScholesParams, OptionType


def require_finite(name: str, value: float) -> None:
    """Raise ValidationError if ``value`` is NaN or infinite."""
    if not math.isfinite(value):
        raise ValidationError(f"{name} must be finite, got {value}")


def validate_inputs(S: float, K: float, T: float, r: float, sigma: float) -> None:
    """
    Validate the market inputs shared by every evaluator.

    Args:
        S: Underlying price
        K: Strike price
        T: Time to expiration (years)
        r: Risk-free rate (any finite value, negative rates allowed)
        sigma: Volatility

    Raises:
        ValidationError: If any input is non-finite, or S, K, T, σ is not
            strictly positive
    """
    for name, value in (("Underlying price", S), ("Strike price", K),
                        ("Time to expiry", T), ("Volatility", sigma)):
        require_finite(name, value)
        if value <= 0:
            raise ValidationError(f"{name} must be positive, got {value}")
    require_finite("Interest rate", r)


def validate_option_type(option_type: OptionType) -> None:
    """
    Check that ``option_type`` is a call or a put.

    Raises:
        InvalidSelectorError: For any other value
    """
    if option_type not in (OptionType.CALL, OptionType.PUT):
        raise InvalidSelectorError(
            f"option_type must be a call or a put, got {option_type!r}"
        )


def d1(S: float, K: float, T: float, r: float, sigma: float) -> float:
    """
    Calculate d1 of the Black-Scholes formula.

    Formula:
        d1 = [ln(S/K) + (r + σ²/2)T] / (σ√T)
    """
    return (math.log(S / K) + (r + sigma * sigma / 2.0) * T) / (sigma * math.sqrt(T))


def d2(S: float, K: float, T: float, r: float, sigma: float) -> float:
    """
    Calculate d2 = d1 - σ√T.

    N(d2) is the risk-neutral probability that a call finishes in the money.
    """
    return d1(S, K, T, r, sigma) - sigma * math.sqrt(T)


def calculate_black_scholes(params: BlackScholesParams) -> float:
    """
    Price a European option with the Black-Scholes formula.

    Args:
        params: Market and contract inputs

    Returns:
        Option price

    Raises:
        ValidationError: If S, K, T or σ is not strictly positive, or r is
            not finite
        InvalidSelectorError: If option_type is not a call or a put

    Examples:
        >>> from optcalc.utils.types import OptionType
        >>> p = BlackScholesParams(0.05, 100.0, 100.0, 1.0, 0.20, OptionType.CALL)
        >>> abs(calculate_black_scholes(p) - 10.4506) < 1e-3
        True
    """
    S = params.underlying_price
    K = params.strike_price
    T = params.time_to_expiry
    r = params.interest_rate
    sigma = params.volatility

    validate_inputs(S, K, T, r, sigma)
    validate_option_type(params.option_type)

    d1_value = d1(S, K, T, r, sigma)
    d2_value = d1_value - sigma * math.sqrt(T)
    discount_strike = K * math.exp(-r * T)

    if params.option_type == OptionType.CALL:
        return float(S * normal_cdf(d1_value) - discount_strike * normal_cdf(d2_value))
    return float(discount_strike * normal_cdf(-d2_value) - S * normal_cdf(-d1_value))
