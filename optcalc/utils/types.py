"""
Data types and structures for option pricing.

This module defines the closed selector types (option side and Greek),
the immutable parameter bundles accepted by each evaluator, and the
result containers returned by the richer entry points.
"""

from dataclasses import dataclass
from enum import Enum


class OptionType(str, Enum):
    """Side of a European option."""

    CALL = "call"
    PUT = "put"


class Greek(str, Enum):
    """Sensitivity selected from the Greeks evaluator."""

    DELTA = "delta"
    GAMMA = "gamma"
    THETA = "theta"
    VEGA = "vega"
    RHO = "rho"


@dataclass(frozen=True)
class BlackScholesParams:
    """
    Immutable inputs of the closed-form Black-Scholes evaluator.

    Attributes:
        interest_rate: Risk-free rate r (annualized, continuous compounding)
        underlying_price: Current price S of the underlying asset
        strike_price: Strike K
        time_to_expiry: Time to expiration T in years
        volatility: Annualized volatility sigma
        option_type: OptionType.CALL or OptionType.PUT
        paid_price: Premium paid for the option (bookkeeping only)
    """
    interest_rate: float
    underlying_price: float
    strike_price: float
    time_to_expiry: float
    volatility: float
    option_type: OptionType
    paid_price: float = 0.0


@dataclass(frozen=True)
class GreeksParams:
    """
    Immutable inputs of the Greeks evaluator.

    Same fields as :class:`BlackScholesParams` plus the continuous
    dividend yield q, expressed as a fraction (0.02 for 2%).
    """
    interest_rate: float
    underlying_price: float
    strike_price: float
    time_to_expiry: float
    volatility: float
    option_type: OptionType
    paid_price: float = 0.0
    dividend_yield: float = 0.0


@dataclass(frozen=True)
class MonteCarloParams:
    """
    Immutable inputs of the Monte Carlo evaluator.

    Attributes:
        number_of_simulations: Number of simulated price paths (>= 1)
        interest_rate, underlying_price, strike_price, time_to_expiry,
        volatility, option_type, paid_price: as in BlackScholesParams
    """
    number_of_simulations: int
    interest_rate: float
    underlying_price: float
    strike_price: float
    time_to_expiry: float
    volatility: float
    option_type: OptionType
    paid_price: float = 0.0


@dataclass(frozen=True)
class FuturesParams:
    """
    Inputs of the simple-compounding futures valuation.

    Attributes:
        present_value: Current value of the asset or investment
        interest_rate: Annual rate of return
        time: Horizon in years
    """
    present_value: float
    interest_rate: float
    time: float


@dataclass
class Greeks:
    """
    Container for all five sensitivities of one option.

    Attributes:
        delta: ∂V/∂S
        gamma: ∂²V/∂S²
        theta: ∂V/∂t, annualized
        vega: ∂V/∂σ, per unit of volatility
        rho: ∂V/∂r, per unit of rate
    """
    delta: float
    gamma: float
    theta: float
    vega: float
    rho: float


@dataclass
class MonteCarloResult:
    """
    Result of a Monte Carlo evaluation.

    Attributes:
        price: Discounted mean terminal payoff
        std_error: Standard error of the price estimate
        n_paths: Number of simulated paths
        total_days: Number of daily steps per path
        confidence_interval_95: (lower, upper) normal 95% interval
    """
    price: float
    std_error: float
    n_paths: int
    total_days: int
    confidence_interval_95: tuple[float, float]

    def __str__(self) -> str:
        return (
            f"Price: {self.price:.6f} "
            f"(SE: {self.std_error:.6f}, "
            f"95% CI: [{self.confidence_interval_95[0]:.6f}, "
            f"{self.confidence_interval_95[1]:.6f}])"
        )


@dataclass
class ParityCheck:
    """
    Result of a put-call parity check.

    Attributes:
        is_valid: Whether C - P matches S - K·e^(-rT) within tolerance
        violations: Human-readable description of each failed condition
        details: Intermediate values (call, put, both sides, difference)
    """
    is_valid: bool
    violations: list[str]
    details: dict[str, float]
