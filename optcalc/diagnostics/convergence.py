"""
Consistency diagnostics between the two pricing methods.

This module implements:
- Put-call parity of the analytic evaluator
- A convergence table of Monte Carlo prices against Black-Scholes
"""

import logging
import math
from dataclasses import dataclass, replace
from typing import Iterable, Optional

import numpy as np

from optcalc.core.black_scholes import calculate_black_scholes
from optcalc.core.monte_carlo import run_monte_carlo
from optcalc.utils.constants import PARITY_REL_TOLERANCE, PARITY_TOLERANCE
from optcalc.utils.types import (
    BlackScholesParams,
    MonteCarloParams,
    OptionType,
    ParityCheck,
)

logger = logging.getLogger(__name__)


@dataclass
class ConvergenceRow:
    """One line of a Monte Carlo vs Black-Scholes comparison."""

    n_paths: int
    mc_price: float
    std_error: float
    bs_price: float
    abs_error: float
    rel_error: float


def check_put_call_parity(
    params: BlackScholesParams,
    tolerance: float = PARITY_TOLERANCE,
    rel_tolerance: float = PARITY_REL_TOLERANCE,
) -> ParityCheck:
    """
    Validate put-call parity of the analytic prices.

    Put-call parity (no dividends):
        C - P = S - K·e^(-rT)

    Args:
        params: Inputs; the option_type field is ignored, both sides are priced
        tolerance: Absolute tolerance on the parity difference
        rel_tolerance: Additional tolerance per unit of max(S, K)

    Returns:
        ParityCheck with validation results
    """
    call_price = calculate_black_scholes(replace(params, option_type=OptionType.CALL))
    put_price = calculate_black_scholes(replace(params, option_type=OptionType.PUT))

    lhs = call_price - put_price
    rhs = params.underlying_price - params.strike_price * math.exp(
        -params.interest_rate * params.time_to_expiry
    )

    diff = abs(lhs - rhs)
    scale = max(params.underlying_price, params.strike_price)
    is_valid = diff <= tolerance + rel_tolerance * scale

    violations = []
    if not is_valid:
        violations.append(
            f"Put-call parity violated: C - P = {lhs:.10f}, "
            f"S - K·e^(-rT) = {rhs:.10f}, diff = {diff:.3e}"
        )

    details = {
        "call_price": call_price,
        "put_price": put_price,
        "parity_lhs": lhs,
        "parity_rhs": rhs,
        "difference": diff,
    }

    return ParityCheck(is_valid=is_valid, violations=violations, details=details)


def monte_carlo_convergence(
    params: MonteCarloParams,
    path_counts: Iterable[int],
    seed: Optional[int] = None,
    workers: int = 1,
) -> list[ConvergenceRow]:
    """
    Compare Monte Carlo prices at increasing path counts with Black-Scholes.

    Args:
        params: Monte Carlo inputs; number_of_simulations is overridden per row
        path_counts: Path counts to evaluate, e.g. (1_000, 10_000, 100_000)
        seed: Root seed; each row gets its own child seed
        workers: Threads per Monte Carlo run

    Returns:
        One ConvergenceRow per path count, in the given order
    """
    bs_price = calculate_black_scholes(
        BlackScholesParams(
            interest_rate=params.interest_rate,
            underlying_price=params.underlying_price,
            strike_price=params.strike_price,
            time_to_expiry=params.time_to_expiry,
            volatility=params.volatility,
            option_type=params.option_type,
            paid_price=params.paid_price,
        )
    )

    path_counts = list(path_counts)
    row_seeds = np.random.SeedSequence(seed).spawn(len(path_counts))

    rows = []
    for n_paths, row_seed in zip(path_counts, row_seeds):
        result = run_monte_carlo(
            replace(params, number_of_simulations=n_paths),
            seed=int(row_seed.generate_state(1)[0]),
            workers=workers,
        )
        abs_error = abs(result.price - bs_price)
        rows.append(
            ConvergenceRow(
                n_paths=n_paths,
                mc_price=result.price,
                std_error=result.std_error,
                bs_price=bs_price,
                abs_error=abs_error,
                rel_error=abs_error / bs_price if bs_price > 0 else math.inf,
            )
        )
        logger.debug("n=%d mc=%.6f bs=%.6f err=%.3e", n_paths, result.price, bs_price, abs_error)

    return rows
