"""
Monte Carlo pricing of European options under geometric Brownian motion.

The underlying follows, under the risk-neutral measure,

    dS = r·S dt + σ·S dW

and is stepped one calendar day at a time with the exact log-normal
update

    S(t + dt) = S(t) · exp((r - σ²/2)·dt + σ·√dt·Z)

where each Z is produced by the Box-Muller transform from two uniforms
drawn from a :class:`UniformRandomSource`. The price is the mean
terminal payoff discounted at the risk-free rate.

Paths are independent, so they are simulated in batches. Each batch
receives its own child ``SeedSequence`` spawned from the call's root
seed and builds its own random source; batches can therefore run on
separate threads and a seeded result is identical for any worker count.
"""

import logging
import math
import numbers
from concurrent.futures import ThreadPoolExecutor
from typing import Optional

import numpy as np

from optcalc.core.black_scholes import validate_inputs, validate_option_type
from optcalc.core.random_source import UniformRandomSource, box_muller
from optcalc.utils.constants import (
    CONFIDENCE_Z_95,
    DAYS_PER_YEAR,
    DEFAULT_PATH_BATCH,
    MIN_UNIFORM,
)
from optcalc.utils.exceptions import ValidationError
from optcalc.utils.types import MonteCarloParams, MonteCarloResult, OptionType

logger = logging.getLogger(__name__)


def simulation_grid(time_to_expiry: float) -> tuple[int, float]:
    """
    Derive the daily simulation grid for an expiry.

    Args:
        time_to_expiry: Time to expiration in years (> 0)

    Returns:
        (total_days, time_step) with total_days = max(1, floor(T·365))
        and time_step = T / total_days

    Notes:
        An expiry shorter than one day is simulated as a single step of
        length T rather than producing an empty grid.
    """
    total_days = max(1, math.floor(time_to_expiry * DAYS_PER_YEAR))
    return total_days, time_to_expiry / total_days


def _validate_params(params: MonteCarloParams) -> None:
    validate_inputs(
        params.underlying_price,
        params.strike_price,
        params.time_to_expiry,
        params.interest_rate,
        params.volatility,
    )
    validate_option_type(params.option_type)

    n = params.number_of_simulations
    if isinstance(n, bool) or not isinstance(n, numbers.Integral):
        raise ValidationError(f"Number of simulations must be an integer, got {n!r}")
    if n < 1:
        raise ValidationError(f"Number of simulations must be at least 1, got {n}")


def _simulate_batch(
    params: MonteCarloParams,
    n_paths: int,
    total_days: int,
    time_step: float,
    seed: np.random.SeedSequence,
) -> tuple[float, float]:
    """Simulate one batch of paths and return (Σ payoff, Σ payoff²)."""
    random_source = UniformRandomSource(MIN_UNIFORM, 1.0, seed=seed)

    sigma = params.volatility
    drift = (params.interest_rate - 0.5 * sigma * sigma) * time_step
    diffusion_scale = sigma * math.sqrt(time_step)

    prices = np.full(n_paths, float(params.underlying_price))
    for _ in range(total_days):
        u1 = random_source.get_random_values(n_paths)
        u2 = random_source.get_random_values(n_paths)
        prices *= np.exp(drift + diffusion_scale * box_muller(u1, u2))

    if params.option_type == OptionType.CALL:
        payoffs = np.maximum(prices - params.strike_price, 0.0)
    else:
        payoffs = np.maximum(params.strike_price - prices, 0.0)

    return float(payoffs.sum()), float(np.dot(payoffs, payoffs))


def run_monte_carlo(
    params: MonteCarloParams,
    seed: Optional[int] = None,
    workers: int = 1,
    batch_size: int = DEFAULT_PATH_BATCH,
) -> MonteCarloResult:
    """
    Price a European option by Monte Carlo simulation.

    Args:
        params: Simulation, market and contract inputs
        seed: Root seed for a reproducible run; None draws OS entropy
        workers: Number of threads simulating batches concurrently
        batch_size: Paths simulated together in one vectorised batch

    Returns:
        MonteCarloResult with the price, its standard error and a 95%
        confidence interval

    Raises:
        ValidationError: If S, K, T or σ is not strictly positive, r is not
            finite, the simulation count is below one, or workers/batch_size < 1
        InvalidSelectorError: If option_type is not a call or a put
    """
    _validate_params(params)
    if workers < 1:
        raise ValidationError(f"workers must be at least 1, got {workers}")
    if batch_size < 1:
        raise ValidationError(f"batch_size must be at least 1, got {batch_size}")

    n_paths = int(params.number_of_simulations)
    total_days, time_step = simulation_grid(params.time_to_expiry)

    full_batches, remainder = divmod(n_paths, batch_size)
    batch_sizes = [batch_size] * full_batches + ([remainder] if remainder else [])
    batch_seeds = np.random.SeedSequence(seed).spawn(len(batch_sizes))

    logger.debug(
        "Simulating %d paths x %d days (dt=%.6g) in %d batches on %d worker(s)",
        n_paths, total_days, time_step, len(batch_sizes), workers,
    )

    def simulate(job):
        size, batch_seed = job
        return _simulate_batch(params, size, total_days, time_step, batch_seed)

    jobs = list(zip(batch_sizes, batch_seeds))
    if workers > 1 and len(jobs) > 1:
        with ThreadPoolExecutor(max_workers=workers) as pool:
            batch_sums = list(pool.map(simulate, jobs))
    else:
        batch_sums = [simulate(job) for job in jobs]

    total_payoff = sum(s for s, _ in batch_sums)
    total_squared = sum(sq for _, sq in batch_sums)

    discount_factor = math.exp(-params.interest_rate * params.time_to_expiry)
    mean_payoff = total_payoff / n_paths
    price = mean_payoff * discount_factor

    if n_paths > 1:
        variance = max((total_squared - n_paths * mean_payoff ** 2) / (n_paths - 1), 0.0)
        std_error = discount_factor * math.sqrt(variance / n_paths)
    else:
        std_error = 0.0

    logger.debug("Monte Carlo price %.6f (SE %.6f)", price, std_error)

    return MonteCarloResult(
        price=price,
        std_error=std_error,
        n_paths=n_paths,
        total_days=total_days,
        confidence_interval_95=(
            price - CONFIDENCE_Z_95 * std_error,
            price + CONFIDENCE_Z_95 * std_error,
        ),
    )


def calculate_monte_carlo(
    params: MonteCarloParams,
    seed: Optional[int] = None,
    workers: int = 1,
) -> float:
    """
    Monte Carlo price of a European option.

    Convenience wrapper around :func:`run_monte_carlo` returning only the
    discounted mean payoff.
    """
    return run_monte_carlo(params, seed=seed, workers=workers).price
