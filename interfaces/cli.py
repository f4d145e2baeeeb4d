"""
Command-line interface for the option calculator.

This CLI provides access to:
- Black-Scholes pricing
- Greeks calculation
- Monte Carlo pricing
- Futures valuation
- Option and strategy payoffs
- Monte Carlo convergence diagnostics

Every option can also be supplied through the environment with the
OPTCALC_ prefix, e.g. OPTCALC_MONTECARLO_PATHS=200000.
"""

import logging

import click

from optcalc.core.black_scholes import calculate_black_scholes
from optcalc.core.futures import calculate_futures
from optcalc.core.greeks import calculate_all_greeks, calculate_greeks
from optcalc.core.monte_carlo import run_monte_carlo
from optcalc.core.option import Option
from optcalc.diagnostics.convergence import monte_carlo_convergence
from optcalc.strategies.payoffs import STRATEGIES
from optcalc.utils.constants import DEFAULT_SIMULATIONS
from optcalc.utils.exceptions import OptionCalculatorError
from optcalc.utils.types import (
    BlackScholesParams,
    FuturesParams,
    Greek,
    GreeksParams,
    MonteCarloParams,
    OptionType,
)

OPTION_TYPES = click.Choice([t.value for t in OptionType])
STRATEGY_LEGS = {
    "put-spread": 2,
    "call-spread": 2,
    "butterfly": 3,
    "strangle": 2,
    "straddle": 2,
}


def market_options(func):
    """Attach the market/contract options shared by the pricing commands."""
    options = [
        click.option("--spot", "-S", type=float, required=True, help="Underlying price"),
        click.option("--strike", "-K", type=float, required=True, help="Strike price"),
        click.option("--time", "-T", type=float, required=True, help="Time to expiry (years)"),
        click.option("--rate", "-r", type=float, required=True, help="Risk-free rate"),
        click.option("--vol", "-v", type=float, required=True, help="Volatility (annualized)"),
        click.option("--type", "-t", "option_type", type=OPTION_TYPES, default="call"),
    ]
    for option in reversed(options):
        func = option(func)
    return func


@click.group()
@click.version_option(version="1.0.0")
@click.option("--verbose", is_flag=True, help="Enable debug logging")
def cli(verbose):
    """Option Calculator - Black-Scholes, Greeks and Monte Carlo pricing."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )


@cli.command()
@market_options
def price(spot, strike, time, rate, vol, option_type):
    """Calculate option price using Black-Scholes."""
    params = BlackScholesParams(rate, spot, strike, time, vol, OptionType(option_type))
    try:
        price_value = calculate_black_scholes(params)
    except OptionCalculatorError as e:
        raise click.ClickException(str(e))
    click.echo(f"\n{option_type.capitalize()} Option Price: ${price_value:.4f}")


@cli.command()
@market_options
@click.option("--div", "-q", type=float, default=0.0, help="Dividend yield")
@click.option("--greek", "-g", type=click.Choice([g.value for g in Greek]), default=None,
              help="Single Greek to print (default: all)")
def greeks(spot, strike, time, rate, vol, option_type, div, greek):
    """Calculate option Greeks."""
    params = GreeksParams(
        rate, spot, strike, time, vol, OptionType(option_type), dividend_yield=div
    )
    try:
        if greek is not None:
            value = calculate_greeks(params, Greek(greek))
            click.echo(f"\n{greek.capitalize()}: {value:.6f}")
            return
        greeks_values = calculate_all_greeks(params)
    except OptionCalculatorError as e:
        raise click.ClickException(str(e))

    click.echo(f"\nGreeks for {option_type.capitalize()} Option:")
    click.echo(f"  Delta:  {greeks_values.delta:>10.6f}")
    click.echo(f"  Gamma:  {greeks_values.gamma:>10.6f}")
    click.echo(f"  Theta:  {greeks_values.theta:>10.6f} (per year)")
    click.echo(f"  Vega:   {greeks_values.vega:>10.6f}")
    click.echo(f"  Rho:    {greeks_values.rho:>10.6f}")


@cli.command()
@market_options
@click.option("--paths", "-n", type=int, default=DEFAULT_SIMULATIONS, show_default=True,
              help="Number of simulated paths")
@click.option("--seed", type=int, default=None, help="Seed for a reproducible run")
@click.option("--workers", "-w", type=int, default=1, show_default=True,
              help="Threads simulating path batches")
def montecarlo(spot, strike, time, rate, vol, option_type, paths, seed, workers):
    """Calculate option price using Monte Carlo simulation."""
    params = MonteCarloParams(paths, rate, spot, strike, time, vol, OptionType(option_type))
    try:
        result = run_monte_carlo(params, seed=seed, workers=workers)
    except OptionCalculatorError as e:
        raise click.ClickException(str(e))

    click.echo(f"\n{option_type.capitalize()} Option Monte Carlo Price: ${result.price:.4f}")
    click.echo(f"  Std error: {result.std_error:.6f}")
    lower, upper = result.confidence_interval_95
    click.echo(f"  95% CI:    [{lower:.4f}, {upper:.4f}]")
    click.echo(f"  Paths: {result.n_paths}  Days: {result.total_days}")


@cli.command()
@click.option("--value", "-p", type=float, required=True, help="Present value")
@click.option("--rate", "-r", type=float, required=True, help="Annual interest rate")
@click.option("--time", "-T", type=float, required=True, help="Horizon (years)")
def futures(value, rate, time):
    """Calculate future value under simple annual compounding."""
    fv = calculate_futures(FuturesParams(value, rate, time))
    click.echo(f"\nFuture Value: ${fv:.4f}")


@cli.command()
@click.option("--strike", "-K", type=float, required=True, help="Strike price")
@click.option("--premium", "-p", type=float, required=True, help="Premium paid")
@click.option("--type", "-t", "option_type", type=OPTION_TYPES, default="call")
@click.option("--spot", "-S", type=float, required=True, help="Spot price at expiry")
def payoff(strike, premium, option_type, spot):
    """Calculate the net payoff of a single option."""
    option = Option(strike, premium, OptionType(option_type))
    click.echo(f"\nPayoff: {option.calculate_payoff(spot):.4f}")


@cli.command()
@click.argument("name", type=click.Choice(sorted(STRATEGIES)))
@click.option("--leg", "-l", "legs", nargs=3, multiple=True, required=True,
              type=(OPTION_TYPES, float, float),
              help="Leg as TYPE STRIKE PREMIUM, in the strategy's argument order")
@click.option("--spot", "-S", type=float, required=True, help="Spot price at expiry")
def strategy(name, legs, spot):
    """
    Calculate the net payoff of a multi-leg strategy.

    \b
    Leg order:
      put-spread   long put, short put
      call-spread  long call, short call
      butterfly    wing1, body, wing2
      strangle     put, call
      straddle     put, call
    """
    if len(legs) != STRATEGY_LEGS[name]:
        raise click.UsageError(
            f"{name} takes {STRATEGY_LEGS[name]} legs, got {len(legs)}"
        )
    options = [Option(strike, premium, OptionType(kind)) for kind, strike, premium in legs]
    try:
        value = STRATEGIES[name](*options, spot)
    except OptionCalculatorError as e:
        raise click.ClickException(str(e))
    click.echo(f"\n{name} payoff: {value:.4f}")


@cli.command()
@market_options
@click.option("--paths", "-n", "path_counts", type=int, multiple=True,
              default=(1_000, 10_000, 100_000), show_default=True,
              help="Path counts to compare (repeatable)")
@click.option("--seed", type=int, default=None, help="Seed for a reproducible run")
def convergence(spot, strike, time, rate, vol, option_type, path_counts, seed):
    """Compare Monte Carlo prices with Black-Scholes as paths grow."""
    params = MonteCarloParams(1, rate, spot, strike, time, vol, OptionType(option_type))
    try:
        rows = monte_carlo_convergence(params, path_counts, seed=seed)
    except OptionCalculatorError as e:
        raise click.ClickException(str(e))

    click.echo(f"\n{'Paths':>10} {'MC':>10} {'SE':>10} {'BS':>10} {'Rel err':>10}")
    for row in rows:
        click.echo(
            f"{row.n_paths:>10} {row.mc_price:>10.4f} {row.std_error:>10.4f} "
            f"{row.bs_price:>10.4f} {row.rel_error:>10.4%}"
        )


def main():
    cli(auto_envvar_prefix="OPTCALC")


if __name__ == "__main__":
    main()
