"""
Payoffs of common multi-leg option strategies.

Each strategy combines the net payoffs (intrinsic value minus premium)
of its legs at a given spot price. The strike layout that defines each
strategy is checked first:

- Put spread:  buy the higher-strike put, sell the lower-strike put
- Call spread: buy the lower-strike call, sell the higher-strike call
- Butterfly:   buy one low wing, sell two bodies, buy one high wing
- Strangle:    buy a put and a call, put strike below call strike
- Straddle:    buy a put and a call at the same strike
"""

from optcalc.core.option import Option
from optcalc.utils.exceptions import ValidationError


def put_spread(long_put: Option, short_put: Option, spot: float) -> float:
    """
    Net payoff of a put spread: long_put - short_put.

    Raises:
        ValidationError: If the long strike is not above the short strike
    """
    if long_put.strike <= short_put.strike:
        raise ValidationError(
            f"Long put strike must be above short put strike, "
            f"got {long_put.strike} <= {short_put.strike}"
        )
    return long_put.calculate_payoff(spot) - short_put.calculate_payoff(spot)


def call_spread(long_call: Option, short_call: Option, spot: float) -> float:
    """
    Net payoff of a call spread: long_call - short_call.

    Raises:
        ValidationError: If the long strike is not below the short strike
    """
    if long_call.strike >= short_call.strike:
        raise ValidationError(
            f"Long call strike must be below short call strike, "
            f"got {long_call.strike} >= {short_call.strike}"
        )
    return long_call.calculate_payoff(spot) - short_call.calculate_payoff(spot)


def butterfly(wing1: Option, body: Option, wing2: Option, spot: float) -> float:
    """
    Net payoff of a butterfly: wing1 - 2·body + wing2.

    Raises:
        ValidationError: If strikes are not strictly ascending wing1 < body < wing2
    """
    if not (wing1.strike < body.strike < wing2.strike):
        raise ValidationError(
            f"Strikes must be ascending: wing1 < body < wing2, "
            f"got {wing1.strike}, {body.strike}, {wing2.strike}"
        )
    return (
        wing1.calculate_payoff(spot)
        - 2.0 * body.calculate_payoff(spot)
        + wing2.calculate_payoff(spot)
    )


def strangle(put: Option, call: Option, spot: float) -> float:
    """
    Net payoff of a long strangle: put + call.

    Raises:
        ValidationError: If the put strike is not below the call strike
    """
    if put.strike >= call.strike:
        raise ValidationError(
            f"Put strike must be below call strike, got {put.strike} >= {call.strike}"
        )
    return put.calculate_payoff(spot) + call.calculate_payoff(spot)


def straddle(put: Option, call: Option, spot: float) -> float:
    """
    Net payoff of a long straddle: put + call.

    Raises:
        ValidationError: If the two strikes differ
    """
    if put.strike != call.strike:
        raise ValidationError(
            f"Straddle legs must share a strike, got {put.strike} and {call.strike}"
        )
    return put.calculate_payoff(spot) + call.calculate_payoff(spot)


STRATEGIES = {
    "put-spread": put_spread,
    "call-spread": call_spread,
    "butterfly": butterfly,
    "strangle": strangle,
    "straddle": straddle,
}
