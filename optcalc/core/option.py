"""
Priced option leg used to build strategy payoffs.
"""

from dataclasses import dataclass

from optcalc.utils.types import OptionType


@dataclass(frozen=True)
class Option:
    """
    A European option bought for a known premium.

    Attributes:
        strike: Strike price
        premium: Price paid for the option
        option_type: OptionType.CALL or OptionType.PUT
    """
    strike: float
    premium: float
    option_type: OptionType

    def calculate_payoff(self, spot: float) -> float:
        """
        Payoff at expiry for a given spot price, net of the premium.

        Formulas:
            Call: max(spot - strike, 0) - premium
            Put:  max(strike - spot, 0) - premium

        Examples:
            >>> Option(100.0, 5.0, OptionType.CALL).calculate_payoff(120.0)
            15.0
        """
        if self.option_type == OptionType.CALL:
            return max(spot - self.strike, 0.0) - self.premium
        return max(self.strike - spot, 0.0) - self.premium
