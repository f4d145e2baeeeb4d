"""
Future value of an investment under simple annual compounding.
"""

from optcalc.utils.types import FuturesParams


def calculate_futures(params: FuturesParams) -> float:
    """
    Value of ``present_value`` grown at ``interest_rate`` for ``time`` years.

    Formula:
        FV = PV · (1 + r)^t

    Examples:
        >>> round(calculate_futures(FuturesParams(100.0, 0.05, 2.0)), 4)
        110.25
    """
    return params.present_value * (1.0 + params.interest_rate) ** params.time
