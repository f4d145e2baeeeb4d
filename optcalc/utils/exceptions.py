"""
Exception hierarchy for the option calculator.

Every error raised on purpose by the library derives from
:class:`OptionCalculatorError`. Both concrete errors also subclass
``ValueError`` so callers that already guard pricing calls with
``except ValueError`` keep working.
"""


class OptionCalculatorError(Exception):
    """Base class for errors raised by optcalc."""


class ValidationError(OptionCalculatorError, ValueError):
    """Raised when pricing inputs or strategy legs violate a precondition.

    Examples are a non-positive volatility or time to expiry, a simulation
    count below one, or a put spread whose long strike is not above its
    short strike.
    """


class InvalidSelectorError(OptionCalculatorError, ValueError):
    """Raised when an option type or Greek selector is outside the known set."""
