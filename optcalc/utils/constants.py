"""
Numerical constants and defaults for the option calculator.

This module collects the day-count convention, Monte Carlo defaults and
the tolerances used by the diagnostics. Interfaces read their defaults
from here so the library and the CLI agree.
"""

import sys

# Day-count convention for the simulation grid
DAYS_PER_YEAR = 365

# Monte Carlo defaults
DEFAULT_SIMULATIONS = 100_000  # Paths per evaluation
DEFAULT_PATH_BATCH = 50_000  # Paths simulated together in one vectorised batch
CONFIDENCE_Z_95 = 1.96  # Two-sided 95% normal quantile

# Smallest positive normal double; lower bound for the first Box-Muller uniform
MIN_UNIFORM = sys.float_info.min

# Diagnostics tolerances
PARITY_TOLERANCE = 1e-9  # Put-call parity absolute tolerance
PARITY_REL_TOLERANCE = 1e-12  # Put-call parity tolerance per unit of max(S, K)
