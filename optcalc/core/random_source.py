"""
Bounded uniform random source and the Box-Muller transform.

Every :class:`UniformRandomSource` owns its own numpy ``Generator``;
there is no module-level random state, so two sources never interfere
and a source may be handed to a worker thread without locking as long
as only that thread draws from it.
"""

import math
from typing import Optional, Union

import numpy as np

SeedLike = Union[None, int, np.random.SeedSequence]


class UniformRandomSource:
    """
    Uniform random values of a numeric type within fixed bounds.

    The bounds are order independent: ``UniformRandomSource(1, 0)`` and
    ``UniformRandomSource(0, 1)`` describe the same interval. Samples lie
    in ``[low, high)`` for floating dtypes (a continuous uniform) and in
    ``[low, high]`` for integer dtypes (a discrete uniform that includes
    both bounds).

    Args:
        left: One bound of the interval
        right: The other bound
        dtype: Element type (``float``, ``int`` or any numpy integer or
            floating dtype)
        seed: ``None`` to seed from operating-system entropy, or an int /
            ``SeedSequence`` for a reproducible stream

    Raises:
        TypeError: If dtype is not an integer or floating type

    Examples:
        >>> source = UniformRandomSource(10, 0, dtype=int, seed=1)
        >>> 0 <= source.get_random_value() <= 10
        True
    """

    def __init__(self, left, right, dtype=float, seed: SeedLike = None):
        self._dtype = np.dtype(dtype)
        if self._dtype.kind not in ("i", "u", "f"):
            raise TypeError(f"dtype must be a numeric type, got {self._dtype}")

        self.low = min(left, right)
        self.high = max(left, right)
        self._rng = np.random.default_rng(seed)

    @property
    def dtype(self) -> np.dtype:
        return self._dtype

    def get_random_value(self):
        """Draw one sample, advancing the generator."""
        return self.get_random_values(None)

    def get_random_values(self, size: Optional[Union[int, tuple]] = None):
        """
        Draw ``size`` samples at once.

        Args:
            size: Output shape; ``None`` returns a single scalar

        Returns:
            numpy array of shape ``size`` (or a numpy scalar) of ``dtype``
        """
        if self._dtype.kind == "f":
            values = self._rng.uniform(self.low, self.high, size)
        else:
            values = self._rng.integers(self.low, self.high, size, endpoint=True)

        if size is None:
            return self._dtype.type(values)
        return values.astype(self._dtype, copy=False)


def box_muller(u1, u2):
    """
    Turn two independent uniforms on (0, 1) into one standard normal draw.

    Formula:
        Z = √(-2·ln(u1)) · cos(2π·u2)

    Works element-wise on arrays. ``u1`` must be strictly positive.
    """
    return np.sqrt(-2.0 * np.log(u1)) * np.cos(2.0 * math.pi * u2)
