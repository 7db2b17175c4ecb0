from collections.abc import Callable
from typing import Any, cast, override

import numpy as np
import numpy.random as npr

_rng = npr.default_rng()
"""
Real rng instance.
This may be re-assigned.
"""


class RngUtils:
    def reseed(self, seed: int | None):
        """
        Reseed the random number generator.
        """
        set_seed(seed)


class RngProxy(RngUtils):
    """
    Proxy class for global rng.
    """

    def __getattr__(self, name: str) -> Any:
        return getattr(_rng, name)


class RngPublic(npr.Generator, RngUtils):
    def __init__(self):
        assert False


rng = cast(RngPublic, RngProxy())
"""
Global random number generator.
"""


def set_seed(seed: int | None):
    """
    Reseed the random number generator.
    """
    global _rng
    _rng = npr.default_rng(npr.PCG64(seed))


def random_f32(gen: npr.Generator | None = None) -> np.float32:
    """
    Draw a single-precision variate uniformly from ``[0, 1)``.

    Args:
        gen: random number generator, defaults to the global rng.
    """
    return np.float32((rng if gen is None else gen).random(dtype=np.float32))


class FixedRng(npr.Generator):
    """
    Random number generator that returns fixed values.

    This is primarily useful for unit testing.
    """

    def __init__(self, v: Callable[[], float] | float | None = None):
        super().__init__(npr.PCG64())
        self._v = (lambda: v) if isinstance(v, (int, float)) else v

    @override
    def random(self, *args, **kwargs) -> Any:
        return self._v() if self._v else super().random(*args, **kwargs)
