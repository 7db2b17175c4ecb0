"""
Definitions and helpers for amplitude vectors.
"""

from collections.abc import Iterable

import numpy as np

from tqsim.errors import NormalizationError
from tqsim.models.core.complex import Complex

ATOL = 1e-6
"""Absolute numerical tolerance for single-precision amplitude calculations."""

type AmplitudeVector = np.ndarray[tuple[int], np.dtype[np.complex64]]
"""State vector for N qubits, shape is (2**N,)."""


def mag_square_sum(amplitudes: Iterable[Complex]) -> np.float32:
    """Sum of squared magnitudes, accumulated in single precision."""
    total = np.float32(0.0)
    for amp in amplitudes:
        total += amp.mag_square()
    return total


def check_normalized(total: np.floating | float, what: str = "state") -> None:
    """
    Validate that a total probability is 1.

    Raises:
        NormalizationError - ``total`` deviates from 1 by more than ``ATOL``.
    """
    if not abs(float(total) - 1.0) <= ATOL:
        raise NormalizationError(f"{what} is not normalized: sum of |amplitude|^2 is {float(total)}")


def check_amplitude_vector(vector: np.ndarray, n: int) -> AmplitudeVector:
    """
    Validate that ``vector`` is a state vector for ``n`` qubits.

    Raises:
        ValueError - ``vector`` has wrong shape.
        NormalizationError - ``vector`` is not normalized.

    Returns: Validated input.
    """
    dim = 2**n
    if vector.shape != (dim,):
        raise ValueError(f"expected state vector of shape ({dim},), got {vector.shape}")
    check_normalized(mag_square_sum(to_complex_list(vector)), f"{n}-qubit register")
    return vector


def to_complex_list(vector: np.ndarray) -> list[Complex]:
    """Convert numpy amplitudes to ``Complex`` values."""
    return [Complex.from_complex(z) for z in vector]


def from_complex_list(amplitudes: Iterable[Complex]) -> AmplitudeVector:
    """Convert ``Complex`` values to a numpy amplitude vector."""
    return np.array([complex(amp) for amp in amplitudes], dtype=np.complex64)
