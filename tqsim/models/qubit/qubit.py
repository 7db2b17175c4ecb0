#    tqsim: a toy state-vector quantum circuit simulator
#
#    This program is free software: you can redistribute it and/or modify
#    it under the terms of the GNU General Public License as published by
#    the Free Software Foundation, either version 3 of the License, or
#    (at your option) any later version.
#
#    This program is distributed in the hope that it will be useful,
#    but WITHOUT ANY WARRANTY; without even the implied warranty of
#    MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
#    GNU General Public License for more details.
#
#    You should have received a copy of the GNU General Public License
#    along with this program.  If not, see <https://www.gnu.org/licenses/>.

from typing import Any, Literal, final

import numpy as np
import numpy.random as npr

from tqsim.errors import NormalizationError
from tqsim.models.core import ATOL, Complex
from tqsim.models.core.complex import Real
from tqsim.models.core.state import check_normalized
from tqsim.utils import log, random_f32

FRAC_1_SQRT_2 = np.float32(1 / np.sqrt(2))
"""``1/sqrt(2)`` in single precision."""


@final
class Qubit:
    """
    A single unentangled qubit ``p0|0> + p1|1>``.

    A qubit is an immutable value. Equality with ``==`` is structural, so a qubit and its negation,
    which differ only in global phase, compare unequal; use ``approx_eq`` to tolerate rounding.
    """

    __slots__ = ("p0", "p1")

    def __init__(self, p0: Complex, p1: Complex):
        """
        Args:
            p0: amplitude of ``|0>``.
            p1: amplitude of ``|1>``.

        Raises:
            NormalizationError - ``|p0|^2 + |p1|^2`` is not 1 within ``ATOL``.
        """
        try:
            check_normalized(p0.mag_square() + p1.mag_square(), "qubit")
        except NormalizationError:
            log.debug(f"rejecting qubit p0={p0} p1={p1}")
            raise
        self.p0 = p0
        self.p1 = p1

    def __setattr__(self, name: str, value: Any) -> None:
        if hasattr(self, "p1"):
            raise AttributeError("Qubit is immutable")
        super().__setattr__(name, value)

    @staticmethod
    def zero() -> "Qubit":
        """``|0>``"""
        return Qubit(Complex.one(), Complex.zero())

    @staticmethod
    def one() -> "Qubit":
        """``|1>``"""
        return Qubit(Complex.zero(), Complex.one())

    @staticmethod
    def plus() -> "Qubit":
        """``|+> = (|0> + |1>)/sqrt(2)``"""
        return Qubit(Complex.from_re(FRAC_1_SQRT_2), Complex.from_re(FRAC_1_SQRT_2))

    @staticmethod
    def minus() -> "Qubit":
        """``|-> = (|0> - |1>)/sqrt(2)``"""
        return Qubit(Complex.from_re(FRAC_1_SQRT_2), Complex.from_re(-FRAC_1_SQRT_2))

    @staticmethod
    def from_theta_phi(theta: Real, phi: Real) -> "Qubit":
        """
        Build from Bloch sphere angles: ``cos(theta/2)|0> + e^(i*phi) sin(theta/2)|1>``.
        """
        half = np.float32(theta) / np.float32(2)
        return Qubit(Complex.from_re(np.cos(half)), Complex.exp_ix(phi) * np.sin(half))

    @staticmethod
    def from_theta_phi_gamma(theta: Real, phi: Real, gamma: Real) -> "Qubit":
        """
        Build from Bloch sphere angles with an additional global phase ``e^(i*gamma)``.
        """
        phase_shift = Complex.exp_ix(gamma)
        half = np.float32(theta) / np.float32(2)
        ket_0 = Complex.from_re(np.cos(half))
        ket_1 = Complex.exp_ix(phi) * np.sin(half)
        return Qubit(phase_shift * ket_0, phase_shift * ket_1)

    def amplitudes(self) -> tuple[Complex, Complex]:
        return self.p0, self.p1

    def probabilities(self) -> tuple[np.float32, np.float32]:
        """Probabilities of measuring 0 and 1."""
        return self.p0.mag_square(), self.p1.mag_square()

    def to_numpy(self) -> np.ndarray:
        """Amplitudes as a ``complex64`` vector of shape (2,)."""
        return np.array([complex(self.p0), complex(self.p1)], dtype=np.complex64)

    def sample_is_zero(self, gen: npr.Generator | None = None) -> bool:
        """
        Bernoulli trial that succeeds with probability ``|p0|^2``.

        The qubit itself is unchanged; each call is an independent trial.

        Args:
            gen: random number generator, defaults to the global rng.
        """
        return bool(random_f32(gen) < self.p0.mag_square())

    def sample_is_one(self, gen: npr.Generator | None = None) -> bool:
        return not self.sample_is_zero(gen)

    def sample(self, gen: npr.Generator | None = None) -> Literal[0, 1]:
        """Sample a measurement outcome 0 or 1."""
        return 0 if self.sample_is_zero(gen) else 1

    def approx_eq(self, other: "Qubit", atol: float = ATOL) -> bool:
        """Compare amplitudes within absolute tolerance."""
        return self.p0.approx_eq(other.p0, atol) and self.p1.approx_eq(other.p1, atol)

    def __neg__(self) -> "Qubit":
        return Qubit(-self.p0, -self.p1)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Qubit):
            return NotImplemented
        return self.p0 == other.p0 and self.p1 == other.p1

    def __hash__(self) -> int:
        return hash((self.p0, self.p1))

    def __repr__(self) -> str:
        return f"<Qubit {self.p0!r}|0> + {self.p1!r}|1>>"
