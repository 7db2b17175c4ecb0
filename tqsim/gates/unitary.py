"""
Single-qubit gates: validated 2x2 unitary operators that map a qubit to a qubit.
"""

from typing import final

import numpy as np

from tqsim.errors import UnitarityError
from tqsim.models.core import ATOL, Complex, Matrix2x2, conj_transpose, matrix_approx_eq
from tqsim.models.core.complex import Real
from tqsim.models.qubit import FRAC_1_SQRT_2, Qubit
from tqsim.utils import log

_id = np.identity(2, dtype=np.complex64)


@final
class UnitaryGate:
    def __init__(self, mat: Matrix2x2[Complex], name: str | None = None):
        """
        Build a single-qubit gate.

        Args:
            mat: 2x2 complex matrix.
            name: display name.

        Raises:
            UnitarityError - ``mat @ mat^dagger`` is not the identity within ``ATOL``.
        """
        self.mat = mat
        """Gate matrix."""
        self.name = name
        """Display name."""
        self._validate()

    def _validate(self) -> None:
        product = self.mat @ conj_transpose(self.mat)
        if not matrix_approx_eq(product, Matrix2x2.identity(Complex), ATOL):
            log.debug(f"rejecting non-unitary matrix {self.mat}")
            raise UnitarityError(f"matrix is not unitary (U @ U^dagger = {product})")

    def run(self, q: Qubit) -> Qubit:
        """Apply the gate on a qubit, returning the transformed qubit."""
        a, b, c, d = self.mat.elements()
        return Qubit(a * q.p0 + b * q.p1, c * q.p0 + d * q.p1)

    __call__ = run

    def compose(self, other: "UnitaryGate") -> "UnitaryGate":
        """
        Sequence two gates.

        Returns: a gate with matrix ``self.mat @ other.mat``, which applies ``other`` first and then ``self``.
        """
        return UnitaryGate(self.mat @ other.mat)

    def dagger(self) -> "UnitaryGate":
        """Inverse gate, i.e. the Hermitian conjugate."""
        name = None if self.name is None else f"{self.name}†"
        return UnitaryGate(conj_transpose(self.mat), name)

    def to_numpy(self) -> np.ndarray:
        """Gate matrix as a (2, 2) ``complex64`` array."""
        return np.array([complex(x) for x in self.mat.elements()], dtype=np.complex64).reshape((2, 2))

    def lift(self, i: int, n: int) -> np.ndarray:
        """
        Expand to an operator applying on the i-th wire of an n-qubit register.

        Wire 0 is the most significant bit of the register index.

        Args:
            i: target wire index.
            n: number of qubits in the register.

        Raises:
            IndexError - i is out of range.

        Returns: (2**n, 2**n) ``complex64`` matrix ``I⊗..⊗U⊗..⊗I`` where the i-th factor is U.
        """
        if not 0 <= i < n:
            raise IndexError(f"wire {i} out of range for {n}-qubit register")
        u = self.to_numpy()
        full_matrix = np.array([[1]], dtype=np.complex64)
        for j in range(n):
            full_matrix = np.kron(full_matrix, u if j == i else _id)
        return full_matrix

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UnitaryGate):
            return NotImplemented
        return self.mat == other.mat

    def __hash__(self) -> int:
        return hash(self.mat)

    def __repr__(self) -> str:
        if self.name is not None:
            return f"<UnitaryGate {self.name}>"
        return f"<UnitaryGate {self.mat}>"


def _c(re: Real, im: Real = 0.0) -> Complex:
    return Complex(re, im)


GATE_I = UnitaryGate(Matrix2x2.identity(Complex), "I")
"""Identity gate."""
GATE_NOT = UnitaryGate(Matrix2x2(_c(0), _c(1), _c(1), _c(0)), "NOT")
"""NOT gate, same matrix as Pauli-X: ``|0> <-> |1>``."""
GATE_PAULI_X = UnitaryGate(Matrix2x2(_c(0), _c(1), _c(1), _c(0)), "X")
"""Pauli-X gate."""
GATE_PAULI_Y = UnitaryGate(Matrix2x2(_c(0), _c(0, -1), _c(0, 1), _c(0)), "Y")
"""Pauli-Y gate."""
GATE_PAULI_Z = UnitaryGate(Matrix2x2(_c(1), _c(0), _c(0), _c(-1)), "Z")
"""Pauli-Z gate: ``|1> -> -|1>``."""
GATE_H = UnitaryGate(Matrix2x2(_c(1), _c(1), _c(1), _c(-1)).map(lambda x: x * FRAC_1_SQRT_2), "H")
"""Hadamard gate."""
GATE_S = UnitaryGate(Matrix2x2(_c(1), _c(0), _c(0), _c(0, 1)), "S")
"""S gate (pi/2 phase shift)."""
GATE_T = UnitaryGate(Matrix2x2(_c(1), _c(0), _c(0), Complex.exp_ix(np.pi / 4)), "T")
"""T gate (pi/4 phase shift)."""


def GATE_PHASE_SHIFT(theta: Real) -> UnitaryGate:
    """Build a phase shift gate: ``|1> -> exp(i*theta)|1>``."""
    return UnitaryGate(Matrix2x2(_c(1), _c(0), _c(0), Complex.exp_ix(theta)), "R")


def GATE_RX(theta: Real) -> UnitaryGate:
    """Build a gate for rotation around the X-axis: ``exp(-i*theta*X/2)``."""
    c, s = np.cos(np.float32(theta) / 2), np.sin(np.float32(theta) / 2)
    return UnitaryGate(Matrix2x2(_c(c), _c(0, -s), _c(0, -s), _c(c)), "RX")


def GATE_RY(theta: Real) -> UnitaryGate:
    """Build a gate for rotation around the Y-axis: ``exp(-i*theta*Y/2)``."""
    c, s = np.cos(np.float32(theta) / 2), np.sin(np.float32(theta) / 2)
    return UnitaryGate(Matrix2x2(_c(c), _c(-s), _c(s), _c(c)), "RY")


def GATE_RZ(theta: Real) -> UnitaryGate:
    """Build a gate for rotation around the Z-axis: ``exp(-i*theta*Z/2)``."""
    half = np.float32(theta) / 2
    return UnitaryGate(Matrix2x2(Complex.exp_ix(-half), _c(0), _c(0), Complex.exp_ix(half)), "RZ")
