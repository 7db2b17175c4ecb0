"""
Quantum register: amplitude vector over the ``2**n`` basis states of ``n`` qubits.
"""

import functools
from typing import TYPE_CHECKING, final

import numpy as np
import numpy.random as npr

from tqsim.errors import NormalizationError
from tqsim.models.core import ATOL, Complex
from tqsim.models.core.state import AmplitudeVector, check_amplitude_vector, from_complex_list, to_complex_list
from tqsim.models.qubit import Qubit
from tqsim.registers.classical import WIDTH, ClassicalRegister
from tqsim.utils import log, random_f32

if TYPE_CHECKING:
    from tqsim.gates import BinaryGate, UnitaryGate

MAX_QUBITS = WIDTH
"""Largest register that can collapse into a ``ClassicalRegister``."""


@final
class QuantumRegister:
    """
    State of ``n`` qubits as ``2**n`` complex amplitudes.

    Amplitude index ``k`` is the basis state whose bit pattern is ``k``, with bit 0 being the least significant.
    When built from qubits, the first qubit is the most significant bit.
    A register is a value: gate application returns a new register.
    """

    __slots__ = ("_n_qubits", "_vector")

    def __init__(self, amplitudes: np.ndarray | list[Complex], n_qubits: int):
        """
        Args:
            amplitudes: ``2**n_qubits`` amplitudes, either an array or ``Complex`` values.
            n_qubits: number of qubits.

        Raises:
            ValueError - ``n_qubits`` is out of range or ``amplitudes`` has wrong shape.
            NormalizationError - amplitudes are not normalized.
        """
        if not 1 <= n_qubits <= MAX_QUBITS:
            raise ValueError(f"register must hold 1 to {MAX_QUBITS} qubits, got {n_qubits}")
        if isinstance(amplitudes, np.ndarray):
            if amplitudes.ndim != 1:
                raise ValueError(f"amplitudes must be a vector, got shape {amplitudes.shape}")
            vector = np.array(amplitudes, dtype=np.complex64)
        else:
            vector = from_complex_list(amplitudes)
        try:
            self._vector: AmplitudeVector = check_amplitude_vector(vector, n_qubits)
        except NormalizationError:
            log.debug(f"rejecting {n_qubits}-qubit register {vector.tolist()}")
            raise
        self._n_qubits = n_qubits
        self._vector.setflags(write=False)

    @staticmethod
    def from_qubits(*qubits: Qubit) -> "QuantumRegister":
        """
        Combine independent qubits with the tensor product.

        For two qubits ``a`` and ``b``, ``amplitude[2*x + y] = a[x] * b[y]``:
        ``a`` is bit 1 (the control wire of CNOT) and ``b`` is bit 0.
        """
        if len(qubits) == 0:
            raise ValueError("need at least one qubit")
        vector = functools.reduce(np.kron, (q.to_numpy() for q in qubits))
        return QuantumRegister(vector, len(qubits))

    @staticmethod
    def from_2_qubits(a: Qubit, b: Qubit) -> "QuantumRegister":
        """Tensor product of two qubits; ``a`` is the more significant bit."""
        return QuantumRegister.from_qubits(a, b)

    @staticmethod
    def from_classical(cr: ClassicalRegister, n_qubits: int = WIDTH) -> "QuantumRegister":
        """
        Embed a classical bit pattern as a basis state.

        Raises:
            ValueError - bit pattern needs more than ``n_qubits`` bits.
        """
        dim = 2**n_qubits
        if cr.bits >= dim:
            raise ValueError(f"{cr!r} does not fit in {n_qubits}-qubit register")
        vector = np.zeros(dim, dtype=np.complex64)
        vector[cr.bits] = 1
        return QuantumRegister(vector, n_qubits)

    @property
    def n_qubits(self) -> int:
        """Number of qubits."""
        return self._n_qubits

    @property
    def amplitudes(self) -> tuple[Complex, ...]:
        """Amplitudes in basis index order."""
        return tuple(to_complex_list(self._vector))

    def to_numpy(self) -> AmplitudeVector:
        """Read-only ``complex64`` amplitude vector."""
        return self._vector

    def probabilities(self) -> np.ndarray:
        """Measurement probability of each basis state, as ``float32``."""
        return np.array([amp.mag_square() for amp in self.amplitudes], dtype=np.float32)

    def transform(self, op: np.ndarray) -> "QuantumRegister":
        """
        Apply an operator matrix of matching dimension.

        Raises:
            ValueError - operator dimension does not match.
            NormalizationError - the result is not normalized, i.e. the operator is not unitary.
        """
        dim = self._vector.shape[0]
        if op.shape != (dim, dim):
            raise ValueError(f"operator shape {op.shape} does not match register dimension {dim}")
        return QuantumRegister(op.astype(np.complex64) @ self._vector, self._n_qubits)

    def apply(self, gate: "BinaryGate") -> "QuantumRegister":
        """Apply a two-qubit gate."""
        return gate.apply(self)

    def apply_unitary(self, gate: "UnitaryGate", wire: int) -> "QuantumRegister":
        """
        Apply a single-qubit gate on one wire.

        Args:
            gate: single-qubit gate.
            wire: qubit index, 0 being the most significant bit.
        """
        return self.transform(gate.lift(wire, self._n_qubits))

    def collapse_with_target(self, target: float | np.floating) -> ClassicalRegister:
        """
        Select a basis state by inverse-CDF sampling.

        Running probability is accumulated in basis index order, and the first index where it exceeds ``target``
        is returned. Due to rounding, the total may never exceed a target close to 1; in that case the last index
        with non-zero probability is returned.

        Args:
            target: uniform variate in ``[0, 1)``; other values are reduced modulo 1.
        """
        target = np.float32(target) % np.float32(1.0)
        current = np.float32(0.0)
        reserve: int | None = None
        for bits, amp in enumerate(self.amplitudes):
            prob = amp.mag_square()
            current += prob
            if current > target:
                return ClassicalRegister(bits)
            if prob != 0.0:
                reserve = bits
        # a normalized register has at least one non-zero amplitude
        assert reserve is not None
        log.debug(f"collapse target {target} exceeded total probability {current}, using reserve {reserve}")
        return ClassicalRegister(reserve)

    def collapse(self, gen: npr.Generator | None = None) -> ClassicalRegister:
        """
        Measure all qubits.

        Args:
            gen: random number generator, defaults to the global rng.

        Returns: Classical register with the bit pattern of the sampled basis state.
        """
        return self.collapse_with_target(random_f32(gen))

    def approx_eq(self, other: "QuantumRegister", atol: float = ATOL) -> bool:
        return self._n_qubits == other._n_qubits and bool(np.allclose(self._vector, other._vector, rtol=0, atol=atol))

    def __neg__(self) -> "QuantumRegister":
        return QuantumRegister(-self._vector, self._n_qubits)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, QuantumRegister):
            return NotImplemented
        return self._n_qubits == other._n_qubits and np.array_equal(self._vector, other._vector)

    def __hash__(self) -> int:
        return hash((self._n_qubits, tuple(self.amplitudes)))

    def __repr__(self) -> str:
        return f"<QuantumRegister n={self._n_qubits} {self._vector.tolist()}>"
