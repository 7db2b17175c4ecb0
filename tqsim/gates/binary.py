"""
Two-qubit gates: validated 4x4 unitary operators on a two-qubit register.

The basis order is ``|00>, |01>, |10>, |11>``, where the first qubit (e.g. the control of CNOT)
is the more significant bit of the basis index.
"""

from collections.abc import Iterable
from typing import TYPE_CHECKING, final

import numpy as np

from tqsim.errors import UnitarityError
from tqsim.gates.unitary import UnitaryGate
from tqsim.models.core import ATOL, Complex
from tqsim.utils import log

if TYPE_CHECKING:
    from tqsim.registers.quantum import QuantumRegister

type Operator2 = np.ndarray[tuple[int, int], np.dtype[np.complex64]]
"""Operator on two qubits, shape is (4, 4)."""

_p0 = np.array([[1, 0], [0, 0]], dtype=np.complex64)  # projector matrix |0><0|
_p1 = np.array([[0, 0], [0, 1]], dtype=np.complex64)  # projector matrix |1><1|
_id = np.identity(2, dtype=np.complex64)


def _as_matrix(input: np.ndarray | Iterable[Iterable[complex | Complex]]) -> Operator2:
    if isinstance(input, np.ndarray):
        return input.astype(np.complex64)
    return np.array([[complex(x) for x in row] for row in input], dtype=np.complex64)


@final
class BinaryGate:
    def __init__(self, input: np.ndarray | Iterable[Iterable[complex | Complex]], name: str | None = None):
        """
        Build a two-qubit gate.

        Args:
            input: (4, 4) matrix, either an array or nested rows of numbers or ``Complex``.
            name: display name.

        Raises:
            ValueError - matrix has wrong shape.
            UnitarityError - ``U @ U^dagger`` is not the identity within ``ATOL``.
        """
        self.mat: Operator2 = _as_matrix(input)
        """Gate matrix."""
        self.name = name
        """Display name."""
        self._validate()
        self.mat.setflags(write=False)

    def _validate(self) -> None:
        if self.mat.shape != (4, 4):
            raise ValueError(f"Expected (4, 4), got {self.mat.shape}")
        product = self.mat @ self.mat.conj().T
        if not np.allclose(product, np.identity(4), rtol=0, atol=ATOL):
            log.debug(f"rejecting non-unitary matrix {self.mat.tolist()}")
            raise UnitarityError("matrix is not unitary (U @ U^dagger != I)")

    @staticmethod
    def from_unitary(gate: UnitaryGate, wire: int) -> "BinaryGate":
        """
        Apply a single-qubit gate on one wire and leave the other wire unchanged.

        Args:
            gate: single-qubit gate.
            wire: 0 for the first (more significant) qubit, 1 for the second.
        """
        return BinaryGate(gate.lift(wire, 2), None if gate.name is None else f"{gate.name}[{wire}]")

    @staticmethod
    def controlled(gate: UnitaryGate) -> "BinaryGate":
        """
        Build a controlled gate: apply ``gate`` on the second qubit if the first qubit is ``|1>``.
        """
        # full_op = |0><0|⊗I + |1><1|⊗U
        full_op = np.kron(_p0, _id) + np.kron(_p1, gate.to_numpy())
        return BinaryGate(full_op, None if gate.name is None else f"C{gate.name}")

    def apply(self, register: "QuantumRegister") -> "QuantumRegister":
        """
        Apply the gate on a two-qubit register.

        Raises:
            ValueError - register does not hold two qubits.

        Returns: a new register with amplitudes ``mat @ amplitudes``.
        """
        if register.n_qubits != 2:
            raise ValueError(f"two-qubit gate cannot apply on {register.n_qubits}-qubit register")
        return register.transform(self.mat)

    __call__ = apply

    def compose(self, other: "BinaryGate") -> "BinaryGate":
        """
        Sequence two gates.

        Returns: a gate with matrix ``self.mat @ other.mat``, which applies ``other`` first and then ``self``.
        """
        return BinaryGate(self.mat @ other.mat)

    def swap(self) -> "BinaryGate":
        """
        Exchange the two wires, i.e. ``SWAP @ self @ SWAP``.

        For example, ``GATE_CNOT.swap()`` is a CNOT controlled by the second qubit.
        """
        return GATE_SWAP.compose(self).compose(GATE_SWAP)

    def approx_eq(self, other: "BinaryGate", atol: float = ATOL) -> bool:
        return bool(np.allclose(self.mat, other.mat, rtol=0, atol=atol))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BinaryGate):
            return NotImplemented
        return np.array_equal(self.mat, other.mat)

    def __repr__(self) -> str:
        if self.name is not None:
            return f"<BinaryGate {self.name}>"
        return f"<BinaryGate {self.mat.tolist()}>"


GATE_I2 = BinaryGate(np.identity(4), "I2")
"""Two-qubit identity gate."""
GATE_CNOT = BinaryGate([[1, 0, 0, 0], [0, 1, 0, 0], [0, 0, 0, 1], [0, 0, 1, 0]], "CNOT")
"""Controlled NOT gate: flip the second qubit if the first is ``|1>``."""
GATE_SWAP = BinaryGate([[1, 0, 0, 0], [0, 0, 1, 0], [0, 1, 0, 0], [0, 0, 0, 1]], "SWAP")
"""SWAP gate: exchange ``|01>`` and ``|10>``."""
GATE_CZ = BinaryGate([[1, 0, 0, 0], [0, 1, 0, 0], [0, 0, 1, 0], [0, 0, 0, -1]], "CZ")
"""Controlled Pauli-Z gate."""
