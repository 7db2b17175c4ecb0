"""
tqsim: a toy state-vector quantum circuit simulator.
"""

from tqsim.errors import NormalizationError, RegisterOverflowError, TqsimError, UnitarityError
from tqsim.gates import (
    GATE_CNOT,
    GATE_H,
    GATE_NOT,
    GATE_PAULI_X,
    GATE_PAULI_Y,
    GATE_PAULI_Z,
    GATE_SWAP,
    BinaryGate,
    UnitaryGate,
)
from tqsim.models.core import ATOL, Complex, Matrix2x2
from tqsim.models.qubit import Qubit
from tqsim.registers import ClassicalRegister, QuantumRegister
from tqsim.utils import log, rng, set_seed

__all__ = [
    "ATOL",
    "GATE_CNOT",
    "GATE_H",
    "GATE_NOT",
    "GATE_PAULI_X",
    "GATE_PAULI_Y",
    "GATE_PAULI_Z",
    "GATE_SWAP",
    "BinaryGate",
    "ClassicalRegister",
    "Complex",
    "Matrix2x2",
    "NormalizationError",
    "Qubit",
    "QuantumRegister",
    "RegisterOverflowError",
    "TqsimError",
    "UnitarityError",
    "log",
    "rng",
    "set_seed",
]
