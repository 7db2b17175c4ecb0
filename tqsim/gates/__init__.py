from tqsim.gates.binary import GATE_CNOT, GATE_CZ, GATE_I2, GATE_SWAP, BinaryGate
from tqsim.gates.unitary import (
    GATE_H,
    GATE_I,
    GATE_NOT,
    GATE_PAULI_X,
    GATE_PAULI_Y,
    GATE_PAULI_Z,
    GATE_PHASE_SHIFT,
    GATE_RX,
    GATE_RY,
    GATE_RZ,
    GATE_S,
    GATE_T,
    UnitaryGate,
)

__all__ = [
    "GATE_CNOT",
    "GATE_CZ",
    "GATE_H",
    "GATE_I",
    "GATE_I2",
    "GATE_NOT",
    "GATE_PAULI_X",
    "GATE_PAULI_Y",
    "GATE_PAULI_Z",
    "GATE_PHASE_SHIFT",
    "GATE_RX",
    "GATE_RY",
    "GATE_RZ",
    "GATE_S",
    "GATE_SWAP",
    "GATE_T",
    "BinaryGate",
    "UnitaryGate",
]
