from tqsim.registers.classical import WIDTH, ClassicalRegister
from tqsim.registers.quantum import MAX_QUBITS, QuantumRegister

__all__ = [
    "MAX_QUBITS",
    "WIDTH",
    "ClassicalRegister",
    "QuantumRegister",
]
