import numpy as np
import pytest

from tqsim.errors import UnitarityError
from tqsim.gates import (
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
from tqsim.models.core import Complex, Matrix2x2, matrix_approx_eq
from tqsim.models.qubit import Qubit

_identity = Matrix2x2.identity(Complex)


def test_not():
    assert GATE_NOT.run(Qubit.zero()) == Qubit.one()
    assert GATE_NOT.run(Qubit.one()) == Qubit.zero()
    assert GATE_NOT.run(Qubit.plus()) == Qubit.plus()
    assert GATE_NOT == GATE_PAULI_X
    assert GATE_NOT.mat is not GATE_PAULI_X.mat


def test_z():
    assert GATE_PAULI_Z.run(Qubit.zero()) == Qubit.zero()
    assert GATE_PAULI_Z.run(Qubit.one()) == -Qubit.one()
    assert GATE_PAULI_Z.run(-Qubit.one()) == Qubit.one()


@pytest.mark.parametrize(
    ("input", "expected"),
    [
        (Qubit.zero(), Qubit.plus()),
        (Qubit.one(), Qubit.minus()),
        (-Qubit.one(), -Qubit.minus()),
        (-Qubit.zero(), -Qubit.plus()),
        (Qubit.plus(), Qubit.zero()),
        (Qubit.minus(), Qubit.one()),
        (-Qubit.plus(), -Qubit.zero()),
        (-Qubit.minus(), -Qubit.one()),
    ],
)
def test_h(input: Qubit, expected: Qubit):
    assert GATE_H(input).approx_eq(expected)


def test_h_squared_is_i():
    assert matrix_approx_eq(GATE_H.mat @ GATE_H.mat, _identity)


@pytest.mark.parametrize("gate", [GATE_PAULI_X, GATE_PAULI_Y, GATE_PAULI_Z])
def test_pauli_squared_is_i(gate: UnitaryGate):
    assert matrix_approx_eq(gate.mat @ gate.mat, _identity)
    assert matrix_approx_eq(gate.compose(gate).mat, _identity)


def test_non_unitary():
    with pytest.raises(UnitarityError):
        UnitaryGate(Matrix2x2(Complex.one(), Complex.one(), Complex.zero(), Complex.one()))
    with pytest.raises(UnitarityError):
        UnitaryGate(Matrix2x2(Complex(2), Complex(0), Complex(0), Complex(2)))


def test_compose_order():
    # S then H is H @ S
    q = GATE_H.compose(GATE_S).run(Qubit.one())
    expected = GATE_H.run(GATE_S.run(Qubit.one()))
    assert q.approx_eq(expected)
    assert GATE_T.compose(GATE_T).mat == GATE_T.mat @ GATE_T.mat
    assert matrix_approx_eq(GATE_T.compose(GATE_T).mat, GATE_S.mat)


@pytest.mark.parametrize("gate", [GATE_H, GATE_S, GATE_T, GATE_PAULI_Y, GATE_RX(0.3), GATE_RZ(1.2)])
def test_dagger(gate: UnitaryGate):
    assert matrix_approx_eq(gate.compose(gate.dagger()).mat, _identity)


def test_rotations():
    assert GATE_RX(np.pi)(Qubit.zero()).approx_eq(Qubit(Complex.zero(), -Complex.i()))
    assert GATE_RY(np.pi / 2)(Qubit.zero()).approx_eq(Qubit.plus())
    assert GATE_RZ(0).mat == _identity
    assert GATE_PHASE_SHIFT(np.pi)(Qubit.one()).approx_eq(-Qubit.one())


def test_lift():
    full = GATE_PAULI_X.lift(0, 2)
    expected = np.kron(np.array([[0, 1], [1, 0]]), np.identity(2))
    assert np.array_equal(full, expected)
    assert np.array_equal(GATE_I.lift(1, 3), np.identity(8))
    with pytest.raises(IndexError):
        GATE_H.lift(2, 2)


def test_immutable():
    with pytest.raises(AttributeError):
        GATE_NOT.mat.a = Complex.one()
    assert GATE_NOT.run(Qubit.zero()) == Qubit.one()
