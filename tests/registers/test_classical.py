import itertools

import numpy as np
import pytest

from tqsim.errors import RegisterOverflowError
from tqsim.registers import ClassicalRegister


def test_from_bit_array():
    x = ClassicalRegister.from_bits([True, True, False, False, True, False, True])
    assert x.bits == 0b1010011
    assert ClassicalRegister.from_bits([]).bits == 0
    assert ClassicalRegister.from_bits([True] * 8).bits == 255
    assert ClassicalRegister.from_bits([False] * 8).bits == 0


def test_from_overfull_iter():
    with pytest.raises(RegisterOverflowError):
        ClassicalRegister.from_bits(itertools.repeat(True, 9))
    with pytest.raises(RegisterOverflowError):
        ClassicalRegister.from_bits([False] * 9)
    with pytest.raises(RegisterOverflowError):
        ClassicalRegister(256)


@pytest.mark.parametrize(
    "bits",
    [
        [True, False, True],
        [False] * 8,
        [True] * 8,
        [False, True, True, False, True, False, False, True],
    ],
)
def test_round_trip(bits: list[bool]):
    reg = ClassicalRegister.from_bits(bits)
    assert [reg.index(i) for i in range(len(bits))] == bits
    assert list(reg)[len(bits) :] == [False] * (8 - len(bits))


def test_index():
    reg = ClassicalRegister(0b11001110)
    assert [reg[i] for i in range(8)] == [False, True, True, True, False, False, True, True]


@pytest.mark.parametrize("index", [8, 100, -1])
def test_index_out_of_range(index: int):
    reg = ClassicalRegister(0)
    with pytest.raises(IndexError):
        reg.index(index)
    with pytest.raises(IndexError):
        reg.set(index, True)


def test_set_index():
    reg = ClassicalRegister(0)
    reg.set(1, True)
    reg.set(3, True)
    reg.set(7, True)
    reg.set(2, False)
    reg.set(0, False)
    assert reg.bits == 0b10001010

    reg.set(7, False)
    reg.set(0, True)
    assert reg.bits == 0b00001011

    reg[6] = True
    reg[1] = False
    reg[1] = True
    reg[1] = False
    reg[6] = False
    reg[1] = True
    reg[0] = False
    reg[6] = True
    assert reg.bits == 0b01001010


def test_conversions():
    reg = ClassicalRegister(0b101)
    assert int(reg) == 5
    assert reg == 5
    assert reg == ClassicalRegister.from_bits([True, False, True])
    assert reg.to_bitstring(3) == "101"
    assert reg.to_bitstring(2) == "01"
    assert reg.to_bitstring() == "00000101"


@pytest.mark.parametrize("bits", [3.5, 3.0, "3", None])
def test_non_integer(bits):
    with pytest.raises(TypeError):
        ClassicalRegister(bits)


def test_numpy_integer():
    assert ClassicalRegister(np.uint8(200)) == 200
    assert type(ClassicalRegister(np.int64(7)).bits) is int
