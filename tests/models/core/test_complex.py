import numpy as np
import pytest

from tqsim.models.core import Complex


@pytest.mark.parametrize(
    ("a", "b", "expected"),
    [
        ((3, 2), (4, -3), (6 / 25, 17 / 25)),
        ((4, 5), (2, 6), (19 / 20, -7 / 20)),
        ((2, -1), (-3, 6), (-4 / 15, -1 / 5)),
        ((-6, -3), (4, 6), (-21 / 26, 6 / 13)),
    ],
)
def test_divide(a: tuple[float, float], b: tuple[float, float], expected: tuple[float, float]):
    assert (Complex(*a) / Complex(*b)).approx_eq(Complex(*expected))


def test_divide_by_zero():
    q = Complex(1, 1) / Complex.zero()
    assert not np.isfinite(q.re)
    assert not np.isfinite(q.im)


def test_arithmetic():
    a = Complex(1, 2)
    b = Complex(3, -1)
    assert a + b == Complex(4, 1)
    assert a - b == Complex(-2, 3)
    assert a * b == Complex(5, 5)
    assert -a == Complex(-1, -2)
    assert a.conj() == Complex(1, -2)
    assert a * 2 == Complex(2, 4)
    assert 2 * a == Complex(2, 4)
    assert 1 + a == Complex(2, 2)
    assert 1 - a == Complex(0, -2)
    assert Complex.i() * Complex.i() == -Complex.one()


def test_magnitude():
    x = Complex(3, 4)
    assert x.mag_square() == 25
    assert x.norm() == 5
    assert isinstance(x.re, np.float32)
    assert isinstance(x.mag_square(), np.float32)


def test_polar():
    assert Complex.mod_arg(2, 0) == Complex(2, 0)
    assert Complex.mod_arg(2, np.pi / 2).approx_eq(Complex(0, 2))
    assert Complex.exp_ix(np.pi).approx_eq(-Complex.one())
    for x in (0.3, 1.7, 42.0):
        assert np.isclose(Complex.exp_ix(x).norm(), 1.0, atol=1e-6)


def test_identities():
    assert Complex.zero() == 0
    assert Complex.one() == 1
    assert Complex.from_re(2.5) == Complex(2.5, 0)
    assert complex(Complex(1, -1)) == 1 - 1j
    assert Complex.from_complex(np.complex64(2 + 3j)) == Complex(2, 3)
    assert Complex.zero() == -Complex.zero()
    assert hash(Complex.zero()) == hash(-Complex.zero())


def test_immutable():
    x = Complex(1, 2)
    with pytest.raises(AttributeError):
        x._re = np.float32(5)  # type: ignore
