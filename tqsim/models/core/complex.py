"""
Single-precision complex number used for probability amplitudes.
"""

from numbers import Complex as _AnyComplex, Real as _AnyReal
from typing import Any, final

import numpy as np

type Real = int | float | np.floating
"""Real scalar accepted by ``Complex`` arithmetic."""


def _f32(x: Any) -> np.float32:
    return np.float32(x)


@final
class Complex:
    """
    Complex number ``re + i*im`` with 32-bit float components.

    Instances are immutable values. Arithmetic accepts another ``Complex`` or a real scalar on either side.
    Division by a zero-modulus number produces non-finite components; checking the divisor is left to the caller.
    """

    __slots__ = ("_re", "_im")
    __array_ufunc__ = None  # numpy scalars defer to our reflected operators

    def __init__(self, re: Real = 0.0, im: Real = 0.0):
        self._re = _f32(re)
        self._im = _f32(im)

    @property
    def re(self) -> np.float32:
        """Real part."""
        return self._re

    @property
    def im(self) -> np.float32:
        """Imaginary part."""
        return self._im

    @staticmethod
    def mod_arg(r: Real, theta: Real) -> "Complex":
        """Build from modulus ``r`` and argument ``theta``."""
        r, theta = _f32(r), _f32(theta)
        return Complex(r * np.cos(theta), r * np.sin(theta))

    @staticmethod
    def exp_ix(x: Real) -> "Complex":
        """Build the unit phasor ``e^(ix)``, same as ``mod_arg(1, x)``."""
        return Complex.mod_arg(1.0, x)

    @staticmethod
    def from_re(re: Real) -> "Complex":
        return Complex(re, 0.0)

    @staticmethod
    def from_complex(z: complex | np.complexfloating) -> "Complex":
        return Complex(z.real, z.imag)

    @classmethod
    def zero(cls) -> "Complex":
        return cls(0.0, 0.0)

    @classmethod
    def one(cls) -> "Complex":
        return cls(1.0, 0.0)

    @staticmethod
    def i() -> "Complex":
        """Imaginary unit."""
        return Complex(0.0, 1.0)

    def mag_square(self) -> np.float32:
        """``|x|^2``"""
        return self._re * self._re + self._im * self._im

    def norm(self) -> np.float32:
        """``|x|``"""
        return np.hypot(self._re, self._im)

    def conj(self) -> "Complex":
        """Complex conjugate ``re - i*im``."""
        return Complex(self._re, -self._im)

    def approx_eq(self, other: "Complex", atol: float = 1e-6) -> bool:
        """Compare within absolute tolerance ``atol`` on the difference modulus."""
        return bool((self - other).norm() <= atol)

    def __add__(self, other: "Complex | Real") -> "Complex":
        if isinstance(other, Complex):
            return Complex(self._re + other._re, self._im + other._im)
        if isinstance(other, (_AnyReal, np.floating)):
            return Complex(self._re + _f32(other), self._im)
        return NotImplemented

    __radd__ = __add__

    def __sub__(self, other: "Complex | Real") -> "Complex":
        if isinstance(other, Complex):
            return Complex(self._re - other._re, self._im - other._im)
        if isinstance(other, (_AnyReal, np.floating)):
            return Complex(self._re - _f32(other), self._im)
        return NotImplemented

    def __rsub__(self, other: Real) -> "Complex":
        return -self + other

    def __mul__(self, other: "Complex | Real") -> "Complex":
        if isinstance(other, Complex):
            return Complex(
                self._re * other._re - self._im * other._im,
                self._re * other._im + self._im * other._re,
            )
        if isinstance(other, (_AnyReal, np.floating)):
            k = _f32(other)
            return Complex(self._re * k, self._im * k)
        return NotImplemented

    __rmul__ = __mul__

    def __truediv__(self, other: "Complex | Real") -> "Complex":
        if isinstance(other, (_AnyReal, np.floating)):
            other = Complex.from_re(other)
        elif not isinstance(other, Complex):
            return NotImplemented
        a, b, c, d = self._re, self._im, other._re, other._im
        # (a+bi)/(c+di) = ((ac+bd) + i(bc-ad)) / (c^2+d^2)
        with np.errstate(divide="ignore", invalid="ignore"):
            denom = c * c + d * d
            return Complex((a * c + b * d) / denom, (b * c - a * d) / denom)

    def __rtruediv__(self, other: Real) -> "Complex":
        return Complex.from_re(other) / self

    def __neg__(self) -> "Complex":
        return Complex(-self._re, -self._im)

    def __complex__(self) -> complex:
        return complex(float(self._re), float(self._im))

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Complex):
            return bool(self._re == other._re and self._im == other._im)
        if isinstance(other, (_AnyComplex, np.number)):
            return complex(self) == complex(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(complex(self))

    def __setattr__(self, name: str, value: Any) -> None:
        if hasattr(self, "_im"):
            raise AttributeError("Complex is immutable")
        super().__setattr__(name, value)

    def __repr__(self) -> str:
        return f"Complex({float(self._re)}{float(self._im):+}i)"
