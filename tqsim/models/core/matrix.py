"""
Generic 2x2 matrix over any element type with field-like arithmetic.
"""

from collections.abc import Callable
from typing import Any, Protocol, Self, final

from tqsim.models.core.complex import Complex


class Numeric(Protocol):
    """
    Arithmetic capability required from ``Matrix2x2`` elements.
    """

    def __add__(self, other: Self, /) -> Self: ...
    def __sub__(self, other: Self, /) -> Self: ...
    def __mul__(self, other: Self, /) -> Self: ...
    def __truediv__(self, other: Self, /) -> Self: ...
    def __neg__(self) -> Self: ...

    @classmethod
    def zero(cls) -> Self: ...

    @classmethod
    def one(cls) -> Self: ...


@final
class Matrix2x2[T: Numeric]:
    """
    A 2x2 matrix in row-major order::

        a b
        c d

    The matrix carries no invariant; callers such as gates validate what they need.
    """

    __slots__ = ("a", "b", "c", "d")

    def __init__(self, a: T, b: T, c: T, d: T):
        self.a = a
        self.b = b
        self.c = c
        self.d = d

    def __setattr__(self, name: str, value: Any) -> None:
        if hasattr(self, "d"):
            raise AttributeError("Matrix2x2 is immutable")
        super().__setattr__(name, value)

    @staticmethod
    def identity[U: Numeric](typ: type[U]) -> "Matrix2x2[U]":
        """
        Build the identity matrix.

        Args:
            typ: element type, providing ``zero()`` and ``one()``.
        """
        return Matrix2x2(typ.one(), typ.zero(), typ.zero(), typ.one())

    def elements(self) -> tuple[T, T, T, T]:
        return self.a, self.b, self.c, self.d

    def mul(self, rhs: "Matrix2x2[T]") -> "Matrix2x2[T]":
        """Matrix product ``self @ rhs``."""
        a, b, c, d = self.elements()
        w, x, y, z = rhs.elements()
        # fmt: off
        return Matrix2x2(
            a * w + b * y,  a * x + b * z,
            c * w + d * y,  c * x + d * z,
        )
        # fmt: on

    def __matmul__(self, rhs: "Matrix2x2[T]") -> "Matrix2x2[T]":
        return self.mul(rhs)

    def map(self, f: Callable[[T], T]) -> "Matrix2x2[T]":
        """Apply ``f`` on every element."""
        return Matrix2x2(f(self.a), f(self.b), f(self.c), f(self.d))

    def det(self) -> T:
        """Determinant ``ad - bc``."""
        return self.a * self.d - self.b * self.c

    def transpose(self) -> "Matrix2x2[T]":
        return Matrix2x2(self.a, self.c, self.b, self.d)

    def inv(self) -> "Matrix2x2[T]":
        """
        Inverse ``adj(M) / det(M)``.

        A singular matrix divides by zero; the result is whatever the element type produces for that.
        """
        det = self.det()
        return Matrix2x2(self.d, -self.b, -self.c, self.a).map(lambda x: x / det)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix2x2):
            return NotImplemented
        return all(x == y for x, y in zip(self.elements(), other.elements()))

    def __hash__(self) -> int:
        return hash(self.elements())

    def __repr__(self) -> str:
        return f"Matrix2x2({self.a!r}, {self.b!r}, {self.c!r}, {self.d!r})"


def conj_transpose(m: Matrix2x2[Complex]) -> Matrix2x2[Complex]:
    """Hermitian conjugate of a complex matrix."""
    return m.transpose().map(Complex.conj)


def matrix_approx_eq(m0: Matrix2x2[Complex], m1: Matrix2x2[Complex], atol: float = 1e-6) -> bool:
    """Compare complex matrices element-wise within absolute tolerance."""
    return all(x.approx_eq(y, atol) for x, y in zip(m0.elements(), m1.elements()))
