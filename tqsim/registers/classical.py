"""
Classical register holding measurement outcomes as a small bit field.
"""

import operator
from collections.abc import Iterable, Iterator
from typing import final

from tqsim.errors import RegisterOverflowError

WIDTH = 8
"""Number of bits in a classical register."""

_MAX = (1 << WIDTH) - 1


@final
class ClassicalRegister:
    """
    Unsigned bit field of ``WIDTH`` bits, least significant bit first.

    Bit indices outside ``[0, WIDTH)`` are programming errors and raise ``IndexError``.
    """

    __slots__ = ("_bits",)

    def __init__(self, bits: int = 0):
        """
        Args:
            bits: bit pattern as an integer.

        Raises:
            TypeError - ``bits`` is not an integer.
            RegisterOverflowError - ``bits`` does not fit in ``WIDTH`` bits.
        """
        bits = operator.index(bits)
        if not 0 <= bits <= _MAX:
            raise RegisterOverflowError(f"{bits} does not fit in {WIDTH}-bit register")
        self._bits = bits

    @staticmethod
    def from_bits(bits: Iterable[bool]) -> "ClassicalRegister":
        """
        Pack booleans into a register; the first boolean becomes bit 0.

        Raises:
            RegisterOverflowError - more than ``WIDTH`` booleans.
        """
        value = 0
        for i, bit in enumerate(bits):
            if i >= WIDTH:
                raise RegisterOverflowError(f"more than {WIDTH} bits for classical register")
            value |= int(bool(bit)) << i
        return ClassicalRegister(value)

    @property
    def bits(self) -> int:
        """Bit pattern as an integer."""
        return self._bits

    @staticmethod
    def _check_index(index: int) -> None:
        if not 0 <= index < WIDTH:
            raise IndexError(f"bit index {index} out of range for {WIDTH}-bit register")

    def index(self, index: int) -> bool:
        """Read bit ``index``."""
        self._check_index(index)
        return (self._bits >> index) & 1 == 1

    def set(self, index: int, val: bool) -> None:
        """Write bit ``index``."""
        self._check_index(index)
        if val:
            self._bits |= 1 << index
        else:
            self._bits &= ~(1 << index) & _MAX

    __getitem__ = index
    __setitem__ = set

    def __iter__(self) -> Iterator[bool]:
        return (self.index(i) for i in range(WIDTH))

    def __len__(self) -> int:
        return WIDTH

    def __int__(self) -> int:
        return self._bits

    __index__ = __int__

    def to_bitstring(self, n: int = WIDTH) -> str:
        """Format the lowest ``n`` bits, most significant first, e.g. ``"01"``."""
        return format(self._bits, f"0{n}b")[-n:] if n > 0 else ""

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ClassicalRegister):
            return self._bits == other._bits
        if isinstance(other, int):
            return self._bits == other
        return NotImplemented

    def __repr__(self) -> str:
        return f"<ClassicalRegister {self._bits:0{WIDTH}b}>"
