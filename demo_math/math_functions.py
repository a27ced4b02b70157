"""
Integer addition, the arithmetic unit exercised by the test suite.

By default operands and results are Python integers of arbitrary precision,
so a sum never overflows. Passing ``int_bits`` (8, 16, 32 or 64) switches to
fixed-width two's-complement arithmetic where the sum wraps around, the way
an unchecked 32-bit ``int`` behaves in C-family languages.
"""

from __future__ import annotations

import logging
from typing import Optional

from . import SUPPORTED_INT_BITS

logger = logging.getLogger(__name__)


class ArithmeticInputError(TypeError):
    """Raised when an operand is not an integer."""

    def __init__(self, name: str, value: object):
        self.name = name
        self.value = value
        super().__init__(
            f"Operand '{name}' must be an int, got {type(value).__name__}: {value!r}"
        )


class IntegerWidthError(ValueError):
    """Raised for an unsupported width or an operand outside the width's range."""


def _check_bits(bits: int) -> None:
    # 8.0 == 8 and True == 1, so membership alone lets floats and bools through.
    if isinstance(bits, bool) or not isinstance(bits, int) or bits not in SUPPORTED_INT_BITS:
        raise IntegerWidthError(
            f"Unsupported integer width {bits!r}; expected one of {SUPPORTED_INT_BITS}"
        )


def _check_operand(name: str, value: object) -> None:
    # bool is an int subclass but True + True is not integer addition.
    if isinstance(value, bool) or not isinstance(value, int):
        raise ArithmeticInputError(name, value)


def int_range(bits: int) -> tuple[int, int]:
    """Return the inclusive (min, max) of a signed integer of ``bits`` bits."""
    _check_bits(bits)
    half = 1 << (bits - 1)
    return -half, half - 1


def wrap_int(value: int, bits: int) -> int:
    """Fold ``value`` into the signed two's-complement range of ``bits`` bits."""
    _check_bits(bits)
    modulus = 1 << bits
    half = modulus >> 1
    return ((value + half) % modulus) - half


def add(a: int, b: int, *, int_bits: Optional[int] = None) -> int:
    """
    Return the sum of two integers.

    Args:
        a: First operand.
        b: Second operand.
        int_bits: Optional fixed width. When set, both operands must fit the
            signed range of that width and the sum wraps on overflow.

    Returns:
        ``a + b``, wrapped to ``int_bits`` when a width is given.

    Raises:
        ArithmeticInputError: If either operand is not an ``int``.
        IntegerWidthError: If the width is unsupported or an operand is out of range.

    Examples:
        >>> add(1, 3)
        4
        >>> add(-1, 3)
        2
        >>> add(2**31 - 1, 1, int_bits=32)
        -2147483648
    """
    _check_operand("a", a)
    _check_operand("b", b)

    if int_bits is None:
        result = a + b
    else:
        low, high = int_range(int_bits)
        for name, value in (("a", a), ("b", b)):
            if not low <= value <= high:
                raise IntegerWidthError(
                    f"Operand '{name}'={value} does not fit a signed {int_bits}-bit integer"
                )
        result = wrap_int(a + b, int_bits)
        if result != a + b:
            logger.debug(f"add({a}, {b}) wrapped to {result} at {int_bits} bits")

    logger.debug(f"add({a}, {b}) = {result}")
    return result


class MathFunctions:
    """Stateless arithmetic unit bound to an integer width."""

    def __init__(self, int_bits: Optional[int] = None):
        if int_bits is None:
            from .config import resolve_int_bits  # local import, config depends on this module

            int_bits = resolve_int_bits()
        else:
            _check_bits(int_bits)
        self.int_bits = int_bits

    def add(self, a: int, b: int) -> int:
        return add(a, b, int_bits=self.int_bits)

    def __repr__(self) -> str:
        return f"MathFunctions(int_bits={self.int_bits!r})"
