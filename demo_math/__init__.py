"""demo-math: integer addition with fact, inline-data and class-data tests."""

__version__ = "0.1.0"

# None means Python's arbitrary-precision integers.
DEFAULT_INT_BITS = None
SUPPORTED_INT_BITS = (8, 16, 32, 64)

from .math_functions import (  # noqa: E402
    ArithmeticInputError,
    IntegerWidthError,
    MathFunctions,
    add,
    wrap_int,
)
from .math_tests_data import ADDITION_CASES, AdditionCase, MathTestsData, addition_cases  # noqa: E402

__all__ = [
    "ADDITION_CASES",
    "AdditionCase",
    "ArithmeticInputError",
    "DEFAULT_INT_BITS",
    "IntegerWidthError",
    "MathFunctions",
    "MathTestsData",
    "SUPPORTED_INT_BITS",
    "__version__",
    "add",
    "addition_cases",
    "wrap_int",
]
