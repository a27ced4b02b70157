"""Reusable addition cases shared by the class-data tests and the oracle."""

from __future__ import annotations

from typing import Iterator, List, NamedTuple


class AdditionCase(NamedTuple):
    first_number: int
    second_number: int
    expected_result: int


ADDITION_CASES = (
    AdditionCase(1, 3, 4),
    AdditionCase(-1, -3, -4),
    AdditionCase(-1, 3, 2),
)


def addition_cases() -> List[AdditionCase]:
    """Return a fresh list of the shared cases."""
    return list(ADDITION_CASES)


def case_id(case: AdditionCase) -> str:
    """Readable id for a parameterized test, e.g. ``-1+3=2``."""
    return f"{case.first_number}+{case.second_number}={case.expected_result}"


class MathTestsData:
    """Iterable collection of addition cases, usable as a class-data source."""

    def __init__(self, cases=ADDITION_CASES):
        self._cases = tuple(AdditionCase(*case) for case in cases)

    def __iter__(self) -> Iterator[AdditionCase]:
        return iter(self._cases)

    def __len__(self) -> int:
        return len(self._cases)

    def ids(self) -> List[str]:
        return [case_id(case) for case in self._cases]
