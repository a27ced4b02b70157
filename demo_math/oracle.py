"""
Check addition cases against the arithmetic unit and collect the outcome.

A mismatch is reported, never raised: each case yields a ``CaseResult``
carrying the expected and actual sums so callers can render them.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional

from .math_functions import MathFunctions
from .math_tests_data import ADDITION_CASES, AdditionCase, case_id

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CaseResult:
    case: AdditionCase
    actual: int
    passed: bool

    @property
    def expected(self) -> int:
        return self.case.expected_result

    @property
    def name(self) -> str:
        return case_id(self.case)


def check_case(case: AdditionCase, unit: Optional[MathFunctions] = None) -> CaseResult:
    """Run one case through ``unit.add`` and compare with the expected sum."""
    unit = unit or MathFunctions()
    case = AdditionCase(*case)
    actual = unit.add(case.first_number, case.second_number)
    passed = actual == case.expected_result
    if passed:
        logger.debug(f"Case {case_id(case)} passed")
    else:
        logger.warning(
            f"Case {case_id(case)} failed: expected {case.expected_result}, got {actual}"
        )
    return CaseResult(case=case, actual=actual, passed=passed)


def check_cases(
    cases: Optional[Iterable[AdditionCase]] = None,
    unit: Optional[MathFunctions] = None,
) -> List[CaseResult]:
    """Check every case, defaulting to the shared ``ADDITION_CASES``."""
    unit = unit or MathFunctions()
    if cases is None:
        cases = ADDITION_CASES
    results = [check_case(case, unit) for case in cases]
    logger.info(
        f"Checked {len(results)} cases: {sum(r.passed for r in results)} passed, "
        f"{len(failures(results))} failed"
    )
    return results


def failures(results: Iterable[CaseResult]) -> List[CaseResult]:
    return [result for result in results if not result.passed]
