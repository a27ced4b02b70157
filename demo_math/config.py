"""Environment-driven settings for demo-math.

Values are read at call time, so tests can patch ``os.environ`` freely.
"""

from __future__ import annotations

import logging
import os
from typing import Optional

from . import SUPPORTED_INT_BITS
from .math_functions import IntegerWidthError

INT_BITS_ENV = "DEMO_MATH_INT_BITS"
LOGLEVEL_ENV = "DEMO_MATH_LOGLEVEL"

_UNBOUNDED = {"", "0", "none"}

_LOG_LEVELS = {
    "quiet": logging.WARNING,
    "normal": logging.INFO,
    "verbose": logging.DEBUG,
}


def parse_int_bits(raw: Optional[str]) -> Optional[int]:
    """Parse a width setting; ``None`` means arbitrary precision."""
    if raw is None:
        return None
    text = raw.strip().lower()
    if text in _UNBOUNDED:
        return None
    try:
        bits = int(text)
    except ValueError:
        raise IntegerWidthError(
            f"{INT_BITS_ENV} must be one of {SUPPORTED_INT_BITS} or 'none', got {raw!r}"
        ) from None
    if bits not in SUPPORTED_INT_BITS:
        raise IntegerWidthError(
            f"{INT_BITS_ENV} must be one of {SUPPORTED_INT_BITS} or 'none', got {raw!r}"
        )
    return bits


def resolve_int_bits(override: Optional[int] = None) -> Optional[int]:
    """Explicit override first, then ``DEMO_MATH_INT_BITS``.

    Only the environment string may spell arbitrary precision (``"0"``,
    ``"none"``); an explicit override must be a supported width, the same
    rule ``add`` and ``MathFunctions`` apply.
    """
    if override is not None:
        if (
            isinstance(override, bool)
            or not isinstance(override, int)
            or override not in SUPPORTED_INT_BITS
        ):
            raise IntegerWidthError(
                f"Unsupported integer width {override!r}; expected one of {SUPPORTED_INT_BITS}"
            )
        return override
    return parse_int_bits(os.getenv(INT_BITS_ENV))


def resolve_log_level(verbose: bool = False, quiet: bool = False) -> int:
    """CLI flags win over ``DEMO_MATH_LOGLEVEL``; quiet wins over verbose."""
    if quiet:
        return logging.WARNING
    if verbose:
        return logging.DEBUG
    name = (os.getenv(LOGLEVEL_ENV) or "normal").strip().lower()
    return _LOG_LEVELS.get(name, logging.INFO)
