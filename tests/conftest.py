"""Project-level pytest configuration hooks."""

import os
from typing import Any

import pytest
from click.testing import CliRunner
from dotenv import load_dotenv

from demo_math.config import INT_BITS_ENV, LOGLEVEL_ENV


# Load environment variables from .env early in collection
load_dotenv()

# Snapshot of the settings at conftest load time, restored after each test
_ORIGINAL_ENV = {name: os.environ.get(name) for name in (INT_BITS_ENV, LOGLEVEL_ENV)}


@pytest.fixture(autouse=True)
def preserve_demo_math_env():
    """Restore DEMO_MATH_* variables after each test to prevent test pollution.

    Tests start from the defaults unless they set a variable themselves.
    """
    os.environ.pop(INT_BITS_ENV, None)
    os.environ.pop(LOGLEVEL_ENV, None)
    yield
    for name, value in _ORIGINAL_ENV.items():
        if value is not None:
            os.environ[name] = value
        elif name in os.environ:
            del os.environ[name]


def pytest_addoption(parser: pytest.Parser) -> None:
    """Expose the ``--run-all`` flag expected by our tooling."""

    parser.addoption(
        "--run-all",
        action="store_true",
        default=False,
        help="Run the full suite including the wide property grids.",
    )


def pytest_configure(config: pytest.Config) -> None:
    """Mirror ``--run-all`` into ``DEMO_MATH_RUN_ALL_TESTS``."""

    run_all: Any = config.getoption("--run-all")
    if run_all:
        os.environ["DEMO_MATH_RUN_ALL_TESTS"] = "1"
    else:
        os.environ.setdefault("DEMO_MATH_RUN_ALL_TESTS", "0")


@pytest.fixture
def runner():
    """Fixture to provide a CliRunner for testing Click commands."""
    return CliRunner()
