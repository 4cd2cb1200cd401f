"""Shared fixtures for exporter tests."""

from __future__ import annotations

import re
from collections.abc import Callable

import pytest

from value_exporter import Exporter


@pytest.fixture
def exporter() -> Exporter:
    """Create a default Exporter instance for testing."""
    return Exporter.default()


def _format_to_regex(expected: str) -> re.Pattern[str]:
    """
    Translate an expected-output format into a regex.

    ``%d`` matches an integer and ``%s`` any run of characters on one line.
    """
    parts = re.split(r"(%d|%s)", expected)
    pattern = "".join(
        r"-?\d+" if part == "%d" else r"[^\r\n]+" if part == "%s" else re.escape(part)
        for part in parts
    )
    return re.compile(pattern, re.DOTALL)


@pytest.fixture
def assert_format() -> Callable[[str, str], None]:
    """Assert that output matches a format containing %d / %s placeholders."""

    def _assert(expected: str, actual: str) -> None:
        assert _format_to_regex(expected).fullmatch(actual), (
            f"Output does not match format.\n--- expected ---\n{expected}"
            f"\n--- actual ---\n{actual}"
        )

    return _assert


@pytest.fixture
def multiline_text() -> str:
    """Text mixing every supported line break."""
    return "this\nis\na\nvery\nvery\nvery\nvery\nvery\nvery\rlong\n\rtext"
