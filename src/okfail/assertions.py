"""
Test assertions for Result values.

Expressive assert helpers with clear failure messages, for use in any
pytest suite that exercises Result-returning code.

Usage in tests:
    from okfail import ResultAssertions

    def test_parse_age():
        value = ResultAssertions.assert_success(parse_age("30"))
        assert value == 30

    def test_parse_age_rejects_text():
        error = ResultAssertions.assert_failure(parse_age("thirty"))
        assert "not a number" in error
"""

from __future__ import annotations

from typing import Any, TypeVar

from okfail.result import Result

S = TypeVar("S")
E = TypeVar("E")


class ResultAssertions:
    """Expressive test assertions for Result values."""

    @staticmethod
    def assert_success(result: Result[S, E], message: str = "") -> S:
        """
        Assert the Result is a Success and return its value.

            value = ResultAssertions.assert_success(result)
        """
        context = f" — {message}" if message else ""
        assert result.is_success(), (
            f"Expected Success but got Failure({result.unwrap_failure()!r}){context}"
        )
        return result.unwrap()

    @staticmethod
    def assert_failure(result: Result[S, E], message: str = "") -> E:
        """
        Assert the Result is a Failure and return its payload.

            error = ResultAssertions.assert_failure(result)
        """
        context = f" — {message}" if message else ""
        assert result.is_failure(), (
            f"Expected Failure but got Success({result.unwrap()!r}){context}"
        )
        return result.unwrap_failure()

    @staticmethod
    def assert_success_value(result: Result[S, E], expected_value: Any) -> None:
        """Assert the Result is a Success with the specific value."""
        value = ResultAssertions.assert_success(result)
        assert value == expected_value, (
            f"Expected success value {expected_value!r} but got {value!r}"
        )

    @staticmethod
    def assert_failure_value(result: Result[S, E], expected_error: Any) -> None:
        """Assert the Result is a Failure with the specific payload."""
        error = ResultAssertions.assert_failure(result)
        assert error == expected_error, (
            f"Expected failure payload {expected_error!r} but got {error!r}"
        )
