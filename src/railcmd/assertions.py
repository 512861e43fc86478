"""
Test assertions for Result values.

Expressive assert helpers that produce clear failure messages in pytest output.

Usage in tests:
    from railcmd.assertions import ResultAssertions

    def test_create_widget():
        result = CreateWidget.invoke("sprocket")
        widget = ResultAssertions.assert_success(result)
        assert widget.name == "sprocket"

    def test_blank_name():
        result = CreateWidget.invoke("")
        ResultAssertions.assert_failure_value(result, "name is required")
        ResultAssertions.assert_error(result, "Widget rejected")
"""

from __future__ import annotations

from typing import Any

from railcmd.result import Result


def _describe(result: Any) -> str:
    return repr(result) if isinstance(result, Result) else f"non-Result {result!r}"


class ResultAssertions:
    """Expressive test assertions for Result values."""

    @staticmethod
    def assert_success(result: Any, message: str = "") -> Any:
        """
        Assert the outcome is a Success and return its value.

            value = ResultAssertions.assert_success(result)
        """
        context = f" — {message}" if message else ""
        assert isinstance(result, Result) and result.is_success(), (
            f"Expected Success but got {_describe(result)}{context}"
        )
        return result.value

    @staticmethod
    def assert_failure(result: Any, message: str = "") -> Any:
        """Assert the outcome is a Failure and return its value."""
        context = f" — {message}" if message else ""
        assert isinstance(result, Result) and result.is_failure(), (
            f"Expected Failure but got {_describe(result)}{context}"
        )
        return result.value

    @staticmethod
    def assert_success_value(result: Any, expected_value: Any) -> None:
        value = ResultAssertions.assert_success(result)
        assert value == expected_value, (
            f"Expected success value {expected_value!r} but got {value!r}"
        )

    @staticmethod
    def assert_failure_value(result: Any, expected_value: Any) -> None:
        value = ResultAssertions.assert_failure(result)
        assert value == expected_value, (
            f"Expected failure value {expected_value!r} but got {value!r}"
        )

    @staticmethod
    def assert_error(result: Any, expected_error: Any) -> None:
        """Assert the auxiliary error of the outcome, whatever its variant."""
        assert isinstance(result, Result), f"Expected a Result but got {_describe(result)}"
        assert result.error() == expected_error, (
            f"Expected error {expected_error!r} but got {result.error()!r}"
        )
