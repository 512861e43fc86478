"""Tests for ResultAssertions test helper."""

import pytest

from railcmd import Failure, ResultAssertions, Success


class TestAssertSuccess:
    def test_passes_on_success(self):
        assert ResultAssertions.assert_success(Success(42)) == 42

    def test_fails_on_failure_with_clear_message(self):
        with pytest.raises(AssertionError, match="Expected Success but got Failure"):
            ResultAssertions.assert_success(Failure("Name is required"))

    def test_fails_on_non_result(self):
        with pytest.raises(AssertionError, match="non-Result 42"):
            ResultAssertions.assert_success(42)

    def test_custom_message(self):
        with pytest.raises(AssertionError, match="custom context"):
            ResultAssertions.assert_success(Failure("x"), "custom context")


class TestAssertFailure:
    def test_passes_on_failure(self):
        assert ResultAssertions.assert_failure(Failure("missing")) == "missing"

    def test_fails_on_success(self):
        with pytest.raises(AssertionError, match="Expected Failure but got Success"):
            ResultAssertions.assert_failure(Success(42))


class TestAssertValues:
    def test_success_value_match(self):
        ResultAssertions.assert_success_value(Success(42), 42)

    def test_success_value_mismatch(self):
        with pytest.raises(AssertionError, match="Expected success value"):
            ResultAssertions.assert_success_value(Success(42), 99)

    def test_failure_value_match(self):
        ResultAssertions.assert_failure_value(Failure("gone"), "gone")

    def test_failure_value_mismatch(self):
        with pytest.raises(AssertionError, match="Expected failure value"):
            ResultAssertions.assert_failure_value(Failure("gone"), "here")


class TestAssertError:
    def test_error_on_either_variant(self):
        ResultAssertions.assert_error(Success(1, error="warn"), "warn")
        ResultAssertions.assert_error(Failure(1, error="E"), "E")

    def test_error_mismatch(self):
        with pytest.raises(AssertionError, match="Expected error 'E1' but got 'E2'"):
            ResultAssertions.assert_error(Failure(1, error="E2"), "E1")
