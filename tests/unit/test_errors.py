"""Tests for the structured error taxonomy."""

from __future__ import annotations

import pytest

from railcmd import (
    BaseError,
    ConfigurationError,
    ErrorKind,
    Failure,
    FailFastError,
    TransactionError,
)


class TestBaseError:
    def test_message_is_prefixed_with_class_name(self) -> None:
        error = BaseError("Operation failed")
        assert str(error) == "[BaseError] Operation failed"
        assert error.message == "Operation failed"

    def test_default_message(self) -> None:
        error = BaseError()
        assert str(error) == f"[BaseError] {BaseError.default_message}"

    def test_carries_failure_payload(self) -> None:
        payload = Failure("Booom!")
        error = BaseError("Operation failed", failure_payload=payload)
        assert error.failure_payload is payload

    def test_payload_and_location_default_to_none(self) -> None:
        error = BaseError()
        assert error.failure_payload is None
        assert error.source_location is None

    def test_error_class(self) -> None:
        assert BaseError().error_class == "BaseError"

    def test_build_prefix(self) -> None:
        assert BaseError("x").build_prefix() == "[BaseError] "


class TestSubclasses:
    @pytest.mark.parametrize(
        ("error_cls", "kind", "default"),
        [
            (ConfigurationError, ErrorKind.CONFIGURATION, "Invalid configurations"),
            (FailFastError, ErrorKind.FAIL_FAST, "Halt Execution"),
            (TransactionError, ErrorKind.TRANSACTION, "Transaction Error has been triggered"),
        ],
    )
    def test_kind_and_default_message(
        self, error_cls: type[BaseError], kind: ErrorKind, default: str
    ) -> None:
        error = error_cls()
        assert issubclass(error_cls, BaseError)
        assert error.kind is kind
        assert str(error) == f"[{error_cls.__name__}] {default}"

    def test_base_kind(self) -> None:
        assert BaseError().kind is ErrorKind.BASE

    def test_errors_are_regular_exceptions(self) -> None:
        with pytest.raises(Exception, match=r"\[TransactionError\] rolled back"):
            raise TransactionError("rolled back")
