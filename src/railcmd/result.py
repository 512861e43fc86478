"""
Result — the tagged outcome returned by every command invocation.

A Result is either Success(value) or Failure(value). Both variants carry:

  value     — the payload (success value or failure value), read-only
  error     — auxiliary error/context, independent of value, on either variant
  metadata  — free-form mapping of extra context
  trace     — "<file>:<line>:in <function>" of the code that produced the outcome

    ┌───────────┐   flat_map    ┌───────────┐   flat_map    ┌──────────┐
    │ validate  │──Success──────│  enrich   │──Success──────│ persist  │──→ Result
    └─────┬─────┘               └─────┬─────┘               └─────┬────┘
          │ Failure                   │ Failure                   │ Failure
          └───────────────────────────┴───────────────────────────┴──→ Result

Unlike a plain Either, a Failure payload is not restricted to an error type:
it is whatever the command wants to report (a message, a dict, an exception).
How `value` and `error` pair up is the caller's convention.
"""

from __future__ import annotations

from enum import Enum, unique
from typing import Any, Callable, Generic, Mapping, Optional, TypeVar

T = TypeVar("T")
U = TypeVar("U")
R = TypeVar("R")


@unique
class Variant(Enum):
    SUCCESS = "success"
    FAILURE = "failure"


class Result(Generic[T]):
    """
    Base of the two outcome variants. Not instantiable on its own.

    Usage:
        >>> result = Success(42).map(lambda x: x * 2)
        >>> result.success_value()
        84

        >>> Failure("bad input").map(lambda x: x * 2).is_failure()
        True
    """

    __slots__ = ("_value", "_error", "_metadata", "trace")
    __match_args__ = ("value",)

    _variant: Variant

    def __init__(
        self,
        value: T = None,
        error: Any = None,
        metadata: Optional[Mapping[str, Any]] = None,
        *,
        trace: Optional[str] = None,
    ) -> None:
        if type(self) is Result:
            raise TypeError("Result is abstract, use Success or Failure")
        self._value = value
        self._error = error
        self._metadata = dict(metadata) if metadata else {}
        self.trace = trace

    # ──────────────────────── Introspection ────────────────────────

    @property
    def value(self) -> T:
        return self._value

    @property
    def metadata(self) -> dict[str, Any]:
        return self._metadata

    def is_success(self) -> bool:
        return self._variant is Variant.SUCCESS

    def is_failure(self) -> bool:
        return self._variant is Variant.FAILURE

    def success_value(self) -> Optional[T]:
        """The payload if this is a Success, otherwise None."""
        return self._value if self.is_success() else None

    def failure_value(self) -> Optional[T]:
        """The payload if this is a Failure, otherwise None."""
        return self._value if self.is_failure() else None

    def error(self) -> Any:
        """Auxiliary error attached to the outcome, regardless of variant."""
        return self._error

    def variant_tag(self) -> Variant:
        return self._variant

    def result(self) -> Result[T]:
        return self

    # ──────────────────────── Transformations ────────────────────────

    def either(self, on_success: Callable[[T], R], on_failure: Callable[[T], R]) -> R:
        """
        Apply one of two functions to the payload depending on the variant.

            result.either(
                on_success=lambda widget: f"Created {widget.name}",
                on_failure=lambda reason: f"Error: {reason}",
            )
        """
        match self:
            case Success(v):
                return on_success(v)
            case Failure(v):
                return on_failure(v)
        raise TypeError("unreachable")  # pragma: no cover

    def map(self, mapper: Callable[[T], U]) -> Result[U]:
        """Transform the success payload, keeping error and metadata. Failures pass through."""
        match self:
            case Success(v):
                return Success(mapper(v), self._error, self._metadata)
        return self  # type: ignore[return-value]

    def map_failure(self, mapper: Callable[[T], U]) -> Result[Any]:
        """Transform the failure payload. Successes pass through."""
        match self:
            case Failure(v):
                return Failure(mapper(v), self._error, self._metadata, trace=self.trace)
        return self

    def flat_map(self, mapper: Callable[[T], Result[U]]) -> Result[U]:
        """
        Chain a Result-returning function. Short-circuits on failure.

            Success(5).flat_map(lambda x: Success(x) if x > 0 else Failure("negative"))
        """
        match self:
            case Success(v):
                return mapper(v)
        return self  # type: ignore[return-value]

    # ──────────────────────── Side Effects ────────────────────────

    def peek(self, action: Callable[[T], Any]) -> Result[T]:
        match self:
            case Success(v):
                action(v)
        return self

    def peek_failure(self, action: Callable[[T], Any]) -> Result[T]:
        match self:
            case Failure(v):
                action(v)
        return self

    # ──────────────────────── Recovery ────────────────────────

    def recover(self, recovery_fn: Callable[[T], U]) -> Result[Any]:
        """Turn a Failure into a Success computed from the failure payload."""
        match self:
            case Failure(v):
                return Success(recovery_fn(v), metadata=self._metadata)
        return self

    def get_or_else(self, default: T) -> T:
        match self:
            case Success(v):
                return v
            case _:
                return default

    # ──────────────────────── Dunder methods ────────────────────────

    def __bool__(self) -> bool:
        """Allow truthiness check: `if result: ...` succeeds only on Success."""
        return self.is_success()

    def __repr__(self) -> str:
        parts = [repr(self._value)]
        if self._error is not None:
            parts.append(f"error={self._error!r}")
        if self._metadata:
            parts.append(f"metadata={self._metadata!r}")
        return f"{type(self).__name__}({', '.join(parts)})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Result):
            return NotImplemented
        return (
            self._variant is other._variant
            and self._value == other._value
            and self._error == other._error
        )

    __hash__ = None  # type: ignore[assignment]


class Success(Result[T]):
    """The success track."""

    __slots__ = ()
    _variant = Variant.SUCCESS


class Failure(Result[T]):
    """The failure track."""

    __slots__ = ()
    _variant = Variant.FAILURE
