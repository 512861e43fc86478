"""
Transactional wrapper — run a command method atomically against an external resource.

The resource is anything satisfying TransactionalResource: `begin_scope()`
returns a context manager that commits on normal exit and rolls back when an
exception leaves it. The wrapper translates the Result protocol into that
contract:

  body returns Success          → scope exits normally → COMMIT
  body returns Failure          → TransactionError raised in scope → ROLLBACK
  body returns a plain value    → ROLLBACK too, when the spec is `returnable`
  resource raises native error  → ROLLBACK, returned as Failure
  anything else raises          → ROLLBACK, re-raised to Command.invoke

TransactionError never leaves this module: it is caught just outside the
scope and turned into a Failure.
"""

from __future__ import annotations

import functools
from contextlib import AbstractContextManager
from typing import Any, Callable, Optional, Protocol, runtime_checkable

import structlog

from railcmd.config import TransactionSpec
from railcmd.errors import TransactionError
from railcmd.result import Failure, Result
from railcmd.tracing import definition_location, frame_running, innermost_frame

log = structlog.get_logger()

RETURNABLE_MESSAGE = (
    "This configuration requires an explicit Result return from the transactional boundary"
)
ROLLBACK_MESSAGE = "Transaction rolled back on Failure result"

_ORIGINAL_ATTR = "__railcmd_original__"


@runtime_checkable
class TransactionalResource(Protocol):
    """
    Port: a store that can open an atomic scope.

    `error_types` lists the resource's own exception classes; errors of
    those types raised inside a scope are reported as Failure instead of
    propagating.
    """

    @property
    def error_types(self) -> tuple[type[BaseException], ...]: ...

    def begin_scope(self) -> AbstractContextManager[Any]: ...


# ──────────────────────── Default resource ────────────────────────

_default_resource: Optional[TransactionalResource] = None


def set_default_resource(resource: TransactionalResource) -> None:
    """Register the resource used by `declare_transactional` when none is passed."""
    global _default_resource
    _default_resource = resource


def get_default_resource() -> Optional[TransactionalResource]:
    return _default_resource


def clear_default_resource() -> None:
    global _default_resource
    _default_resource = None


# ──────────────────────── Wrapper ────────────────────────


def original_of(method: Callable[..., Any]) -> Callable[..., Any]:
    """Unwrap a previously installed transactional wrapper, if any."""
    return getattr(method, _ORIGINAL_ATTR, method)


def wrap_transactional(
    method: Callable[..., Any],
    spec: TransactionSpec,
) -> Callable[..., Any]:
    """Return `method` wrapped in a transaction scope on `spec.resource`."""
    original = original_of(method)
    resource = spec.resource

    @functools.wraps(original)
    def wrapper(self: Any, *args: Any, **kwargs: Any) -> Any:
        try:
            with resource.begin_scope():
                outcome = original(self, *args, **kwargs)
                _abort_unless_committable(outcome, spec.returnable)
        except TransactionError as e:
            log.info(
                "transaction.rolled_back",
                method=original.__qualname__,
                reason=e.message,
            )
            return _failure_from_transaction_error(e, definition_location(original))
        except resource.error_types as e:
            log.warning(
                "transaction.resource_error",
                method=original.__qualname__,
                error=str(e),
            )
            trace = frame_running(e, original) or innermost_frame(e)
            return Failure(e, str(e), trace=trace)

        log.debug("transaction.committed", method=original.__qualname__)
        return outcome

    setattr(wrapper, _ORIGINAL_ATTR, original)
    return wrapper


def _abort_unless_committable(outcome: Any, returnable: bool) -> None:
    """Raise TransactionError inside the scope for outcomes that must not commit."""
    if not isinstance(outcome, Result):
        if returnable:
            raise TransactionError(RETURNABLE_MESSAGE, failure_payload=Failure(outcome))
        return
    if outcome.is_failure():
        raise TransactionError(ROLLBACK_MESSAGE, failure_payload=outcome)


def _failure_from_transaction_error(
    error: TransactionError, trace: Optional[str]
) -> Failure[Any]:
    """Rollback outcome, traced to the wrapped method rather than this module."""
    payload = error.failure_payload
    if isinstance(payload, Result):
        return Failure(
            payload.value,
            error.message,
            payload.metadata,
            trace=trace,
        )
    return Failure(payload, error.message, trace=trace)
