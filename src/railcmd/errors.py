"""
Structured errors — the signalling channel of the command runtime.

Four kinds, all rooted at BaseError:

  BaseError           — generic structured error
  ConfigurationError  — malformed command setup, raised at declaration time
  FailFastError       — intentional short-circuit, caught only by Command.invoke
  TransactionError    — rollback signal, caught only by the transactional wrapper

Every error carries the in-flight Failure (if any) as `failure_payload`, so the
outcome survives the unwind and can be handed back to the caller as a Result.

    >>> str(ConfigurationError())
    '[ConfigurationError] Invalid configurations'
"""

from __future__ import annotations

from enum import Enum, unique
from typing import Any, Optional


@unique
class ErrorKind(Enum):
    """Tag identifying which structured error variant was raised."""

    BASE = "BASE"
    CONFIGURATION = "CONFIGURATION"
    FAIL_FAST = "FAIL_FAST"
    TRANSACTION = "TRANSACTION"


class BaseError(Exception):
    """
    Root of the railcmd error taxonomy.

    The rendered message is prefixed with the class name, e.g.
    `[TransactionError] Transaction rolled back on Failure result`.
    The unprefixed text is kept in `message`.
    """

    kind: ErrorKind = ErrorKind.BASE
    default_message: str = "Oooops! Something went wrong. Please check the logs."

    def __init__(
        self,
        message: Optional[str] = None,
        *,
        failure_payload: Any = None,
        source_location: Optional[str] = None,
    ) -> None:
        self.message = message or self.default_message
        self.failure_payload = failure_payload
        self.source_location = source_location
        super().__init__(f"{self.build_prefix()}{self.message}")

    @property
    def error_class(self) -> str:
        return type(self).__name__

    def build_prefix(self) -> str:
        return f"[{self.error_class}] "


class ConfigurationError(BaseError):
    """Invalid command configuration (bad transactional spec, missing resource, unknown option)."""

    kind = ErrorKind.CONFIGURATION
    default_message = "Invalid configurations"


class FailFastError(BaseError):
    """Unwinds a command body up to the nearest Command.invoke boundary."""

    kind = ErrorKind.FAIL_FAST
    default_message = "Halt Execution"


class TransactionError(BaseError):
    """Aborts a transactional scope so the resource rolls back."""

    kind = ErrorKind.TRANSACTION
    default_message = "Transaction Error has been triggered"
