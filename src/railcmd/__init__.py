"""
railcmd — Railway-oriented command objects for Python.

Commands return a tagged outcome (Success or Failure) instead of using
exceptions for control flow. Fail fast from anywhere in a command body,
configure defaults per class, and wrap methods in a transaction that rolls
back whenever a Failure comes out.

    from railcmd import Command

    class Divide(Command, result_inference=True, unexpected_err=True):
        def call(self, a: int, b: int) -> float:
            if b == 0:
                self.fail_fast("division by zero")
            return a / b

    Divide.invoke(6, 3)   # → Success(2.0)
    Divide.invoke(1, 0)   # → Failure('division by zero')
"""

from railcmd.result import Result, Success, Failure, Variant
from railcmd.errors import (
    BaseError,
    ConfigurationError,
    ErrorKind,
    FailFastError,
    TransactionError,
)
from railcmd.config import CommandConfig, TransactionSpec
from railcmd.callee import Callee
from railcmd.command import Command
from railcmd.transaction import (
    TransactionalResource,
    clear_default_resource,
    get_default_resource,
    set_default_resource,
)
from railcmd.assertions import ResultAssertions

__all__ = [
    "Result",
    "Success",
    "Failure",
    "Variant",
    "BaseError",
    "ConfigurationError",
    "ErrorKind",
    "FailFastError",
    "TransactionError",
    "CommandConfig",
    "TransactionSpec",
    "Callee",
    "Command",
    "TransactionalResource",
    "clear_default_resource",
    "get_default_resource",
    "set_default_resource",
    "ResultAssertions",
]

__version__ = "0.1.0"
