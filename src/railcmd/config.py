"""
Command configuration — the per-class option record consumed by the engine.

Each Command subclass owns one CommandConfig. It is populated through
`Command.configure(...)` (or class keywords) and copied by value into every
subclass at definition time, so a subclass can override options without
touching its ancestors:

    class Base(Command, fail_fast="Base failed"):
        ...

    class Child(Base, result_inference=True):   # inherits fail_fast, adds inference
        ...
"""

from __future__ import annotations

from collections.abc import Iterable
from copy import deepcopy
from dataclasses import dataclass, field, fields, replace
from typing import TYPE_CHECKING, Any

from railcmd.errors import ConfigurationError

if TYPE_CHECKING:
    from railcmd.transaction import TransactionalResource

DEFAULT_ENTRY_METHOD = "call"
INVALID_METHODS_MESSAGE = "Invalid types. Accepts set of identifiers"


@dataclass(frozen=True, slots=True)
class TransactionSpec:
    """Which methods run inside a transaction, and against which resource."""

    methods: frozenset[str]
    resource: TransactionalResource = field(repr=False)
    returnable: bool = True


@dataclass(slots=True)
class CommandConfig:
    """
    Effective configuration of a command class.

    result_inference  — wrap plain return values as Success
    call_as           — entry method name (None means "call")
    failure           — default error attached by `failure()`
    fail_fast         — default error attached by `fail_fast()`, falls back to `failure`
    unexpected_err    — None/False re-raises, True returns Failure(err, error=err),
                        anything else returns Failure(err, error=<that value>)
    transaction_spec  — set by `declare_transactional`, never through `configure`
    """

    result_inference: bool = False
    call_as: str | None = None
    failure: Any = None
    fail_fast: Any = None
    unexpected_err: Any = None
    transaction_spec: TransactionSpec | None = None

    @classmethod
    def option_names(cls) -> frozenset[str]:
        """Options accepted by `update`."""
        return frozenset(f.name for f in fields(cls)) - {"transaction_spec"}

    @property
    def entry_method(self) -> str:
        return self.call_as or DEFAULT_ENTRY_METHOD

    def update(self, **options: Any) -> CommandConfig:
        """Assign options in place. Unknown names are rejected before anything is written."""
        unknown = sorted(set(options) - self.option_names())
        if unknown:
            raise ConfigurationError(f"Unknown command option: {', '.join(unknown)}")
        call_as = options.get("call_as")
        if call_as is not None and not _is_identifier(call_as):
            raise ConfigurationError(f"call_as must be a method name, got {call_as!r}")
        for name, value in options.items():
            setattr(self, name, value)
        return self

    def copy(self) -> CommandConfig:
        """
        Snapshot for a subclass.

        Option values are deep-copied so nested error specs are never shared.
        TransactionSpec is frozen and holds the live resource, so it is shared.
        """
        options = {name: deepcopy(getattr(self, name)) for name in self.option_names()}
        return replace(self, **options)


def normalize_methods(methods: str | Iterable[Any]) -> frozenset[str]:
    """
    Validate a transactional method declaration.

    Accepts a single name or an iterable of names and keeps the entries that
    are identifiers. At least one must be.
    """
    if isinstance(methods, str):
        methods = (methods,)
    try:
        names = frozenset(name for name in methods if _is_identifier(name))
    except TypeError as e:
        raise ConfigurationError(INVALID_METHODS_MESSAGE) from e
    if not names:
        raise ConfigurationError(INVALID_METHODS_MESSAGE)
    return names


def _is_identifier(name: Any) -> bool:
    return isinstance(name, str) and name.isidentifier()
