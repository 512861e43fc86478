"""
Command — the execution engine.

A Command subclass is a reusable operation. `invoke` builds an instance,
dispatches to its entry method and turns whatever happens into a Result:

  entry returns Result              → returned unchanged
  entry returns plain value         → Success(value) if result_inference, else the raw value
  entry calls fail_fast(...)        → the Failure built by fail_fast, traced to its call site
  entry raises anything else        → re-raised, unless unexpected_err is configured

    class CreateWidget(Command, fail_fast="Widget rejected", result_inference=True):
        def call(self, name: str) -> Widget:
            if not name:
                self.fail_fast("name is required")
            return Widget(name)

    CreateWidget.invoke("sprocket")   # → Success(Widget("sprocket"))
    CreateWidget.invoke("")           # → Failure("name is required", error="Widget rejected")

Command.invoke is the ONLY place FailFastError is caught.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, ClassVar, Mapping, NoReturn, Optional, Self

import structlog

from railcmd.callee import Callee
from railcmd.config import CommandConfig, TransactionSpec, normalize_methods
from railcmd.errors import ConfigurationError, FailFastError
from railcmd.result import Failure, Result, Success
from railcmd.tracing import calling_location, frame_at, innermost_frame
from railcmd.transaction import (
    TransactionalResource,
    get_default_resource,
    wrap_transactional,
)

log = structlog.get_logger()

FAIL_FAST_MESSAGE = "Fail Fast Triggered"


class Command(Callee):
    """
    Base class for railway commands.

    Configuration lives on the class and is copied into each subclass when
    the subclass is defined. Options can be given as class keywords or via
    `configure`:

        class Charge(Command, unexpected_err=True):
            ...

        Charge.configure(call_as="execute", failure="Charge failed")
    """

    _command_config: ClassVar[CommandConfig] = CommandConfig()

    def __init_subclass__(cls, **options: Any) -> None:
        super().__init_subclass__()
        cls._command_config = cls._command_config.copy()
        if options:
            cls._command_config.update(**options)

    # ──────────────────────── Configuration store ────────────────────────

    @classmethod
    def configure(cls, **options: Any) -> type[Self]:
        """Set options on this class's configuration. Returns the class for chaining."""
        cls._command_config.update(**options)
        return cls

    @classmethod
    def get_config(cls) -> CommandConfig:
        """The live effective configuration of this class."""
        return cls._command_config

    @classmethod
    def declare_transactional(
        cls,
        methods: str | Iterable[str],
        returnable: bool = True,
        resource: Optional[TransactionalResource] = None,
    ) -> type[Self]:
        """
        Run the named methods inside a transaction scope.

        Falls back to the process default resource when `resource` is None.
        Entries of `methods` that are not identifiers are ignored; at least
        one must remain.
        The wrapper is installed on this class, delegating to the method body
        currently visible on it.
        """
        resource = resource if resource is not None else get_default_resource()
        if resource is None:
            raise ConfigurationError("No transactional resource defined")
        names = normalize_methods(methods)
        missing = sorted(name for name in names if not callable(getattr(cls, name, None)))
        if missing:
            raise ConfigurationError(
                f"Cannot wrap undefined method(s) on {cls.__name__}: {', '.join(missing)}"
            )

        spec = TransactionSpec(methods=names, resource=resource, returnable=returnable)
        cls._command_config.transaction_spec = spec
        for name in names:
            setattr(cls, name, wrap_transactional(getattr(cls, name), spec))
        return cls

    # ──────────────────────── Execution ────────────────────────

    @classmethod
    def invoke(cls, *args: Any, receiver: Optional[Any] = None, **kwargs: Any) -> Any:
        """
        Run the command and classify the outcome.

        Returns a Result, or the raw return value when result_inference is off
        and the entry method did not return a Result. Re-raises unexpected
        exceptions unless unexpected_err is configured.
        """
        config = cls.get_config()
        target = receiver if receiver is not None else cls()
        entry = getattr(target, config.entry_method, None)
        if not callable(entry):
            raise ConfigurationError(
                f"Entry method {config.entry_method!r} is not defined on {type(target).__name__}"
            )

        try:
            outcome = entry(*args, **kwargs)
        except FailFastError as e:
            return cls._handle_fail_fast(e)
        except Exception as e:
            if config.unexpected_err is None or config.unexpected_err is False:
                raise
            return cls._handle_unexpected(e, config.unexpected_err)

        if config.result_inference and not isinstance(outcome, Result):
            return Success(outcome)
        return outcome

    @classmethod
    def _handle_fail_fast(cls, error: FailFastError) -> Result[Any]:
        failure = error.failure_payload
        if not isinstance(failure, Result):
            trace = innermost_frame(error)
            error.source_location = error.source_location or trace
            log.info("command.fail_fast", command=cls.__qualname__, trace=trace, payload=False)
            return Failure(error, trace=trace)

        # the raise site is fail_fast() itself; report the line that called it
        failure.trace = frame_at(error, 1)
        log.info("command.fail_fast", command=cls.__qualname__, trace=failure.trace)
        return failure

    @classmethod
    def _handle_unexpected(cls, error: Exception, classification: Any) -> Result[Any]:
        trace = innermost_frame(error)
        log.warning(
            "command.unexpected_error",
            command=cls.__qualname__,
            error_type=type(error).__name__,
            error=str(error),
            trace=trace,
        )
        annotation = error if classification is True else classification
        return Failure(error, annotation, trace=trace)

    # ──────────────────────── Outcome helpers ────────────────────────

    def success(
        self,
        value: Any = None,
        *,
        error: Any = None,
        metadata: Optional[Mapping[str, Any]] = None,
    ) -> Success[Any]:
        return Success(value, error, metadata)

    def failure(
        self,
        value: Any = None,
        *,
        error: Any = None,
        metadata: Optional[Mapping[str, Any]] = None,
    ) -> Failure[Any]:
        """Build a Failure without unwinding. `error` defaults to the configured `failure`."""
        if error is None:
            error = type(self).get_config().failure
        return Failure(value, error, metadata)

    def fail_fast(
        self,
        value: Any = None,
        *,
        error: Any = None,
        metadata: Optional[Mapping[str, Any]] = None,
    ) -> NoReturn:
        """
        Abort the command immediately.

        The Failure carried by the raised FailFastError is what `invoke`
        returns; its error defaults to the configured `fail_fast`, then `failure`.
        """
        config = type(self).get_config()
        if error is None:
            error = config.fail_fast if config.fail_fast is not None else config.failure
        raise FailFastError(
            FAIL_FAST_MESSAGE,
            failure_payload=Failure(value, error, metadata),
            source_location=calling_location(),
        )
