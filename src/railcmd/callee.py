"""
Callee — the bare "construct and call" convention.

    class Greet(Callee):
        def call(self, name):
            return f"hi {name}"

    Greet.invoke("Ada")   # → "hi Ada"

No configuration, no outcome handling: exceptions propagate untouched.
Command builds its execution engine on top of this.
"""

from __future__ import annotations

from typing import Any, Optional


class Callee:
    """Base for classes invoked through a class-level entry point."""

    @classmethod
    def invoke(cls, *args: Any, receiver: Optional[Any] = None, **kwargs: Any) -> Any:
        target = receiver if receiver is not None else cls()
        return target.call(*args, **kwargs)
