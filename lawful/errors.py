"""
Exceptions raised at the edges of lawful.

Law violations inside the engine are data (Failure), never exceptions.
These are raised only for configuration mistakes and at registration.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Sequence

if TYPE_CHECKING:
    from .typeclass import TypeClass
    from .validation.types import Failure


class LawfulError(Exception):
    """Base class for lawful errors."""


class ArityError(LawfulError, TypeError):
    """A law predicate's arity cannot be determined or is invalid."""


class CyclicPrerequisiteError(LawfulError, ValueError):
    """A type class reaches itself through its prerequisites."""

    def __init__(self, chain: Sequence[TypeClass]):
        self.chain = tuple(chain)
        names = " -> ".join(tc.name for tc in self.chain)
        super().__init__(f"Cyclic prerequisites: {names}")


class InstanceValidationError(LawfulError):
    """A candidate was registered for a type class whose laws it breaks."""

    def __init__(self, candidate: Any, typeclass: TypeClass, result: Failure):
        self.candidate = candidate
        self.typeclass = typeclass
        self.result = result
        super().__init__("\n".join(result.messages))

    @property
    def messages(self) -> tuple[str, ...]:
        return self.result.messages
