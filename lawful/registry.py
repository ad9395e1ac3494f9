"""
Registry - remembers which candidates were accepted for which type classes.
"""

from dataclasses import dataclass
from itertools import count
from typing import Any, Callable, Iterator, TypeVar

from .decorator import register
from .typeclass import TypeClass

_C = TypeVar("_C")


@dataclass(frozen=True)
class Registration:
    """One accepted (candidate, type class) pair."""

    id: int
    candidate: Any
    typeclass: TypeClass


class Registry:
    """
    Record of accepted instances.

    Ids come from a counter owned by this registry, so separate registries
    number independently.

    Usage:
        registry = Registry()

        @registry.instance(Monoid)
        class Sum: ...

        registry.implements(Sum, Eq)   # True if Monoid extends Eq
    """

    def __init__(self) -> None:
        self._ids = count()
        self._registrations: list[Registration] = []

    def register(self, typeclass: TypeClass, candidate: _C, **config: Any) -> _C:
        """Validate like `lawful.register` and record the candidate on success."""
        register(typeclass, candidate, **config)
        if self._find(candidate, typeclass) is None:
            self._registrations.append(
                Registration(next(self._ids), candidate, typeclass)
            )
        return candidate

    def instance(self, *typeclasses: TypeClass, **config: Any) -> Callable[[_C], _C]:
        """Decorator form of `register` for one or more type classes."""
        if not typeclasses:
            raise TypeError("instance() requires at least one TypeClass")

        def decorator(candidate: _C) -> _C:
            for typeclass in typeclasses:
                self.register(typeclass, candidate, **config)
            return candidate

        return decorator

    def implements(self, candidate: Any, typeclass: TypeClass) -> bool:
        """True if `candidate` was accepted for `typeclass` or a class extending it."""
        for reg in self._registrations:
            if reg.candidate is not candidate:
                continue
            if reg.typeclass is typeclass:
                return True
            if any(a is typeclass for a in reg.typeclass.ancestors()):
                return True
        return False

    def instances_of(self, typeclass: TypeClass) -> list[Any]:
        """Candidates registered directly for `typeclass`, in registration order."""
        return [r.candidate for r in self._registrations if r.typeclass is typeclass]

    def registration_id(self, candidate: Any, typeclass: TypeClass) -> int | None:
        reg = self._find(candidate, typeclass)
        return reg.id if reg is not None else None

    def _find(self, candidate: Any, typeclass: TypeClass) -> Registration | None:
        for reg in self._registrations:
            if reg.candidate is candidate and reg.typeclass is typeclass:
                return reg
        return None

    def __iter__(self) -> Iterator[Registration]:
        return iter(self._registrations)

    def __len__(self) -> int:
        return len(self._registrations)
