"""
TypeClass - a named contract made of prerequisite classes and laws.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Iterable

from .errors import CyclicPrerequisiteError
from .lib.introspection import candidate_name
from .validation.core import AllV, Validator, to_validator
from .validation.types import Failure, ValidationResult, fold_conjoin

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class TypeClass:
    """
    A type class defines the behavior that your instances shall have.

    The behavior is asserted with the given laws: a candidate declared to be
    an instance of a type class must pass every law, and every law of every
    class it extends.

    Two type classes are never equal unless they are the same object; the
    name only improves error messages.

    Example:
        eq = TypeClass(name="Eq", laws=Reflexive("equals"))
        monoid = TypeClass(
            name="Monoid",
            extends=[eq],
            laws=All(Associative("append", "equals"), Identity("append", "empty", "equals")),
        )
    """

    name: str = "Unnamed"
    extends: Iterable["TypeClass"] = ()
    laws: Validator = field(default_factory=AllV)

    def __post_init__(self) -> None:
        parents = tuple(self.extends)
        for parent in parents:
            if not isinstance(parent, TypeClass):
                raise TypeError(
                    f"{self.name} can only extend TypeClass, got {type(parent).__name__}"
                )
        object.__setattr__(self, "extends", parents)
        object.__setattr__(self, "laws", to_validator(self.laws))
        object.__setattr__(self, "name", self.name or "Unnamed")

    def validate(self, candidate: Any) -> ValidationResult:
        """
        Check a candidate against every prerequisite and then this class's laws.

        Own laws run even when a prerequisite fails, so one pass reports
        everything that is wrong.

        Raises:
            CyclicPrerequisiteError: If this class reaches itself through `extends`.
        """
        return self._validate(candidate, ())

    def _validate(self, candidate: Any, chain: tuple["TypeClass", ...]) -> ValidationResult:
        for i, seen in enumerate(chain):
            if seen is self:
                raise CyclicPrerequisiteError(chain[i:] + (self,))
        chain = chain + (self,)

        name = candidate_name(candidate)
        logger.debug("Validating %s against %s", name, self.name)

        parents = fold_conjoin(p._validate(candidate, chain) for p in self.extends)
        result = parents.conjoin(self.laws.check(candidate))

        if result.is_failure():
            return Failure.of(f"{name} is not a valid {self.name}").conjoin(result)
        return result

    def ancestors(self) -> tuple["TypeClass", ...]:
        """Every transitive prerequisite, once each, depth-first in declared order."""
        seen: list[TypeClass] = []
        stack = list(reversed(self.extends))
        while stack:
            tc = stack.pop()
            if any(tc is s for s in seen) or tc is self:
                continue
            seen.append(tc)
            stack.extend(reversed(tc.extends))
        return tuple(seen)

    def __repr__(self) -> str:
        parents = ", ".join(p.name for p in self.extends)
        return f"TypeClass(name={self.name!r}, extends=[{parents}])"
