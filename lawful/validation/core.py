"""
Core validator classes for lawful validation.

Provides ObeyV and AllV dataclasses with functional composition.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from ..context import current_config
from ..errors import ArityError
from ..lib.introspection import describe_predicate, infer_arity
from ..lib.trial_helpers import run_trials
from .types import Candidate, Predicate, ValidationResult, fold_conjoin

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ObeyV:
    """
    Immutable law node.

    Wraps one predicate over `arity` sample values. The law is checked
    empirically: it must hold on every trial, and the first counterexample
    fails it.
    """

    predicate: Predicate
    arity: int
    name: str
    trials: int | None = None

    def __post_init__(self) -> None:
        if self.arity < 0:
            raise ArityError(f"Arity must be >= 0, got {self.arity}")
        if self.trials is not None and self.trials < 1:
            raise ValueError(f"Trials must be >= 1, got {self.trials}")

    def check(self, candidate: Candidate) -> ValidationResult:
        config = current_config()
        trials = self.trials if self.trials is not None else config.trials
        logger.debug(
            "Checking law %s (arity %d, %d trials)", self.name, self.arity, trials
        )
        return run_trials(
            self.predicate, self.arity, self.name, candidate, trials, config
        )

    def __and__(self, other: Any) -> AllV:
        """
        Combine laws: both must hold.

        Usage:
            Obey(reflexivity) & Obey(symmetry)
        """
        return AllV((self,)) & other

    def __rand__(self, other: Any) -> AllV:
        return AllV((to_validator(other), self))


@dataclass(frozen=True, slots=True)
class AllV:
    """Validator requiring every child to hold; reports every failing child."""

    validators: tuple[ObeyV | AllV, ...] = ()

    def check(self, candidate: Candidate) -> ValidationResult:
        return fold_conjoin(v.check(candidate) for v in self.validators)

    def __and__(self, other: Any) -> AllV:
        other_v = to_validator(other)
        right = other_v.validators if isinstance(other_v, AllV) else (other_v,)
        return AllV(self.validators + right)

    def __rand__(self, other: Any) -> AllV:
        """Support `predicate & All(...)` where the predicate comes first."""
        return AllV((to_validator(other),)) & self

    def __len__(self) -> int:
        return len(self.validators)


Validator = ObeyV | AllV


def to_validator(v: Any) -> ObeyV | AllV:
    """
    Coerce a value to a validator.

    Conversion rules:
        ObeyV | AllV -> pass through
        list | tuple -> AllV with recursive conversion
        Callable -> ObeyV with inferred arity
    """
    if isinstance(v, (ObeyV, AllV)):
        return v

    if isinstance(v, (list, tuple)):
        return AllV(tuple(to_validator(item) for item in v))

    if callable(v):
        return ObeyV(predicate=v, arity=infer_arity(v), name=describe_predicate(v))

    raise TypeError(f"Cannot convert {type(v).__name__} to validator")
