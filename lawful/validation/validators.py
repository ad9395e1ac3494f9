"""
Validator factories for lawful validation.

Provides Obey and All, which return ObeyV and AllV instances.
"""

from __future__ import annotations

from typing import Any

from ..lib.introspection import describe_predicate, infer_arity
from .core import AllV, ObeyV, to_validator
from .types import Predicate


def Obey(
    predicate: Predicate,
    name: str | None = None,
    arity: int | None = None,
    trials: int | None = None,
) -> ObeyV:
    """
    Turn a boolean predicate into a law checked on generated samples.

    The predicate's required positional parameters set how many fresh
    samples each trial draws, unless `arity` is given.

    Usage:
        Obey(lambda x: x.equals(x), name="reflexivity")
        Obey(lambda x, y: x.add(y).equals(y.add(x)))
        Obey(has_zero, arity=0, trials=1)
    """
    if not callable(predicate):
        raise TypeError(f"Obey() requires a callable, got {type(predicate).__name__}")

    return ObeyV(
        predicate=predicate,
        arity=infer_arity(predicate) if arity is None else arity,
        name=name or describe_predicate(predicate),
        trials=trials,
    )


def All(*validators: Any) -> AllV:
    """
    Require every law to hold; failures from all of them are reported.

    Usage:
        All()                                # always succeeds
        All(Obey(reflexivity), Obey(symmetry))
        All(lambda x: x.equals(x), Transitive("equals"))
    """
    return AllV(tuple(to_validator(v) for v in validators))
