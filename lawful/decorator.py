"""
The @instance decorator and register() for declaring type class instances.
"""

import logging
from typing import Any, Callable, TypeVar

from .context import checking_context
from .errors import InstanceValidationError
from .lib.introspection import candidate_name
from .typeclass import TypeClass
from .validation.types import Failure

logger = logging.getLogger(__name__)

_C = TypeVar("_C")


def register(typeclass: TypeClass, candidate: _C, **config: Any) -> _C:
    """
    Declare `candidate` an instance of `typeclass`, checking its laws.

    Keyword arguments override the active CheckConfig for this check only
    (e.g. `trials=500`).

    Returns:
        The candidate, unchanged.

    Raises:
        InstanceValidationError: If any law or prerequisite fails. The error
            message lists every failure, one per line.
    """
    with checking_context(**config):
        result = typeclass.validate(candidate)

    name = candidate_name(candidate)
    if isinstance(result, Failure):
        logger.info(
            "%s rejected as %s (%d messages)",
            name, typeclass.name, len(result.messages),
        )
        raise InstanceValidationError(candidate, typeclass, result)

    logger.info("%s registered as %s", name, typeclass.name)
    return candidate


def instance(*typeclasses: TypeClass, **config: Any) -> Callable[[_C], _C]:
    """
    Decorator that declares a class an instance of one or more type classes.

    The class is checked once, at decoration time, and returned unchanged:

        @instance(Eq, Monoid)
        class Sum:
            ...

        @instance(Monoid, trials=1000)
        class Product:
            ...

    Args:
        typeclasses: Type classes to check, in order. The first failure raises.
        config: CheckConfig overrides applied while checking.
    """
    if not typeclasses:
        raise TypeError("instance() requires at least one TypeClass")

    def decorator(candidate: _C) -> _C:
        for typeclass in typeclasses:
            register(typeclass, candidate, **config)
        return candidate

    return decorator
