"""
Built-in algebraic laws for lawful validation.

Each factory returns an ObeyV. Operations may be given as callables or as
method names, which are looked up on the first operand:

    Commutative("add", "equals")   # x.add(y).equals(y.add(x))
    Commutative(operator.add)      # x + y == y + x
"""

from __future__ import annotations

import operator
from typing import Any, Callable

from .core import ObeyV
from .validators import Obey

Binary = Callable[[Any, Any], Any] | str


def _binary(op: Binary) -> Callable[[Any, Any], Any]:
    if isinstance(op, str):

        def call(x: Any, y: Any, attr: str = op) -> Any:
            return getattr(x, attr)(y)

        return call
    return op


def Reflexive(eq: Binary = operator.eq, name: str = "reflexivity") -> ObeyV:
    """x == x."""
    eq_ = _binary(eq)
    return Obey(lambda x: eq_(x, x), name=name)


def Symmetric(eq: Binary = operator.eq, name: str = "symmetry") -> ObeyV:
    """x == y exactly when y == x."""
    eq_ = _binary(eq)
    return Obey(lambda x, y: bool(eq_(x, y)) == bool(eq_(y, x)), name=name)


def Transitive(eq: Binary = operator.eq, name: str = "transitivity") -> ObeyV:
    """x == y and y == z imply x == z."""
    eq_ = _binary(eq)

    def transitive(x: Any, y: Any, z: Any) -> bool:
        return not (eq_(x, y) and eq_(y, z)) or bool(eq_(x, z))

    return Obey(transitive, name=name)


def Commutative(
    op: Binary, eq: Binary = operator.eq, name: str = "commutativity"
) -> ObeyV:
    """op(x, y) == op(y, x)."""
    op_, eq_ = _binary(op), _binary(eq)
    return Obey(lambda x, y: eq_(op_(x, y), op_(y, x)), name=name)


def Associative(
    op: Binary, eq: Binary = operator.eq, name: str = "associativity"
) -> ObeyV:
    """op(op(x, y), z) == op(x, op(y, z))."""
    op_, eq_ = _binary(op), _binary(eq)
    return Obey(
        lambda x, y, z: eq_(op_(op_(x, y), z), op_(x, op_(y, z))),
        name=name,
    )


def Identity(
    op: Binary,
    empty: Callable[[], Any] | str,
    eq: Binary = operator.eq,
    name: str = "identity",
) -> ObeyV:
    """
    op(empty, x) == x == op(x, empty).

    `empty` is a zero-argument callable, or the name of a class-level
    factory on the sample's type (e.g. "empty" for `Sum.empty()`).
    """
    op_, eq_ = _binary(op), _binary(eq)

    def identity(x: Any) -> bool:
        e = getattr(type(x), empty)() if isinstance(empty, str) else empty()
        return bool(eq_(op_(e, x), x)) and bool(eq_(op_(x, e), x))

    return Obey(identity, name=name)
