"""Tests for the built-in algebraic laws."""

import operator
import random

from lawful import checking_context
from lawful.validation import (
    Associative,
    Commutative,
    Failure,
    Identity,
    Reflexive,
    Success,
    Symmetric,
    Transitive,
)


class Small:
    """Integers drawn from a tiny range, so equal samples are common."""

    def __init__(self, value: int):
        self.value = value

    @classmethod
    def generate_data(cls, hint: int) -> "Small":
        return cls(random.Random(hint).randint(0, 3))

    @classmethod
    def empty(cls) -> "Small":
        return cls(0)

    def equals(self, other: "Small") -> bool:
        return self.value == other.value

    def le(self, other: "Small") -> bool:
        return self.value <= other.value

    def add(self, other: "Small") -> "Small":
        return Small(self.value + other.value)

    def sub(self, other: "Small") -> "Small":
        return Small(self.value - other.value)

    def max(self, other: "Small") -> "Small":
        return self if self.value >= other.value else other

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Small) and self.value == other.value

    def __add__(self, other: "Small") -> "Small":
        return self.add(other)

    def __repr__(self) -> str:
        return f"Small({self.value})"


class Ints:
    @classmethod
    def generate_data(cls, hint: int) -> int:
        return random.Random(hint).randint(-50, 50)


class TestEquivalenceLaws:
    def test_reflexive(self):
        assert Reflexive("equals").check(Small) == Success()
        assert Reflexive().check(Ints) == Success()
        assert isinstance(Reflexive(operator.ne).check(Ints), Failure)

    def test_symmetric(self):
        assert Symmetric("equals").check(Small) == Success()
        assert isinstance(Symmetric("le").check(Small), Failure)

    def test_transitive(self):
        assert Transitive("equals").check(Small) == Success()
        assert Transitive("le").check(Small) == Success()

    def test_transitive_breaks(self):
        def near(x, y):
            return abs(x.value - y.value) <= 1

        with checking_context(trials=1000):
            assert isinstance(Transitive(near).check(Small), Failure)

    def test_default_names(self):
        assert Reflexive().name == "reflexivity"
        assert Symmetric().name == "symmetry"
        assert Transitive().name == "transitivity"
        assert Reflexive(name="refl").name == "refl"


class TestOperationLaws:
    def test_commutative(self):
        assert Commutative("add", "equals").check(Small) == Success()
        assert Commutative(operator.add).check(Ints) == Success()
        assert isinstance(Commutative("sub", "equals").check(Small), Failure)

    def test_associative(self):
        assert Associative("max", "equals").check(Small) == Success()
        assert Associative(operator.mul).check(Ints) == Success()
        assert isinstance(Associative(operator.sub).check(Ints), Failure)

    def test_identity_by_name(self):
        assert Identity("add", "empty", "equals").check(Small) == Success()
        assert Identity("max", "empty", "equals").check(Small) == Success()

    def test_identity_by_callable(self):
        assert Identity(operator.add, lambda: 0).check(Ints) == Success()
        assert isinstance(Identity(operator.mul, lambda: 0).check(Ints), Failure)

    def test_arity(self):
        assert Commutative("add").arity == 2
        assert Associative("add").arity == 3
        assert Identity("add", "empty").arity == 1

    def test_failure_names_law(self):
        result = Commutative("sub", "equals").check(Small)
        assert isinstance(result, Failure)
        assert result.messages[0].startswith("Law 'commutativity' does not hold for Small")
