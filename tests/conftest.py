import random
from typing import Any

import pytest

from lawful import Obey, TypeClass
from lawful.validation import Commutative


class Num:
    """Well-behaved candidate: integer addition with structural equality."""

    def __init__(self, value: int):
        self.value = value

    @classmethod
    def generate_data(cls, hint: int) -> "Num":
        return cls(random.Random(hint).randint(-1000, 1000))

    @classmethod
    def empty(cls) -> "Num":
        return cls(0)

    def equals(self, other: "Num") -> bool:
        return self.value == other.value

    def add(self, other: "Num") -> "Num":
        return Num(self.value + other.value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value})"


class BrokenEq(Num):
    """Addition is fine, but nothing equals itself."""

    @classmethod
    def generate_data(cls, hint: int) -> "BrokenEq":
        return cls(random.Random(hint).randint(-1000, 1000))

    def equals(self, other: "Num") -> bool:
        return False

    def add(self, other: "Num") -> "BrokenEq":
        return BrokenEq(self.value + other.value)


class Recorder:
    """Candidate that replays a fixed sequence and records every hint."""

    values: list[Any] = []
    hints: list[int] = []

    @classmethod
    def generate_data(cls, hint: int) -> Any:
        cls.hints.append(hint)
        return cls.values[len(cls.hints) - 1]


def make_recorder(values: list[Any]) -> type:
    return type("Recorder", (Recorder,), {"values": list(values), "hints": []})


@pytest.fixture
def num() -> type:
    return Num


@pytest.fixture
def broken_eq() -> type:
    return BrokenEq


@pytest.fixture
def eq_class() -> TypeClass:
    return TypeClass(name="Eq", laws=Obey(lambda x: x.equals(x), name="reflexivity"))


@pytest.fixture
def addable_class(eq_class: TypeClass) -> TypeClass:
    return TypeClass(
        name="Addable",
        extends=[eq_class],
        laws=Commutative("add", "equals"),
    )


@pytest.fixture
def recorder():
    """Factory for candidates that yield the given values in order."""
    return make_recorder
