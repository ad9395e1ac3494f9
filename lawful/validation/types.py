"""
Type definitions for lawful validation.

Provides the ValidationResult sum type (Success/Failure) and type aliases.
Results form a monoid under `conjoin`, with Success as the identity.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Union


@dataclass(frozen=True, slots=True)
class Success:
    """Outcome of a check that found nothing wrong."""

    def is_success(self) -> bool:
        return True

    def is_failure(self) -> bool:
        return False

    def conjoin(self, other: ValidationResult) -> ValidationResult:
        return other

    def __and__(self, other: ValidationResult) -> ValidationResult:
        return self.conjoin(other)


@dataclass(frozen=True, slots=True)
class Failure:
    """Outcome of a failed check, carrying messages in discovery order."""

    messages: tuple[str, ...]

    def __post_init__(self) -> None:
        if isinstance(self.messages, str):
            raise TypeError("Failure takes a sequence of messages; use Failure.of(message)")
        if not self.messages:
            raise ValueError("Failure requires at least one message")
        # Accept lists for convenience, store as tuple
        object.__setattr__(self, "messages", tuple(self.messages))

    @classmethod
    def of(cls, message: str | Failure) -> Failure:
        """Build a failure from one message, or promote an existing one."""
        if isinstance(message, Failure):
            return message
        return cls((message,))

    def is_success(self) -> bool:
        return False

    def is_failure(self) -> bool:
        return True

    def conjoin(self, other: ValidationResult) -> ValidationResult:
        if isinstance(other, Failure):
            return Failure(self.messages + other.messages)
        return self

    def __and__(self, other: ValidationResult) -> ValidationResult:
        return self.conjoin(other)


ValidationResult = Union[Success, Failure]


def fold_conjoin(results: Iterable[ValidationResult]) -> ValidationResult:
    """Conjoin every result in order, starting from Success."""
    acc: ValidationResult = Success()
    for result in results:
        acc = acc.conjoin(result)
    return acc


# Type aliases
Predicate = Callable[..., Any]
Candidate = type
