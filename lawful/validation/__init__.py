"""
Lawful Validation - composable, empirically checked algebraic laws.

Usage:
    from lawful.validation import All, Obey, Commutative, Success, Failure

    laws = All(
        Obey(lambda x: x.equals(x), name="reflexivity"),
        Commutative("add", "equals"),
    )
    result = laws.check(Sum)   # Success() or Failure((message, ...))
"""

from .core import AllV, ObeyV, Validator, to_validator
from .laws import Associative, Commutative, Identity, Reflexive, Symmetric, Transitive
from .types import Failure, Success, ValidationResult, fold_conjoin
from .validators import All, Obey

__all__ = [
    # Result types
    "Success",
    "Failure",
    "ValidationResult",
    "fold_conjoin",
    # Core
    "ObeyV",
    "AllV",
    "Validator",
    "to_validator",
    # Validators
    "Obey",
    "All",
    # Laws
    "Reflexive",
    "Symmetric",
    "Transitive",
    "Commutative",
    "Associative",
    "Identity",
]
