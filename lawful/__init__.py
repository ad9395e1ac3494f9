from .context import CheckConfig, checking_context, current_config
from .decorator import instance, register
from .errors import (
    ArityError,
    CyclicPrerequisiteError,
    InstanceValidationError,
    LawfulError,
)
from .registry import Registration, Registry
from .typeclass import TypeClass
from .validation import All, Failure, Obey, Success

__all__ = [
    "TypeClass",
    "Obey",
    "All",
    "Success",
    "Failure",
    "instance",
    "register",
    "Registry",
    "Registration",
    "CheckConfig",
    "checking_context",
    "current_config",
    "LawfulError",
    "ArityError",
    "CyclicPrerequisiteError",
    "InstanceValidationError",
]
