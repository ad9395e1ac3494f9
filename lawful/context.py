"""
Context manager for law-checking configuration (e.g., trial count).
"""

from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any, Iterator

from pydantic import BaseModel, ConfigDict, PositiveInt


class CheckConfig(BaseModel):
    """
    Settings that drive empirical law checks.

    Attributes:
        trials: Number of trials per law, unless the law sets its own.
        first_hint: First hint passed to the candidate's sample generator.
        generator: Name of the candidate attribute that produces samples.
        max_repr_length: Sample reprs longer than this are truncated in messages.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    trials: PositiveInt = 100
    first_hint: int = 0
    generator: str = "generate_data"
    max_repr_length: PositiveInt = 80


# Context variable for the active configuration
_config: ContextVar[CheckConfig] = ContextVar("check_config", default=CheckConfig())


def current_config() -> CheckConfig:
    """Return the configuration active in the current context."""
    return _config.get()


@contextmanager
def checking_context(**overrides: Any) -> Iterator[CheckConfig]:
    """
    Context manager for law-checking configuration.

    Overrides are layered on top of the active configuration and validated
    by pydantic, so `checking_context(trials=0)` raises ValidationError.

    Example:
        from lawful import checking_context, register

        with checking_context(trials=1000):
            register(Monoid, Sum)  # every law runs 1000 trials
    """
    config = CheckConfig.model_validate(
        {**current_config().model_dump(), **overrides}
    )
    token = _config.set(config)
    try:
        yield config
    finally:
        _config.reset(token)
