"""
Helper functions for running a law against freshly generated samples.
"""

import logging
from itertools import count
from typing import Any, Callable

from ..context import CheckConfig
from ..validation.types import Failure, Success, ValidationResult
from .introspection import candidate_name, short_repr

logger = logging.getLogger(__name__)


def run_trials(
    predicate: Callable[..., Any],
    arity: int,
    law_name: str,
    candidate: Any,
    trials: int,
    config: CheckConfig,
) -> ValidationResult:
    """
    Check `predicate` against `trials` sets of `arity` fresh samples.

    Stops at the first counterexample. A falsy return value, or an exception
    raised by the predicate or the sample generator, counts as one.
    """
    name = candidate_name(candidate)
    generate = getattr(candidate, config.generator, None)
    if arity > 0 and not callable(generate):
        return Failure.of(
            f"Law '{law_name}' cannot run: {name} has no "
            f"{config.generator}(hint) sample generator"
        )

    hints = count(config.first_hint)

    for trial in range(1, trials + 1):
        samples: list[Any] = []
        try:
            for _ in range(arity):
                samples.append(generate(next(hints)))
        except Exception as e:
            return _counterexample(
                law_name, name, trial, trials, samples, config,
                reason=f"sample generator raised {type(e).__name__}: {e}",
            )

        try:
            held = bool(predicate(*samples))
        except Exception as e:
            return _counterexample(
                law_name, name, trial, trials, samples, config,
                reason=f"raised {type(e).__name__}: {e}",
            )

        if not held:
            return _counterexample(
                law_name, name, trial, trials, samples, config, reason="does not hold"
            )

    return Success()


def _counterexample(
    law_name: str,
    name: str,
    trial: int,
    trials: int,
    samples: list[Any],
    config: CheckConfig,
    reason: str,
) -> Failure:
    logger.debug("Counterexample for %s on %s at trial %d", law_name, name, trial)
    message = f"Law '{law_name}' {reason} for {name} (trial {trial} of {trials})"
    if samples:
        inputs = ", ".join(short_repr(s, config.max_repr_length) for s in samples)
        message += f" with inputs: {inputs}"
    return Failure.of(message)
