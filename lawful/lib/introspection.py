"""
Helper functions for inspecting law predicates and candidates.
"""

import ast
import inspect
from typing import Any, Callable

from ..errors import ArityError

_POSITIONAL = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


def infer_arity(predicate: Callable[..., Any]) -> int:
    """
    Count the sample values a predicate consumes.

    Only required positional parameters count; parameters with defaults
    and keyword-only parameters are left to the predicate.

    Raises:
        ArityError: If the predicate takes *args, or has no inspectable signature.
    """
    try:
        signature = inspect.signature(predicate)
    except (TypeError, ValueError) as e:
        raise ArityError(
            f"Cannot infer arity of {predicate!r}; pass arity= explicitly"
        ) from e

    arity = 0
    for param in signature.parameters.values():
        if param.kind == inspect.Parameter.VAR_POSITIONAL:
            raise ArityError(
                f"Cannot infer arity of variadic {describe_predicate(predicate)}; "
                "pass arity= explicitly"
            )
        if param.kind in _POSITIONAL and param.default is inspect.Parameter.empty:
            arity += 1
    return arity


def describe_predicate(predicate: Callable[..., Any]) -> str:
    """Name a predicate for diagnostics, using source text for lambdas."""
    name = getattr(predicate, "__name__", None)
    if name and name != "<lambda>":
        return name
    if name == "<lambda>":
        return _lambda_source(predicate) or _lambda_location(predicate)
    return name or repr(predicate)


def _lambda_location(predicate: Callable[..., Any]) -> str:
    code = getattr(predicate, "__code__", None)
    if code is None:
        return "<lambda>"
    return f"<lambda>@{code.co_filename}:{code.co_firstlineno}"


def _lambda_source(predicate: Callable[..., Any]) -> str | None:
    """
    Source text of the lambda that compiled to `predicate`.

    Lambdas starting on the code's first line are candidates. Instruction
    positions (3.11+) pick the narrowest one enclosing most of the body; otherwise
    parameter names must single one out. Returns None when ambiguous.
    """
    code = getattr(predicate, "__code__", None)
    if code is None:
        return None
    try:
        lines, _ = inspect.findsource(predicate)
        source = "".join(lines)
        tree = ast.parse(source)
    except (OSError, TypeError, SyntaxError, ValueError):
        return None

    candidates = [
        node
        for node in ast.walk(tree)
        if isinstance(node, ast.Lambda) and node.lineno == code.co_firstlineno
    ]

    positions = _body_positions(code)
    if positions:
        # Most enclosed positions wins; nested lambdas tie, so narrowest wins
        scored = [(-_enclosed(n, positions), _span(n), n) for n in candidates]
        scored = [s for s in scored if s[0] < 0]
        scored.sort(key=lambda s: s[:2])
        candidates = [s[2] for s in scored[:1]]
    else:
        params = code.co_varnames[: code.co_argcount + code.co_kwonlyargcount]
        candidates = [n for n in candidates if _param_names(n) == params]

    if len(candidates) != 1:
        return None
    segment = ast.get_source_segment(source, candidates[0])
    return " ".join(segment.split()) if segment else None


def _body_positions(code: Any) -> list[tuple[int, int]]:
    if not hasattr(code, "co_positions"):
        return []
    return [
        (line, col)
        for line, _end_line, col, _end_col in code.co_positions()
        if line is not None and col is not None
    ]


def _enclosed(node: ast.Lambda, positions: list[tuple[int, int]]) -> int:
    start = (node.lineno, node.col_offset)
    end = (node.end_lineno, node.end_col_offset)
    return sum(1 for pos in positions if start <= pos <= end)


def _span(node: ast.Lambda) -> tuple[int, int]:
    return (node.end_lineno - node.lineno, node.end_col_offset - node.col_offset)


def _param_names(node: ast.Lambda) -> tuple[str, ...]:
    args = node.args
    return tuple(a.arg for a in args.posonlyargs + args.args + args.kwonlyargs)


def candidate_name(candidate: Any) -> str:
    """Display name of a candidate type."""
    return getattr(candidate, "__name__", None) or repr(candidate)


def short_repr(value: Any, limit: int) -> str:
    """repr() that never raises and is cut to `limit` characters."""
    try:
        text = repr(value)
    except Exception as e:
        text = f"<unrepresentable {type(value).__name__}: {e}>"
    if len(text) > limit:
        return text[: max(limit - 3, 0)] + "..."
    return text
