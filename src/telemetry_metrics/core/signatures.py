"""Callable arity inspection.

Used once per option, at compile time, to classify user functions. Never
called on the per-event path.
"""

import inspect
from collections.abc import Callable
from typing import Any

# Parameters that can be filled positionally
_POSITIONAL_KINDS = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


def positional_arity(fn: Callable[..., Any]) -> int | None:
    """Number of positional arguments a callable must be given.

    Parameters with defaults do not count, so ``lambda md, ms=None: ...`` has
    arity 1. A callable taking ``*args`` and nothing required has arity 1.

    Returns:
        The arity, or None when the signature cannot be inspected (some
        builtins and C extensions)
    """
    try:
        signature = inspect.signature(fn)
    except (TypeError, ValueError):
        return None

    required = 0
    variadic = False
    for parameter in signature.parameters.values():
        if parameter.kind in _POSITIONAL_KINDS and parameter.default is inspect.Parameter.empty:
            required += 1
        elif parameter.kind is inspect.Parameter.VAR_POSITIONAL:
            variadic = True
        elif parameter.kind is inspect.Parameter.KEYWORD_ONLY and parameter.default is inspect.Parameter.empty:
            # Can never be satisfied by a positional call
            return None
    if required == 0 and variadic:
        return 1
    return required
