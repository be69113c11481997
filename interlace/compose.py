"""Right-to-left function composition."""

from __future__ import annotations

from functools import reduce
from typing import Any, Callable


def _identity(arg: Any) -> Any:
    return arg


def compose(*funcs: Callable[..., Any]) -> Callable[..., Any]:
    """
    Compose functions from right to left.

    ``compose(f, g, h)(*args)`` is ``f(g(h(*args)))``. The rightmost function
    receives the original arguments; every other function must be unary.
    With no functions the result is the identity, and a single function is
    returned as is.

    Example:
        >>> compose(lambda x: x + 1, lambda x: x * 2)(3)
        7
    """
    if not funcs:
        return _identity
    if len(funcs) == 1:
        return funcs[0]

    def _pair(f: Callable[..., Any], g: Callable[..., Any]) -> Callable[..., Any]:
        return lambda *args, **kwargs: f(g(*args, **kwargs))

    return reduce(_pair, funcs)
