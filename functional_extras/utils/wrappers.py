"""
Wrappers for functions
"""

from functools import wraps
from typing import Callable

from toolz import curry as _curry


def curry(func: Callable) -> Callable:
    """
    Allow `func` to be called with fewer arguments than it takes.

    Calling with a partial argument list returns a function of the
    remaining arguments. Unlike calling `toolz.curry` directly, the
    name and docstring of `func` are kept on the returned function.

    Examples
    --------
    >>> @curry
    ... def add(a, b):
    ...     return a + b
    >>> add(1)(2)
    3
    """

    @wraps(func)
    def curried(*args, **kwargs) -> Callable:
        return _curry(func)(*args, **kwargs)  # type: ignore

    return curried
