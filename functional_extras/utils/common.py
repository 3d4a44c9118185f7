"""
Collection of common utility functions
"""

from typing import Any, Callable

import toolz as tz

from .wrappers import curry


@curry
def side_effect[T](func: Callable[[], Any], val: T) -> T:
    """
    Perform side effect by calling `func` and let `val` pass through

    Parameters
    ----------
    func: Callable
        Function to be called, cannot take any arguments
    val: any
        Value to be returned
    """
    return tz.pipe(func(), lambda _: val)
