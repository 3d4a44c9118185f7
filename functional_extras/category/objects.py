"""
Argument assertions shared by the category types
"""

from .errors import NullArgumentError


def require_non_null[T](value: T | None, message: str) -> T:
    """
    Return `value` unchanged, raising `NullArgumentError(message)` if it is None

    Parameters
    ----------
    value : T | None
        Argument to check.
    message : str
        Message carried by the error when `value` is None.

    Examples
    --------
    >>> require_non_null(0, "value must not be None")
    0
    """
    if value is None:
        raise NullArgumentError(message)
    return value
