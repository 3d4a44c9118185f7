"""
Errors raised on misuse of the category types
"""


class NullArgumentError(ValueError):
    """
    A required argument was None
    """


class InvalidStateError(ValueError):
    """
    A value was forced out of a Maybe that holds nothing
    """
