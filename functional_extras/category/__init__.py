from .either import Either
from .errors import InvalidStateError, NullArgumentError
from .maybe import Maybe, maybe_map
from .objects import require_non_null
from .validation import Validation

__all__ = [
    "Either",
    "InvalidStateError",
    "Maybe",
    "NullArgumentError",
    "Validation",
    "maybe_map",
    "require_non_null",
]
