"""
Error-accumulating validation result, the target of `Maybe.to_validation`
"""

from typing import Any, Callable

from .objects import require_non_null


class Validation[E, V]:
    """
    A successful value, or a failure carrying every error collected so far

    Failures combine by concatenating their errors, so several independent
    checks can be run and reported together.
    """

    __slots__ = ("_value", "_errors")

    def __init__(self, value: V | None, errors: tuple[E, ...] | None):
        object.__setattr__(self, "_value", value)
        object.__setattr__(self, "_errors", errors)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    @staticmethod
    def success(value: V) -> "Validation[Any, V]":
        return Validation(value, None)

    @staticmethod
    def failure(*errors: E) -> "Validation[E, Any]":
        return Validation(None, tuple(errors))

    def is_success(self) -> bool:
        return self._errors is None

    def is_failure(self) -> bool:
        return self._errors is not None

    @property
    def errors(self) -> tuple[E, ...]:
        """
        Errors of a failure, empty for a success
        """
        return self._errors or ()

    def map[U](self, mapper: Callable[[V], U]) -> "Validation[E, U]":
        require_non_null(mapper, "mapper must not be None")
        return Validation.success(mapper(self._value)) if self.is_success() else self  # type: ignore

    def combine(self, other: "Validation[E, V]") -> "Validation[E, V]":
        """
        Merge two validations

        Two failures give a failure with the errors of both, in order. A
        single failure wins over a success. Two successes keep `other`.
        """
        require_non_null(other, "other must not be None")
        if self.is_failure() and other.is_failure():
            return Validation.failure(*self.errors, *other.errors)
        return self if self.is_failure() else other

    def get_or_else(self, default: V) -> V:
        return self._value if self.is_success() else default  # type: ignore

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Validation):
            return NotImplemented
        return self._errors == other._errors and self._value == other._value

    def __hash__(self) -> int:
        return hash((self._value, self._errors))

    def __repr__(self) -> str:
        if self.is_success():
            return f"Success({self._value!r})"
        return f"Failure({', '.join(map(repr, self.errors))})"

    def __reduce__(self):
        return (Validation, (self._value, self._errors))
