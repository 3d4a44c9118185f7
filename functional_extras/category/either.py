"""
Two-sided disjoint union, the target of `Maybe.to_either`
"""

from typing import Any, Callable

from .objects import require_non_null


class Either[L, R]:
    """
    Either a left value (conventionally the error side) or a right value

    Instances are created through `Either.left` and `Either.right` and
    cannot be modified afterwards.
    """

    __slots__ = ("_value", "_is_right")

    def __init__(self, value: L | R, is_right: bool):
        object.__setattr__(self, "_value", value)
        object.__setattr__(self, "_is_right", is_right)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    @staticmethod
    def left(value: L) -> "Either[L, Any]":
        return Either(value, False)

    @staticmethod
    def right(value: R) -> "Either[Any, R]":
        return Either(value, True)

    def is_left(self) -> bool:
        return not self._is_right

    def is_right(self) -> bool:
        return self._is_right

    def map[U](self, mapper: Callable[[R], U]) -> "Either[L, U]":
        """
        Apply `mapper` to a right value, leaving a left value untouched
        """
        require_non_null(mapper, "mapper must not be None")
        return Either.right(mapper(self._value)) if self._is_right else self  # type: ignore

    def fold[U](self, on_left: Callable[[L], U], on_right: Callable[[R], U]) -> U:
        require_non_null(on_left, "on_left must not be None")
        require_non_null(on_right, "on_right must not be None")
        return on_right(self._value) if self._is_right else on_left(self._value)  # type: ignore

    def get_or_else(self, default: R) -> R:
        return self._value if self._is_right else default  # type: ignore

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Either):
            return NotImplemented
        return self._is_right == other._is_right and self._value == other._value

    def __hash__(self) -> int:
        return hash((self._is_right, self._value))

    def __repr__(self) -> str:
        return f"{'Right' if self._is_right else 'Left'}({self._value!r})"

    def __reduce__(self):
        return (Either, (self._value, self._is_right))
