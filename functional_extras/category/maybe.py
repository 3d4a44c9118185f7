"""
Optional value container

`Maybe[V]` either holds a value (a "Just") or holds nothing (a "Nothing").
None is never a valid payload: factories that accept nullable input turn
None into Nothing, and `Maybe.just(None)` is an error.
"""

from typing import Any, Callable, Iterable, Iterator

import toolz as tz
from loguru import logger

from .. import constants as c
from ..utils import curry, logger_wraps, side_effect
from .either import Either
from .errors import InvalidStateError
from .objects import require_non_null
from .validation import Validation

# Only the factories below hold this, so `Maybe(...)` cannot be called directly
_FACTORY = object()


class Maybe[V]:
    """
    A value that may be absent

    Instances are immutable; every operation returns a new instance (or
    the receiver, when nothing changes). All Nothing instances are equal
    to each other.

    Examples
    --------
    >>> Maybe.just(2).map(lambda x: x * 10).get_or_else(0)
    20
    >>> Maybe.of_nullable(None).map(lambda x: x * 10).get_or_else(0)
    0
    """

    __slots__ = ("_value", "_is_nothing")

    def __init__(self, value: V | None, is_nothing: bool, _factory: object = None):
        if _factory is not _FACTORY:
            raise TypeError(
                "Maybe cannot be instantiated directly, use Maybe.just or Maybe.nothing"
            )
        object.__setattr__(self, "_value", value)
        object.__setattr__(self, "_is_nothing", is_nothing)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("Maybe is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError("Maybe is immutable")

    @staticmethod
    def just[R](value: R) -> "Maybe[R]":
        """
        Wrap `value`, which must not be None
        """
        require_non_null(value, "value must not be None")
        return Maybe(value, False, _FACTORY)

    @staticmethod
    def nothing() -> "Maybe[Any]":
        return _NOTHING

    @staticmethod
    def of[R](value: R) -> "Maybe[R]":
        return Maybe.just(value)

    @staticmethod
    def empty() -> "Maybe[Any]":
        return Maybe.nothing()

    @staticmethod
    def of_nullable[R](value: R | None) -> "Maybe[R]":
        """
        Just `value`, or Nothing if `value` is None
        """
        return Maybe.nothing() if value is None else Maybe.just(value)

    @staticmethod
    def from_value[R](value: R | None) -> "Maybe[R]":
        return Maybe.of_nullable(value)

    @staticmethod
    def from_maybe[R](maybe: "Maybe[R] | None") -> "Maybe[R]":
        """
        Return `maybe` itself, or Nothing in place of None
        """
        return Maybe.nothing() if maybe is None else maybe

    @staticmethod
    def from_list[R](values: Iterable[R | None] | None) -> "Maybe[R]":
        """
        Just the first element of `values`

        Nothing if `values` is None, empty, or starts with None. Only the
        first element is looked at, so iterators and arrays are accepted.
        """
        if values is None:
            return Maybe.nothing()
        return Maybe.of_nullable(tz.first(tz.concat([values, [None]])))

    @staticmethod
    @logger_wraps()
    def attempt[R](supplier: Callable[[], R]) -> "Maybe[R]":
        """
        Call `supplier`, turning any exception it raises into Nothing

        The exception is logged at DEBUG level and then discarded; use a
        plain call if the cause is needed. `MemoryError` is not caught.
        """
        require_non_null(supplier, "supplier must not be None")
        try:
            return Maybe.of_nullable(supplier())
        except MemoryError:
            raise
        except Exception as e:
            logger.debug(f"Supplier raised {type(e).__name__}: {e}, returning Nothing")
            return Maybe.nothing()

    @staticmethod
    def from_just[R](maybe: "Maybe[R]") -> R:
        """
        Force the value out of a Just

        Raises
        ------
        NullArgumentError
            If `maybe` is None.
        InvalidStateError
            If `maybe` is Nothing.
        """
        require_non_null(maybe, "maybe must not be None")
        if maybe.is_nothing():
            raise InvalidStateError("maybe must not be Nothing")
        return maybe._value  # type: ignore

    def is_just(self) -> bool:
        return not self._is_nothing

    def is_nothing(self) -> bool:
        return self._is_nothing

    def map[R](self, mapper: Callable[[V], R | None]) -> "Maybe[R]":
        """
        Apply `mapper` to the value of a Just

        A mapper returning None gives Nothing. `mapper` is not called on
        Nothing.
        """
        require_non_null(mapper, "mapper must not be None")
        if self._is_nothing:
            return Maybe.nothing()
        return Maybe.of_nullable(mapper(self._value))  # type: ignore

    def chain[R](self, mapper: Callable[[V], "Maybe[R]"]) -> "Maybe[R]":
        """
        Apply `mapper`, which itself returns a Maybe, to the value of a Just

        The result is not nested: a Nothing (or None) from `mapper` gives
        Nothing.
        """
        require_non_null(mapper, "mapper must not be None")
        nested = self.map(mapper)
        return Maybe.from_just(nested) if nested.is_just() else Maybe.nothing()

    def bind[R](self, mapper: Callable[[V], "Maybe[R]"]) -> "Maybe[R]":
        return self.chain(mapper)

    def flat_map[R](self, mapper: Callable[[V], "Maybe[R]"]) -> "Maybe[R]":
        return self.chain(mapper)

    def ap[R](self, other: "Maybe[Callable[[V], R]]") -> "Maybe[R]":
        """
        Apply the function wrapped in `other` to the value of this Maybe

        Nothing unless both are Just.
        """
        require_non_null(other, "other must not be None")
        return other.chain(self.map)

    def alt(self, other: "Maybe[V]") -> "Maybe[V]":
        """
        This Maybe if it is a Just, else `other`
        """
        require_non_null(other, "other must not be None")
        return self if self.is_just() else other

    def coalesce(self, other: "Maybe[V]") -> "Maybe[V]":
        return self.alt(other)

    def checked_map[R](self, mapper: Callable[[V], R | None]) -> "Maybe[R]":
        """
        Same as `map`, but an exception raised by `mapper` gives Nothing

        The exception is logged at DEBUG level and discarded. `MemoryError`
        is not caught.
        """
        require_non_null(mapper, "mapper must not be None")
        try:
            return self.map(mapper)
        except MemoryError:
            raise
        except Exception as e:
            logger.debug(f"Mapper raised {type(e).__name__}: {e}, returning Nothing")
            return Maybe.nothing()

    def filter(self, predicate: Callable[[V], bool]) -> "Maybe[V]":
        require_non_null(predicate, "predicate must not be None")
        return self if self.is_just() and predicate(self._value) else Maybe.nothing()  # type: ignore

    def extend[R](self, mapper: Callable[["Maybe[V]"], R | None]) -> "Maybe[R]":
        """
        Apply `mapper` to this whole Maybe rather than to its value

        `mapper` is only called on a Just.
        """
        require_non_null(mapper, "mapper must not be None")
        return self._duplicate().map(mapper) if self.is_just() else Maybe.nothing()

    def fold_left[R](
        self,
        morphism: Callable[[R, V | None], R],
        initial_value: R,
        *,
        skip_nothing: bool = False,
    ) -> R:
        """
        Combine `initial_value` with the value as `morphism(initial_value, value)`

        `morphism` is called exactly once, also on Nothing, where it
        receives None in place of the value. Pass `skip_nothing=True` to
        get `initial_value` back on Nothing without calling `morphism`.

        Examples
        --------
        >>> Maybe.just(3).fold_left(lambda acc, x: acc + x, 10)
        13
        >>> Maybe.nothing().fold_left(lambda acc, x: acc, 10, skip_nothing=True)
        10
        """
        require_non_null(morphism, "morphism must not be None")
        if skip_nothing and self._is_nothing:
            return initial_value
        return morphism(initial_value, self._value)

    def fold_right[R](
        self,
        morphism: Callable[[V | None, R], R],
        initial_value: R,
        *,
        skip_nothing: bool = False,
    ) -> R:
        """
        Mirror of `fold_left`, calling `morphism(value, initial_value)`
        """
        require_non_null(morphism, "morphism must not be None")
        if skip_nothing and self._is_nothing:
            return initial_value
        return morphism(self._value, initial_value)

    def get_or_else(self, other_value: V) -> V:
        return other_value if self._is_nothing else self._value  # type: ignore

    def get_or_else_get(self, supplier: Callable[[], V]) -> V:
        """
        The value of a Just, else the result of calling `supplier`
        """
        require_non_null(supplier, "supplier must not be None")
        return supplier() if self._is_nothing else self._value  # type: ignore

    def get_or_else_throw(self, error_supplier: Callable[[], BaseException]) -> V:
        """
        The value of a Just, else raise the exception built by `error_supplier`
        """
        require_non_null(error_supplier, "error_supplier must not be None")
        if self._is_nothing:
            raise error_supplier()
        return self._value  # type: ignore

    def if_just(self, consumer: Callable[[V], Any]) -> "Maybe[V]":
        require_non_null(consumer, "consumer must not be None")
        return self if self._is_nothing else side_effect(lambda: consumer(self._value), self)

    def if_nothing(self, runnable: Callable[[], Any]) -> "Maybe[V]":
        require_non_null(runnable, "runnable must not be None")
        return side_effect(runnable, self) if self._is_nothing else self

    def tap(
        self, runnable: Callable[[], Any], consumer: Callable[[V], Any]
    ) -> "Maybe[V]":
        """
        Run `runnable` on Nothing, then `consumer` on a Just, and return self
        """
        require_non_null(runnable, "runnable must not be None")
        require_non_null(consumer, "consumer must not be None")
        return self.if_nothing(runnable).if_just(consumer)

    def recover(self, value: V) -> "Maybe[V]":
        """
        This Maybe if it is a Just, else Just `value`
        """
        require_non_null(value, "value must not be None")
        return self if self.is_just() else Maybe.just(value)

    def to_nullable(self) -> V | None:
        return self._value

    def to_list(self) -> list[V]:
        return [] if self._is_nothing else [self._value]  # type: ignore

    def to_iterable(self) -> Iterator[V]:
        if self.is_just():
            yield self._value  # type: ignore

    def to_either[L](self, left: L | None = None) -> Either[L | None, V]:
        """
        Right of the value, or Left of `left` for Nothing
        """
        return Either.left(left) if self._is_nothing else Either.right(self._value)

    def to_validation[E](self, error: E | None = None) -> Validation[E, V]:
        """
        Success of the value, or a failure for Nothing

        The failure carries `error` if given, otherwise no errors.
        """
        if self.is_just():
            return Validation.success(self._value)
        return Validation.failure() if error is None else Validation.failure(error)

    def _duplicate(self) -> "Maybe[Maybe[V]]":
        return Maybe.just(self)

    def __iter__(self) -> Iterator[V]:
        return self.to_iterable()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Maybe):
            return NotImplemented
        if self._is_nothing or other._is_nothing:
            return self._is_nothing and other._is_nothing
        return self._value == other._value

    def __hash__(self) -> int:
        return c.NOTHING_HASH if self._is_nothing else hash(self._value)

    def __repr__(self) -> str:
        return c.NOTHING_REPR if self._is_nothing else c.JUST_REPR.format(self._value)

    def __reduce__(self):
        return (Maybe.of_nullable, (self._value,))


_NOTHING: Maybe[Any] = Maybe(None, True, _FACTORY)


@curry
def maybe_map[T, R](
    default_value: R, mapper: Callable[[T], R], maybe: Maybe[T] | None
) -> R:
    """
    `mapper` applied to the value of `maybe`, or `default_value`

    `maybe` may be None, which counts as Nothing. Curried, so
    `maybe_map(default_value, mapper)` returns a function of `maybe`.

    Examples
    --------
    >>> maybe_map("none", str, Maybe.just(1))
    '1'
    >>> describe = maybe_map("none", str)
    >>> describe(None)
    'none'
    """
    require_non_null(mapper, "mapper must not be None")
    maybe = Maybe.from_maybe(maybe)
    return mapper(Maybe.from_just(maybe)) if maybe.is_just() else default_value
