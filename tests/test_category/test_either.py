import pytest

from ..context import Either, NullArgumentError


class TestEither:

    # left and right report their side
    def test_sides(self):
        assert Either.left("e").is_left()
        assert not Either.left("e").is_right()
        assert Either.right(1).is_right()

    # map only touches the right side
    def test_map(self):
        assert Either.right(1).map(lambda x: x + 1) == Either.right(2)
        assert Either.left("e").map(lambda x: x + 1) == Either.left("e")

    # fold picks the function for the side
    def test_fold(self):
        assert Either.left("e").fold(len, str) == 1
        assert Either.right(5).fold(len, str) == "5"

    # get_or_else returns the right value or the default
    def test_get_or_else(self):
        assert Either.right(1).get_or_else(0) == 1
        assert Either.left("e").get_or_else(0) == 0

    # a left never equals a right holding the same value
    def test_equality(self):
        assert Either.left(1) != Either.right(1)
        assert hash(Either.right(1)) == hash(Either.right(1))
        assert repr(Either.left("e")) == "Left('e')"

    # instances are immutable
    def test_immutable(self):
        with pytest.raises(AttributeError):
            Either.right(1)._value = 2  # type: ignore

    # mapper must not be None
    def test_none_mapper(self):
        with pytest.raises(NullArgumentError):
            Either.right(1).map(None)  # type: ignore
