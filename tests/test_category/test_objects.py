import pytest

from ..context import NullArgumentError, category

require_non_null = category.require_non_null


class TestRequireNonNull:

    # returns the argument unchanged
    @pytest.mark.parametrize("value", [0, "", False, [], object()])
    def test_returns_value(self, value):
        assert require_non_null(value, "message") is value

    # None raises with the given message
    def test_none_raises_with_message(self):
        with pytest.raises(NullArgumentError, match="mapper must not be None"):
            require_non_null(None, "mapper must not be None")

    # the error is also a ValueError
    def test_error_is_value_error(self):
        with pytest.raises(ValueError):
            require_non_null(None, "message")
