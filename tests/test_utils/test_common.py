from ..context import utils

side_effect = utils.side_effect


class TestSideEffect:

    # calls the function and returns the value unchanged
    def test_calls_func_and_passes_value(self):
        calls = []
        result = side_effect(lambda: calls.append(1), "value")
        assert result == "value"
        assert calls == [1]

    # curried form waits for the value before calling
    def test_curried(self):
        calls = []
        pass_through = side_effect(lambda: calls.append(1))
        assert calls == []
        assert pass_through(0) == 0
        assert calls == [1]
