from ..context import utils

curry = utils.curry


class TestCurry:

    # partial application returns a function of the remaining arguments
    def test_partial_application(self):
        @curry
        def add(a, b, c):
            return a + b + c

        assert add(1)(2)(3) == 6
        assert add(1, 2)(3) == 6
        assert add(1, 2, 3) == 6

    # name and docstring of the wrapped function are kept
    def test_keeps_metadata(self):
        @curry
        def add(a, b):
            """Add two numbers"""
            return a + b

        assert add.__name__ == "add"
        assert add.__doc__ == "Add two numbers"
