from ..context import Validation


class TestValidation:

    # success and failure report their state
    def test_states(self):
        assert Validation.success(1).is_success()
        assert Validation.failure("e").is_failure()
        assert Validation.failure().is_failure()

    # errors are empty for a success
    def test_errors(self):
        assert Validation.success(1).errors == ()
        assert Validation.failure("a", "b").errors == ("a", "b")

    # two failures accumulate their errors in order
    def test_combine_failures(self):
        result = Validation.failure("a").combine(Validation.failure("b", "c"))
        assert result == Validation.failure("a", "b", "c")

    # a failure wins over a success on either side
    def test_combine_failure_and_success(self):
        failure = Validation.failure("a")
        assert failure.combine(Validation.success(1)) == failure
        assert Validation.success(1).combine(failure) == failure

    # two successes keep the right-hand value
    def test_combine_successes(self):
        assert Validation.success(1).combine(Validation.success(2)) == Validation.success(2)

    # map only touches a success
    def test_map(self):
        assert Validation.success(2).map(str) == Validation.success("2")
        assert Validation.failure("e").map(str) == Validation.failure("e")

    # get_or_else and repr
    def test_get_or_else_and_repr(self):
        assert Validation.failure("e").get_or_else(0) == 0
        assert Validation.success(3).get_or_else(0) == 3
        assert repr(Validation.failure("a", "b")) == "Failure('a', 'b')"
        assert repr(Validation.success(1)) == "Success(1)"
