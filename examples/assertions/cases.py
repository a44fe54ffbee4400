import time

from enki import (
    TestCase,
    assert_no_exception,
    assert_sequence_equals,
    assert_sequence_in_range,
    assert_true,
)


class AssertionsCase(TestCase):
    def __init__(self) -> None:
        super().__init__()
        self.register(self.test_assert_true, "assert_true()")
        self.register(self.test_assert_no_exception, "assert_no_exception()")
        self.register(self.test_sequence_equals_pass, "assert_sequence_equals() pass")
        self.register(self.test_sequence_equals_fail, "assert_sequence_equals() fail")
        self.register(self.test_sequence_in_range_pass, "assert_sequence_in_range() pass")
        self.register(self.test_sequence_in_range_fail, "assert_sequence_in_range() fail")
        self.register(self.test_wait, "Timing test, 666ms")

    def test_assert_true(self) -> None:
        assert_true(True == (not False))  # noqa: E712

    def test_assert_no_exception(self) -> None:
        def boom() -> None:
            raise RuntimeError("boom")

        assert_no_exception(boom)

    def test_sequence_equals_pass(self) -> None:
        assert_sequence_equals([1, 2, 3, 4, 5], [1, 2, 3, 4, 5])

    def test_sequence_equals_fail(self) -> None:
        assert_sequence_equals([1, 2, 3, 4, 5], [1, 2, 3, 4, 6])

    def test_sequence_in_range_pass(self) -> None:
        assert_sequence_in_range("abcdefghijklmnopqrstuvwxyz", "a", "z")

    def test_sequence_in_range_fail(self) -> None:
        assert_sequence_in_range("abcdefghijklmnopqrstuvwxy1", "a", "z")

    def test_wait(self) -> None:
        time.sleep(0.666)
