from enki import TestCase


class SkeletonCase(TestCase):
    def __init__(self) -> None:
        super().__init__()
        self.register(self.test_pass, "Test pass 1")
        self.register(self.test_fail, "Test fail 1")
        self.register(self.test_pass, "Test pass 2")
        self.register(self.test_empty, "Test empty")

    def test_pass(self) -> None:
        self.explicit_pass()

    def test_fail(self) -> None:
        self.explicit_fail()

    def test_empty(self) -> None:
        pass
