import pytest

from field_explorer.expressions import SympyCompiler


class CountingCompiler:
    """Wraps SympyCompiler and counts compile and evaluate calls."""

    def __init__(self):
        self.inner = SympyCompiler()
        self.compiles = 0
        self.evaluations = 0

    def compile(self, text, variables=("x", "y")):
        self.compiles += 1
        compiled = self.inner.compile(text, variables)
        outer = self

        class _Counted:
            def evaluate(self, bindings):
                outer.evaluations += 1
                return compiled.evaluate(bindings)

        return _Counted()


@pytest.fixture
def counting_compiler():
    return CountingCompiler()
