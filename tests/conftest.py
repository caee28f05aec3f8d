import pytest

from securepassgen.entropy import EntropySource
from securepassgen.exceptions import EntropySourceFailure

SEED = bytes(range(32))


class ScriptedSource:
    """Hands out a fixed list of byte values, then fails."""

    def __init__(self, values):
        self.values = list(values)
        self.draws = 0

    def next_byte(self):
        if self.draws >= len(self.values):
            raise EntropySourceFailure("scripted source exhausted")
        value = self.values[self.draws]
        self.draws += 1
        return value


class FailingSource:
    """Real seeded stream that breaks after ``fail_after`` byte draws."""

    def __init__(self, fail_after, seed=SEED):
        self.inner = EntropySource(seed)
        self.fail_after = fail_after
        self.draws = 0

    def next_byte(self):
        if self.draws >= self.fail_after:
            raise EntropySourceFailure("injected failure")
        self.draws += 1
        return self.inner.next_byte()


@pytest.fixture
def seeded_source():
    return EntropySource(SEED)
