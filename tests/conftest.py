import pytest

from blockdrop import EngineConfig, GameEngine


class ScriptedRandom:
    """Random source returning a fixed sequence of shapes (last one repeats)."""

    def __init__(self, *kinds):
        self.kinds = list(kinds)
        self.calls = 0

    def choice(self, seq):
        kind = self.kinds[min(self.calls, len(self.kinds) - 1)]
        self.calls += 1
        return kind


@pytest.fixture
def make_engine():
    def factory(*kinds, **config):
        return GameEngine(EngineConfig(**config), rng=ScriptedRandom(*kinds))

    return factory
