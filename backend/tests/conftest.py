import pytest

from app.simulation.engine import simulate


class FixedRNG:
    """Stand-in generator returning queued values in order."""

    def __init__(self, *values: float):
        self._values = list(values)
        self.calls = 0

    def random(self) -> float:
        self.calls += 1
        return self._values.pop(0)


@pytest.fixture(scope="session")
def legacy_cli():
    """Traced legacy run on the 'cli' seed, shared across the session."""
    return simulate(False, seed="cli", trace=True)


@pytest.fixture(scope="session")
def sentient_cli():
    """Traced sentient run on the 'cli' seed, shared across the session."""
    return simulate(True, seed="cli", trace=True)


@pytest.fixture
def fixed_rng():
    return FixedRNG
